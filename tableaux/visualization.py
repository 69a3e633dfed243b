"""
Plain-text reporting for tableaus and proof sessions.
"""

from .core.formula import pretty_string
from .core.tableau import Tableau
from .core.session import ProofSession


def format_tableau(tableau: Tableau, unicode: bool = True) -> str:
    """
    Indented outline of the tableau. Each formula carries its index;
    fully applied formulas are marked with a check, closed nodes with ×.
    """
    lines = []

    def walk(node, path, indent):
        label = path or "root"
        status = " ×" if node.is_closed else ""
        lines.append(f"{indent}[{label}]{status}")
        for i, f in enumerate(node.formulas):
            mark = "✓" if tableau.is_formula_fully_applied((path, i)) else " "
            lines.append(f"{indent}  {mark} {i}: {pretty_string(f, unicode)}")
        if node.children is not None:
            walk(node.left, path + "L", indent + "    ")
            walk(node.right, path + "R", indent + "    ")

    walk(tableau, "", "")
    return "\n".join(lines)


def print_tableau(tableau: Tableau):
    print(f"\n{'='*60}")
    print(format_tableau(tableau))
    open_count = len(tableau.open_leaves())
    print(f"{'='*60}")
    if tableau.is_closed:
        print("  Closed: every branch is contradictory.")
    else:
        print(f"  Open branches: {open_count}")


def print_history(session: ProofSession):
    """Print the steps taken in a proof session."""
    print(f"\n{'='*60}")
    print("Proof history:")
    print(f"{'='*60}")
    if not session.history:
        print("  (nothing yet)")
    for entry in session.history:
        closed = " [closed]" if entry["closed"] else ""
        print(f"  Step {entry['step']}: {entry['action']} {entry['detail']}{closed}")


def export_dot(tableau: Tableau, path="tableau.dot"):
    """Export the tableau as a DOT file for Graphviz."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("digraph tableau {\n")
        f.write("  node [shape=box, style=rounded];\n")
        nodes = [("", tableau)]
        while nodes:
            node_path, node = nodes.pop()
            name = node_path or "root"
            label = "\\n".join(pretty_string(x) for x in node.formulas).replace('"', '\\"')
            color = "lightgray" if node.is_closed else "lightblue"
            f.write(f'  "{name}" [label="{label}", fillcolor={color}, style=filled];\n')
            if node.children is not None:
                for marker, child in zip("LR", node.children):
                    f.write(f'  "{name}" -> "{node_path + marker}";\n')
                    nodes.append((node_path + marker, child))
        f.write("}\n")
    print(f"Graph exported to {path}")
