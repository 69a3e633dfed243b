"""
Propositional formulas and the tableau expansion rules.

Formulas are immutable trees built from seven shapes:

    Var("p")            atomic proposition
    Not(a)              negation
    And(a, b)           conjunction
    Or(a, b)            disjunction
    Implies(a, b)       implication
    Bot(), Top()        falsum / verum

Equality is structural: two formulas built independently with the same
shape compare equal and hash the same.

Reduction follows Smullyan's unifying notation. A conjunctive (alpha)
result extends the current branch; a disjunctive (beta) result splits it.
Literals -- Var, Bot, Top and Not(Var) -- do not reduce.
"""

from dataclasses import dataclass

from .errors import NotReducibleError


class Formula:
    """Common base for every formula shape."""

    __slots__ = ()

    def __str__(self):
        return pretty_string(self)


@dataclass(frozen=True)
class Var(Formula):
    name: str


@dataclass(frozen=True)
class Not(Formula):
    arg: Formula


@dataclass(frozen=True)
class And(Formula):
    left: Formula
    right: Formula


@dataclass(frozen=True)
class Or(Formula):
    left: Formula
    right: Formula


@dataclass(frozen=True)
class Implies(Formula):
    left: Formula
    right: Formula


@dataclass(frozen=True)
class Bot(Formula):
    pass


@dataclass(frozen=True)
class Top(Formula):
    pass


BINARY = (And, Or, Implies)


# ── Constructors ─────────────────────────────────────────────────────────────

def v(name: str) -> Var:
    return Var(name)


def neg(arg: Formula) -> Not:
    return Not(arg)


def conj(left: Formula, right: Formula) -> And:
    return And(left, right)


def disj(left: Formula, right: Formula) -> Or:
    return Or(left, right)


def implies(left: Formula, right: Formula) -> Implies:
    return Implies(left, right)


def bot() -> Bot:
    return Bot()


def top() -> Top:
    return Top()


# ── Structure ────────────────────────────────────────────────────────────────

def eq_formula(f1: Formula, f2: Formula) -> bool:
    """Structural equality. Identity plays no part."""
    return f1 == f2


def variables(f: Formula) -> set:
    """Names of all variables occurring in f."""
    if isinstance(f, Var):
        return {f.name}
    if isinstance(f, Not):
        return variables(f.arg)
    if isinstance(f, BINARY):
        return variables(f.left) | variables(f.right)
    return set()


def depth(f: Formula) -> int:
    """Connective nesting depth. Atoms and constants have depth 0."""
    if isinstance(f, Not):
        return 1 + depth(f.arg)
    if isinstance(f, BINARY):
        return 1 + max(depth(f.left), depth(f.right))
    return 0


def evaluate(f: Formula, assignment: dict) -> bool:
    """Classical truth value of f. Raises KeyError for an unassigned variable."""
    if isinstance(f, Var):
        return bool(assignment[f.name])
    if isinstance(f, Bot):
        return False
    if isinstance(f, Top):
        return True
    if isinstance(f, Not):
        return not evaluate(f.arg, assignment)
    if isinstance(f, And):
        return evaluate(f.left, assignment) and evaluate(f.right, assignment)
    if isinstance(f, Or):
        return evaluate(f.left, assignment) or evaluate(f.right, assignment)
    if isinstance(f, Implies):
        return (not evaluate(f.left, assignment)) or evaluate(f.right, assignment)
    raise TypeError(f"not a formula: {f!r}")


# ── Tableau rules ────────────────────────────────────────────────────────────

CONJUNCTIVE = "conjunctive"
DISJUNCTIVE = "disjunctive"


@dataclass(frozen=True)
class Reduction:
    """
    Result of expanding one formula.

    kind:      CONJUNCTIVE (all formulas hold on the same branch) or
               DISJUNCTIVE (one new branch per formula)
    formulas:  the expansion, in order
    """
    kind: str
    formulas: tuple

    @property
    def is_conjunctive(self) -> bool:
        return self.kind == CONJUNCTIVE

    @property
    def is_disjunctive(self) -> bool:
        return self.kind == DISJUNCTIVE


def reducible(f: Formula) -> bool:
    """False for literals (Var, Bot, Top, Not(Var)), True for everything else."""
    if isinstance(f, (Var, Bot, Top)):
        return False
    if isinstance(f, Not):
        return not isinstance(f.arg, Var)
    return True


def reduce(f: Formula) -> Reduction:
    """
    Apply the one tableau rule matching the shape of f.

        A & B      alpha  A, B
        A | B      beta   A | B
        A -> B     beta   ~A | B
        ~~A        alpha  A
        ~(A & B)   beta   ~A | ~B
        ~(A | B)   alpha  ~A, ~B
        ~(A -> B)  alpha  A, ~B
        ~bot       alpha  top
        ~top       alpha  bot

    Raises NotReducibleError on a literal.
    """
    if isinstance(f, And):
        return Reduction(CONJUNCTIVE, (f.left, f.right))
    if isinstance(f, Or):
        return Reduction(DISJUNCTIVE, (f.left, f.right))
    if isinstance(f, Implies):
        return Reduction(DISJUNCTIVE, (Not(f.left), f.right))
    if isinstance(f, Not):
        a = f.arg
        if isinstance(a, Not):
            return Reduction(CONJUNCTIVE, (a.arg,))
        if isinstance(a, And):
            return Reduction(DISJUNCTIVE, (Not(a.left), Not(a.right)))
        if isinstance(a, Or):
            return Reduction(CONJUNCTIVE, (Not(a.left), Not(a.right)))
        if isinstance(a, Implies):
            return Reduction(CONJUNCTIVE, (a.left, Not(a.right)))
        if isinstance(a, Bot):
            return Reduction(CONJUNCTIVE, (Top(),))
        if isinstance(a, Top):
            return Reduction(CONJUNCTIVE, (Bot(),))
    raise NotReducibleError(f"formula is not reducible: {f}")


def is_contradiction_pair(f1: Formula, f2: Formula) -> bool:
    """Is one formula exactly the negation of the other?"""
    return ((isinstance(f2, Not) and f2.arg == f1) or
            (isinstance(f1, Not) and f1.arg == f2))


# ── Printing ─────────────────────────────────────────────────────────────────

UNICODE_SYMBOLS = {
    "not": "¬", "and": "∧", "or": "∨", "implies": "→",
    "bot": "⊥", "top": "⊤",
}

LATEX_SYMBOLS = {
    "not": "\\neg ", "and": "\\land", "or": "\\lor", "implies": "\\implies",
    "bot": "\\bot", "top": "\\top",
}


def _wrap(s: str, paren: bool) -> str:
    return f"({s})" if paren else s


def pretty_string(f: Formula, unicode: bool = True) -> str:
    """
    Render f with the fewest parentheses that keep it unambiguous.

    unicode=True gives "¬p ∧ q → r"; unicode=False gives LaTeX source.
    Implication is right-associative; ∧ and ∨ group to the left and
    always bracket a binary right operand.
    """
    sym = UNICODE_SYMBOLS if unicode else LATEX_SYMBOLS

    def render(g):
        if isinstance(g, Var):
            return g.name
        if isinstance(g, Bot):
            return sym["bot"]
        if isinstance(g, Top):
            return sym["top"]
        if isinstance(g, Not):
            inner = render(g.arg)
            if isinstance(g.arg, BINARY):
                return f"{sym['not'].strip()}({inner})"
            return f"{sym['not']}{inner}"
        left, right = render(g.left), render(g.right)
        if isinstance(g, Implies):
            return (f"{_wrap(left, isinstance(g.left, Implies))} "
                    f"{sym['implies']} {right}")
        if isinstance(g, And):
            op = sym["and"]
            paren_left = isinstance(g.left, (Or, Implies))
        else:
            op = sym["or"]
            paren_left = isinstance(g.left, (And, Implies))
        paren_right = isinstance(g.right, BINARY)
        return f"{_wrap(left, paren_left)} {op} {_wrap(right, paren_right)}"

    return render(f)
