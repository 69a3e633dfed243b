"""
Text syntax for formulas.

    p, q1, p'          variables
    bot, top, ⊥, ⊤     constants
    ~A, !A, ¬A         negation        (binds tightest)
    A & B, A ∧ B       conjunction     (left-associative)
    A | B, A ∨ B       disjunction     (left-associative)
    A -> B, A → B      implication     (right-associative, binds loosest)

Everything pretty_string() prints parses back to the same formula, except
variables named bot or top: those names are reserved for the constants.
"""

import re

from .formula import Formula, Var, Not, And, Or, Implies, Bot, Top


class FormulaSyntaxError(ValueError):
    pass


TOKEN_RE = re.compile(r"\s*(->|[()~!¬&∧|∨→⊥⊤]|[A-Za-z][A-Za-z0-9_']*)")

NOT_TOKENS = {"~", "!", "¬"}
AND_TOKENS = {"&", "∧"}
OR_TOKENS = {"|", "∨"}
IMPLIES_TOKENS = {"->", "→"}
BOT_TOKENS = {"bot", "⊥"}
TOP_TOKENS = {"top", "⊤"}


def tokenize(text: str) -> list:
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        m = TOKEN_RE.match(text, pos)
        if m is None:
            rest = text[pos:]
            bad = pos + len(rest) - len(rest.lstrip())
            raise FormulaSyntaxError(
                f"Invalid character {text[bad]!r} at position {bad}"
            )
        tokens.append(m.group(1))
        pos = m.end()
    return tokens


def parse_formula(text: str) -> Formula:
    tokens = tokenize(text)
    if not tokens:
        raise FormulaSyntaxError("Empty formula")

    def peek(i):
        return tokens[i] if i < len(tokens) else None

    def parse_implication(i):
        left, i = parse_disjunction(i)
        if peek(i) in IMPLIES_TOKENS:
            right, i = parse_implication(i + 1)
            return Implies(left, right), i
        return left, i

    def parse_disjunction(i):
        left, i = parse_conjunction(i)
        while peek(i) in OR_TOKENS:
            right, i = parse_conjunction(i + 1)
            left = Or(left, right)
        return left, i

    def parse_conjunction(i):
        left, i = parse_negation(i)
        while peek(i) in AND_TOKENS:
            right, i = parse_negation(i + 1)
            left = And(left, right)
        return left, i

    def parse_negation(i):
        if peek(i) in NOT_TOKENS:
            arg, i = parse_negation(i + 1)
            return Not(arg), i
        return parse_atom(i)

    def parse_atom(i):
        tok = peek(i)
        if tok is None:
            raise FormulaSyntaxError("Unexpected end of formula")
        if tok == "(":
            inner, i = parse_implication(i + 1)
            if peek(i) != ")":
                raise FormulaSyntaxError("Missing closing parenthesis")
            return inner, i + 1
        if tok in BOT_TOKENS:
            return Bot(), i + 1
        if tok in TOP_TOKENS:
            return Top(), i + 1
        if tok[0].isalpha():
            return Var(tok), i + 1
        raise FormulaSyntaxError(f"Unexpected token {tok!r}")

    formula, i = parse_implication(0)
    if i != len(tokens):
        raise FormulaSyntaxError(f"Unexpected token {tokens[i]!r} after formula")
    return formula
