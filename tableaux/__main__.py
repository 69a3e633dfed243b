"""
CLI entry point. Run as: python -m tableaux --formula "<formula>"
"""

import argparse
import random
import sys

from .core.parser import parse_formula
from .core.session import start_proof
from .inference.solver import is_tautology, countermodel
from .inference.sampling import random_tautology
from .visualization import print_tableau, print_history, export_dot


def main(argv=None):
    parser = argparse.ArgumentParser(description="Semantic tableaux for propositional logic")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--formula", type=str, help="Formula to prove, e.g. \"p | ~p\"")
    source.add_argument("--random", action="store_true",
                        help="Prove a randomly sampled tautology")
    parser.add_argument("--vars",     type=int, default=3,    help="Variable bound for --random")
    parser.add_argument("--depth",    type=int, default=3,    help="Formula depth for --random")
    parser.add_argument("--no-constants", action="store_true",
                        help="No bot/top leaves in random formulas")
    parser.add_argument("--attempts", type=int, default=1000, help="Sampling budget for --random")
    parser.add_argument("--seed",     type=int, default=None, help="Random seed")
    parser.add_argument("--steps",    type=int, default=200,  help="Max tableau steps")
    parser.add_argument("--negate",   action="store_true",
                        help="Refute the formula itself instead of its negation")
    parser.add_argument("--dot",      type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet",    action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    try:
        if args.random:
            rng = random.Random(args.seed)
            formula = random_tautology(
                args.vars, args.depth,
                no_constants=args.no_constants,
                max_attempts=args.attempts,
                rng=rng,
                verbose=not args.quiet,
            )
            if formula is None:
                print(f"No tautology found in {args.attempts} attempts.")
                return 1
        else:
            formula = parse_formula(args.formula)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Formula: {formula}")
    if is_tautology(formula):
        print("Tautology: yes")
    else:
        model = countermodel(formula)
        shown = ", ".join(f"{k}={'T' if val else 'F'}" for k, val in sorted(model.items()))
        print(f"Tautology: no (countermodel: {shown or 'any'})")

    # The session starts on the formula itself; proving it means refuting
    # its negation, which is the swapped tableau.
    session = start_proof(formula)
    if not args.negate:
        session = session.swap()

    verbose = not args.quiet
    saturated = interrupted = False
    try:
        for _ in range(args.steps):
            if session.tableau.is_closed:
                break
            nxt = session.auto_step(verbose=verbose)
            if nxt is session:
                saturated = True
                break
            session = nxt
    except KeyboardInterrupt:
        print("\nInterrupted.")
        interrupted = True

    print_tableau(session.tableau)
    if verbose:
        print_history(session)

    target = session.current_formula
    if session.tableau.is_closed:
        print(f"\nClosed: {target} is unsatisfiable.")
    elif saturated:
        print(f"\nOpen: {target} is not refuted.")
    elif interrupted:
        print(f"\nUndecided: interrupted before {target} closed or saturated.")
    else:
        print(f"\nUndecided: step budget of {args.steps} ran out before {target} closed or saturated.")

    if args.dot:
        export_dot(session.tableau, args.dot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
