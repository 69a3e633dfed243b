"""
Unit tests for proof sessions.

Core claims:
    - A session starts on the formula, with its negation in reserve
    - swap() exchanges the two tableaus without losing work on either
    - Every command returns a new session and appends one history entry
"""

import pytest

from tableaux.core.errors import AlreadyAppliedError
from tableaux.core.formula import Var, Not, And, Or, Implies, Bot
from tableaux.core.session import ProofSession, start_proof


p, q = Var("p"), Var("q")


class TestStartProof:
    def test_initial_state(self):
        s = start_proof(Or(p, Not(p)))
        assert s.tableau.formulas == (Or(p, Not(p)),)
        assert s.swap_tableau.formulas == (Not(Or(p, Not(p))),)
        assert not s.is_negated
        assert s.history == ()
        assert s.step == 0
        assert s.current_formula == Or(p, Not(p))


class TestSwap:
    def test_swap_exchanges_tableaus(self):
        s = start_proof(p)
        s2 = s.swap()
        assert s2.tableau is s.swap_tableau
        assert s2.swap_tableau is s.tableau
        assert s2.is_negated
        assert s2.current_formula == Not(p)

    def test_work_survives_swapping(self):
        s = start_proof(And(p, q)).reduce_formula(("", 0), "")
        worked = s.tableau
        s = s.swap().swap()
        assert s.tableau is worked
        assert not s.is_negated

    def test_swap_is_recorded(self):
        s = start_proof(p).swap()
        assert s.history[-1]["action"] == "swap"
        assert s.step == 1


class TestCommands:
    def test_reduce_records_history(self):
        s = start_proof(And(p, q))
        s2 = s.reduce_formula(("", 0), "")
        assert s2.tableau.formulas == (And(p, q), p, q)
        assert s2.history == ({
            "step": 1,
            "action": "reduce",
            "detail": "p ∧ q at ('', 0) onto ''",
            "closed": False,
        },)
        assert s.history == ()
        assert s.tableau.formulas == (And(p, q),)

    def test_close_with_contradiction(self):
        s = start_proof(Or(p, Not(p))).swap()        # ~(p | ~p)
        s = s.reduce_formula(("", 0), "")            # ~p, ~~p
        s = s.reduce_formula(("", 2), "")            # p
        s = s.close_branch_with_contradiction(("", 1), ("", 3))
        assert s.tableau.is_closed
        assert s.history[-1]["action"] == "close"
        assert s.history[-1]["closed"]

    def test_close_negated_implication(self):
        s = start_proof(And(p, Not(Implies(q, q)))).reduce_formula(("", 0), "")
        s = s.reduce_formula(("", 2), "")            # q, ~q
        s = s.close_branch_with_contradiction(("", 3), ("", 4))
        assert s.tableau.is_closed

    def test_close_with_bot_entry(self):
        s = start_proof(And(p, Bot())).reduce_formula(("", 0), "")
        s = s.close_branch_with_bot(("", 2))
        assert s.tableau.is_closed
        assert s.history[-1]["detail"] == "bot at ('', 2)"

    def test_failed_command_leaves_session(self):
        s = start_proof(And(p, q)).reduce_formula(("", 0), "")
        with pytest.raises(AlreadyAppliedError):
            s.reduce_formula(("", 0), "")
        assert s.step == 1


class TestAutoStep:
    def test_runs_to_closure(self):
        s = start_proof(Implies(p, p)).swap()
        for _ in range(20):
            nxt = s.auto_step()
            if nxt is s:
                break
            s = nxt
        assert s.tableau.is_closed
        assert s.history[-1]["action"] == "close"

    def test_saturated_returns_same_session(self):
        s = start_proof(p)
        assert s.auto_step() is s

    def test_is_a_proof_session(self):
        assert isinstance(start_proof(p).swap(), ProofSession)
