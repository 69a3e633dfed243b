"""
Contract violations raised by the tableau core.

Every error here is a caller mistake: the caller is expected to ask the
tableau what is allowed (applicable_branches, reducible, ...) before
issuing a command. Nothing inside the core catches these.
"""


class TableauError(ValueError):
    """Base class for all tableau contract violations."""


class IndexOutOfBoundsError(TableauError, IndexError):
    """A path runs past a leaf, or a position is outside a node's slots."""


class InvalidPathError(TableauError):
    """A path contains a character other than 'L' or 'R'."""


class TargetNotLeafError(TableauError):
    """reduce_formula was pointed at a node that already has children."""


class AlreadyAppliedError(TableauError):
    """The formula has already been expanded on the target branch."""


class NotReducibleError(TableauError):
    """reduce() was called on a literal."""


class NotBotError(TableauError):
    """close_branch_with_bot was given a formula other than Bot."""


class NotContradictionError(TableauError):
    """The two formulas are not of the form A and ~A."""


class NotSameBranchError(TableauError):
    """Two positions (or a formula and a target) do not share a branch."""
