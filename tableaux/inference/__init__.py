from .solver import (
    has_contradiction, first_reducible, find_open_branch,
    is_tautology, is_satisfiable, countermodel,
)
from .sampling import variable_name, rename_variables, random_formula, random_tautology
