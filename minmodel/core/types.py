from typing import Annotated, Iterable, List
from pydantic import AfterValidator, RootModel
from minmodel.core.errors import ValidationError

def check_nonzero(v: int) -> int:
    if v == 0:
        raise ValueError("Literal cannot be zero")
    return v

Lit = Annotated[int, AfterValidator(check_nonzero)]

class Clause(RootModel):
    """A disjunction of literals. May be empty (the unsatisfiable clause)."""
    root: List[Lit]

def validate_clause(clause: Iterable[int]) -> List[int]:
    """
    Validates a single clause and returns it as a list of ints.
    Raises ValidationError if any literal is zero or not an integer.
    """
    try:
        return list(Clause.model_validate(list(clause), strict=True).root)
    except Exception as e:
        raise ValidationError(f"Invalid clause {clause!r}: {e}")

def validate_cnf(cnf: List[List[int]]) -> None:
    """
    Validates a CNF structure.
    Raises ValidationError if the structure is invalid.
    """
    for clause in cnf:
        validate_clause(clause)

def neg(lit: int) -> int:
    return -lit