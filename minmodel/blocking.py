from typing import Iterable, List

from minmodel.core.types import neg

def blocking_clause(model: Iterable[int]) -> List[int]:
    """
    Clause excluding every complete model that extends the partial model:
    the disjunction of the negations of its literals.
    """
    return [neg(lit) for lit in model]
