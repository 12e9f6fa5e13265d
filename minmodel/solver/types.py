from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

class SatStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"

@dataclass
class SolveOutcome:
    """
    Raw result of one oracle query.
    """
    status: SatStatus
    # Complete model as signed internal literals (SAT only)
    model: Optional[List[int]] = None
    # Failed-assumption set (UNSAT only); a subset of the assumptions
    core: List[int] = field(default_factory=list)

    @property
    def is_sat(self) -> bool:
        return self.status == SatStatus.SAT

    @property
    def is_unsat(self) -> bool:
        return self.status == SatStatus.UNSAT
