from typing import Optional, Sequence
from pysat.solvers import Solver

from minmodel.core.errors import SolverError
from minmodel.core.logging import get_logger
from minmodel.solver.types import SatStatus, SolveOutcome

logger = get_logger(__name__)

class SolverHandle:
    """
    One incremental PySAT session: permanent clauses plus per-query
    assumptions. Budgets, when given, make queries resource bounded; an
    exhausted budget is reported as UNKNOWN.
    """
    def __init__(self, name: str = "g3",
                 conf_budget: Optional[int] = None,
                 prop_budget: Optional[int] = None,
                 label: str = "solver"):
        self.name = name
        self.label = label
        self.conf_budget = conf_budget
        self.prop_budget = prop_budget
        try:
            self._solver = Solver(name=name)
        except Exception as e:
            raise SolverError(f"Cannot create solver {name!r}: {e}")
        # Set once an empty clause is added; the oracle never sees it
        self._inconsistent = False
        self.num_clauses = 0
        self.num_solves = 0

    @property
    def limited(self) -> bool:
        return self.conf_budget is not None or self.prop_budget is not None

    def add_clause(self, clause: Sequence[int]) -> None:
        self.num_clauses += 1
        if not clause:
            self._inconsistent = True
            return
        self._solver.add_clause(list(clause))

    def solve(self, assumptions: Sequence[int] = ()) -> SolveOutcome:
        self.num_solves += 1
        assumptions = list(assumptions)
        if self._inconsistent:
            return SolveOutcome(status=SatStatus.UNSAT, core=[])

        if self.limited:
            # MiniSat-style budgets are absolute; re-arm before every query
            if self.conf_budget is not None:
                self._solver.conf_budget(self.conf_budget)
            if self.prop_budget is not None:
                self._solver.prop_budget(self.prop_budget)
            res = self._solver.solve_limited(assumptions=assumptions)
        else:
            res = self._solver.solve(assumptions=assumptions)

        if res is None:
            logger.debug("%s: UNKNOWN under %d assumptions", self.label, len(assumptions))
            return SolveOutcome(status=SatStatus.UNKNOWN)
        if res:
            return SolveOutcome(status=SatStatus.SAT, model=list(self._solver.get_model()))
        return SolveOutcome(status=SatStatus.UNSAT, core=list(self._solver.get_core() or []))

    def close(self) -> None:
        if self._solver is not None:
            self._solver.delete()
            self._solver = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
