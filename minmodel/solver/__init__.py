from minmodel.solver.types import SatStatus, SolveOutcome
from minmodel.solver.handle import SolverHandle

__all__ = ["SatStatus", "SolveOutcome", "SolverHandle"]
