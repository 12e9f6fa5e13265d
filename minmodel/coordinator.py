from typing import Iterable, List, Optional

from minmodel.blocking import blocking_clause
from minmodel.core.config import MinModelConfig
from minmodel.core.errors import OracleUnknownError
from minmodel.core.logging import get_logger
from minmodel.core.types import validate_clause
from minmodel.minimize import MinimalModel, MinimizationEngine
from minmodel.solver.handle import SolverHandle
from minmodel.solver.types import SatStatus
from minmodel.tseytin import TseytinNegator
from minmodel.vars import VarManager

logger = get_logger(__name__)

class DualFormulaCoordinator:
    """
    Owns the positive solver (the formula itself) and the negative solver
    (its Tseytin-encoded negation) and keeps them in step.

    Clauses are given with user variable numbers; internally every user
    variable is remapped through a VarManager so auxiliaries never collide
    with variables that first appear in later clauses.
    """
    def __init__(self, config: Optional[MinModelConfig] = None,
                 clauses: Iterable[Iterable[int]] = ()):
        self.config = config if config else MinModelConfig()
        self.var_manager = VarManager()
        self.negator = TseytinNegator(self.var_manager)
        self.positive = self._make_handle("positive")
        self.negative = self._make_handle("negative")
        self.add_clauses(clauses)

    def _make_handle(self, label: str) -> SolverHandle:
        return SolverHandle(
            name=self.config.solver_name,
            conf_budget=self.config.conf_budget,
            prop_budget=self.config.prop_budget,
            label=label,
        )

    @property
    def num_clauses(self) -> int:
        return self.negator.num_clauses

    @property
    def num_vars(self) -> int:
        """Number of distinct user variables seen so far."""
        return self.var_manager.num_user_vars

    def add_clause(self, clause: Iterable[int]) -> None:
        """Conjoins a clause to the formula and its negation to the negative solver."""
        user_clause = validate_clause(clause)
        internal = [self.var_manager.to_internal(l) for l in user_clause]

        self.positive.add_clause(internal)
        for neg_clause in self.negator.negate_clause(internal):
            self.negative.add_clause(neg_clause)
        logger.debug("clause %d: %s", self.num_clauses, user_clause)

    def add_clauses(self, clauses: Iterable[Iterable[int]]) -> None:
        for clause in clauses:
            self.add_clause(clause)

    def find_minimal_model(self) -> Optional[MinimalModel]:
        """
        Returns a minimal model of the current formula, or None when the
        formula is unsatisfiable.
        Raises OracleUnknownError if either solver runs out of budget.
        """
        outcome = self.positive.solve()
        if outcome.status == SatStatus.UNKNOWN:
            raise OracleUnknownError("positive")
        if outcome.is_unsat:
            logger.info("formula is unsatisfiable")
            return None

        values = set(outcome.model)
        full_model = [vid if vid in values else -vid for vid in self.var_manager.user_ids()]

        engine = MinimizationEngine(self.negative, self.negator.assumptions())
        result = engine.minimize(full_model)

        result.literals = [self.var_manager.to_user(l) for l in result.literals]
        result.full_model = [self.var_manager.to_user(l) for l in result.full_model]
        logger.info("minimal model with %d of %d literals (%d queries)",
                    len(result.literals), len(result.full_model), result.num_queries)
        return result

    def block(self, model: Iterable[int]) -> List[int]:
        """Adds the blocking clause for a minimal model and returns it."""
        clause = blocking_clause(model)
        self.add_clause(clause)
        return clause

    def close(self) -> None:
        self.positive.close()
        self.negative.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
