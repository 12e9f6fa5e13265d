from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from minmodel.core.errors import MalformedAssumptionSetError, OracleUnknownError
from minmodel.core.logging import get_logger
from minmodel.solver.handle import SolverHandle

logger = get_logger(__name__)

@dataclass
class MinimalModel:
    """
    A partial assignment, as signed literals, that satisfies every clause
    through one of its own literals and from which no literal can be dropped.
    """
    literals: List[int]
    # Complete model the minimization started from
    full_model: List[int] = field(default_factory=list)
    num_queries: int = 0
    num_sat: int = 0
    num_unsat: int = 0

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.literals)

    def __contains__(self, lit: int) -> bool:
        return lit in self.literals

    def as_assignment(self) -> Dict[int, bool]:
        return {abs(l): l > 0 for l in self.literals}

class MinimizationEngine:
    """
    Shrinks a complete model of the positive formula into a minimal partial
    model using only failed-assumption queries to the negative formula.

    Dropping literal l from the candidate set is safe exactly when the
    negative formula stays UNSAT under the remaining literals, i.e. no
    extension of them falsifies a positive clause. A SAT answer marks l as
    essential. An UNSAT answer also hands back a failed-assumption set, and
    every candidate outside it is discarded at once.
    """
    def __init__(self, negative: SolverHandle, activation: Sequence[int] = ()):
        self.negative = negative
        self.activation = list(activation)

    def minimize(self, full_model: Sequence[int]) -> MinimalModel:
        full_model = list(full_model)
        result = MinimalModel(literals=[], full_model=full_model)

        if not self.activation:
            # No clauses: the empty assignment satisfies the formula
            return result

        current = list(full_model)
        confirmed = set()

        while True:
            candidate = self._next_unconfirmed(current, confirmed)
            if candidate is None:
                break

            assumptions = self.activation + [l for l in current if l != candidate]
            logger.debug("solving... %d/%d", len(confirmed), len(current))
            outcome = self.negative.solve(assumptions)
            result.num_queries += 1

            if outcome.is_sat:
                # Without the candidate some clause can be falsified
                confirmed.add(candidate)
                result.num_sat += 1
            elif outcome.is_unsat:
                core = set(outcome.core)
                extra = core.difference(assumptions)
                if extra:
                    raise MalformedAssumptionSetError(extra, assumptions)
                current = [l for l in current if l in core]
                confirmed.intersection_update(current)
                result.num_unsat += 1
            else:
                raise OracleUnknownError("negative")

        result.literals = current
        logger.debug("minimized %d -> %d literals in %d queries",
                     len(full_model), len(current), result.num_queries)
        return result

    @staticmethod
    def _next_unconfirmed(current: List[int], confirmed: set) -> Optional[int]:
        for lit in current:
            if lit not in confirmed:
                return lit
        return None
