r"""
Incremental CNF encoding of the negation of a growing CNF formula.

For every clause C = (l1 \/ ... \/ lk) of the positive formula a fresh
auxiliary a_C is introduced together with the clauses (~a_C \/ ~li), so that
a_C forces every literal of C false. The falsification clause
(a_1 \/ ... \/ a_n) then states that some positive clause is falsified.

The falsification clause grows with every new positive clause. Incremental
oracles cannot retract clauses, so each version is guarded by its own
activation literal s_n, emitted as (a_1 \/ ... \/ a_n \/ ~s_n), and the
previous version is retired with the unit clause (~s_{n-1}). Queries to the
negative formula must assume the current activation literal.
"""
from typing import Dict, List, Optional, Sequence

from minmodel.vars import VarManager

class TseytinNegator:
    def __init__(self, var_manager: VarManager):
        self.var_manager = var_manager
        # positive clause index -> auxiliary variable
        self.aux_for_clause: Dict[int, int] = {}
        # current disjuncts of the falsification clause
        self.falsification: List[int] = []
        self.activation: Optional[int] = None

    @property
    def num_clauses(self) -> int:
        return len(self.aux_for_clause)

    def negate_clause(self, clause: Sequence[int]) -> List[List[int]]:
        """
        Registers a new positive clause (internal literals) and returns the
        clauses to add to the negative formula, in order.
        """
        aux = self.var_manager.fresh()
        self.aux_for_clause[len(self.aux_for_clause)] = aux

        out = [[-aux, -lit] for lit in clause]

        if self.activation is not None:
            out.append([-self.activation])
        self.falsification.append(aux)
        self.activation = self.var_manager.fresh()
        out.append(self.falsification + [-self.activation])
        return out

    def assumptions(self) -> List[int]:
        """Assumptions every negative query must carry."""
        return [] if self.activation is None else [self.activation]
