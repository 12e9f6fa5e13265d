from typing import Iterable, List, Optional, Sequence

def is_tautology(clause: Sequence[int]) -> bool:
    lits = set(clause)
    return any(-l in lits for l in lits)

def is_consistent(literals: Iterable[int]) -> bool:
    """True if no variable occurs with both polarities."""
    lits = set(literals)
    return not any(-l in lits for l in lits)

def satisfies(clauses: Iterable[Sequence[int]], literals: Iterable[int]) -> bool:
    """
    Checks a partial assignment with don't-care semantics: every clause that
    can be falsified at all must contain a literal of the assignment.
    """
    lits = set(literals)
    for clause in clauses:
        if is_tautology(clause):
            continue
        if not any(l in lits for l in clause):
            return False
    return True

def essential_witness(clauses: Iterable[Sequence[int]], literals: Iterable[int],
                      lit: int) -> Optional[List[int]]:
    """Returns a clause whose only witness in the assignment is `lit`, if any."""
    lits = set(literals)
    for clause in clauses:
        if is_tautology(clause):
            continue
        witnesses = [l for l in clause if l in lits]
        if witnesses and all(w == lit for w in witnesses):
            return list(clause)
    return None

def is_minimal(clauses: Sequence[Sequence[int]], literals: Sequence[int]) -> bool:
    """
    A consistent partial assignment that satisfies every clause and where
    each literal is the sole witness of some clause.
    """
    if not is_consistent(literals) or not satisfies(clauses, literals):
        return False
    return all(essential_witness(clauses, literals, l) is not None for l in literals)
