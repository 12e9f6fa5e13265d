class MinModelError(Exception):
    """Base exception for all minmodel related errors."""
    pass

class ValidationError(MinModelError):
    """Raised when a clause or literal fails validation."""
    pass

class CNFError(MinModelError):
    """Raised when there is an issue with CNF processing or parsing."""
    pass

class OracleUnknownError(MinModelError):
    """
    Raised when the SAT oracle could not decide a query within its budget.
    Retrying with relaxed limits may succeed.
    """
    def __init__(self, side: str, message: str = ""):
        self.side = side
        super().__init__(message or f"Oracle returned UNKNOWN on the {side} formula")

class MalformedAssumptionSetError(MinModelError):
    """Raised when the oracle reports failed assumptions that were never assumed."""
    def __init__(self, extra, assumptions):
        self.extra = sorted(extra, key=lambda x: (abs(x), x))
        self.assumptions = list(assumptions)
        super().__init__(
            f"Failed-assumption set contains literals {self.extra} "
            f"outside the queried assumptions {self.assumptions}"
        )

class SolverError(MinModelError):
    """Raised when the SAT oracle cannot be created."""
    pass
