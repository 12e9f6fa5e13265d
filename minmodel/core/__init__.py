"""
Core module for minmodel.
Provides error handling, logging, types, and configuration.
"""
from minmodel.core.errors import (
    MinModelError, ValidationError, CNFError,
    OracleUnknownError, MalformedAssumptionSetError, SolverError
)
from minmodel.core.logging import get_logger
from minmodel.core.types import Lit, Clause, validate_clause, validate_cnf, neg
from minmodel.core.config import MinModelConfig

__all__ = [
    "MinModelError", "ValidationError", "CNFError",
    "OracleUnknownError", "MalformedAssumptionSetError", "SolverError",
    "get_logger",
    "Lit", "Clause", "validate_clause", "validate_cnf", "neg",
    "MinModelConfig"
]
