"""
minmodel: minimal models of CNF formulas via a positive solver and an
incrementally maintained negation of the formula.
"""
from minmodel.blocking import blocking_clause
from minmodel.coordinator import DualFormulaCoordinator
from minmodel.core.config import MinModelConfig
from minmodel.core.errors import (
    MinModelError, ValidationError, CNFError,
    OracleUnknownError, MalformedAssumptionSetError, SolverError
)
from minmodel.minimize import MinimalModel, MinimizationEngine
from minmodel.tseytin import TseytinNegator
from minmodel.vars import VarManager

__all__ = [
    "blocking_clause", "DualFormulaCoordinator", "MinModelConfig",
    "MinModelError", "ValidationError", "CNFError",
    "OracleUnknownError", "MalformedAssumptionSetError", "SolverError",
    "MinimalModel", "MinimizationEngine", "TseytinNegator", "VarManager"
]
