"""
Public exceptions namespace: ``from moge.exceptions import EvaluationError``.

The classes are defined in moge.foundation.exceptions.
"""

from moge.foundation.exceptions import (
    BoundsError,
    ConfigurationError,
    ContractViolationError,
    DegeneratePopulationWarning,
    EngineStateError,
    EvaluationError,
    InvalidOperatorError,
    InvalidProblemError,
    MissingConfigError,
    MOGEError,
    OptimizationError,
    ProblemDimensionError,
    ProblemError,
)

__all__ = [
    "MOGEError",
    "ConfigurationError",
    "InvalidOperatorError",
    "MissingConfigError",
    "InvalidProblemError",
    "ProblemError",
    "ProblemDimensionError",
    "BoundsError",
    "OptimizationError",
    "EvaluationError",
    "EngineStateError",
    "ContractViolationError",
    "DegeneratePopulationWarning",
]
