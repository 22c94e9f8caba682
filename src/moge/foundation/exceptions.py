"""
MOGE exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All MOGE-specific exceptions inherit from MOGEError for easy catching.

Example:
    try:
        front = engine.execute()
    except MOGEError as e:
        print(f"Optimization failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MOGEError(Exception):
    """
    Base exception for all MOGE errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MOGEError, ValueError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown operator is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} operator '{operator_name}'."
        suggestion = f"Available {operator_type} operators: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or use {config_class}() for sensible defaults"
        super().__init__(message, suggestion, {"field": field})


class InvalidProblemError(ConfigurationError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        if available:
            suggestion = f"Available problems: {', '.join(available)}."
        else:
            suggestion = "Use available_problem_names() to see registered problems."
        super().__init__(message, suggestion, {"problem": problem})


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(MOGEError):
    """Base class for problem-related errors."""

    pass


class ProblemDimensionError(ProblemError, ValueError):
    """Raised when problem dimensions are invalid."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
    ) -> None:
        suggestion = "Check problem dimensions: n_var (variables), n_obj (objectives)"
        super().__init__(message, suggestion, {"n_var": n_var, "n_obj": n_obj})


class BoundsError(ProblemError, ValueError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure xl <= xu for all variables and bounds have length n_var"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MOGEError):
    """Raised when optimization fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """Raised when objective evaluation fails."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check that operators keep variables within the problem bounds and that evaluate_solution() is correct"
        super().__init__(message, suggestion, {"solution": solution})


class EngineStateError(OptimizationError):
    """Raised when an engine operation is called in the wrong lifecycle state."""

    def __init__(self, operation: str, state: Any) -> None:
        message = f"Cannot call {operation}() while the engine is {state}."
        suggestion = "Call initialize() first, or initialize() again to restart a terminated run"
        super().__init__(message, suggestion, {"operation": operation, "state": str(state)})


class ContractViolationError(MOGEError):
    """
    Raised when a collaborator breaks an engine contract.

    Examples are comparing unevaluated solutions or objective vectors of different
    lengths. These indicate a programming error and are never recovered from.
    """

    pass


# =============================================================================
# Warnings
# =============================================================================


class DegeneratePopulationWarning(UserWarning):
    """Emitted when a generation is skipped because fewer than two solutions remain."""


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MOGEError",
    # Configuration
    "ConfigurationError",
    "InvalidOperatorError",
    "MissingConfigError",
    "InvalidProblemError",
    # Problem
    "ProblemError",
    "ProblemDimensionError",
    "BoundsError",
    # Runtime
    "OptimizationError",
    "EvaluationError",
    "EngineStateError",
    "ContractViolationError",
    # Warnings
    "DegeneratePopulationWarning",
]
