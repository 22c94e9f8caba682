"""Generational engine configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

from moge.foundation.exceptions import ConfigurationError
from moge.operators.crossover import DEFAULT_PROBABILITY

_KEY_ALIASES = {
    "pop_size": "population_size",
    "generations": "max_generations",
    "mutation_prob": "mutation_probability",
    "crossover_prob": "crossover_probability",
}


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _check_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer; got {value!r}.")


def _check_probability(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0.0 <= float(value) <= 1.0:
        raise ConfigurationError(f"{name} must be a real number in [0, 1]; got {value!r}.")


@dataclass(frozen=True)
class EngineConfig(_SerializableConfig):
    """
    Immutable configuration for GrammaticalEvolution.

    ``mutation_probability=None`` means 1 / n_var and is filled in by ``resolve``.
    Operator fields hold registry names (see moge.operators.registry).

    Examples:
        cfg = EngineConfig(population_size=50, max_generations=100)
        cfg = EngineConfig.from_dict({"pop_size": 50, "generations": 100, "seed": 1})
    """

    population_size: int = 100
    max_generations: int = 250
    mutation_probability: float | None = None
    crossover_probability: float = DEFAULT_PROBABILITY
    selection: str = "binary_tournament"
    crossover: str = "single_point"
    mutation: str = "int_flip"
    seed: int | None = None

    def __post_init__(self) -> None:
        _check_positive_int("population_size", self.population_size)
        _check_positive_int("max_generations", self.max_generations)
        if self.mutation_probability is not None:
            _check_probability("mutation_probability", self.mutation_probability)
        _check_probability("crossover_probability", self.crossover_probability)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigurationError(f"seed must be an integer or None; got {self.seed!r}.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        """
        Create a configuration from a dictionary (e.g. a loaded JSON/YAML run spec).

        Accepts the short aliases pop_size, generations, mutation_prob and crossover_prob.
        Unknown keys raise ConfigurationError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(
                    f"Unknown engine configuration key '{key}'.",
                    suggestion=f"Valid keys: {', '.join(sorted(known))}",
                )
            kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> "EngineConfig":
        """Return a copy with the non-None overrides applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **updates) if updates else self

    def resolve(self, problem) -> "EngineConfig":
        """Fill defaults that depend on the problem (mutation probability = 1 / n_var)."""
        if self.mutation_probability is not None:
            return self
        return replace(self, mutation_probability=1.0 / problem.number_of_variables())


__all__ = ["EngineConfig"]
