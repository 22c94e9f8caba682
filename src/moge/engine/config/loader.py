"""
Config loading utilities shared by CLI and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from moge.foundation.exceptions import ConfigurationError


def load_run_spec(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run specification.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install moge[yaml]'.") from exc
        try:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file '{spec_path}' could not be parsed: {exc}") from exc
    else:
        try:
            with spec_path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Config file '{spec_path}' could not be parsed: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file '{spec_path}' must contain a mapping at the top level.")
    return data


__all__ = ["load_run_spec"]
