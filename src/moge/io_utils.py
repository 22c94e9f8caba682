"""
Persistence helpers for MOGE run artifacts.
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from moge.foundation.solution import Population


def ensure_dir(path: str | Path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_population(output_dir: str | Path, population: Population) -> dict:
    """
    Save objective values (FUN.csv) and genomes (VAR.csv). Returns artifact map.
    """
    output_dir = ensure_dir(output_dir)
    fun_path = output_dir / "FUN.csv"
    var_path = output_dir / "VAR.csv"
    np.savetxt(fun_path, population.objective_matrix(), delimiter=",")
    np.savetxt(var_path, population.variable_matrix(), delimiter=",", fmt="%d")
    return {"fun": fun_path.name, "var": var_path.name}


def write_metadata(output_dir: str | Path, metadata: dict, resolved_cfg: dict) -> None:
    output_dir = ensure_dir(output_dir)
    with (output_dir / "metadata.json").open("w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, sort_keys=True)
    with (output_dir / "resolved_config.json").open("w", encoding="utf-8") as f:
        json.dump(resolved_cfg, f, indent=2, sort_keys=True)


__all__ = ["write_population", "write_metadata", "ensure_dir"]
