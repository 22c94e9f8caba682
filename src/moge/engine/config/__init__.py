from .engine_config import EngineConfig
from .loader import load_run_spec

__all__ = ["EngineConfig", "load_run_spec"]
