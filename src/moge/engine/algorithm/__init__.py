from .grammatical_evolution import GrammaticalEvolution
from .reduction import reduce_population
from .state import EngineState

__all__ = ["GrammaticalEvolution", "EngineState", "reduce_population"]
