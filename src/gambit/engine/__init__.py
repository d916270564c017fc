"""Chess engine package: static evaluation and minimax search."""

from gambit.engine.evaluation import evaluate, material_balance
from gambit.engine.minimax import MATE_SCORE, MinimaxSearchEngine
from gambit.engine.search import IEngine, RatedMove, SearchLimits, SearchResult

__all__ = [
    "IEngine",
    "MATE_SCORE",
    "MinimaxSearchEngine",
    "RatedMove",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "material_balance",
]
