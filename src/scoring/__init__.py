"""Priority scoring engine for pain point clusters"""

from .competition import CompetitionScorer
from .composite import PriorityScorer, classify_level, score_cluster
from .demand import DemandScorer
from .errors import InvalidInput
from .market import KeywordLocale, MarketSizeScorer
from .models import ClusterSignals, ExistingSolution, PriorityLevel, PriorityScore
from .quality import DataQualityLevel, DataQualityReport, assess_data_quality, classify_data_quality

__all__ = [
    "DemandScorer",
    "MarketSizeScorer",
    "CompetitionScorer",
    "PriorityScorer",
    "PriorityScore",
    "PriorityLevel",
    "ClusterSignals",
    "ExistingSolution",
    "KeywordLocale",
    "InvalidInput",
    "DataQualityLevel",
    "DataQualityReport",
    "assess_data_quality",
    "classify_data_quality",
    "classify_level",
    "score_cluster",
]
