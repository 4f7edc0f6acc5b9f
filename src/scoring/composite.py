"""Composite priority scoring that combines all scoring dimensions."""

from typing import Dict, Optional

from loguru import logger

from .competition import CompetitionScorer
from .demand import DemandScorer
from .errors import InvalidInput
from .market import MarketSizeScorer
from .models import ClusterSignals, PriorityLevel, PriorityScore
from .rounding import MAX_SCORE, MIN_SCORE, clamp_score, round_score

DEFAULT_WEIGHTS = {
    "demand": 0.4,
    "market": 0.3,
    "competition": 0.3,
}

DEFAULT_LEVELS = {
    "high": 3.5,
    "medium": 2.5,
}


def classify_level(overall: float, levels: Optional[Dict[str, float]] = None) -> PriorityLevel:
    """Map an overall score to its priority level.

    Args:
        overall: Overall score, 0-5
        levels: Optional ``high``/``medium`` lower bounds

    Returns:
        PriorityLevel
    """
    levels = levels or DEFAULT_LEVELS

    if overall >= levels["high"]:
        return PriorityLevel.HIGH
    elif overall >= levels["medium"]:
        return PriorityLevel.MEDIUM
    else:
        return PriorityLevel.LOW


class PriorityScorer:
    """Combines all scoring dimensions into a final priority score.

    Weighting:
    - Demand intensity: 40% (unmet, emotionally strong demand comes first)
    - Market size: 30%
    - Competition: 30%

    Final classification:
    - 3.5-5.0: High
    - 2.5-3.4: Medium
    - 0.0-2.4: Low
    """

    WEIGHTS = DEFAULT_WEIGHTS
    LEVELS = DEFAULT_LEVELS

    def __init__(self, config: Optional[Dict] = None):
        """Initialize priority scorer.

        Args:
            config: Optional configuration dictionary
        """
        if config:
            scoring_config = config.get("scoring", {})
            self.WEIGHTS = scoring_config.get("weights") or self.WEIGHTS
            self.LEVELS = scoring_config.get("levels") or self.LEVELS

            self.demand_scorer = DemandScorer(scoring_config)
            self.market_scorer = MarketSizeScorer(scoring_config)
            self.competition_scorer = CompetitionScorer(scoring_config)
        else:
            self.demand_scorer = DemandScorer()
            self.market_scorer = MarketSizeScorer()
            self.competition_scorer = CompetitionScorer()

    def score_cluster(self, signals: ClusterSignals) -> PriorityScore:
        """Calculate the priority score for a cluster.

        Args:
            signals: Cluster signals from the upstream analysis

        Returns:
            PriorityScore instance

        Raises:
            InvalidInput: If the signals violate their numeric contract
        """
        demand = self.demand_scorer.calculate(
            cluster_size=signals.cluster_size,
            total_data_size=signals.total_data_size,
            emotional_intensity=signals.emotional_intensity,
        )
        market = self.market_scorer.calculate(
            keywords=signals.keywords,
            cluster_size=signals.cluster_size,
            total_data_size=signals.total_data_size,
        )
        competition = self.competition_scorer.calculate(signals.existing_solutions)

        score = self.calculate_priority(demand, market, competition)

        logger.debug(
            f"Scored cluster (size={signals.cluster_size}/{signals.total_data_size}): "
            f"demand={score.demand_intensity} market={score.market_size} "
            f"competition={score.competition} overall={score.overall} level={score.level.value}"
        )

        return score

    def calculate_priority(
        self,
        demand_intensity: float,
        market_size: float,
        competition: float,
    ) -> PriorityScore:
        """Combine sub-scores into the overall score and level.

        Args:
            demand_intensity: Demand intensity score, 0-5
            market_size: Market size score, 0-5
            competition: Competition score, 0-5

        Returns:
            PriorityScore instance

        Raises:
            InvalidInput: If any sub-score is outside 0-5
        """
        sub_scores = {
            "demand_intensity": demand_intensity,
            "market_size": market_size,
            "competition": competition,
        }
        for name, value in sub_scores.items():
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise InvalidInput(f"{name} must be within [0, 5], got {value}")

        overall = (
            demand_intensity * self.WEIGHTS["demand"]
            + market_size * self.WEIGHTS["market"]
            + competition * self.WEIGHTS["competition"]
        )
        overall = round_score(clamp_score(overall))

        return PriorityScore(
            demand_intensity=demand_intensity,
            market_size=market_size,
            competition=competition,
            overall=overall,
            level=classify_level(overall, self.LEVELS),
        )


_default_scorer = PriorityScorer()


def score_cluster(signals: ClusterSignals) -> PriorityScore:
    """Score a cluster with the default weights and reference tables."""
    return _default_scorer.score_cluster(signals)
