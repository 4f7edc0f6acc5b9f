"""Demand intensity scoring for pain point clusters."""

from typing import Dict, Optional

from .errors import InvalidInput
from .rounding import MAX_SCORE, round_score


class DemandScorer:
    """Estimate how strong the need behind a cluster is.

    Factors:
    - Share of the batch volume that landed in the cluster (primary)
    - Emotional intensity of the pain point (secondary amplifier)

    Every 10% of batch volume is worth one point, capped at 5 so volume
    alone cannot exceed the maximum. Emotional intensity adds at most one
    point on top.

    Output: 0-5 score, one decimal place.
    """

    def __init__(self, config: Optional[Dict] = None):
        """Initialize demand scorer.

        Args:
            config: Optional scoring configuration dictionary
        """
        self.size_multiplier = 10.0
        self.emotion_weight = 1.0

        if config:
            demand_config = config.get("demand", {})
            self.size_multiplier = demand_config.get("size_multiplier", 10.0)
            self.emotion_weight = demand_config.get("emotion_weight", 1.0)

    def calculate(
        self,
        cluster_size: int,
        total_data_size: int,
        emotional_intensity: float,
    ) -> float:
        """Calculate demand intensity.

        Args:
            cluster_size: Number of signals in the cluster
            total_data_size: Number of signals across all clusters
            emotional_intensity: Affect strength of the pain point, 0-5

        Returns:
            Demand intensity score from 0-5

        Raises:
            InvalidInput: If counts or the rating are out of range
        """
        if total_data_size <= 0:
            raise InvalidInput(
                f"total_data_size must be positive, got {total_data_size}"
            )
        if cluster_size < 0:
            raise InvalidInput(f"cluster_size must not be negative, got {cluster_size}")
        if cluster_size > total_data_size:
            raise InvalidInput(
                f"cluster_size ({cluster_size}) exceeds total_data_size ({total_data_size})"
            )
        if not 0 <= emotional_intensity <= MAX_SCORE:
            raise InvalidInput(
                f"emotional_intensity must be within [0, 5], got {emotional_intensity}"
            )

        size_ratio = cluster_size / total_data_size
        size_score = min(MAX_SCORE, size_ratio * self.size_multiplier)

        emotion_boost = (emotional_intensity / MAX_SCORE) * self.emotion_weight

        return round_score(min(MAX_SCORE, size_score + emotion_boost))
