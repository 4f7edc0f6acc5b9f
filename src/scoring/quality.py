"""Data quality classification for an analysis batch."""

from enum import Enum
from typing import Dict, Optional, Sequence

from pydantic import BaseModel

from .market import PRELIMINARY_SAMPLE_SIZE, RELIABLE_SAMPLE_SIZE
from .rounding import round_score


class DataQualityLevel(str, Enum):
    """How far the batch's sample size can be trusted."""

    RELIABLE = "reliable"
    PRELIMINARY = "preliminary"
    EXPLORATORY = "exploratory"


class DataQualityReport(BaseModel):
    """Sample size summary shown next to a ranking."""

    level: DataQualityLevel
    total_data_size: int
    cluster_count: int
    average_cluster_size: float


def classify_data_quality(
    total_data_size: int, sample_config: Optional[Dict] = None
) -> DataQualityLevel:
    """Classify a batch by its total number of signals.

    Uses the same thresholds as the market size guard, so an
    exploratory batch is exactly one that gets the conservative
    market estimate.
    """
    sample_config = sample_config or {}
    reliable = sample_config.get("reliable", RELIABLE_SAMPLE_SIZE)
    preliminary = sample_config.get("preliminary", PRELIMINARY_SAMPLE_SIZE)

    if total_data_size >= reliable:
        return DataQualityLevel.RELIABLE
    if total_data_size >= preliminary:
        return DataQualityLevel.PRELIMINARY
    return DataQualityLevel.EXPLORATORY


def assess_data_quality(
    cluster_sizes: Sequence[int],
    total_data_size: Optional[int] = None,
    sample_config: Optional[Dict] = None,
) -> DataQualityReport:
    """Build the data quality report for a batch.

    Args:
        cluster_sizes: Size of every cluster in the batch
        total_data_size: Batch size; defaults to the sum of cluster sizes
        sample_config: Optional sample threshold overrides

    Returns:
        DataQualityReport
    """
    if total_data_size is None:
        total_data_size = sum(cluster_sizes)

    cluster_count = len(cluster_sizes)
    average = sum(cluster_sizes) / cluster_count if cluster_count else 0.0

    return DataQualityReport(
        level=classify_data_quality(total_data_size, sample_config),
        total_data_size=total_data_size,
        cluster_count=cluster_count,
        average_cluster_size=round_score(average),
    )
