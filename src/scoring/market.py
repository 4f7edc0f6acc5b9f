"""Market size scoring for pain point clusters."""

from enum import Enum
from typing import Dict, Iterable, Optional, Sequence

from .errors import InvalidInput
from .rounding import MAX_SCORE, round_score


class KeywordLocale(str, Enum):
    """Locales with a built-in popular keyword reference set."""

    ZH = "zh"
    EN = "en"


POPULAR_KEYWORDS = {
    KeywordLocale.ZH: (
        "旅行", "旅游", "健康", "养生", "教育", "学习", "工作", "职场",
        "娱乐", "游戏", "美食", "运动", "理财", "投资", "购物", "穿搭",
    ),
    KeywordLocale.EN: (
        "travel", "tourism", "health", "wellness", "education", "learning",
        "work", "career", "entertainment", "gaming", "food", "fitness",
        "finance", "investing", "shopping", "fashion",
    ),
}

# Sample size thresholds shared with the data quality classifier
PRELIMINARY_SAMPLE_SIZE = 50
RELIABLE_SAMPLE_SIZE = 200


class MarketSizeScorer:
    """Estimate the addressable audience for a cluster's pain point.

    Factors:
    - Topic popularity (keyword overlap with a reference set)
    - Absolute batch volume (more data = more confidence)
    - Cluster volume (how much the topic is discussed)

    Batches smaller than the preliminary sample size get a fixed,
    conservative 2.5 instead of a computed score.

    Output: 0-5 score, one decimal place.
    """

    INSUFFICIENT_DATA_SCORE = 2.5

    POPULAR_BASE = 4.0
    NICHE_BASE = 3.0

    def __init__(self, config: Optional[Dict] = None):
        """Initialize market size scorer.

        Args:
            config: Optional scoring configuration dictionary
        """
        locale = KeywordLocale.ZH
        popular_keywords = None
        self.min_sample_size = PRELIMINARY_SAMPLE_SIZE
        self.reliable_sample_size = RELIABLE_SAMPLE_SIZE
        self.moderate_sample_size = 100
        self.cluster_size_divisor = 30.0

        if config:
            market_config = config.get("market", {})
            locale = KeywordLocale(market_config.get("locale") or KeywordLocale.ZH)
            popular_keywords = market_config.get("popular_keywords")
            self.moderate_sample_size = market_config.get("moderate_sample_size", 100)
            self.cluster_size_divisor = market_config.get("cluster_size_divisor", 30.0)

            sample_config = config.get("sample", {})
            self.min_sample_size = sample_config.get("preliminary", PRELIMINARY_SAMPLE_SIZE)
            self.reliable_sample_size = sample_config.get("reliable", RELIABLE_SAMPLE_SIZE)

        self.locale = locale
        if popular_keywords is None:
            popular_keywords = POPULAR_KEYWORDS[locale]
        self.popular_keywords = tuple(popular_keywords)

    def calculate(
        self,
        keywords: Sequence[str],
        cluster_size: int,
        total_data_size: int,
    ) -> float:
        """Calculate market size.

        Args:
            keywords: Search terms associated with the topic
            cluster_size: Number of signals in the cluster
            total_data_size: Number of signals across all clusters

        Returns:
            Market size score from 0-5

        Raises:
            InvalidInput: If cluster_size is negative on a scored sample
        """
        if total_data_size < self.min_sample_size:
            return self.INSUFFICIENT_DATA_SCORE

        if cluster_size < 0:
            raise InvalidInput(f"cluster_size must not be negative, got {cluster_size}")

        base_score = self.POPULAR_BASE if self.is_popular(keywords) else self.NICHE_BASE

        if total_data_size >= self.reliable_sample_size:
            data_boost = 0.5
        elif total_data_size >= self.moderate_sample_size:
            data_boost = 0.3
        else:
            data_boost = 0.0

        size_boost = min(0.5, cluster_size / self.cluster_size_divisor)

        return round_score(min(MAX_SCORE, base_score + data_boost + size_boost))

    def is_popular(self, keywords: Iterable[str]) -> bool:
        """Check whether any keyword overlaps the popular reference set.

        Overlap is a case-sensitive substring match in either direction.
        """
        return any(
            keyword in reference or reference in keyword
            for keyword in keywords
            for reference in self.popular_keywords
        )
