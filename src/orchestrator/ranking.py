"""Batch ranking of analysed clusters by priority."""

from typing import Dict, List, Optional

from loguru import logger
from pydantic import BaseModel, Field, model_validator

from ..scoring.composite import PriorityScorer
from ..scoring.errors import InvalidInput
from ..scoring.models import ClusterSignals, ExistingSolution, PriorityLevel, PriorityScore
from ..scoring.quality import DataQualityReport, assess_data_quality

UNKNOWN_GROUP = "Unknown"
GROUP_ORDER = (
    PriorityLevel.HIGH.value,
    PriorityLevel.MEDIUM.value,
    PriorityLevel.LOW.value,
    UNKNOWN_GROUP,
)


class ClusterRecord(BaseModel):
    """One cluster of a batch, as handed over by the enrichment stage."""

    id: str
    size: int = Field(ge=0)
    label: Optional[str] = None  # e.g. the one-line pain summary

    # Missing when the LLM analysis did not run for this cluster
    emotional_intensity: Optional[float] = None

    keywords: List[str] = Field(default_factory=list)
    existing_solutions: List[ExistingSolution] = Field(default_factory=list)


class RankingBatch(BaseModel):
    """All clusters produced by one analysis run."""

    clusters: List[ClusterRecord]
    total_data_size: Optional[int] = Field(default=None, ge=0)  # Defaults to the sum of cluster sizes

    @model_validator(mode="after")
    def check_total_covers_clusters(self) -> "RankingBatch":
        if self.total_data_size is None or not self.clusters:
            return self
        largest = max(self.clusters, key=lambda cluster: cluster.size)
        if largest.size > self.total_data_size:
            raise ValueError(
                f"cluster {largest.id} size ({largest.size}) exceeds "
                f"total_data_size ({self.total_data_size})"
            )
        return self


class RankedCluster(BaseModel):
    """A cluster together with its score, if it could be scored."""

    id: str
    size: int = Field(ge=0)
    label: Optional[str] = None
    priority_score: Optional[Dict] = None


class RankingResult(BaseModel):
    """Clusters grouped by priority level plus the batch data quality."""

    groups: Dict[str, List[RankedCluster]]
    data_quality: DataQualityReport

    def ordered(self) -> List[RankedCluster]:
        """Flatten groups from High down to Unknown."""
        return [cluster for group in GROUP_ORDER for cluster in self.groups.get(group, [])]


class PriorityRanker:
    """Scores every cluster in a batch and groups them for triage."""

    def __init__(self, config: Optional[Dict] = None, scorer: Optional[PriorityScorer] = None):
        """Initialize ranker.

        Args:
            config: Optional configuration dictionary
            scorer: Optional pre-built priority scorer
        """
        self.config = config or {}
        self.scorer = scorer or PriorityScorer(config)

    def rank(self, batch: RankingBatch) -> RankingResult:
        """Rank a batch of clusters.

        Args:
            batch: Clusters of one analysis run

        Returns:
            RankingResult with High, Medium, Low and Unknown groups

        Raises:
            InvalidInput: If any analysed cluster violates the scoring contract
        """
        sizes = [cluster.size for cluster in batch.clusters]
        total_data_size = batch.total_data_size
        if total_data_size is None:
            total_data_size = sum(sizes)

        scored = []
        for cluster in batch.clusters:
            score = self._score(cluster, total_data_size)
            scored.append((cluster, score))

        groups: Dict[str, List[RankedCluster]] = {group: [] for group in GROUP_ORDER}
        # sorted() is stable, so equal scores keep their input order
        for cluster, score in sorted(scored, key=_sort_key):
            group = score.level.value if score is not None else UNKNOWN_GROUP
            groups[group].append(
                RankedCluster(
                    id=cluster.id,
                    size=cluster.size,
                    label=cluster.label,
                    priority_score=score.to_dict() if score is not None else None,
                )
            )

        sample_config = self.config.get("scoring", {}).get("sample")
        data_quality = assess_data_quality(sizes, total_data_size, sample_config)

        logger.info(
            f"Ranked {len(batch.clusters)} clusters ({data_quality.level.value} data): "
            + ", ".join(f"{group}={len(items)}" for group, items in groups.items())
        )

        return RankingResult(groups=groups, data_quality=data_quality)

    def _score(self, cluster: ClusterRecord, total_data_size: int) -> Optional[PriorityScore]:
        if cluster.emotional_intensity is None:
            logger.debug(f"Cluster {cluster.id} has no analysis, leaving it unscored")
            return None

        signals = ClusterSignals(
            cluster_size=cluster.size,
            total_data_size=total_data_size,
            emotional_intensity=cluster.emotional_intensity,
            keywords=cluster.keywords,
            existing_solutions=cluster.existing_solutions,
        )
        try:
            return self.scorer.score_cluster(signals)
        except InvalidInput as e:
            raise InvalidInput(f"cluster {cluster.id}: {e}") from e


def _sort_key(item) -> float:
    _, score = item
    return -score.overall if score is not None else 0.0
