"""Batch ranking of scored clusters"""

from .ranking import ClusterRecord, PriorityRanker, RankedCluster, RankingBatch, RankingResult

__all__ = ["ClusterRecord", "PriorityRanker", "RankedCluster", "RankingBatch", "RankingResult"]
