"""Data models for cluster priority scoring."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


# ============================================================================
# Pydantic Models (for data transfer)
# ============================================================================


class ExistingSolution(BaseModel):
    """Competitor entry extracted by the upstream LLM analysis."""

    name: str
    limitation: str = ""


class ClusterSignals(BaseModel):
    """Already-derived signals for one cluster of one analysis batch."""

    cluster_size: int  # Signals in this cluster
    total_data_size: int  # Signals across the whole batch
    emotional_intensity: float  # 0-5, assessed upstream

    keywords: List[str] = Field(default_factory=list)
    existing_solutions: List[ExistingSolution] = Field(default_factory=list)


# ============================================================================
# Scoring output
# ============================================================================


class PriorityLevel(str, Enum):
    """Discrete triage level derived from the overall score."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class PriorityScore:
    """Final priority assessment for a cluster."""

    demand_intensity: float
    market_size: float
    competition: float  # 5 = blue ocean, 0 = saturated

    overall: float
    level: PriorityLevel

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["level"] = self.level.value
        return data
