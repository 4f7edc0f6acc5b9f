"""FastAPI application for Pain Point Priority Scout."""

from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..orchestrator.ranking import PriorityRanker, RankingBatch
from ..scoring.composite import PriorityScorer
from ..scoring.errors import InvalidInput
from ..scoring.models import ClusterSignals
from ..scoring.quality import classify_data_quality
from ..utils.config import get_config

# Initialize FastAPI app
app = FastAPI(
    title="Pain Point Priority Scout API",
    description="API for scoring and ranking pain point clusters",
    version="1.0.0",
)

# Load configuration
config = get_config()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize scorer and ranker
scorer = PriorityScorer(config.model_dump())
ranker = PriorityRanker(config.model_dump(), scorer=scorer)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Pain Point Priority Scout API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/score")
async def score_cluster(signals: ClusterSignals):
    """Score a single cluster.

    Args:
        signals: Cluster signals from the upstream analysis

    Returns:
        Sub-scores, overall score and priority level
    """
    try:
        return scorer.score_cluster(signals).to_dict()
    except InvalidInput as e:
        logger.warning(f"Rejected scoring request: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/rank")
async def rank_clusters(batch: RankingBatch):
    """Score every cluster of a batch and group them by priority level.

    Args:
        batch: Clusters of one analysis run

    Returns:
        Grouped clusters and the batch data quality
    """
    try:
        result = ranker.rank(batch)
    except InvalidInput as e:
        logger.warning(f"Rejected ranking request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return result.model_dump(mode="json")


@app.get("/data-quality")
async def get_data_quality(
    total_data_size: int = Query(..., ge=0, description="Signals across the whole batch"),
):
    """Classify a batch size as reliable, preliminary or exploratory."""
    sample_config = config.scoring.sample.model_dump()
    return {
        "total_data_size": total_data_size,
        "level": classify_data_quality(total_data_size, sample_config).value,
    }
