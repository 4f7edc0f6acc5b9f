"""Competition scoring for measuring how crowded a solution space is."""

from typing import Dict, Iterable, Mapping, Optional, Union

from .models import ExistingSolution

# Names the upstream analysis uses when it could not identify competitors
SENTINEL_SUBSTRINGS = (
    "待调研",
    "解析失败",
    "API调用失败",
    "To be researched",
    "Parse failed",
    "API call failed",
)

SolutionEntry = Union[ExistingSolution, Mapping[str, str]]


class CompetitionScorer:
    """Measure competitive landscape from LLM-extracted competitors.

    Placeholder entries left behind by failed upstream extraction are
    discarded before counting, so they never count as real competitors.

    Output: 5.0 (blue ocean) down to 1.0 (red ocean) in whole steps:
    - 0 competitors: 5.0
    - 1 competitor: 4.0
    - 2 competitors: 3.0
    - 3 competitors: 2.0
    - 4+ competitors: 1.0

    NOTE: MORE competitors = LOWER score (inverse relationship)
    """

    STEP_SCORES = (5.0, 4.0, 3.0, 2.0)
    SATURATED_SCORE = 1.0

    def __init__(self, config: Optional[Dict] = None):
        """Initialize competition scorer.

        Args:
            config: Optional scoring configuration dictionary
        """
        sentinels = None
        if config:
            sentinels = config.get("competition", {}).get("sentinel_substrings")

        if sentinels is None:
            sentinels = SENTINEL_SUBSTRINGS
        self.sentinel_substrings = tuple(sentinels)

    def calculate(self, existing_solutions: Iterable[SolutionEntry]) -> float:
        """Calculate competition score.

        Args:
            existing_solutions: Competitor name/limitation entries

        Returns:
            Competition score from 1-5
        """
        valid_count = self.count_valid(existing_solutions)

        if valid_count < len(self.STEP_SCORES):
            return self.STEP_SCORES[valid_count]
        return self.SATURATED_SCORE

    def count_valid(self, existing_solutions: Iterable[SolutionEntry]) -> int:
        """Count entries that are real competitors."""
        return sum(
            1 for solution in existing_solutions
            if not self.is_sentinel(_solution_name(solution))
        )

    def is_sentinel(self, name: str) -> bool:
        return any(marker in name for marker in self.sentinel_substrings)


def _solution_name(solution: SolutionEntry) -> str:
    if isinstance(solution, ExistingSolution):
        return solution.name
    return solution["name"]
