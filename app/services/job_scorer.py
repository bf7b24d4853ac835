"""
Keyword/location relevance scoring for job postings.
"""
from app.core.matching_config import ScoringTables
from app.schemas.job import JobPosting

KEYWORD_POINTS = 3
LOCATION_POINTS = 2


def build_search_text(posting: JobPosting) -> str:
    """Lower-cased title, location and description joined by spaces."""
    return " ".join(
        [posting.title or "", posting.location or "", posting.description or ""]
    ).lower()


class JobScorer:
    """
    Score postings against a set of scoring tables.

    Every keyword and location preference found as a substring adds its points,
    so overlapping entries ("ros" and "ros2") both count. Each bonus group adds its
    points at most once. Scoring has no state, the same posting always gets the
    same score.
    """

    def __init__(self, tables: ScoringTables):
        self.tables = tables

    def score(self, posting: JobPosting) -> int:
        text = build_search_text(posting)
        score = 0

        for keyword in self.tables.keywords:
            if keyword in text:
                score += KEYWORD_POINTS

        for location in self.tables.location_preferences:
            if location in text:
                score += LOCATION_POINTS

        for bonus in self.tables.bonuses:
            if any(term in text for term in bonus.terms):
                score += bonus.points

        return score
