"""
Rank scored postings: attach scores, drop weak matches, best first.
"""
from typing import Iterable, List

from app.core.matching_config import DEFAULT_MIN_SCORE
from app.schemas.job import JobPosting
from app.services.job_scorer import JobScorer


def rank_postings(
    postings: Iterable[JobPosting],
    scorer: JobScorer,
    min_score: int = DEFAULT_MIN_SCORE,
) -> List[JobPosting]:
    """
    Score every posting, keep those scoring at least min_score, sort descending.

    Input postings are not modified; scored copies are returned. The sort is
    stable, so equal scores keep their input order.
    """
    scored = [
        posting.model_copy(update={"score": scorer.score(posting)})
        for posting in postings
    ]
    kept = [posting for posting in scored if posting.score >= min_score]
    return sorted(kept, key=lambda posting: posting.score, reverse=True)
