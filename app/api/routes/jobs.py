"""
Matching jobs endpoint.

Fetches postings for the configured companies, scores them and returns the
matches, best first.
"""
import logging
from functools import lru_cache
from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core import config
from app.core.matching_config import MatchingConfig, load_matching_config
from app.schemas.job import JobPosting, ErrorResponse
from app.services.job_fetcher import JobFetcher
from app.services.job_ranker import rank_postings
from app.services.job_scorer import JobScorer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Jobs"])


@lru_cache(maxsize=1)
def get_matching_config() -> MatchingConfig:
    """Matching criteria, loaded once per process (at startup by app.main)."""
    return load_matching_config(config.MATCHER_CONFIG_PATH)


def get_job_fetcher() -> JobFetcher:
    """ATS proxy fetcher dependency."""
    return JobFetcher(config.ATS_PROXY_BASE_URL, timeout=config.ATS_PROXY_TIMEOUT)


@router.get(
    "/matching-jobs",
    status_code=status.HTTP_200_OK,
    response_model=List[JobPosting],
    responses={500: {"model": ErrorResponse}},
)
def matching_jobs(fetcher: JobFetcher = Depends(get_job_fetcher)):
    """
    List postings from the target companies that score at least the threshold.
    
    Companies the proxy answers with an error status are skipped. Any other
    failure, including unreadable matching criteria, returns 500 with a
    generic error body.
    """
    try:
        matching = get_matching_config()
        all_jobs = fetcher.fetch_postings(matching.targets)
        
        scorer = JobScorer(matching.scoring)
        ranked = rank_postings(all_jobs, scorer, matching.min_score)
        
        logger.info(
            f"Matching jobs ranked: fetched={len(all_jobs)}, matched={len(ranked)}, "
            f"min_score={matching.min_score}"
        )
        
        return ranked
        
    except Exception as e:
        logger.error(f"Failed to fetch matching jobs: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch jobs"}
        )
