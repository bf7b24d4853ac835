"""
Job fetcher service.

Pulls normalized postings from the ATS proxy, which exposes every company board at
<base_url>/<board>/<slug> as a JSON array of {title, location, link} records.
"""
import logging
from typing import Any, Iterable, List, Optional

import httpx

from app.core.matching_config import CompanyTarget
from app.schemas.job import JobPosting

logger = logging.getLogger(__name__)


class ProxyPayloadError(ValueError):
    """Raised when the proxy answers 2xx with a body that is not a list of postings."""


class JobFetcher:
    """
    Fetch postings for a list of companies, one company at a time.

    Companies are requested strictly in order and each request completes before the
    next one starts. A non-success status from the proxy only drops that company;
    transport errors and malformed bodies propagate to the caller.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def build_url(self, target: CompanyTarget) -> str:
        return f"{self.base_url}/{target.board}/{target.slug}"

    def fetch_company_jobs(self, target: CompanyTarget, client: httpx.Client) -> List[JobPosting]:
        """
        Fetch and normalize one company's postings.

        Returns an empty list if the proxy answers with a non-success status.
        """
        url = self.build_url(target)
        response = client.get(url)

        if not response.is_success:
            logger.warning(
                f"Failed to fetch jobs: board={target.board}, slug={target.slug}, "
                f"status={response.status_code}"
            )
            return []

        data = response.json()
        if not isinstance(data, list):
            raise ProxyPayloadError(
                f"Expected a list of postings from {url}, got {type(data).__name__}"
            )

        postings = [_to_posting(record, target) for record in data]
        logger.debug(f"Fetched {len(postings)} postings: board={target.board}, slug={target.slug}")
        return postings

    def fetch_postings(self, targets: Iterable[CompanyTarget]) -> List[JobPosting]:
        """Fetch every target in order and return one flat list of postings."""
        if self._client is not None:
            return self._fetch_all(targets, self._client)

        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return self._fetch_all(targets, client)

    def _fetch_all(self, targets: Iterable[CompanyTarget], client: httpx.Client) -> List[JobPosting]:
        all_jobs: List[JobPosting] = []
        for target in targets:
            all_jobs.extend(self.fetch_company_jobs(target, client))
        return all_jobs


def _to_posting(record: Any, target: CompanyTarget) -> JobPosting:
    if not isinstance(record, dict):
        raise ProxyPayloadError(
            f"Expected posting objects from {target.board}/{target.slug}, got {type(record).__name__}"
        )

    # The proxy never supplies a description
    return JobPosting(
        title=_text(record.get("title")),
        location=_text(record.get("location")),
        url=_text(record.get("link")),
        description="",
        company_slug=target.slug,
        board=target.board,
    )


def _text(value: Any) -> str:
    """Proxy fields may be missing, null or non-string; empty values become ""."""
    return str(value) if value else ""
