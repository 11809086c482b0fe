import asyncio
import json

from jobfeed.core.logs import Logger, APP
from jobfeed.core.retrieval.components.fetchers.core.fetcher import ContentFetcher
from jobfeed.core.retrieval.core.exceptions.malformed_response_error import MalformedResponseError
from jobfeed.core.retrieval.core.exceptions.network_error import NetworkError
from jobfeed.models.job import JobCollection, JobPosting

LOGGER = Logger(APP)


class RemoteJobSource:
    """
    Wraps one request to the job-listing endpoint.

    No retries: every call to fetch_remote() is exactly one attempt.
    """

    def __init__(self, fetcher: ContentFetcher, url: str):
        self.fetcher = fetcher
        self.url = url

    async def fetch_remote(self) -> JobCollection:
        """
        Raises:
            NetworkError: If the fetch capability fails for any reason
            MalformedResponseError: If the body is not a JSON list of objects
        """
        try:
            body = await self.fetcher.fetch(self.url)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise NetworkError(self.url, f"{type(e).__name__}: {e}") from e

        jobs = self._parse(body)
        LOGGER.info(f"{self.url} --- (RemoteJobSource) Received {len(jobs)} jobs")
        return jobs

    def _parse(self, body: str) -> JobCollection:
        try:
            data = json.loads(body)
        except (TypeError, ValueError, RecursionError) as e:
            raise MalformedResponseError(self.url, f"body is not valid JSON ({e})", str(body)) from e

        if not isinstance(data, list):
            raise MalformedResponseError(
                self.url,
                f"expected a list of jobs, got {type(data).__name__}",
                body
            )

        # validate every element before anything is returned
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise MalformedResponseError(
                    self.url,
                    f"job at index {index} is {type(item).__name__}, not an object",
                    body
                )

        return tuple(JobPosting.from_payload(item) for item in data)
