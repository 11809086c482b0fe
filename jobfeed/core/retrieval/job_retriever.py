import asyncio
from enum import Enum

from jobfeed.core.logs import Logger, APP
from jobfeed.core.retrieval.components.source.remote_job_source import RemoteJobSource
from jobfeed.core.retrieval.components.storage.job_cache_store import JobCacheStore
from jobfeed.core.retrieval.core.exceptions.malformed_response_error import MalformedResponseError
from jobfeed.core.retrieval.core.exceptions.network_error import NetworkError
from jobfeed.models.results import Origin, RetrievalResult

LOGGER = Logger(APP)


class RetrieverState(Enum):
    IDLE = 'idle'
    REQUESTING = 'requesting'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


class JobRetriever:
    """
    Orchestrates one retrieval: remote first, cache on failure.

    Flow of fetch_jobs():
        1. Request jobs from the remote source
        2. On success, write them through to the cache, return FRESH
        3. On failure, read the cache: CACHED if present, EMPTY otherwise

    Overlapping calls are not deduplicated. Callers that trigger refreshes
    concurrently need their own in-flight guard.
    """

    def __init__(self, source: RemoteJobSource, cache: JobCacheStore):
        self.source = source
        self.cache = cache
        self.state = RetrieverState.IDLE

    async def fetch_jobs(self) -> RetrievalResult:
        """Never raises; every failure ends up in the result's origin."""
        self.state = RetrieverState.REQUESTING

        try:
            jobs = await self.source.fetch_remote()

        except asyncio.CancelledError:
            self.state = RetrieverState.IDLE
            raise

        except NetworkError as e:
            LOGGER.warning(f"(JobRetriever) Network failure, falling back to cache: {e}")
            return await self._fall_back()

        except MalformedResponseError as e:
            LOGGER.error(
                f"(JobRetriever) Remote contract violated, falling back to cache: {e}"
                f" --- body excerpt: {e.excerpt!r}"
            )
            return await self._fall_back()

        except Exception:
            LOGGER.exception("(JobRetriever) Unexpected failure, falling back to cache")
            return await self._fall_back()

        self.state = RetrieverState.SUCCEEDED
        try:
            await self.cache.save(jobs)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            LOGGER.error(f"(JobRetriever) Could not write jobs to cache: {e!r}")

        return RetrievalResult(jobs=jobs, origin=Origin.FRESH)

    async def _fall_back(self) -> RetrievalResult:
        self.state = RetrieverState.FAILED

        cached = await self.cache.load()
        if cached is None:
            LOGGER.warning("(JobRetriever) No cached jobs available, returning empty result")
            return RetrievalResult(jobs=(), origin=Origin.EMPTY)

        LOGGER.info(f"(JobRetriever) Serving {len(cached)} cached jobs")
        return RetrievalResult(jobs=cached, origin=Origin.CACHED)
