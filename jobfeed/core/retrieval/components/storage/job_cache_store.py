import asyncio
import json
from typing import Any, Optional

from jobfeed.core.logs import Logger, APP
from jobfeed.core.retrieval.components.storage.storage import KeyValueStorage
from jobfeed.core.retrieval.core.exceptions.cache_corruption_error import CacheCorruptionError
from jobfeed.models.job import JobCollection, JobPosting

LOGGER = Logger(APP)

CACHE_VERSION = 1

'''
stored layout under the cache key:
    {"version": 1, "jobs": [{...}, ...]}

a bare list of jobs (layout without a version) is still read
'''


def encode(collection: JobCollection) -> str:
    return json.dumps({
        'version': CACHE_VERSION,
        'jobs': [job.to_payload() for job in collection]
    })


def decode(raw: str) -> JobCollection:
    """
    Raises:
        CacheCorruptionError: If 'raw' is not a readable job collection
    """
    try:
        data: Any = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise CacheCorruptionError(f"not valid JSON: {e}") from e

    if isinstance(data, dict):
        if data.get('version') != CACHE_VERSION:
            raise CacheCorruptionError(f"unsupported cache version: {data.get('version')!r}")
        data = data.get('jobs')

    if not isinstance(data, list):
        raise CacheCorruptionError(f"expected a list of jobs, got {type(data).__name__}")

    try:
        return tuple(JobPosting.from_payload(item) for item in data)
    except TypeError as e:
        raise CacheCorruptionError(str(e)) from e


class JobCacheStore:
    """
    Write-through cache of the most recent successfully fetched jobs.

    Everything lives under a single key; there is no expiry.
    """

    def __init__(self, storage: KeyValueStorage, key: str = 'jobs'):
        self.storage = storage
        self.key = key

    async def save(self, collection: JobCollection) -> None:
        # one set() call is the atomicity boundary
        await self.storage.set(self.key, encode(collection))
        LOGGER.info(f"(JobCacheStore) Saved {len(collection)} jobs under '{self.key}'")

    async def load(self) -> Optional[JobCollection]:
        """Return the cached jobs, or None if nothing usable is stored. Never raises."""
        try:
            raw = await self.storage.get(self.key)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            LOGGER.error(f"(JobCacheStore) Error reading '{self.key}': {e!r}")
            return None

        if raw is None:
            LOGGER.info(f"(JobCacheStore) Nothing cached under '{self.key}'")
            return None

        try:
            return decode(raw)
        except CacheCorruptionError as e:
            LOGGER.warning(f"(JobCacheStore) Ignoring corrupt cache entry '{self.key}': {e}")
            return None
