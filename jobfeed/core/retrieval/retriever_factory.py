from typing import Optional

from jobfeed.core.retrieval.components.fetchers.core.fetcher import ContentFetcher
from jobfeed.core.retrieval.components.fetchers.core.fetcher_types import HttpContentFetcher
from jobfeed.core.retrieval.components.source.remote_job_source import RemoteJobSource
from jobfeed.core.retrieval.components.storage.job_cache_store import JobCacheStore
from jobfeed.core.retrieval.components.storage.storage import FileStorage, KeyValueStorage
from jobfeed.core.retrieval.job_retriever import JobRetriever
from jobfeed.core.services.resources.resource_manager import ResourceManager
from jobfeed.core.logs import Logger, APP

LOGGER = Logger(APP)


class RetrieverFactory:
    """
    Creates a JobRetriever with proper dependencies.

    Example usage:
        async with ResourceManager(request_timeout=30) as resources:
            factory = RetrieverFactory(resources, JOBS_URL, JOBS_CACHE_DIR)
            retriever = await factory.create_job_retriever()
            result = await retriever.fetch_jobs()
    """

    def __init__(
            self,
            resource_management: ResourceManager,
            url: str,
            cache_dir: str,
            cache_key: str = 'jobs'
    ):
        self.resource_management = resource_management
        self.url = url
        self.cache_dir = cache_dir
        self.cache_key = cache_key

    async def build_http_content_fetcher(self) -> HttpContentFetcher:
        session = await self.resource_management.get_session()

        return HttpContentFetcher(
            session,
            self.resource_management.get_random_user_agent()
        )

    async def create_job_retriever(
            self,
            fetcher: Optional[ContentFetcher] = None,
            storage: Optional[KeyValueStorage] = None
    ) -> JobRetriever:
        LOGGER.info(f"Creating job retriever for {self.url}")
        if fetcher is None:
            fetcher = await self.build_http_content_fetcher()

        if storage is None:
            storage = FileStorage(self.cache_dir)

        source = RemoteJobSource(fetcher, self.url)
        cache = JobCacheStore(storage, self.cache_key)

        return JobRetriever(source, cache)
