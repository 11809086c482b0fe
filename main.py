import asyncio

from jobfeed.core.config import JOBS_URL, JOBS_CACHE_DIR, JOBS_CACHE_KEY, REQUEST_TIMEOUT
from jobfeed.core.retrieval.retriever_factory import RetrieverFactory
from jobfeed.core.services.resources.resource_manager import ResourceManager
from jobfeed.views.job_list import JobListScreen


async def main():
    async with ResourceManager(request_timeout=REQUEST_TIMEOUT) as resources:
        factory = RetrieverFactory(resources, JOBS_URL, JOBS_CACHE_DIR, JOBS_CACHE_KEY)
        retriever = await factory.create_job_retriever()

        screen = JobListScreen(retriever)
        await screen.activate()

    banner = screen.banner()
    if banner:
        print(banner)

    for row in screen.rows():
        print(f"[{row.key}] {row.title} - {row.company} ({row.location})")


if __name__ == "__main__":
    asyncio.run(main())
