from dataclasses import dataclass
from typing import List, Optional

from jobfeed.core.retrieval.job_retriever import JobRetriever
from jobfeed.models.job import JobPosting
from jobfeed.models.results import Origin, RetrievalResult
from jobfeed.views.job_detail import JobDetailScreen

STALE_BANNER = 'Offline: showing previously loaded jobs'
EMPTY_BANNER = 'No jobs available right now'


@dataclass(frozen=True)
class JobRow:
    key: str
    title: Optional[str]
    company: Optional[str]
    location: Optional[str]
    logo_url: Optional[str]


def row_key(job: JobPosting, index: int) -> str:
    """Use the job id when present, the list position otherwise."""
    if job.id is not None and job.id != '':
        return str(job.id)
    return str(index)


class JobListScreen:
    """
    List view of job postings. Owns the loading phase; the retriever owns
    everything else.
    """

    def __init__(self, retriever: JobRetriever):
        self.retriever = retriever
        self.loading = False
        self.result: Optional[RetrievalResult] = None

    async def activate(self) -> RetrievalResult:
        """One retrieval per activation."""
        self.loading = True
        try:
            self.result = await self.retriever.fetch_jobs()
        finally:
            self.loading = False

        return self.result

    def rows(self) -> List[JobRow]:
        if self.result is None:
            return []

        return [
            JobRow(
                key=row_key(job, index),
                title=job.title,
                company=job.company,
                location=job.location,
                logo_url=job.logo_url
            )
            for index, job in enumerate(self.result.jobs)
        ]

    def banner(self) -> Optional[str]:
        if self.result is None:
            return None
        if self.result.origin is Origin.CACHED:
            return STALE_BANNER
        if self.result.origin is Origin.EMPTY:
            return EMPTY_BANNER
        return None

    def select(self, index: int) -> JobDetailScreen:
        """
        Raises:
            LookupError: If nothing has been loaded yet
            IndexError: If 'index' is outside the loaded list
        """
        if self.result is None:
            raise LookupError("select() called before activate()")

        if not 0 <= index < len(self.result.jobs):
            raise IndexError(f"no job at index {index}")

        return JobDetailScreen(self.result.jobs[index])
