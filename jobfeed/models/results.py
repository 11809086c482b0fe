from dataclasses import dataclass
from enum import Enum

from jobfeed.models.job import JobCollection


class Origin(Enum):
    FRESH = 'fresh'     # live remote call
    CACHED = 'cached'   # last-known-good copy from storage
    EMPTY = 'empty'     # neither


@dataclass(frozen=True)
class RetrievalResult:
    jobs: JobCollection
    origin: Origin

    @property
    def is_fresh(self) -> bool:
        return self.origin is Origin.FRESH

    @property
    def is_stale(self) -> bool:
        return self.origin is Origin.CACHED

    @property
    def is_empty(self) -> bool:
        return self.origin is Origin.EMPTY
