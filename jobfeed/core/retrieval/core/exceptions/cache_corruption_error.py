from jobfeed.core.retrieval.core.exceptions.retrieval_error import RetrievalError


class CacheCorruptionError(RetrievalError):
    """A stored cache value could not be decoded into a job collection."""
    pass
