class RetrievalError(Exception):
    """Base class for failures inside a job retrieval."""
    pass
