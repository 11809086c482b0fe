from jobfeed.core.retrieval.core.exceptions.retrieval_error import RetrievalError


class NetworkError(RetrievalError):
    """The request to the job-listing endpoint did not complete."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{url}: {message}")
        self.url = url
