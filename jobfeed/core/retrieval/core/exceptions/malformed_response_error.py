from jobfeed.core.retrieval.core.exceptions.retrieval_error import RetrievalError

EXCERPT_LENGTH = 200


class MalformedResponseError(RetrievalError):
    """The endpoint answered, but not with a list of job objects.

    Not retryable: the remote contract changed.
    """

    def __init__(self, url: str, message: str, body: str = ''):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.excerpt = body[:EXCERPT_LENGTH]
