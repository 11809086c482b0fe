from abc import abstractmethod, ABC


class ContentFetcher(ABC):
    """
    Abstraction for fetching content.
    """

    @abstractmethod
    async def fetch(self, url: str, **kwargs) -> str:
        """Return the raw response body. Raise on any transport failure."""
        pass
