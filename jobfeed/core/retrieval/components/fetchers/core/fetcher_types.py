import aiohttp

from jobfeed.core.retrieval.components.fetchers.core.fetcher import ContentFetcher
from jobfeed.core.logs import Logger, APP

LOGGER = Logger(APP)


class HttpContentFetcher(ContentFetcher):
    """
    Fetches content via HTTP.
    """

    def __init__(
            self,
            session: aiohttp.ClientSession,
            user_agent: str
    ):
        self.session = session
        self.user_agent = user_agent

    async def fetch(
            self,
            url: str,
            **kwargs
    ) -> str:
        """
        Raises:
            aiohttp.ClientError: On connection failures and non-2xx responses
            asyncio.TimeoutError: If the session timeout expires
        """
        accept = kwargs.get('accept', 'application/json')
        headers = {
            "User-Agent": self.user_agent,
            "Accept": accept
        }

        LOGGER.info(f"{url} --- (HttpContentFetcher) Fetching Content")
        try:
            async with self.session.get(url, headers=headers) as response:
                response.raise_for_status()
                return await response.text()
        except Exception as e:
            LOGGER.error(f"{url} --- (HttpContentFetcher) Error fetching: {e!r}")
            raise
