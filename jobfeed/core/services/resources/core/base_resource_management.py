'''
outputs resources like sessions
'''
from abc import ABC, abstractmethod
from contextlib import AsyncExitStack

import aiohttp
from fake_useragent import UserAgent


class BaseResourceManager(ABC):

    def __init__(self, **kwargs):
        """manages resources required by application.

            examples: aiohttp.ClientSession
        """
        self._stack = AsyncExitStack()
        self.ua = UserAgent()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._stack.aclose()

    @abstractmethod
    async def get_session(self, **kwargs) -> aiohttp.ClientSession:
        pass

    def get_random_user_agent(self) -> str:
        return self.ua.random
