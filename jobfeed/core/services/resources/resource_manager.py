import asyncio
from typing import Optional

import aiohttp

from jobfeed.core.services.resources.core.base_resource_management import BaseResourceManager


class ResourceManager(BaseResourceManager):

    def __init__(self, request_timeout: Optional[float] = None, **kwargs):
        super().__init__(**kwargs)
        self.request_timeout = request_timeout
        self._session: Optional[aiohttp.ClientSession] = None

        self._session_lock = asyncio.Lock()

    async def get_session(self, **kwargs) -> aiohttp.ClientSession:
        if self._session:
            return self._session

        async with self._session_lock:
            if self._session:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self.request_timeout)
            self._session = await self._stack.enter_async_context(aiohttp.ClientSession(timeout=timeout))
            return self._session

    async def close(self):
        await super().close()
        self._session = None
