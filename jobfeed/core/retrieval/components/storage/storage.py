import asyncio
import os
import tempfile
from contextlib import suppress
from abc import abstractmethod, ABC
from typing import Optional


class KeyValueStorage(ABC):
    """
    Abstraction for a durable key-value storage region.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get stored value for key, None if never written"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""
        pass


class InMemoryStorage(KeyValueStorage):
    def __init__(self):
        self._storage: dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._storage.get(key)

    async def set(self, key: str, value: str) -> None:
        self._storage[key] = value


class FileStorage(KeyValueStorage):
    """
    One file per key inside 'directory'.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so a reader sees either the old or the new value.
    """

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    async def get(self, key: str) -> Optional[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read, self._path(key))

    async def set(self, key: str, value: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._write, self._path(key), value)

    @staticmethod
    def _read(path: str) -> Optional[str]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            return None

    def _write(self, path: str, value: str) -> None:
        os.makedirs(self.directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix='.tmp_', suffix='.json')
        try:
            f = os.fdopen(fd, 'w', encoding='utf-8')
        except BaseException:
            os.close(fd)
            self._discard(tmp_path)
            raise

        try:
            with f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            self._discard(tmp_path)
            raise

    @staticmethod
    def _discard(tmp_path: str) -> None:
        # the write error is the one to report
        with suppress(OSError):
            os.unlink(tmp_path)
