import asyncio
from typing import Dict, List, Optional, Type

import aiohttp

from utils.exceptions import NoEndpointsAvailableError
from utils.logger_utils import get_logger

logger = get_logger("HTTP Service")


class HttpEndpointService(object):
    """
    Common base of the services that talk HTTP to a pool of equivalent nodes.
    Keeps one lazily created aiohttp session and the index of the node in use.
    """

    no_endpoints_error: Type[NoEndpointsAvailableError] = NoEndpointsAvailableError

    def __init__(self, endpoints: List[str], headers: Optional[Dict[str, str]] = None, timeout: int = 30):
        self._endpoints = [endpoint.rstrip("/") for endpoint in endpoints]
        self._headers = dict(headers or {})
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._current_index = 0
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def endpoints(self) -> List[str]:
        return list(self._endpoints)

    @property
    def current_endpoint(self) -> str:
        if not self._endpoints:
            raise self.no_endpoints_error(0)
        return self._endpoints[self._current_index]

    def rotate(self) -> None:
        if self._endpoints:
            self._current_index = (self._current_index + 1) % len(self._endpoints)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(limit=100, force_close=False)
            self._session = aiohttp.ClientSession(connector=connector, timeout=self._timeout, headers=self._headers)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def is_up(self) -> bool:
        raise NotImplementedError

    async def ensure_online(self) -> None:
        """Makes sure the current node answers, moving through the pool once if needed."""
        for _ in range(len(self._endpoints)):
            try:
                if await self.is_up():
                    return
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.debug(f"Health check of {self.current_endpoint} failed: {e}")
            logger.warning(f"{self.current_endpoint} is down. Switching to next node.")
            self.rotate()
        raise self.no_endpoints_error(len(self._endpoints))
