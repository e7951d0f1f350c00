import asyncio
from typing import Dict, List, Optional, Union

import aiohttp
import orjson

from utils.exceptions import IpfsError, IpfsFetchError, NoIpfsNodesAvailableError
from utils.logger_utils import get_logger

from governance.services.http_service import HttpEndpointService

logger = get_logger("IPFS Service")


class IPFSService(HttpEndpointService):
    """
    Minimal IPFS HTTP API client (`/add`, `/pin/add`, `/cat`, `/id`).
    Node urls point at the API root, e.g. `https://host/api/v0`.
    """

    no_endpoints_error = NoIpfsNodesAvailableError

    def __init__(self, nodes: List[str], headers: Optional[Dict[str, str]] = None, timeout: int = 30):
        super().__init__(nodes, headers=headers, timeout=timeout)

    async def _post(self, path: str, **kwargs) -> bytes:
        session = await self._get_session()
        async with session.post(f"{self.current_endpoint}/{path}", **kwargs) as response:
            body = await response.read()
            if response.status != 200:
                raise IpfsError(f"IPFS /{path} returned HTTP {response.status}: {body[:200]!r}")
            return body

    async def is_up(self) -> bool:
        try:
            await self._post("id")
        except IpfsError as e:
            logger.debug(f"{self.current_endpoint} is not answering: {e}")
            return False
        return True

    async def add(self, content: Union[str, bytes]) -> str:
        """Uploads `content` and returns its CID."""
        await self.ensure_online()
        data = content.encode("utf-8") if isinstance(content, str) else content
        form = aiohttp.FormData()
        form.add_field("file", data, filename="blob", content_type="application/octet-stream")
        try:
            body = await self._post("add", data=form)
            cid = orjson.loads(body).get("Hash")
        except (aiohttp.ClientError, asyncio.TimeoutError, orjson.JSONDecodeError) as e:
            raise IpfsError(f"IPFS add failed: {e}") from e
        if not cid:
            raise IpfsError("IPFS add returned no hash")
        return cid

    async def pin(self, cid: str) -> None:
        await self.ensure_online()
        try:
            await self._post("pin/add", params={"arg": cid})
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise IpfsError(f"IPFS pin of {cid} failed: {e}") from e

    async def fetch_bytes(self, cid: str) -> bytes:
        await self.ensure_online()
        try:
            return await self._post("cat", params={"arg": cid})
        except (IpfsError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise IpfsFetchError(cid, e) from e

    async def fetch_string(self, cid: str) -> str:
        raw = await self.fetch_bytes(cid)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IpfsFetchError(cid, e) from e
