import asyncio
from typing import Any, Dict, List, Optional

import aiohttp
import orjson

from utils.exceptions import GraphQLError, NoGraphqlNodesAvailableError
from utils.logger_utils import get_logger

from governance.services.http_service import HttpEndpointService

logger = get_logger("GraphQL Service")

HEALTH_QUERY = "{ _meta { block { number } } }"


class GraphQLResponseError(Exception):
    """The node answered, but with a non 200 status or an `errors` array."""


class GraphQLService(HttpEndpointService):
    """Queries the DAO subgraph through a pool of equivalent GraphQL nodes."""

    no_endpoints_error = NoGraphqlNodesAvailableError

    def __init__(self, nodes: List[str], headers: Optional[Dict[str, str]] = None, timeout: int = 30):
        super().__init__(nodes, headers=headers, timeout=timeout)

    async def _post(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        session = await self._get_session()
        payload = orjson.dumps({"query": query, "variables": variables})
        async with session.post(
            self.current_endpoint, data=payload, headers={"Content-Type": "application/json"}
        ) as response:
            body = await response.read()
            if response.status != 200:
                raise GraphQLResponseError(f"HTTP {response.status}: {body[:200]!r}")
            result = orjson.loads(body)

        errors = result.get("errors")
        if errors:
            raise GraphQLResponseError(f"{errors}")
        return result.get("data") or {}

    async def is_up(self) -> bool:
        try:
            data = await self._post(HEALTH_QUERY, {})
        except (GraphQLResponseError, orjson.JSONDecodeError) as e:
            logger.debug(f"{self.current_endpoint} answered the health query with {e}")
            return False
        return bool(data.get("_meta"))

    async def request(self, query: str, params: Optional[Dict[str, Any]] = None, name: str = "query") -> Dict[str, Any]:
        """
        Runs `query` against the current node and returns its `data` member.
        Raises GraphQLError(name) for HTTP, decoding and query errors.
        """
        await self.ensure_online()
        logger.debug(f"GraphQL {name} on {self.current_endpoint}")
        try:
            return await self._post(query, params or {})
        except (aiohttp.ClientError, asyncio.TimeoutError, GraphQLResponseError, orjson.JSONDecodeError) as e:
            logger.warning(f"GraphQL {name} failed on {self.current_endpoint}: {e}")
            raise GraphQLError(name, e) from e
