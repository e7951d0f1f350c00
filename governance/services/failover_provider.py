from typing import Any, List

from web3 import AsyncHTTPProvider
from web3.providers.async_base import AsyncBaseProvider
from web3.types import RPCEndpoint, RPCResponse

from utils.exceptions import NoProvidersAvailableError
from utils.logger_utils import get_logger

logger = get_logger("Failover Async HTTP Provider")


class FailoverAsyncHTTPProvider(AsyncBaseProvider):
    """
    A Web3 AsyncProvider over a list of upstream JSON-RPC endpoints.
    Requests go to the current endpoint; a failing endpoint hands over to the
    next one (round robin) until every endpoint has been tried once.
    """

    def __init__(self, endpoint_uris: List[str], request_kwargs: Any = None):
        super().__init__()
        self._endpoint_uris: List[str] = []
        self._providers: List[AsyncHTTPProvider] = []

        for uri in endpoint_uris:
            if uri.startswith(("http://", "https://")):
                self._endpoint_uris.append(uri)
                self._providers.append(AsyncHTTPProvider(uri, request_kwargs=request_kwargs))
            else:
                logger.warning(f"FailoverAsyncHTTPProvider only supports http/https. Skipping {uri}")

        if not self._providers:
            raise ValueError("No valid http/https providers found in the provided list.")

        self._current_index = 0

    @property
    def current_endpoint(self) -> str:
        return self._endpoint_uris[self._current_index]

    @property
    def endpoint_count(self) -> int:
        return len(self._providers)

    def rotate(self) -> None:
        self._current_index = (self._current_index + 1) % len(self._providers)

    async def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        total_providers = len(self._providers)

        for _ in range(total_providers):
            provider = self._providers[self._current_index]
            try:
                return await provider.make_request(method, params)
            except Exception as e:
                logger.warning(f"Provider {self.current_endpoint} failed with error: {e}. Switching to next provider.")
                self.rotate()

        raise NoProvidersAvailableError(total_providers)

    async def disconnect(self) -> None:
        for provider in self._providers:
            await provider.disconnect()
