from unittest.mock import AsyncMock

import pytest

from governance.services.failover_provider import FailoverAsyncHTTPProvider
from utils.exceptions import NoProvidersAvailableError


def test_skips_non_http_endpoints():
    provider = FailoverAsyncHTTPProvider(["ws://node-a", "http://node-b", "https://node-c"])
    assert provider.endpoint_count == 2
    assert provider.current_endpoint == "http://node-b"


def test_needs_one_http_endpoint():
    with pytest.raises(ValueError):
        FailoverAsyncHTTPProvider(["ws://node-a"])


@pytest.mark.asyncio
async def test_switches_to_the_next_endpoint():
    provider = FailoverAsyncHTTPProvider(["http://node-a", "http://node-b"])
    first, second = provider._providers
    first.make_request = AsyncMock(side_effect=ConnectionError("down"))
    second.make_request = AsyncMock(return_value={"jsonrpc": "2.0", "id": 1, "result": "0x1"})

    response = await provider.make_request("eth_chainId", [])
    assert response["result"] == "0x1"
    assert provider.current_endpoint == "http://node-b"


@pytest.mark.asyncio
async def test_every_endpoint_failing():
    provider = FailoverAsyncHTTPProvider(["http://node-a", "http://node-b"])
    for upstream in provider._providers:
        upstream.make_request = AsyncMock(side_effect=ConnectionError("down"))
    with pytest.raises(NoProvidersAvailableError):
        await provider.make_request("eth_chainId", [])
