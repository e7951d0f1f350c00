from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from governance.services.graphql_service import GraphQLResponseError, GraphQLService
from utils.exceptions import GraphQLError, NoGraphqlNodesAvailableError


@pytest.fixture
def service():
    return GraphQLService(["http://node-a/", "http://node-b"])


def _session_answering(status, body):
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    session = MagicMock()
    session.post.return_value.__aenter__ = AsyncMock(return_value=response)
    session.post.return_value.__aexit__ = AsyncMock(return_value=False)
    return session


def test_endpoints_are_normalized(service):
    assert service.endpoints == ["http://node-a", "http://node-b"]
    assert service.current_endpoint == "http://node-a"


@pytest.mark.asyncio
async def test_ensure_online_moves_to_the_next_node(service):
    with patch.object(service, "is_up", AsyncMock(side_effect=[False, True])):
        await service.ensure_online()
    assert service.current_endpoint == "http://node-b"


@pytest.mark.asyncio
async def test_ensure_online_treats_connection_errors_as_down(service):
    with patch.object(service, "is_up", AsyncMock(side_effect=[aiohttp.ClientError("refused"), True])):
        await service.ensure_online()
    assert service.current_endpoint == "http://node-b"


@pytest.mark.asyncio
async def test_no_node_answers(service):
    with patch.object(service, "is_up", AsyncMock(return_value=False)):
        with pytest.raises(NoGraphqlNodesAvailableError):
            await service.ensure_online()


@pytest.mark.asyncio
async def test_request_returns_data(service):
    with patch.object(service, "is_up", AsyncMock(return_value=True)), patch.object(
        service, "_post", AsyncMock(return_value={"dao": {"id": "0x1"}})
    ) as post:
        result = await service.request("query", {"address": "0x1"}, name="DAO")
    assert result == {"dao": {"id": "0x1"}}
    post.assert_awaited_once_with("query", {"address": "0x1"})


@pytest.mark.asyncio
async def test_request_wraps_failures(service):
    with patch.object(service, "is_up", AsyncMock(return_value=True)), patch.object(
        service, "_post", AsyncMock(side_effect=GraphQLResponseError("boom"))
    ):
        with pytest.raises(GraphQLError) as excinfo:
            await service.request("query", name="DAO")
    assert excinfo.value.model == "DAO"


@pytest.mark.asyncio
async def test_post_rejects_error_payloads(service):
    session = _session_answering(200, b'{"errors": [{"message": "bad field"}]}')
    with patch.object(service, "_get_session", AsyncMock(return_value=session)):
        with pytest.raises(GraphQLResponseError):
            await service._post("query", {})


@pytest.mark.asyncio
async def test_post_rejects_http_errors(service):
    session = _session_answering(502, b"bad gateway")
    with patch.object(service, "_get_session", AsyncMock(return_value=session)):
        with pytest.raises(GraphQLResponseError):
            await service._post("query", {})


@pytest.mark.asyncio
async def test_health_check(service):
    session = _session_answering(200, b'{"data": {"_meta": {"block": {"number": 1}}}}')
    with patch.object(service, "_get_session", AsyncMock(return_value=session)):
        assert await service.is_up()
