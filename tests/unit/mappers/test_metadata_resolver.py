from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest

from constants.metadata import (
    EMPTY_PROPOSAL_METADATA_LINK,
    UNAVAILABLE_DAO_METADATA,
    UNAVAILABLE_PROPOSAL_METADATA,
    UNSUPPORTED_PROPOSAL_METADATA_LINK,
)
from governance.mappers.metadata_resolver import (
    decode_metadata_uri,
    resolve_dao_metadata,
    resolve_ipfs_cid,
    resolve_proposal_metadata,
)
from utils.exceptions import InvalidCidError, IpfsFetchError

CID = "QmXhJawTJ3PkoKMyF3a4D89zybAHjpcGivkb7F1NkHAjpo"


@pytest.fixture
def ipfs():
    service = MagicMock()
    service.fetch_string = AsyncMock()
    return service


def test_decode_metadata_uri():
    uri = f"ipfs://{CID}"
    assert decode_metadata_uri("0x" + uri.encode().hex()) == uri
    assert decode_metadata_uri(uri) == uri
    assert decode_metadata_uri(None) == ""


def test_resolve_ipfs_cid():
    assert resolve_ipfs_cid(f"ipfs://{CID}") == CID
    assert resolve_ipfs_cid(CID) == CID
    with pytest.raises(InvalidCidError):
        resolve_ipfs_cid("https://example.org/metadata.json")


@pytest.mark.asyncio
async def test_resolves_pinned_json(ipfs):
    ipfs.fetch_string.return_value = orjson.dumps({"title": "Hello", "summary": "World"}).decode()
    metadata = await resolve_proposal_metadata(ipfs, f"ipfs://{CID}")
    assert metadata.title == "Hello"
    ipfs.fetch_string.assert_awaited_once_with(CID)


@pytest.mark.asyncio
async def test_empty_uri(ipfs):
    metadata = await resolve_proposal_metadata(ipfs, "")
    assert metadata.title == EMPTY_PROPOSAL_METADATA_LINK["title"]
    ipfs.fetch_string.assert_not_called()


@pytest.mark.asyncio
async def test_unsupported_link_is_not_fetched(ipfs):
    metadata = await resolve_proposal_metadata(ipfs, "https://example.org/metadata.json")
    assert metadata.title == UNSUPPORTED_PROPOSAL_METADATA_LINK["title"]
    ipfs.fetch_string.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_failure_gives_unavailable(ipfs):
    ipfs.fetch_string.side_effect = IpfsFetchError(CID)
    metadata = await resolve_proposal_metadata(ipfs, f"ipfs://{CID}")
    assert metadata.title == UNAVAILABLE_PROPOSAL_METADATA["title"]


@pytest.mark.asyncio
async def test_invalid_json_gives_unavailable(ipfs):
    ipfs.fetch_string.return_value = "{not json"
    metadata = await resolve_dao_metadata(ipfs, f"ipfs://{CID}")
    assert metadata.name == UNAVAILABLE_DAO_METADATA["name"]
