from unittest.mock import AsyncMock, MagicMock

import pytest

from governance.codecs.address_codec import (
    ensure_address,
    ensure_address_or_ens,
    is_ens_name,
    is_valid_address,
    resolve_address_or_ens,
)
from utils.exceptions import InvalidAddressError, InvalidAddressOrEnsError

CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_valid_addresses():
    assert is_valid_address(CHECKSUMMED)
    assert is_valid_address(CHECKSUMMED.lower())
    assert not is_valid_address(CHECKSUMMED[2:])
    assert not is_valid_address("0x1234")
    assert not is_valid_address(None)


def test_bad_checksum_is_rejected():
    broken = CHECKSUMMED.replace("a", "A", 1)
    assert not is_valid_address(broken)


def test_ensure_address_returns_checksum():
    assert ensure_address(CHECKSUMMED.lower()) == CHECKSUMMED
    with pytest.raises(InvalidAddressError):
        ensure_address("not-an-address")


def test_ens_names():
    assert is_ens_name("my-dao.dao.eth")
    assert not is_ens_name("my-dao.dao.com")
    assert ensure_address_or_ens("my-dao.dao.eth") == "my-dao.dao.eth"
    with pytest.raises(InvalidAddressError):
        ensure_address_or_ens("nothing")


@pytest.mark.parametrize("value", ["0x1234", CHECKSUMMED[:-1], "0x" + "g" * 40, "", None])
def test_malformed_address_is_not_treated_as_ens(value):
    with pytest.raises(InvalidAddressError):
        ensure_address_or_ens(value)


@pytest.mark.asyncio
async def test_resolve_rejects_malformed_address_without_lookup():
    resolver = MagicMock()
    resolver.resolve_name = AsyncMock()
    with pytest.raises(InvalidAddressError):
        await resolve_address_or_ens("0x1234", resolver)
    resolver.resolve_name.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_returns_addresses_without_lookup():
    resolver = MagicMock()
    resolver.resolve_name = AsyncMock()
    assert await resolve_address_or_ens(CHECKSUMMED, resolver) == CHECKSUMMED
    resolver.resolve_name.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_ens_name():
    resolver = MagicMock()
    resolver.resolve_name = AsyncMock(return_value=CHECKSUMMED.lower())
    assert await resolve_address_or_ens("my-dao.dao.eth", resolver) == CHECKSUMMED
    resolver.resolve_name.assert_awaited_once_with("my-dao.dao.eth")


@pytest.mark.asyncio
async def test_resolve_fails_on_empty_resolution():
    resolver = MagicMock()
    resolver.resolve_name = AsyncMock(return_value=None)
    with pytest.raises(InvalidAddressOrEnsError):
        await resolve_address_or_ens("missing.dao.eth", resolver)
