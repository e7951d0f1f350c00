from typing import Iterable, List, Optional, Protocol

from eth_utils import is_address, to_checksum_address

from constants.metadata import ENS_REGEX
from utils.exceptions import InvalidAddressError, InvalidAddressOrEnsError
from utils.logger_utils import get_logger

logger = get_logger("Address Codec")


class NameResolver(Protocol):
    async def resolve_name(self, name: str) -> Optional[str]: ...


def is_valid_address(address: object) -> bool:
    """True iff `address` is a 0x-prefixed 20-byte hex address (checksum verified when mixed case)."""
    return isinstance(address, str) and address.startswith("0x") and is_address(address)


def is_ens_name(value: object) -> bool:
    return isinstance(value, str) and ENS_REGEX.match(value) is not None


def ensure_address(address: object) -> str:
    """Validates an address argument and returns its checksum form."""
    if not is_valid_address(address):
        raise InvalidAddressError(address)
    return to_checksum_address(address)


def ensure_addresses(addresses: Iterable[object]) -> List[str]:
    return [ensure_address(address) for address in addresses]


def ensure_address_or_ens(value: object) -> str:
    """
    Synchronous half of `resolve_address_or_ens`: accepts either a valid address
    or an ENS-looking name and rejects anything else with `InvalidAddressError`
    before any I/O.
    """
    if is_valid_address(value):
        return to_checksum_address(value)
    if is_ens_name(value):
        return value
    raise InvalidAddressError(value)


async def resolve_address_or_ens(value: object, resolver: NameResolver) -> str:
    """
    Returns the checksum address for `value`.
    Addresses are returned as they are; ENS names go through `resolver`.
    """
    candidate = ensure_address_or_ens(value)
    if is_valid_address(candidate):
        return candidate

    resolved = await resolver.resolve_name(candidate)
    if not resolved or not is_valid_address(resolved):
        raise InvalidAddressOrEnsError(value)
    logger.debug(f"Resolved {candidate} to {resolved}")
    return to_checksum_address(resolved)
