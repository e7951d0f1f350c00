from dataclasses import dataclass

from eth_utils import to_checksum_address

from constants.metadata import OSX_PROPOSAL_ID_REGEX
from utils.exceptions import InvalidProposalIdError

from governance.codecs.address_codec import ensure_address, is_valid_address


@dataclass(frozen=True)
class DecodedProposalId:
    plugin_address: str
    index: int


def is_proposal_id(proposal_id: object) -> bool:
    if not isinstance(proposal_id, str) or OSX_PROPOSAL_ID_REGEX.match(proposal_id) is None:
        return False
    return is_valid_address(proposal_id.rsplit("_", 1)[0])


def encode_proposal_id(plugin_address: str, index: int) -> str:
    """`0x{address}_0x{indexHex}` with the address lowercased."""
    address = ensure_address(plugin_address)
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise InvalidProposalIdError(index)
    return f"{address.lower()}_{hex(index)}"


def decode_proposal_id(proposal_id: str) -> DecodedProposalId:
    if not is_proposal_id(proposal_id):
        raise InvalidProposalIdError(proposal_id)
    # plugin addresses never contain an underscore
    address, index = proposal_id.rsplit("_", 1)
    return DecodedProposalId(plugin_address=to_checksum_address(address), index=int(index, 16))


def to_extended_proposal_id(proposal_id: str) -> str:
    """The indexer keys proposals by the lowercase address and the 32-byte padded index."""
    decoded = decode_proposal_id(proposal_id)
    return f"{decoded.plugin_address.lower()}_0x{decoded.index:064x}"


def to_compact_proposal_id(proposal_id: str) -> str:
    decoded = decode_proposal_id(proposal_id)
    return encode_proposal_id(decoded.plugin_address, decoded.index)
