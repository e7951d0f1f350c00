from typing import Any, Dict, Optional, Type, TypeVar

import orjson
from pydantic import BaseModel

from constants.metadata import (
    EMPTY_DAO_METADATA_LINK,
    EMPTY_PROPOSAL_METADATA_LINK,
    HEX_STRING_REGEX,
    IPFS_CID_REGEX,
    IPFS_URI_REGEX,
    UNAVAILABLE_DAO_METADATA,
    UNAVAILABLE_PROPOSAL_METADATA,
    UNSUPPORTED_DAO_METADATA_LINK,
    UNSUPPORTED_PROPOSAL_METADATA_LINK,
)
from utils.async_utils import with_timeout_or_default
from utils.exceptions import InvalidCidError
from utils.formatter_utils import to_bytes
from utils.logger_utils import get_logger

from governance.models.common import DaoMetadata, ProposalMetadata
from governance.services.ipfs_service import IPFSService

logger = get_logger("Metadata Resolver")

M = TypeVar("M", bound=BaseModel)


def decode_metadata_uri(value: Optional[str]) -> str:
    """Indexers and contracts carry the uri either as text or as its utf-8 bytes in hex."""
    if not value:
        return ""
    if value.startswith("0x") and HEX_STRING_REGEX.match(value):
        try:
            return to_bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return value
    return value


def resolve_ipfs_cid(uri: str) -> str:
    """CID of an `ipfs://<cid>` uri or of a bare CID. Raises InvalidCidError otherwise."""
    match = IPFS_URI_REGEX.match(uri)
    if match:
        return match.group(1)
    if IPFS_CID_REGEX.match(uri):
        return uri
    raise InvalidCidError(uri)


async def fetch_json(ipfs: IPFSService, uri: str) -> Dict[str, Any]:
    cid = resolve_ipfs_cid(uri)
    return orjson.loads(await ipfs.fetch_string(cid))


async def _resolve(
    ipfs: IPFSService,
    uri: Optional[str],
    model: Type[M],
    empty: Dict[str, Any],
    unsupported: Dict[str, Any],
    unavailable: Dict[str, Any],
    timeout: Optional[float],
    label: str,
) -> M:
    uri = decode_metadata_uri(uri)
    if not uri:
        return model.model_validate(empty)
    try:
        resolve_ipfs_cid(uri)
    except InvalidCidError:
        logger.warning(f"{label}: unsupported metadata link {uri!r}")
        return model.model_validate(unsupported)

    async def load() -> M:
        return model.model_validate(await fetch_json(ipfs, uri))

    # Metadata is never fatal to a read; any failure becomes the sentinel
    return await with_timeout_or_default(
        load(),
        timeout,
        lambda e: model.model_validate(unavailable),
        label=f"{label} metadata {uri}",
    )


async def resolve_proposal_metadata(
    ipfs: IPFSService, uri: Optional[str], timeout: Optional[float] = None, label: str = "proposal"
) -> ProposalMetadata:
    return await _resolve(
        ipfs,
        uri,
        ProposalMetadata,
        EMPTY_PROPOSAL_METADATA_LINK,
        UNSUPPORTED_PROPOSAL_METADATA_LINK,
        UNAVAILABLE_PROPOSAL_METADATA,
        timeout,
        label,
    )


async def resolve_dao_metadata(
    ipfs: IPFSService, uri: Optional[str], timeout: Optional[float] = None, label: str = "dao"
) -> DaoMetadata:
    return await _resolve(
        ipfs,
        uri,
        DaoMetadata,
        EMPTY_DAO_METADATA_LINK,
        UNSUPPORTED_DAO_METADATA_LINK,
        UNAVAILABLE_DAO_METADATA,
        timeout,
        label,
    )
