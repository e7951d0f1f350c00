import re

# Timeout applied to each metadata fetch when many are done at once (seconds)
MULTI_FETCH_TIMEOUT = 7

_CID_PATTERN = (
    r"(Qm[1-9A-HJ-NP-Za-km-z]{44,})"
    r"|(b[A-Za-z2-7]{58,}|B[A-Z2-7]{58,})"
    r"|(z[1-9A-HJ-NP-Za-km-z]{48,})"
    r"|(F[0-9A-F]{50,})"
)

IPFS_CID_REGEX = re.compile(rf"^({_CID_PATTERN})$")
IPFS_URI_REGEX = re.compile(rf"^ipfs://({_CID_PATTERN})$")
OSX_PROPOSAL_ID_REGEX = re.compile(r"^0x[A-Fa-f0-9]{40}_0x[A-Fa-f0-9]{1,}$")
HEX_STRING_REGEX = re.compile(r"^(0x)?[0-9a-fA-F]*$")
ENS_REGEX = re.compile(r"^(?:[a-z0-9-]+\.)*[a-z0-9-]+\.eth$")
SUBDOMAIN_REGEX = re.compile(r"^[a-z0-9-]+$")

ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"

UNSUPPORTED_PROPOSAL_METADATA_LINK = {
    "title": "(unsupported metadata link)",
    "summary": "(the link to the metadata is not supported)",
    "description": "(the link to the metadata is not supported)",
    "resources": [],
}

EMPTY_PROPOSAL_METADATA_LINK = {
    "title": "(the proposal has no metadata)",
    "summary": "(the current proposal does not have any content defined)",
    "description": "(the current proposal does not have any content defined)",
    "resources": [],
}

UNAVAILABLE_PROPOSAL_METADATA = {
    "title": "(unavailable metadata)",
    "summary": "(the proposal metadata is not available)",
    "description": "(the proposal metadata is not available)",
    "resources": [],
}

UNSUPPORTED_DAO_METADATA_LINK = {
    "name": "(unsupported metadata link)",
    "description": "(the link to the metadata is not supported)",
    "links": [],
}

EMPTY_DAO_METADATA_LINK = {
    "name": "(the DAO has no metadata)",
    "description": "(the current DAO does not have any content defined)",
    "links": [],
}

UNAVAILABLE_DAO_METADATA = {
    "name": "(unavailable metadata)",
    "description": "(the DAO metadata is not available)",
    "links": [],
}
