from constants.permissions import PERMISSION_NAMES, permission_id
from utils.formatter_utils import BytesLike, to_bytes


def encode_permission(name: str) -> bytes:
    return permission_id(name)


def decode_permission(permission_hash: BytesLike) -> str:
    """Registry reverse lookup; unknown ids give an empty string."""
    return PERMISSION_NAMES.get(to_bytes(permission_hash), "")
