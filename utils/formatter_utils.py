from datetime import datetime, timezone
from typing import Optional, Union

from eth_utils import decode_hex, encode_hex
from hexbytes import HexBytes

BytesLike = Union[bytes, bytearray, HexBytes, str]


def to_bytes(data: Optional[BytesLike]) -> bytes:
    """Accepts raw bytes or a 0x hex string and always returns bytes."""
    if data is None:
        return b""
    if isinstance(data, str):
        if data in ("", "0x"):
            return b""
        return decode_hex(data)
    return bytes(data)


def to_hex(data: Optional[BytesLike]) -> str:
    """0x-prefixed lowercase hex of bytes (or of an already hex string)."""
    return encode_hex(to_bytes(data))


def to_int_or_zero(value: Union[int, str, None]) -> int:
    """Indexer numbers arrive as decimal strings."""
    if value is None or value == "":
        return 0
    return int(value)


def seconds_to_datetime(value: Union[int, str, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def datetime_to_seconds(value: Optional[datetime]) -> int:
    if value is None:
        return 0
    return round(value.timestamp())
