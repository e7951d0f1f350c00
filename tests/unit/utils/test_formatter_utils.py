from datetime import datetime, timezone

from utils.formatter_utils import datetime_to_seconds, seconds_to_datetime, to_bytes, to_hex, to_int_or_zero


def test_to_bytes_accepts_hex_and_bytes():
    assert to_bytes("0x1234") == b"\x12\x34"
    assert to_bytes(bytearray(b"\x01")) == b"\x01"
    assert to_bytes("0x") == b""
    assert to_bytes(None) == b""


def test_to_hex():
    assert to_hex(b"\xab\xcd") == "0xabcd"
    assert to_hex("0xABCD") == "0xabcd"


def test_indexer_numbers():
    assert to_int_or_zero("42") == 42
    assert to_int_or_zero("") == 0
    assert to_int_or_zero(None) == 0


def test_dates_round_to_seconds():
    moment = datetime(2024, 1, 1, 12, 0, 0, 600000, tzinfo=timezone.utc)
    assert datetime_to_seconds(moment) == 1704110401
    assert datetime_to_seconds(None) == 0
    assert seconds_to_datetime("1704110400") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
    assert seconds_to_datetime(None) is None