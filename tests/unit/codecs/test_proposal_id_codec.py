import pytest
from hypothesis import given, strategies as st

from governance.codecs.proposal_id_codec import (
    decode_proposal_id,
    encode_proposal_id,
    is_proposal_id,
    to_compact_proposal_id,
    to_extended_proposal_id,
)
from utils.exceptions import InvalidAddressError, InvalidProposalIdError

PLUGIN = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_encode_lowercases_the_address():
    assert encode_proposal_id(PLUGIN, 10) == f"{PLUGIN.lower()}_0xa"
    assert encode_proposal_id(PLUGIN, 0) == f"{PLUGIN.lower()}_0x0"


@given(st.integers(min_value=0, max_value=2**256 - 1))
def test_decode_inverts_encode(index):
    decoded = decode_proposal_id(encode_proposal_id(PLUGIN, index))
    assert decoded.plugin_address == PLUGIN
    assert decoded.index == index


def test_rejects_malformed_ids():
    for value in ["", "0x1234_0x1", f"{PLUGIN}_12", f"{PLUGIN}0x1", f"{PLUGIN}_0x", 42]:
        assert not is_proposal_id(value)
        with pytest.raises(InvalidProposalIdError):
            decode_proposal_id(value)


def test_encode_validates_inputs():
    with pytest.raises(InvalidAddressError):
        encode_proposal_id("0x12", 1)
    with pytest.raises(InvalidProposalIdError):
        encode_proposal_id(PLUGIN, -1)


def test_extended_and_compact_forms():
    extended = to_extended_proposal_id(f"{PLUGIN.lower()}_0x1")
    assert extended == f"{PLUGIN.lower()}_0x{'0' * 63}1"
    assert to_compact_proposal_id(extended) == f"{PLUGIN.lower()}_0x1"
