import pytest

from governance.contracts.interfaces import ERC20_INTERFACE, MULTISIG_INTERFACE, TOKEN_VOTING_INTERFACE
from utils.exceptions import UnexpectedActionError
from utils.formatter_utils import to_hex

OWNER = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
SPENDER = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"


def test_function_selector():
    assert ERC20_INTERFACE.get_function_signature("transfer") == "transfer(address,uint256)"
    assert to_hex(ERC20_INTERFACE.get_function_selector("transfer")) == "0xa9059cbb"
    assert ERC20_INTERFACE.get_function_by_selector("0xa9059cbb") == "transfer"


def test_tuple_arguments_are_expanded():
    signature = MULTISIG_INTERFACE.get_function_signature("updateMultisigSettings")
    assert signature == "updateMultisigSettings((bool,uint16))"


def test_encode_decode_call():
    data = ERC20_INTERFACE.encode_function_data("transfer", [SPENDER.lower(), 10])
    assert data[:4].hex() == "a9059cbb"
    assert ERC20_INTERFACE.decode_function_data("transfer", data) == (SPENDER, 10)


def test_decode_rejects_other_selector():
    data = ERC20_INTERFACE.encode_function_data("approve", [SPENDER, 10])
    with pytest.raises(UnexpectedActionError):
        ERC20_INTERFACE.decode_function_data("transfer", data)


def test_function_result():
    encoded = TOKEN_VOTING_INTERFACE.encode_function_result("canExecute", [True])
    assert TOKEN_VOTING_INTERFACE.decode_function_result("canExecute", encoded) == (True,)


def test_unknown_function():
    with pytest.raises(KeyError):
        ERC20_INTERFACE.encode_function_data("burn", [])


def test_logs():
    log = ERC20_INTERFACE.encode_log("Approval", {"owner": OWNER, "spender": SPENDER, "value": 7})
    other = {"topics": [b"\x00" * 32], "data": b""}
    found = ERC20_INTERFACE.find_log([other, log], "Approval")
    assert found is log
    assert ERC20_INTERFACE.parse_log("Approval", found) == {"owner": OWNER, "spender": SPENDER, "value": 7}
    assert ERC20_INTERFACE.find_log([other], "Approval") is None
