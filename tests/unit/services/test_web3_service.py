from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from eth_account import Account

from constants.networks import ContractNames, SupportedNetwork
from governance.services.web3_service import Web3Service
from utils.exceptions import (
    InvalidGasEstimationFactorError,
    NoProviderError,
    NoSignerError,
    TransactionRevertedError,
    UnsupportedNetworkError,
)

SIGNER = "0x3333333333333333333333333333333333333333"
TARGET = "0x2222222222222222222222222222222222222222"


async def _value(value):
    return value


@pytest.fixture
def w3():
    w3 = MagicMock()
    w3.eth.get_block = AsyncMock(return_value={"baseFeePerGas": 10})
    w3.eth.get_transaction_count = AsyncMock(return_value=5)
    w3.eth.estimate_gas = AsyncMock(return_value=21000)
    w3.eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("ab" * 32))
    w3.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 1, "logs": []})
    return w3


@pytest.fixture
def signer():
    signer = MagicMock(address=SIGNER)
    signer.sign_transaction.return_value = MagicMock(raw_transaction=b"\x02signed")
    return signer


def test_gas_factor_bounds():
    for factor in (0, -0.1, 1.5):
        with pytest.raises(InvalidGasEstimationFactorError):
            Web3Service(SupportedNetwork.LOCAL, gas_fee_estimation_factor=factor)
    Web3Service(SupportedNetwork.LOCAL, gas_fee_estimation_factor=1)


def test_missing_provider_and_signer():
    service = Web3Service(SupportedNetwork.LOCAL)
    with pytest.raises(NoProviderError):
        service.get_provider()
    with pytest.raises(NoSignerError):
        service.get_signer()


def test_signer_needs_a_provider(signer):
    service = Web3Service(SupportedNetwork.LOCAL, signer=signer)
    with pytest.raises(NoProviderError):
        service.get_connected_signer()


def test_contract_addresses():
    service = Web3Service(SupportedNetwork.LOCAL, contract_addresses={ContractNames.DAO_FACTORY: TARGET})
    assert service.get_address(ContractNames.DAO_FACTORY) == TARGET
    with pytest.raises(UnsupportedNetworkError):
        service.get_address(ContractNames.MULTISIG_REPO)


@pytest.mark.asyncio
async def test_max_fee_per_gas(w3):
    w3.eth.max_priority_fee = _value(2)
    service = Web3Service(SupportedNetwork.LOCAL, w3=w3)
    assert await service.get_max_fee_per_gas() == 22


@pytest.mark.asyncio
async def test_approximate_gas_fee(w3):
    service = Web3Service(SupportedNetwork.LOCAL, w3=w3, gas_fee_estimation_factor=0.625)
    with patch.object(service, "get_max_fee_per_gas", AsyncMock(return_value=100)):
        estimation = await service.get_approximate_gas_fee(10)
    assert estimation.max == 1000
    assert estimation.average == 625


@pytest.mark.asyncio
async def test_send_transaction(w3, signer):
    w3.eth.max_priority_fee = _value(2)
    service = Web3Service(SupportedNetwork.LOCAL, w3=w3, signer=signer)
    with patch.object(service, "get_chain_id", AsyncMock(return_value=31337)), patch.object(
        service, "get_max_fee_per_gas", AsyncMock(return_value=22)
    ):
        tx_hash = await service.send_transaction(TARGET, b"\x12\x34", value=3)

    assert tx_hash == "0x" + "ab" * 32
    tx = signer.sign_transaction.call_args.args[0]
    assert tx["from"] == SIGNER
    assert tx["data"] == "0x1234"
    assert tx["nonce"] == 5
    assert tx["chainId"] == 31337
    assert tx["gas"] == 21000
    assert tx["maxFeePerGas"] == 22
    w3.eth.send_raw_transaction.assert_awaited_once_with(b"\x02signed")


@pytest.mark.asyncio
async def test_send_transaction_signs_with_the_local_account(w3):
    w3.eth.max_priority_fee = _value(2)
    account = Account.create()
    service = Web3Service(SupportedNetwork.LOCAL, w3=w3, signer=account)
    with patch.object(service, "get_chain_id", AsyncMock(return_value=31337)), patch.object(
        service, "get_max_fee_per_gas", AsyncMock(return_value=22)
    ):
        await service.send_transaction(TARGET, b"\x12\x34")

    raw = w3.eth.send_raw_transaction.call_args.args[0]
    assert Account.recover_transaction(raw) == account.address


@pytest.mark.asyncio
async def test_reverted_transaction(w3):
    w3.eth.wait_for_transaction_receipt = AsyncMock(return_value={"status": 0, "logs": []})
    service = Web3Service(SupportedNetwork.LOCAL, w3=w3)
    with pytest.raises(TransactionRevertedError):
        await service.wait_for_receipt("0x" + "ab" * 32)
