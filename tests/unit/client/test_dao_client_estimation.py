import pytest

from conftest import DAO_ADDRESS, PLUGIN_ADDRESS, SIGNER_ADDRESS, TOKEN_ADDRESS
from constants.networks import LIVE_CONTRACTS, ContractNames, SupportedNetwork
from governance.client.client import DaoClient
from governance.contracts.interfaces import PLUGIN_SETUP_PROCESSOR_INTERFACE
from governance.models.common import GasFeeEstimation, TokenType, VersionTag
from governance.models.dao import (
    DepositParams,
    PrepareUninstallationParams,
    PrepareUpdateParams,
    SetAllowanceParams,
)

LOCAL = LIVE_CONTRACTS[SupportedNetwork.LOCAL]
PROCESSOR = LOCAL[ContractNames.PLUGIN_SETUP_PROCESSOR]
REPO = LOCAL[ContractNames.MULTISIG_REPO]


@pytest.fixture
def client(context, web3_service):
    web3_service.estimate_gas.return_value = 21000
    web3_service.get_approximate_gas_fee.return_value = GasFeeEstimation(average=100, max=200)
    web3_service.get_address.side_effect = lambda role: LOCAL[role]
    return DaoClient(context)


@pytest.mark.asyncio
async def test_native_deposit_estimate_carries_the_value(client, web3_service):
    estimation = await client.estimation.deposit(DepositParams(dao_address_or_ens=DAO_ADDRESS, amount=9))

    assert estimation == GasFeeEstimation(average=100, max=200)
    to, _data = web3_service.estimate_gas.call_args.args
    assert to == DAO_ADDRESS
    assert web3_service.estimate_gas.call_args.kwargs["value"] == 9
    web3_service.get_approximate_gas_fee.assert_awaited_once_with(21000)
    web3_service.send_transaction.assert_not_called()


@pytest.mark.asyncio
async def test_erc20_deposit_estimate(client, web3_service):
    params = DepositParams(type=TokenType.ERC20, dao_address_or_ens=DAO_ADDRESS, token_address=TOKEN_ADDRESS, amount=9)
    await client.estimation.deposit(params)
    assert web3_service.estimate_gas.call_args.kwargs["value"] == 0


@pytest.mark.asyncio
async def test_set_allowance_estimate(client, web3_service):
    params = SetAllowanceParams(spender_address=SIGNER_ADDRESS, token_address=TOKEN_ADDRESS, amount=1)
    await client.estimation.set_allowance(params)
    assert web3_service.estimate_gas.call_args.args[0] == TOKEN_ADDRESS


@pytest.mark.asyncio
async def test_prepare_update_estimate(client, web3_service):
    params = PrepareUpdateParams(
        dao_address_or_ens=DAO_ADDRESS,
        plugin_address=PLUGIN_ADDRESS,
        plugin_repo=REPO,
        current_version=VersionTag(release=1, build=1),
        new_version=VersionTag(release=1, build=2),
    )

    estimation = await client.estimation.prepare_update(params)

    assert estimation == GasFeeEstimation(average=100, max=200)
    to, data = web3_service.estimate_gas.call_args.args
    assert to == PROCESSOR
    assert data[:4] == PLUGIN_SETUP_PROCESSOR_INTERFACE.get_function_selector("prepareUpdate")
    web3_service.send_transaction.assert_not_called()


@pytest.mark.asyncio
async def test_prepare_uninstallation_estimate(client, web3_service):
    params = PrepareUninstallationParams(
        dao_address_or_ens=DAO_ADDRESS,
        plugin_address=PLUGIN_ADDRESS,
        plugin_repo=REPO,
        version=VersionTag(release=1, build=2),
    )

    await client.estimation.prepare_uninstallation(params)

    to, data = web3_service.estimate_gas.call_args.args
    assert to == PROCESSOR
    assert data[:4] == PLUGIN_SETUP_PROCESSOR_INTERFACE.get_function_selector("prepareUninstallation")
