import pytest

from conftest import DAO_ADDRESS, PLUGIN_ADDRESS, SIGNER_ADDRESS, TOKEN_ADDRESS
from constants.networks import LIVE_CONTRACTS, ContractNames, SupportedNetwork
from constants.permissions import ROOT_PERMISSION_ID, Permissions
from governance.client.client import DaoClient
from governance.client.utils import hash_helpers
from governance.models.common import (
    MultiTargetPermission,
    PermissionOperationType,
    PermissionParams,
    TokenType,
    VersionTag,
)
from governance.models.dao import ApplyInstallationParams, ApplyUpdateParams, WithdrawParams
from utils.exceptions import UnexpectedActionError

LOCAL = LIVE_CONTRACTS[SupportedNetwork.LOCAL]
PROCESSOR = LOCAL[ContractNames.PLUGIN_SETUP_PROCESSOR]
REPO = LOCAL[ContractNames.MULTISIG_REPO]


@pytest.fixture
def client(context, web3_service):
    web3_service.get_address.side_effect = lambda role: LOCAL[role]
    return DaoClient(context)


def execute_permission():
    return MultiTargetPermission(
        operation=PermissionOperationType.GRANT,
        where=DAO_ADDRESS,
        who=PLUGIN_ADDRESS,
        permission_id=bytes.fromhex("ab" * 32),
    )


def test_grant_action_round_trip(client):
    params = PermissionParams(where=DAO_ADDRESS, who=SIGNER_ADDRESS, permission=Permissions.EXECUTE_PERMISSION)
    action = client.encoding.grant_action(DAO_ADDRESS, params)

    decoded = client.decoding.grant_action(action.data)

    assert action.to == DAO_ADDRESS
    assert (decoded.where, decoded.who, decoded.permission) == (DAO_ADDRESS, SIGNER_ADDRESS, "EXECUTE_PERMISSION")


def test_revoke_is_not_a_grant(client):
    params = PermissionParams(where=DAO_ADDRESS, who=SIGNER_ADDRESS, permission=Permissions.ROOT_PERMISSION)
    action = client.encoding.revoke_action(DAO_ADDRESS, params)
    with pytest.raises(UnexpectedActionError):
        client.decoding.grant_action(action.data)


def test_apply_installation_is_bracketed_by_root_permission(client):
    params = ApplyInstallationParams(
        plugin_address=PLUGIN_ADDRESS,
        plugin_repo=REPO,
        version_tag=VersionTag(release=1, build=2),
        permissions=[execute_permission()],
        helpers=[TOKEN_ADDRESS],
    )
    grant, call, revoke = client.encoding.apply_installation_action(DAO_ADDRESS, params)

    for permission in (client.decoding.grant_action(grant.data), client.decoding.revoke_action(revoke.data)):
        assert permission.permission == "ROOT_PERMISSION"
        assert permission.permission_id == ROOT_PERMISSION_ID
        assert permission.who == PROCESSOR
        assert permission.where == DAO_ADDRESS
    assert call.to == PROCESSOR

    decoded = client.decoding.apply_installation_action(call.data)
    assert decoded.plugin_address == PLUGIN_ADDRESS
    assert decoded.version_tag == VersionTag(release=1, build=2)
    assert decoded.permissions == [execute_permission()]
    assert decoded.helpers_hash == hash_helpers([TOKEN_ADDRESS])


def test_apply_update_also_grants_plugin_upgrade(client):
    params = ApplyUpdateParams(
        plugin_address=PLUGIN_ADDRESS,
        plugin_repo=REPO,
        version_tag=VersionTag(release=1, build=3),
        init_data=b"\x01\x02",
        permissions=[],
    )
    actions = client.encoding.apply_update_action(DAO_ADDRESS, params)

    assert len(actions) == 5
    first, second = (client.decoding.grant_action(action.data) for action in actions[:2])
    fourth, fifth = (client.decoding.revoke_action(action.data) for action in actions[3:])
    assert (first.permission, first.where) == ("UPGRADE_PLUGIN_PERMISSION", PLUGIN_ADDRESS)
    assert second.permission == fourth.permission == "ROOT_PERMISSION"
    assert (fifth.permission, fifth.where) == ("UPGRADE_PLUGIN_PERMISSION", PLUGIN_ADDRESS)
    assert client.decoding.apply_update_action(actions[2].data).init_data == b"\x01\x02"


@pytest.mark.asyncio
async def test_native_withdraw(client):
    action = await client.encoding.withdraw_action(WithdrawParams(recipient_address_or_ens=SIGNER_ADDRESS, amount=7))

    assert (action.to, action.value, action.data) == (SIGNER_ADDRESS, 7, b"")
    decoded = client.decoding.withdraw_action(action.to, action.value, action.data)
    assert decoded.type == TokenType.NATIVE
    assert decoded.amount == 7


@pytest.mark.asyncio
async def test_erc20_withdraw(client):
    params = WithdrawParams(
        type=TokenType.ERC20, recipient_address_or_ens=SIGNER_ADDRESS, token_address=TOKEN_ADDRESS, amount=3
    )
    action = await client.encoding.withdraw_action(params)

    decoded = client.decoding.withdraw_action(action.to, action.value, action.data)
    assert decoded.token_address == TOKEN_ADDRESS
    assert decoded.recipient_address == SIGNER_ADDRESS
    assert decoded.amount == 3


def test_metadata_uri_round_trip(client):
    action = client.encoding.update_dao_metadata_raw_action(DAO_ADDRESS, "ipfs://QmXhJawTJ3PkoKMyF3a4D89zybAHjpcGivkb7F1NkHAjpo")
    assert client.decoding.update_dao_metadata_raw_action(action.data) == (
        "ipfs://QmXhJawTJ3PkoKMyF3a4D89zybAHjpcGivkb7F1NkHAjpo"
    )


def test_find_interface(client):
    action = client.encoding.set_dao_uri_action(DAO_ADDRESS, "https://example.org")

    found = client.decoding.find_interface(action.data)

    assert found.function_name == "setDaoURI"
    assert found.id == "setDaoURI(string)"
    assert found.hash == "0x" + action.data[:4].hex()
    assert client.decoding.find_interface(b"\xde\xad\xbe\xef") is None
