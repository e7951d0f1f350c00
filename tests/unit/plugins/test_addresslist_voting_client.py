import pytest
from eth_abi import decode

from conftest import PLUGIN_ADDRESS, SIGNER_ADDRESS, TOKEN_ADDRESS
from constants.networks import SupportedNetwork
from governance.models.proposal import AddresslistVotingPluginInstall, VotingMode, VotingSettings
from governance.plugins.addresslist_voting import ADDRESSLIST_VOTING_INSTALL_TYPES, AddresslistVotingClient
from utils.exceptions import InvalidAddressError, UnsupportedNetworkError

SETTINGS = VotingSettings(support_threshold=0.5, min_participation=0.2, min_duration=3600)


@pytest.fixture
def client(context):
    return AddresslistVotingClient(context)


def test_members_round_trip(client):
    action = client.encoding.add_members_action(PLUGIN_ADDRESS, [SIGNER_ADDRESS, TOKEN_ADDRESS])

    assert action.to == PLUGIN_ADDRESS
    assert client.decoding.add_members_action(action.data) == [SIGNER_ADDRESS, TOKEN_ADDRESS]
    assert client.decoding.find_interface(action.data).function_name == "addAddresses"


def test_remove_members_rejects_bad_addresses(client):
    with pytest.raises(InvalidAddressError):
        client.encoding.remove_members_action(PLUGIN_ADDRESS, ["0x123"])


def test_settings_use_two_ratio_digits(client):
    action = client.encoding.update_plugin_settings_action(PLUGIN_ADDRESS, SETTINGS)

    (settings,) = client.decoding.family.interface.decode_function_data("updateVotingSettings", action.data)

    assert settings[1:3] == (50, 20)
    assert client.decoding.update_plugin_settings_action(action.data) == SETTINGS


def test_install_item(client):
    params = AddresslistVotingPluginInstall(voting_settings=SETTINGS, addresses=[SIGNER_ADDRESS])

    item = client.encoding.get_plugin_install_item(params, "local")

    settings, addresses = decode(ADDRESSLIST_VOTING_INSTALL_TYPES, item.data)
    assert settings == (0, 50, 20, 3600, 0)
    assert addresses == (SIGNER_ADDRESS,)


def test_install_item_needs_a_deployed_repo(client):
    params = AddresslistVotingPluginInstall(voting_settings=SETTINGS, addresses=[])
    with pytest.raises(UnsupportedNetworkError):
        client.encoding.get_plugin_install_item(params, SupportedNetwork.MAINNET)


@pytest.mark.asyncio
async def test_get_settings(client, graphql_service):
    graphql_service.request.return_value = {
        "addresslistVotingPlugin": {
            "minDuration": "3600",
            "minProposerVotingPower": "0",
            "minParticipation": "20",
            "supportThreshold": "50",
            "votingMode": "VoteReplacement",
        }
    }

    settings = await client.methods.get_settings(PLUGIN_ADDRESS)

    assert settings.support_threshold == 0.5
    assert settings.min_participation == 0.2
    assert settings.voting_mode == VotingMode.VOTE_REPLACEMENT


@pytest.mark.asyncio
async def test_get_members(client, graphql_service):
    graphql_service.request.return_value = {
        "addresslistVotingPlugin": {"members": [{"address": SIGNER_ADDRESS}, {"address": TOKEN_ADDRESS}]}
    }
    assert await client.methods.get_members(PLUGIN_ADDRESS) == [SIGNER_ADDRESS, TOKEN_ADDRESS]
    assert graphql_service.request.call_args.args[1] == {"address": PLUGIN_ADDRESS}
