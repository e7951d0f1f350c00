from typing import List, Optional, Union

from eth_abi import encode

from constants.networks import SupportedNetwork
from utils.formatter_utils import BytesLike

from governance.codecs.address_codec import ensure_address
from governance.codecs.voting_settings_codec import VOTING_SETTINGS_TYPE, voting_settings_to_contract
from governance.context import Context
from governance.core import ClientCore
from governance.models.common import DaoAction
from governance.models.dao import PluginInstallItem
from governance.models.proposal import AddresslistVotingPluginInstall
from governance.plugins.decoding import MajorityVotingClientDecoding
from governance.plugins.encoding import MajorityVotingClientEncoding
from governance.plugins.estimation import MajorityVotingClientEstimation
from governance.plugins.families import ADDRESSLIST_VOTING
from governance.plugins.methods import MajorityVotingClientMethods

ADDRESSLIST_VOTING_INSTALL_TYPES = [VOTING_SETTINGS_TYPE, "address[]"]


class AddresslistVotingClientMethods(MajorityVotingClientMethods):
    family = ADDRESSLIST_VOTING


class AddresslistVotingClientEncoding(MajorityVotingClientEncoding):
    family = ADDRESSLIST_VOTING

    def add_members_action(self, plugin_address: str, members: List[str]) -> DaoAction:
        return self._members_action("addAddresses", plugin_address, members)

    def remove_members_action(self, plugin_address: str, members: List[str]) -> DaoAction:
        return self._members_action("removeAddresses", plugin_address, members)

    def get_plugin_install_item(
        self, params: AddresslistVotingPluginInstall, network: Optional[Union[str, SupportedNetwork]] = None
    ) -> PluginInstallItem:
        data = encode(
            ADDRESSLIST_VOTING_INSTALL_TYPES,
            [
                voting_settings_to_contract(params.voting_settings, ADDRESSLIST_VOTING.ratio_digits),
                [ensure_address(address) for address in params.addresses],
            ],
        )
        return PluginInstallItem(id=self.plugin_repo_address(network), data=data)


class AddresslistVotingClientDecoding(MajorityVotingClientDecoding):
    family = ADDRESSLIST_VOTING

    def add_members_action(self, data: BytesLike) -> List[str]:
        return self._members("addAddresses", data)

    def remove_members_action(self, data: BytesLike) -> List[str]:
        return self._members("removeAddresses", data)


class AddresslistVotingClientEstimation(MajorityVotingClientEstimation):
    family = ADDRESSLIST_VOTING


class AddresslistVotingClient(ClientCore):
    """Client of the AddresslistVoting plugin: one address, one vote."""

    def __init__(self, context: Context):
        super().__init__(context)
        self.methods = AddresslistVotingClientMethods(context)
        self.encoding = AddresslistVotingClientEncoding(context)
        self.decoding = AddresslistVotingClientDecoding(context)
        self.estimation = AddresslistVotingClientEstimation(context)
