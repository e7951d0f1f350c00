from typing import List, Optional, Union

from eth_abi import encode

from constants.networks import SupportedNetwork
from utils.formatter_utils import BytesLike

from governance.codecs.address_codec import ensure_address
from governance.codecs.voting_settings_codec import (
    MULTISIG_SETTINGS_TYPE,
    multisig_settings_from_contract,
    multisig_settings_to_contract,
)
from governance.context import Context
from governance.core import ClientCore
from governance.models.common import DaoAction
from governance.models.dao import PluginInstallItem
from governance.models.proposal import MultisigPluginInstall, MultisigVotingSettings, UpdateMultisigSettingsParams
from governance.plugins.decoding import PluginClientDecoding
from governance.plugins.encoding import PluginClientEncoding
from governance.plugins.estimation import ApprovalClientEstimation
from governance.plugins.families import MULTISIG
from governance.plugins.methods import ApprovalClientMethods

MULTISIG_INSTALL_TYPES = ["address[]", MULTISIG_SETTINGS_TYPE]


class MultisigClientMethods(ApprovalClientMethods):
    family = MULTISIG


class MultisigClientEncoding(PluginClientEncoding):
    family = MULTISIG

    def add_addresses_action(self, plugin_address: str, members: List[str]) -> DaoAction:
        return self._members_action("addAddresses", plugin_address, members)

    def remove_addresses_action(self, plugin_address: str, members: List[str]) -> DaoAction:
        return self._members_action("removeAddresses", plugin_address, members)

    def update_multisig_voting_settings(self, params: UpdateMultisigSettingsParams) -> DaoAction:
        data = self.family.interface.encode_function_data(
            "updateMultisigSettings", [multisig_settings_to_contract(params.voting_settings)]
        )
        return DaoAction(to=ensure_address(params.plugin_address), data=data)

    def get_plugin_install_item(
        self, params: MultisigPluginInstall, network: Optional[Union[str, SupportedNetwork]] = None
    ) -> PluginInstallItem:
        data = encode(
            MULTISIG_INSTALL_TYPES,
            [
                [ensure_address(member) for member in params.members],
                multisig_settings_to_contract(params.voting_settings),
            ],
        )
        return PluginInstallItem(id=self.plugin_repo_address(network), data=data)


class MultisigClientDecoding(PluginClientDecoding):
    family = MULTISIG

    def add_addresses_action(self, data: BytesLike) -> List[str]:
        return self._members("addAddresses", data)

    def remove_addresses_action(self, data: BytesLike) -> List[str]:
        return self._members("removeAddresses", data)

    def update_multisig_voting_settings(self, data: BytesLike) -> MultisigVotingSettings:
        (settings,) = self.family.interface.decode_function_data("updateMultisigSettings", data)
        return multisig_settings_from_contract(settings)


class MultisigClientEstimation(ApprovalClientEstimation):
    family = MULTISIG


class MultisigClient(ClientCore):
    """Client of the Multisig plugin: proposals pass once enough listed members approve."""

    def __init__(self, context: Context):
        super().__init__(context)
        self.methods = MultisigClientMethods(context)
        self.encoding = MultisigClientEncoding(context)
        self.decoding = MultisigClientDecoding(context)
        self.estimation = MultisigClientEstimation(context)
