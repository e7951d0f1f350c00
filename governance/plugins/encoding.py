from typing import List, Optional, Union

from constants.networks import SupportedNetwork

from governance.codecs.address_codec import ensure_address
from governance.codecs.voting_settings_codec import voting_settings_to_contract
from governance.context import network_contract_address, resolve_network
from governance.models.common import DaoAction
from governance.models.proposal import VotingSettings
from governance.plugins.core import PluginClientCore


class PluginClientEncoding(PluginClientCore):
    """Actions a DAO proposal can run against a governance plugin."""

    def plugin_repo_address(self, network: Optional[Union[str, SupportedNetwork]] = None) -> str:
        """
        PluginRepo of the family. Defaults to the context's deployment, so
        address overrides given to the Context apply.
        """
        if network is None or resolve_network(network) == self.context.network:
            return self.context.get_address(self.family.repo_role)
        return network_contract_address(network, self.family.repo_role)

    def _members_action(self, function_name: str, plugin_address: str, members: List[str]) -> DaoAction:
        addresses = [ensure_address(member) for member in members]
        data = self.family.interface.encode_function_data(function_name, [addresses])
        return DaoAction(to=ensure_address(plugin_address), data=data)


class MajorityVotingClientEncoding(PluginClientEncoding):
    def update_plugin_settings_action(self, plugin_address: str, params: VotingSettings) -> DaoAction:
        settings = voting_settings_to_contract(params, self.family.ratio_digits)
        data = self.family.interface.encode_function_data("updateVotingSettings", [settings])
        return DaoAction(to=ensure_address(plugin_address), data=data)
