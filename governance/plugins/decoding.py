from typing import List, Optional

from utils.formatter_utils import BytesLike

from governance.client.decoding import find_interface_in
from governance.codecs.voting_settings_codec import voting_settings_from_contract
from governance.models.common import InterfaceParams
from governance.models.proposal import VotingSettings
from governance.plugins.core import PluginClientCore


class PluginClientDecoding(PluginClientCore):
    """Inverse of the plugin encoders."""

    def _members(self, function_name: str, data: BytesLike) -> List[str]:
        (members,) = self.family.interface.decode_function_data(function_name, data)
        return members

    def find_interface(self, data: BytesLike) -> Optional[InterfaceParams]:
        return find_interface_in([self.family.interface], data)


class MajorityVotingClientDecoding(PluginClientDecoding):
    def update_plugin_settings_action(self, data: BytesLike) -> VotingSettings:
        (settings,) = self.family.interface.decode_function_data("updateVotingSettings", data)
        return voting_settings_from_contract(settings, self.family.ratio_digits)
