from typing import Tuple

from utils.exceptions import SizeMismatchError
from utils.formatter_utils import datetime_to_seconds

from governance.codecs.address_codec import ensure_address
from governance.codecs.bitmap_codec import bool_array_to_bitmap
from governance.codecs.proposal_id_codec import decode_proposal_id
from governance.models.proposal import (
    ApproveMultisigProposalParams,
    CreateProposalBaseParams,
    VoteProposalParams,
)
from governance.plugins.family import PluginFamily


def check_create_proposal_params(params: CreateProposalBaseParams) -> Tuple[str, int]:
    """Validates addresses and failsafe flags. Returns the plugin address and the allow failure map."""
    plugin_address = ensure_address(params.plugin_address)
    for action in params.actions:
        ensure_address(action.to)
    failsafe = params.failsafe_actions
    if failsafe is not None and len(failsafe) != len(params.actions):
        raise SizeMismatchError(len(params.actions), len(failsafe))
    return plugin_address, bool_array_to_bitmap(failsafe or [])


def build_create_proposal(family: PluginFamily, params: CreateProposalBaseParams, metadata_uri: str) -> Tuple[str, bytes]:
    plugin_address, failure_map = check_create_proposal_params(params)
    args = family.create_proposal_args(
        params,
        metadata_uri.encode("utf-8"),
        failure_map,
        datetime_to_seconds(params.start_date),
        datetime_to_seconds(params.end_date),
    )
    return plugin_address, family.interface.encode_function_data("createProposal", args)


def build_execute(family: PluginFamily, proposal_id: str) -> Tuple[str, bytes]:
    decoded = decode_proposal_id(proposal_id)
    return decoded.plugin_address, family.interface.encode_function_data("execute", [decoded.index])


def build_vote(family: PluginFamily, params: VoteProposalParams) -> Tuple[str, bytes]:
    decoded = decode_proposal_id(params.proposal_id)
    data = family.interface.encode_function_data(
        "vote", [decoded.index, int(params.vote), params.try_early_execution]
    )
    return decoded.plugin_address, data


def build_approve(family: PluginFamily, params: ApproveMultisigProposalParams) -> Tuple[str, bytes]:
    decoded = decode_proposal_id(params.proposal_id)
    data = family.interface.encode_function_data("approve", [decoded.index, params.try_execution])
    return decoded.plugin_address, data
