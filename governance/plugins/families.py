from functools import partial
from typing import Any, List

from constants.networks import ContractNames

from governance.codecs.ratio_codec import ADDRESSLIST_VOTING_RATIO_DIGITS, TOKEN_VOTING_RATIO_DIGITS
from governance.contracts.interfaces import (
    ADDRESSLIST_VOTING_INTERFACE,
    MULTISIG_INTERFACE,
    TOKEN_VOTING_INTERFACE,
)
from governance.graphql_queries.majority_voting import proposal_query, proposals_query
from governance.graphql_queries.multisig import QUERY_MULTISIG_PROPOSAL, QUERY_MULTISIG_PROPOSALS
from governance.mappers.proposal_mapper import (
    to_majority_voting_proposal,
    to_majority_voting_proposal_list_item,
    to_multisig_proposal,
    to_multisig_proposal_list_item,
)
from governance.models.proposal import (
    CreateMajorityVotingProposalParams,
    CreateMultisigProposalParams,
    VoteValues,
)
from governance.plugins.family import PluginFamily


def _action_tuples(params) -> List[tuple]:
    return [action.as_tuple() for action in params.actions]


def majority_voting_create_proposal_args(
    params: CreateMajorityVotingProposalParams, metadata: bytes, failure_map: int, start: int, end: int
) -> List[Any]:
    creator_vote = params.creator_vote if params.creator_vote is not None else VoteValues.NONE
    return [metadata, _action_tuples(params), failure_map, start, end, int(creator_vote), params.execute_on_pass]


def multisig_create_proposal_args(
    params: CreateMultisigProposalParams, metadata: bytes, failure_map: int, start: int, end: int
) -> List[Any]:
    return [metadata, _action_tuples(params), failure_map, params.approve, params.try_execution, start, end]


TOKEN_VOTING = PluginFamily(
    name="TokenVoting",
    entity="tokenVoting",
    interface=TOKEN_VOTING_INTERFACE,
    repo_role=ContractNames.TOKEN_VOTING_REPO,
    executable_field="executable",
    proposal_query=proposal_query("tokenVoting", weighted=True),
    proposals_query=proposals_query("tokenVoting", weighted=True),
    to_proposal=partial(to_majority_voting_proposal, ratio_digits=TOKEN_VOTING_RATIO_DIGITS, weighted=True),
    to_proposal_list_item=partial(
        to_majority_voting_proposal_list_item, ratio_digits=TOKEN_VOTING_RATIO_DIGITS, weighted=True
    ),
    create_proposal_args=majority_voting_create_proposal_args,
    ratio_digits=TOKEN_VOTING_RATIO_DIGITS,
)

ADDRESSLIST_VOTING = PluginFamily(
    name="AddresslistVoting",
    entity="addresslistVoting",
    interface=ADDRESSLIST_VOTING_INTERFACE,
    repo_role=ContractNames.ADDRESSLIST_VOTING_REPO,
    executable_field="executable",
    proposal_query=proposal_query("addresslistVoting"),
    proposals_query=proposals_query("addresslistVoting"),
    to_proposal=partial(to_majority_voting_proposal, ratio_digits=ADDRESSLIST_VOTING_RATIO_DIGITS),
    to_proposal_list_item=partial(to_majority_voting_proposal_list_item, ratio_digits=ADDRESSLIST_VOTING_RATIO_DIGITS),
    create_proposal_args=majority_voting_create_proposal_args,
    ratio_digits=ADDRESSLIST_VOTING_RATIO_DIGITS,
)

MULTISIG = PluginFamily(
    name="Multisig",
    entity="multisig",
    interface=MULTISIG_INTERFACE,
    repo_role=ContractNames.MULTISIG_REPO,
    executable_field="approvalReached",
    proposal_query=QUERY_MULTISIG_PROPOSAL,
    proposals_query=QUERY_MULTISIG_PROPOSALS,
    to_proposal=to_multisig_proposal,
    to_proposal_list_item=to_multisig_proposal_list_item,
    create_proposal_args=multisig_create_proposal_args,
)
