from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from constants.networks import ContractNames

from governance.contracts.contract_interface import ContractInterface
from governance.models.common import ProposalMetadata
from governance.models.proposal import AnyProposal, AnyProposalListItem, CreateProposalBaseParams


@dataclass(frozen=True)
class PluginFamily(object):
    """
    What tells one governance plugin apart from another: its contract ABI, its
    indexer entities and mappers, the scale of its ratios and the arguments
    its createProposal takes.
    """

    name: str
    # Indexer entity prefix, e.g. `tokenVoting` for `tokenVotingProposal`
    entity: str
    interface: ContractInterface
    repo_role: ContractNames
    # Indexer flag saying the proposal passed
    executable_field: str
    proposal_query: str
    proposals_query: str
    to_proposal: Callable[[Dict[str, Any], ProposalMetadata], AnyProposal]
    to_proposal_list_item: Callable[[Dict[str, Any], ProposalMetadata], AnyProposalListItem]
    # (params, metadata bytes, allow failure map, start seconds, end seconds) -> createProposal args
    create_proposal_args: Callable[[CreateProposalBaseParams, bytes, int, int, int], List[Any]]
    ratio_digits: Optional[int] = None

    @property
    def proposal_key(self) -> str:
        return f"{self.entity}Proposal"

    @property
    def proposals_key(self) -> str:
        return f"{self.entity}Proposals"

    @property
    def plugin_key(self) -> str:
        return f"{self.entity}Plugin"
