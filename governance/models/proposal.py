from datetime import datetime
from enum import Enum, IntEnum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from governance.models.common import (
    DaoAction,
    ProposalMetadata,
    ProposalMetadataSummary,
    ProposalSortBy,
    ProposalStatus,
    SortDirection,
    TokenType,
)


class VoteValues(IntEnum):
    # Values of IMajorityVoting.VoteOption, NONE is never cast
    NONE = 0
    ABSTAIN = 1
    YES = 2
    NO = 3


class VotingMode(str, Enum):
    STANDARD = "Standard"
    EARLY_EXECUTION = "EarlyExecution"
    VOTE_REPLACEMENT = "VoteReplacement"


class VotingSettings(BaseModel):
    """Majority voting settings with ratios in [0, 1]."""

    model_config = ConfigDict(populate_by_name=True)

    support_threshold: float = Field(ge=0, le=1)
    min_participation: float = Field(ge=0, le=1)
    min_duration: int = Field(ge=3600, description="Seconds")
    min_proposer_voting_power: int = Field(default=0, ge=0)
    voting_mode: VotingMode = VotingMode.STANDARD


class MultisigVotingSettings(BaseModel):
    min_approvals: int = Field(gt=0)
    only_listed: bool = True


class DaoRef(BaseModel):
    address: str
    name: str = ""


class CreateProposalBaseParams(BaseModel):
    plugin_address: str
    # Either an already pinned `ipfs://` uri or the metadata to pin
    metadata_uri: Optional[str] = None
    metadata: Optional[ProposalMetadata] = None
    actions: List[DaoAction] = Field(default_factory=list)
    # failsafe_actions[i] == True lets action i fail without reverting the proposal
    failsafe_actions: Optional[List[bool]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_metadata(self):
        if not self.metadata_uri and self.metadata is None:
            raise ValueError("metadata_uri or metadata is required")
        return self


class CreateMajorityVotingProposalParams(CreateProposalBaseParams):
    execute_on_pass: bool = False
    creator_vote: Optional[VoteValues] = None


class CreateMultisigProposalParams(CreateProposalBaseParams):
    approve: bool = False
    try_execution: bool = True


class VoteProposalParams(BaseModel):
    proposal_id: str
    vote: VoteValues
    try_early_execution: bool = False


class CanVoteParams(BaseModel):
    proposal_id: str
    voter_address: str
    vote: VoteValues = VoteValues.YES


class ApproveMultisigProposalParams(BaseModel):
    proposal_id: str
    try_execution: bool = False


class CanApproveParams(BaseModel):
    proposal_id: str
    approver_address: str


class ProposalQueryParams(BaseModel):
    dao_address_or_ens: Optional[str] = None
    limit: int = Field(default=10, gt=0, le=1000)
    skip: int = Field(default=0, ge=0)
    direction: SortDirection = SortDirection.ASC
    sort_by: ProposalSortBy = ProposalSortBy.CREATED_AT
    status: Optional[ProposalStatus] = None


class MintTokenParams(BaseModel):
    address: str
    amount: int = Field(gt=0)


class UpdateMultisigSettingsParams(BaseModel):
    plugin_address: str
    voting_settings: MultisigVotingSettings


class TokenVotingInstallToken(BaseModel):
    """Existing token to wrap, or a new one to deploy (address left at zero)."""

    address: Optional[str] = None
    name: str = ""
    symbol: str = ""
    balances: List["TokenBalance"] = Field(default_factory=list)


class TokenBalance(BaseModel):
    address: str
    balance: int = Field(ge=0)


class TokenVotingPluginInstall(BaseModel):
    voting_settings: VotingSettings
    token: TokenVotingInstallToken


class AddresslistVotingPluginInstall(BaseModel):
    voting_settings: VotingSettings
    addresses: List[str]


class MultisigPluginInstall(BaseModel):
    members: List[str]
    voting_settings: MultisigVotingSettings


# Read models


class TokenDetails(BaseModel):
    address: str
    name: str
    symbol: str
    type: TokenType = TokenType.ERC20
    decimals: Optional[int] = None
    base_uri: Optional[str] = None


class MajorityVotingResult(BaseModel):
    yes: int = 0
    no: int = 0
    abstain: int = 0


class MajorityVotingProposalSettings(BaseModel):
    support_threshold: float
    min_participation: float
    duration: int


class ProposalVote(BaseModel):
    address: str
    vote: VoteValues
    weight: Optional[int] = None
    vote_replaced: bool = False


class ProposalBase(BaseModel):
    id: str
    dao: DaoRef
    creator_address: str
    metadata: ProposalMetadata
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    creation_date: Optional[datetime] = None
    actions: List[DaoAction] = Field(default_factory=list)
    status: ProposalStatus
    creation_block_number: int = 0
    execution_date: Optional[datetime] = None
    execution_block_number: Optional[int] = None
    execution_tx_hash: Optional[str] = None


class ProposalListItemBase(BaseModel):
    id: str
    dao: DaoRef
    creator_address: str
    metadata: ProposalMetadataSummary
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: ProposalStatus


class MajorityVotingProposal(ProposalBase):
    result: MajorityVotingResult
    settings: MajorityVotingProposalSettings
    votes: List[ProposalVote] = Field(default_factory=list)
    total_voting_weight: int = 0
    used_voting_weight: Optional[int] = None
    token: Optional[TokenDetails] = None


class MajorityVotingProposalListItem(ProposalListItemBase):
    result: MajorityVotingResult
    settings: MajorityVotingProposalSettings
    votes: List[ProposalVote] = Field(default_factory=list)
    total_voting_weight: int = 0
    token: Optional[TokenDetails] = None


class MultisigProposal(ProposalBase):
    approvals: List[str] = Field(default_factory=list)
    settings: MultisigVotingSettings


class MultisigProposalListItem(ProposalListItemBase):
    approvals: List[str] = Field(default_factory=list)
    settings: Optional[MultisigVotingSettings] = None


AnyProposal = Union[MajorityVotingProposal, MultisigProposal]
AnyProposalListItem = Union[MajorityVotingProposalListItem, MultisigProposalListItem]

TokenVotingInstallToken.model_rebuild()
