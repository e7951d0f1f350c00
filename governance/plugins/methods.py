from typing import AsyncIterator, List, Optional

from utils.async_utils import gather_with_concurrency
from utils.exceptions import ProposalCreationError
from utils.logger_utils import get_logger

from governance.codecs.address_codec import ensure_address, ensure_address_or_ens, resolve_address_or_ens
from governance.codecs.proposal_id_codec import (
    decode_proposal_id,
    encode_proposal_id,
    to_extended_proposal_id,
)
from governance.codecs.ratio_codec import decode_ratio
from governance.codecs.voting_settings_codec import parse_voting_mode
from governance.graphql_queries.majority_voting import members_query, settings_query
from governance.graphql_queries.multisig import QUERY_MULTISIG_MEMBERS, QUERY_MULTISIG_SETTINGS
from governance.mappers.metadata_resolver import resolve_proposal_metadata
from governance.models.proposal import (
    AnyProposal,
    AnyProposalListItem,
    ApproveMultisigProposalParams,
    CanApproveParams,
    CanVoteParams,
    CreateProposalBaseParams,
    MultisigVotingSettings,
    ProposalQueryParams,
    VoteProposalParams,
    VotingSettings,
)
from governance.models.steps import (
    ApproveProposalStep,
    DoneStep,
    ExecuteProposalStep,
    ProposalCreationDone,
    ProposalCreationSteps,
    StepValue,
    TxHashStep,
    VoteDone,
    VoteProposalStep,
)
from governance.plugins.core import PluginClientCore
from governance.plugins.transactions import (
    build_approve,
    build_create_proposal,
    build_execute,
    build_vote,
    check_create_proposal_params,
)
from governance.status.proposal_status import compute_proposal_status_filter
from governance.steps.flows import (
    APPROVE_PROPOSAL_FLOW,
    EXECUTE_PROPOSAL_FLOW,
    PROPOSAL_CREATION_FLOW,
    VOTE_PROPOSAL_FLOW,
)
from governance.steps.stepwise_operation import StepwiseOperation

logger = get_logger("Plugin Client Methods")

METADATA_FETCH_CONCURRENCY = 10


class PluginClientMethods(PluginClientCore):
    """Proposal lifecycle shared by every governance plugin."""

    # Proposal creation

    def create_proposal(self, params: CreateProposalBaseParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        check_create_proposal_params(params)
        return StepwiseOperation(PROPOSAL_CREATION_FLOW, self._create_proposal(params))

    async def _create_proposal(self, params: CreateProposalBaseParams) -> AsyncIterator[StepValue]:
        metadata_uri = params.metadata_uri or await self.pin_metadata(params.metadata)
        plugin_address, data = build_create_proposal(self.family, params, metadata_uri)

        tx_hash = await self.web3.send_transaction(plugin_address, data)
        yield TxHashStep(key=ProposalCreationSteps.CREATING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = self.family.interface.find_log(receipt["logs"], "ProposalCreated")
        if log is None:
            raise ProposalCreationError("ProposalCreated event not found")
        index = self.family.interface.parse_log("ProposalCreated", log)["proposalId"]
        proposal_id = encode_proposal_id(plugin_address, index)
        logger.info(f"{self.family.name} proposal {proposal_id} created in {tx_hash}")
        yield ProposalCreationDone(key=ProposalCreationSteps.DONE, proposal_id=proposal_id)

    # Execution

    def execute_proposal(self, proposal_id: str) -> StepwiseOperation:
        self.web3.get_connected_signer()
        plugin_address, data = build_execute(self.family, proposal_id)
        return StepwiseOperation(EXECUTE_PROPOSAL_FLOW, self._execute_proposal(plugin_address, data))

    async def _execute_proposal(self, plugin_address: str, data: bytes) -> AsyncIterator[StepValue]:
        tx_hash = await self.web3.send_transaction(plugin_address, data)
        yield TxHashStep(key=ExecuteProposalStep.EXECUTING, tx_hash=tx_hash)
        await self.web3.wait_for_receipt(tx_hash)
        yield DoneStep(key=ExecuteProposalStep.DONE)

    async def can_execute(self, proposal_id: str) -> bool:
        decoded = decode_proposal_id(proposal_id)
        (executable,) = await self.call_contract(
            self.family.interface, decoded.plugin_address, "canExecute", [decoded.index]
        )
        return executable

    # Proposal reads

    async def get_proposal(self, proposal_id: str) -> Optional[AnyProposal]:
        extended_id = to_extended_proposal_id(proposal_id)
        result = await self.graphql.request(
            self.family.proposal_query, {"proposalId": extended_id}, name=f"{self.family.name} proposal"
        )
        record = result.get(self.family.proposal_key)
        if not record:
            return None
        metadata = await resolve_proposal_metadata(self.ipfs, record.get("metadata"), label=f"proposal {proposal_id}")
        return self.family.to_proposal(record, metadata)

    async def get_proposals(self, params: Optional[ProposalQueryParams] = None) -> List[AnyProposalListItem]:
        params = params or ProposalQueryParams()
        where = {}
        if params.dao_address_or_ens:
            ensure_address_or_ens(params.dao_address_or_ens)
            dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
            where["dao"] = dao_address.lower()
        if params.status is not None:
            where.update(
                compute_proposal_status_filter(params.status, executable_field=self.family.executable_field)
            )

        result = await self.graphql.request(
            self.family.proposals_query,
            {
                "where": where,
                "limit": params.limit,
                "skip": params.skip,
                "direction": params.direction.value,
                "sortBy": params.sort_by.value,
            },
            name=f"{self.family.name} proposals",
        )
        records = result.get(self.family.proposals_key) or []

        async def to_item(record) -> AnyProposalListItem:
            metadata = await resolve_proposal_metadata(
                self.ipfs,
                record.get("metadata"),
                timeout=self.context.multi_fetch_timeout,
                label=f"proposal {record['id']}",
            )
            return self.family.to_proposal_list_item(record, metadata)

        return await gather_with_concurrency(METADATA_FETCH_CONCURRENCY, *(to_item(record) for record in records))


class MajorityVotingClientMethods(PluginClientMethods):
    """Voting, settings and member reads of TokenVoting and AddresslistVoting."""

    def vote_proposal(self, params: VoteProposalParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        plugin_address, data = build_vote(self.family, params)
        return StepwiseOperation(VOTE_PROPOSAL_FLOW, self._vote_proposal(params.proposal_id, plugin_address, data))

    async def _vote_proposal(self, proposal_id: str, plugin_address: str, data: bytes) -> AsyncIterator[StepValue]:
        tx_hash = await self.web3.send_transaction(plugin_address, data)
        yield TxHashStep(key=VoteProposalStep.VOTING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = self.family.interface.find_log(receipt["logs"], "VoteCast")
        vote_id = None
        if log is not None:
            voter = self.family.interface.parse_log("VoteCast", log)["voter"]
            vote_id = f"{proposal_id}_{voter.lower()}"
        yield VoteDone(key=VoteProposalStep.DONE, vote_id=vote_id)

    async def can_vote(self, params: CanVoteParams) -> bool:
        decoded = decode_proposal_id(params.proposal_id)
        voter = ensure_address(params.voter_address)
        (allowed,) = await self.call_contract(
            self.family.interface, decoded.plugin_address, "canVote", [decoded.index, voter, int(params.vote)]
        )
        return allowed

    async def get_settings(self, plugin_address: str) -> Optional[VotingSettings]:
        address = ensure_address(plugin_address)
        result = await self.graphql.request(
            settings_query(self.family.entity), {"address": address.lower()}, name=f"{self.family.name} settings"
        )
        record = result.get(self.family.plugin_key)
        if not record:
            return None
        digits = self.family.ratio_digits
        return VotingSettings(
            min_duration=int(record["minDuration"]),
            min_proposer_voting_power=int(record["minProposerVotingPower"]),
            support_threshold=decode_ratio(int(record["supportThreshold"]), digits),
            min_participation=decode_ratio(int(record["minParticipation"]), digits),
            voting_mode=parse_voting_mode(record["votingMode"]),
        )

    async def get_members(self, plugin_address: str) -> Optional[List[str]]:
        address = ensure_address(plugin_address)
        result = await self.graphql.request(
            members_query(self.family.entity), {"address": address.lower()}, name=f"{self.family.name} members"
        )
        record = result.get(self.family.plugin_key)
        if not record:
            return None
        return [ensure_address(member["address"]) for member in record.get("members") or []]


class ApprovalClientMethods(PluginClientMethods):
    """Approval flow, settings and member reads of the Multisig plugin."""

    def approve_proposal(self, params: ApproveMultisigProposalParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        plugin_address, data = build_approve(self.family, params)
        return StepwiseOperation(APPROVE_PROPOSAL_FLOW, self._approve_proposal(plugin_address, data))

    async def _approve_proposal(self, plugin_address: str, data: bytes) -> AsyncIterator[StepValue]:
        tx_hash = await self.web3.send_transaction(plugin_address, data)
        yield TxHashStep(key=ApproveProposalStep.APPROVING, tx_hash=tx_hash)
        await self.web3.wait_for_receipt(tx_hash)
        yield DoneStep(key=ApproveProposalStep.DONE)

    async def can_approve(self, params: CanApproveParams) -> bool:
        decoded = decode_proposal_id(params.proposal_id)
        approver = ensure_address(params.approver_address)
        (allowed,) = await self.call_contract(
            self.family.interface, decoded.plugin_address, "canApprove", [decoded.index, approver]
        )
        return allowed

    async def get_settings(self, plugin_address: str) -> Optional[MultisigVotingSettings]:
        address = ensure_address(plugin_address)
        result = await self.graphql.request(QUERY_MULTISIG_SETTINGS, {"address": address.lower()}, name="Multisig settings")
        record = result.get(self.family.plugin_key)
        if not record:
            return None
        return MultisigVotingSettings(min_approvals=int(record["minApprovals"]), only_listed=bool(record["onlyListed"]))

    async def get_members(self, plugin_address: str) -> List[str]:
        address = ensure_address(plugin_address)
        result = await self.graphql.request(QUERY_MULTISIG_MEMBERS, {"address": address.lower()}, name="Multisig members")
        return [
            ensure_address(approver["address"])
            for approver in result.get("multisigApprovers") or []
            if approver.get("isActive", True)
        ]
