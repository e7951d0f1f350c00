from typing import Any, Dict, List, Optional

from eth_utils import to_checksum_address

from utils.exceptions import UnexpectedVoteOptionError
from utils.formatter_utils import seconds_to_datetime, to_int_or_zero

from governance.codecs.proposal_id_codec import to_compact_proposal_id
from governance.codecs.ratio_codec import decode_ratio
from governance.models.common import DaoAction, ProposalMetadata, ProposalMetadataSummary, TokenType
from governance.models.proposal import (
    DaoRef,
    MajorityVotingProposal,
    MajorityVotingProposalListItem,
    MajorityVotingProposalSettings,
    MajorityVotingResult,
    MultisigProposal,
    MultisigProposalListItem,
    MultisigVotingSettings,
    ProposalVote,
    TokenDetails,
    VoteValues,
)
from governance.status.proposal_status import Timestamp, compute_proposal_status

# Indexer VoteOption enum -> public vote value
VOTE_OPTIONS: Dict[str, VoteValues] = {
    "Yes": VoteValues.YES,
    "No": VoteValues.NO,
    "Abstain": VoteValues.ABSTAIN,
}

_TOKEN_TYPES = {
    "ERC20Contract": TokenType.ERC20,
    "ERC20WrapperContract": TokenType.ERC20,
    "ERC721Contract": TokenType.ERC721,
}


def to_vote_value(option: str) -> VoteValues:
    try:
        return VOTE_OPTIONS[option]
    except KeyError:
        raise UnexpectedVoteOptionError(option) from None


def to_dao_ref(record: Dict[str, Any]) -> DaoRef:
    return DaoRef(address=to_checksum_address(record["id"]), name=record.get("subdomain") or "")


def to_dao_actions(records: Optional[List[Dict[str, Any]]]) -> List[DaoAction]:
    return [
        DaoAction(to=to_checksum_address(action["to"]), value=to_int_or_zero(action.get("value")), data=action.get("data") or b"")
        for action in records or []
    ]


def to_token_details(record: Optional[Dict[str, Any]]) -> Optional[TokenDetails]:
    if not record:
        return None
    return TokenDetails(
        address=to_checksum_address(record["id"]),
        name=record.get("name") or "",
        symbol=record.get("symbol") or "",
        type=_TOKEN_TYPES.get(record.get("__typename"), TokenType.ERC20),
        decimals=record.get("decimals"),
        base_uri=record.get("baseURI"),
    )


def _status(record: Dict[str, Any], executable_field: str, now: Optional[Timestamp]):
    return compute_proposal_status(
        record["startDate"],
        record["endDate"],
        bool(record.get("executed")),
        bool(record.get(executable_field)),
        now=now,
    )


def _summary(metadata: ProposalMetadata) -> ProposalMetadataSummary:
    return ProposalMetadataSummary(title=metadata.title, summary=metadata.summary)


def _common_fields(record: Dict[str, Any], executable_field: str, now: Optional[Timestamp]) -> Dict[str, Any]:
    return {
        "id": to_compact_proposal_id(record["id"]),
        "dao": to_dao_ref(record["dao"]),
        "creator_address": to_checksum_address(record["creator"]),
        "start_date": seconds_to_datetime(record["startDate"]),
        "end_date": seconds_to_datetime(record["endDate"]),
        "status": _status(record, executable_field, now),
    }


def _detail_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    execution_block = record.get("executionBlockNumber")
    return {
        "creation_date": seconds_to_datetime(record.get("createdAt")),
        "actions": to_dao_actions(record.get("actions")),
        "creation_block_number": to_int_or_zero(record.get("creationBlockNumber")),
        "execution_date": seconds_to_datetime(record.get("executionDate")),
        "execution_block_number": to_int_or_zero(execution_block) if execution_block else None,
        "execution_tx_hash": record.get("executionTxHash"),
    }


# Majority voting (TokenVoting, AddresslistVoting)


def _majority_result(record: Dict[str, Any]) -> MajorityVotingResult:
    return MajorityVotingResult(
        yes=to_int_or_zero(record.get("yes")),
        no=to_int_or_zero(record.get("no")),
        abstain=to_int_or_zero(record.get("abstain")),
    )


def _majority_settings(record: Dict[str, Any], ratio_digits: int) -> MajorityVotingProposalSettings:
    total = to_int_or_zero(record.get("totalVotingPower"))
    min_voting_power = to_int_or_zero(record.get("minVotingPower"))
    return MajorityVotingProposalSettings(
        support_threshold=decode_ratio(to_int_or_zero(record.get("supportThreshold")), ratio_digits),
        min_participation=min_voting_power / total if total else 0.0,
        duration=to_int_or_zero(record["endDate"]) - to_int_or_zero(record["startDate"]),
    )


def _votes(record: Dict[str, Any], weighted: bool) -> List[ProposalVote]:
    return [
        ProposalVote(
            address=to_checksum_address(voter["voter"]["address"]),
            vote=to_vote_value(voter["voteOption"]),
            weight=to_int_or_zero(voter.get("votingPower")) if weighted else None,
            vote_replaced=bool(voter.get("voteReplaced")),
        )
        for voter in record.get("voters") or []
    ]


def _token(record: Dict[str, Any]) -> Optional[TokenDetails]:
    return to_token_details((record.get("plugin") or {}).get("token"))


def to_majority_voting_proposal(
    record: Dict[str, Any],
    metadata: ProposalMetadata,
    ratio_digits: int,
    weighted: bool = False,
    now: Optional[Timestamp] = None,
) -> MajorityVotingProposal:
    votes = _votes(record, weighted)
    return MajorityVotingProposal(
        **_common_fields(record, "executable", now),
        **_detail_fields(record),
        metadata=metadata,
        result=_majority_result(record),
        settings=_majority_settings(record, ratio_digits),
        votes=votes,
        total_voting_weight=to_int_or_zero(record.get("totalVotingPower")),
        used_voting_weight=sum(vote.weight or 0 for vote in votes) if weighted else None,
        token=_token(record),
    )


def to_majority_voting_proposal_list_item(
    record: Dict[str, Any],
    metadata: ProposalMetadata,
    ratio_digits: int,
    weighted: bool = False,
    now: Optional[Timestamp] = None,
) -> MajorityVotingProposalListItem:
    return MajorityVotingProposalListItem(
        **_common_fields(record, "executable", now),
        metadata=_summary(metadata),
        result=_majority_result(record),
        settings=_majority_settings(record, ratio_digits),
        votes=_votes(record, weighted),
        total_voting_weight=to_int_or_zero(record.get("totalVotingPower")),
        token=_token(record),
    )


# Multisig


def _approvals(record: Dict[str, Any]) -> List[str]:
    return [to_checksum_address(item["approver"]["address"]) for item in record.get("approvals") or []]


def _multisig_settings(record: Dict[str, Any]) -> MultisigVotingSettings:
    return MultisigVotingSettings(
        min_approvals=int(record["minApprovals"]),
        only_listed=bool((record.get("plugin") or {}).get("onlyListed")),
    )


def to_multisig_proposal(
    record: Dict[str, Any], metadata: ProposalMetadata, now: Optional[Timestamp] = None
) -> MultisigProposal:
    return MultisigProposal(
        **_common_fields(record, "approvalReached", now),
        **_detail_fields(record),
        metadata=metadata,
        approvals=_approvals(record),
        settings=_multisig_settings(record),
    )


def to_multisig_proposal_list_item(
    record: Dict[str, Any], metadata: ProposalMetadata, now: Optional[Timestamp] = None
) -> MultisigProposalListItem:
    return MultisigProposalListItem(
        **_common_fields(record, "approvalReached", now),
        metadata=_summary(metadata),
        approvals=_approvals(record),
        settings=_multisig_settings(record) if record.get("minApprovals") else None,
    )
