import time
from datetime import datetime
from typing import Any, Dict, Optional, Union

from utils.exceptions import InvalidProposalStatusError

from governance.models.common import ProposalStatus

Timestamp = Union[int, float, str, datetime]


def _to_seconds(value: Timestamp) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def compute_proposal_status(
    start_date: Timestamp,
    end_date: Timestamp,
    executed: bool,
    executable: bool,
    now: Optional[Timestamp] = None,
) -> ProposalStatus:
    """
    Lifecycle status of a proposal from its voting window and execution flags.
    The window is half open: [start_date, end_date).
    Timestamps are unix seconds (ints or decimal strings) or datetimes.
    """
    current = time.time() if now is None else _to_seconds(now)
    if current < _to_seconds(start_date):
        return ProposalStatus.PENDING
    if current < _to_seconds(end_date):
        return ProposalStatus.ACTIVE
    if executed:
        return ProposalStatus.EXECUTED
    if executable:
        return ProposalStatus.SUCCEEDED
    return ProposalStatus.DEFEATED


def compute_proposal_status_filter(
    status: Union[ProposalStatus, str],
    now: Optional[Timestamp] = None,
    executable_field: str = "executable",
) -> Dict[str, Any]:
    """
    Indexer `where` fragment selecting exactly the records that
    compute_proposal_status would put in `status` at the same `now`.
    """
    try:
        status = ProposalStatus(status)
    except ValueError:
        raise InvalidProposalStatusError(status) from None

    seconds = str(int(time.time() if now is None else _to_seconds(now)))
    if status == ProposalStatus.PENDING:
        return {"startDate_gt": seconds}
    if status == ProposalStatus.ACTIVE:
        return {"startDate_lte": seconds, "endDate_gt": seconds}
    if status == ProposalStatus.EXECUTED:
        return {"executed": True, "endDate_lte": seconds}
    if status == ProposalStatus.SUCCEEDED:
        return {"executed": False, executable_field: True, "endDate_lte": seconds}
    return {"executed": False, executable_field: False, "endDate_lte": seconds}
