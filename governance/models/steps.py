from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from governance.models.common import MultiTargetPermission, VersionTag


class DaoCreationSteps(str, Enum):
    CREATING = "creating"
    DONE = "done"


class ProposalCreationSteps(str, Enum):
    CREATING = "creating"
    DONE = "done"


class VoteProposalStep(str, Enum):
    VOTING = "voting"
    DONE = "done"


class ApproveProposalStep(str, Enum):
    APPROVING = "approving"
    DONE = "done"


class ExecuteProposalStep(str, Enum):
    EXECUTING = "executing"
    DONE = "done"


class DaoDepositSteps(str, Enum):
    CHECKED_ALLOWANCE = "checkedAllowance"
    UPDATING_ALLOWANCE = "updatingAllowance"
    UPDATED_ALLOWANCE = "updatedAllowance"
    DEPOSITING = "depositing"
    DONE = "done"


class SetAllowanceSteps(str, Enum):
    SETTING_ALLOWANCE = "settingAllowance"
    ALLOWANCE_SET = "allowanceSet"


class PrepareInstallationStep(str, Enum):
    PREPARING = "preparing"
    DONE = "done"


class PrepareUpdateStep(str, Enum):
    PREPARING = "preparing"
    DONE = "done"


class PrepareUninstallationSteps(str, Enum):
    PREPARING = "preparing"
    DONE = "done"


class StepValue(BaseModel):
    """One checkpoint of a stepwise operation. `key` is the checkpoint tag."""

    model_config = ConfigDict(frozen=True)

    key: str


class TxHashStep(StepValue):
    tx_hash: str


class DoneStep(StepValue):
    pass


class DaoCreationDone(StepValue):
    address: str


class ProposalCreationDone(StepValue):
    proposal_id: str


class VoteDone(StepValue):
    vote_id: Optional[str] = None


class AllowanceStep(StepValue):
    allowance: int


class DepositDone(StepValue):
    amount: int


class PrepareInstallationDone(StepValue):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    permissions: List[MultiTargetPermission] = Field(default_factory=list)
    helpers: List[str] = Field(default_factory=list)


class PrepareUpdateDone(PrepareInstallationDone):
    init_data: bytes = b""


class PrepareUninstallationDone(StepValue):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    permissions: List[MultiTargetPermission] = Field(default_factory=list)
