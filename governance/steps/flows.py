from governance.models.steps import (
    ApproveProposalStep,
    DaoCreationSteps,
    DaoDepositSteps,
    ExecuteProposalStep,
    PrepareInstallationStep,
    PrepareUninstallationSteps,
    PrepareUpdateStep,
    ProposalCreationSteps,
    SetAllowanceSteps,
    VoteProposalStep,
)
from governance.steps.stepwise_operation import START, StepFlow


def _linear(name: str, *keys: str) -> StepFlow:
    """A flow whose checkpoints always come in the given order."""
    transitions = {START: frozenset({keys[0]})}
    for previous, current in zip(keys, keys[1:]):
        transitions[previous] = frozenset({current})
    return StepFlow(name=name, transitions=transitions, done=keys[-1])


DAO_CREATION_FLOW = _linear("DAO creation", DaoCreationSteps.CREATING.value, DaoCreationSteps.DONE.value)

PROPOSAL_CREATION_FLOW = _linear(
    "Proposal creation", ProposalCreationSteps.CREATING.value, ProposalCreationSteps.DONE.value
)

VOTE_PROPOSAL_FLOW = _linear("Vote", VoteProposalStep.VOTING.value, VoteProposalStep.DONE.value)

APPROVE_PROPOSAL_FLOW = _linear("Approval", ApproveProposalStep.APPROVING.value, ApproveProposalStep.DONE.value)

EXECUTE_PROPOSAL_FLOW = _linear("Execution", ExecuteProposalStep.EXECUTING.value, ExecuteProposalStep.DONE.value)

SET_ALLOWANCE_FLOW = _linear(
    "Set allowance", SetAllowanceSteps.SETTING_ALLOWANCE.value, SetAllowanceSteps.ALLOWANCE_SET.value
)

PREPARE_INSTALLATION_FLOW = _linear(
    "Prepare installation", PrepareInstallationStep.PREPARING.value, PrepareInstallationStep.DONE.value
)

PREPARE_UPDATE_FLOW = _linear("Prepare update", PrepareUpdateStep.PREPARING.value, PrepareUpdateStep.DONE.value)

PREPARE_UNINSTALLATION_FLOW = _linear(
    "Prepare uninstallation", PrepareUninstallationSteps.PREPARING.value, PrepareUninstallationSteps.DONE.value
)

# Native deposits start at DEPOSITING; ERC20 ones check the allowance first
# and only update it when it does not cover the amount.
DEPOSIT_FLOW = StepFlow(
    name="Deposit",
    transitions={
        START: frozenset({DaoDepositSteps.CHECKED_ALLOWANCE.value, DaoDepositSteps.DEPOSITING.value}),
        DaoDepositSteps.CHECKED_ALLOWANCE.value: frozenset(
            {DaoDepositSteps.UPDATING_ALLOWANCE.value, DaoDepositSteps.DEPOSITING.value}
        ),
        DaoDepositSteps.UPDATING_ALLOWANCE.value: frozenset({DaoDepositSteps.UPDATED_ALLOWANCE.value}),
        DaoDepositSteps.UPDATED_ALLOWANCE.value: frozenset({DaoDepositSteps.DEPOSITING.value}),
        DaoDepositSteps.DEPOSITING.value: frozenset({DaoDepositSteps.DONE.value}),
    },
    done=DaoDepositSteps.DONE.value,
)
