from governance.models.common import GasFeeEstimation
from governance.models.proposal import (
    ApproveMultisigProposalParams,
    CreateProposalBaseParams,
    VoteProposalParams,
)
from governance.plugins.core import PluginClientCore
from governance.plugins.transactions import build_approve, build_create_proposal, build_execute, build_vote


class PluginClientEstimation(PluginClientCore):
    """Gas fee estimates of the plugin write methods."""

    async def _estimate(self, to: str, data: bytes) -> GasFeeEstimation:
        units = await self.web3.estimate_gas(to, data)
        return await self.web3.get_approximate_gas_fee(units)

    async def create_proposal(self, params: CreateProposalBaseParams) -> GasFeeEstimation:
        """Metadata that is not pinned yet is estimated with an empty uri."""
        plugin_address, data = build_create_proposal(self.family, params, params.metadata_uri or "")
        return await self._estimate(plugin_address, data)

    async def execute_proposal(self, proposal_id: str) -> GasFeeEstimation:
        plugin_address, data = build_execute(self.family, proposal_id)
        return await self._estimate(plugin_address, data)


class MajorityVotingClientEstimation(PluginClientEstimation):
    async def vote_proposal(self, params: VoteProposalParams) -> GasFeeEstimation:
        plugin_address, data = build_vote(self.family, params)
        return await self._estimate(plugin_address, data)


class ApprovalClientEstimation(PluginClientEstimation):
    async def approve_proposal(self, params: ApproveMultisigProposalParams) -> GasFeeEstimation:
        plugin_address, data = build_approve(self.family, params)
        return await self._estimate(plugin_address, data)
