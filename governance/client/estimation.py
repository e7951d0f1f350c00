from governance.client.builders import DaoTransactionBuilder
from governance.codecs.address_codec import ensure_address, resolve_address_or_ens
from governance.models.common import GasFeeEstimation, TokenType
from governance.models.dao import (
    CreateDaoParams,
    DepositParams,
    PrepareInstallationParams,
    PrepareUninstallationParams,
    PrepareUpdateParams,
    SetAllowanceParams,
)


class DaoClientEstimation(DaoTransactionBuilder):
    """Gas fee estimates of the DAO level write methods."""

    async def _estimate(self, to: str, data: bytes, value: int = 0) -> GasFeeEstimation:
        units = await self.web3.estimate_gas(to, data, value=value)
        return await self.web3.get_approximate_gas_fee(units)

    async def create_dao(self, params: CreateDaoParams) -> GasFeeEstimation:
        factory, data, _ = await self.build_create_dao(params)
        return await self._estimate(factory, data)

    async def deposit(self, params: DepositParams) -> GasFeeEstimation:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        token_address = ensure_address(params.token_address) if params.type == TokenType.ERC20 else None
        data, value = self.build_deposit(params.type, token_address, params.amount, params.reference)
        return await self._estimate(dao_address, data, value=value)

    async def set_allowance(self, params: SetAllowanceParams) -> GasFeeEstimation:
        data = self.build_approve(ensure_address(params.spender_address), params.amount)
        return await self._estimate(ensure_address(params.token_address), data)

    async def prepare_installation(self, params: PrepareInstallationParams) -> GasFeeEstimation:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data, _ = await self.build_prepare_installation(dao_address, params)
        return await self._estimate(processor, data)

    async def prepare_update(self, params: PrepareUpdateParams) -> GasFeeEstimation:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data, _ = await self.build_prepare_update(dao_address, params)
        return await self._estimate(processor, data)

    async def prepare_uninstallation(self, params: PrepareUninstallationParams) -> GasFeeEstimation:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data = self.build_prepare_uninstallation(dao_address, params)
        return await self._estimate(processor, data)
