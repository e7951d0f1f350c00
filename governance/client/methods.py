from typing import AsyncIterator, List, Optional

from constants.metadata import SUBDOMAIN_REGEX
from utils.async_utils import gather_with_concurrency
from utils.exceptions import (
    DaoCreationError,
    DepositError,
    EnsureAllowanceError,
    InvalidSubdomainError,
    PluginInstallationPreparationError,
    PluginUninstallationPreparationError,
    PluginUpdatePreparationError,
    UnsupportedTokenTypeError,
)
from utils.formatter_utils import to_bytes
from utils.logger_utils import get_logger

from governance.client.builders import DaoTransactionBuilder
from governance.client.utils import permissions_from_contract
from governance.codecs.address_codec import ensure_address, ensure_address_or_ens, resolve_address_or_ens
from governance.codecs.permission_codec import encode_permission
from governance.contracts.interfaces import (
    DAO_INTERFACE,
    DAO_REGISTRY_INTERFACE,
    ERC20_INTERFACE,
    PLUGIN_SETUP_PROCESSOR_INTERFACE,
)
from governance.graphql_queries.dao import QUERY_DAO, QUERY_DAOS
from governance.mappers.dao_mapper import to_dao_details, to_dao_list_item
from governance.mappers.metadata_resolver import resolve_dao_metadata
from governance.models.common import TokenType
from governance.models.dao import (
    CreateDaoParams,
    DaoDetails,
    DaoListItem,
    DaoQueryParams,
    DepositParams,
    HasPermissionParams,
    PrepareInstallationParams,
    PrepareUninstallationParams,
    PrepareUpdateParams,
    SetAllowanceParams,
)
from governance.models.steps import (
    AllowanceStep,
    DaoCreationDone,
    DaoCreationSteps,
    DaoDepositSteps,
    DepositDone,
    PrepareInstallationDone,
    PrepareInstallationStep,
    PrepareUninstallationDone,
    PrepareUninstallationSteps,
    PrepareUpdateDone,
    PrepareUpdateStep,
    SetAllowanceSteps,
    StepValue,
    TxHashStep,
)
from governance.steps.flows import (
    DAO_CREATION_FLOW,
    DEPOSIT_FLOW,
    PREPARE_INSTALLATION_FLOW,
    PREPARE_UNINSTALLATION_FLOW,
    PREPARE_UPDATE_FLOW,
    SET_ALLOWANCE_FLOW,
)
from governance.steps.stepwise_operation import StepwiseOperation

logger = get_logger("DAO Client Methods")

METADATA_FETCH_CONCURRENCY = 10


class DaoClientMethods(DaoTransactionBuilder):
    """DAO level operations: creation, deposits, plugin setup preparation and DAO reads."""

    # DAO creation

    def create_dao(self, params: CreateDaoParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        if params.ens_subdomain and not SUBDOMAIN_REGEX.match(params.ens_subdomain):
            raise InvalidSubdomainError(params.ens_subdomain)
        ensure_address(params.trusted_forwarder)
        for plugin in params.plugins:
            ensure_address(plugin.id)
        return StepwiseOperation(DAO_CREATION_FLOW, self._create_dao(params))

    async def _create_dao(self, params: CreateDaoParams) -> AsyncIterator[StepValue]:
        factory, data, plugin_settings = await self.build_create_dao(params)
        await self.ensure_exec_permission(factory, plugin_settings)

        tx_hash = await self.web3.send_transaction(factory, data)
        yield TxHashStep(key=DaoCreationSteps.CREATING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = DAO_REGISTRY_INTERFACE.find_log(receipt["logs"], "DAORegistered")
        if log is None:
            raise DaoCreationError("DAORegistered event not found")
        address = DAO_REGISTRY_INTERFACE.parse_log("DAORegistered", log)["dao"]
        logger.info(f"DAO {address} created in {tx_hash}")
        yield DaoCreationDone(key=DaoCreationSteps.DONE, address=address)

    # Deposits and allowance

    def deposit(self, params: DepositParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        ensure_address_or_ens(params.dao_address_or_ens)
        if params.type == TokenType.ERC20:
            ensure_address(params.token_address)
        elif params.type != TokenType.NATIVE:
            raise UnsupportedTokenTypeError(params.type)
        return StepwiseOperation(DEPOSIT_FLOW, self._deposit(params))

    async def _deposit(self, params: DepositParams) -> AsyncIterator[StepValue]:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        token_address = None
        if params.type == TokenType.ERC20:
            token_address = ensure_address(params.token_address)
            async for step in self._ensure_allowance(token_address, dao_address, params.amount):
                yield step

        data, value = self.build_deposit(params.type, token_address, params.amount, params.reference)
        tx_hash = await self.web3.send_transaction(dao_address, data, value=value)
        yield TxHashStep(key=DaoDepositSteps.DEPOSITING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = DAO_INTERFACE.find_log(receipt["logs"], "Deposited")
        if log is None:
            raise DepositError("Deposited event not found")
        deposited = DAO_INTERFACE.parse_log("Deposited", log)["amount"]
        if deposited != params.amount:
            raise DepositError(f"Deposited amount mismatch. Expected: {params.amount}, received: {deposited}")
        yield DepositDone(key=DaoDepositSteps.DONE, amount=params.amount)

    async def _ensure_allowance(self, token_address: str, spender: str, amount: int) -> AsyncIterator[StepValue]:
        """Yields CHECKED_ALLOWANCE and, only when it falls short, the approval checkpoints."""
        owner = self.web3.get_connected_signer().address
        (allowance,) = await self.call_contract(ERC20_INTERFACE, token_address, "allowance", [owner, spender])
        yield AllowanceStep(key=DaoDepositSteps.CHECKED_ALLOWANCE, allowance=allowance)
        if allowance >= amount:
            return

        tx_hash = await self.web3.send_transaction(token_address, self.build_approve(spender, amount))
        yield TxHashStep(key=DaoDepositSteps.UPDATING_ALLOWANCE, tx_hash=tx_hash)

        approved = await self._approved_value(tx_hash)
        if approved < amount:
            raise EnsureAllowanceError(f"approved {approved}, needed {amount}")
        yield AllowanceStep(key=DaoDepositSteps.UPDATED_ALLOWANCE, allowance=amount)

    async def _approved_value(self, tx_hash: str) -> int:
        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = ERC20_INTERFACE.find_log(receipt["logs"], "Approval")
        if log is None:
            raise EnsureAllowanceError("Approval event not found")
        return ERC20_INTERFACE.parse_log("Approval", log)["value"]

    def set_allowance(self, params: SetAllowanceParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        token_address = ensure_address(params.token_address)
        spender = ensure_address(params.spender_address)
        return StepwiseOperation(SET_ALLOWANCE_FLOW, self._set_allowance(token_address, spender, params.amount))

    async def _set_allowance(self, token_address: str, spender: str, amount: int) -> AsyncIterator[StepValue]:
        tx_hash = await self.web3.send_transaction(token_address, self.build_approve(spender, amount))
        yield TxHashStep(key=SetAllowanceSteps.SETTING_ALLOWANCE, tx_hash=tx_hash)
        approved = await self._approved_value(tx_hash)
        yield AllowanceStep(key=SetAllowanceSteps.ALLOWANCE_SET, allowance=approved)

    # Plugin setup preparation

    def prepare_installation(self, params: PrepareInstallationParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        ensure_address_or_ens(params.dao_address_or_ens)
        ensure_address(params.plugin_repo)
        return StepwiseOperation(PREPARE_INSTALLATION_FLOW, self._prepare_installation(params))

    async def _prepare_installation(self, params: PrepareInstallationParams) -> AsyncIterator[StepValue]:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data, version = await self.build_prepare_installation(dao_address, params)

        tx_hash = await self.web3.send_transaction(processor, data)
        yield TxHashStep(key=PrepareInstallationStep.PREPARING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = PLUGIN_SETUP_PROCESSOR_INTERFACE.find_log(receipt["logs"], "InstallationPrepared")
        if log is None:
            raise PluginInstallationPreparationError("InstallationPrepared event not found")
        args = PLUGIN_SETUP_PROCESSOR_INTERFACE.parse_log("InstallationPrepared", log)
        helpers, permissions = args["preparedSetupData"]
        yield PrepareInstallationDone(
            key=PrepareInstallationStep.DONE,
            plugin_address=args["plugin"],
            plugin_repo=ensure_address(params.plugin_repo),
            version_tag=version,
            permissions=permissions_from_contract(permissions),
            helpers=list(helpers),
        )

    def prepare_update(self, params: PrepareUpdateParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        ensure_address_or_ens(params.dao_address_or_ens)
        ensure_address(params.plugin_address)
        ensure_address(params.plugin_repo)
        return StepwiseOperation(PREPARE_UPDATE_FLOW, self._prepare_update(params))

    async def _prepare_update(self, params: PrepareUpdateParams) -> AsyncIterator[StepValue]:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data, version = await self.build_prepare_update(dao_address, params)

        tx_hash = await self.web3.send_transaction(processor, data)
        yield TxHashStep(key=PrepareUpdateStep.PREPARING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = PLUGIN_SETUP_PROCESSOR_INTERFACE.find_log(receipt["logs"], "UpdatePrepared")
        if log is None:
            raise PluginUpdatePreparationError("UpdatePrepared event not found")
        args = PLUGIN_SETUP_PROCESSOR_INTERFACE.parse_log("UpdatePrepared", log)
        helpers, permissions = args["preparedSetupData"]
        yield PrepareUpdateDone(
            key=PrepareUpdateStep.DONE,
            plugin_address=ensure_address(params.plugin_address),
            plugin_repo=ensure_address(params.plugin_repo),
            version_tag=version,
            init_data=to_bytes(args["initData"]),
            permissions=permissions_from_contract(permissions),
            helpers=list(helpers),
        )

    def prepare_uninstallation(self, params: PrepareUninstallationParams) -> StepwiseOperation:
        self.web3.get_connected_signer()
        ensure_address_or_ens(params.dao_address_or_ens)
        ensure_address(params.plugin_address)
        ensure_address(params.plugin_repo)
        return StepwiseOperation(PREPARE_UNINSTALLATION_FLOW, self._prepare_uninstallation(params))

    async def _prepare_uninstallation(self, params: PrepareUninstallationParams) -> AsyncIterator[StepValue]:
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        processor, data = self.build_prepare_uninstallation(dao_address, params)

        tx_hash = await self.web3.send_transaction(processor, data)
        yield TxHashStep(key=PrepareUninstallationSteps.PREPARING, tx_hash=tx_hash)

        receipt = await self.web3.wait_for_receipt(tx_hash)
        log = PLUGIN_SETUP_PROCESSOR_INTERFACE.find_log(receipt["logs"], "UninstallationPrepared")
        if log is None:
            raise PluginUninstallationPreparationError("UninstallationPrepared event not found")
        args = PLUGIN_SETUP_PROCESSOR_INTERFACE.parse_log("UninstallationPrepared", log)
        yield PrepareUninstallationDone(
            key=PrepareUninstallationSteps.DONE,
            plugin_address=ensure_address(params.plugin_address),
            plugin_repo=ensure_address(params.plugin_repo),
            version_tag=params.version,
            permissions=permissions_from_contract(args["permissions"]),
        )

    # Reads

    async def has_permission(self, params: HasPermissionParams) -> bool:
        ensure_address_or_ens(params.dao_address_or_ens)
        where = ensure_address(params.where)
        who = ensure_address(params.who)
        dao_address = await resolve_address_or_ens(params.dao_address_or_ens, self.web3)
        (granted,) = await self.call_contract(
            DAO_INTERFACE, dao_address, "hasPermission", [where, who, encode_permission(params.permission), params.data]
        )
        return granted

    async def get_dao(self, dao_address_or_ens: str) -> Optional[DaoDetails]:
        ensure_address_or_ens(dao_address_or_ens)
        address = await resolve_address_or_ens(dao_address_or_ens, self.web3)
        result = await self.graphql.request(QUERY_DAO, {"address": address.lower()}, name="DAO")
        record = result.get("dao")
        if not record:
            return None
        metadata = await resolve_dao_metadata(self.ipfs, record.get("metadata"), label=f"DAO {address}")
        return to_dao_details(record, metadata)

    async def get_daos(self, params: Optional[DaoQueryParams] = None) -> List[DaoListItem]:
        params = params or DaoQueryParams()
        result = await self.graphql.request(
            QUERY_DAOS,
            {
                "limit": params.limit,
                "skip": params.skip,
                "direction": params.direction.value,
                "sortBy": params.sort_by.value,
            },
            name="DAOs",
        )
        records = result.get("daos") or []

        async def to_item(record) -> DaoListItem:
            metadata = await resolve_dao_metadata(
                self.ipfs,
                record.get("metadata"),
                timeout=self.context.multi_fetch_timeout,
                label=f"DAO {record['id']}",
            )
            return to_dao_list_item(record, metadata)

        return await gather_with_concurrency(METADATA_FETCH_CONCURRENCY, *(to_item(record) for record in records))
