from typing import List, Tuple

from constants.metadata import ADDRESS_ZERO
from constants.networks import ContractNames
from constants.permissions import EXECUTE_PERMISSION_ID
from utils.exceptions import MissingExecPermissionError
from utils.formatter_utils import to_bytes
from utils.logger_utils import get_logger

from governance.codecs.address_codec import ensure_address
from governance.contracts.interfaces import (
    DAO_FACTORY_INTERFACE,
    DAO_INTERFACE,
    ERC20_INTERFACE,
    PLUGIN_REPO_INTERFACE,
    PLUGIN_SETUP_PROCESSOR_INTERFACE,
)
from governance.core import ClientCore
from governance.models.common import TokenType, VersionTag
from governance.models.dao import (
    CreateDaoParams,
    PrepareInstallationParams,
    PrepareUninstallationParams,
    PrepareUpdateParams,
)

logger = get_logger("DAO Transaction Builder")


class DaoTransactionBuilder(ClientCore):
    """
    Call data of the DAO level transactions, shared by the methods that
    send them and the estimation that prices them.
    """

    async def get_latest_version(self, plugin_repo: str) -> VersionTag:
        (release,) = await self.call_contract(PLUGIN_REPO_INTERFACE, plugin_repo, "latestRelease")
        ((tag, _setup, _metadata),) = await self.call_contract(
            PLUGIN_REPO_INTERFACE, plugin_repo, "getLatestVersion", [release]
        )
        return VersionTag(release=tag[0], build=tag[1])

    async def build_create_dao(self, params: CreateDaoParams) -> Tuple[str, bytes, List[tuple]]:
        """Returns the factory address, the createDao call data and the plugin settings."""
        factory = self.web3.get_address(ContractNames.DAO_FACTORY)
        plugin_settings = []
        for plugin in params.plugins:
            repo = ensure_address(plugin.id)
            version = await self.get_latest_version(repo)
            plugin_settings.append(((version.as_tuple(), repo), plugin.data))

        dao_settings = (
            ensure_address(params.trusted_forwarder or ADDRESS_ZERO),
            params.dao_uri,
            params.ens_subdomain,
            params.metadata_uri.encode("utf-8"),
        )
        data = DAO_FACTORY_INTERFACE.encode_function_data("createDao", [dao_settings, plugin_settings])
        return factory, data, plugin_settings

    async def ensure_exec_permission(self, factory: str, plugin_settings: List[tuple]) -> None:
        """
        Simulates each plugin installation against the DAO base implementation and
        raises MissingExecPermissionError when no plugin would get EXECUTE_PERMISSION.
        """
        (processor,) = await self.call_contract(DAO_FACTORY_INTERFACE, factory, "pluginSetupProcessor")
        (dao_base,) = await self.call_contract(DAO_FACTORY_INTERFACE, factory, "daoBase")
        for setting in plugin_settings:
            _plugin, (_helpers, permissions) = await self.call_contract(
                PLUGIN_SETUP_PROCESSOR_INTERFACE, processor, "prepareInstallation", [dao_base, setting]
            )
            if any(to_bytes(permission[4]) == EXECUTE_PERMISSION_ID for permission in permissions):
                return
        logger.warning("None of the plugins requests EXECUTE_PERMISSION on the DAO")
        raise MissingExecPermissionError()

    @staticmethod
    def build_deposit(token_type: TokenType, token_address: str, amount: int, reference: str) -> Tuple[bytes, int]:
        """Returns the deposit call data and the native value to attach."""
        if token_type == TokenType.NATIVE:
            return DAO_INTERFACE.encode_function_data("deposit", [ADDRESS_ZERO, amount, reference]), amount
        return DAO_INTERFACE.encode_function_data("deposit", [token_address, amount, reference]), 0

    @staticmethod
    def build_approve(spender: str, amount: int) -> bytes:
        return ERC20_INTERFACE.encode_function_data("approve", [spender, amount])

    async def build_prepare_installation(
        self, dao_address: str, params: PrepareInstallationParams
    ) -> Tuple[str, bytes, VersionTag]:
        processor = self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR)
        repo = ensure_address(params.plugin_repo)
        version = params.version or await self.get_latest_version(repo)
        data = PLUGIN_SETUP_PROCESSOR_INTERFACE.encode_function_data(
            "prepareInstallation", [dao_address, ((version.as_tuple(), repo), params.installation_params)]
        )
        return processor, data, version

    async def build_prepare_update(self, dao_address: str, params: PrepareUpdateParams) -> Tuple[str, bytes, VersionTag]:
        processor = self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR)
        repo = ensure_address(params.plugin_repo)
        new_version = params.new_version or await self.get_latest_version(repo)
        setup_payload = (
            ensure_address(params.plugin_address),
            [ensure_address(helper) for helper in params.current_helpers],
            params.update_params,
        )
        data = PLUGIN_SETUP_PROCESSOR_INTERFACE.encode_function_data(
            "prepareUpdate",
            [dao_address, (params.current_version.as_tuple(), new_version.as_tuple(), repo, setup_payload)],
        )
        return processor, data, new_version

    def build_prepare_uninstallation(self, dao_address: str, params: PrepareUninstallationParams) -> Tuple[str, bytes]:
        processor = self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR)
        setup_payload = (
            ensure_address(params.plugin_address),
            [ensure_address(helper) for helper in params.current_helpers],
            params.uninstallation_params,
        )
        data = PLUGIN_SETUP_PROCESSOR_INTERFACE.encode_function_data(
            "prepareUninstallation",
            [dao_address, ((params.version.as_tuple(), ensure_address(params.plugin_repo)), setup_payload)],
        )
        return processor, data
