from typing import List

from constants.networks import ContractNames
from constants.permissions import Permissions
from utils.exceptions import UnsupportedTokenTypeError
from utils.formatter_utils import to_bytes

from governance.client.utils import (
    apply_installation_params_to_contract,
    apply_uninstallation_params_to_contract,
    apply_update_params_to_contract,
    permission_params_to_contract,
    permission_with_condition_params_to_contract,
)
from governance.codecs.address_codec import ensure_address, resolve_address_or_ens
from governance.contracts.interfaces import DAO_INTERFACE, ERC20_INTERFACE, PLUGIN_SETUP_PROCESSOR_INTERFACE
from governance.core import ClientCore
from governance.models.common import DaoAction, PermissionParams, PermissionWithConditionParams, TokenType
from governance.models.dao import (
    ApplyInstallationParams,
    ApplyUninstallationParams,
    ApplyUpdateParams,
    RegisterStandardCallbackParams,
    UpgradeToAndCallParams,
    WithdrawParams,
)


class DaoClientEncoding(ClientCore):
    """Builds the actions a DAO proposal can carry for the DAO itself."""

    def grant_action(self, dao_address: str, params: PermissionParams) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("grant", permission_params_to_contract(params))
        return DaoAction(to=ensure_address(dao_address), data=data)

    def grant_with_condition_action(self, dao_address: str, params: PermissionWithConditionParams) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data(
            "grantWithCondition", permission_with_condition_params_to_contract(params)
        )
        return DaoAction(to=ensure_address(dao_address), data=data)

    def revoke_action(self, dao_address: str, params: PermissionParams) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("revoke", permission_params_to_contract(params))
        return DaoAction(to=ensure_address(dao_address), data=data)

    async def withdraw_action(self, params: WithdrawParams) -> DaoAction:
        """
        Native withdrawals are a plain value transfer to the recipient.
        ERC20 withdrawals call `transfer` on the token.
        """
        recipient = await resolve_address_or_ens(params.recipient_address_or_ens, self.web3)
        if params.type == TokenType.NATIVE:
            return DaoAction(to=recipient, value=params.amount, data=b"")
        if params.type == TokenType.ERC20:
            token = ensure_address(params.token_address)
            data = ERC20_INTERFACE.encode_function_data("transfer", [recipient, params.amount])
            return DaoAction(to=token, data=data)
        raise UnsupportedTokenTypeError(params.type)

    def update_dao_metadata_raw_action(self, dao_address: str, metadata_uri: str) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("setMetadata", [metadata_uri.encode("utf-8")])
        return DaoAction(to=ensure_address(dao_address), data=data)

    async def update_dao_metadata_action(self, dao_address_or_ens: str, metadata_uri: str) -> DaoAction:
        dao_address = await resolve_address_or_ens(dao_address_or_ens, self.web3)
        return self.update_dao_metadata_raw_action(dao_address, metadata_uri)

    def set_dao_uri_action(self, dao_address: str, dao_uri: str) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("setDaoURI", [dao_uri])
        return DaoAction(to=ensure_address(dao_address), data=data)

    def register_standard_callback_action(self, dao_address: str, params: RegisterStandardCallbackParams) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data(
            "registerStandardCallback",
            [to_bytes(params.interface_id), to_bytes(params.callback_selector), to_bytes(params.magic_number)],
        )
        return DaoAction(to=ensure_address(dao_address), data=data)

    def set_signature_validator_action(self, dao_address: str, signature_validator: str) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("setSignatureValidator", [ensure_address(signature_validator)])
        return DaoAction(to=ensure_address(dao_address), data=data)

    def upgrade_to_action(self, dao_address: str, implementation_address: str) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data("upgradeTo", [ensure_address(implementation_address)])
        return DaoAction(to=ensure_address(dao_address), data=data)

    def upgrade_to_and_call_action(self, dao_address: str, params: UpgradeToAndCallParams) -> DaoAction:
        data = DAO_INTERFACE.encode_function_data(
            "upgradeToAndCall", [ensure_address(params.implementation_address), params.data]
        )
        return DaoAction(to=ensure_address(dao_address), data=data)

    # Plugin setup processor calls. The processor needs ROOT_PERMISSION on the
    # DAO while it applies the setup, so the call is bracketed by a grant and
    # a revoke of that same permission.

    def _root_permission(self, dao_address: str) -> PermissionParams:
        return PermissionParams(
            where=dao_address,
            who=self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR),
            permission=Permissions.ROOT_PERMISSION,
        )

    def _bracketed(self, dao_address: str, call: DaoAction, *permissions: PermissionParams) -> List[DaoAction]:
        grants = [self.grant_action(dao_address, permission) for permission in permissions]
        revokes = [self.revoke_action(dao_address, permission) for permission in reversed(permissions)]
        return grants + [call] + revokes

    def _processor_call(self, function_name: str, dao_address: str, params: tuple) -> DaoAction:
        processor = self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR)
        data = PLUGIN_SETUP_PROCESSOR_INTERFACE.encode_function_data(function_name, [dao_address, params])
        return DaoAction(to=processor, value=0, data=data)

    def apply_installation_action(self, dao_address: str, params: ApplyInstallationParams) -> List[DaoAction]:
        """[grant ROOT_PERMISSION, applyInstallation, revoke ROOT_PERMISSION]"""
        dao_address = ensure_address(dao_address)
        call = self._processor_call("applyInstallation", dao_address, apply_installation_params_to_contract(params))
        return self._bracketed(dao_address, call, self._root_permission(dao_address))

    def apply_uninstallation_action(self, dao_address: str, params: ApplyUninstallationParams) -> List[DaoAction]:
        """[grant ROOT_PERMISSION, applyUninstallation, revoke ROOT_PERMISSION]"""
        dao_address = ensure_address(dao_address)
        call = self._processor_call("applyUninstallation", dao_address, apply_uninstallation_params_to_contract(params))
        return self._bracketed(dao_address, call, self._root_permission(dao_address))

    def apply_update_action(self, dao_address: str, params: ApplyUpdateParams) -> List[DaoAction]:
        """
        Updating also needs UPGRADE_PLUGIN_PERMISSION on the plugin proxy:
        [grant UPGRADE_PLUGIN, grant ROOT, applyUpdate, revoke ROOT, revoke UPGRADE_PLUGIN]
        """
        dao_address = ensure_address(dao_address)
        upgrade_plugin = PermissionParams(
            where=ensure_address(params.plugin_address),
            who=self.web3.get_address(ContractNames.PLUGIN_SETUP_PROCESSOR),
            permission=Permissions.UPGRADE_PLUGIN_PERMISSION,
        )
        call = self._processor_call("applyUpdate", dao_address, apply_update_params_to_contract(params))
        return self._bracketed(dao_address, call, upgrade_plugin, self._root_permission(dao_address))
