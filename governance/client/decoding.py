from typing import Iterable, Optional

from eth_utils import to_checksum_address

from utils.exceptions import UnexpectedActionError
from utils.formatter_utils import BytesLike, to_bytes, to_hex

from governance.client.utils import (
    apply_installation_params_from_contract,
    apply_uninstallation_params_from_contract,
    apply_update_params_from_contract,
    permission_params_from_contract,
    permission_with_condition_params_from_contract,
)
from governance.contracts.contract_interface import SELECTOR_LENGTH, ContractInterface
from governance.contracts.interfaces import DAO_INTERFACE, ERC20_INTERFACE, PLUGIN_SETUP_PROCESSOR_INTERFACE
from governance.core import ClientCore
from governance.mappers.metadata_resolver import fetch_json
from governance.models.common import (
    DaoMetadata,
    DecodedPermission,
    DecodedPermissionWithCondition,
    InterfaceParams,
    TokenType,
)
from governance.models.dao import (
    ApplyUninstallationParams,
    DecodedApplyInstallationParams,
    DecodedApplyUpdateParams,
    DecodedWithdrawParams,
    RegisterStandardCallbackParams,
    UpgradeToAndCallParams,
)


def find_interface_in(interfaces: Iterable[ContractInterface], data: BytesLike) -> Optional[InterfaceParams]:
    """Function of the first interface whose selector matches the call data."""
    selector = to_bytes(data)[:SELECTOR_LENGTH]
    for interface in interfaces:
        function_name = interface.get_function_by_selector(selector)
        if function_name:
            signature = interface.get_function_signature(function_name)
            return InterfaceParams(id=signature, function_name=function_name, hash=to_hex(selector))
    return None


class DaoClientDecoding(ClientCore):
    """Inverse of DaoClientEncoding: reads back the parameters of encoded DAO actions."""

    def grant_action(self, data: BytesLike) -> DecodedPermission:
        return permission_params_from_contract(DAO_INTERFACE.decode_function_data("grant", data))

    def grant_with_condition_action(self, data: BytesLike) -> DecodedPermissionWithCondition:
        return permission_with_condition_params_from_contract(
            DAO_INTERFACE.decode_function_data("grantWithCondition", data)
        )

    def revoke_action(self, data: BytesLike) -> DecodedPermission:
        return permission_params_from_contract(DAO_INTERFACE.decode_function_data("revoke", data))

    def withdraw_action(self, to: str, value: int, data: BytesLike) -> DecodedWithdrawParams:
        raw = to_bytes(data)
        if not raw:
            return DecodedWithdrawParams(type=TokenType.NATIVE, recipient_address=to_checksum_address(to), amount=value)
        if raw[:SELECTOR_LENGTH] == ERC20_INTERFACE.get_function_selector("transfer"):
            recipient, amount = ERC20_INTERFACE.decode_function_data("transfer", raw)
            return DecodedWithdrawParams(
                type=TokenType.ERC20,
                recipient_address=recipient,
                amount=amount,
                token_address=to_checksum_address(to),
            )
        raise UnexpectedActionError(
            expected=to_hex(ERC20_INTERFACE.get_function_selector("transfer")), actual=to_hex(raw[:SELECTOR_LENGTH])
        )

    def update_dao_metadata_raw_action(self, data: BytesLike) -> str:
        (metadata,) = DAO_INTERFACE.decode_function_data("setMetadata", data)
        return metadata.decode("utf-8")

    async def update_dao_metadata_action(self, data: BytesLike) -> DaoMetadata:
        """Decodes the metadata uri and fetches the metadata it points to."""
        uri = self.update_dao_metadata_raw_action(data)
        return DaoMetadata.model_validate(await fetch_json(self.ipfs, uri))

    def set_dao_uri_action(self, data: BytesLike) -> str:
        (dao_uri,) = DAO_INTERFACE.decode_function_data("setDaoURI", data)
        return dao_uri

    def register_standard_callback_action(self, data: BytesLike) -> RegisterStandardCallbackParams:
        interface_id, callback_selector, magic_number = DAO_INTERFACE.decode_function_data(
            "registerStandardCallback", data
        )
        return RegisterStandardCallbackParams(
            interface_id=to_hex(interface_id),
            callback_selector=to_hex(callback_selector),
            magic_number=to_hex(magic_number),
        )

    def set_signature_validator_action(self, data: BytesLike) -> str:
        (validator,) = DAO_INTERFACE.decode_function_data("setSignatureValidator", data)
        return validator

    def upgrade_to_action(self, data: BytesLike) -> str:
        (implementation,) = DAO_INTERFACE.decode_function_data("upgradeTo", data)
        return implementation

    def upgrade_to_and_call_action(self, data: BytesLike) -> UpgradeToAndCallParams:
        implementation, call_data = DAO_INTERFACE.decode_function_data("upgradeToAndCall", data)
        return UpgradeToAndCallParams(implementation_address=implementation, data=call_data)

    # The processor call is the middle action of the bracketed sequence

    def apply_installation_action(self, data: BytesLike) -> DecodedApplyInstallationParams:
        _, params = PLUGIN_SETUP_PROCESSOR_INTERFACE.decode_function_data("applyInstallation", data)
        return apply_installation_params_from_contract(params)

    def apply_uninstallation_action(self, data: BytesLike) -> ApplyUninstallationParams:
        _, params = PLUGIN_SETUP_PROCESSOR_INTERFACE.decode_function_data("applyUninstallation", data)
        return apply_uninstallation_params_from_contract(params)

    def apply_update_action(self, data: BytesLike) -> DecodedApplyUpdateParams:
        _, params = PLUGIN_SETUP_PROCESSOR_INTERFACE.decode_function_data("applyUpdate", data)
        return apply_update_params_from_contract(params)

    def find_interface(self, data: BytesLike) -> Optional[InterfaceParams]:
        return find_interface_in((DAO_INTERFACE, PLUGIN_SETUP_PROCESSOR_INTERFACE, ERC20_INTERFACE), data)
