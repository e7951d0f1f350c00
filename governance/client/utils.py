from typing import Any, List, Sequence, Tuple

from eth_abi import encode
from eth_utils import keccak

from constants.metadata import ADDRESS_ZERO
from utils.formatter_utils import to_bytes

from governance.codecs.address_codec import ensure_address, ensure_addresses
from governance.codecs.permission_codec import decode_permission, encode_permission
from governance.models.common import (
    DecodedPermission,
    DecodedPermissionWithCondition,
    MultiTargetPermission,
    PermissionOperationType,
    PermissionParams,
    PermissionWithConditionParams,
    VersionTag,
)
from governance.models.dao import (
    ApplyInstallationParams,
    ApplyUninstallationParams,
    ApplyUpdateParams,
    DecodedApplyInstallationParams,
    DecodedApplyUpdateParams,
)


def hash_helpers(helpers: Sequence[str]) -> bytes:
    """keccak256(abi.encode(address[])) as the plugin setup processor computes it."""
    return keccak(encode(["address[]"], [ensure_addresses(helpers)]))


def permission_params_to_contract(params: PermissionParams) -> Tuple[str, str, bytes]:
    return ensure_address(params.where), ensure_address(params.who), encode_permission(params.permission)


def permission_with_condition_params_to_contract(params: PermissionWithConditionParams) -> Tuple[str, str, bytes, str]:
    where, who, permission = permission_params_to_contract(params)
    return where, who, permission, ensure_address(params.condition)


def permission_params_from_contract(values: Sequence[Any]) -> DecodedPermission:
    where, who, permission_id = values[:3]
    return DecodedPermission(
        where=where, who=who, permission=decode_permission(permission_id), permission_id=to_bytes(permission_id)
    )


def permission_with_condition_params_from_contract(values: Sequence[Any]) -> DecodedPermissionWithCondition:
    decoded = permission_params_from_contract(values)
    return DecodedPermissionWithCondition(**decoded.model_dump(), condition=values[3])


def permissions_to_contract(permissions: Sequence[MultiTargetPermission]) -> List[tuple]:
    return [permission.as_tuple() for permission in permissions]


def permissions_from_contract(values: Sequence[Sequence[Any]]) -> List[MultiTargetPermission]:
    return [
        MultiTargetPermission(
            operation=PermissionOperationType(operation),
            where=where,
            who=who,
            condition=condition or ADDRESS_ZERO,
            permission_id=permission_id,
        )
        for operation, where, who, condition, permission_id in values
    ]


def plugin_setup_ref(version_tag: VersionTag, plugin_repo: str) -> tuple:
    return version_tag.as_tuple(), ensure_address(plugin_repo)


def apply_installation_params_to_contract(params: ApplyInstallationParams) -> tuple:
    return (
        plugin_setup_ref(params.version_tag, params.plugin_repo),
        ensure_address(params.plugin_address),
        permissions_to_contract(params.permissions),
        hash_helpers(params.helpers),
    )


def apply_installation_params_from_contract(values: Sequence[Any]) -> DecodedApplyInstallationParams:
    (tag, plugin_repo), plugin_address, permissions, helpers_hash = values
    return DecodedApplyInstallationParams(
        plugin_address=plugin_address,
        plugin_repo=plugin_repo,
        version_tag=VersionTag(release=tag[0], build=tag[1]),
        permissions=permissions_from_contract(permissions),
        helpers_hash=helpers_hash,
    )


def apply_uninstallation_params_to_contract(params: ApplyUninstallationParams) -> tuple:
    return (
        ensure_address(params.plugin_address),
        plugin_setup_ref(params.version_tag, params.plugin_repo),
        permissions_to_contract(params.permissions),
    )


def apply_uninstallation_params_from_contract(values: Sequence[Any]) -> ApplyUninstallationParams:
    plugin_address, (tag, plugin_repo), permissions = values
    return ApplyUninstallationParams(
        plugin_address=plugin_address,
        plugin_repo=plugin_repo,
        version_tag=VersionTag(release=tag[0], build=tag[1]),
        permissions=permissions_from_contract(permissions),
    )


def apply_update_params_to_contract(params: ApplyUpdateParams) -> tuple:
    return (
        ensure_address(params.plugin_address),
        plugin_setup_ref(params.version_tag, params.plugin_repo),
        params.init_data,
        permissions_to_contract(params.permissions),
        hash_helpers(params.helpers),
    )


def apply_update_params_from_contract(values: Sequence[Any]) -> DecodedApplyUpdateParams:
    plugin_address, (tag, plugin_repo), init_data, permissions, helpers_hash = values
    return DecodedApplyUpdateParams(
        plugin_address=plugin_address,
        plugin_repo=plugin_repo,
        version_tag=VersionTag(release=tag[0], build=tag[1]),
        init_data=init_data,
        permissions=permissions_from_contract(permissions),
        helpers_hash=helpers_hash,
    )
