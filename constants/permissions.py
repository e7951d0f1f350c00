from typing import Dict

from eth_utils import keccak


def permission_id(name: str) -> bytes:
    """keccak256 of the UTF-8 permission name, as used on chain."""
    return keccak(text=name)


class Permissions(object):
    UPGRADE_PERMISSION = "UPGRADE_PERMISSION"
    UPGRADE_PLUGIN_PERMISSION = "UPGRADE_PLUGIN_PERMISSION"
    SET_METADATA_PERMISSION = "SET_METADATA_PERMISSION"
    EXECUTE_PERMISSION = "EXECUTE_PERMISSION"
    WITHDRAW_PERMISSION = "WITHDRAW_PERMISSION"
    SET_SIGNATURE_VALIDATOR_PERMISSION = "SET_SIGNATURE_VALIDATOR_PERMISSION"
    SET_TRUSTED_FORWARDER_PERMISSION = "SET_TRUSTED_FORWARDER_PERMISSION"
    ROOT_PERMISSION = "ROOT_PERMISSION"
    CREATE_VERSION_PERMISSION = "CREATE_VERSION_PERMISSION"
    REGISTER_PERMISSION = "REGISTER_PERMISSION"
    REGISTER_DAO_PERMISSION = "REGISTER_DAO_PERMISSION"
    REGISTER_ENS_SUBDOMAIN_PERMISSION = "REGISTER_ENS_SUBDOMAIN_PERMISSION"
    MINT_PERMISSION = "MINT_PERMISSION"
    MERKLE_MINT_PERMISSION = "MERKLE_MINT_PERMISSION"
    MODIFY_ALLOWLIST_PERMISSION = "MODIFY_ALLOWLIST_PERMISSION"
    SET_CONFIGURATION_PERMISSION = "SET_CONFIGURATION_PERMISSION"

    @classmethod
    def names(cls):
        return [value for key, value in vars(cls).items() if key.endswith("_PERMISSION")]


# Permission name -> bytes32 id
PERMISSION_IDS: Dict[str, bytes] = {name: permission_id(name) for name in Permissions.names()}

# bytes32 id -> permission name
PERMISSION_NAMES: Dict[bytes, str] = {value: key for key, value in PERMISSION_IDS.items()}

EXECUTE_PERMISSION_ID = PERMISSION_IDS[Permissions.EXECUTE_PERMISSION]
ROOT_PERMISSION_ID = PERMISSION_IDS[Permissions.ROOT_PERMISSION]
UPGRADE_PLUGIN_PERMISSION_ID = PERMISSION_IDS[Permissions.UPGRADE_PLUGIN_PERMISSION]
