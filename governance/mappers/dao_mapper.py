from typing import Any, Dict, List

from eth_utils import to_checksum_address

from utils.formatter_utils import seconds_to_datetime

from governance.models.common import DaoMetadata
from governance.models.dao import DaoDetails, DaoListItem, InstalledPluginListItem

DAO_ENS_SUFFIX = ".dao.eth"
PLUGIN_ENS_SUFFIX = ".plugin.dao.eth"


def to_installed_plugins(records: List[Dict[str, Any]]) -> List[InstalledPluginListItem]:
    plugins = []
    for record in records or []:
        # Plugins whose preparation was never applied are not installed
        preparation = record.get("appliedPreparation")
        version = record.get("appliedVersion")
        if not preparation or not version:
            continue
        plugins.append(
            InstalledPluginListItem(
                instance_address=to_checksum_address(preparation["pluginAddress"]),
                id=f"{record['appliedPluginRepo']['subdomain']}{PLUGIN_ENS_SUFFIX}",
                release=int(version["release"]["release"]),
                build=int(version["build"]),
            )
        )
    return plugins


def to_dao_details(record: Dict[str, Any], metadata: DaoMetadata) -> DaoDetails:
    return DaoDetails(
        address=to_checksum_address(record["id"]),
        ens_domain=f"{record.get('subdomain') or ''}{DAO_ENS_SUFFIX}",
        metadata=metadata,
        creation_date=seconds_to_datetime(record.get("createdAt")),
        plugins=to_installed_plugins(record.get("plugins")),
    )


def to_dao_list_item(record: Dict[str, Any], metadata: DaoMetadata) -> DaoListItem:
    return DaoListItem(
        address=to_checksum_address(record["id"]),
        ens_domain=f"{record.get('subdomain') or ''}{DAO_ENS_SUFFIX}",
        metadata=metadata,
        plugins=to_installed_plugins(record.get("plugins")),
    )
