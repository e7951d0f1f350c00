from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants.metadata import ADDRESS_ZERO
from utils.formatter_utils import to_bytes

from governance.models.common import (
    DaoMetadata,
    DaoSortBy,
    MultiTargetPermission,
    SortDirection,
    TokenType,
    VersionTag,
)


class PluginInstallItem(BaseModel):
    """A plugin repo address plus its ABI-encoded installation data."""

    id: str
    data: bytes = b""

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class CreateDaoParams(BaseModel):
    metadata_uri: str
    ens_subdomain: str = ""
    trusted_forwarder: str = ADDRESS_ZERO
    dao_uri: str = ""
    plugins: List[PluginInstallItem]


class DepositParams(BaseModel):
    type: TokenType = TokenType.NATIVE
    dao_address_or_ens: str
    amount: int = Field(gt=0)
    token_address: Optional[str] = None
    reference: str = ""


class SetAllowanceParams(BaseModel):
    spender_address: str
    token_address: str
    amount: int = Field(ge=0)


class HasPermissionParams(BaseModel):
    dao_address_or_ens: str
    where: str
    who: str
    permission: str
    data: bytes = b""

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class WithdrawParams(BaseModel):
    type: TokenType = TokenType.NATIVE
    recipient_address_or_ens: str
    amount: int = Field(default=0, ge=0)
    token_address: Optional[str] = None
    token_id: Optional[int] = None


class RegisterStandardCallbackParams(BaseModel):
    interface_id: str
    callback_selector: str
    magic_number: str


class UpgradeToAndCallParams(BaseModel):
    implementation_address: str
    data: bytes = b""

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class PrepareInstallationParams(BaseModel):
    dao_address_or_ens: str
    plugin_repo: str
    version: Optional[VersionTag] = None
    installation_params: bytes = b""

    @field_validator("installation_params", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class PrepareUpdateParams(BaseModel):
    dao_address_or_ens: str
    plugin_address: str
    plugin_repo: str
    current_version: VersionTag
    new_version: Optional[VersionTag] = None
    current_helpers: List[str] = Field(default_factory=list)
    update_params: bytes = b""

    @field_validator("update_params", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class PrepareUninstallationParams(BaseModel):
    dao_address_or_ens: str
    plugin_address: str
    plugin_repo: str
    version: VersionTag
    current_helpers: List[str] = Field(default_factory=list)
    uninstallation_params: bytes = b""

    @field_validator("uninstallation_params", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class ApplyInstallationParams(BaseModel):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    permissions: List[MultiTargetPermission]
    helpers: List[str] = Field(default_factory=list)


class DecodedApplyInstallationParams(BaseModel):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    permissions: List[MultiTargetPermission]
    helpers_hash: bytes


class ApplyUninstallationParams(BaseModel):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    permissions: List[MultiTargetPermission]


class ApplyUpdateParams(BaseModel):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    init_data: bytes = b""
    permissions: List[MultiTargetPermission]
    helpers: List[str] = Field(default_factory=list)

    @field_validator("init_data", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)


class DecodedApplyUpdateParams(BaseModel):
    plugin_address: str
    plugin_repo: str
    version_tag: VersionTag
    init_data: bytes
    permissions: List[MultiTargetPermission]
    helpers_hash: bytes


class DecodedWithdrawParams(BaseModel):
    type: TokenType
    recipient_address: str
    amount: int
    token_address: Optional[str] = None


class InstalledPluginListItem(BaseModel):
    instance_address: str
    id: str
    release: int
    build: int


class DaoDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str
    ens_domain: str
    metadata: DaoMetadata
    creation_date: Optional[datetime] = None
    plugins: List[InstalledPluginListItem] = Field(default_factory=list)


class DaoListItem(BaseModel):
    address: str
    ens_domain: str
    metadata: DaoMetadata
    plugins: List[InstalledPluginListItem] = Field(default_factory=list)


class DaoQueryParams(BaseModel):
    limit: int = Field(default=10, gt=0, le=1000)
    skip: int = Field(default=0, ge=0)
    direction: SortDirection = SortDirection.ASC
    sort_by: DaoSortBy = DaoSortBy.CREATED_AT
