from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from constants.metadata import ADDRESS_ZERO
from utils.formatter_utils import to_bytes


class ProposalStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    SUCCEEDED = "Succeeded"
    EXECUTED = "Executed"
    DEFEATED = "Defeated"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ProposalSortBy(str, Enum):
    CREATED_AT = "createdAt"
    POPULARITY = "popularity"
    VOTES = "votes"


class DaoSortBy(str, Enum):
    CREATED_AT = "createdAt"
    SUBDOMAIN = "subdomain"


class TokenType(str, Enum):
    NATIVE = "native"
    ERC20 = "erc20"
    ERC721 = "erc721"
    ERC1155 = "erc1155"


class PermissionOperationType(IntEnum):
    GRANT = 0
    REVOKE = 1
    GRANT_WITH_CONDITION = 2


class DaoAction(BaseModel):
    """One call `{to, value, data}` executed by the DAO."""

    model_config = ConfigDict(frozen=True)

    to: str
    value: int = 0
    data: bytes = b""

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, value):
        return to_bytes(value)

    def as_tuple(self):
        return self.to, self.value, self.data


class GasFeeEstimation(BaseModel):
    average: int
    max: int


class InterfaceParams(BaseModel):
    id: str
    function_name: str
    hash: str


class VersionTag(BaseModel):
    model_config = ConfigDict(frozen=True)

    release: int
    build: int

    def as_tuple(self):
        return self.release, self.build


class MultiTargetPermission(BaseModel):
    model_config = ConfigDict(frozen=True)

    operation: PermissionOperationType
    where: str
    who: str
    condition: str = ADDRESS_ZERO
    permission_id: bytes

    @field_validator("permission_id", mode="before")
    @classmethod
    def _coerce_permission_id(cls, value):
        return to_bytes(value)

    def as_tuple(self):
        return int(self.operation), self.where, self.who, self.condition, self.permission_id


class PermissionParams(BaseModel):
    where: str
    who: str
    permission: str


class PermissionWithConditionParams(PermissionParams):
    condition: str


class DecodedPermission(BaseModel):
    where: str
    who: str
    permission: str
    permission_id: bytes


class DecodedPermissionWithCondition(DecodedPermission):
    condition: str


class MetadataResource(BaseModel):
    name: str
    url: str


class ProposalMedia(BaseModel):
    header: Optional[str] = None
    logo: Optional[str] = None


class ProposalMetadata(BaseModel):
    title: str
    summary: str
    description: str = ""
    resources: List[MetadataResource] = Field(default_factory=list)
    media: Optional[ProposalMedia] = None


class ProposalMetadataSummary(BaseModel):
    title: str
    summary: str


class DaoResourceLink(BaseModel):
    name: str
    url: str


class DaoMetadata(BaseModel):
    name: str
    description: str = ""
    avatar: Optional[str] = None
    links: List[DaoResourceLink] = Field(default_factory=list)
