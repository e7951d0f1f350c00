from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from constants.metadata import MULTI_FETCH_TIMEOUT


class _EnvSettings(BaseSettings):
    # Every section reads the same .env file and flat environment variables
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def _split_csv(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class AppSettings(_EnvSettings):
    """Logging of applications built on the client."""

    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, validation_alias="LOG_FILE")


class NetworkSettings(_EnvSettings):
    """Network selection and the endpoint pools of the three transports."""

    network: str = Field("mainnet", validation_alias="NETWORK")
    # Comma separated lists; empty means "use the network defaults"
    web3_providers: str = Field("", validation_alias="WEB3_PROVIDERS")
    graphql_nodes: str = Field("", validation_alias="GRAPHQL_NODES")
    ipfs_nodes: str = Field("", validation_alias="IPFS_NODES")
    ipfs_api_key: Optional[str] = Field(None, validation_alias="IPFS_API_KEY")
    ens_registry_address: Optional[str] = Field(None, validation_alias="ENS_REGISTRY_ADDRESS")

    @property
    def web3_provider_list(self) -> List[str]:
        return _split_csv(self.web3_providers)

    @property
    def graphql_node_list(self) -> List[str]:
        return _split_csv(self.graphql_nodes)

    @property
    def ipfs_node_list(self) -> List[str]:
        return _split_csv(self.ipfs_nodes)


class ClientSettings(_EnvSettings):
    """Timeouts and the gas estimation multiplier."""

    gas_fee_estimation_factor: float = Field(0.625, gt=0, le=1, validation_alias="GAS_FEE_ESTIMATION_FACTOR")
    request_timeout_seconds: int = Field(30, gt=0, validation_alias="REQUEST_TIMEOUT_SECONDS")
    # Applied to every single metadata fetch of a list query
    multi_fetch_timeout_seconds: float = Field(MULTI_FETCH_TIMEOUT, gt=0, validation_alias="MULTI_FETCH_TIMEOUT_SECONDS")
    tx_receipt_timeout_seconds: int = Field(180, gt=0, validation_alias="TX_RECEIPT_TIMEOUT_SECONDS")


class ContractSettings(_EnvSettings):
    """Optional per-role overrides of the deployed framework addresses."""

    dao_factory_address: Optional[str] = Field(None, validation_alias="DAO_FACTORY_ADDRESS")
    dao_registry_address: Optional[str] = Field(None, validation_alias="DAO_REGISTRY_ADDRESS")
    plugin_setup_processor_address: Optional[str] = Field(None, validation_alias="PLUGIN_SETUP_PROCESSOR_ADDRESS")
    multisig_repo_address: Optional[str] = Field(None, validation_alias="MULTISIG_REPO_ADDRESS")
    token_voting_repo_address: Optional[str] = Field(None, validation_alias="TOKEN_VOTING_REPO_ADDRESS")
    addresslist_voting_repo_address: Optional[str] = Field(None, validation_alias="ADDRESSLIST_VOTING_REPO_ADDRESS")

    @field_validator("*", mode="before")
    @classmethod
    def _empty_to_none(cls, value):
        return value or None


class Settings(BaseModel):
    """
    Main Settings class that composes all sub-settings.
    Each section is read from the environment on its own, through validation_alias,
    so the composite itself never looks at environment variables.
    """

    app: AppSettings = Field(default_factory=AppSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)
    contracts: ContractSettings = Field(default_factory=ContractSettings)


# Singleton instance
settings = Settings()
