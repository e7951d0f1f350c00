from typing import Dict, List, Optional, Union

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from config.settings import Settings, settings as default_settings
from constants.networks import (
    GRAPHQL_NODES,
    IPFS_API_KEY_HEADER,
    IPFS_NODES,
    LIVE_CONTRACTS,
    NETWORK_ALIASES,
    ContractNames,
    SupportedNetwork,
)
from utils.exceptions import InvalidGasEstimationFactorError, UnsupportedNetworkError
from utils.logger_utils import get_logger

from governance.services.failover_provider import FailoverAsyncHTTPProvider
from governance.services.graphql_service import GraphQLService
from governance.services.ipfs_service import IPFSService
from governance.services.web3_service import Web3Service

logger = get_logger("Context")

_CONTRACT_OVERRIDES = {
    ContractNames.DAO_FACTORY: "dao_factory_address",
    ContractNames.DAO_REGISTRY: "dao_registry_address",
    ContractNames.PLUGIN_SETUP_PROCESSOR: "plugin_setup_processor_address",
    ContractNames.MULTISIG_REPO: "multisig_repo_address",
    ContractNames.TOKEN_VOTING_REPO: "token_voting_repo_address",
    ContractNames.ADDRESSLIST_VOTING_REPO: "addresslist_voting_repo_address",
}


def resolve_network(name: Union[str, SupportedNetwork]) -> SupportedNetwork:
    if isinstance(name, SupportedNetwork):
        return name
    if name in NETWORK_ALIASES:
        return NETWORK_ALIASES[name]
    try:
        return SupportedNetwork(name)
    except ValueError:
        raise UnsupportedNetworkError(name) from None


def network_contract_addresses(
    network: Union[str, SupportedNetwork], settings: Settings = default_settings
) -> Dict[ContractNames, str]:
    """Deployed addresses of `network` with the environment overrides applied."""
    addresses = dict(LIVE_CONTRACTS.get(resolve_network(network), {}))
    for role, field_name in _CONTRACT_OVERRIDES.items():
        override = getattr(settings.contracts, field_name)
        if override:
            addresses[role] = override
    if settings.network.ens_registry_address:
        addresses[ContractNames.ENS_REGISTRY] = settings.network.ens_registry_address
    return addresses


def network_contract_address(
    network: Union[str, SupportedNetwork], role: ContractNames, settings: Settings = default_settings
) -> str:
    address = network_contract_addresses(network, settings).get(role)
    if not address:
        raise UnsupportedNetworkError(network, f"no {role.value} deployed")
    return address


class Context(object):
    """
    Read-only bundle of what every client needs: the network, its deployed
    contract addresses and the three transport services.

    Keyword arguments override the environment backed `settings`; ready made
    services can be injected directly with `web3`, `graphql` and `ipfs`.
    `signer` is an eth_account LocalAccount or its hex private key.
    """

    def __init__(
        self,
        network: Optional[Union[str, SupportedNetwork]] = None,
        signer: Union[LocalAccount, str, None] = None,
        web3_providers: Optional[List[str]] = None,
        graphql_nodes: Optional[List[str]] = None,
        ipfs_nodes: Optional[List[str]] = None,
        ipfs_api_key: Optional[str] = None,
        gas_fee_estimation_factor: Optional[float] = None,
        contract_addresses: Optional[Dict[ContractNames, str]] = None,
        multi_fetch_timeout: Optional[float] = None,
        web3: Optional[Web3Service] = None,
        graphql: Optional[GraphQLService] = None,
        ipfs: Optional[IPFSService] = None,
        settings: Settings = default_settings,
    ):
        self._network = resolve_network(network or settings.network.network)

        factor = settings.client.gas_fee_estimation_factor if gas_fee_estimation_factor is None else gas_fee_estimation_factor
        if not 0 < factor <= 1:
            raise InvalidGasEstimationFactorError(factor)
        self._gas_fee_estimation_factor = factor
        self._multi_fetch_timeout = multi_fetch_timeout or settings.client.multi_fetch_timeout_seconds

        addresses = network_contract_addresses(self._network, settings)
        addresses.update(contract_addresses or {})
        self._contract_addresses = addresses

        if isinstance(signer, str):
            signer = Account.from_key(signer)

        timeout = settings.client.request_timeout_seconds
        if web3 is None:
            provider_urls = web3_providers if web3_providers is not None else settings.network.web3_provider_list
            w3 = AsyncWeb3(FailoverAsyncHTTPProvider(provider_urls)) if provider_urls else None
            web3 = Web3Service(
                self._network,
                w3=w3,
                signer=signer,
                contract_addresses=addresses,
                gas_fee_estimation_factor=factor,
                receipt_timeout=settings.client.tx_receipt_timeout_seconds,
            )
        self._web3 = web3

        if graphql is None:
            nodes = graphql_nodes or settings.network.graphql_node_list or GRAPHQL_NODES[self._network]
            graphql = GraphQLService(nodes, timeout=timeout)
        self._graphql = graphql

        if ipfs is None:
            nodes = ipfs_nodes or settings.network.ipfs_node_list or IPFS_NODES[self._network]
            api_key = ipfs_api_key or settings.network.ipfs_api_key
            headers = {IPFS_API_KEY_HEADER: api_key} if api_key else None
            ipfs = IPFSService(nodes, headers=headers, timeout=timeout)
        self._ipfs = ipfs

        logger.debug(f"Context ready for {self._network.value}")

    @property
    def network(self) -> SupportedNetwork:
        return self._network

    @property
    def web3(self) -> Web3Service:
        return self._web3

    @property
    def graphql(self) -> GraphQLService:
        return self._graphql

    @property
    def ipfs(self) -> IPFSService:
        return self._ipfs

    @property
    def gas_fee_estimation_factor(self) -> float:
        return self._gas_fee_estimation_factor

    @property
    def multi_fetch_timeout(self) -> float:
        return self._multi_fetch_timeout

    def get_address(self, role: ContractNames) -> str:
        address = self._contract_addresses.get(role)
        if not address:
            raise UnsupportedNetworkError(self._network.value, f"no {role.value} deployed")
        return address

    async def close(self) -> None:
        await self._web3.close()
        await self._graphql.close()
        await self._ipfs.close()

    async def __aenter__(self) -> "Context":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
