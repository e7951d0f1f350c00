from enum import Enum
from typing import Dict, List


class SupportedNetwork(str, Enum):
    MAINNET = "homestead"
    GOERLI = "goerli"
    SEPOLIA = "sepolia"
    POLYGON = "matic"
    MUMBAI = "maticmum"
    BASE = "base"
    BASE_GOERLI = "baseGoerli"
    BASE_SEPOLIA = "baseSepolia"
    ARBITRUM = "arbitrum"
    ARBITRUM_GOERLI = "arbitrumGoerli"
    ARBITRUM_SEPOLIA = "arbitrumSepolia"
    LOCAL = "local"


# Aliases accepted when reading the network from the environment
NETWORK_ALIASES: Dict[str, SupportedNetwork] = {
    "mainnet": SupportedNetwork.MAINNET,
    "polygon": SupportedNetwork.POLYGON,
    "mumbai": SupportedNetwork.MUMBAI,
}


class ContractNames(str, Enum):
    DAO_FACTORY = "daoFactoryAddress"
    DAO_REGISTRY = "daoRegistryAddress"
    PLUGIN_SETUP_PROCESSOR = "pluginSetupProcessorAddress"
    MULTISIG_REPO = "multisigRepoAddress"
    ADMIN_REPO = "adminRepoAddress"
    ADDRESSLIST_VOTING_REPO = "addresslistVotingRepoAddress"
    TOKEN_VOTING_REPO = "tokenVotingRepoAddress"
    MULTISIG_SETUP = "multisigSetupAddress"
    ADMIN_SETUP = "adminSetupAddress"
    ADDRESSLIST_VOTING_SETUP = "addresslistVotingSetupAddress"
    TOKEN_VOTING_SETUP = "tokenVotingSetupAddress"
    ENS_REGISTRY = "ensRegistryAddress"


_GRAPHQL_NETWORK_NAMES: Dict[SupportedNetwork, str] = {
    SupportedNetwork.MAINNET: "mainnet",
    SupportedNetwork.GOERLI: "goerli",
    SupportedNetwork.SEPOLIA: "sepolia",
    SupportedNetwork.POLYGON: "polygon",
    SupportedNetwork.MUMBAI: "mumbai",
    SupportedNetwork.BASE: "baseMainnet",
    SupportedNetwork.BASE_GOERLI: "baseGoerli",
    SupportedNetwork.BASE_SEPOLIA: "baseSepolia",
    SupportedNetwork.ARBITRUM: "arbitrum",
    SupportedNetwork.ARBITRUM_GOERLI: "arbitrumGoerli",
    SupportedNetwork.ARBITRUM_SEPOLIA: "arbitrumSepolia",
    SupportedNetwork.LOCAL: "local",
}

SUBGRAPH_VERSION = "v1.4.0"


def get_graphql_node(network: SupportedNetwork) -> str:
    return (
        "https://subgraph.satsuma-prod.com/qHR2wGfc5RLi6/aragon/"
        f"osx-{_GRAPHQL_NETWORK_NAMES[network]}/version/{SUBGRAPH_VERSION}/api"
    )


GRAPHQL_NODES: Dict[SupportedNetwork, List[str]] = {
    network: [get_graphql_node(network)] for network in SupportedNetwork
}

_IPFS_PROD = ["https://prod.ipfs.aragon.network/api/v0"]
_IPFS_TEST = ["https://test.ipfs.aragon.network/api/v0"]

IPFS_NODES: Dict[SupportedNetwork, List[str]] = {
    SupportedNetwork.MAINNET: _IPFS_PROD,
    SupportedNetwork.POLYGON: _IPFS_PROD,
    SupportedNetwork.BASE: _IPFS_PROD,
    SupportedNetwork.ARBITRUM: _IPFS_PROD,
    SupportedNetwork.GOERLI: _IPFS_TEST,
    SupportedNetwork.SEPOLIA: _IPFS_TEST,
    SupportedNetwork.MUMBAI: _IPFS_TEST,
    SupportedNetwork.BASE_GOERLI: _IPFS_TEST,
    SupportedNetwork.BASE_SEPOLIA: _IPFS_TEST,
    SupportedNetwork.ARBITRUM_GOERLI: _IPFS_TEST,
    SupportedNetwork.ARBITRUM_SEPOLIA: _IPFS_TEST,
    SupportedNetwork.LOCAL: _IPFS_TEST,
}

IPFS_API_KEY_HEADER = "X-API-KEY"

# Deployed framework contracts per network. Live networks are filled from
# the environment (see config.settings.ContractSettings) since the addresses
# change with every framework release.
LIVE_CONTRACTS: Dict[SupportedNetwork, Dict[ContractNames, str]] = {
    SupportedNetwork.LOCAL: {
        ContractNames.DAO_FACTORY: "0x4ed7c70F96B99c776995fB64377f0d4aB3B0e1C1",
        ContractNames.PLUGIN_SETUP_PROCESSOR: "0x59b670e9fA9D0A427751Af201D676719a970857b",
        ContractNames.MULTISIG_REPO: "0xD235571A8ED990638699d87c1e7527F576C91aB7",
        ContractNames.ADMIN_REPO: "0x8755D348E575Fc4a68EC5d0B609BC7c070ebeA3d",
        ContractNames.ADDRESSLIST_VOTING_REPO: "0x624dC0EcEFD94640D316eE3ACfD147Ed9B764638",
        ContractNames.TOKEN_VOTING_REPO: "0x94cD1b4DeA480E09A1e0d83f6C92b9A5C6136171",
        ContractNames.MULTISIG_SETUP: "0xc3e53F4d16Ae77Db1c982e75a937B9f60FE63690",
        ContractNames.ADMIN_SETUP: "0xE6E340D132b5f46d1e472DebcD681B2aBc16e57E",
        ContractNames.ADDRESSLIST_VOTING_SETUP: "0x7a2088a1bFc9d81c55368AE168C2C02570cB814F",
        ContractNames.TOKEN_VOTING_SETUP: "0x67d269191c92Caf3cD7723F116c85e6E9bf55933",
        ContractNames.ENS_REGISTRY: "0xDc64a140Aa3E981100a9becA4E685f962f0cF6C9",
    },
}
