from abi.dao_abi import DAO_ABI
from abi.dao_factory_abi import DAO_FACTORY_ABI, DAO_REGISTRY_ABI
from abi.erc20_abi import ERC20_ABI
from abi.majority_voting_abi import ADDRESSLIST_VOTING_ABI, MULTISIG_ABI, TOKEN_VOTING_ABI
from abi.plugin_repo_abi import PLUGIN_REPO_ABI
from abi.plugin_setup_processor_abi import PLUGIN_SETUP_PROCESSOR_ABI

from governance.contracts.contract_interface import ContractInterface

DAO_INTERFACE = ContractInterface(DAO_ABI, "DAO")
DAO_FACTORY_INTERFACE = ContractInterface(DAO_FACTORY_ABI, "DAOFactory")
DAO_REGISTRY_INTERFACE = ContractInterface(DAO_REGISTRY_ABI, "DAORegistry")
PLUGIN_SETUP_PROCESSOR_INTERFACE = ContractInterface(PLUGIN_SETUP_PROCESSOR_ABI, "PluginSetupProcessor")
PLUGIN_REPO_INTERFACE = ContractInterface(PLUGIN_REPO_ABI, "PluginRepo")
ERC20_INTERFACE = ContractInterface(ERC20_ABI, "ERC20")
TOKEN_VOTING_INTERFACE = ContractInterface(TOKEN_VOTING_ABI, "TokenVoting")
ADDRESSLIST_VOTING_INTERFACE = ContractInterface(ADDRESSLIST_VOTING_ABI, "AddresslistVoting")
MULTISIG_INTERFACE = ContractInterface(MULTISIG_ABI, "Multisig")
