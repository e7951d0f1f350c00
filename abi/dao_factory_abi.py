from abi.common import PLUGIN_SETUP_REF_COMPONENTS

# --- DAO FACTORY ---
DAO_FACTORY_ABI = [
    {
        "inputs": [
            {
                "internalType": "struct DAOFactory.DAOSettings",
                "name": "_daoSettings",
                "type": "tuple",
                "components": [
                    {"internalType": "address", "name": "trustedForwarder", "type": "address"},
                    {"internalType": "string", "name": "daoURI", "type": "string"},
                    {"internalType": "string", "name": "subdomain", "type": "string"},
                    {"internalType": "bytes", "name": "metadata", "type": "bytes"}
                ]
            },
            {
                "internalType": "struct DAOFactory.PluginSettings[]",
                "name": "_pluginSettings",
                "type": "tuple[]",
                "components": [
                    {
                        "internalType": "struct PluginSetupRef",
                        "name": "pluginSetupRef",
                        "type": "tuple",
                        "components": PLUGIN_SETUP_REF_COMPONENTS
                    },
                    {"internalType": "bytes", "name": "data", "type": "bytes"}
                ]
            }
        ],
        "name": "createDao",
        "outputs": [{"internalType": "contract DAO", "name": "createdDao", "type": "address"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "daoBase",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "daoRegistry",
        "outputs": [{"internalType": "contract DAORegistry", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "pluginSetupProcessor",
        "outputs": [{"internalType": "contract PluginSetupProcessor", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]

# --- DAO REGISTRY ---
DAO_REGISTRY_ABI = [
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "dao", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "creator", "type": "address"},
            {"indexed": False, "internalType": "string", "name": "subdomain", "type": "string"}
        ],
        "name": "DAORegistered",
        "type": "event"
    }
]
