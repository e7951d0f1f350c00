from abi.common import ACTION_COMPONENTS

# --- DAO (permission manager, executor and treasury) ---
DAO_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "_where", "type": "address"},
            {"internalType": "address", "name": "_who", "type": "address"},
            {"internalType": "bytes32", "name": "_permissionId", "type": "bytes32"}
        ],
        "name": "grant",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_where", "type": "address"},
            {"internalType": "address", "name": "_who", "type": "address"},
            {"internalType": "bytes32", "name": "_permissionId", "type": "bytes32"},
            {"internalType": "contract IPermissionCondition", "name": "_condition", "type": "address"}
        ],
        "name": "grantWithCondition",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_where", "type": "address"},
            {"internalType": "address", "name": "_who", "type": "address"},
            {"internalType": "bytes32", "name": "_permissionId", "type": "bytes32"}
        ],
        "name": "revoke",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_where", "type": "address"},
            {"internalType": "address", "name": "_who", "type": "address"},
            {"internalType": "bytes32", "name": "_permissionId", "type": "bytes32"},
            {"internalType": "bytes", "name": "_data", "type": "bytes"}
        ],
        "name": "hasPermission",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "bytes", "name": "_metadata", "type": "bytes"}],
        "name": "setMetadata",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "string", "name": "newDaoURI", "type": "string"}],
        "name": "setDaoURI",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "bytes4", "name": "_interfaceId", "type": "bytes4"},
            {"internalType": "bytes4", "name": "_callbackSelector", "type": "bytes4"},
            {"internalType": "bytes4", "name": "_magicNumber", "type": "bytes4"}
        ],
        "name": "registerStandardCallback",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "_signatureValidator", "type": "address"}],
        "name": "setSignatureValidator",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "_trustedForwarder", "type": "address"}],
        "name": "setTrustedForwarder",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address", "name": "newImplementation", "type": "address"}],
        "name": "upgradeTo",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "newImplementation", "type": "address"},
            {"internalType": "bytes", "name": "data", "type": "bytes"}
        ],
        "name": "upgradeToAndCall",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_token", "type": "address"},
            {"internalType": "uint256", "name": "_amount", "type": "uint256"},
            {"internalType": "string", "name": "_reference", "type": "string"}
        ],
        "name": "deposit",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "bytes32", "name": "_callId", "type": "bytes32"},
            {"internalType": "struct IDAO.Action[]", "name": "_actions", "type": "tuple[]", "components": ACTION_COMPONENTS},
            {"internalType": "uint256", "name": "_allowFailureMap", "type": "uint256"}
        ],
        "name": "execute",
        "outputs": [
            {"internalType": "bytes[]", "name": "execResults", "type": "bytes[]"},
            {"internalType": "uint256", "name": "failureMap", "type": "uint256"}
        ],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "sender", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "token", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "amount", "type": "uint256"},
            {"indexed": False, "internalType": "string", "name": "_reference", "type": "string"}
        ],
        "name": "Deposited",
        "type": "event"
    }
]
