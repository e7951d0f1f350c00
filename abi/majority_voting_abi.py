from abi.common import ACTION_COMPONENTS, MULTISIG_SETTINGS_COMPONENTS, VOTING_SETTINGS_COMPONENTS

_PROPOSAL_CREATED_EVENT = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "internalType": "uint256", "name": "proposalId", "type": "uint256"},
        {"indexed": True, "internalType": "address", "name": "creator", "type": "address"},
        {"indexed": False, "internalType": "uint64", "name": "startDate", "type": "uint64"},
        {"indexed": False, "internalType": "uint64", "name": "endDate", "type": "uint64"},
        {"indexed": False, "internalType": "bytes", "name": "metadata", "type": "bytes"},
        {"indexed": False, "internalType": "struct IDAO.Action[]", "name": "actions", "type": "tuple[]", "components": ACTION_COMPONENTS},
        {"indexed": False, "internalType": "uint256", "name": "allowFailureMap", "type": "uint256"}
    ],
    "name": "ProposalCreated",
    "type": "event"
}

# --- MAJORITY VOTING (shared by TokenVoting and AddresslistVoting) ---
MAJORITY_VOTING_ABI = [
    {
        "inputs": [
            {"internalType": "bytes", "name": "_metadata", "type": "bytes"},
            {"internalType": "struct IDAO.Action[]", "name": "_actions", "type": "tuple[]", "components": ACTION_COMPONENTS},
            {"internalType": "uint256", "name": "_allowFailureMap", "type": "uint256"},
            {"internalType": "uint64", "name": "_startDate", "type": "uint64"},
            {"internalType": "uint64", "name": "_endDate", "type": "uint64"},
            {"internalType": "enum IMajorityVoting.VoteOption", "name": "_voteOption", "type": "uint8"},
            {"internalType": "bool", "name": "_tryEarlyExecution", "type": "bool"}
        ],
        "name": "createProposal",
        "outputs": [{"internalType": "uint256", "name": "proposalId", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "_proposalId", "type": "uint256"},
            {"internalType": "enum IMajorityVoting.VoteOption", "name": "_voteOption", "type": "uint8"},
            {"internalType": "bool", "name": "_tryEarlyExecution", "type": "bool"}
        ],
        "name": "vote",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "_proposalId", "type": "uint256"},
            {"internalType": "address", "name": "_account", "type": "address"},
            {"internalType": "enum IMajorityVoting.VoteOption", "name": "_voteOption", "type": "uint8"}
        ],
        "name": "canVote",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_proposalId", "type": "uint256"}],
        "name": "canExecute",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_proposalId", "type": "uint256"}],
        "name": "execute",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {
                "internalType": "struct MajorityVotingBase.VotingSettings",
                "name": "_votingSettings",
                "type": "tuple",
                "components": VOTING_SETTINGS_COMPONENTS
            }
        ],
        "name": "updateVotingSettings",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    _PROPOSAL_CREATED_EVENT,
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {"indexed": True, "internalType": "address", "name": "voter", "type": "address"},
            {"indexed": False, "internalType": "enum IMajorityVoting.VoteOption", "name": "voteOption", "type": "uint8"},
            {"indexed": False, "internalType": "uint256", "name": "votingPower", "type": "uint256"}
        ],
        "name": "VoteCast",
        "type": "event"
    }
]

_MEMBERS_FUNCTIONS = [
    {
        "inputs": [{"internalType": "address[]", "name": "_members", "type": "address[]"}],
        "name": "addAddresses",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "address[]", "name": "_members", "type": "address[]"}],
        "name": "removeAddresses",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

# --- TOKEN VOTING ---
TOKEN_VOTING_ABI = MAJORITY_VOTING_ABI + [
    {
        "inputs": [],
        "name": "getVotingToken",
        "outputs": [{"internalType": "contract IVotesUpgradeable", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]

# --- ADDRESSLIST VOTING ---
ADDRESSLIST_VOTING_ABI = MAJORITY_VOTING_ABI + _MEMBERS_FUNCTIONS + [
    {
        "inputs": [{"internalType": "address", "name": "_account", "type": "address"}],
        "name": "isListed",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    }
]

# --- MULTISIG ---
MULTISIG_ABI = _MEMBERS_FUNCTIONS + [
    {
        "inputs": [
            {"internalType": "bytes", "name": "_metadata", "type": "bytes"},
            {"internalType": "struct IDAO.Action[]", "name": "_actions", "type": "tuple[]", "components": ACTION_COMPONENTS},
            {"internalType": "uint256", "name": "_allowFailureMap", "type": "uint256"},
            {"internalType": "bool", "name": "_approveProposal", "type": "bool"},
            {"internalType": "bool", "name": "_tryExecution", "type": "bool"},
            {"internalType": "uint64", "name": "_startDate", "type": "uint64"},
            {"internalType": "uint64", "name": "_endDate", "type": "uint64"}
        ],
        "name": "createProposal",
        "outputs": [{"internalType": "uint256", "name": "proposalId", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "_proposalId", "type": "uint256"},
            {"internalType": "bool", "name": "_tryExecution", "type": "bool"}
        ],
        "name": "approve",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "_proposalId", "type": "uint256"},
            {"internalType": "address", "name": "_account", "type": "address"}
        ],
        "name": "canApprove",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_proposalId", "type": "uint256"}],
        "name": "canExecute",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "_proposalId", "type": "uint256"}],
        "name": "execute",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {
                "internalType": "struct Multisig.MultisigSettings",
                "name": "_multisigSettings",
                "type": "tuple",
                "components": MULTISIG_SETTINGS_COMPONENTS
            }
        ],
        "name": "updateMultisigSettings",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    _PROPOSAL_CREATED_EVENT,
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "uint256", "name": "proposalId", "type": "uint256"},
            {"indexed": True, "internalType": "address", "name": "approver", "type": "address"}
        ],
        "name": "Approved",
        "type": "event"
    }
]
