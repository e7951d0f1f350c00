# Struct components shared by the framework ABIs

ACTION_COMPONENTS = [
    {"internalType": "address", "name": "to", "type": "address"},
    {"internalType": "uint256", "name": "value", "type": "uint256"},
    {"internalType": "bytes", "name": "data", "type": "bytes"}
]

TAG_COMPONENTS = [
    {"internalType": "uint8", "name": "release", "type": "uint8"},
    {"internalType": "uint16", "name": "build", "type": "uint16"}
]

PLUGIN_SETUP_REF_COMPONENTS = [
    {"internalType": "struct PluginRepo.Tag", "name": "versionTag", "type": "tuple", "components": TAG_COMPONENTS},
    {"internalType": "contract PluginRepo", "name": "pluginSetupRepo", "type": "address"}
]

MULTI_TARGET_PERMISSION_COMPONENTS = [
    {"internalType": "enum PermissionLib.Operation", "name": "operation", "type": "uint8"},
    {"internalType": "address", "name": "where", "type": "address"},
    {"internalType": "address", "name": "who", "type": "address"},
    {"internalType": "address", "name": "condition", "type": "address"},
    {"internalType": "bytes32", "name": "permissionId", "type": "bytes32"}
]

PREPARED_SETUP_DATA_COMPONENTS = [
    {"internalType": "address[]", "name": "helpers", "type": "address[]"},
    {
        "internalType": "struct PermissionLib.MultiTargetPermission[]",
        "name": "permissions",
        "type": "tuple[]",
        "components": MULTI_TARGET_PERMISSION_COMPONENTS
    }
]

SETUP_PAYLOAD_COMPONENTS = [
    {"internalType": "address", "name": "plugin", "type": "address"},
    {"internalType": "address[]", "name": "currentHelpers", "type": "address[]"},
    {"internalType": "bytes", "name": "data", "type": "bytes"}
]

VOTING_SETTINGS_COMPONENTS = [
    {"internalType": "enum MajorityVotingBase.VotingMode", "name": "votingMode", "type": "uint8"},
    {"internalType": "uint64", "name": "supportThreshold", "type": "uint64"},
    {"internalType": "uint64", "name": "minParticipation", "type": "uint64"},
    {"internalType": "uint64", "name": "minDuration", "type": "uint64"},
    {"internalType": "uint256", "name": "minProposerVotingPower", "type": "uint256"}
]

MULTISIG_SETTINGS_COMPONENTS = [
    {"internalType": "bool", "name": "onlyListed", "type": "bool"},
    {"internalType": "uint16", "name": "minApprovals", "type": "uint16"}
]
