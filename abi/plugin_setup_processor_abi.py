from abi.common import (
    MULTI_TARGET_PERMISSION_COMPONENTS,
    PLUGIN_SETUP_REF_COMPONENTS,
    PREPARED_SETUP_DATA_COMPONENTS,
    SETUP_PAYLOAD_COMPONENTS,
    TAG_COMPONENTS,
)

_PLUGIN_SETUP_REF = {
    "internalType": "struct PluginSetupRef",
    "name": "pluginSetupRef",
    "type": "tuple",
    "components": PLUGIN_SETUP_REF_COMPONENTS
}

_PERMISSIONS = {
    "internalType": "struct PermissionLib.MultiTargetPermission[]",
    "name": "permissions",
    "type": "tuple[]",
    "components": MULTI_TARGET_PERMISSION_COMPONENTS
}

_SETUP_PAYLOAD = {
    "internalType": "struct IPluginSetup.SetupPayload",
    "name": "setupPayload",
    "type": "tuple",
    "components": SETUP_PAYLOAD_COMPONENTS
}

_PREPARED_SETUP_DATA = {
    "internalType": "struct IPluginSetup.PreparedSetupData",
    "name": "preparedSetupData",
    "type": "tuple",
    "components": PREPARED_SETUP_DATA_COMPONENTS
}

_VERSION_TAG = {
    "internalType": "struct PluginRepo.Tag",
    "name": "versionTag",
    "type": "tuple",
    "components": TAG_COMPONENTS
}

# --- PLUGIN SETUP PROCESSOR ---
PLUGIN_SETUP_PROCESSOR_ABI = [
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.PrepareInstallationParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    _PLUGIN_SETUP_REF,
                    {"internalType": "bytes", "name": "data", "type": "bytes"}
                ]
            }
        ],
        "name": "prepareInstallation",
        "outputs": [
            {"internalType": "address", "name": "plugin", "type": "address"},
            _PREPARED_SETUP_DATA
        ],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.ApplyInstallationParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    _PLUGIN_SETUP_REF,
                    {"internalType": "address", "name": "plugin", "type": "address"},
                    _PERMISSIONS,
                    {"internalType": "bytes32", "name": "helpersHash", "type": "bytes32"}
                ]
            }
        ],
        "name": "applyInstallation",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.PrepareUpdateParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    {"internalType": "struct PluginRepo.Tag", "name": "currentVersionTag", "type": "tuple", "components": TAG_COMPONENTS},
                    {"internalType": "struct PluginRepo.Tag", "name": "newVersionTag", "type": "tuple", "components": TAG_COMPONENTS},
                    {"internalType": "contract PluginRepo", "name": "pluginSetupRepo", "type": "address"},
                    _SETUP_PAYLOAD
                ]
            }
        ],
        "name": "prepareUpdate",
        "outputs": [
            {"internalType": "bytes", "name": "initData", "type": "bytes"},
            _PREPARED_SETUP_DATA
        ],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.ApplyUpdateParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    {"internalType": "address", "name": "plugin", "type": "address"},
                    _PLUGIN_SETUP_REF,
                    {"internalType": "bytes", "name": "initData", "type": "bytes"},
                    _PERMISSIONS,
                    {"internalType": "bytes32", "name": "helpersHash", "type": "bytes32"}
                ]
            }
        ],
        "name": "applyUpdate",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.PrepareUninstallationParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    _PLUGIN_SETUP_REF,
                    _SETUP_PAYLOAD
                ]
            }
        ],
        "name": "prepareUninstallation",
        "outputs": [_PERMISSIONS],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "address", "name": "_dao", "type": "address"},
            {
                "internalType": "struct PluginSetupProcessor.ApplyUninstallationParams",
                "name": "_params",
                "type": "tuple",
                "components": [
                    {"internalType": "address", "name": "plugin", "type": "address"},
                    _PLUGIN_SETUP_REF,
                    _PERMISSIONS
                ]
            }
        ],
        "name": "applyUninstallation",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "sender", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "dao", "type": "address"},
            {"indexed": False, "internalType": "bytes32", "name": "preparedSetupId", "type": "bytes32"},
            {"indexed": True, "internalType": "contract PluginRepo", "name": "pluginSetupRepo", "type": "address"},
            dict(_VERSION_TAG, indexed=False),
            {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
            {"indexed": False, "internalType": "address", "name": "plugin", "type": "address"},
            dict(_PREPARED_SETUP_DATA, indexed=False)
        ],
        "name": "InstallationPrepared",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "sender", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "dao", "type": "address"},
            {"indexed": False, "internalType": "bytes32", "name": "preparedSetupId", "type": "bytes32"},
            {"indexed": True, "internalType": "contract PluginRepo", "name": "pluginSetupRepo", "type": "address"},
            dict(_VERSION_TAG, indexed=False),
            dict(_SETUP_PAYLOAD, indexed=False),
            dict(_PREPARED_SETUP_DATA, indexed=False),
            {"indexed": False, "internalType": "bytes", "name": "initData", "type": "bytes"}
        ],
        "name": "UpdatePrepared",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "sender", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "dao", "type": "address"},
            {"indexed": False, "internalType": "bytes32", "name": "preparedSetupId", "type": "bytes32"},
            {"indexed": True, "internalType": "contract PluginRepo", "name": "pluginSetupRepo", "type": "address"},
            dict(_VERSION_TAG, indexed=False),
            dict(_SETUP_PAYLOAD, indexed=False),
            dict(_PERMISSIONS, indexed=False)
        ],
        "name": "UninstallationPrepared",
        "type": "event"
    }
]
