from abi.common import TAG_COMPONENTS

# --- PLUGIN REPO ---
PLUGIN_REPO_ABI = [
    {
        "inputs": [],
        "name": "latestRelease",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint8", "name": "_release", "type": "uint8"}],
        "name": "getLatestVersion",
        "outputs": [
            {
                "internalType": "struct PluginRepo.Version",
                "name": "",
                "type": "tuple",
                "components": [
                    {"internalType": "struct PluginRepo.Tag", "name": "tag", "type": "tuple", "components": TAG_COMPONENTS},
                    {"internalType": "address", "name": "pluginSetup", "type": "address"},
                    {"internalType": "bytes", "name": "buildMetadata", "type": "bytes"}
                ]
            }
        ],
        "stateMutability": "view",
        "type": "function"
    }
]
