from governance.mappers.dao_mapper import to_dao_details
from governance.models.common import DaoMetadata

DAO = "0x1111111111111111111111111111111111111111"
PLUGIN = "0x2222222222222222222222222222222222222222"


def test_dao_details():
    record = {
        "id": DAO,
        "subdomain": "grants",
        "createdAt": "1700000000",
        "plugins": [
            {
                "appliedPreparation": {"pluginAddress": PLUGIN},
                "appliedPluginRepo": {"subdomain": "token-voting"},
                "appliedVersion": {"build": "2", "release": {"release": "1"}},
            },
            {"appliedPreparation": None, "appliedPluginRepo": None, "appliedVersion": None},
        ],
    }
    details = to_dao_details(record, DaoMetadata(name="Grants"))
    assert details.ens_domain == "grants.dao.eth"
    assert details.creation_date.year == 2023
    assert len(details.plugins) == 1
    plugin = details.plugins[0]
    assert plugin.id == "token-voting.plugin.dao.eth"
    assert (plugin.release, plugin.build) == (1, 2)
    assert plugin.instance_address == PLUGIN
