from unittest.mock import MagicMock

import pytest

from governance.context import Context
from governance.services.graphql_service import GraphQLService
from governance.services.ipfs_service import IPFSService
from governance.services.web3_service import Web3Service

DAO_ADDRESS = "0x1111111111111111111111111111111111111111"
PLUGIN_ADDRESS = "0x2222222222222222222222222222222222222222"
SIGNER_ADDRESS = "0x3333333333333333333333333333333333333333"
TOKEN_ADDRESS = "0x4444444444444444444444444444444444444444"
TX_HASH = "0x" + "ab" * 32
CID = "QmXhJawTJ3PkoKMyF3a4D89zybAHjpcGivkb7F1NkHAjpo"


def receipt_with(*logs):
    return {"status": 1, "logs": list(logs)}


@pytest.fixture
def signer():
    return MagicMock(address=SIGNER_ADDRESS)


@pytest.fixture
def web3_service(signer):
    service = MagicMock(spec=Web3Service)
    service.get_connected_signer.return_value = signer
    service.get_signer.return_value = signer
    service.send_transaction.return_value = TX_HASH
    service.wait_for_receipt.return_value = receipt_with()
    return service


@pytest.fixture
def graphql_service():
    service = MagicMock(spec=GraphQLService)
    service.request.return_value = {}
    return service


@pytest.fixture
def ipfs_service():
    service = MagicMock(spec=IPFSService)
    service.add.return_value = CID
    return service


@pytest.fixture
def context(web3_service, graphql_service, ipfs_service):
    return Context(network="local", web3=web3_service, graphql=graphql_service, ipfs=ipfs_service)
