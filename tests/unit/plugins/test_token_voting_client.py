import asyncio
from datetime import datetime, timezone

import pytest
from eth_abi import decode

from conftest import CID, DAO_ADDRESS, PLUGIN_ADDRESS, SIGNER_ADDRESS, TOKEN_ADDRESS, TX_HASH, receipt_with
from constants.networks import LIVE_CONTRACTS, ContractNames, SupportedNetwork
from governance.context import Context
from governance.contracts.interfaces import TOKEN_VOTING_INTERFACE
from governance.models.common import DaoAction, ProposalMetadata, ProposalStatus
from governance.models.proposal import (
    CanVoteParams,
    CreateMajorityVotingProposalParams,
    MintTokenParams,
    ProposalQueryParams,
    TokenBalance,
    TokenVotingInstallToken,
    TokenVotingPluginInstall,
    VoteProposalParams,
    VoteValues,
    VotingMode,
    VotingSettings,
)
from governance.plugins.token_voting import TOKEN_VOTING_INSTALL_TYPES, TokenVotingClient
from utils.exceptions import NoSignerError, ProposalCreationError, SizeMismatchError

PROPOSAL_ID = f"{PLUGIN_ADDRESS}_0x3"

METADATA = ProposalMetadata(title="Fund the grants round", summary="Moves 10 ETH")


@pytest.fixture
def client(context):
    return TokenVotingClient(context)


def proposal_params(**overrides):
    values = {
        "plugin_address": PLUGIN_ADDRESS,
        "metadata": METADATA,
        "actions": [DaoAction(to=TOKEN_ADDRESS, value=0, data=b"\x01")],
        "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "end_date": datetime(2024, 1, 8, tzinfo=timezone.utc),
        "creator_vote": VoteValues.YES,
    }
    values.update(overrides)
    return CreateMajorityVotingProposalParams(**values)


def proposal_created(index):
    return TOKEN_VOTING_INTERFACE.encode_log(
        "ProposalCreated",
        {
            "proposalId": index,
            "creator": SIGNER_ADDRESS,
            "startDate": 0,
            "endDate": 0,
            "metadata": b"",
            "actions": [],
            "allowFailureMap": 0,
        },
    )


def test_failsafe_flags_must_match_the_actions(client, web3_service):
    with pytest.raises(SizeMismatchError):
        client.methods.create_proposal(proposal_params(failsafe_actions=[True, False]))
    web3_service.send_transaction.assert_not_called()


def test_create_proposal_needs_a_signer(client, web3_service):
    web3_service.get_connected_signer.side_effect = NoSignerError()
    with pytest.raises(NoSignerError):
        client.methods.create_proposal(proposal_params())


@pytest.mark.asyncio
async def test_create_proposal_pins_metadata(client, web3_service, ipfs_service):
    web3_service.wait_for_receipt.return_value = receipt_with(proposal_created(3))

    steps = await client.methods.create_proposal(proposal_params(failsafe_actions=[True])).collect()

    assert [step.key for step in steps] == ["creating", "done"]
    assert steps[0].tx_hash == TX_HASH
    assert steps[1].proposal_id == PROPOSAL_ID
    ipfs_service.pin.assert_awaited_once_with(CID)

    to, data = web3_service.send_transaction.call_args.args
    assert to == PLUGIN_ADDRESS
    metadata, actions, failure_map, start, end, creator_vote, execute_on_pass = (
        TOKEN_VOTING_INTERFACE.decode_function_data("createProposal", data)
    )
    assert metadata == f"ipfs://{CID}".encode("utf-8")
    assert actions == [(TOKEN_ADDRESS, 0, b"\x01")]
    assert failure_map == 1
    assert end - start == 7 * 24 * 3600
    assert creator_vote == int(VoteValues.YES)
    assert execute_on_pass is False


@pytest.mark.asyncio
async def test_create_proposal_with_pinned_metadata(client, web3_service, ipfs_service):
    web3_service.wait_for_receipt.return_value = receipt_with(proposal_created(0))
    params = proposal_params(metadata=None, metadata_uri=f"ipfs://{CID}", creator_vote=None)

    done = await client.methods.create_proposal(params).run()

    assert done.proposal_id == f"{PLUGIN_ADDRESS}_0x0"
    ipfs_service.add.assert_not_called()


@pytest.mark.asyncio
async def test_create_proposal_without_event(client):
    with pytest.raises(ProposalCreationError):
        await client.methods.create_proposal(proposal_params()).run()


@pytest.mark.asyncio
async def test_vote_proposal(client, web3_service):
    log = TOKEN_VOTING_INTERFACE.encode_log(
        "VoteCast", {"proposalId": 3, "voter": SIGNER_ADDRESS, "voteOption": 2, "votingPower": 10}
    )
    web3_service.wait_for_receipt.return_value = receipt_with(log)

    steps = await client.methods.vote_proposal(VoteProposalParams(proposal_id=PROPOSAL_ID, vote=VoteValues.YES)).collect()

    assert [step.key for step in steps] == ["voting", "done"]
    assert steps[1].vote_id == f"{PROPOSAL_ID}_{SIGNER_ADDRESS.lower()}"
    _, data = web3_service.send_transaction.call_args.args
    assert TOKEN_VOTING_INTERFACE.decode_function_data("vote", data) == (3, 2, False)


@pytest.mark.asyncio
async def test_execute_proposal(client, web3_service):
    steps = await client.methods.execute_proposal(PROPOSAL_ID).collect()

    assert [step.key for step in steps] == ["executing", "done"]
    to, data = web3_service.send_transaction.call_args.args
    assert to == PLUGIN_ADDRESS
    assert TOKEN_VOTING_INTERFACE.decode_function_data("execute", data) == (3,)


@pytest.mark.asyncio
async def test_can_vote(client, web3_service):
    web3_service.call.return_value = TOKEN_VOTING_INTERFACE.encode_function_result("canVote", [True])
    assert await client.methods.can_vote(CanVoteParams(proposal_id=PROPOSAL_ID, voter_address=SIGNER_ADDRESS))
    to, data = web3_service.call.call_args.args
    assert to == PLUGIN_ADDRESS
    assert TOKEN_VOTING_INTERFACE.decode_function_data("canVote", data) == (3, SIGNER_ADDRESS, 2)


@pytest.mark.asyncio
async def test_get_proposal_uses_the_indexer_id(client, graphql_service):
    graphql_service.request.return_value = {"tokenVotingProposal": None}

    assert await client.methods.get_proposal(PROPOSAL_ID) is None
    variables = graphql_service.request.call_args.args[1]
    assert variables == {"proposalId": f"{PLUGIN_ADDRESS}_0x{3:064x}"}


@pytest.mark.asyncio
async def test_get_proposals_filters_by_dao_and_status(client, graphql_service):
    graphql_service.request.return_value = {
        "tokenVotingProposals": [
            {
                "id": f"{PLUGIN_ADDRESS}_0x{3:064x}",
                "dao": {"id": DAO_ADDRESS, "subdomain": "grants"},
                "creator": SIGNER_ADDRESS,
                "metadata": "https://example.org/proposal.json",
                "startDate": "1000",
                "endDate": "2000",
                "executed": True,
                "executable": False,
                "voters": [],
            }
        ]
    }
    params = ProposalQueryParams(dao_address_or_ens=DAO_ADDRESS, status=ProposalStatus.EXECUTED, limit=5)

    proposals = await client.methods.get_proposals(params)

    variables = graphql_service.request.call_args.args[1]
    assert variables["where"]["dao"] == DAO_ADDRESS.lower()
    assert variables["where"]["executed"] is True
    assert "endDate_lte" in variables["where"]
    assert variables["limit"] == 5
    assert [proposal.id for proposal in proposals] == [PROPOSAL_ID]
    assert proposals[0].status == ProposalStatus.EXECUTED
    assert proposals[0].metadata.title == "(unsupported metadata link)"


def proposal_record(index, metadata):
    return {
        "id": f"{PLUGIN_ADDRESS}_0x{index:064x}",
        "dao": {"id": DAO_ADDRESS, "subdomain": "grants"},
        "creator": SIGNER_ADDRESS,
        "metadata": metadata,
        "startDate": "1000",
        "endDate": "2000",
        "executed": False,
        "executable": True,
        "voters": [],
    }


@pytest.mark.asyncio
async def test_get_proposal_with_unsupported_link(client, graphql_service, ipfs_service):
    graphql_service.request.return_value = {"tokenVotingProposal": proposal_record(3, "ipfs://not-a-cid")}

    proposal = await client.methods.get_proposal(PROPOSAL_ID)

    assert proposal.id == PROPOSAL_ID
    assert proposal.metadata.title == "(unsupported metadata link)"
    ipfs_service.fetch_string.assert_not_called()


@pytest.mark.asyncio
async def test_get_proposals_times_out_one_metadata_fetch(web3_service, graphql_service, ipfs_service):
    slow_cid = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"

    async def fetch_string(cid):
        if cid == slow_cid:
            await asyncio.sleep(5)
        return '{"title": "ok", "summary": "fetched"}'

    ipfs_service.fetch_string.side_effect = fetch_string
    graphql_service.request.return_value = {
        "tokenVotingProposals": [proposal_record(1, f"ipfs://{slow_cid}"), proposal_record(2, f"ipfs://{CID}")]
    }
    context = Context(
        network="local", web3=web3_service, graphql=graphql_service, ipfs=ipfs_service, multi_fetch_timeout=0.1
    )

    proposals = await TokenVotingClient(context).methods.get_proposals()

    assert [proposal.metadata.title for proposal in proposals] == ["(unavailable metadata)", "ok"]
    assert [proposal.id for proposal in proposals] == [f"{PLUGIN_ADDRESS}_0x1", f"{PLUGIN_ADDRESS}_0x2"]


@pytest.mark.asyncio
async def test_get_settings(client, graphql_service):
    graphql_service.request.return_value = {
        "tokenVotingPlugin": {
            "minDuration": "86400",
            "minProposerVotingPower": "1",
            "minParticipation": "150000000000000000",
            "supportThreshold": "500000000000000000",
            "votingMode": "EarlyExecution",
        }
    }

    settings = await client.methods.get_settings(PLUGIN_ADDRESS)

    assert settings == VotingSettings(
        min_duration=86400,
        min_proposer_voting_power=1,
        min_participation=0.15,
        support_threshold=0.5,
        voting_mode=VotingMode.EARLY_EXECUTION,
    )


@pytest.mark.asyncio
async def test_get_token(client, graphql_service):
    graphql_service.request.return_value = {
        "tokenVotingPlugin": {"token": {"id": TOKEN_ADDRESS, "name": "Grant", "symbol": "GRT", "decimals": 18}}
    }
    token = await client.methods.get_token(PLUGIN_ADDRESS)
    assert (token.address, token.symbol, token.decimals) == (TOKEN_ADDRESS, "GRT", 18)


@pytest.mark.asyncio
async def test_get_members_of_unknown_plugin(client, graphql_service):
    graphql_service.request.return_value = {"tokenVotingPlugin": None}
    assert await client.methods.get_members(PLUGIN_ADDRESS) is None


def test_install_item_for_a_new_token(client):
    params = TokenVotingPluginInstall(
        voting_settings=VotingSettings(support_threshold=0.5, min_participation=0.25, min_duration=3600),
        token=TokenVotingInstallToken(
            name="Grant", symbol="GRT", balances=[TokenBalance(address=SIGNER_ADDRESS, balance=100)]
        ),
    )

    item = client.encoding.get_plugin_install_item(params, SupportedNetwork.LOCAL)

    assert item.id == LIVE_CONTRACTS[SupportedNetwork.LOCAL][ContractNames.TOKEN_VOTING_REPO]
    settings, token, balances = decode(TOKEN_VOTING_INSTALL_TYPES, item.data)
    assert settings == (0, 5 * 10**17, 25 * 10**16, 3600, 0)
    assert token == ("0x0000000000000000000000000000000000000000", "Grant", "GRT")
    assert balances == ((SIGNER_ADDRESS,), (100,))


def test_mint_token_round_trip(client):
    action = client.encoding.mint_token_action(TOKEN_ADDRESS, MintTokenParams(address=SIGNER_ADDRESS, amount=50))

    assert action.to == TOKEN_ADDRESS
    assert client.decoding.mint_token_action(action.data) == MintTokenParams(address=SIGNER_ADDRESS, amount=50)
    assert client.decoding.find_interface(action.data).function_name == "mint"


def test_update_settings_round_trip(client):
    settings = VotingSettings(
        support_threshold=0.6, min_participation=0.1, min_duration=7200, voting_mode=VotingMode.VOTE_REPLACEMENT
    )
    action = client.encoding.update_plugin_settings_action(PLUGIN_ADDRESS, settings)
    assert client.decoding.update_plugin_settings_action(action.data) == settings


@pytest.mark.asyncio
async def test_create_proposal_estimate(client, web3_service):
    web3_service.estimate_gas.return_value = 50000
    await client.estimation.create_proposal(proposal_params())

    to, data = web3_service.estimate_gas.call_args.args
    assert to == PLUGIN_ADDRESS
    assert TOKEN_VOTING_INTERFACE.decode_function_data("createProposal", data)[0] == b""
    web3_service.get_approximate_gas_fee.assert_awaited_once_with(50000)
