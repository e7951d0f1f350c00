from typing import Optional, Union

from eth_abi import encode

from constants.metadata import ADDRESS_ZERO
from constants.networks import SupportedNetwork
from utils.formatter_utils import BytesLike

from governance.client.decoding import find_interface_in
from governance.codecs.address_codec import ensure_address
from governance.codecs.voting_settings_codec import VOTING_SETTINGS_TYPE, voting_settings_to_contract
from governance.context import Context
from governance.contracts.interfaces import ERC20_INTERFACE
from governance.core import ClientCore
from governance.graphql_queries.majority_voting import QUERY_TOKEN_VOTING_PLUGIN_TOKEN
from governance.mappers.proposal_mapper import to_token_details
from governance.models.common import DaoAction, InterfaceParams
from governance.models.dao import PluginInstallItem
from governance.models.proposal import MintTokenParams, TokenDetails, TokenVotingPluginInstall
from governance.plugins.decoding import MajorityVotingClientDecoding
from governance.plugins.encoding import MajorityVotingClientEncoding
from governance.plugins.estimation import MajorityVotingClientEstimation
from governance.plugins.families import TOKEN_VOTING
from governance.plugins.methods import MajorityVotingClientMethods

TOKEN_VOTING_INSTALL_TYPES = [VOTING_SETTINGS_TYPE, "(address,string,string)", "(address[],uint256[])"]


class TokenVotingClientMethods(MajorityVotingClientMethods):
    family = TOKEN_VOTING

    async def get_token(self, plugin_address: str) -> Optional[TokenDetails]:
        address = ensure_address(plugin_address)
        result = await self.graphql.request(
            QUERY_TOKEN_VOTING_PLUGIN_TOKEN, {"address": address.lower()}, name="TokenVoting token"
        )
        record = result.get(self.family.plugin_key)
        if not record:
            return None
        return to_token_details(record.get("token"))


class TokenVotingClientEncoding(MajorityVotingClientEncoding):
    family = TOKEN_VOTING

    def mint_token_action(self, minter_address: str, params: MintTokenParams) -> DaoAction:
        """Mints governance tokens; `minter_address` is the token contract."""
        data = ERC20_INTERFACE.encode_function_data("mint", [ensure_address(params.address), params.amount])
        return DaoAction(to=ensure_address(minter_address), data=data)

    def get_plugin_install_item(
        self, params: TokenVotingPluginInstall, network: Optional[Union[str, SupportedNetwork]] = None
    ) -> PluginInstallItem:
        """
        Installation data of a TokenVoting plugin for `create_dao`.
        Leave the token address empty to deploy a new token with the given balances.
        """
        token = params.token
        token_address = ensure_address(token.address) if token.address else ADDRESS_ZERO
        receivers = [ensure_address(balance.address) for balance in token.balances]
        amounts = [balance.balance for balance in token.balances]
        data = encode(
            TOKEN_VOTING_INSTALL_TYPES,
            [
                voting_settings_to_contract(params.voting_settings, TOKEN_VOTING.ratio_digits),
                (token_address, token.name, token.symbol),
                (receivers, amounts),
            ],
        )
        return PluginInstallItem(id=self.plugin_repo_address(network), data=data)


class TokenVotingClientDecoding(MajorityVotingClientDecoding):
    family = TOKEN_VOTING

    def mint_token_action(self, data: BytesLike) -> MintTokenParams:
        address, amount = ERC20_INTERFACE.decode_function_data("mint", data)
        return MintTokenParams(address=address, amount=amount)

    def find_interface(self, data: BytesLike) -> Optional[InterfaceParams]:
        return find_interface_in([self.family.interface, ERC20_INTERFACE], data)


class TokenVotingClientEstimation(MajorityVotingClientEstimation):
    family = TOKEN_VOTING


class TokenVotingClient(ClientCore):
    """Client of the TokenVoting plugin: majority voting weighted by an ERC20 balance."""

    def __init__(self, context: Context):
        super().__init__(context)
        self.methods = TokenVotingClientMethods(context)
        self.encoding = TokenVotingClientEncoding(context)
        self.decoding = TokenVotingClientDecoding(context)
        self.estimation = TokenVotingClientEstimation(context)
