from typing import Any, Dict, Optional

from async_lru import alru_cache
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3

from constants.networks import ContractNames, SupportedNetwork
from utils.exceptions import (
    InvalidGasEstimationFactorError,
    NoProviderError,
    NoSignerError,
    TransactionRevertedError,
    UnsupportedNetworkError,
)
from utils.formatter_utils import BytesLike, to_bytes, to_hex
from utils.logger_utils import get_logger

from governance.models.common import GasFeeEstimation

logger = get_logger("Web3 Service")


class Web3Service(object):
    """
    Chain access for the clients: reads, gas estimation and locally signed transactions.

    Transactions are signed locally by `signer`, an eth_account LocalAccount.
    """

    def __init__(
        self,
        network: SupportedNetwork,
        w3: Optional[AsyncWeb3] = None,
        signer: Optional[LocalAccount] = None,
        contract_addresses: Optional[Dict[ContractNames, str]] = None,
        gas_fee_estimation_factor: float = 0.625,
        receipt_timeout: int = 180,
    ):
        if not 0 < gas_fee_estimation_factor <= 1:
            raise InvalidGasEstimationFactorError(gas_fee_estimation_factor)
        self._network = network
        self._w3 = w3
        self._signer = signer
        self._contract_addresses = dict(contract_addresses or {})
        self._gas_fee_estimation_factor = gas_fee_estimation_factor
        self._receipt_timeout = receipt_timeout

    def get_provider(self) -> AsyncWeb3:
        if self._w3 is None:
            raise NoProviderError()
        return self._w3

    def get_signer(self) -> LocalAccount:
        if self._signer is None:
            raise NoSignerError()
        return self._signer

    def get_connected_signer(self) -> LocalAccount:
        """The signer, provided a provider is available to send its transactions."""
        signer = self.get_signer()
        self.get_provider()
        return signer

    def get_network_name(self) -> SupportedNetwork:
        return self._network

    def get_address(self, role: ContractNames) -> str:
        address = self._contract_addresses.get(role)
        if not address:
            raise UnsupportedNetworkError(self._network.value, f"no {role.value} deployed")
        return address

    async def ensure_online(self) -> None:
        # The failover provider rotates and raises NoProvidersAvailableError on exhaustion
        await self.get_provider().eth.chain_id

    @alru_cache(maxsize=1)
    async def get_chain_id(self) -> int:
        return await self.get_provider().eth.chain_id

    async def get_max_fee_per_gas(self) -> int:
        w3 = self.get_provider()
        block = await w3.eth.get_block("latest")
        max_priority_fee = await w3.eth.max_priority_fee
        return 2 * int(block["baseFeePerGas"]) + int(max_priority_fee)

    async def get_approximate_gas_fee(self, estimated_units: int) -> GasFeeEstimation:
        max_fee = int(estimated_units) * await self.get_max_fee_per_gas()
        factor = int(self._gas_fee_estimation_factor * 1000)
        return GasFeeEstimation(average=max_fee * factor // 1000, max=max_fee)

    async def estimate_gas(self, to: str, data: BytesLike, value: int = 0) -> int:
        signer = self.get_connected_signer()
        tx = {"from": signer.address, "to": to, "data": to_hex(data), "value": value}
        return await self.get_provider().eth.estimate_gas(tx)

    async def call(self, to: str, data: BytesLike, from_address: Optional[str] = None) -> bytes:
        tx = {"to": to, "data": to_hex(data)}
        if from_address:
            tx["from"] = from_address
        return bytes(await self.get_provider().eth.call(tx))

    async def send_transaction(self, to: str, data: BytesLike, value: int = 0) -> str:
        """Builds, signs and submits a transaction. Returns the 0x hash without waiting."""
        signer = self.get_connected_signer()
        w3 = self.get_provider()

        tx = {
            "from": signer.address,
            "to": to,
            "data": to_hex(data),
            "value": value,
            "nonce": await w3.eth.get_transaction_count(signer.address, "pending"),
            "chainId": await self.get_chain_id(),
        }
        tx["gas"] = await w3.eth.estimate_gas(tx)
        tx["maxPriorityFeePerGas"] = await w3.eth.max_priority_fee
        tx["maxFeePerGas"] = await self.get_max_fee_per_gas()

        signed = signer.sign_transaction(tx)
        tx_hash = to_hex(await w3.eth.send_raw_transaction(signed.raw_transaction))
        logger.info(f"Submitted transaction {tx_hash} to {to}")
        return tx_hash

    async def wait_for_receipt(self, tx_hash: BytesLike) -> Any:
        """Waits for the receipt. Raises TransactionRevertedError when the status is 0."""
        receipt = await self.get_provider().eth.wait_for_transaction_receipt(
            to_bytes(tx_hash), timeout=self._receipt_timeout
        )
        if receipt["status"] == 0:
            raise TransactionRevertedError(to_hex(tx_hash))
        return receipt

    async def resolve_name(self, name: str) -> Optional[str]:
        return await self.get_provider().ens.address(name)

    async def close(self) -> None:
        if self._w3 is not None:
            await self._w3.provider.disconnect()
