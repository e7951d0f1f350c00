from typing import Any, Dict, Optional, Sequence, Union

import orjson
from pydantic import BaseModel

from utils.exceptions import IpfsPinError
from utils.logger_utils import get_logger

from governance.context import Context
from governance.contracts.contract_interface import ContractInterface

logger = get_logger("Client Core")


class ClientCore(object):
    """Base of every client: holds the context and its transport services."""

    def __init__(self, context: Context):
        self.context = context
        self.web3 = context.web3
        self.graphql = context.graphql
        self.ipfs = context.ipfs

    async def pin_metadata(self, metadata: Union[BaseModel, Dict[str, Any]]) -> str:
        """Uploads and pins metadata JSON. Returns its `ipfs://` uri."""
        body = metadata.model_dump(mode="json", exclude_none=True) if isinstance(metadata, BaseModel) else metadata
        try:
            cid = await self.ipfs.add(orjson.dumps(body))
            await self.ipfs.pin(cid)
        except Exception as e:
            logger.error(f"Metadata pinning failed: {e}")
            raise IpfsPinError(e) from e
        return f"ipfs://{cid}"

    async def call_contract(
        self,
        interface: ContractInterface,
        address: str,
        function_name: str,
        args: Sequence[Any] = (),
        from_address: Optional[str] = None,
    ) -> tuple:
        """Read-only call decoded with the function outputs."""
        data = interface.encode_function_data(function_name, args)
        result = await self.web3.call(address, data, from_address=from_address)
        return interface.decode_function_result(function_name, result)

    async def close(self) -> None:
        await self.context.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
