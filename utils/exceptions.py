from typing import Optional


class GovernanceClientError(Exception):
    """Base class for every error raised by the governance client."""


# Input validation


class InputValidationError(GovernanceClientError, ValueError):
    pass


class InvalidAddressError(InputValidationError):
    def __init__(self, address: object = None):
        self.address = address
        super().__init__(f"Invalid address: {address!r}")


class InvalidAddressOrEnsError(InputValidationError):
    def __init__(self, value: object = None):
        self.value = value
        super().__init__(f"Invalid address or ENS name: {value!r}")


class InvalidProposalIdError(InputValidationError):
    def __init__(self, proposal_id: object = None):
        self.proposal_id = proposal_id
        super().__init__(f"Invalid proposal id: {proposal_id!r}")


class SizeMismatchError(InputValidationError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Size mismatch: expected {expected} items, got {actual}")


class InvalidPrecisionError(InputValidationError):
    def __init__(self, precision: object = None):
        super().__init__(f"Invalid precision {precision!r}, expected a positive integer")


class InvalidVotingModeError(InputValidationError):
    def __init__(self, mode: object = None):
        super().__init__(f"Invalid voting mode: {mode!r}")


class InvalidCidError(InputValidationError):
    def __init__(self, value: object = None):
        super().__init__(f"Invalid IPFS CID: {value!r}")


class InvalidProposalStatusError(InputValidationError):
    def __init__(self, status: object = None):
        super().__init__(f"Invalid proposal status: {status!r}")


class InvalidGasEstimationFactorError(InputValidationError):
    def __init__(self, factor: object = None):
        super().__init__(f"Gas estimation factor must be in (0, 1], got {factor!r}")


class InvalidSubdomainError(InputValidationError):
    def __init__(self, subdomain: object = None):
        super().__init__(f"Invalid ENS subdomain: {subdomain!r}")


class InvalidRatioError(InputValidationError):
    def __init__(self, ratio: object = None):
        super().__init__(f"Ratio must be a number in [0, 1], got {ratio!r}")


# Preconditions


class NoSignerError(GovernanceClientError):
    def __init__(self):
        super().__init__("A signer is needed")


class NoProviderError(GovernanceClientError):
    def __init__(self):
        super().__init__("A web3 provider is needed")


class UnsupportedNetworkError(GovernanceClientError):
    def __init__(self, network: object = None, detail: str = ""):
        self.network = network
        message = f"Unsupported network: {network!r}"
        super().__init__(f"{message} ({detail})" if detail else message)


class MissingExecPermissionError(GovernanceClientError):
    def __init__(self):
        super().__init__("No plugin requests EXECUTE_PERMISSION on the DAO")


# Transport


class NoEndpointsAvailableError(GovernanceClientError, ConnectionError):
    service_name = "endpoints"

    def __init__(self, total: int = 0):
        self.total = total
        super().__init__(f"No {self.service_name} available ({total} configured, none reachable)")


class NoProvidersAvailableError(NoEndpointsAvailableError):
    service_name = "web3 providers"


class NoGraphqlNodesAvailableError(NoEndpointsAvailableError):
    service_name = "GraphQL nodes"


class NoIpfsNodesAvailableError(NoEndpointsAvailableError):
    service_name = "IPFS nodes"


class GraphQLError(GovernanceClientError):
    def __init__(self, model: str, cause: Optional[BaseException] = None):
        self.model = model
        self.cause = cause
        super().__init__(f"Cannot fetch the {model} data from GraphQL")


# Decoding and encoding


class UnexpectedActionError(GovernanceClientError):
    def __init__(self, expected: str = "", actual: str = ""):
        self.expected = expected
        self.actual = actual
        super().__init__(f"The received action is different from the expected one ({expected} != {actual})")


class UnexpectedVoteOptionError(GovernanceClientError):
    def __init__(self, option: object = None):
        super().__init__(f"Unexpected vote option: {option!r}")


class UnsupportedTokenTypeError(GovernanceClientError):
    def __init__(self, token_type: object = None):
        super().__init__(f"Unsupported token type: {token_type!r}")


# Off-chain content


class IpfsError(GovernanceClientError):
    pass


class IpfsPinError(IpfsError):
    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__("Could not pin the metadata on IPFS")


class IpfsFetchError(IpfsError):
    def __init__(self, cid: str = "", cause: Optional[BaseException] = None):
        self.cid = cid
        self.cause = cause
        super().__init__(f"Could not fetch {cid!r} from IPFS")


# On-chain confirmation


class TransactionRevertedError(GovernanceClientError):
    def __init__(self, tx_hash: str):
        self.tx_hash = tx_hash
        super().__init__(f"Transaction {tx_hash} reverted or was not found")


class OperationError(GovernanceClientError):
    """The transaction was mined but its receipt does not carry the expected result."""

    message = "The operation result could not be read from the receipt"

    def __init__(self, detail: str = ""):
        super().__init__(f"{self.message}: {detail}" if detail else self.message)


class DaoCreationError(OperationError):
    message = "Failed to create DAO"


class ProposalCreationError(OperationError):
    message = "Failed to create proposal"


class DepositError(OperationError):
    message = "Failed to deposit"


class EnsureAllowanceError(OperationError):
    message = "Failed to update the token allowance"


class PluginInstallationPreparationError(OperationError):
    message = "Failed to prepare the plugin installation"


class PluginUpdatePreparationError(OperationError):
    message = "Failed to prepare the plugin update"


class PluginUninstallationPreparationError(OperationError):
    message = "Failed to prepare the plugin uninstallation"


# Step protocol


class StepProtocolError(GovernanceClientError):
    pass
