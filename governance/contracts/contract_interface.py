from typing import Any, Dict, Iterable, List, Optional, Sequence

from eth_abi import decode, encode
from eth_utils import keccak, to_checksum_address

from utils.exceptions import UnexpectedActionError
from utils.formatter_utils import BytesLike, to_bytes, to_hex
from utils.logger_utils import get_logger

logger = get_logger("Contract Interface")

SELECTOR_LENGTH = 4

_DYNAMIC_TYPES = ("string", "bytes")


def collapse_type(abi_input: Dict[str, Any]) -> str:
    """Canonical type string of one ABI input, tuples expanded: `(address,uint256,bytes)[]`."""
    abi_type = abi_input["type"]
    if abi_type.startswith("tuple"):
        suffix = abi_type[len("tuple"):]
        inner = ",".join(collapse_type(component) for component in abi_input["components"])
        return f"({inner}){suffix}"
    return abi_type


def _normalize(abi_input: Dict[str, Any], value: Any) -> Any:
    """Checksums addresses and turns decoded arrays into lists, recursively."""
    abi_type = abi_input["type"]
    if abi_type.endswith("]"):
        element = dict(abi_input, type=abi_type[: abi_type.rindex("[")])
        return [_normalize(element, item) for item in value]
    if abi_type == "tuple":
        return tuple(_normalize(component, item) for component, item in zip(abi_input["components"], value))
    if abi_type == "address":
        return to_checksum_address(value)
    return value


class ContractInterface(object):
    """
    Encodes and decodes calls, return values and event logs of one contract ABI.
    Function names must be unique inside the ABI.
    """

    def __init__(self, abi: List[Dict[str, Any]], name: str = "contract"):
        self.name = name
        self._functions: Dict[str, Dict[str, Any]] = {}
        self._events: Dict[str, Dict[str, Any]] = {}
        for entry in abi:
            if entry.get("type") == "function":
                self._functions[entry["name"]] = entry
            elif entry.get("type") == "event":
                self._events[entry["name"]] = entry

        self._selectors: Dict[bytes, str] = {
            self.get_function_selector(function_name): function_name for function_name in self._functions
        }

    # Functions

    def _function(self, name: str) -> Dict[str, Any]:
        try:
            return self._functions[name]
        except KeyError:
            raise KeyError(f"{self.name} has no function named {name}") from None

    def function_names(self) -> List[str]:
        return list(self._functions)

    def get_function_signature(self, name: str) -> str:
        entry = self._function(name)
        return f"{name}({','.join(collapse_type(item) for item in entry['inputs'])})"

    def get_function_selector(self, name: str) -> bytes:
        return keccak(text=self.get_function_signature(name))[:SELECTOR_LENGTH]

    def get_function_by_selector(self, selector: BytesLike) -> Optional[str]:
        return self._selectors.get(to_bytes(selector)[:SELECTOR_LENGTH])

    def encode_function_data(self, name: str, args: Sequence[Any] = ()) -> bytes:
        entry = self._function(name)
        types = [collapse_type(item) for item in entry["inputs"]]
        return self.get_function_selector(name) + encode(types, list(args))

    def decode_function_data(self, name: str, data: BytesLike) -> tuple:
        """
        Decodes call data of `name`.
        Raises UnexpectedActionError when the selector belongs to any other function.
        """
        raw = to_bytes(data)
        expected = self.get_function_selector(name)
        actual = raw[:SELECTOR_LENGTH]
        if actual != expected:
            raise UnexpectedActionError(expected=to_hex(expected), actual=to_hex(actual))

        entry = self._function(name)
        types = [collapse_type(item) for item in entry["inputs"]]
        values = decode(types, raw[SELECTOR_LENGTH:])
        return tuple(_normalize(item, value) for item, value in zip(entry["inputs"], values))

    def encode_function_result(self, name: str, values: Sequence[Any]) -> bytes:
        entry = self._function(name)
        return encode([collapse_type(item) for item in entry["outputs"]], list(values))

    def decode_function_result(self, name: str, data: BytesLike) -> tuple:
        entry = self._function(name)
        values = decode([collapse_type(item) for item in entry["outputs"]], to_bytes(data))
        return tuple(_normalize(item, value) for item, value in zip(entry["outputs"], values))

    # Events

    def _event(self, name: str) -> Dict[str, Any]:
        try:
            return self._events[name]
        except KeyError:
            raise KeyError(f"{self.name} has no event named {name}") from None

    def get_event_topic(self, name: str) -> bytes:
        entry = self._event(name)
        return keccak(text=f"{name}({','.join(collapse_type(item) for item in entry['inputs'])})")

    def find_log(self, logs: Iterable[Any], event_name: str) -> Optional[Any]:
        """First log of `logs` whose topic0 is the event `event_name`."""
        topic = self.get_event_topic(event_name)
        for log in logs:
            topics = log["topics"]
            if topics and to_bytes(topics[0]) == topic:
                return log
        return None

    def parse_log(self, event_name: str, log: Any) -> Dict[str, Any]:
        """Decodes indexed and non-indexed arguments of a log into a name -> value dict."""
        entry = self._event(event_name)
        indexed = [item for item in entry["inputs"] if item.get("indexed")]
        not_indexed = [item for item in entry["inputs"] if not item.get("indexed")]

        args: Dict[str, Any] = {}
        for item, topic in zip(indexed, log["topics"][1:]):
            topic_bytes = to_bytes(topic)
            if item["type"] in _DYNAMIC_TYPES or item["type"].endswith("]") or item["type"] == "tuple":
                # only the hash of dynamic values is stored
                args[item["name"]] = topic_bytes
            else:
                args[item["name"]] = _normalize(item, decode([item["type"]], topic_bytes)[0])

        values = decode([collapse_type(item) for item in not_indexed], to_bytes(log["data"]))
        for item, value in zip(not_indexed, values):
            args[item["name"]] = _normalize(item, value)
        return args

    def encode_log(self, event_name: str, args: Dict[str, Any], address: Optional[str] = None) -> Dict[str, Any]:
        """Builds a receipt-style log for `event_name` (static indexed types only)."""
        entry = self._event(event_name)
        topics = [self.get_event_topic(event_name)]
        not_indexed_types, not_indexed_values = [], []
        for item in entry["inputs"]:
            if item.get("indexed"):
                topics.append(encode([item["type"]], [args[item["name"]]]))
            else:
                not_indexed_types.append(collapse_type(item))
                not_indexed_values.append(args[item["name"]])
        return {"address": address, "topics": topics, "data": encode(not_indexed_types, not_indexed_values)}
