from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, FrozenSet, Generic, List, Optional, TypeVar

from utils.exceptions import StepProtocolError
from utils.logger_utils import get_logger

from governance.models.steps import StepValue

logger = get_logger("Stepwise Operation")

START = "__start__"

S = TypeVar("S", bound=StepValue)


@dataclass(frozen=True)
class StepFlow(object):
    """
    Closed set of checkpoint tags of one operation and the allowed
    successors of each tag. `START` lists the possible first checkpoints.
    """

    name: str
    transitions: Dict[str, FrozenSet[str]]
    done: str = "done"
    keys: FrozenSet[str] = field(init=False)

    def __post_init__(self):
        keys = set(self.transitions) - {START}
        for successors in self.transitions.values():
            keys.update(successors)
        object.__setattr__(self, "keys", frozenset(keys))

    def check(self, previous: str, current: str) -> None:
        if current not in self.keys:
            raise StepProtocolError(f"{self.name}: unknown checkpoint {current!r}")
        if current not in self.transitions.get(previous, frozenset()):
            raise StepProtocolError(f"{self.name}: checkpoint {current!r} cannot follow {previous!r}")


class StepwiseOperation(Generic[S]):
    """
    Single pass, forward only sequence of checkpoints ending in exactly one DONE.

    Wraps the async generator that performs the operation and validates every
    checkpoint it yields against the flow's transition table. Iterate it with
    `async for`, or call `run()` to drive it to the end and get the DONE value.
    """

    def __init__(self, flow: StepFlow, steps: AsyncIterator[S]):
        self._flow = flow
        self._steps = steps
        self._previous = START
        self._finished = False

    @property
    def flow(self) -> StepFlow:
        return self._flow

    @property
    def finished(self) -> bool:
        return self._finished

    def __aiter__(self) -> "StepwiseOperation[S]":
        return self

    async def __anext__(self) -> S:
        if self._finished:
            raise StopAsyncIteration

        try:
            step = await self._steps.__anext__()
        except StopAsyncIteration:
            self._finished = True
            raise StepProtocolError(
                f"{self._flow.name}: sequence ended after {self._previous!r} without {self._flow.done!r}"
            ) from None
        except BaseException:
            self._finished = True
            raise

        key = str(getattr(step.key, "value", step.key))
        try:
            self._flow.check(self._previous, key)
        except StepProtocolError:
            self._finished = True
            await self._close()
            raise
        self._previous = key
        logger.debug(f"{self._flow.name}: {key}")

        if key == self._flow.done:
            self._finished = True
            await self._close()
        return step

    async def _close(self) -> None:
        aclose = getattr(self._steps, "aclose", None)
        if aclose is not None:
            await aclose()

    async def run(self) -> S:
        """Drives the remaining checkpoints and returns the DONE checkpoint."""
        if self._finished:
            raise StepProtocolError(f"{self._flow.name}: operation already consumed")
        last: Optional[S] = None
        async for step in self:
            last = step
        return last

    async def collect(self) -> List[S]:
        return [step async for step in self]
