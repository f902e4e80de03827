"""
redisq has connectors for list-based message brokers.

A connector moves opaque message bodies between producers and consumers
through named queues ("pipes"). Consumers hand every received message to a
handler and act on the handler's answer:

- "I processed it, move on" (ACK)
- "I rejected it, send it to the dead letter queue" (NACK)
- "Put it back, somebody should try again" (REQUEUE)
- "Stop listening after this one" (EXIT)

The answers are independent flags and may be combined, e.g. `NACK | EXIT`.

# Brokers

The currently supported brokers include:

- Redis (lists, LPUSH/BRPOP)
"""
from dataclasses import dataclass, field, replace
import enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Set, Union

from redisq.common import AbstractClient


Body = Union[bytes, str]


def _freeze(obj, properties: Mapping[str, Any]) -> None:
    # Read-only copy; the caller's mapping stays detached.
    object.__setattr__(obj, "properties", MappingProxyType(dict(properties)))


class Outcome(enum.IntFlag):
    """Flags returned by message handlers to steer post-processing."""

    ACK = 1
    NACK = 2
    REQUEUE = 4
    EXIT = 8


@dataclass(frozen=True)
class Pipe:
    """A named queue.

    `properties` stay local to the process and are never sent to the broker.
    They are copied on construction and read-only afterwards.
    The dead letter chain must not loop back onto itself.
    """

    name: str
    dead_letter: Optional["Pipe"] = None
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        _freeze(self, self.properties)

    def with_dead_letter(self, pipe: "Pipe") -> "Pipe":
        return replace(self, dead_letter=pipe)

    def with_properties(self, **kwargs) -> "Pipe":
        return replace(self, properties={**self.properties, **kwargs})


@dataclass(frozen=True)
class Message:
    body: Body
    properties: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        _freeze(self, self.properties)

    def with_properties(self, **kwargs) -> "Message":
        return replace(self, properties={**self.properties, **kwargs})


@dataclass(frozen=True)
class Envelope:
    pipe: Pipe
    message: Message


OnReceive = Callable[[Envelope], Outcome]
OnError = Callable[[Envelope, Exception], Outcome]


# Any queue connector must provide the following methods.


class Connector(AbstractClient):
    @classmethod
    def schema(cls) -> Set[str]:  # pragma: nocover
        raise NotImplementedError

    def set_up(self, uri) -> None:  # pragma: nocover
        raise NotImplementedError

    def get_driver(self) -> Any:  # pragma: nocover
        raise NotImplementedError

    def publish(self, envelope: Envelope) -> None:  # pragma: nocover
        raise NotImplementedError

    def consume(
        self, pipe: Pipe, on_receive: OnReceive, on_error: OnError, identification: Optional[str] = None
    ) -> None:  # pragma: nocover
        raise NotImplementedError
