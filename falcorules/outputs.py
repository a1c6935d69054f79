"""Output channel interface and the messages sent through it."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import IO, Optional

from falcorules.rule import Priority


@dataclass
class OutputConfig:
    """Names an output (file, syslog, stdout, ...) and its options."""

    name: str
    options: dict[str, str] = field(default_factory=dict)


@dataclass
class Message:
    """A message to emit: a rule match or a generic alert."""

    ts: int = 0
    priority: Priority = Priority.DEBUG
    msg: str = ""
    rule: str = ""
    source: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)


class AbstractOutput(abc.ABC):
    """Base class for output channels.

    Channels that write to a stream may set ``stream``; the default
    ``cleanup`` then flushes it and ``reopen`` flushes before reopening.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool,
        hostname: str,
        json_output: bool,
    ) -> None:
        self.config = config
        self.buffered = buffered
        self.hostname = hostname
        self.json_output = json_output
        self.stream: Optional[IO[str]] = None

    @property
    def name(self) -> str:
        """The output's name as configured."""
        return self.config.name

    @abc.abstractmethod
    def output(self, msg: Message) -> None:
        """Emit a message."""

    def reopen(self) -> None:
        """Close and reopen the output; by default only flushes pending data."""
        self.cleanup()

    def cleanup(self) -> None:
        """Flush the output's stream, if it has one."""
        if self.stream is not None and not self.stream.closed:
            self.stream.flush()