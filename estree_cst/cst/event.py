"""Printer output events."""

from dataclasses import dataclass
from typing import Protocol, TypeAlias

from estree_cst.syntax import TokenKind


@dataclass(frozen=True, slots=True)
class StartEvent:
    kind: str


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    kind: TokenKind
    text: str


Event: TypeAlias = StartEvent | FinishEvent | TokenEvent


FINISH: FinishEvent = FinishEvent()


class TreeSink(Protocol):
    def token(self, kind: TokenKind, text: str) -> None: ...

    def start_node(self, kind: str) -> None: ...

    def finish_node(self) -> None: ...


def process_events(sink: TreeSink, events: list[Event]) -> None:
    for event in events:
        if isinstance(event, StartEvent):
            sink.start_node(event.kind)
        elif isinstance(event, FinishEvent):
            sink.finish_node()
        else:
            sink.token(event.kind, event.text)


def event_text(events: list[Event]) -> str:
    """Concatenate token text in stream order."""
    return "".join(event.text for event in events if isinstance(event, TokenEvent))
