"""Print context shared along one root-to-leaf path."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from estree_cst.ast import Comment
from estree_cst.printer.commands import Command, CommandBuffer, Slot
from estree_cst.printer.options import PrinterOptions


class CommentQueue:
    """FIFO of trailing comments waiting for the next flush point."""

    def __init__(self) -> None:
        self._pending: deque[Comment] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def push(self, comment: Comment) -> None:
        self._pending.append(comment)

    def pop(self) -> Comment:
        return self._pending.popleft()

    def drain(self) -> Iterator[Comment]:
        """Yield and remove queued comments, including ones queued meanwhile."""
        while self._pending:
            yield self._pending.popleft()


@dataclass(frozen=True, slots=True)
class PrintContext:
    """Command buffer, comment queue and options of a single print call.

    Handlers report whether they laid anything out over several lines through
    their return value instead of through the context, so one context can be
    passed to every child without copying.
    """

    options: PrinterOptions = field(default_factory=PrinterOptions)
    buffer: CommandBuffer = field(default_factory=CommandBuffer)
    comments: CommentQueue = field(default_factory=CommentQueue)

    @property
    def position(self) -> int:
        return len(self.buffer)

    def push(self, *commands: Command) -> None:
        self.buffer.push(*commands)

    def reserve(self) -> Slot:
        return self.buffer.reserve()

    def fill(self, slot: Slot, *commands: Command) -> None:
        self.buffer.fill(slot, *commands)
