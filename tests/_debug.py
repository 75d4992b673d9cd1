"""Shared debug printers for printer tests."""

from __future__ import annotations

import os

from estree_cst.cst import GreenNode, GreenToken
from estree_cst.printer import Append, Command, CommandBuffer, CommentCommand, Dedent, Indent, Newline, Slot

PRINT_CST = os.getenv("PRINT_CST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_COMMANDS = os.getenv("PRINT_COMMANDS", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_cst(test_name: str, text: str, root: GreenNode) -> None:
    if not PRINT_CST:
        return
    print(f"\n===== {test_name} TEXT =====")
    print(text)
    print(f"===== {test_name} CST =====")
    print(_dump_cst(root))


def debug_dump_commands(test_name: str, buffer: CommandBuffer) -> None:
    if not PRINT_COMMANDS:
        return
    print(f"\n===== {test_name} COMMANDS =====")
    for index, command in enumerate(buffer.commands):
        print(f"{index:04d} {_describe(command, buffer)}")


def _describe(command: Command, buffer: CommandBuffer) -> str:
    match command:
        case Append(event=event):
            return repr(event)
        case Slot(index=index):
            filled = " ".join(_describe(child, buffer) for child in buffer.resolve(command))
            return f"Slot#{index} [{filled}]"
        case Newline():
            return "Newline"
        case Indent():
            return "Indent"
        case Dedent():
            return "Dedent"
        case CommentCommand(comment=comment):
            return f"Comment {comment.kind} {comment.text!r}"
    return repr(command)


def _dump_cst(node: GreenNode) -> str:
    lines: list[str] = []

    def walk_node(current: GreenNode, depth: int) -> None:
        indent = "  " * depth
        lines.append(f"{indent}{current.kind}")
        for child in current.children:
            if isinstance(child, GreenNode):
                walk_node(child, depth + 1)
            else:
                walk_token(child, depth + 1)

    def walk_token(token: GreenToken, depth: int) -> None:
        indent = "  " * depth
        text = token.text.replace("\n", "\\n").replace("\t", "\\t")
        lines.append(f"{indent}{token.kind.name} text={text!r}")

    walk_node(node, 0)
    return "\n".join(lines)
