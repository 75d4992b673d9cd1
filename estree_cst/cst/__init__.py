"""Green/red CST structures and the event stream that builds them."""

from estree_cst.cst.event import (
    FINISH,
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    TreeSink,
    event_text,
    process_events,
)
from estree_cst.cst.green import (
    GreenElement,
    GreenNode,
    GreenToken,
    TreeBuilder,
    build_tree,
)
from estree_cst.cst.red import (
    SyntaxElement,
    SyntaxNode,
    SyntaxToken,
    from_green,
)

__all__ = [
    "FINISH",
    "Event",
    "FinishEvent",
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "StartEvent",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TokenEvent",
    "TreeBuilder",
    "TreeSink",
    "build_tree",
    "event_text",
    "from_green",
    "process_events",
]
