"""Protocol defining the block parser contract.

Every block construct (paragraph, heading, list, ...) is a BlockParser.
The engine offers each line to the open blocks first (continue_), then to
the parsers that may open a new block on it (open), and finally closes the
blocks that did not continue (close).

Thread Safety:
    Protocols are purely structural. Built-in parsers keep no per-parse
    state on themselves; scratch state lives on ParseContext.
"""

from __future__ import annotations

from enum import IntFlag
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fancylists.parsing.context import ParseContext
    from fancylists.parsing.reader import LineReader
    from fancylists.parsing.tree import BlockNode


class State(IntFlag):
    """Flags returned by BlockParser.open and BlockParser.continue_.

    CLOSE is the absence of CONTINUE; it exists so parsers can say so.
    """

    NONE = 0
    CONTINUE = 1
    CLOSE = 2
    HAS_CHILDREN = 4
    NO_CHILDREN = 8
    REQUIRE_PARAGRAPH = 16


@runtime_checkable
class BlockParser(Protocol):
    """Contract for a block construct.

    Attributes:
        triggers: First non-space characters that may open this block, or
            None to be tried on every line
        can_interrupt_paragraph: May open while a paragraph is open
        can_accept_indented_line: May open on a line indented 4+ columns

    """

    triggers: frozenset[str] | None
    can_interrupt_paragraph: bool
    can_accept_indented_line: bool

    def open(
        self, parent: BlockNode, reader: LineReader, pc: ParseContext
    ) -> tuple[BlockNode | None, State]:
        """Try to open a block on the current line."""
        ...

    def continue_(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> State:
        """Decide whether ``node`` stays open on the current line."""
        ...

    def close(self, node: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        """Finish ``node`` once it stops continuing."""
        ...


__all__ = ["BlockParser", "State"]
