"""Block engine: the line-by-line open/continue/close loop.

For every line the engine walks the open blocks from the outermost in,
asking each to continue. The first block that declines (or the innermost
container that accepts children) gets the rest of the line offered to the
block parsers in priority order; any blocks left behind are closed. A
paragraph is never continued directly: it is only extended when no parser
opens a new block on the line (lazy continuation).

Closing a block never consumes the line, so a list that closes because its
marker type changed hands the same line straight to the list parser again.

Thread Safety:
    A BlockEngine instance may be reused across threads; every parse gets
    its own LineReader and ParseContext.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from fancylists.config import ParseConfig, get_parse_config
from fancylists.errors import ParseError
from fancylists.parsing.blocks import default_block_parsers
from fancylists.parsing.context import OpenBlock, ParseContext
from fancylists.parsing.protocols import BlockParser, State
from fancylists.parsing.reader import LineReader
from fancylists.parsing.tree import BlockNode, DocumentNode, NodeKind
from fancylists.plugins import enabled_plugins
from fancylists.utils.logger import get_logger
from fancylists.utils.text import indent_width, is_blank

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = get_logger(__name__)

type Transformer = Callable[[BlockNode], None]

CODE_INDENT = 4


class _OpenResult(Enum):
    NO_BLOCKS = auto()
    NEW_BLOCKS = auto()
    PARAGRAPH_CONTINUATION = auto()


@dataclass(frozen=True, slots=True)
class _LineStat:
    lineno: int
    level: int
    is_blank: bool


def _is_blank_line(lineno: int, level: int, stats: list[_LineStat]) -> bool:
    """Was line ``lineno`` blank as seen by the block at depth ``level``?"""
    ret = True
    for index in range(len(stats) - 1 - level, -1, -1):
        ret = False
        stat = stats[index]
        if stat.lineno == lineno:
            if stat.level < level and stat.is_blank:
                return True
            if stat.level == level:
                return stat.is_blank
        if stat.lineno < lineno:
            return ret
    return ret


class BlockEngine:
    """Builds a block tree from source text.

    Args:
        parsers: Block parsers in priority order (lower runs first)
        transformers: Callables run on the finished tree, in order

    Example:
        >>> engine = BlockEngine.for_config(ParseConfig())
        >>> root = engine.parse("a. one\\nb. two\\n")
        >>> root.children[0].list_type
        <ListType.LC_ALPHA: 'a'>

    """

    __slots__ = ("_parsers", "_free_parsers", "_by_trigger", "_transformers")

    def __init__(
        self,
        parsers: Iterable[tuple[int, BlockParser]],
        transformers: Iterable[Transformer] = (),
    ) -> None:
        ranked = sorted(parsers, key=lambda entry: entry[0])
        self._parsers: tuple[BlockParser, ...] = tuple(parser for _, parser in ranked)
        self._free_parsers = tuple(p for p in self._parsers if p.triggers is None)
        chars = set().union(*(p.triggers for p in self._parsers if p.triggers is not None))
        # Triggered and free parsers merged, in priority order
        self._by_trigger: dict[str, tuple[BlockParser, ...]] = {
            char: tuple(p for p in self._parsers if p.triggers is None or char in p.triggers)
            for char in chars
        }
        self._transformers = tuple(transformers)

    @classmethod
    def for_config(cls, config: ParseConfig | None = None) -> BlockEngine:
        """Engine with the built-in parsers plus those enabled by ``config``."""
        config = config if config is not None else get_parse_config()
        parsers = list(default_block_parsers())
        transformers: list[Transformer] = []
        for plugin in enabled_plugins(config):
            plugin.extend_engine(parsers, transformers)
        return cls(parsers, transformers)

    def parse(self, source: str, *, source_file: str | None = None) -> DocumentNode:
        """Parse ``source`` into a closed block tree."""
        root = DocumentNode()
        reader = LineReader(source)
        pc = ParseContext(source_file=source_file)
        self._parse_blocks(root, reader, pc)
        for transform in self._transformers:
            transform(root)
        logger.debug(
            "Parsed %d lines into %d top-level blocks", reader.lineno, root.child_count
        )
        return root

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _candidates(self, char: str | None) -> tuple[BlockParser, ...]:
        """Parsers to try for a line starting with ``char``, in priority order."""
        if char is None:
            return self._free_parsers
        return self._by_trigger.get(char, self._free_parsers)

    def _parse_blocks(self, root: BlockNode, reader: LineReader, pc: ParseContext) -> None:
        pc.opened_blocks = []
        blank_lines: list[_LineStat] = []
        while True:
            skipped, ok = reader.skip_blank_lines()
            if not ok:
                return
            lineno = reader.lineno
            if skipped:
                blank_lines.clear()
                for level in range(len(pc.opened_blocks)):
                    blank_lines.append(_LineStat(lineno - 1, level, True))
            blank = _is_blank_line(lineno - 1, 0, blank_lines)
            if self._open_blocks(root, blank, reader, pc) is not _OpenResult.NEW_BLOCKS:
                return
            reader.advance_line()

            while pc.opened_blocks:
                opened = pc.opened_blocks
                last_index = len(opened) - 1
                for index in range(len(opened)):
                    block = opened[index]
                    line = reader.peek_line()
                    if line is None:
                        self._close_blocks(last_index, 0, reader, pc)
                        reader.advance_line()
                        return
                    lineno = reader.lineno
                    blank_lines.append(_LineStat(lineno, index, is_blank(line)))
                    if block.node.kind is not NodeKind.PARAGRAPH:
                        state = block.parser.continue_(block.node, reader, pc)
                        if state & State.CONTINUE:
                            if state & State.HAS_CHILDREN and index == last_index:
                                blank = _is_blank_line(lineno - 1, index, blank_lines)
                                self._open_blocks(block.node, blank, reader, pc)
                                break
                            continue

                    blank = _is_blank_line(lineno - 1, index, blank_lines)
                    parent = root if index == 0 else opened[index - 1].node
                    last_node = opened[last_index].node
                    result = self._open_blocks(parent, blank, reader, pc)
                    if result is not _OpenResult.PARAGRAPH_CONTINUATION:
                        # The innermost block was a paragraph that a new block
                        # replaced (setext heading): it is already closed.
                        if not pc.is_open(last_node):
                            last_index -= 1
                        self._close_blocks(last_index, index, reader, pc)
                    break
                reader.advance_line()

    def _open_blocks(
        self, parent: BlockNode, blank_line: bool, reader: LineReader, pc: ParseContext
    ) -> _OpenResult:
        result = _OpenResult.NO_BLOCKS
        last_block = pc.last_opened_block()
        continuable = last_block is not None and last_block.node.kind is NodeKind.PARAGRAPH

        while True:
            line = reader.peek_line()
            if line is None:
                break
            width, pos = indent_width(line, reader.line_offset())
            if width >= len(line):
                pc.block_offset = -1
                pc.block_indent = -1
            else:
                pc.block_offset = pos
                pc.block_indent = width
            if line[0] == "\n":
                break

            char = line[pos] if pos < len(line) else None
            opened_container = False
            for parser in self._candidates(char):
                if continuable and result is _OpenResult.NO_BLOCKS and not parser.can_interrupt_paragraph:
                    continue
                if width >= CODE_INDENT and not parser.can_accept_indented_line:
                    continue
                last_block = pc.last_opened_block()
                last = last_block.node if last_block is not None else None
                node, state = parser.open(parent, reader, pc)
                if node is None:
                    continue
                if state & State.HAS_CHILDREN and state & State.NO_CHILDREN:
                    raise ParseError(
                        f"{type(parser).__name__} returned both HAS_CHILDREN and NO_CHILDREN",
                        lineno=reader.lineno + 1,
                        source_file=pc.source_file,
                    )
                node.blank_previous_lines = blank_line
                if state & State.REQUIRE_PARAGRAPH and last is not None and last is parent.last_child:
                    assert last_block is not None
                    last_block.parser.close(last, reader, pc)
                    pc.opened_blocks.pop()
                if last is not None and last.parent is None:
                    last_pos = len(pc.opened_blocks) - 1
                    self._close_blocks(last_pos, last_pos, reader, pc)
                parent.append_child(node)
                result = _OpenResult.NEW_BLOCKS
                pc.opened_blocks.append(OpenBlock(node, parser))
                if state & State.HAS_CHILDREN:
                    parent = node
                    opened_container = True
                break
            if not opened_container:
                break

        if result is _OpenResult.NO_BLOCKS and continuable and last_block is not None:
            state = last_block.parser.continue_(last_block.node, reader, pc)
            if state & State.CONTINUE:
                result = _OpenResult.PARAGRAPH_CONTINUATION
        return result

    def _close_blocks(self, from_index: int, to_index: int, reader: LineReader, pc: ParseContext) -> None:
        """Close open blocks ``from_index`` down to ``to_index`` (inclusive)."""
        blocks = pc.opened_blocks
        for index in range(from_index, to_index - 1, -1):
            node = blocks[index].node
            if node.parent is not None:
                blocks[index].parser.close(node, reader, pc)
        del blocks[to_index : from_index + 1]


__all__ = ["BlockEngine", "Transformer"]
