"""Source location tracking for AST nodes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Positions are 1-indexed. ``end_lineno`` is the last line the node spans.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, source_file="guide.md")
        >>> str(loc)
        'guide.md:3:1'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
