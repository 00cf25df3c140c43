"""Exception classes for fancylists.

Provides standardized exceptions for error handling throughout fancylists.
Marker classification itself never raises: malformed markers simply do not
start or continue a list.
"""

from __future__ import annotations


class FancyListsError(Exception):
    """Base exception for all fancylists errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(FancyListsError):
    """Error during Markdown parsing.

    Raised when the block engine is driven into an inconsistent state,
    e.g. a block parser returns an invalid state combination.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(FancyListsError):
    """Error during HTML rendering.

    Raised when the renderer encounters a node type it does not know.
    """

    pass


class PluginError(FancyListsError):
    """Error in plugin lookup or initialization."""

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
