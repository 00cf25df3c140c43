"""Fancy list markers: scanning, classification, and list decisions.

Modules:
    types: MarkerKind, ListType, ScanResult
    scanner: scan_marker() for one raw line
    classifier: alphabetic and roman values, context-sensitive types
    decisions: open/continue decisions, item values, tightness
    trace: Debug tracing of list decisions (FANCYLISTS_DEBUG=list)

The decisions module works on the block tree, so it is not re-exported
here; import it from fancylists.lists.decisions.
"""

from fancylists.lists.classifier import (
    alpha_value,
    continuation_type,
    marker_type,
    roman_value,
    type_of_fancy_marker,
)
from fancylists.lists.scanner import parse_start, scan_marker
from fancylists.lists.types import NO_MARKER, ListType, MarkerKind, ScanResult

__all__ = [
    "NO_MARKER",
    "ListType",
    "MarkerKind",
    "ScanResult",
    "alpha_value",
    "continuation_type",
    "marker_type",
    "parse_start",
    "roman_value",
    "scan_marker",
    "type_of_fancy_marker",
]
