"""Block parsing: line reader, block tree, block parsers, and the engine.

Import the engine from fancylists.parsing.engine; this package keeps no
re-exports so the list decision modules can import the tree without
pulling in the engine.
"""
