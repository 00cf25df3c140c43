"""Plugin system for fancylists.

Plugins add block syntax to the engine:
- attributes: ``{#id .class key=value}`` lines attached to the block above

Usage:
    >>> from fancylists import Markdown
    >>> md = Markdown(plugins=["attributes"])
    >>> md("- a\\n- b\\n{.compact}\\n")
    '<ul class="compact">\\n<li>a</li>\\n<li>b</li>\\n</ul>\\n'

Plugin Architecture:
Each plugin owns one ParseConfig flag. Naming a plugin switches its flag
on; the engine then asks every plugin whose flag is set to add its block
parsers and tree transformers (see BlockEngine.for_config).

Thread Safety:
All plugins are stateless. Multiple threads can use the same plugin
instances concurrently.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fancylists.config import ParseConfig
from fancylists.errors import PluginError

if TYPE_CHECKING:
    from fancylists.parsing.engine import Transformer
    from fancylists.parsing.protocols import BlockParser

__all__ = [
    "FancyListsPlugin",
    "BUILTIN_PLUGINS",
    "config_for_plugins",
    "enabled_plugins",
    "get_plugin",
    "register_plugin",
]


@runtime_checkable
class FancyListsPlugin(Protocol):
    """Protocol for fancylists plugins.

    Thread Safety:
        Plugins must be stateless. All state lives in the parse context
        or the tree.

    """

    @property
    def name(self) -> str:
        """Plugin identifier."""
        ...

    @property
    def config_flag(self) -> str:
        """ParseConfig field this plugin switches on."""
        ...

    def extend_engine(
        self,
        parsers: list[tuple[int, BlockParser]],
        transformers: list[Transformer],
    ) -> None:
        """Add (priority, parser) pairs and tree transformers.

        Called once per engine construction.
        """
        ...


# Registry of built-in plugins
BUILTIN_PLUGINS: dict[str, type[FancyListsPlugin]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[FancyListsPlugin]], type[FancyListsPlugin]]:
    """Decorator to register a plugin.

    Usage:
        @register_plugin("attributes")
        class AttributesPlugin:
                ...

    """

    def decorator(cls: type[FancyListsPlugin]) -> type[FancyListsPlugin]:
        BUILTIN_PLUGINS[name] = cls
        return cls

    return decorator


def get_plugin(name: str) -> FancyListsPlugin:
    """Get a plugin instance by name.

    Raises:
        PluginError: If plugin name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise PluginError(name, f"unknown plugin. Available: {available}")
    return BUILTIN_PLUGINS[name]()


def config_for_plugins(plugins: Iterable[str] | None, base: ParseConfig | None = None) -> ParseConfig:
    """Build a ParseConfig with the flags of the named plugins switched on.

    ``"all"`` enables every registered plugin.

    Raises:
        PluginError: If a plugin name is not recognized

    """
    flags = {name: getattr(base, name) for name in ParseConfig.__dataclass_fields__} if base else {}
    for plugin_name in plugins or ():
        names = list(BUILTIN_PLUGINS) if plugin_name == "all" else [plugin_name]
        for name in names:
            flags[get_plugin(name).config_flag] = True
    return ParseConfig.from_dict(flags)


def enabled_plugins(config: ParseConfig) -> list[FancyListsPlugin]:
    """Instances of the plugins whose flag is set in ``config``."""
    plugins = [get_plugin(name) for name in BUILTIN_PLUGINS]
    return [plugin for plugin in plugins if getattr(config, plugin.config_flag)]


# Import built-in plugins to register them
# These imports trigger the @register_plugin decorators
from fancylists.plugins.attributes import AttributesPlugin  # noqa: E402

__all__ += ["AttributesPlugin"]
