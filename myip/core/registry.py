# myip/core/registry.py
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Type

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .plugin import BasePlugin

from .errors import UnknownSourceError

logger = logging.getLogger(__name__)

PLUGINS: Dict[str, Dict[str, Type["BasePlugin"]]] = defaultdict(dict)
PLUGIN_KINDS = {"source", "probe"}


def myip(kind: str, name: Optional[str] = None) -> Callable[[Type["BasePlugin"]], Type["BasePlugin"]]:
    """
    Decorator to register a plugin class under the given kind.
    """
    if kind not in PLUGIN_KINDS:
        raise ValueError(f"Unknown plugin kind: {kind}. Must be one of {sorted(PLUGIN_KINDS)}")

    def decorator(cls: Type["BasePlugin"]) -> Type["BasePlugin"]:
        from .plugin import BasePlugin
        if not issubclass(cls, BasePlugin):
            raise TypeError(
                f"Plugin class {cls.__module__}.{cls.__name__} must extend "
                f"myip.core.plugin.BasePlugin"
            )

        plugin_name = name or cls.__name__
        if plugin_name in PLUGINS[kind]:
            raise ValueError(f"Plugin {kind}/{plugin_name} is already registered. ({PLUGINS[kind][plugin_name]})")

        PLUGINS[kind][plugin_name] = cls

        setattr(cls, "name", plugin_name)
        if getattr(cls, "version", None) is None:
            setattr(cls, "version", "0.1.0")

        logger.debug(f"Registered plugin: {kind}/{plugin_name} from {cls.__module__}")
        return cls
    return decorator


def get_plugin(kind: str, name: str) -> Type["BasePlugin"]:
    key = name.strip().lower()
    try:
        return PLUGINS[kind][key]
    except KeyError:
        if kind == "source":
            raise UnknownSourceError(name) from None
        raise KeyError(f"Unknown {kind} plugin: {name}") from None


def plugin_names(kind: str) -> List[str]:
    return sorted(PLUGINS[kind])
