from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inputkit._optional_deps import import_cli_attr

__all__ = ["SmartFormatter", "build_parser"]

if TYPE_CHECKING:
    from .base import SmartFormatter
    from .builder import build_parser

_ATTR_MODULES: dict[str, str] = {
    "SmartFormatter": ".base",
    "build_parser": ".builder",
}


def __getattr__(name: str) -> Any:
    module_name = _ATTR_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return import_cli_attr(module_name, name, package=__name__)
