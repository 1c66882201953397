from importlib import import_module
from typing import Any

# modules shipped by the `cli` extra
CLI_EXTRA_MODULES: frozenset[str] = frozenset({"rich_argparse"})


def import_cli_attr(module_name: str, attr_name: str, *, package: str) -> Any:
    """Load ``attr_name`` from a module that needs the ``cli`` extra.

    Raises:
        ModuleNotFoundError: With an install hint when a module of the
            ``cli`` extra is missing; other missing modules propagate as is.
    """
    try:
        module = import_module(module_name, package=package)
    except ModuleNotFoundError as exc:
        if not set((exc.name or "").split(".")) & CLI_EXTRA_MODULES:
            raise
        raise ModuleNotFoundError(
            f"{package}.{attr_name} needs the `cli` extra "
            f"(missing `{exc.name}`). "
            'Install it with `pip install "inputkit[cli]"` '
            "or `pdm sync -G dev -G cli` in a checkout."
        ) from exc
    return getattr(module, attr_name)
