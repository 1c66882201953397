from importlib.metadata import PackageNotFoundError, version

from loguru import logger

from inputkit.request import (
    InputExhaustedError,
    ScriptedChannel,
    acquire_value,
    request_double,
    request_int,
)

__all__ = [
    "__version__",
    "request_int",
    "request_double",
    "acquire_value",
    "ScriptedChannel",
    "InputExhaustedError",
]

try:
    __version__ = version("inputkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Library logging stays silent until the host application opts in with
# ``logger.enable("inputkit")``.
logger.disable("inputkit")
