"""pything - Observable, synchronized property values for thing implementations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pything")
except PackageNotFoundError:
    __version__ = "0+local"
from pything.config import ValueComparison, ValueConfig
from pything.events import UpdateSource, ValueUpdate
from pything.exceptions import (
    PyThingConfigError,
    PyThingError,
    ValueForwardError,
    ValueRequestError,
)
from pything.utils import get_addresses, timestamp
from pything.value import Forwarder, Requestor, Value

__all__ = [
    "__version__",
    "Forwarder",
    "PyThingConfigError",
    "PyThingError",
    "Requestor",
    "UpdateSource",
    "Value",
    "ValueComparison",
    "ValueConfig",
    "ValueForwardError",
    "ValueRequestError",
    "ValueUpdate",
    "get_addresses",
    "timestamp",
]
