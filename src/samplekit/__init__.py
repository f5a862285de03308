from importlib.metadata import version, PackageNotFoundError

from .engine import RandomEngine, shared_engine
from .exceptions import (
    CapacityExceededError,
    ConfigError,
    FileAccessError,
    InvalidRangeError,
    SampleKitError,
)
from .files import create_binary_file, create_text_file, open_binary_file, open_text_file, read_text_file
from .fill import collect_unique, fill_unique, rfill, rfill_front
from .generators import BoundedIntGenerator, BoundedRealGenerator, Producer
from .names import FIRST_NAMES, SURNAMES, random_full_name, random_name, random_surname
from .numeric import isprime, ndigit
from .printing import dash_line, format_item, print_items, print_range

__all__ = [
    "__version__",
    "BoundedIntGenerator",
    "BoundedRealGenerator",
    "CapacityExceededError",
    "ConfigError",
    "FIRST_NAMES",
    "FileAccessError",
    "InvalidRangeError",
    "Producer",
    "RandomEngine",
    "SURNAMES",
    "SampleKitError",
    "collect_unique",
    "create_binary_file",
    "create_text_file",
    "dash_line",
    "fill_unique",
    "format_item",
    "isprime",
    "ndigit",
    "open_binary_file",
    "open_text_file",
    "print_items",
    "print_range",
    "random_full_name",
    "random_name",
    "random_surname",
    "read_text_file",
    "rfill",
    "rfill_front",
    "shared_engine",
]

try:
    __version__ = version("samplekit")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
