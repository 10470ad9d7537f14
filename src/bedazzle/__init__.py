"""
bedazzle: progressively decorate immutable objects
"""

from .core import (
    Bedazzled,
    Decorator,
    Recompose,
    State,
    bedazzle,
    compose,
)

from .decorators import (
    fields,
    render,
    with_logger,
    with_to_string,
)

from .config import (
    load_config,
    get_setting,
    reset_config,
)

from .exceptions import (
    BedazzleError,
    ConfigError,
)

__version__ = "0.1.0"
__all__ = [
    "Bedazzled",
    "Decorator",
    "Recompose",
    "State",
    "bedazzle",
    "compose",
    "fields",
    "render",
    "with_logger",
    "with_to_string",
    "load_config",
    "get_setting",
    "reset_config",
    "BedazzleError",
    "ConfigError",
]
