"""Reusable decorators that fit any composed object."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .config import get_setting

logger = logging.getLogger(__name__)


def fields(state: Mapping) -> Dict[str, Any]:
    """Return the plain data entries of a state, leaving out callables."""

    return {key: state[key] for key in state.keys() if not callable(state[key])}


def render(state: Mapping, indent: Optional[int] = None) -> str:
    """Render the data entries of a state as JSON."""

    return json.dumps(fields(state), indent=indent, default=str)


def with_to_string(state: Mapping, recompose: Callable) -> Dict[str, Callable[[], str]]:
    """Add ``to_string()`` returning the state as indented JSON."""

    def to_string() -> str:
        return render(state, indent=get_setting("json_indent"))

    return {"to_string": to_string}


def with_logger(state: Mapping, recompose: Callable) -> Dict[str, Callable[[], None]]:
    """Add ``log()`` writing the state to the bedazzle log at INFO."""

    def log() -> None:
        logger.info(render(state))

    return {"log": log}
