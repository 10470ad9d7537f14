"""Rectangle decorated with geometry helpers."""

from __future__ import annotations

from typing import Callable, Dict

from ..core import Bedazzled, bedazzle
from ..decorators import with_to_string

BASE_RECT = {"width": 10, "height": 5}


def with_area(rect: Bedazzled, recompose: Callable) -> Dict[str, Callable[[], float]]:
    width, height = rect.width, rect.height
    return {"get_area": lambda: width * height}


def with_perimeter(rect: Bedazzled, recompose: Callable) -> Dict[str, Callable[[], float]]:
    width, height = rect.width, rect.height
    return {"get_perimeter": lambda: 2 * (width + height)}


def build_rect(width: float = 10, height: float = 5) -> Bedazzled:
    """Compose a rectangle with area, perimeter and JSON rendering."""

    return bedazzle(
        {"width": width, "height": height},
        with_area,
        with_perimeter,
        with_to_string,
    )


def main() -> int:
    rect = build_rect(**BASE_RECT)
    print(rect.get_area())
    print(rect.get_perimeter())
    print(rect.to_string())
    return 0
