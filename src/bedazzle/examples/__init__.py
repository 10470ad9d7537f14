"""Example domains built with bedazzle."""

from . import car, cart, shape

__all__ = ["car", "cart", "shape"]
