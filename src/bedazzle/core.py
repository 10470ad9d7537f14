"""
Core functionality for bedazzle
Progressively decorate an object with new properties and methods
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Optional

logger = logging.getLogger(__name__)

State = Mapping
Recompose = Callable[[State], "Bedazzled"]
Decorator = Callable[["Bedazzled", Recompose], Optional[Mapping]]


class Bedazzled:
    """
    An immutable, attribute-accessible view over a composed state.

    Fields are reachable as attributes or items. ``keys`` is the only
    reserved name; a field called ``keys`` is still available as
    ``obj["keys"]``.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping] = None):
        object.__setattr__(self, "_fields", dict(fields or {}))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_fields":
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no field '{name}'"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot assign to field '{name}'; use recompose instead")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete field '{name}'")

    def __reduce__(self):
        return (type(self), (self._fields,))

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def keys(self):
        return self._fields.keys()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bedazzled):
            return self._fields == other._fields
        if isinstance(other, Mapping):
            return self._fields == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    def __dir__(self):
        return sorted(set(super().__dir__()) | {k for k in self._fields if k.isidentifier()})


def _name_of(decorator: Callable) -> str:
    return getattr(decorator, "__qualname__", None) or repr(decorator)


def bedazzle(state: State, *decorators: Decorator) -> Bedazzled:
    """Fold decorators over a base state and return the composed object.

    Each decorator is called as ``decorator(current, recompose)``:

    - ``current`` is the object accumulated so far (base state plus every
      earlier decorator's contribution).
    - ``recompose(new_state)`` restarts the whole pipeline from ``new_state``
      with the same decorators, returning a fresh composed object.

    The mapping a decorator returns is merged on top of ``current``; later
    decorators win on key collisions and the base state has the lowest
    precedence. A ``None`` return contributes nothing.

    Exceptions raised by a decorator propagate unchanged and no result is
    produced.

    Args:
        state: Base key/value mapping, copied and never mutated
        *decorators: Decorator functions applied left to right

    Returns:
        The composed :class:`Bedazzled` object
    """

    def recompose(new_state: State) -> Bedazzled:
        logger.debug(f"Recomposing with {len(decorators)} decorator(s)")
        return bedazzle(new_state, *decorators)

    accumulated: Dict[str, Any] = dict(state)
    logger.debug(f"Composing {len(accumulated)} field(s) with {len(decorators)} decorator(s)")

    for decorator in decorators:
        logger.debug(f"Applying decorator {_name_of(decorator)}")
        partial = decorator(Bedazzled(accumulated), recompose)
        if partial is None:
            continue
        accumulated = {**accumulated, **partial}

    return Bedazzled(accumulated)


# The combinator under its generic name
compose = bedazzle
