from typing import Any, Generic, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class OptionalQuery(Generic[T]):
    """A query parameter that can be omitted, sent as ``null`` or sent with a value.

    Some endpoints treat "do not filter on this field" and "filter on an empty
    value" differently, so plain ``None`` cannot express both. ``OptionalQuery``
    keeps the three cases apart:

    * ``OptionalQuery.unset()`` (also the default): the parameter is omitted.
    * ``OptionalQuery.null()``: the parameter is sent as ``name=null``.
    * ``OptionalQuery.of(value)``: the parameter is sent as ``name=value``.

    Examples:
        ```python
        client.memberships.list(parent_id=OptionalQuery.null())
        client.memberships.list(parent_id=OptionalQuery.of("mer_123"))
        ```
    """

    __slots__ = ("_is_set", "_value")

    def __init__(self, value: Any = _MISSING) -> None:
        if value is _MISSING:
            self._is_set = False
            self._value = None
        else:
            self._is_set = True
            self._value = value

    @classmethod
    def unset(cls) -> "OptionalQuery[T]":
        return cls()

    @classmethod
    def null(cls) -> "OptionalQuery[T]":
        return cls(None)

    @classmethod
    def of(cls, value: T) -> "OptionalQuery[T]":
        return cls(value)

    @classmethod
    def coerce(cls, value: "T | OptionalQuery[T]") -> "OptionalQuery[T]":
        """Wrap a plain value, passing existing ``OptionalQuery`` instances through."""
        if isinstance(value, OptionalQuery):
            return value
        return cls.of(value)

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def is_null(self) -> bool:
        return self._is_set and self._value is None

    @property
    def value(self) -> T | None:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_value"):
            raise AttributeError("OptionalQuery is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalQuery):
            return NotImplemented
        return self._is_set == other._is_set and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_set, self._value))

    def __repr__(self) -> str:
        if not self._is_set:
            return "OptionalQuery.unset()"
        if self._value is None:
            return "OptionalQuery.null()"
        return f"OptionalQuery.of({self._value!r})"
