from __future__ import annotations
import inspect
import logging
from dataclasses import InitVar, dataclass, field
from typing import Any, Awaitable, Callable, Generic, Tuple, TypeGuard, TypeVar, Union

from .errors import UnwrapOnNoneError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_log = logging.getLogger(__name__)

# Stamped on every instance so copies of this module loaded side by side still
# recognise each other's values.
UNIVERSAL_NOMINALITY = "pypi.org/project/optionpy/Option"

UNWRAP_MESSAGE = "called unwrap() on a None value"

_INTERNAL = object()


class _Missing:
    __slots__ = ()
    def __repr__(self) -> str: return "MISSING"
    def __bool__(self) -> bool: return False


# Absent-but-not-null, e.g. `mapping.get(key, MISSING)`.
MISSING: Any = _Missing()


def is_option(candidate: Any) -> TypeGuard["Option[Any]"]:
    """Structural check: does ``candidate`` carry this library's marker itself?

    Only the instance's own ``__dict__`` is consulted, so a marker defined on a
    class (or inherited from one) does not count. Class identity is never
    checked, which keeps values from an independently imported copy of this
    module recognisable.
    """
    if candidate is None:
        return False
    try:
        own = object.__getattribute__(candidate, "__dict__")
    except AttributeError:
        return False
    if not isinstance(own, dict):
        return False
    marker = own.get("universal_nominality")
    if not isinstance(marker, str):
        return False
    return marker == UNIVERSAL_NOMINALITY


async def _settle(x: Union[R, Awaitable[R]]) -> R:
    if inspect.isawaitable(x):
        return await x
    return x  # type: ignore[return-value]


@dataclass(frozen=True, repr=False)
class Option(Generic[T]):
    """Either exactly one value (Some) or nothing (None).

    Build instances with ``Option.from_`` / ``Option.none`` or one of the
    ``from_nullish`` family; the constructor itself is closed.
    """

    _token: InitVar[object]
    _is_some: bool
    _value: Any = None
    universal_nominality: str = field(default_factory=lambda: UNIVERSAL_NOMINALITY, init=False)

    def __post_init__(self, _token: object) -> None:
        if _token is not _INTERNAL:
            raise TypeError("Option cannot be constructed directly; use Option.from_() or Option.none()")

    # Only these two may call the constructor.
    @staticmethod
    def none() -> "Option[T]":
        return Option(_INTERNAL, False)

    @staticmethod
    def from_(value: T) -> "Option[T]":
        return Option(_INTERNAL, True, value)

    @staticmethod
    def from_nullish(value: Any) -> "Option[T]":
        if value is None or value is MISSING:
            return Option.none()
        return Option.from_(value)

    @staticmethod
    def from_nullable(value: Any) -> "Option[T]":
        if value is None:
            return Option.none()
        return Option.from_(value)

    @staticmethod
    def from_optional(value: Any) -> "Option[T]":
        if value is MISSING:
            return Option.none()
        return Option.from_(value)

    is_option = staticmethod(is_option)

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "NONE"

    # Structural, so values from another loaded copy of this module compare too.
    def __eq__(self, other: object) -> bool:
        if not is_option(other) or not hasattr(other, "_is_some"):
            return NotImplemented
        if self._is_some != other._is_some:
            return False
        return not self._is_some or self._value == other._value

    def is_some(self) -> bool: return self._is_some
    def is_none(self) -> bool: return not self._is_some

    def is_(self, predicate: Callable[[T], Any]) -> bool:
        # An empty Option satisfies every predicate.
        return self.is_none() or bool(predicate(self._value))

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self._is_some:
            return Option.from_(f(self._value))
        return Option.none()

    async def map_async(self, f: Callable[[T], Union[U, Awaitable[U]]]) -> "Option[U]":
        if self._is_some:
            return Option.from_(await _settle(f(self._value)))
        return Option.none()

    def flatten(self) -> "Option[Any]":
        if self._is_some and is_option(self._value):
            return self._value
        return self

    def and_(self, other: "Option[U]") -> "Option[U]":
        if self._is_some:
            return other
        return Option.none()

    def or_(self, other: "Option[T]") -> "Option[T]":
        if self._is_some:
            return self
        return other

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self._is_some:
            return f(self._value)
        return Option.none()

    async def and_then_async(self, f: Callable[[T], Union["Option[U]", Awaitable["Option[U]"]]]) -> "Option[U]":
        if self._is_some:
            return await _settle(f(self._value))
        return Option.none()

    def or_else(self, f: Callable[[], "Option[T]"]) -> "Option[T]":
        if self._is_some:
            return self
        return f()

    async def or_else_async(self, f: Callable[[], Union["Option[T]", Awaitable["Option[T]"]]]) -> "Option[T]":
        if self._is_some:
            return self
        return await _settle(f())

    def filter(self, p: Callable[[T], Any]) -> "Option[T]":
        if self._is_some and p(self._value):
            return Option.from_(self._value)
        return Option.none()

    async def filter_async(self, p: Callable[[T], Any]) -> "Option[T]":
        if self._is_some and await _settle(p(self._value)):
            return Option.from_(self._value)
        return Option.none()

    def filter_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self._is_some:
            return f(self._value)
        return Option.none()

    async def filter_map_async(self, f: Callable[[T], Union["Option[U]", Awaitable["Option[U]"]]]) -> "Option[U]":
        if self._is_some:
            return await _settle(f(self._value))
        return Option.none()

    # Also usable unbound: Option.zip(first, second)
    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        if self._is_some and other._is_some:
            return Option.from_((self._value, other._value))
        return Option.none()

    async def awaited(self) -> "Option[Any]":
        if self._is_some:
            return Option.from_(await _settle(self._value))
        return Option.none()

    def unwrap_or(self, default: U) -> Union[T, U]:
        return self._value if self._is_some else default

    def unwrap_or_else(self, f: Callable[[], U]) -> Union[T, U]:
        return self._value if self._is_some else f()

    async def unwrap_or_else_async(self, f: Callable[[], Union[U, Awaitable[U]]]) -> Union[T, U]:
        if self._is_some:
            return self._value
        return await _settle(f())

    def unwrap_or_null(self) -> Union[T, None]:
        return self._value if self._is_some else None

    def unwrap_or_undefined(self) -> Any:
        return self._value if self._is_some else MISSING

    def unwrap(self) -> T:
        if self._is_some:
            return self._value
        _log.debug("unwrap() on an empty Option", extra={"is_user_message": False})
        raise UnwrapOnNoneError(UNWRAP_MESSAGE, is_user_message=False)

    def expect(self, message: str) -> T:
        if self._is_some:
            return self._value
        _log.debug("expect() on an empty Option: %s", message, extra={"is_user_message": True})
        raise UnwrapOnNoneError(message, is_user_message=True)

    def match(self, some_fn: Callable[[T], R], none_fn: Callable[[], R]) -> R:
        if self._is_some:
            return some_fn(self._value)
        return none_fn()


def some(value: T) -> Option[T]:
    return Option.from_(value)


def none() -> Option[Any]:
    return Option.none()
