"""Optional-with-diagnostics values produced while walking a document."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from .coercion import CoercionError, to_bool, to_float, to_int

if TYPE_CHECKING:
    from .engine import MapperEngine

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PatternMatcher:
    """Regex capture used to cut a value out of a longer string.

    The strict form records a coercion failure when nothing matches, the
    nullable form treats a miss as an ordinary absent value.
    """

    pattern: re.Pattern
    group: int = 1
    nullable: bool = False

    @classmethod
    def match(cls, regex: str, group: int = 1) -> "PatternMatcher":
        return cls(re.compile(regex), group, nullable=False)

    @classmethod
    def nullable_match(cls, regex: str, group: int = 1) -> "PatternMatcher":
        return cls(re.compile(regex), group, nullable=True)

    def find(self, text: str) -> str | None:
        """Search text and return the capture group, or None on no match."""
        found = self.pattern.search(text)
        if found is None:
            return None
        return found.group(self.group)

    def describe(self) -> str:
        return f"pattern {self.pattern.pattern!r} group {self.group}"


class Extraction(Generic[T]):
    """A possibly absent value extracted from a page.

    Transforms return a new ``Extraction`` and skip their work when the value
    is absent. A failed conversion leaves the value absent and keeps the
    ``CoercionError`` for the error raised by ``or_raise``. Each extraction
    is consumed once, by either ``or_else`` or ``or_raise``.
    """

    def __init__(
        self,
        engine: "MapperEngine",
        value: T | None,
        source: str,
        failure: CoercionError | None = None,
    ) -> None:
        self._engine = engine
        self._value = value
        self._source = source
        self._failure = failure
        self._consumed = False

    def __repr__(self) -> str:
        state = "absent" if self._value is None else repr(self._value)
        return f"Extraction({self._source}: {state})"

    @property
    def source(self) -> str:
        return self._source

    @property
    def failure(self) -> CoercionError | None:
        return self._failure

    def is_present(self) -> bool:
        return self._value is not None

    def _derive(self, value: Any, failure: CoercionError | None = None) -> "Extraction[Any]":
        return Extraction(self._engine, value, self._source, failure or self._failure)

    # Transforms

    def replace(self, pattern: str, literal: str) -> "Extraction[str]":
        """Replace every regex match with a literal string, then trim."""
        if self._value is None:
            return self._derive(None)
        replaced = re.sub(pattern, lambda _: literal, str(self._value)).strip()
        return self._derive(replaced or None)

    def pattern(self, matcher: PatternMatcher) -> "Extraction[str]":
        """Keep only the capture group of the matcher."""
        if self._value is None:
            return self._derive(None)
        text = str(self._value).strip()
        found = matcher.find(text)
        if found is None:
            if matcher.nullable:
                return self._derive(None)
            return self._derive(
                None, CoercionError(self._source, text, "str", f"no match for {matcher.describe()}")
            )
        return self._derive(found.strip())

    def transform(self, func: Callable[[T], U]) -> "Extraction[U]":
        """Apply a plain function to a present value."""
        if self._value is None:
            return self._derive(None)
        return self._derive(func(self._value))

    # Coercions

    def to_int(self) -> "Extraction[int]":
        return self._convert(to_int, "int")

    def to_long(self) -> "Extraction[int]":
        return self._convert(to_int, "long")

    def to_float(self) -> "Extraction[float]":
        return self._convert(to_float, "float")

    def to_bool(self) -> "Extraction[bool]":
        return self._convert(to_bool, "bool")

    def to_date(self) -> "Extraction[date]":
        return self.map_to(date)

    def to_datetime(self) -> "Extraction[datetime]":
        return self.map_to(datetime)

    def map_to(self, target: type[U]) -> "Extraction[U]":
        """Convert with the converter registered for ``target``.

        Raises:
            TypeError: If the mapper has no converter for the type
        """
        converter = self._engine.converters.resolve(target)
        return self._convert(converter, getattr(target, "__name__", repr(target)))

    def _convert(self, converter: Callable[[Any], Any], target_name: str) -> "Extraction[Any]":
        if self._value is None:
            return self._derive(None)
        raw = self._value.strip() if isinstance(self._value, str) else self._value
        if raw == "":
            return self._derive(None)
        try:
            return self._derive(converter(raw))
        except (ValueError, LookupError) as e:
            return self._derive(None, CoercionError(self._source, str(raw), target_name, str(e), e))

    # Terminal operations

    def _consume(self) -> None:
        if self._consumed:
            raise RuntimeError(f"Extraction already consumed: {self._source}")
        self._consumed = True

    def or_else(self, default: Any) -> Any:
        """Return the value, or ``default`` when it is absent."""
        self._consume()
        return default if self._value is None else self._value

    def or_raise(self, field_code: str) -> T:
        """Return the value, or raise a page structure error for ``field_code``.

        Raises:
            PageStructureChangedError: If the value is absent
        """
        self._consume()
        if self._value is None:
            error = self._engine.structure_error(field_code, self._failure, self._source)
            raise error from (self._failure.cause if self._failure else None)
        return self._value
