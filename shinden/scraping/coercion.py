"""Typed conversions for extracted text.

Every converter takes the trimmed text of a field and either returns the
converted value or raises ``ValueError`` (``LookupError`` is accepted too,
for dictionary-backed resolvers). The extraction layer turns those errors
into an absent value plus a ``CoercionError`` diagnostic.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Callable, Mapping

Converter = Callable[[Any], Any]

# ASCII digits only, no digit-group underscores
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class CoercionError:
    """Why a field value could not be converted."""

    source: str
    raw_text: str | None
    target_type: str
    reason: str = ""
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.source}: cannot convert {self.raw_text!r} to {self.target_type} ({self.reason})"


def clear_for_number(text: str) -> str:
    """Drop regular and non-breaking spaces used as thousand separators."""
    return text.replace(" ", "").replace("\xa0", "")


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, int):
        return value
    text = clear_for_number(str(value))
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def to_float(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = clear_for_number(str(value))
    if not DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"Not a decimal number: {text!r}")
    return float(text)


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def date_converter(fmt: str) -> Converter:
    """Build a converter parsing dates in the given strptime format."""

    def convert(value: Any) -> date:
        return datetime.strptime(str(value), fmt).date()

    return convert


def datetime_converter(fmt: str) -> Converter:
    """Build a converter parsing timestamps in the given strptime format."""

    def convert(value: Any) -> datetime:
        return datetime.strptime(str(value), fmt)

    return convert


class ConverterRegistry:
    """Immutable lookup of target type -> converter.

    Built once per mapper from the built-in converters and the enum
    resolvers the mapper registers, then shared by every extraction the
    mapper performs.
    """

    def __init__(self, converters: Mapping[type, Converter]) -> None:
        self._converters = MappingProxyType(dict(converters))

    @classmethod
    def with_defaults(
        cls,
        date_format: str = "%Y-%m-%d",
        date_time_format: str = "%Y-%m-%d %H:%M:%S",
        extra: Mapping[type, Converter] | None = None,
    ) -> "ConverterRegistry":
        """Create a registry with the built-in converters.

        Args:
            date_format: strptime format for ``date`` targets
            date_time_format: strptime format for ``datetime`` targets
            extra: Additional resolvers, typically ``EnumType -> from_value``

        Returns:
            ConverterRegistry instance
        """
        converters: dict[type, Converter] = {
            str: str,
            int: to_int,
            float: to_float,
            bool: to_bool,
            date: date_converter(date_format),
            datetime: datetime_converter(date_time_format),
        }
        converters.update(extra or {})
        return cls(converters)

    def __contains__(self, target: object) -> bool:
        return target in self._converters

    def resolve(self, target: type) -> Converter:
        """Get the converter for a target type.

        Raises:
            TypeError: If no converter is registered for the type
        """
        try:
            return self._converters[target]
        except KeyError:
            name = getattr(target, "__name__", repr(target))
            raise TypeError(f"Unsupported conversion target: {name}") from None
