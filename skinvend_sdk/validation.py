"""Input validation helpers."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Union

from .errors import ConfigurationError

DateLike = Union[int, float, datetime]


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require(value: Any, parameter_name: str) -> Any:
    if is_missing(value):
        raise ConfigurationError.missing_argument_error(parameter_name)
    return value


def require_all(**values: Any) -> None:
    missing = [name for name, value in values.items() if is_missing(value)]
    if missing:
        raise ConfigurationError.missing_argument_error(" | ".join(missing))


def to_timestamp_ms(value: DateLike, parameter_name: str) -> int:
    """Accepts milliseconds since epoch or a datetime (naive means UTC)."""

    require(value, parameter_name)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError.invalid_value_error(
            parameter_name, value, "must be a datetime or a unix timestamp in milliseconds"
        )
    return int(value)


def to_id_list(value: Union[str, Iterable[str], None], parameter_name: str) -> List[str]:
    require(value, parameter_name)
    if isinstance(value, str):
        return [value]
    assert value is not None
    return [str(item) for item in value]
