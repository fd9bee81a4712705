"""Shared scalar parsing helpers for configuration values."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when blank or missing."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a boolean token case-insensitively; return `None` when unrecognized."""

    if isinstance(value, bool):
        return value

    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a boolean token or raise an actionable `ValueError`."""

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or numeric string.

    Raises:
        ValueError: If the value is a boolean, non-numeric, or not positive.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        token = normalize_optional_string(value)
        if token is None:
            raise ValueError(f"`{field_name}` must be a positive integer.")
        try:
            parsed = int(token, 10)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    return parsed


def split_csv_tokens(value: object) -> tuple[str, ...]:
    """Split a comma-separated value (or a list of values) into stripped tokens."""

    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        raw_items = [str(item) for item in value]
    else:
        raw_items = str(value).split(",")
    return tuple(token for token in (item.strip() for item in raw_items) if token)
