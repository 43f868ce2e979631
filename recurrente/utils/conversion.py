"""Key-case conversion between the wire format (snake_case) and the
internal format (camelCase).

Conversion is a structural fold: mappings are rebuilt with renamed keys,
lists and tuples are rebuilt element by element, and every other value is a
leaf that is returned as-is. Cyclic structures are not supported.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

_UPPER = re.compile(r"([A-Z])")
_UNDERSCORE_LOWER = re.compile(r"_([a-z])")


def snake_key(key: str) -> str:
    return _UPPER.sub(r"_\1", key).lower()


def camel_key(key: str) -> str:
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), key)


def convert_keys(value: Any, key_func: Callable[[str], str]) -> Any:
    """Rename every string key of ``value`` with ``key_func``, recursively."""
    if isinstance(value, Mapping):
        return {
            (key_func(k) if isinstance(k, str) else k): convert_keys(v, key_func)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [convert_keys(v, key_func) for v in value]
    if isinstance(value, tuple):
        return tuple(convert_keys(v, key_func) for v in value)
    return value


def to_snake_case(value: Any) -> Any:
    return convert_keys(value, snake_key)


def to_camel_case(value: Any) -> Any:
    return convert_keys(value, camel_key)
