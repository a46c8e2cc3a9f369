"""Structural diff of two JSON trees.

``diff`` is a pure function: it walks an expected and an actual tree in
parallel and returns every added, removed or changed leaf as a path-tagged
``Difference``. Objects are matched by key and arrays by index, so an
inserted array element shows up as a run of changes followed by an ``added``
tail. ``render`` turns the result into the text used in failure reports::

    ~ timeseries[0].years[0].value: "12.3" -> "12.4"
    - timeseries[0].years[0].quarter: "Q1"
    + timeseries[0].years[0].extra: true
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel

ADDED = "added"
REMOVED = "removed"
CHANGED = "changed"

_MISSING = object()


@dataclass(frozen=True)
class Difference:
    kind: str
    path: str
    expected: Any = None
    actual: Any = None


def normalize(value: Any) -> Any:
    """Convert models, tuples and sets into a plain JSON tree."""

    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, dict):
        return {str(key): normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((normalize(item) for item in value), key=_dump)
    return value


def join_key(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"


def _scalar_equal(expected: Any, actual: Any) -> bool:
    # bool is an int subclass; keep true/1 apart but let 1 == 1.0.
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    numbers = (int, float)
    if isinstance(expected, numbers) and isinstance(actual, numbers):
        return expected == actual
    return type(expected) is type(actual) and expected == actual


def _walk(expected: Any, actual: Any, path: str) -> Iterator[Difference]:
    if isinstance(expected, dict) and isinstance(actual, dict):
        for key in sorted(set(expected) | set(actual)):
            child = join_key(path, key)
            exp = expected.get(key, _MISSING)
            act = actual.get(key, _MISSING)
            if act is _MISSING:
                yield Difference(REMOVED, child, expected=exp)
            elif exp is _MISSING:
                yield Difference(ADDED, child, actual=act)
            else:
                yield from _walk(exp, act, child)
        return

    if isinstance(expected, list) and isinstance(actual, list):
        common = min(len(expected), len(actual))
        for index in range(common):
            yield from _walk(expected[index], actual[index], join_index(path, index))
        for index in range(common, len(expected)):
            yield Difference(REMOVED, join_index(path, index), expected=expected[index])
        for index in range(common, len(actual)):
            yield Difference(ADDED, join_index(path, index), actual=actual[index])
        return

    if isinstance(expected, (dict, list)) or isinstance(actual, (dict, list)):
        yield Difference(CHANGED, path, expected=expected, actual=actual)
    elif not _scalar_equal(expected, actual):
        yield Difference(CHANGED, path, expected=expected, actual=actual)


def diff(expected: Any, actual: Any, path: str = "") -> List[Difference]:
    """Return the differences between two JSON values, depth first.

    Both values are normalized first, so pydantic models may be passed
    directly. ``path`` prefixes every reported path.
    """

    return list(_walk(normalize(expected), normalize(actual), path))


def _dump(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def render(differences: List[Difference], limit: Optional[int] = None) -> str:
    if not differences:
        return "no differences"

    shown = differences if limit is None else differences[:limit]
    lines = []
    for item in shown:
        label = item.path or "<root>"
        if item.kind == CHANGED:
            lines.append(f"~ {label}: {_dump(item.expected)} -> {_dump(item.actual)}")
        elif item.kind == REMOVED:
            lines.append(f"- {label}: {_dump(item.expected)}")
        else:
            lines.append(f"+ {label}: {_dump(item.actual)}")
    hidden = len(differences) - len(shown)
    if hidden > 0:
        lines.append(f"... {hidden} more")
    return "\n".join(lines)
