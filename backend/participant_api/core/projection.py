"""Attribute Projection — pure helper behind get_by_key/scan projections.

Invariants:
    - project() never mutates its input; nested dicts are rebuilt, not shared
    - Missing paths are skipped silently (a projection never invents attributes)
"""

from typing import Any, Iterable, Mapping


def project(record: Mapping[str, Any], paths: Iterable[str]) -> dict[str, Any]:
    """Keep only the listed attribute paths. "work.salary" selects a nested key."""
    result: dict[str, Any] = {}
    for path in paths:
        parts = path.split(".")
        source: Any = record
        for part in parts:
            if not isinstance(source, Mapping) or part not in source:
                break
            source = source[part]
        else:
            target = result
            for part in parts[:-1]:
                target = target.setdefault(part, {})
            target[parts[-1]] = source
    return result
