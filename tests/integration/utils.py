"""
Shared assertion helpers for integration tests that hit the live webservice.

These helpers validate envelope shape and minimal presence of data without
brittle, high-threshold checks on upstream content.
"""

from __future__ import annotations

import json
from typing import Any, Iterable


class AssertionErrorWithContext(AssertionError):
    """Assertion error that carries sample context for quicker debugging."""

    def __init__(self, message: str, sample: Any | None = None):
        if sample is not None:
            message = f"{message}\nSample: {sample!r}"
        super().__init__(message)


def assert_json(result: str) -> dict[str, Any]:
    """Parse JSON string and return dict, raising informative assertion on failure."""
    try:
        return json.loads(result)
    except json.JSONDecodeError as exc:
        raise AssertionErrorWithContext("Response was not valid JSON", result) from exc


def assert_keys(data: dict[str, Any], required_keys: Iterable[str]) -> None:
    """Ensure all required keys are present in a dictionary."""
    missing = [k for k in required_keys if k not in data]
    if missing:
        raise AssertionErrorWithContext(f"Missing required keys: {missing}", data)


def assert_counted(data: dict[str, Any], key: str, min_len: int = 1) -> None:
    """Assert data[key] has at least min_len items and data['count'] matches it."""
    assert_keys(data, [key, "count"])
    items = data[key]
    if len(items) < min_len:
        raise AssertionErrorWithContext(
            f"Key '{key}' expected length >= {min_len}, got {len(items)}", data
        )
    if data["count"] != len(items):
        raise AssertionErrorWithContext(
            f"count={data['count']} but {key} has {len(items)} items", data
        )
