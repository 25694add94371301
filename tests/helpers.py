"""Helpers for building Day One export data in tests."""

from __future__ import annotations

import json


def make_entry(uuid: str = "abc", creation_date: str = "2023-05-01T10:15:30Z", **fields) -> dict:
    """Build a raw export entry dict."""
    entry = {"uuid": uuid, "creationDate": creation_date}
    entry.update(fields)
    return entry


def export_json(*entries: dict) -> str:
    return json.dumps({"metadata": {"version": "1.0"}, "entries": list(entries)})
