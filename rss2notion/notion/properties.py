"""Conversion between Python values and Notion property objects."""

from datetime import datetime
from typing import Any, Dict, Iterable, Optional

import pendulum

# Notion caps a rich text object at 2000 characters, a select option at 100
MAX_TEXT_LENGTH = 2000
MAX_OPTION_LENGTH = 100


def _clip(text: str) -> str:
    return text[:MAX_TEXT_LENGTH]


def _option_name(name: str) -> str:
    # Select option names may not contain commas
    return name.replace(",", " ").strip()[:MAX_OPTION_LENGTH]


def title(text: str) -> Dict[str, Any]:
    return {"title": [{"type": "text", "text": {"content": _clip(text)}}]}


def rich_text(text: str) -> Dict[str, Any]:
    return {"rich_text": [{"type": "text", "text": {"content": _clip(text)}}]}


def url(value: Optional[str]) -> Dict[str, Any]:
    return {"url": value or None}


def select(name: str) -> Dict[str, Any]:
    return {"select": {"name": _option_name(name)}}


def multi_select(names: Iterable[str]) -> Dict[str, Any]:
    options = sorted({_option_name(n) for n in names if n and n.strip()})
    return {"multi_select": [{"name": n} for n in options if n]}


def date(value: datetime) -> Dict[str, Any]:
    return {"date": {"start": pendulum.instance(value).to_iso8601_string()}}


def external_file(file_url: str) -> Dict[str, Any]:
    return {"type": "external", "external": {"url": file_url}}


def plain_text(prop: Optional[Dict[str, Any]]) -> str:
    """Read the plain text of a title or rich_text property."""
    if not prop:
        return ""
    fragments = prop.get("title") or prop.get("rich_text") or []
    return "".join(f.get("plain_text") or f.get("text", {}).get("content", "") for f in fragments).strip()


def url_value(prop: Optional[Dict[str, Any]]) -> str:
    """Read the value of a url property."""
    if not prop:
        return ""
    return (prop.get("url") or "").strip()


def checkbox_value(prop: Optional[Dict[str, Any]]) -> Optional[bool]:
    """Read a checkbox property, or None when it is absent or of another type."""
    if not prop or "checkbox" not in prop:
        return None
    return bool(prop["checkbox"])


def timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a Notion ISO 8601 timestamp."""
    if not value:
        return None
    return pendulum.parse(value)
