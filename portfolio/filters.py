# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

# Jinja filters used by the theme templates

from datetime import datetime
from typing import Iterable

DATE_FORMAT = "%Y-%m-%d"

def truncate(s: str, length: int) -> str:
    """Limit ``s`` to ``length`` characters, adding an ellipsis when cut."""
    if len(s) <= length:
        return s
    return s[:length] + "..."

def format_date(date_str: str) -> str:
    """2025-01-15 -> Jan 15, 2025. Anything unparseable is returned unchanged."""
    if not date_str:
        return ""
    try:
        parsed = datetime.strptime(date_str, DATE_FORMAT)
    except ValueError:
        return date_str
    return parsed.strftime("%b %d, %Y")

def contains(items: Iterable[str], item: str) -> bool:
    return item in items

def join(items: Iterable[str], sep: str) -> str:
    return sep.join(items)

def _plural(count: int, unit: str) -> str:
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"

def time_ago(date_str: str, now: datetime | None = None) -> str:
    """How long ago a YYYY-MM-DD date was, in years, months (30 days) or days."""
    if not date_str:
        return ""
    try:
        then = datetime.strptime(date_str, DATE_FORMAT)
    except ValueError:
        return date_str

    now = now or datetime.now()
    days = (now - then).days
    months = days // 30
    years = months // 12

    if years > 0:
        return _plural(years, "year")
    if months > 0:
        return _plural(months, "month")
    if days > 0:
        return _plural(days, "day")
    return "Today"

def humanize(s: str) -> str:
    """go_programming -> Go Programming"""
    words = s.replace("_", " ").replace("-", " ").lower().split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)

TEMPLATE_FILTERS = {
    "truncate_text": truncate,
    "format_date": format_date,
    "contains": contains,
    "join_with": join,
    "time_ago": time_ago,
    "humanize": humanize,
}
