"""Parser for bodies of issues created from GitHub issue forms.

GitHub renders every form field as a markdown heading followed by the
submitted value, e.g.::

    ### Date

    2025-12-01

    ### Location

    _No response_

Each heading becomes a facet keyed by its slugified title.
"""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

HEADING_PATTERN = re.compile(r'^(#{1,6})\s+(.+?)(?:\s+#+)?$')
TASK_PATTERN = re.compile(r'^[-*]\s+\[([ xX])\]\s+(.*)$')
COMMENT_PATTERN = re.compile(r'<!--.*?-->', re.DOTALL)
FENCE = '```'
NO_RESPONSE = '_No response_'

DATE_FORMATS = [
    '%Y-%m-%d',      # ISO 8601
    '%m/%d/%Y',      # US format
    '%d.%m.%Y',      # European format
    '%B %d, %Y',     # Full month name
    '%b %d, %Y',     # Abbreviated month name
    '%Y/%m/%d',      # Alternative ISO format
]

TIME_FORMATS = [
    '%H:%M',         # 24-hour format
    '%I:%M %p',      # 12-hour format with AM/PM
    '%I:%M%p',       # 12-hour format without space
    '%H:%M:%S',      # 24-hour with seconds
]


def slugify(title: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', title.lower()).strip('-')


def parse_facets(body: Optional[str]) -> Dict[str, Dict[str, Any]]:
    """
    Parse an issue form body into facets.

    Args:
        body: Raw issue body, may be None or empty

    Returns:
        Mapping of facet key to facet; empty when the body has no headings
    """
    if not isinstance(body, str) or not body.strip():
        return {}

    facets: Dict[str, Dict[str, Any]] = {}
    current = None
    in_fence = False

    for line in COMMENT_PATTERN.sub('', body).splitlines():
        stripped = line.strip()

        if stripped.startswith(FENCE):
            in_fence = not in_fence
            continue

        match = None if in_fence else HEADING_PATTERN.match(stripped)
        if match:
            title = match.group(2).strip()
            key = slugify(title)
            if not key:
                current = None
                continue
            current = {
                'title': title,
                'heading': len(match.group(1)),
                'content': []
            }
            facets[key] = current
            continue

        if current is None:
            continue

        if in_fence:
            current['content'].append(line.rstrip())
        elif stripped and stripped != NO_RESPONSE:
            current['content'].append(stripped)

    for facet in facets.values():
        _add_values(facet)

    return facets


def _add_values(facet: Dict[str, Any]) -> None:
    content: List[str] = facet['content']
    facet['text'] = '\n'.join(content) if content else None

    if len(content) == 1:
        date = normalize_date(content[0])
        if date:
            facet['date'] = date
        time = normalize_time(content[0])
        if time:
            facet['time'] = time

    tasks = [TASK_PATTERN.match(line) for line in content]
    if content and all(tasks):
        facet['list'] = [
            {'checked': task.group(1) != ' ', 'text': task.group(2).strip()}
            for task in tasks
        ]


def normalize_date(date_str: str) -> Optional[str]:
    """
    Normalize date to ISO 8601 format (YYYY-MM-DD).

    Args:
        date_str: Date string in various formats

    Returns:
        ISO 8601 formatted date string or None if parsing fails
    """
    for fmt in DATE_FORMATS:
        try:
            date_obj = datetime.strptime(date_str.strip(), fmt)
            return date_obj.strftime('%Y-%m-%d')
        except ValueError:
            continue

    return None


def normalize_time(time_str: str) -> Optional[str]:
    """
    Normalize time to 24-hour format (HH:MM).

    Args:
        time_str: Time string in various formats

    Returns:
        24-hour formatted time string or None if parsing fails
    """
    time_str = time_str.strip()

    for fmt in TIME_FORMATS:
        try:
            time_obj = datetime.strptime(time_str, fmt)
            return time_obj.strftime('%H:%M')
        except ValueError:
            continue

    return None
