"""Event processor for normalizing event issues into Event records."""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from processor.facet_parser import parse_facets
from processor.models import Event, Talk

logger = logging.getLogger(__name__)

FacetParser = Callable[[Optional[str]], Dict[str, Any]]


class EventProcessor:
    """Processor turning GitHub issue payloads into sorted Event records."""

    def __init__(self, facet_parser: FacetParser = parse_facets):
        """
        Initialize the processor.

        Args:
            facet_parser: Callable turning an issue body into facets
        """
        self.facet_parser = facet_parser

    def process_events(self, entries: Sequence[Mapping[str, Any]]) -> List[Event]:
        """
        Normalize raw issues and sort them by date, most recent first.

        Entries may be GraphQL edges ({"node": issue}) or bare issue nodes.
        Events without a date are placed after all dated events.

        Args:
            entries: Issue edges or nodes from the GraphQL response

        Returns:
            List of Event objects
        """
        events = [self._process_single_event(self._unwrap(entry)) for entry in entries]

        dated = [event for event in events if event.date is not None]
        undated = [event for event in events if event.date is None]
        dated.sort(key=lambda event: event.date, reverse=True)

        logger.info(
            f"Processed {len(events)} events ({len(undated)} without a date)"
        )
        return dated + undated

    def _unwrap(self, entry: Mapping[str, Any]) -> Mapping[str, Any]:
        if not isinstance(entry, Mapping):
            return {}
        if 'node' in entry:
            node = entry['node']
            return node if isinstance(node, Mapping) else {}
        return entry

    def _process_single_event(self, issue: Mapping[str, Any]) -> Event:
        body = issue.get('body')
        facets = self.facet_parser(body)
        sub_issues = _nodes(issue.get('subIssues'))

        return Event(
            title=issue.get('title'),
            number=issue.get('number'),
            url=issue.get('url'),
            body=body,
            date=self._event_date(facets, issue.get('number')),
            facets=facets,
            talks=[
                self._process_talk(sub_issue)
                for sub_issue in sub_issues if isinstance(sub_issue, Mapping)
            ],
            reactions=_reaction_contents(issue.get('reactions'))
        )

    def _process_talk(self, sub_issue: Mapping[str, Any]) -> Talk:
        body = sub_issue.get('body')
        return Talk(
            title=sub_issue.get('title'),
            url=sub_issue.get('url'),
            body=body,
            author=sub_issue.get('author') or None,
            reactions=_reaction_contents(sub_issue.get('reactions')),
            facets=self.facet_parser(body)
        )

    def _event_date(
        self, facets: Mapping[str, Any], number: Optional[int]
    ) -> Optional[datetime]:
        """
        Read the event date from the date facet.

        Date-only and naive values are taken as UTC.

        Returns:
            Timezone-aware datetime or None if missing or unparseable
        """
        date_facet = facets.get('date')
        if not isinstance(date_facet, Mapping):
            return None

        value = date_facet.get('date')
        if not value:
            return None

        try:
            date = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            logger.warning(f"Invalid date for event #{number}: {value}")
            return None

        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return date


def _nodes(connection: Optional[Mapping[str, Any]]) -> List[Any]:
    if not isinstance(connection, Mapping):
        return []
    nodes = connection.get('nodes')
    return nodes if isinstance(nodes, list) else []


def _reaction_contents(reactions: Optional[Mapping[str, Any]]) -> List[str]:
    return [
        reaction.get('content')
        for reaction in _nodes(reactions) if isinstance(reaction, Mapping)
    ]
