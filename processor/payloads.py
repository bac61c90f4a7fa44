"""Shaping of discussion, team, user and organization payloads."""
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence

from processor.models import (
    Discussion,
    DiscussionAuthor,
    DiscussionCategory,
    Organization,
    SocialAccount,
    Team,
    TeamMember,
    User,
)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO 8601 timestamp, returning None if missing."""
    if not value:
        return None
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


def _value(node: Mapping[str, Any], key: str) -> Any:
    """Read a scalar, mapping empty values to None."""
    return node.get(key) or None


def _nodes(connection: Optional[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    if not connection:
        return []
    return [node for node in connection.get('nodes') or [] if node]


def _total_count(connection: Optional[Mapping[str, Any]]) -> int:
    if not connection:
        return 0
    return connection.get('totalCount') or 0


def _social_accounts(connection: Optional[Mapping[str, Any]]) -> List[SocialAccount]:
    return [
        SocialAccount(
            provider=_value(account, 'provider'), url=_value(account, 'url')
        )
        for account in _nodes(connection)
    ]


def process_discussions(edges: Optional[Sequence[Mapping[str, Any]]]) -> List[Discussion]:
    """
    Convert discussion edges (or bare nodes) into Discussion objects.

    Args:
        edges: Discussion edges from the GraphQL response

    Returns:
        List of Discussion objects in source order
    """
    discussions = []

    for edge in edges or []:
        node = edge.get('node') or edge
        author = node.get('author')
        category = node.get('category')

        discussions.append(
            Discussion(
                id=_value(node, 'id'),
                number=_value(node, 'number'),
                title=_value(node, 'title'),
                url=_value(node, 'url'),
                body=_value(node, 'body'),
                created_at=parse_timestamp(node.get('createdAt')),
                updated_at=parse_timestamp(node.get('updatedAt')),
                author=DiscussionAuthor(
                    login=_value(author, 'login'),
                    name=_value(author, 'name'),
                    avatar_url=_value(author, 'avatarUrl'),
                    url=_value(author, 'url')
                ) if author else None,
                category=DiscussionCategory(
                    id=_value(category, 'id'),
                    name=_value(category, 'name'),
                    emoji=_value(category, 'emoji'),
                    description=_value(category, 'description')
                ) if category else None,
                reactions=[
                    reaction.get('content')
                    for reaction in _nodes(node.get('reactions'))
                ],
                comment_count=_total_count(node.get('comments'))
            )
        )

    return discussions


def process_team(team: Optional[Mapping[str, Any]]) -> Optional[Team]:
    """Convert a team payload into a Team, or None if the team is missing."""
    if not team:
        return None

    return Team(
        name=_value(team, 'name'),
        slug=_value(team, 'slug'),
        description=_value(team, 'description'),
        members=[
            TeamMember(
                login=_value(member, 'login'),
                name=_value(member, 'name'),
                avatar_url=_value(member, 'avatarUrl'),
                bio=_value(member, 'bio'),
                website_url=_value(member, 'websiteUrl'),
                company=_value(member, 'company'),
                location=_value(member, 'location'),
                social_accounts=_social_accounts(member.get('socialAccounts'))
            )
            for member in _nodes(team.get('members'))
        ]
    )


def process_user(user: Optional[Mapping[str, Any]]) -> Optional[User]:
    """Convert a user payload into a User, or None if the user is missing."""
    if not user:
        return None

    return User(
        login=_value(user, 'login'),
        name=_value(user, 'name'),
        bio=_value(user, 'bio'),
        avatar_url=_value(user, 'avatarUrl'),
        url=_value(user, 'url'),
        website_url=_value(user, 'websiteUrl'),
        company=_value(user, 'company'),
        location=_value(user, 'location'),
        email=_value(user, 'email'),
        created_at=parse_timestamp(user.get('createdAt')),
        updated_at=parse_timestamp(user.get('updatedAt')),
        follower_count=_total_count(user.get('followers')),
        following_count=_total_count(user.get('following')),
        public_repo_count=_total_count(user.get('repositories')),
        social_accounts=_social_accounts(user.get('socialAccounts'))
    )


def process_organization(org: Optional[Mapping[str, Any]]) -> Optional[Organization]:
    """Convert an organization payload, or None if the organization is missing."""
    if not org:
        return None

    return Organization(
        name=_value(org, 'name'),
        login=_value(org, 'login'),
        description=_value(org, 'description'),
        website_url=_value(org, 'websiteUrl'),
        avatar_url=_value(org, 'avatarUrl'),
        email=_value(org, 'email'),
        location=_value(org, 'location'),
        created_at=parse_timestamp(org.get('createdAt')),
        updated_at=parse_timestamp(org.get('updatedAt')),
        member_count=_total_count(org.get('membersWithRole')),
        public_repo_count=_total_count(org.get('repositories'))
    )
