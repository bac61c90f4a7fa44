"""Data models for GitHub content normalization."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class Talk:
    """Talk proposed as a sub-issue of an event."""
    title: Optional[str]
    url: Optional[str]
    body: Optional[str]
    author: Optional[Dict[str, Any]]
    reactions: List[str] = field(default_factory=list)
    facets: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'url': self.url,
            'body': self.body,
            'author': self.author,
            'reactions': list(self.reactions),
            'facets': self.facets
        }


@dataclass(frozen=True)
class Event:
    """Normalized event built from an issue."""
    title: Optional[str]
    number: Optional[int]
    url: Optional[str]
    body: Optional[str]
    date: Optional[datetime]
    facets: Dict[str, Any] = field(default_factory=dict)
    talks: List[Talk] = field(default_factory=list)
    reactions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'number': self.number,
            'url': self.url,
            'body': self.body,
            'date': _isoformat(self.date),
            'facets': self.facets,
            'talks': [talk.to_dict() for talk in self.talks],
            'reactions': list(self.reactions)
        }


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class Location:
    """Validated venue from the locations file."""
    id: str
    name: str
    address: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    url: Optional[str] = None
    what3words: Optional[str] = None
    description: Optional[str] = None
    capacity: Optional[Any] = None
    accessibility: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Known fields first, then custom fields as they appeared in the file."""
        data = {
            'id': self.id,
            'name': self.name,
            'address': self.address,
            'coordinates': (
                {'lat': self.coordinates.lat, 'lng': self.coordinates.lng}
                if self.coordinates else None
            ),
            'url': self.url,
            'what3words': self.what3words,
            'description': self.description,
            'capacity': self.capacity,
            'accessibility': self.accessibility
        }
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class LocationValidationError:
    """Schema violations for one entry of the locations file."""
    index: int
    id: str
    errors: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {'index': self.index, 'id': self.id, 'errors': list(self.errors)}


@dataclass(frozen=True)
class LocationsResult:
    """Valid locations plus errors for the entries that were dropped."""
    locations: List[Location]
    errors: Optional[List[LocationValidationError]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'locations': [location.to_dict() for location in self.locations],
            'errors': (
                [error.to_dict() for error in self.errors]
                if self.errors is not None else None
            )
        }


@dataclass(frozen=True)
class DiscussionAuthor:
    login: Optional[str]
    name: Optional[str]
    avatar_url: Optional[str]
    url: Optional[str]


@dataclass(frozen=True)
class DiscussionCategory:
    id: Optional[str]
    name: Optional[str]
    emoji: Optional[str]
    description: Optional[str]


@dataclass(frozen=True)
class Discussion:
    """Repository discussion."""
    id: Optional[str]
    number: Optional[int]
    title: Optional[str]
    url: Optional[str]
    body: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    author: Optional[DiscussionAuthor]
    category: Optional[DiscussionCategory]
    reactions: List[str] = field(default_factory=list)
    comment_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'number': self.number,
            'title': self.title,
            'url': self.url,
            'body': self.body,
            'created_at': _isoformat(self.created_at),
            'updated_at': _isoformat(self.updated_at),
            'author': vars(self.author) if self.author else None,
            'category': vars(self.category) if self.category else None,
            'reactions': list(self.reactions),
            'comment_count': self.comment_count
        }


@dataclass(frozen=True)
class SocialAccount:
    provider: Optional[str]
    url: Optional[str]


@dataclass(frozen=True)
class TeamMember:
    login: Optional[str]
    name: Optional[str]
    avatar_url: Optional[str]
    bio: Optional[str]
    website_url: Optional[str]
    company: Optional[str]
    location: Optional[str]
    social_accounts: List[SocialAccount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(vars(self))
        data['social_accounts'] = [vars(account) for account in self.social_accounts]
        return data


@dataclass(frozen=True)
class Team:
    """Organization team with its members."""
    name: Optional[str]
    slug: Optional[str]
    description: Optional[str]
    members: List[TeamMember] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'members': [member.to_dict() for member in self.members]
        }


@dataclass(frozen=True)
class User:
    """GitHub user profile."""
    login: Optional[str]
    name: Optional[str]
    bio: Optional[str]
    avatar_url: Optional[str]
    url: Optional[str]
    website_url: Optional[str]
    company: Optional[str]
    location: Optional[str]
    email: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    follower_count: int = 0
    following_count: int = 0
    public_repo_count: int = 0
    social_accounts: List[SocialAccount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(vars(self))
        data['created_at'] = _isoformat(self.created_at)
        data['updated_at'] = _isoformat(self.updated_at)
        data['social_accounts'] = [vars(account) for account in self.social_accounts]
        return data


@dataclass(frozen=True)
class Organization:
    """GitHub organization profile."""
    name: Optional[str]
    login: Optional[str]
    description: Optional[str]
    website_url: Optional[str]
    avatar_url: Optional[str]
    email: Optional[str]
    location: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    member_count: int = 0
    public_repo_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = dict(vars(self))
        data['created_at'] = _isoformat(self.created_at)
        data['updated_at'] = _isoformat(self.updated_at)
        return data
