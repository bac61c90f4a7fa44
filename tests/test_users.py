"""Unit tests for the user and organization accessors."""
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from accessors.errors import FetchError, MissingParametersError
from accessors.organization import get_organization
from accessors.users import get_user


class TestGetUser:
    """Test cases for get_user."""

    def test_get_user(self):
        """Test fetching a complete user profile."""
        graphql = Mock(return_value={'user': {
            'login': 'octocat',
            'name': 'The Octocat',
            'bio': 'Mascot',
            'avatarUrl': 'https://github.com/octocat.png',
            'url': 'https://github.com/octocat',
            'websiteUrl': 'https://octocat.dev',
            'company': '@github',
            'location': 'San Francisco',
            'email': '',
            'createdAt': '2011-01-25T18:44:36Z',
            'updatedAt': '2024-06-01T10:00:00Z',
            'followers': {'totalCount': 1000},
            'following': {'totalCount': 9},
            'repositories': {'totalCount': 8},
            'socialAccounts': {'nodes': [{'provider': 'TWITTER', 'url': 'https://twitter.com/github'}]}
        }})

        user = get_user(graphql, 'octocat')

        assert graphql.call_args.args[1] == {'login': 'octocat'}
        assert user.login == 'octocat'
        assert user.email is None
        assert user.created_at == datetime(2011, 1, 25, 18, 44, 36, tzinfo=timezone.utc)
        assert user.follower_count == 1000
        assert user.following_count == 9
        assert user.public_repo_count == 8
        assert user.social_accounts[0].provider == 'TWITTER'
        assert user.to_dict()['social_accounts'] == [
            {'provider': 'TWITTER', 'url': 'https://twitter.com/github'}
        ]

    def test_missing_optional_fields(self):
        """Test that null fields default to None, 0 and []."""
        graphql = Mock(return_value={'user': {
            'login': 'testuser',
            'name': None,
            'createdAt': '2020-01-01T00:00:00Z',
            'updatedAt': None,
            'followers': None,
            'following': None,
            'repositories': None,
            'socialAccounts': None
        }})

        user = get_user(graphql, 'testuser')

        assert user.name is None
        assert user.updated_at is None
        assert user.follower_count == 0
        assert user.following_count == 0
        assert user.public_repo_count == 0
        assert user.social_accounts == []

    def test_user_not_found(self):
        """Test that a missing user yields None."""
        assert get_user(Mock(return_value={'user': None}), 'nobody') is None

    def test_wraps_graphql_errors(self):
        graphql = Mock(side_effect=RuntimeError('API rate limit exceeded'))

        with pytest.raises(FetchError, match='Failed to fetch user: API rate limit exceeded'):
            get_user(graphql, 'octocat')

    def test_validates_required_parameters(self):
        with pytest.raises(MissingParametersError, match='login'):
            get_user(Mock(), '')


class TestGetOrganization:
    """Test cases for get_organization."""

    def test_get_organization(self):
        """Test fetching an organization profile."""
        graphql = Mock(return_value={'organization': {
            'name': 'Boulder JS',
            'login': 'boulder-js',
            'description': 'JavaScript meetup',
            'websiteUrl': 'https://boulderjs.org',
            'avatarUrl': 'https://avatars.githubusercontent.com/u/42',
            'email': None,
            'location': 'Boulder, CO',
            'createdAt': '2019-05-01T00:00:00Z',
            'updatedAt': None,
            'membersWithRole': {'totalCount': 12},
            'repositories': {'totalCount': 5}
        }})

        org = get_organization(graphql, 'boulder-js')

        assert graphql.call_args.args[1] == {'organization': 'boulder-js'}
        assert org.name == 'Boulder JS'
        assert org.website_url == 'https://boulderjs.org'
        assert org.member_count == 12
        assert org.public_repo_count == 5
        assert org.updated_at is None
        assert org.to_dict()['created_at'] == '2019-05-01T00:00:00+00:00'

    def test_missing_counts(self):
        graphql = Mock(return_value={'organization': {
            'login': 'tiny',
            'membersWithRole': None,
            'repositories': None
        }})

        org = get_organization(graphql, 'tiny')

        assert org.name is None
        assert org.member_count == 0
        assert org.public_repo_count == 0

    def test_organization_not_found(self):
        """Test that a missing organization yields None."""
        assert get_organization(Mock(return_value={'organization': None}), 'nobody') is None

    def test_wraps_graphql_errors(self):
        graphql = Mock(side_effect=RuntimeError('Bad credentials'))

        with pytest.raises(FetchError, match='Failed to fetch organization: Bad credentials'):
            get_organization(graphql, 'boulder-js')

    def test_validates_required_parameters(self):
        with pytest.raises(MissingParametersError, match='graphql, org'):
            get_organization(None, None)
