"""Unit tests for the discussions accessor."""
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from accessors.discussions import list_discussions
from accessors.errors import FetchError, MissingParametersError


def discussions_response(edges):
    return {'repository': {'discussions': {'edges': edges}}}


class TestListDiscussions:
    """Test cases for list_discussions."""

    def test_process_discussions(self):
        """Test a complete discussion payload."""
        graphql = Mock(return_value=discussions_response([{
            'node': {
                'id': 'D_123',
                'number': 1,
                'title': 'Welcome',
                'url': 'https://github.com/org/repo/discussions/1',
                'body': 'Hello everyone',
                'createdAt': '2024-01-01T00:00:00Z',
                'updatedAt': '2024-01-02T12:00:00Z',
                'author': {
                    'login': 'octocat',
                    'name': 'The Octocat',
                    'avatarUrl': 'https://github.com/octocat.png',
                    'url': 'https://github.com/octocat'
                },
                'category': {
                    'id': 'CAT_1',
                    'name': 'Announcements',
                    'emoji': ':mega:',
                    'description': 'Updates from maintainers'
                },
                'reactions': {'nodes': [{'content': 'HEART'}, {'content': 'ROCKET'}]},
                'comments': {'totalCount': 4}
            }
        }]))

        discussions = list_discussions(graphql, 'org', 'repo')

        assert len(discussions) == 1
        discussion = discussions[0]
        assert discussion.id == 'D_123'
        assert discussion.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert discussion.author.login == 'octocat'
        assert discussion.author.avatar_url == 'https://github.com/octocat.png'
        assert discussion.category.name == 'Announcements'
        assert discussion.reactions == ['HEART', 'ROCKET']
        assert discussion.comment_count == 4
        assert discussion.to_dict()['created_at'] == '2024-01-01T00:00:00+00:00'

    def test_missing_optional_fields(self):
        """Test that null fields default to None, [] and 0."""
        graphql = Mock(return_value=discussions_response([{
            'node': {
                'id': 'D_123',
                'number': 1,
                'title': 'Test Discussion',
                'url': 'https://github.com/org/repo/discussions/1',
                'body': None,
                'createdAt': '2024-01-01T00:00:00Z',
                'updatedAt': None,
                'author': None,
                'category': None,
                'reactions': None,
                'comments': None
            }
        }]))

        discussion = list_discussions(graphql, 'org', 'repo')[0]

        assert discussion.body is None
        assert discussion.updated_at is None
        assert discussion.author is None
        assert discussion.category is None
        assert discussion.reactions == []
        assert discussion.comment_count == 0

    def test_empty_strings_become_none(self):
        """Test that empty body and category description are normalized to None."""
        graphql = Mock(return_value=discussions_response([{
            'node': {
                'id': 'D_124',
                'number': 2,
                'title': 'Empty fields',
                'url': 'https://github.com/org/repo/discussions/2',
                'body': '',
                'author': {'login': 'octocat', 'name': '', 'avatarUrl': '', 'url': ''},
                'category': {'id': 'C_1', 'name': 'General', 'emoji': '', 'description': ''}
            }
        }]))

        discussion = list_discussions(graphql, 'org', 'repo')[0]

        assert discussion.body is None
        assert discussion.author.login == 'octocat'
        assert discussion.author.name is None
        assert discussion.category.name == 'General'
        assert discussion.category.emoji is None
        assert discussion.category.description is None

    def test_empty_results(self):
        """Test that no discussions yields an empty list."""
        graphql = Mock(return_value=discussions_response([]))

        assert list_discussions(graphql, 'org', 'repo') == []

    def test_options(self):
        """Test that page size and category are passed through."""
        graphql = Mock(return_value=discussions_response([]))

        list_discussions(graphql, 'org', 'repo', first=20, category_id='CAT_123')

        variables = graphql.call_args.args[1]
        assert variables['first'] == 20
        assert variables['categoryId'] == 'CAT_123'

    def test_default_options(self):
        graphql = Mock(return_value=discussions_response([]))

        list_discussions(graphql, 'org', 'repo')

        variables = graphql.call_args.args[1]
        assert variables['first'] == 10
        assert variables['categoryId'] is None

    def test_wraps_graphql_errors(self):
        """Test that transport errors are wrapped."""
        graphql = Mock(side_effect=RuntimeError('API rate limit exceeded'))

        with pytest.raises(FetchError, match='Failed to fetch discussions: API rate limit exceeded'):
            list_discussions(graphql, 'org', 'repo')

    def test_validates_required_parameters(self):
        with pytest.raises(MissingParametersError):
            list_discussions(None, 'org', 'repo')
        with pytest.raises(MissingParametersError):
            list_discussions(Mock(), 'org', None)
