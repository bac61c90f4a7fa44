"""Unit tests for the locations accessor."""
import json
from unittest.mock import Mock

import pytest

from accessors.errors import (
    FetchError,
    InvalidJSONError,
    InvalidLocationsError,
    MissingParametersError,
    RepositoryFileNotFoundError,
)
from accessors.locations import get_locations


def locations_graphql(content):
    """Mock GraphQL callable serving content as the locations file."""
    text = content if isinstance(content, str) else json.dumps(content)
    return Mock(return_value={
        'repository': {
            'object': {'text': text, 'byteSize': len(text), 'isBinary': False}
        }
    })


class TestGetLocations:
    """Test cases for get_locations."""

    def test_fetch_and_validate(self):
        """Test fetching a valid locations file."""
        graphql = locations_graphql([
            {'id': 'venue-1', 'name': 'Tech Hub', 'capacity': 100}
        ])

        result = get_locations(graphql, 'org', 'repo')

        assert result.errors is None
        assert result.locations[0].id == 'venue-1'
        assert result.locations[0].capacity == 100
        assert graphql.call_args.args[1]['expression'] == 'HEAD:locations.json'

    def test_partial_result(self):
        """Test that invalid entries are reported, not raised."""
        graphql = locations_graphql([
            {'id': 'v1', 'name': 'Hall'},
            {'name': 'No Id'}
        ])

        result = get_locations(graphql, 'org', 'repo')

        assert len(result.locations) == 1
        assert result.errors[0].index == 1
        assert result.errors[0].id == 'unknown'

    def test_custom_file_name_and_branch(self):
        """Test that file name and branch end up in the expression."""
        graphql = locations_graphql([{'id': 'v1', 'name': 'Hall'}])

        get_locations(
            graphql, 'org', 'repo',
            file_name='custom-locations.json', branch='develop'
        )

        assert graphql.call_args.args[1]['expression'] == 'develop:custom-locations.json'

    def test_rejects_non_array(self):
        """Test that an object instead of an array is rejected."""
        graphql = locations_graphql({'venue1': {'id': 'venue-1', 'name': 'Venue'}})

        with pytest.raises(InvalidLocationsError, match='must contain an array'):
            get_locations(graphql, 'org', 'repo')

    def test_file_errors_propagate(self):
        """Test that file errors are not wrapped."""
        with pytest.raises(RepositoryFileNotFoundError):
            get_locations(Mock(return_value={'repository': {'object': None}}), 'org', 'repo')

        with pytest.raises(InvalidJSONError, match='locations.json'):
            get_locations(locations_graphql('[{"id": '), 'org', 'repo')

    def test_wraps_graphql_errors(self):
        """Test that transport errors are reported as file fetch failures."""
        graphql = Mock(side_effect=RuntimeError('timeout'))

        with pytest.raises(FetchError, match='Failed to fetch locations: Failed to fetch file: timeout'):
            get_locations(graphql, 'org', 'repo')

    def test_validates_required_parameters(self):
        """Test that graphql, org and repo are required."""
        with pytest.raises(MissingParametersError, match='graphql'):
            get_locations(None, 'org', 'repo')
        with pytest.raises(MissingParametersError, match='org'):
            get_locations(Mock(), None, 'repo')
        with pytest.raises(MissingParametersError, match='repo'):
            get_locations(Mock(), 'org', None)
