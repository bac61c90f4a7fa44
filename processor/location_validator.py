"""Validator for the venue list stored in an organization repository."""
import logging
from typing import Any, List, Mapping

from accessors.errors import InvalidLocationsError
from processor.models import (
    Coordinates,
    Location,
    LocationsResult,
    LocationValidationError,
)

logger = logging.getLogger(__name__)

KNOWN_FIELDS = (
    'id',
    'name',
    'address',
    'coordinates',
    'url',
    'what3words',
    'description',
    'capacity',
    'accessibility',
)


class LocationValidator:
    """Validator splitting a locations file into valid entries and errors."""

    def validate(self, data: Any) -> LocationsResult:
        """
        Validate and normalize every entry of a locations file.

        Invalid entries never abort the call; they are reported in
        LocationsResult.errors and left out of LocationsResult.locations.

        Args:
            data: Parsed JSON content of the locations file

        Returns:
            LocationsResult with valid locations and per-entry errors

        Raises:
            InvalidLocationsError: If data is not a list
        """
        if not isinstance(data, list):
            raise InvalidLocationsError(
                'Locations file must contain an array of locations'
            )

        locations = []
        validation_errors = []

        for index, entry in enumerate(data):
            raw = entry if isinstance(entry, Mapping) else {}
            errors = self.validate_location(raw)

            if errors:
                validation_errors.append(
                    LocationValidationError(
                        index=index,
                        id=str(raw['id']) if raw.get('id') else 'unknown',
                        errors=errors
                    )
                )
            else:
                locations.append(self._normalize_location(raw))

        if validation_errors:
            logger.warning(
                f"Skipped {len(validation_errors)} invalid locations out of "
                f"{len(data)} total locations"
            )

        return LocationsResult(
            locations=locations,
            errors=validation_errors or None
        )

    def validate_location(self, location: Mapping[str, Any]) -> List[str]:
        """
        Collect schema violations for a single location.

        Args:
            location: Raw location mapping

        Returns:
            List of error messages, empty if the location is valid
        """
        errors = []

        if not _is_string(location.get('id')):
            errors.append('Location must have a string id')

        if not _is_string(location.get('name')):
            errors.append('Location must have a string name')

        address = location.get('address')
        if address is not None and not isinstance(address, str):
            errors.append('Location address must be a string')

        coordinates = location.get('coordinates')
        if coordinates is not None:
            if not isinstance(coordinates, Mapping):
                errors.append('Location coordinates must be an object')
            else:
                if not _is_number(coordinates.get('lat')):
                    errors.append('Location coordinates.lat must be a number')
                if not _is_number(coordinates.get('lng')):
                    errors.append('Location coordinates.lng must be a number')

        return errors

    def _normalize_location(self, location: Mapping[str, Any]) -> Location:
        coordinates = location.get('coordinates')

        return Location(
            id=location['id'],
            name=location['name'],
            address=location.get('address'),
            coordinates=(
                Coordinates(lat=coordinates['lat'], lng=coordinates['lng'])
                if coordinates is not None else None
            ),
            url=location.get('url'),
            what3words=location.get('what3words'),
            description=location.get('description'),
            capacity=location.get('capacity'),
            accessibility=location.get('accessibility'),
            extra={
                key: value for key, value in location.items()
                if key not in KNOWN_FIELDS
            }
        )


def _is_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)
