"""Presence checks for accessor arguments."""
from typing import Any, Mapping

from accessors.errors import MissingParametersError


def validate_params(params: Mapping[str, Any]) -> None:
    """
    Ensure every named argument is present and truthy.

    Args:
        params: Mapping of argument name to value, in signature order

    Raises:
        MissingParametersError: Listing every missing argument
    """
    missing = [name for name, value in params.items() if not value]
    if missing:
        raise MissingParametersError(missing)
