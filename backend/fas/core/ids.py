"""Parsing of client-supplied identifiers."""

from typing import Optional, Type
from uuid import UUID

from fas.core.errors import DomainError


def parse_id(value: Optional[str], error: Type[DomainError]) -> UUID:
    """
    Parse a UUID string, raising the entity-specific error when malformed.

    Args:
        value: Identifier as received from the client
        error: DomainError subclass to raise, e.g. InvalidApplicantIDError

    Returns:
        The parsed UUID
    """
    if value is None:
        raise error()
    try:
        return UUID(str(value).strip())
    except ValueError:
        raise error() from None
