"""
Identifier handling shared by the save use cases.
"""

from typing import Optional

from app.domain.catalog.entities import new_id
from app.domain.catalog.errors import MissingIdentifierError


def resolve_id(entity: str, record_id: Optional[str], is_update: bool) -> str:
    """Return the id to save under, generating one for creates.

    Raises:
        MissingIdentifierError: If an update has no id.
    """
    if record_id:
        return record_id
    if is_update:
        raise MissingIdentifierError(entity)
    return new_id()
