"""Entity identifiers and their textual form."""

EntityId = int

NULL_ENTITY_ID: EntityId = 0xFFFFFFFF
"""The identifier that refers to no entity (the largest 32-bit unsigned value)."""


def entity_id_to_string(entity_id: EntityId) -> str:
    """Return ``"NULL"`` for the null id, otherwise the decimal number."""
    return "NULL" if entity_id == NULL_ENTITY_ID else str(entity_id)