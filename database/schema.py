"""
Document schema definitions.
Top-level collections of the store document and their defaults.
"""

COLLECTIONS = ('users', 'reservations', 'food_orders')


def empty_document() -> dict:
    """Return a document with every collection present and empty."""
    return {name: [] for name in COLLECTIONS}


def normalize_document(raw) -> dict:
    """
    Ensure every collection exists in a loaded document.

    Unknown top-level keys are kept so a save never drops data.

    Args:
        raw: Parsed JSON (None for an empty file)

    Returns:
        dict with users, reservations and food_orders lists

    Raises:
        ValueError: If the document is not a JSON object or a collection
            is not a list
    """
    if raw is None:
        return empty_document()
    if not isinstance(raw, dict):
        raise ValueError('El documento de datos debe ser un objeto JSON')

    document = empty_document()
    document.update(raw)
    for name in COLLECTIONS:
        if document[name] is None:
            document[name] = []
        if not isinstance(document[name], list):
            raise ValueError(f'La colección {name} debe ser una lista')
    return document
