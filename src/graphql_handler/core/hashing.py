import hashlib


def hash_document(query: str) -> str:
    """Return the persisted-query key of a document: hex SHA-256 of its UTF-8 text."""
    return hashlib.sha256(query.encode("utf-8")).hexdigest()
