"""
Conversion between MongoDB documents and JSON-safe values.
"""

from typing import Any, Dict, List, Optional
from bson import ObjectId


def object_id(value: str) -> ObjectId:
    """Parse a path identifier. Raises bson.errors.InvalidId when malformed."""
    return ObjectId(value)


def to_json(value: Any) -> Any:
    """Recursively replace ObjectIds with their hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json(v) for v in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return to_json(document)


def serialize_documents(documents) -> List[Dict[str, Any]]:
    return [serialize_document(doc) for doc in documents]
