"""
Schemas Package

Fragment validation: required metadata checks plus optional JSON Schema
validation against fragment.schema.json.
"""

from .validator import (
    validate_fragment,
    ValidationError,
    MissingMetadataError,
    FragmentSchemaError,
    REQUIRED_METADATA,
)

__all__ = [
    "validate_fragment",
    "ValidationError",
    "MissingMetadataError",
    "FragmentSchemaError",
    "REQUIRED_METADATA",
]
