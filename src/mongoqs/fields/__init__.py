"""MongoQS Fields module - Field declarations and the validated registry."""

from mongoqs.fields.field import QField, FieldType, DefaultSupplier
from mongoqs.fields.registry import FieldRegistry, ReservedParams, validate_fields

__all__ = [
    "QField",
    "FieldType",
    "DefaultSupplier",
    "FieldRegistry",
    "ReservedParams",
    "validate_fields",
]
