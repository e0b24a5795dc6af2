# -*- encoding: utf-8 -*-
"""
MongoQS Exceptions.

Field declaration problems are reported once, when the registry is built.
Processing a query never raises for anything a client sends.
"""

from dataclasses import dataclass
from typing import Optional


class MongoQSError(Exception):
    """Base exception for all MongoQS errors."""
    pass


@dataclass
class FieldConflict:
    """
    A single problem found while validating field declarations.

    Attributes:
        field_key: Key of the field that declared the offending name
        reason: Short machine-friendly code (e.g. "reserved_alias")
        message: Human-readable description
        name: The offending key or alias, if any
    """
    field_key: str
    reason: str
    message: str
    name: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "field_key": self.field_key,
            "reason": self.reason,
            "message": self.message,
            "name": self.name,
        }


class FieldConfigError(MongoQSError):
    """
    Raised when field declarations cannot form a usable registry.

    Every conflict found is collected before raising, so a single startup
    failure lists all of them.

    Usage:
        try:
            registry = FieldRegistry([QField("lmt")])
        except FieldConfigError as e:
            for c in e.conflicts:
                print(f"  - {c.field_key}: {c.message}")
    """

    def __init__(
        self,
        message: str,
        conflicts: Optional[list[FieldConflict]] = None,
    ):
        """
        Initialize a FieldConfigError.

        Args:
            message: Human-readable summary
            conflicts: Detailed list of declaration problems
        """
        super().__init__(message)
        self.conflicts = conflicts or []

    @classmethod
    def from_conflicts(cls, conflicts: list[FieldConflict]) -> "FieldConfigError":
        """Build an error whose summary reflects the number of conflicts."""
        if len(conflicts) == 1:
            summary = f"Invalid field configuration: {conflicts[0].message}"
        else:
            summary = f"Invalid field configuration ({len(conflicts)} problems found)"
        return cls(summary, conflicts=conflicts)

    def to_dict(self) -> dict:
        """Convert exception to dictionary representation."""
        return {
            "error": "FieldConfigError",
            "message": str(self),
            "conflicts": [c.to_dict() for c in self.conflicts],
        }
