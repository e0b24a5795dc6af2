# -*- encoding: utf-8 -*-
"""
Field declarations.

A QField describes one query parameter: the document key it filters,
how its values are typed, which alternate parameter names it answers to,
and whether it may appear in sorts and projections.

QField is immutable. Every builder method returns a new QField, so
declarations can be chained and shared freely:

    price = QField("price").parse_as_float().sortable().projectable()
    owner = QField("ownerId").parse_as_object_id().use_aliases("owner")
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional


class FieldType(str, Enum):
    """Value types a query field can be parsed as."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    IDENTIFIER = "identifier"
    META = "meta"  # passed through to QResult.meta, never filtered


# Returns a value in query grammar syntax, e.g. "slike:Something"
DefaultSupplier = Callable[[], str]


@dataclass(frozen=True)
class QField:
    """
    Query field definition.

    Attributes:
        key: Document key and primary parameter name (dot notation allowed)
        type: How values are parsed
        aliases: Alternate parameter names, tried in order when key is absent
        is_projectable: Field may be named in the projection parameter
        is_sortable: Field may be named in the sort parameter
        default: Called when the field resolves no value
        time_layouts: strptime formats for timestamp fields (RFC 3339 if empty)
    """
    key: str
    type: FieldType = FieldType.STRING
    aliases: tuple[str, ...] = ()
    is_projectable: bool = False
    is_sortable: bool = False
    default: Optional[DefaultSupplier] = field(default=None, compare=False)
    time_layouts: tuple[str, ...] = ()

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_meta(self) -> bool:
        return self.type is FieldType.META

    @property
    def names(self) -> tuple[str, ...]:
        """Key followed by aliases, in lookup order."""
        return (self.key,) + self.aliases

    # --- Type selection ---

    def parse_as(self, field_type: FieldType) -> "QField":
        return replace(self, type=field_type)

    def parse_as_string(self) -> "QField":
        return self.parse_as(FieldType.STRING)

    def parse_as_int(self) -> "QField":
        return self.parse_as(FieldType.INTEGER)

    def parse_as_float(self) -> "QField":
        return self.parse_as(FieldType.FLOAT)

    def parse_as_bool(self) -> "QField":
        return self.parse_as(FieldType.BOOLEAN)

    def parse_as_datetime(self) -> "QField":
        return self.parse_as(FieldType.TIMESTAMP)

    def parse_as_object_id(self) -> "QField":
        return self.parse_as(FieldType.IDENTIFIER)

    def parse_as_meta(self) -> "QField":
        """Capture the raw value in QResult.meta instead of filtering on it."""
        return self.parse_as(FieldType.META)

    # --- Options ---

    def projectable(self) -> "QField":
        return replace(self, is_projectable=True)

    def sortable(self) -> "QField":
        return replace(self, is_sortable=True)

    def use_aliases(self, *aliases: str) -> "QField":
        """Append one or more aliases, keeping declaration order."""
        return replace(self, aliases=self.aliases + tuple(aliases))

    def use_default(self, supplier: DefaultSupplier) -> "QField":
        """
        Set the fallback used when no value is supplied.

        The supplier must return a value in query grammar syntax and is
        called once per query that needs it, possibly from several threads.
        """
        return replace(self, default=supplier)

    def use_time_layouts(self, *layouts: str) -> "QField":
        """Append strptime formats tried, in order, for timestamp values."""
        return replace(self, time_layouts=self.time_layouts + tuple(layouts))
