# -*- encoding: utf-8 -*-
"""
Field Registry.

Freezes a set of QField declarations into the immutable lookup a
processor works from. All validation happens here, once; a registry that
was constructed successfully is always usable.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from mongoqs.exceptions import FieldConfigError, FieldConflict
from mongoqs.fields.field import QField, FieldType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservedParams:
    """
    Names of the parameters that control paging, sorting and projection.

    No field key or alias may use one of these names.
    """
    limit: str = "lmt"
    skip: str = "skp"
    sort: str = "srt"
    projection: str = "prj"

    @property
    def names(self) -> frozenset[str]:
        return frozenset((self.limit, self.skip, self.sort, self.projection))


def validate_fields(
    fields: Iterable[QField],
    reserved: ReservedParams,
) -> list[FieldConflict]:
    """
    Check field declarations against each other and the reserved names.

    Args:
        fields: Declarations in registration order
        reserved: Reserved parameter names in effect

    Returns:
        Every conflict found, empty when the declarations are valid
    """
    conflicts = []
    reserved_names = reserved.names
    owners: dict[str, str] = {}  # key/alias -> key of the field that claimed it

    for f in fields:
        if not f.key:
            conflicts.append(FieldConflict(
                field_key=f.key,
                reason="empty_key",
                message="Field key cannot be an empty string",
            ))
        elif f.key in reserved_names:
            conflicts.append(FieldConflict(
                field_key=f.key,
                reason="reserved_key",
                message=f"Field {f.key!r} is using a reserved name ({', '.join(sorted(reserved_names))})",
                name=f.key,
            ))

        for alias in f.aliases:
            if not alias:
                conflicts.append(FieldConflict(
                    field_key=f.key,
                    reason="empty_alias",
                    message=f"Field {f.key!r} alias cannot be an empty string",
                ))
            elif alias in reserved_names:
                conflicts.append(FieldConflict(
                    field_key=f.key,
                    reason="reserved_alias",
                    message=f"Field {f.key!r} alias {alias!r} is using a reserved name",
                    name=alias,
                ))

        for name in f.names:
            if not name:
                continue
            if name in owners:
                conflicts.append(FieldConflict(
                    field_key=f.key,
                    reason="duplicate_name",
                    message=f"Field {f.key!r} reuses {name!r}, already declared by field {owners[name]!r}",
                    name=name,
                ))
            else:
                owners[name] = f.key

        if f.type is FieldType.META and (f.is_projectable or f.is_sortable):
            conflicts.append(FieldConflict(
                field_key=f.key,
                reason="meta_not_queryable",
                message=f"Meta field {f.key!r} cannot be projectable or sortable",
            ))

        if f.time_layouts and f.type is not FieldType.TIMESTAMP:
            conflicts.append(FieldConflict(
                field_key=f.key,
                reason="time_layouts_on_non_timestamp",
                message=f"Field {f.key!r} must be a timestamp field to use datetime layouts",
            ))

    return conflicts


class FieldRegistry:
    """
    Validated, immutable collection of query fields.

    Safe to share between threads; nothing about it changes after
    construction.

    Example:
        >>> registry = FieldRegistry([
        ...     QField("count").parse_as_int().sortable(),
        ...     QField("objectId").parse_as_object_id().use_aliases("id"),
        ... ])
        >>> registry.get("id").key
        'objectId'
    """

    def __init__(
        self,
        fields: Iterable[QField],
        reserved: Optional[ReservedParams] = None,
    ):
        """
        Validate and freeze field declarations.

        Args:
            fields: Field declarations, processed in this order
            reserved: Reserved parameter names (defaults to lmt/skp/srt/prj)

        Raises:
            FieldConfigError: If any declaration is invalid
        """
        self._fields: tuple[QField, ...] = tuple(fields)
        self._reserved = reserved or ReservedParams()

        conflicts = validate_fields(self._fields, self._reserved)
        if conflicts:
            raise FieldConfigError.from_conflicts(conflicts)

        self._by_name: dict[str, QField] = {}
        for f in self._fields:
            for name in f.names:
                self._by_name[name] = f

        logger.info("Field registry frozen with %d fields", len(self._fields))

    @property
    def reserved(self) -> ReservedParams:
        return self._reserved

    @property
    def fields(self) -> tuple[QField, ...]:
        return self._fields

    def get(self, name: str) -> Optional[QField]:
        """Find a field by key or alias."""
        return self._by_name.get(name)

    def __iter__(self) -> Iterator[QField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
