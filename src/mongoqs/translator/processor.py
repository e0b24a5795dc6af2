"""
MongoQS Processor - the entry point for translating query strings.

Usage:
    from mongoqs import QField, new_processor

    process = new_processor(
        QField("name"),
        QField("count").parse_as_int().sortable().projectable(),
        QField("objectId").parse_as_object_id().use_aliases("id"),
        QField("pageMarker").parse_as_meta(),
    )

    result = process(request.args)
    cursor = collection.find(**result.find_kwargs())
"""

from typing import Optional

from mongoqs.fields.field import QField
from mongoqs.fields.registry import FieldRegistry, ReservedParams
from mongoqs.translator.assembler import QueryParams, assemble
from mongoqs.translator.result import QResult


class QProcessor:
    """
    Reusable translator from query parameters to QResult.

    Holds only the immutable registry, so one instance can serve any
    number of concurrent requests.
    """

    def __init__(self, registry: FieldRegistry):
        self._registry = registry

    @property
    def registry(self) -> FieldRegistry:
        return self._registry

    def process(self, params: QueryParams) -> QResult:
        """
        Translate one set of query parameters.

        Never raises for client input: values that cannot be used are
        left out of the result.
        """
        return assemble(self._registry, params)

    __call__ = process


def new_processor(
    *fields: QField,
    reserved: Optional[ReservedParams] = None,
) -> QProcessor:
    """
    Validate field declarations and return a processor for them.

    Raises:
        FieldConfigError: If the declarations conflict
    """
    return QProcessor(FieldRegistry(fields, reserved=reserved))
