"""
MongoQS - URL query strings to MongoDB queries.

Exposes a small declarative grammar to untrusted clients and translates
it into filter, projection, sort, limit and skip values for pymongo.

Query value grammar:
    <op>:<v1>,<v2>,...[,<op>:<v1>,...]    (no operator means eq)

    eq ne gt gte lt lte    comparisons
    in nin all             list membership
    like slike elike       contains / starts with / ends with (strings)

Reserved parameters (renameable via ReservedParams):
    lmt  limit          skp  skip
    srt  sort, e.g. "-count,+name"
    prj  projection, e.g. "-secret"

Usage:
    from mongoqs import QField, new_processor

    process = new_processor(
        QField("name"),
        QField("count").parse_as_int().sortable(),
    )
    result = process({"count": "gt:1,lt:10", "srt": "-count"})
    # result.filter == {"count": {"$gt": 1, "$lt": 10}}
    # result.sort == {"count": -1}
"""

from mongoqs.exceptions import MongoQSError, FieldConfigError, FieldConflict
from mongoqs.fields import QField, FieldType, FieldRegistry, ReservedParams
from mongoqs.parser import Operator, tokenize
from mongoqs.translator import QResult, QProcessor, new_processor

__all__ = [
    # Main API
    "QField",
    "FieldType",
    "FieldRegistry",
    "ReservedParams",
    "QProcessor",
    "QResult",
    "new_processor",
    # Grammar
    "Operator",
    "tokenize",
    # Errors
    "MongoQSError",
    "FieldConfigError",
    "FieldConflict",
]

__version__ = "0.1.0"
