"""Turn validated record variants into the exact rows that get persisted."""

from typing import Any

from pydantic import BaseModel

from designops.schemas.artwork_log import ARTWORK_LOG_CATEGORY_FIELDS
from designops.schemas.job import JOB_CATEGORY_FIELDS
from designops.utils.date_parser import to_utc

DATE_FIELDS = ("start_date", "end_date")


def _shape(record: BaseModel, category_fields: tuple[str, ...]) -> dict[str, Any]:
    # Every category field starts as None so stale values from a previous
    # category are overwritten on update.
    row: dict[str, Any] = {field: None for field in category_fields}
    row.update(record.model_dump())
    for field in DATE_FIELDS:
        if row.get(field) is not None:
            row[field] = to_utc(row[field])
    return row


def shape_job(record) -> dict[str, Any]:
    """Flat ``jobs`` row for a job variant, with inapplicable fields nulled."""
    return _shape(record, JOB_CATEGORY_FIELDS)


def shape_artwork_log(record) -> dict[str, Any]:
    """Flat ``artwork_logs`` row for an artwork log variant.

    ``revision_count`` defaults to 0 when the form left it empty.
    """
    row = _shape(record, ARTWORK_LOG_CATEGORY_FIELDS)
    row["revision_count"] = max(int(row.get("revision_count") or 0), 0)
    return row
