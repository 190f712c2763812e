"""Category-conditional validation for jobs and artwork logs.

Each category variant in the schemas carries exactly the fields that apply
to it. The rule table is derived from those variants: a category field the
variant declares without a default is required, one it declares with a
default is allowed, and one it does not declare is forbidden. Errors are
collected per field so the form can flag each control.
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from designops.errors import ValidationError
from designops.models.enums import Category
from designops.schemas.artwork_log import (
    ARTWORK_LOG_CATEGORY_FIELDS,
    ARTWORK_LOG_VARIANTS,
    ArtworkLogForm,
)
from designops.schemas.job import JOB_CATEGORY_FIELDS, JOB_VARIANTS, JobForm
from designops.utils.date_parser import to_utc

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "job_id": "Job ID",
    "requester_department": "Requester Department",
    "pic_requester": "PIC Requester",
    "project_type": "Project Type",
    "pic_project": "PIC Project",
    "lead_grade": "Lead Grade",
    "client_name": "Client Name",
    "custom_brief": "Custom Brief",
    "link_onedrive": "OneDrive Link",
}


@dataclass(frozen=True)
class FieldRules:
    """Which category fields a category requires, allows and forbids."""

    required: frozenset[str]
    allowed: frozenset[str]
    forbidden: frozenset[str]


def derive_rules(variant: type[BaseModel], category_fields: tuple[str, ...]) -> FieldRules:
    """Build the rule set for one category from its variant model."""
    declared = {name: info for name, info in variant.model_fields.items() if name in category_fields}
    required = frozenset(name for name, info in declared.items() if info.is_required())
    allowed = frozenset(declared) - required
    forbidden = frozenset(category_fields) - frozenset(declared)
    return FieldRules(required=required, allowed=allowed, forbidden=forbidden)


JOB_RULES: dict[Category, FieldRules] = {
    category: derive_rules(variant, JOB_CATEGORY_FIELDS)
    for category, variant in JOB_VARIANTS.items()
}

ARTWORK_LOG_RULES: dict[Category, FieldRules] = {
    category: derive_rules(variant, ARTWORK_LOG_CATEGORY_FIELDS)
    for category, variant in ARTWORK_LOG_VARIANTS.items()
}


def check_category_fields(values: dict[str, Any], category: Category, rules: FieldRules) -> dict[str, str]:
    """Return ``{field: message}`` for missing required and present forbidden fields."""
    errors: dict[str, str] = {}
    for field in sorted(rules.required):
        if values.get(field) is None:
            errors[field] = f"{FIELD_LABELS[field]} is required for '{category.value}' category."
    for field in sorted(rules.forbidden):
        if values.get(field) is not None:
            errors[field] = f"{FIELD_LABELS[field]} must be empty for '{category.value}' category."
    return errors


def check_date_range(values: dict[str, Any]) -> dict[str, str]:
    start, end = values.get("start_date"), values.get("end_date")
    if start is not None and end is not None and to_utc(end) < to_utc(start):
        return {"end_date": "End Date cannot be before Start Date."}
    return {}


def _build_variant(variant: type[BaseModel], values: dict[str, Any]) -> BaseModel:
    payload = {name: value for name, value in values.items() if name in variant.model_fields}
    return variant(**payload)


def validate_job(form: JobForm, job_id: str):
    """Validate a job form and return its category variant.

    Args:
        form: Parsed job form
        job_id: Key of the job being created or replaced

    Returns:
        ProjectJob | LeadJob | InternalJob | OtherJob

    Raises:
        ValidationError: With one entry per offending field
    """
    values = form.model_dump()
    values["job_id"] = job_id

    errors = check_category_fields(values, form.category, JOB_RULES[form.category])
    errors.update(check_date_range(values))
    if errors:
        logger.info(f"Rejected job {job_id} ({form.category.value}): {sorted(errors)}")
        raise ValidationError(errors)

    return _build_variant(JOB_VARIANTS[form.category], values)


def validate_artwork_log(form: ArtworkLogForm):
    """Validate an artwork log form and return its category variant.

    Whether ``job_id`` points at an existing job is checked by the service,
    which has database access.

    Raises:
        ValidationError: With one entry per offending field
    """
    values = form.model_dump()

    errors = check_category_fields(values, form.category, ARTWORK_LOG_RULES[form.category])
    errors.update(check_date_range(values))
    if errors:
        logger.info(f"Rejected artwork log '{form.artwork_title}' ({form.category.value}): {sorted(errors)}")
        raise ValidationError(errors)

    return _build_variant(ARTWORK_LOG_VARIANTS[form.category], values)
