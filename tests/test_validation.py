"""Tests for the category-conditional record validator."""

import pytest
from pydantic import TypeAdapter

from designops.errors import ValidationError
from designops.models import Category, LeadGrade
from designops.schemas.artwork_log import ArtworkLogForm, InternalArtworkLog, JobArtworkLog
from designops.schemas.job import (
    InternalJob,
    JobForm,
    JobRecord,
    LeadJob,
    OtherJob,
    ProjectJob,
)
from designops.services.validation import JOB_RULES, validate_artwork_log, validate_job


def job_form(category: str, **fields) -> JobForm:
    return JobForm(category=category, job_title="Spring campaign", start_date="2024-01-01", **fields)


def artwork_form(category: str, **fields) -> ArtworkLogForm:
    return ArtworkLogForm(
        category=category,
        artwork_type="Banner",
        artwork_title="Hero banner",
        designer="Dewi",
        start_date="2024-01-01T10:00:00Z",
        **fields,
    )


class TestJobRules:
    def test_rule_table_matches_category_matrix(self):
        project = JOB_RULES[Category.PROJECT]
        assert project.required == {"project_type", "pic_project", "requester_department"}
        assert "lead_grade" in project.forbidden

        lead = JOB_RULES[Category.LEAD]
        assert lead.required == {"lead_grade", "pic_requester"}
        assert "requester_department" in lead.forbidden

        internal = JOB_RULES[Category.INTERNAL]
        assert internal.required == {"requester_department"}
        assert {"project_type", "pic_project", "lead_grade"} <= internal.forbidden

        assert JOB_RULES[Category.OTHER].required == frozenset()

    def test_project_job(self):
        record = validate_job(
            job_form("Project", project_type="Event", pic_project="Rina", requester_department="Finance"),
            "JOB-1",
        )
        assert isinstance(record, ProjectJob)
        assert record.job_id == "JOB-1"

    def test_project_missing_fields_reports_each_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job(job_form("Project"), "JOB-1")

        errors = exc_info.value.field_errors
        assert set(errors) == {"project_type", "pic_project", "requester_department"}
        assert errors["project_type"] == "Project Type is required for 'Project' category."

    def test_project_rejects_lead_grade(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job(
                job_form(
                    "Project",
                    project_type="Event",
                    pic_project="Rina",
                    requester_department="Finance",
                    lead_grade="A",
                ),
                "JOB-1",
            )
        assert set(exc_info.value.field_errors) == {"lead_grade"}

    def test_lead_job(self):
        record = validate_job(
            job_form("Lead", lead_grade="B", pic_requester="Sari", client_name="Acme"), "LEAD-1"
        )
        assert isinstance(record, LeadJob)
        assert record.lead_grade is LeadGrade.B

    def test_lead_rejects_requester_department(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job(
                job_form("Lead", lead_grade="B", pic_requester="Sari", requester_department="HR"),
                "LEAD-1",
            )
        assert "requester_department" in exc_info.value.field_errors

    def test_internal_requires_department_and_forbids_project_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job(job_form("Internal", project_type="Event", pic_project="Rina"), "INT-1")

        assert set(exc_info.value.field_errors) == {"requester_department", "project_type", "pic_project"}

    def test_internal_job(self):
        record = validate_job(job_form("Internal", requester_department="HR"), "INT-1")
        assert isinstance(record, InternalJob)

    def test_other_needs_nothing(self):
        assert isinstance(validate_job(job_form("Other"), "OTH-1"), OtherJob)

    def test_blank_strings_count_as_empty(self):
        record = validate_job(
            job_form("Internal", requester_department="HR", lead_grade="", project_type="  "),
            "INT-1",
        )
        assert isinstance(record, InternalJob)

    def test_end_before_start(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_job(job_form("Other", end_date="2023-12-31"), "OTH-1")
        assert set(exc_info.value.field_errors) == {"end_date"}

    def test_variants_form_a_tagged_union(self):
        adapter = TypeAdapter(JobRecord)
        record = adapter.validate_python(
            {
                "category": Category.INTERNAL,
                "job_id": "INT-9",
                "job_title": "Town hall deck",
                "start_date": "2024-01-01T00:00:00Z",
                "requester_department": "HR",
            }
        )
        assert isinstance(record, InternalJob)


class TestArtworkLogRules:
    def test_internal_uses_department(self):
        record = validate_artwork_log(artwork_form("Internal", requester_department="HR"))
        assert isinstance(record, InternalArtworkLog)

    def test_internal_rejects_job_id(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_artwork_log(artwork_form("Internal", requester_department="HR", job_id="JOB-1"))
        assert set(exc_info.value.field_errors) == {"job_id"}

    def test_dept_requester_alias_is_accepted(self):
        record = validate_artwork_log(artwork_form("Internal", dept_requester="Legal"))
        assert record.requester_department == "Legal"

    @pytest.mark.parametrize("category", ["Project", "Lead", "Other"])
    def test_non_internal_requires_job_id(self, category):
        with pytest.raises(ValidationError) as exc_info:
            validate_artwork_log(artwork_form(category))
        assert set(exc_info.value.field_errors) == {"job_id"}

    def test_non_internal_rejects_department(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_artwork_log(artwork_form("Project", job_id="JOB-1", requester_department="HR"))
        assert set(exc_info.value.field_errors) == {"requester_department"}

    def test_job_log(self):
        record = validate_artwork_log(artwork_form("Lead", job_id="LEAD-1"))
        assert isinstance(record, JobArtworkLog)
        assert record.category is Category.LEAD
