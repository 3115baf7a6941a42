"""Pydantic data models for application records."""

import json
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_STATUS = "Applied"

# Column order of the backing table. Field names line up with HEADERS.
FIELDS = [
    "candidate",
    "company",
    "job_title",
    "who_applied",
    "jd_link",
    "job_description",
    "date_applied",
    "resume_summary",
    "status",
]
HEADERS = [
    "Candidate",
    "Company",
    "Job Title",
    "Who Applied",
    "JD Link",
    "Job Description",
    "Date Applied",
    "Resume Summary",
    "Status",
]

CANDIDATE_COL = FIELDS.index("candidate")
COMPANY_COL = FIELDS.index("company")
JOB_TITLE_COL = FIELDS.index("job_title")
DATE_APPLIED_COL = FIELDS.index("date_applied")
STATUS_COL = FIELDS.index("status")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _cell_text(cls, value):
        """Store any JSON value as text. False reads as empty, like a blank cell."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else ""
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value)


class ApplicationRecord(_CamelModel):
    """One job application, as stored in one table row."""
    candidate: str
    company: str = ""
    job_title: str = ""
    who_applied: str = ""
    jd_link: str = ""
    job_description: str = ""
    date_applied: str = ""
    resume_summary: str = ""
    status: str = DEFAULT_STATUS

    @classmethod
    def from_row(cls, row: list[str]) -> "ApplicationRecord":
        """Project a data row. An empty status reads back as the default."""
        values = {name: "" if cell is None else cell for name, cell in zip(FIELDS, row)}
        values["status"] = values.get("status") or DEFAULT_STATUS
        return cls(**values)


class ApplicationInput(_CamelModel):
    """A possibly partial application submitted for saving."""
    candidate: str | None = None
    company: str | None = None
    job_title: str | None = None
    who_applied: str | None = None
    jd_link: str | None = None
    job_description: str | None = None
    date_applied: str | None = None
    resume_summary: str | None = None
    status: str | None = None

    def to_row(self, today: date) -> list[str]:
        """Build a full table row, filling in defaults for missing fields."""
        row = [getattr(self, name) or "" for name in FIELDS]
        row[DATE_APPLIED_COL] = self.date_applied or today.isoformat()
        row[STATUS_COL] = self.status or DEFAULT_STATUS
        return row


class StatusUpdate(_CamelModel):
    """Composite key plus the new status for an in-place update."""
    candidate: str
    company: str
    job_title: str
    status: str


class SaveResult(BaseModel):
    success: bool = True
    message: str = "Application saved successfully"


class UpdateResult(BaseModel):
    success: bool
    error: str | None = None
