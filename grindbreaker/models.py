"""Data models for the profile and candidacies, plus their JSON wire form."""
from __future__ import annotations

import uuid
from enum import Enum, IntEnum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PayloadError(ValueError):
    """The RPC argument array does not have the expected shape."""


class CandidacyStatus(IntEnum):
    ToApply = 0
    Applied = 1
    PreInterview = 2
    PostInterview = 3
    Offered = 4
    Rejected = 5
    Ghosted = 6
    Withdrawn = 7

    @classmethod
    def parse(cls, value: Any) -> CandidacyStatus | None:
        """Member for a symbolic name (case-sensitive) or an in-range ordinal."""
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int):
            return cls(value) if value in cls._value2member_map_ else None
        text = str(value).strip()
        if text in cls.__members__:
            return cls.__members__[text]
        if text.isascii() and text.isdigit():
            return cls.parse(int(text))
        return None


class ExperienceType(str, Enum):
    Project = "Project"
    VolunteerWork = "VolunteerWork"
    Other = "Other"


def _empty_if_none(value: Any) -> Any:
    return [] if value is None else value


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def _status(value: Any) -> Any:
    if value is None:
        return CandidacyStatus.ToApply
    parsed = CandidacyStatus.parse(value)
    if parsed is None:
        raise ValueError(f"Unknown candidacy status: {value!r}")
    return parsed


def _experience_type(value: Any) -> Any:
    # Ordinals are accepted on read; names are written.
    if isinstance(value, int) and not isinstance(value, bool):
        members = list(ExperienceType)
        if 0 <= value < len(members):
            return members[value]
    return value


def _new_id() -> str:
    return str(uuid.uuid4())


Text = Annotated[str, BeforeValidator(_blank_if_none)]
StrList = Annotated[list[str], BeforeValidator(_empty_if_none)]
Status = Annotated[CandidacyStatus, BeforeValidator(_status)]
Experience = Annotated[Optional[ExperienceType], BeforeValidator(_experience_type)]


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ── Profile ──────────────────────────────────────────────────────────────


class Certification(WireModel):
    name: Optional[str] = None
    earned_date: Optional[int] = None
    description: Optional[str] = None
    link: Optional[str] = None


class JobExperience(WireModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    accomplishments: StrList = Field(default_factory=list)


class OtherExperience(WireModel):
    type: Experience = None
    title: Optional[str] = None
    project_or_company_name: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    accomplishments: StrList = Field(default_factory=list)


class Education(WireModel):
    awarded_by: Optional[str] = None
    credential_earned: Optional[str] = None
    end_date: Optional[int] = None


class Profile(WireModel):
    """The single user's résumé data. Saved whole, never merged."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    skills: StrList = Field(default_factory=list)
    certifications: Annotated[list[Certification], BeforeValidator(_empty_if_none)] = Field(default_factory=list)
    job_experiences: Annotated[list[JobExperience], BeforeValidator(_empty_if_none)] = Field(default_factory=list)
    other_experiences: Annotated[list[OtherExperience], BeforeValidator(_empty_if_none)] = Field(default_factory=list)
    education: Annotated[list[Education], BeforeValidator(_empty_if_none)] = Field(default_factory=list)


# ── Candidacy ────────────────────────────────────────────────────────────


class CandidacyStep(WireModel):
    type: Text = ""
    date: int = 0  # Unix seconds
    notes: Optional[str] = None


class Candidacy(WireModel):
    """A tracked application.

    ``id`` is generated only when the key is absent. A stored value, even a
    blank one, is kept as is.
    """

    id: Optional[str] = Field(default_factory=_new_id)
    company: Text = ""
    title: Text = ""
    job_link: Optional[str] = None
    job_description: Optional[str] = None
    date_applied: int = 0  # Unix seconds
    status: Status = CandidacyStatus.ToApply
    application_steps: Annotated[list[CandidacyStep], BeforeValidator(_empty_if_none)] = Field(default_factory=list)

    def assign_id_if_blank(self) -> None:
        if not self.id:
            self.id = _new_id()
