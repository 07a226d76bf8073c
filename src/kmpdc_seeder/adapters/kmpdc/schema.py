"""Pydantic models describing raw register rows as they cross adapter boundaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kmpdc_seeder.domain.types import RawRow


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


class RawRowPayload(BaseModel):
    """One register row keyed by the register's column names."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    full_name: str = Field(default="", alias="Fullname")
    registration_number: str = Field(default="", alias="Reg_No")
    address: str = Field(default="", alias="Address")
    qualifications: str = Field(default="", alias="Qualifications")
    discipline: str = Field(default="", alias="Discipline")
    speciality: str = Field(default="", alias="Speciality")
    sub_speciality: str = Field(default="", alias="Sub_Speciality")
    status: str = Field(default="", alias="Status")
    view_url: str = Field(default="", alias="View_URL")

    _blank_missing = field_validator(
        "full_name",
        "registration_number",
        "address",
        "qualifications",
        "discipline",
        "speciality",
        "sub_speciality",
        "status",
        "view_url",
        mode="before",
    )(_none_to_blank)

    def to_domain(self) -> RawRow:
        return RawRow(
            full_name=self.full_name,
            registration_number=self.registration_number,
            address=self.address,
            qualifications=self.qualifications,
            discipline=self.discipline,
            speciality=self.speciality,
            sub_speciality=self.sub_speciality,
            status=self.status,
            view_url=self.view_url,
        )
