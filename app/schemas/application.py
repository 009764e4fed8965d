# ========================================
# app/schemas/application.py
# ========================================

import re
from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.errors import ApplicationValidationError, describe_validation_error
from app.models.application import Application

# LnT classes and open positions share the same five tracks
LNT_TRACKS = [
    "UI/UX Design",
    "Back-end Development",
    "Java Programming",
    "Front-end Development",
    "C Programming",
]

BINUSIAN_EMAIL_DOMAIN = "@binus.ac.id"

# ASCII digits only
NIM_PATTERN = re.compile(r"[0-9]+")

REQUIRED_FIELDS = [
    "fullName",
    "nim",
    "major",
    "lntClass",
    "position",
    "binusianEmail",
    "privateEmail",
]


# 1. Input: the public form fields (everything except the resume)
class ApplicationForm(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    full_name: str = Field(min_length=1)
    nim: str = Field(min_length=1)
    major: str = Field(min_length=1)
    lnt_class: str
    position: str
    binusian_email: EmailStr
    private_email: EmailStr

    @field_validator("nim")
    @classmethod
    def nim_is_numeric(cls, value: str) -> str:
        if not NIM_PATTERN.fullmatch(value):
            raise ValueError("NIM must contain digits only")
        return value

    @field_validator("lnt_class", "position")
    @classmethod
    def track_is_known(cls, value: str) -> str:
        if value not in LNT_TRACKS:
            raise ValueError(f"must be one of: {', '.join(LNT_TRACKS)}")
        return value

    @field_validator("binusian_email")
    @classmethod
    def is_binusian_email(cls, value: str) -> str:
        if not value.endswith(BINUSIAN_EMAIL_DOMAIN):
            raise ValueError(f"Please use a valid Binusian email ({BINUSIAN_EMAIL_DOMAIN})")
        return value


# 2. Input: what the repository persists on create
class ApplicationCreate(ApplicationForm):
    resume_url: str = Field(min_length=1)


# 3. Input: admin full-record edit (resume stays unless replaced)
class ApplicationUpdate(ApplicationForm):
    resume_url: Optional[str] = Field(default=None, min_length=1)


# 4. Output envelopes
class ApplicationListResponse(BaseModel):
    applications: List[Application]


class ApplicationDetailResponse(BaseModel):
    application: Application


class ApplicationSubmitResponse(BaseModel):
    message: str
    data: Application


class ApplicationUpdateResponse(BaseModel):
    message: str
    application: Application


SchemaT = TypeVar("SchemaT", bound=ApplicationForm)


def validate_application_fields(data: Mapping[str, Any], schema: Type[SchemaT] = ApplicationForm) -> SchemaT:
    """
    Validate raw camelCase fields against a schema.

    Blank and absent required fields are reported first, in form order,
    as "Missing required field: <name>".
    """
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if value is None or not str(value).strip():
            raise ApplicationValidationError(f"Missing required field: {field}", field=field)

    try:
        return schema.model_validate(dict(data))
    except ValidationError as exc:
        errors = exc.errors()
        loc = errors[0].get("loc", ()) if errors else ()
        raise ApplicationValidationError(
            describe_validation_error(errors),
            field=str(loc[-1]) if loc else None,
        ) from exc
