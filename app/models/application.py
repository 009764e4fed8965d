from datetime import datetime
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Application(BaseModel):
    """A stored candidate submission (one document in the Praetorian collection)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    full_name: str
    nim: str
    major: str
    lnt_class: str
    position: str
    binusian_email: str
    private_email: str
    resume_url: str
    submission_date: datetime

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Application":
        data = dict(document)
        data["_id"] = str(data["_id"])
        return cls.model_validate(data)


def to_document(fields: BaseModel, submission_date: datetime = None) -> Dict[str, Any]:
    """Mongo document (camelCase keys) for a validated input schema."""
    document = fields.model_dump(by_alias=True, exclude_none=True)
    if submission_date is not None:
        document["submissionDate"] = submission_date
    return document
