from typing import List

from pydantic import BaseModel, ConfigDict, Field

from app.models.application import Application


class SortState(BaseModel):
    key: str
    direction: str


class DashboardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    showing: int
    is_recruitment_open: bool = Field(alias="isRecruitmentOpen")
    sort: SortState
    applications: List[Application]
