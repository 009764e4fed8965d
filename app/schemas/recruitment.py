from pydantic import BaseModel, ConfigDict, Field


class RecruitmentStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_recruitment_open: bool = Field(alias="isRecruitmentOpen")


class RecruitmentToggleResponse(RecruitmentStatusResponse):
    success: bool = True
