from pydantic import BaseModel, ConfigDict, Field

# Single explicit default shared by get() and toggle()
DEFAULT_IS_RECRUITMENT_OPEN = True
STATUS_FIELD = "isRecruitmentOpen"

# Fixed key for the one status document
RECRUITMENT_STATUS_ID = "recruitment"


class RecruitmentStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_recruitment_open: bool = Field(default=DEFAULT_IS_RECRUITMENT_OPEN, alias=STATUS_FIELD)
