from pydantic import BaseModel, ConfigDict, Field
from typing import List


class ShortCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_url: str = Field(..., alias="videoUrl")
    title: str
    tags: List[str]


class Short(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1, description="Assigned by the store")
    video_url: str = Field(..., alias="videoUrl")
    title: str
    tags: List[str]
