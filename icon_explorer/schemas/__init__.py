"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from icon_explorer.modules.icons import Icon


class IconRecord(BaseModel):
    filename: str = Field(..., min_length=1)
    name: str
    size: int = Field(..., ge=0)
    dimensions: str
    last_modified: datetime = Field(..., alias="lastModified")
    url: str
    download_url: str = Field(..., alias="downloadUrl")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_icon(cls, icon: Icon) -> "IconRecord":
        return cls(
            filename=icon.filename,
            name=icon.name,
            size=icon.size,
            dimensions=icon.dimensions,
            last_modified=icon.last_modified,
            url=icon.url,
            download_url=icon.download_url,
        )

    def to_icon(self) -> Icon:
        return Icon(
            filename=self.filename,
            size=self.size,
            last_modified=self.last_modified,
            dimensions=self.dimensions,
        )


class ErrorResponse(BaseModel):
    error: str


class VariantSelection(BaseModel):
    variant: str = Field(..., min_length=1)


class CopyRequest(BaseModel):
    filename: Optional[str] = Field(default=None, min_length=1)


class LoadProgressResponse(BaseModel):
    loaded: int
    total: int
    percentage: int
    label: str
    done: bool


__all__ = [
    "IconRecord",
    "ErrorResponse",
    "VariantSelection",
    "CopyRequest",
    "LoadProgressResponse",
]
