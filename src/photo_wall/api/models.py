"""Pydantic models for gallery API responses."""

from pydantic import BaseModel, ConfigDict, Field

from photo_wall.domain.photos import SelectionResult


class PhotosResponse(BaseModel):
    """Photo URLs for the shuffle and rotation endpoints."""

    photos: list[str]
    total: int

    @classmethod
    def from_result(cls, result: SelectionResult) -> "PhotosResponse":
        return cls(photos=result.photos, total=result.total)


class BatchResponse(BaseModel):
    """Photo URLs for the sequential batch endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    batch_index: int | None = Field(default=None, alias="batchIndex")
    photos: list[str]
    total: int

    @classmethod
    def from_result(cls, result: SelectionResult) -> "BatchResponse":
        return cls(
            batch_index=result.batch_index, photos=result.photos, total=result.total
        )
