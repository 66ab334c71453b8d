from pydantic import BaseModel, ConfigDict, Field, PositiveInt, StrictInt
from typing import Optional

from gridmap.config.settings import GRIDS_W, GRIDS_H
from gridmap.layout import Area, SliceResult


class SliceRequestModel(BaseModel):
    """
    Input contract for the /slice endpoint.

    Canvas size is in pixels, grid counts and slices are in grid cells.
    Slice sizes are range-checked by the slicer, not here, so that an
    oversized slice reports its index like any other placement failure.
    """
    model_config = ConfigDict(extra="forbid")

    area_w: PositiveInt = Field(..., description="Canvas width in pixels")
    area_h: PositiveInt = Field(..., description="Canvas height in pixels")
    grids_w: PositiveInt = Field(default=GRIDS_W, description="Horizontal grid count")
    grids_h: PositiveInt = Field(default=GRIDS_H, description="Vertical grid count")
    slices: list[tuple[StrictInt, StrictInt]] = Field(
        default_factory=list,
        description="Ordered [width, height] pairs in grid cells"
    )


class AreaModel(BaseModel):
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_area(cls, area: Area) -> "AreaModel":
        return cls(**area.to_dict())


class FillNoticeModel(BaseModel):
    occupied: int
    capacity: int


class SliceResponse(BaseModel):
    areas: list[AreaModel] = []
    notice: Optional[FillNoticeModel] = None

    @classmethod
    def from_result(cls, result: SliceResult) -> "SliceResponse":
        notice = None
        if result.notice is not None:
            notice = FillNoticeModel(
                occupied=result.notice.occupied,
                capacity=result.notice.capacity,
            )
        return cls(
            areas=[AreaModel.from_area(a) for a in result.areas],
            notice=notice,
        )


class SliceErrorResponse(BaseModel):
    error: str  # "ConfigError", "InvalidSliceError", "PlacementError"
    message: str
    index: Optional[int] = None
    slice: Optional[list] = None
