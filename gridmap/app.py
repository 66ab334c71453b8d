from fastapi import FastAPI
from fastapi.responses import JSONResponse
import logging
from gridmap.schemas import SliceRequestModel, SliceResponse, SliceErrorResponse
from gridmap.layout import GridMap, ConfigError, PlacementError

app = FastAPI(title="GridMap")

logger = logging.getLogger(__name__)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post(
    "/slice",
    response_model=SliceResponse,
    responses={400: {"model": SliceErrorResponse}, 422: {"model": SliceErrorResponse}},
)
def slice_endpoint(req: SliceRequestModel):
    try:
        grid = GridMap(req.area_w, req.area_h, req.grids_w, req.grids_h)
    except ConfigError as e:
        logger.warning(f"[API] Rejected canvas config: {e}")
        return JSONResponse(
            status_code=400,
            content=SliceErrorResponse(error=type(e).__name__, message=str(e)).model_dump(),
        )

    try:
        result = grid.slice(req.slices)
    except PlacementError as e:
        # Covers InvalidSliceError too
        logger.info(f"[API] {grid!r}: {e}")
        return JSONResponse(
            status_code=422,
            content=SliceErrorResponse(**e.to_dict()).model_dump(),
        )

    logger.info(
        f"[API] {grid!r}: placed {len(result.areas)} slices, "
        f"occupied={result.occupied}/{result.capacity}"
    )
    return SliceResponse.from_result(result)
