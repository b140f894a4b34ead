"""
Calculation endpoints
=====================

POST /api/v1/calculations          -- analyze one movement and store it
POST /api/v1/calculations/upload   -- analyze every row of a CSV file
GET  /api/v1/calculations/history  -- a user's stored calculations
GET  /api/v1/calculations/summary  -- a user's forward / backward statistics
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.middleware import limiter
from src.api.schemas import (
    CalculationRequest,
    CalculationResponse,
    ErrorResponse,
    GeoPointSchema,
    SummaryResponse,
    UploadResponse,
    UploadRowResponse,
)
from src.config import settings
from src.domain.csv_import import decode_upload, import_movements
from src.domain.entities import CsvFormatError
from src.domain.movement import analyze_movement
from src.infrastructure.repositories import CalculationRepository, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])

_USER_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown user"}}


async def _require_user(db: AsyncSession, user_id: int) -> None:
    if not await UserRepository(db).get_by_id(user_id):
        raise HTTPException(status_code=404, detail="User not found")


@router.post(
    "",
    response_model=CalculationResponse,
    summary="Analyze a plant -> warehouse -> city movement",
    responses=_USER_NOT_FOUND,
)
@limiter.limit(settings.rate_limit)
async def create_calculation(
    request: Request,
    body: CalculationRequest,
    db: AsyncSession = Depends(get_db),
):
    await _require_user(db, body.user_id)

    plant = body.plant.to_domain()
    warehouse = body.warehouse.to_domain()
    city = body.city.to_domain()
    analysis = analyze_movement(plant, warehouse, city)

    calc = await CalculationRepository(db).create_calculation(
        user_id=body.user_id,
        plant=plant,
        warehouse=warehouse,
        city=city,
        analysis=analysis,
    )
    logger.info(
        "Calculation %s for user %d: angle=%.2f backward=%s",
        calc.id,
        body.user_id,
        analysis.angle_degrees,
        analysis.is_backward_movement,
    )
    return CalculationResponse.from_model(calc)


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Analyze every movement in a CSV file",
    responses={
        400: {"model": ErrorResponse, "description": "Missing, empty or malformed file"},
        413: {"model": ErrorResponse, "description": "File exceeds the upload limit"},
        **_USER_NOT_FOUND,
    },
    description=(
        "Expects the columns plant_lat, plant_lon, warehouse_lat, "
        "warehouse_lon, city_lat, city_lon.  Invalid rows are skipped and "
        "reported in ``errors``; valid rows are stored and returned."
    ),
)
@limiter.limit(settings.rate_limit)
async def upload_calculations(
    request: Request,
    user_id: int = Form(...),
    file: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    content = await file.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Uploaded file is too large.")
    if not content.strip():
        raise HTTPException(status_code=400, detail="Uploaded file is empty.")

    await _require_user(db, user_id)

    try:
        imported = import_movements(decode_upload(content))
    except CsvFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    repo = CalculationRepository(db)
    results: list[UploadRowResponse] = []
    for row in imported.rows:
        await repo.create_calculation(
            user_id=user_id,
            plant=row.plant,
            warehouse=row.warehouse,
            city=row.city,
            analysis=row.analysis,
        )
        results.append(
            UploadRowResponse(
                row=row.row_number,
                plant=GeoPointSchema(lat=row.plant.lat, lon=row.plant.lon),
                warehouse=GeoPointSchema(lat=row.warehouse.lat, lon=row.warehouse.lon),
                city=GeoPointSchema(lat=row.city.lat, lon=row.city.lon),
                **row.analysis.as_dict(),
            )
        )

    for error in imported.errors:
        logger.warning("Upload %s for user %d: %s", file.filename, user_id, error)
    logger.info(
        "Upload %s for user %d: %d rows stored, %d rejected",
        file.filename,
        user_id,
        len(results),
        len(imported.errors),
    )
    return UploadResponse(results=results, errors=imported.errors)


@router.get(
    "/history",
    response_model=list[CalculationResponse],
    summary="List a user's calculations, newest first",
)
@limiter.limit(settings.rate_limit)
async def get_history(
    request: Request,
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    calcs = await CalculationRepository(db).list_for_user(user_id)
    return [CalculationResponse.from_model(c) for c in calcs]


@router.get(
    "/summary",
    response_model=SummaryResponse,
    summary="Forward / backward statistics for a user",
)
@limiter.limit(settings.rate_limit)
async def get_summary(
    request: Request,
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    summary = await CalculationRepository(db).summary_for_user(user_id)
    return SummaryResponse.model_validate(summary)
