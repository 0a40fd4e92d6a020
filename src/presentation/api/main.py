"""FastAPI main application."""

import logging
from datetime import date as Date
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from ...application.services.climate_report_service import ClimateReportService
from ...domain.entities.daily_record import DailyRecord
from ...domain.entities.weather_dataset import WeatherDataset
from ...domain.exceptions import LocationNotFoundError, WeatherDataUnavailableError
from ..cli.main import build_service
from config.settings import API_SETTINGS, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)


@lru_cache(maxsize=1)
def get_service() -> ClimateReportService:
    """Service dependency, built on first use."""
    return build_service()


# Request/Response models
class DailyRecordModel(BaseModel):
    """One day of weather observations."""

    date: Date
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    temp_mean: Optional[float] = None
    precipitation: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    cloud_cover: Optional[float] = None


class AnalyzeRequest(BaseModel):
    """Request model for analyzing supplied records."""

    records: List[DailyRecordModel] = Field(default_factory=list)
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Latitude in degrees")


class ClimateReportResponse(BaseModel):
    """Response model wrapping a climate report."""

    location: Optional[str] = None
    last_updated: Optional[str] = None
    data_source: Optional[str] = None
    report: Dict[str, Any]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "climate": "/climate/{location}",
            "analyze": "/climate/analyze",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/climate/analyze", response_model=ClimateReportResponse)
def analyze(
    request: AnalyzeRequest, service: ClimateReportService = Depends(get_service)
) -> ClimateReportResponse:
    """Compute a climate report from records supplied in the request body."""
    dataset = WeatherDataset.from_records(
        DailyRecord(**record.model_dump()) for record in request.records
    )
    report = service.analyze(dataset, request.latitude)
    return ClimateReportResponse(data_source="request", report=report.to_dict())


@app.get("/climate/{location}", response_model=ClimateReportResponse)
def climate(
    location: str,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
    refresh: bool = False,
    service: ClimateReportService = Depends(get_service),
) -> ClimateReportResponse:
    """
    Get the climate report for a location.

    Args:
        location: Place name
        latitude: Optional latitude, skips geocoding together with longitude
        longitude: Optional longitude
        refresh: Recompute even if a stored report is fresh

    Returns:
        The stored or newly computed report
    """
    try:
        stored = service.get_climate_report(
            location, latitude=latitude, longitude=longitude, force_refresh=refresh
        )
    except LocationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WeatherDataUnavailableError as e:
        logger.error(f"Weather data error: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Climate report error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    return ClimateReportResponse(
        location=stored.location.name,
        last_updated=stored.last_updated.isoformat(),
        data_source=stored.data_source,
        report=stored.report.to_dict(),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
