"""Meeting point API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
import logging
from app.backend.core.exceptions import DegenerateInputError, MissingCoordinateError
from app.backend.schemas.meeting import MeetingPointReport, MeetingPointRequest
from app.backend.services.optimiser import OptimiserService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_optimiser() -> OptimiserService:
    """Optimiser dependency, overridden in tests."""
    return OptimiserService()


@router.post("/meeting-point", response_model=MeetingPointReport, status_code=status.HTTP_200_OK)
async def find_meeting_point(
    request: MeetingPointRequest,
    optimiser: OptimiserService = Depends(get_optimiser)
):
    """Find the city minimizing total travel distance for all participants."""
    try:
        return optimiser.optimise(request.cities)
    except MissingCoordinateError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except DegenerateInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    except OSError as e:
        logger.error(f"City dataset unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="City dataset unavailable"
        )
