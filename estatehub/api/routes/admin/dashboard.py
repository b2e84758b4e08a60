"""Admin dashboard and saved comparison routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.schemas.compare import ComparisonResponse
from estatehub.services.comparison import list_comparisons
from estatehub.services.formatting import get_first_image
from estatehub.services.property import get_dashboard_stats

router = APIRouter()


class LatestProperty(BaseModel):
    id: int
    title: str | None
    price: float | None
    image: str


class DashboardStats(BaseModel):
    property_count: int
    profile_count: int
    appointment_count: int
    latest_properties: list[LatestProperty]


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(db: Session = Depends(get_db)) -> DashboardStats:
    """Counts and the latest properties."""
    stats = get_dashboard_stats(db)
    return DashboardStats(
        property_count=stats["property_count"],
        profile_count=stats["profile_count"],
        appointment_count=stats["appointment_count"],
        latest_properties=[
            LatestProperty(id=p.id, title=p.title, price=p.price, image=get_first_image(p.media))
            for p in stats["latest_properties"]
        ],
    )


@router.get("/comparisons", response_model=list[ComparisonResponse])
def comparisons(db: Session = Depends(get_db)) -> list[ComparisonResponse]:
    """Saved comparisons, newest first."""
    return list_comparisons(db)
