"""Admin amenity and property type routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.schemas.property import (
    AmenityCreate,
    AmenityResponse,
    PropertyTypeCreate,
    PropertyTypeResponse,
)
from estatehub.services import property as property_service

router = APIRouter()


@router.get("/amenities", response_model=list[AmenityResponse])
def list_amenities(db: Session = Depends(get_db)) -> list[AmenityResponse]:
    return [AmenityResponse.model_validate(a) for a in property_service.get_amenities(db)]


@router.post("/amenities", response_model=AmenityResponse, status_code=status.HTTP_201_CREATED)
def create_amenity(data: AmenityCreate, db: Session = Depends(get_db)) -> AmenityResponse:
    return AmenityResponse.model_validate(property_service.create_amenity(db, data.name))


@router.put("/amenities/{amenity_id}", response_model=AmenityResponse)
def update_amenity(amenity_id: int, data: AmenityCreate, db: Session = Depends(get_db)) -> AmenityResponse:
    return AmenityResponse.model_validate(property_service.update_amenity(db, amenity_id, data.name))


@router.delete("/amenities/{amenity_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_amenity(amenity_id: int, db: Session = Depends(get_db)) -> None:
    property_service.delete_amenity(db, amenity_id)


@router.get("/property-types", response_model=list[PropertyTypeResponse])
def list_property_types(db: Session = Depends(get_db)) -> list[PropertyTypeResponse]:
    return [PropertyTypeResponse.model_validate(t) for t in property_service.get_property_types(db)]


@router.post("/property-types", response_model=PropertyTypeResponse, status_code=status.HTTP_201_CREATED)
def create_property_type(data: PropertyTypeCreate, db: Session = Depends(get_db)) -> PropertyTypeResponse:
    created = property_service.create_property_type(db, data.name, data.description)
    return PropertyTypeResponse.model_validate(created)


@router.put("/property-types/{type_id}", response_model=PropertyTypeResponse)
def update_property_type(
    type_id: int,
    data: PropertyTypeCreate,
    db: Session = Depends(get_db),
) -> PropertyTypeResponse:
    updated = property_service.update_property_type(db, type_id, data.name, data.description)
    return PropertyTypeResponse.model_validate(updated)


@router.delete("/property-types/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property_type(type_id: int, db: Session = Depends(get_db)) -> None:
    property_service.delete_property_type(db, type_id)
