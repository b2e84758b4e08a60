"""Property service for the admin back office."""

from fastapi import HTTPException, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload, selectinload
from structlog import get_logger

from estatehub.core.errors import bad_request, commit_or_400, not_found
from estatehub.models.amenity import Amenity
from estatehub.models.appointment import Appointment
from estatehub.models.comparison import Comparison
from estatehub.models.enums import ListingType, UnitStatus
from estatehub.models.property import Property, PropertyLocation, PropertyType, PropertyUnit
from estatehub.models.user import User
from estatehub.schemas.property import PropertyCreate, PropertyUpdate, UnitCreate, UnitUpdate

logger = get_logger(__name__)

_LOCATION_FIELDS = ("street", "city", "state", "zip_code")


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _get_amenities(db: Session, amenity_ids: list[int]) -> list[Amenity]:
    if not amenity_ids:
        return []
    amenities = db.query(Amenity).filter(Amenity.id.in_(set(amenity_ids))).all()
    if len(amenities) != len(set(amenity_ids)):
        raise bad_request("One or more amenities do not exist.")
    return amenities


def create_property(db: Session, property_data: PropertyCreate) -> Property:
    """Create a property together with its location and amenity links.

    Projects carry their prices on units, so only ``year_built`` is stored
    for them; other listings store the asking price and size details.
    """
    title = _clean(property_data.title)
    if not title:
        raise bad_request("Title is required.")
    if property_data.property_type_id is None:
        raise bad_request("Property type is required.")
    if not all(_clean(getattr(property_data, field)) for field in _LOCATION_FIELDS):
        raise bad_request("All location fields (street, city, state, zip) are required.")

    is_project = property_data.is_project or property_data.listing_type == ListingType.PROJECT
    if not is_project and property_data.price is None:
        raise bad_request("Asking price is required for non-Project properties.")

    property_type = db.query(PropertyType).filter(PropertyType.id == property_data.property_type_id).first()
    if not property_type:
        raise bad_request("Property type does not exist.")

    amenities = _get_amenities(db, property_data.amenity_ids)

    location = PropertyLocation(
        streetaddress=_clean(property_data.street),
        city=_clean(property_data.city),
        state=_clean(property_data.state),
        zip_code=_clean(property_data.zip_code),
    )
    db.add(location)
    db.flush()  # Get location.id

    db_property = Property(
        title=title,
        about_property=_clean(property_data.description) or None,
        property_type_id=property_type.id,
        property_location_id=location.id,
        listing_type=property_data.listing_type.value if property_data.listing_type else None,
        year_built=property_data.year_built,
    )
    if not is_project:
        db_property.price = property_data.price
        db_property.bedrooms = property_data.bedrooms
        db_property.bathrooms = property_data.bathrooms
        db_property.square_feet = property_data.square_feet

    db_property.amenities = amenities
    db.add(db_property)
    commit_or_400(db, "Failed to create property")
    db.refresh(db_property)

    logger.info("Property created", property_id=db_property.id, project=is_project)
    return db_property


def get_property(db: Session, property_id: int) -> Property:
    """Get a property by ID."""
    db_property = (
        db.query(Property)
        .options(
            joinedload(Property.location),
            joinedload(Property.property_type),
            selectinload(Property.media),
            selectinload(Property.units),
            selectinload(Property.amenities),
        )
        .filter(Property.id == property_id)
        .first()
    )
    if not db_property:
        raise not_found("Property")
    return db_property


def list_properties(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    search: str | None = None,
) -> list[Property]:
    """Get properties for the admin list, newest first."""
    query = db.query(Property).options(
        joinedload(Property.location),
        joinedload(Property.property_type),
    )
    term = _clean(search)
    if term:
        query = query.outerjoin(Property.location).filter(
            or_(
                Property.title.ilike(f"%{term}%"),
                PropertyLocation.city.ilike(f"%{term}%"),
            )
        )
    return query.order_by(Property.id.desc()).offset(skip).limit(limit).all()


def update_property(
    db: Session,
    property_id: int,
    property_data: PropertyUpdate,
) -> Property:
    """Update a property, its location and optionally its amenity set."""
    db_property = get_property(db, property_id)
    update_data = property_data.model_dump(exclude_unset=True)

    location_data = {field: update_data.pop(field) for field in _LOCATION_FIELDS if field in update_data}
    amenity_ids = update_data.pop("amenity_ids", None)

    if "title" in update_data and not _clean(update_data["title"]):
        raise bad_request("Title is required.")
    if "listing_type" in update_data and update_data["listing_type"] is not None:
        update_data["listing_type"] = ListingType(update_data["listing_type"]).value
    if update_data.get("property_type_id") is not None:
        exists = db.query(PropertyType.id).filter(PropertyType.id == update_data["property_type_id"]).first()
        if not exists:
            raise bad_request("Property type does not exist.")

    for field, value in update_data.items():
        setattr(db_property, field, value.strip() if isinstance(value, str) else value)

    if location_data:
        if any(not _clean(value) for value in location_data.values()):
            raise bad_request("All location fields (street, city, state, zip) are required.")
        if db_property.location is None:
            missing = [f for f in _LOCATION_FIELDS if f not in location_data]
            if missing:
                raise bad_request("All location fields (street, city, state, zip) are required.")
            db_property.location = PropertyLocation(streetaddress="", city="", state="", zip_code="")
        location = db_property.location
        if "street" in location_data:
            location.streetaddress = _clean(location_data["street"])
        for field in ("city", "state", "zip_code"):
            if field in location_data:
                setattr(location, field, _clean(location_data[field]))

    if amenity_ids is not None:
        db_property.amenities = _get_amenities(db, amenity_ids)

    commit_or_400(db, "Failed to update property")
    db.refresh(db_property)
    logger.info("Property updated", property_id=property_id, fields=sorted(property_data.model_fields_set))
    return db_property


def delete_property(db: Session, property_id: int) -> None:
    """Delete a property with its media, units, amenity links and appointments.

    Saved comparisons keep their row but lose the reference.
    """
    db_property = get_property(db, property_id)

    for column in (Comparison.property_one_id, Comparison.property_two_id, Comparison.property_three_id):
        db.query(Comparison).filter(column == property_id).update(
            {column: None},
            synchronize_session=False,
        )

    db_property.amenities = []
    db.delete(db_property)
    db.commit()
    logger.info("Property deleted", property_id=property_id)


def list_units(db: Session, property_id: int) -> list[PropertyUnit]:
    """Get all units of a property."""
    get_property(db, property_id)
    return (
        db.query(PropertyUnit)
        .filter(PropertyUnit.property_id == property_id)
        .order_by(PropertyUnit.id)
        .all()
    )


def get_unit(db: Session, unit_id: int) -> PropertyUnit:
    """Get a unit by ID."""
    unit = db.query(PropertyUnit).filter(PropertyUnit.id == unit_id).first()
    if not unit:
        raise not_found("Unit")
    return unit


def _new_unit(property_id: int, unit_data: UnitCreate) -> PropertyUnit:
    return PropertyUnit(
        property_id=property_id,
        unit_number=_clean(unit_data.unit_number) or None,
        floor=unit_data.floor,
        bedrooms=unit_data.bedrooms,
        bathrooms=unit_data.bathrooms,
        square_feet=unit_data.square_feet,
        price=unit_data.price,
        status=(unit_data.status or UnitStatus.UNDER_CONSTRUCTION).value,
    )


def add_unit(db: Session, property_id: int, unit_data: UnitCreate) -> PropertyUnit:
    """Add a single unit to a property."""
    get_property(db, property_id)
    unit = _new_unit(property_id, unit_data)
    db.add(unit)
    db.commit()
    db.refresh(unit)
    return unit


def _is_blank_unit(unit_data: UnitCreate) -> bool:
    values = unit_data.model_dump(exclude={"status"})
    return all(value is None or (isinstance(value, str) and not value.strip()) for value in values.values())


def add_units_bulk(db: Session, property_id: int, rows: list[UnitCreate]) -> list[PropertyUnit]:
    """Add several units at once; rows where every field is blank are skipped."""
    get_property(db, property_id)
    units = [_new_unit(property_id, row) for row in rows if not _is_blank_unit(row)]
    if not units:
        raise bad_request("Fill at least one unit row.")
    db.add_all(units)
    db.commit()
    for unit in units:
        db.refresh(unit)
    logger.info("Units added", property_id=property_id, count=len(units))
    return units


def update_unit(db: Session, unit_id: int, unit_data: UnitUpdate) -> PropertyUnit:
    """Update a unit."""
    unit = get_unit(db, unit_id)
    update_data = unit_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        if field == "status" and value is not None:
            value = UnitStatus(value).value
        setattr(unit, field, value)
    db.commit()
    db.refresh(unit)
    return unit


def delete_unit(db: Session, unit_id: int) -> None:
    """Delete a unit."""
    unit = get_unit(db, unit_id)
    db.delete(unit)
    db.commit()


def get_amenities(db: Session) -> list[Amenity]:
    """Get all amenities ordered by name."""
    return db.query(Amenity).order_by(Amenity.name).all()


def get_amenity(db: Session, amenity_id: int) -> Amenity:
    amenity = db.query(Amenity).filter(Amenity.id == amenity_id).first()
    if not amenity:
        raise not_found("Amenity")
    return amenity


def _check_amenity_name(db: Session, name: str, exclude_id: int | None = None) -> str:
    cleaned = _clean(name)
    if not cleaned:
        raise bad_request("Amenity name is required.")
    query = db.query(Amenity).filter(func.lower(Amenity.name) == cleaned.lower())
    if exclude_id is not None:
        query = query.filter(Amenity.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Amenity '{cleaned}' already exists",
        )
    return cleaned


def create_amenity(db: Session, name: str) -> Amenity:
    """Create an amenity."""
    amenity = Amenity(name=_check_amenity_name(db, name))
    db.add(amenity)
    commit_or_400(db, "Amenity already exists")
    db.refresh(amenity)
    return amenity


def update_amenity(db: Session, amenity_id: int, name: str) -> Amenity:
    """Rename an amenity."""
    amenity = get_amenity(db, amenity_id)
    amenity.name = _check_amenity_name(db, name, exclude_id=amenity_id)
    commit_or_400(db, "Amenity already exists")
    db.refresh(amenity)
    return amenity


def delete_amenity(db: Session, amenity_id: int) -> None:
    """Delete an amenity and unlink it from properties."""
    amenity = get_amenity(db, amenity_id)
    amenity.properties = []
    db.delete(amenity)
    db.commit()


def get_property_types(db: Session) -> list[PropertyType]:
    """Get all property types ordered by name."""
    return db.query(PropertyType).order_by(PropertyType.name).all()


def get_property_type(db: Session, type_id: int) -> PropertyType:
    property_type = db.query(PropertyType).filter(PropertyType.id == type_id).first()
    if not property_type:
        raise not_found("Property type")
    return property_type


def _check_property_type(name: str, description: str) -> tuple[str, str]:
    name, description = _clean(name), _clean(description)
    if not name:
        raise bad_request("Name is required.")
    if not description:
        raise bad_request("Description is required.")
    return name, description


def create_property_type(db: Session, name: str, description: str) -> PropertyType:
    """Create a property type."""
    name, description = _check_property_type(name, description)
    property_type = PropertyType(name=name, description=description)
    db.add(property_type)
    db.commit()
    db.refresh(property_type)
    return property_type


def update_property_type(db: Session, type_id: int, name: str, description: str) -> PropertyType:
    """Update a property type."""
    property_type = get_property_type(db, type_id)
    property_type.name, property_type.description = _check_property_type(name, description)
    db.commit()
    db.refresh(property_type)
    return property_type


def delete_property_type(db: Session, type_id: int) -> None:
    """Delete a property type that no property uses."""
    property_type = get_property_type(db, type_id)
    in_use = db.query(Property.id).filter(Property.property_type_id == type_id).first()
    if in_use:
        raise bad_request("Property type is in use by existing properties.")
    db.delete(property_type)
    db.commit()


def get_dashboard_stats(db: Session) -> dict:
    """Counts and latest properties for the admin dashboard."""
    latest = (
        db.query(Property)
        .options(selectinload(Property.media))
        .order_by(Property.id.desc())
        .limit(5)
        .all()
    )
    return {
        "property_count": db.query(func.count(Property.id)).scalar() or 0,
        "profile_count": db.query(func.count(User.id)).scalar() or 0,
        "appointment_count": db.query(func.count(Appointment.id)).scalar() or 0,
        "latest_properties": latest,
    }
