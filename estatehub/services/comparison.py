"""Saved comparisons: persisting a user's compare list for the sales team."""

from sqlalchemy.orm import Session, joinedload
from structlog import get_logger

from estatehub.core.errors import bad_request
from estatehub.models.comparison import Comparison
from estatehub.models.enums import LISTING_TYPE_CODES, ListingType
from estatehub.models.property import Property
from estatehub.models.user import User
from estatehub.schemas.compare import CompareProperty, ComparisonPropertyRef, ComparisonResponse

logger = get_logger(__name__)


def _property_id(entry: CompareProperty) -> int | None:
    try:
        return int(entry.id)
    except ValueError:
        return None


def save_comparison(db: Session, user: User, entries: list[CompareProperty]) -> Comparison:
    """Save up to three compared properties for a signed-in user.

    The listing type of the first entry is stored as its numeric code.
    Ids that no longer point to a property are stored as empty slots.
    """
    if len(entries) < 2:
        raise bad_request("Need at least 2 properties to save")

    ids = [_property_id(entry) for entry in entries[:3]]
    known = {
        row.id
        for row in db.query(Property.id).filter(Property.id.in_([i for i in ids if i is not None])).all()
    }
    slots = [i if i in known else None for i in ids] + [None] * (3 - len(ids))

    comparison = Comparison(
        user_id=user.id,
        property_one_id=slots[0],
        property_two_id=slots[1],
        property_three_id=slots[2],
        listing_type=LISTING_TYPE_CODES.get(entries[0].listing_type, LISTING_TYPE_CODES[ListingType.RESALE]),
    )
    db.add(comparison)
    db.commit()
    db.refresh(comparison)
    logger.info("Comparison saved", comparison_id=comparison.id, user_id=user.id)
    return comparison


def _ref(prop: Property | None) -> ComparisonPropertyRef | None:
    return ComparisonPropertyRef.model_validate(prop) if prop is not None else None


def list_comparisons(db: Session) -> list[ComparisonResponse]:
    """All saved comparisons, newest first, with client and property titles."""
    rows = (
        db.query(Comparison)
        .options(
            joinedload(Comparison.user),
            joinedload(Comparison.property_one),
            joinedload(Comparison.property_two),
            joinedload(Comparison.property_three),
        )
        .order_by(Comparison.created_at.desc(), Comparison.id.desc())
        .all()
    )
    return [
        ComparisonResponse(
            id=row.id,
            created_at=row.created_at,
            user_id=row.user_id,
            listing_type=row.listing_type,
            property_one_id=row.property_one_id,
            property_two_id=row.property_two_id,
            property_three_id=row.property_three_id,
            client_name=row.user.full_name if row.user else None,
            client_phone=row.user.phone if row.user else None,
            property_one=_ref(row.property_one),
            property_two=_ref(row.property_two),
            property_three=_ref(row.property_three),
        )
        for row in rows
    ]
