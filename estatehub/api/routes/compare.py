"""Compare list API routes; the list lives in the session cookie."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from estatehub.api.dependencies import get_request_user
from estatehub.core.database import get_db
from estatehub.core.errors import not_found
from estatehub.models.user import User
from estatehub.schemas.compare import CompareProperty, CompareState
from estatehub.services import listing
from estatehub.services.compare import CompareList, compare_property_from_listing
from estatehub.services.comparison import save_comparison

router = APIRouter(prefix="/compare", tags=["compare"])


def _state(compare_list: CompareList) -> CompareState:
    return CompareState(properties=compare_list.properties, toast=compare_list.toast)


@router.get("", response_model=CompareState)
def get_compare_list(request: Request) -> CompareState:
    """Current compare list."""
    return _state(CompareList.from_session(request.session))


@router.post("/save", status_code=status.HTTP_201_CREATED)
def save_compare_list(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_request_user),
) -> dict:
    """Save the current list for the signed-in user."""
    compare_list = CompareList.from_session(request.session)
    comparison = save_comparison(db, current_user, compare_list.properties)
    return {"success": True, "comparison_id": comparison.id}


@router.post("/{property_id}", response_model=CompareState)
def add_to_compare(property_id: int, request: Request, db: Session = Depends(get_db)) -> CompareState:
    """Add a property; a toast is returned when the list is full."""
    prop = listing.fetch_property_by_id(db, property_id)
    if not prop:
        raise not_found("Property")
    compare_list = CompareList.from_session(request.session)
    compare_list.add(compare_property_from_listing(prop))
    compare_list.save(request.session)
    return _state(compare_list)


@router.put("", response_model=CompareState)
def replace_compare_list(entries: list[CompareProperty], request: Request) -> CompareState:
    """Replace the whole list (truncated to the maximum)."""
    compare_list = CompareList.from_session(request.session)
    compare_list.set(entries)
    compare_list.save(request.session)
    return _state(compare_list)


@router.delete("/{property_id}", response_model=CompareState)
def remove_from_compare(property_id: str, request: Request) -> CompareState:
    """Remove one property from the list."""
    compare_list = CompareList.from_session(request.session)
    compare_list.remove(property_id)
    compare_list.save(request.session)
    return _state(compare_list)


@router.delete("", response_model=CompareState)
def clear_compare_list(request: Request) -> CompareState:
    """Empty the list."""
    compare_list = CompareList()
    compare_list.save(request.session)
    return _state(compare_list)

