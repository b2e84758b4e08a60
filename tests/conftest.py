"""Shared fixtures: in-memory database, test client, users and sample listings."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from estatehub.core.database import Base, get_db
from estatehub.main import app
from estatehub.models.enums import ListingType, UnitStatus, UserRole
from estatehub.models.property import (
    Property,
    PropertyLocation,
    PropertyMedia,
    PropertyType,
    PropertyUnit,
)
from estatehub.models.user import User
from estatehub.services.auth import create_access_token, get_password_hash


# Test database setup
@pytest.fixture
def test_db():
    """Create an in-memory test database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(test_db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, username: str, role: UserRole = UserRole.USER, **fields) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=get_password_hash("testpassword123"),
        role=role,
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user(test_db):
    """Create a regular user in the database."""
    return make_user(test_db, "testuser", full_name="Test User")


@pytest.fixture
def admin_user(test_db):
    """Create an admin user in the database."""
    return make_user(test_db, "admin", role=UserRole.ADMIN)


@pytest.fixture
def user_headers(test_user):
    token = create_access_token(data={"sub": test_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(data={"sub": admin_user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def login(client):
    """Sign in through a web login form so the session cookie is set."""

    def _login(username: str, path: str = "/login") -> None:
        response = client.post(
            path,
            data={"username": username, "password": "testpassword123"},
            follow_redirects=False,
        )
        assert response.status_code == 303

    return _login


def add_location(db, city: str, street: str = "1 Main Road", state: str = "Karnataka", zip_code: str = "560001"):
    location = PropertyLocation(streetaddress=street, city=city, state=state, zip_code=zip_code)
    db.add(location)
    db.flush()
    return location


def add_property(db, property_type: PropertyType, title: str, city: str = "Bengaluru", **fields) -> Property:
    location = add_location(db, city)
    prop = Property(
        title=title,
        property_type_id=property_type.id,
        property_location_id=location.id,
        **fields,
    )
    db.add(prop)
    db.commit()
    db.refresh(prop)
    return prop


@pytest.fixture
def make_property(test_db):
    """Factory for properties with a fresh location."""

    def _make(property_type: PropertyType, title: str, city: str = "Bengaluru", **fields) -> Property:
        return add_property(test_db, property_type, title, city, **fields)

    return _make


@pytest.fixture
def property_types(test_db):
    """One property type per listing type, plus a "Rental" alias."""
    types = {
        "Project": PropertyType(name="Project", description="New projects"),
        "Rent": PropertyType(name="Rent", description="Rentals"),
        "Rental": PropertyType(name="rental", description="Rentals (legacy name)"),
        "Resale": PropertyType(name="Resale", description="Resale homes"),
    }
    test_db.add_all(types.values())
    test_db.commit()
    return types


@pytest.fixture
def sample_listings(test_db, property_types):
    """A project with units, two rentals and a resale home."""
    project = add_property(
        test_db,
        property_types["Project"],
        "Skyline Residences",
        city="Pune",
        listing_type=ListingType.PROJECT.value,
        year_built=2026,
    )
    test_db.add_all(
        [
            PropertyUnit(property_id=project.id, unit_number="A-101", bedrooms=2, square_feet=950,
                         price=9_500_000, status=UnitStatus.READY_TO_MOVE.value),
            PropertyUnit(property_id=project.id, unit_number="A-501", bedrooms=3, square_feet=1400,
                         price=15_000_000, status=UnitStatus.UNDER_CONSTRUCTION.value),
        ]
    )
    test_db.add(PropertyMedia(property_id=project.id, file_url="/media/properties/project.jpg"))

    rent = add_property(
        test_db,
        property_types["Rent"],
        "Furnished 2 BHK",
        city="Bengaluru",
        listing_type=ListingType.RENT.value,
        price=45_000,
        bedrooms=2,
        bathrooms=2,
    )
    legacy_rent = add_property(
        test_db,
        property_types["Rental"],
        "Studio near Metro",
        city="Mumbai",
        listing_type=ListingType.RENT.value,
        price=20_000,
        bedrooms=1,
        bathrooms=1,
    )
    resale = add_property(
        test_db,
        property_types["Resale"],
        "Sea Facing 3 BHK",
        city="Mumbai",
        listing_type=ListingType.RESALE.value,
        price=52_000_000,
        bedrooms=3,
        bathrooms=3,
        square_feet=1650,
    )
    test_db.commit()
    return {"project": project, "rent": rent, "legacy_rent": legacy_rent, "resale": resale}
