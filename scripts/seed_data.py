"""Seed script to populate the database with sample listings and site content."""

from datetime import UTC, datetime, timedelta

from estatehub.core.database import Base, SessionLocal, engine
from estatehub.models import (
    Amenity,
    Appointment,
    CompanyInfo,
    CompanyStat,
    Faq,
    HeroSection,
    LegalPage,
    Property,
    PropertyLocation,
    PropertyMedia,
    PropertyType,
    PropertyUnit,
    Service,
    Testimonial,
)
from estatehub.models.enums import AppointmentStatus, ListingType, MediaType, UnitStatus, UserRole
from estatehub.schemas.user import UserCreate
from estatehub.services.auth import create_user

SAMPLE_IMAGE = "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?w=800&q=80"


def seed_database() -> None:
    """Seed the database with sample data."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        # Check if data already exists
        if db.query(Property).first():
            print("Database already has data. Skipping seed.")
            return

        print("Seeding database...")

        types = {
            name: PropertyType(name=name, description=f"{name} listings")
            for name in (ListingType.PROJECT.value, ListingType.RENT.value, ListingType.RESALE.value)
        }
        db.add_all(types.values())

        amenities = [Amenity(name=name) for name in ("Clubhouse", "Gym", "Parking", "Swimming Pool")]
        db.add_all(amenities)
        db.flush()

        print(f"Created {len(types)} property types and {len(amenities)} amenities")

        locations = [
            PropertyLocation(streetaddress="12 Lake View Road", city="Pune", state="Maharashtra", zip_code="411001"),
            PropertyLocation(streetaddress="4 MG Road", city="Bengaluru", state="Karnataka", zip_code="560001"),
            PropertyLocation(streetaddress="88 Marine Drive", city="Mumbai", state="Maharashtra", zip_code="400002"),
        ]
        db.add_all(locations)
        db.flush()

        project = Property(
            title="Skyline Residences",
            about_property="Two towers of 2 and 3 BHK apartments around a landscaped podium.",
            property_type_id=types[ListingType.PROJECT.value].id,
            property_location_id=locations[0].id,
            listing_type=ListingType.PROJECT.value,
            year_built=2026,
            amenities=amenities,
        )
        rental = Property(
            title="Furnished 2 BHK near MG Road",
            about_property="Bright apartment close to the metro.",
            property_type_id=types[ListingType.RENT.value].id,
            property_location_id=locations[1].id,
            listing_type=ListingType.RENT.value,
            price=45000,
            bedrooms=2,
            bathrooms=2,
            square_feet=1100,
            amenities=amenities[1:3],
        )
        resale = Property(
            title="Sea Facing 3 BHK",
            about_property="Corner apartment with an unobstructed sea view.",
            property_type_id=types[ListingType.RESALE.value].id,
            property_location_id=locations[2].id,
            listing_type=ListingType.RESALE.value,
            price=52000000,
            bedrooms=3,
            bathrooms=3,
            square_feet=1650,
            year_built=2015,
            amenities=amenities[2:],
        )
        db.add_all([project, rental, resale])
        db.flush()

        for prop in (project, rental, resale):
            db.add(PropertyMedia(property_id=prop.id, file_url=SAMPLE_IMAGE, media_type=MediaType.IMAGE.value))

        db.add_all(
            [
                PropertyUnit(
                    property_id=project.id,
                    unit_number=f"A-{floor}01",
                    floor=floor,
                    bedrooms=bedrooms,
                    bathrooms=bedrooms,
                    square_feet=square_feet,
                    price=price,
                    status=status.value,
                )
                for floor, bedrooms, square_feet, price, status in (
                    (2, 2, 980, 9500000, UnitStatus.READY_TO_MOVE),
                    (5, 3, 1420, 14500000, UnitStatus.UNDER_CONSTRUCTION),
                    (9, 3, 1500, 16000000, UnitStatus.UNDER_CONSTRUCTION),
                )
            ]
        )

        print("Created 3 properties (project, rent, resale) with media and units")

        db.add(
            HeroSection(
                title="Find a home you love",
                sub_title="New projects, rentals and resale homes in one place",
                file_url=SAMPLE_IMAGE,
                media_type=MediaType.IMAGE.value,
            )
        )
        db.add_all(
            [
                Service(title="Buying", description="Shortlist, visit and close with one advisor."),
                Service(title="Renting", description="Verified rentals with transparent terms."),
                Service(title="Selling", description="Pricing advice and qualified buyers."),
            ]
        )
        db.add_all(
            [
                CompanyStat(label="Homes sold", value="1200", suffix="+", display_order=1),
                CompanyStat(label="Cities", value="8", display_order=2),
            ]
        )
        db.add(
            Testimonial(
                client_name="Priya S.",
                review="The site visit was arranged within a day.",
                rating=5,
                is_active=True,
            )
        )
        db.add(Faq(question="Is there a brokerage fee?", answer="Not for new projects.", display_order=1))
        db.add(
            CompanyInfo(
                company_name="EstateHub Realty",
                address="4 MG Road",
                city="Bengaluru",
                state="Karnataka",
                country="India",
                phone="+91 80 1234 5678",
                email="hello@estatehub.in",
            )
        )
        db.add_all(
            [
                LegalPage(page_key="privacy-policy", title="Privacy Policy", content="We only use your data to arrange visits."),
                LegalPage(page_key="terms-of-service", title="Terms of Service", content="Listings are provided as-is."),
            ]
        )
        db.commit()

        print("Created site content (hero, services, stats, testimonial, FAQ, company info, legal pages)")

        admin = create_user(
            db,
            UserCreate(username="admin", email="admin@estatehub.in", password="admin12345", full_name="Site Admin"),
            role=UserRole.ADMIN,
        )
        visitor = create_user(
            db,
            UserCreate(username="visitor", email="visitor@estatehub.in", password="visitor12345", phone="9876543210"),
        )
        db.add(
            Appointment(
                property_id=resale.id,
                user_id=visitor.id,
                appointment_date=datetime.now(UTC) + timedelta(days=3),
                status=AppointmentStatus.PENDING.value,
            )
        )
        db.commit()

        print("\nSeed data created successfully!")
        print(f"\nAdmin login: {admin.username} / admin12345")
        print(f"User login: {visitor.username} / visitor12345")
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
