"""Tests for the admin property, unit, catalog and media operations."""

import re
from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException

from estatehub.core.config import settings
from estatehub.models.appointment import Appointment
from estatehub.models.comparison import Comparison
from estatehub.models.enums import ListingType
from estatehub.models.property import Property, PropertyUnit
from estatehub.schemas.property import PropertyCreate, PropertyUpdate
from estatehub.services import property as property_service
from estatehub.services.media import storage_name


def property_payload(type_id: int, **overrides) -> dict:
    payload = {
        "title": "Garden Villa",
        "description": "Quiet corner plot.",
        "property_type_id": type_id,
        "listing_type": "Resale",
        "price": 12_000_000,
        "street": "5 Park Lane",
        "city": "Pune",
        "state": "Maharashtra",
        "zip_code": "411001",
        "bedrooms": 4,
        "bathrooms": 3,
        "square_feet": 2400,
    }
    payload.update(overrides)
    return payload


class TestCreatePropertyValidation:
    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"title": "  "}, "Title is required."),
            ({"property_type_id": None}, "Property type is required."),
            ({"city": ""}, "All location fields (street, city, state, zip) are required."),
            ({"price": None}, "Asking price is required for non-Project properties."),
            ({"property_type_id": 9999}, "Property type does not exist."),
            ({"amenity_ids": [9999]}, "One or more amenities do not exist."),
        ],
    )
    def test_messages(self, test_db, property_types, overrides, message):
        data = PropertyCreate(**property_payload(property_types["Resale"].id, **overrides))
        with pytest.raises(HTTPException) as exc_info:
            property_service.create_property(test_db, data)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == message

    def test_project_ignores_price_fields(self, test_db, property_types):
        data = PropertyCreate(
            **property_payload(
                property_types["Project"].id,
                listing_type="Project",
                price=None,
                year_built=2027,
            )
        )
        prop = property_service.create_property(test_db, data)
        assert prop.price is None
        assert prop.bedrooms is None
        assert prop.year_built == 2027
        assert prop.listing_type == ListingType.PROJECT.value

    def test_resale_stores_details_and_location(self, test_db, property_types):
        amenity = property_service.create_amenity(test_db, "Garden")
        data = PropertyCreate(
            **property_payload(property_types["Resale"].id, title="  Garden Villa  ", amenity_ids=[amenity.id])
        )
        prop = property_service.create_property(test_db, data)
        assert prop.title == "Garden Villa"
        assert prop.about_property == "Quiet corner plot."
        assert prop.price == 12_000_000
        assert prop.location.city == "Pune"
        assert [a.name for a in prop.amenities] == ["Garden"]


class TestPropertyAPI:
    def test_create_list_update(self, client, admin_headers, property_types):
        response = client.post(
            "/api/admin/properties",
            json=property_payload(property_types["Resale"].id),
            headers=admin_headers,
        )
        assert response.status_code == 201
        property_id = response.json()["property_id"]

        listed = client.get("/api/admin/properties", params={"search": "pune"}, headers=admin_headers).json()
        assert [p["id"] for p in listed] == [property_id]

        response = client.patch(
            f"/api/admin/properties/{property_id}",
            json={"title": "Garden Villa II", "city": "Nashik", "price": 13_000_000},
            headers=admin_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Garden Villa II"
        assert data["price"] == 13_000_000
        assert data["location"]["city"] == "Nashik"
        assert data["location"]["state"] == "Maharashtra"

    def test_update_rejects_blank_title(self, client, admin_headers, sample_listings):
        response = client.patch(
            f"/api/admin/properties/{sample_listings['rent'].id}",
            json={"title": " "},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_missing_property(self, client, admin_headers):
        assert client.get("/api/admin/properties/9999", headers=admin_headers).status_code == 404

    def test_delete_cascades(self, client, admin_headers, test_db, test_user, sample_listings):
        project_id = sample_listings["project"].id
        other_id = sample_listings["rent"].id
        comparison = Comparison(user_id=test_user.id, property_one_id=other_id, property_two_id=project_id)
        appointment = Appointment(
            property_id=project_id,
            user_id=test_user.id,
            appointment_date=datetime.now() + timedelta(days=2),
        )
        test_db.add_all([comparison, appointment])
        test_db.commit()
        comparison_id, appointment_id = comparison.id, appointment.id

        response = client.delete(f"/api/admin/properties/{project_id}", headers=admin_headers)
        assert response.status_code == 204

        test_db.expire_all()
        assert test_db.get(Property, project_id) is None
        assert test_db.get(Appointment, appointment_id) is None
        assert test_db.query(PropertyUnit).filter(PropertyUnit.property_id == project_id).count() == 0
        saved = test_db.get(Comparison, comparison_id)
        assert saved is not None
        assert saved.property_one_id == other_id
        assert saved.property_two_id is None


class TestUnits:
    def test_bulk_skips_blank_rows(self, client, admin_headers, sample_listings):
        project_id = sample_listings["project"].id
        response = client.post(
            f"/api/admin/properties/{project_id}/units/bulk",
            json=[{}, {"unit_number": "B-201", "price": 11_000_000, "status": "available"}, {"unit_number": " "}],
            headers=admin_headers,
        )
        assert response.status_code == 201
        created = response.json()
        assert [u["unit_number"] for u in created] == ["B-201"]
        assert created[0]["status"] == "available"

    def test_bulk_all_blank(self, client, admin_headers, sample_listings):
        response = client.post(
            f"/api/admin/properties/{sample_listings['project'].id}/units/bulk",
            json=[{}, {}],
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Fill at least one unit row."

    def test_unit_defaults_and_update(self, client, admin_headers, sample_listings):
        project_id = sample_listings["project"].id
        unit = client.post(
            f"/api/admin/properties/{project_id}/units",
            json={"unit_number": "C-1"},
            headers=admin_headers,
        ).json()
        assert unit["status"] == "under_construction"

        response = client.patch(f"/api/admin/units/{unit['id']}", json={"status": "sold"}, headers=admin_headers)
        assert response.json()["status"] == "sold"

        assert client.delete(f"/api/admin/units/{unit['id']}", headers=admin_headers).status_code == 204
        units = client.get(f"/api/admin/properties/{project_id}/units", headers=admin_headers).json()
        assert len(units) == 2


class TestCatalog:
    def test_amenity_names_are_unique_ignoring_case(self, test_db):
        property_service.create_amenity(test_db, "Gym")
        with pytest.raises(HTTPException) as exc_info:
            property_service.create_amenity(test_db, " gym ")
        assert exc_info.value.detail == "Amenity 'gym' already exists"

    def test_rename_amenity(self, client, admin_headers):
        amenity = client.post("/api/admin/amenities", json={"name": "Pool"}, headers=admin_headers).json()
        response = client.put(f"/api/admin/amenities/{amenity['id']}", json={"name": "Swimming Pool"}, headers=admin_headers)
        assert response.json()["name"] == "Swimming Pool"

    def test_delete_amenity_unlinks_properties(self, test_db, property_types):
        amenity = property_service.create_amenity(test_db, "Lift")
        prop = property_service.create_property(
            test_db,
            PropertyCreate(**property_payload(property_types["Resale"].id, amenity_ids=[amenity.id])),
        )
        property_service.delete_amenity(test_db, amenity.id)
        test_db.refresh(prop)
        assert prop.amenities == []

    def test_property_type_requires_fields(self, test_db):
        with pytest.raises(HTTPException) as exc_info:
            property_service.create_property_type(test_db, "Villa", " ")
        assert exc_info.value.detail == "Description is required."

    def test_property_type_in_use_cannot_be_deleted(self, client, admin_headers, sample_listings, property_types):
        response = client.delete(f"/api/admin/property-types/{property_types['Resale'].id}", headers=admin_headers)
        assert response.status_code == 400

    def test_property_type_crud(self, client, admin_headers):
        created = client.post(
            "/api/admin/property-types",
            json={"name": "Plot", "description": "Land parcels"},
            headers=admin_headers,
        ).json()
        updated = client.put(
            f"/api/admin/property-types/{created['id']}",
            json={"name": "Plot", "description": "Residential plots"},
            headers=admin_headers,
        ).json()
        assert updated["description"] == "Residential plots"
        assert client.delete(f"/api/admin/property-types/{created['id']}", headers=admin_headers).status_code == 204


class TestMedia:
    def test_storage_name(self):
        assert re.fullmatch(r"properties/\d+-my-front-door\.jpg", storage_name("my  front door.jpg", "properties"))

    def test_add_hosted_media(self, client, admin_headers, sample_listings):
        property_id = sample_listings["rent"].id
        response = client.post(
            f"/api/admin/properties/{property_id}/media",
            json={"file_url": "https://cdn.example.com/a.jpg"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        media = client.get(f"/api/admin/properties/{property_id}/media", headers=admin_headers).json()
        assert [m["file_url"] for m in media] == ["https://cdn.example.com/a.jpg"]

    def test_upload_files(self, client, admin_headers, sample_listings, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "MEDIA_DIR", str(tmp_path))
        property_id = sample_listings["resale"].id
        response = client.post(
            f"/api/admin/properties/{property_id}/media/upload",
            files=[("files", ("living room.jpg", b"jpeg-bytes", "image/jpeg"))],
            headers=admin_headers,
        )
        assert response.status_code == 201
        (media,) = response.json()
        assert media["media_type"] == "image"
        assert media["file_url"].startswith("/media/properties/")
        stored = tmp_path / media["file_url"].removeprefix("/media/")
        assert stored.read_bytes() == b"jpeg-bytes"

    def test_upload_and_feature_video(self, client, admin_headers, sample_listings, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "MEDIA_DIR", str(tmp_path))
        property_id = sample_listings["resale"].id
        response = client.post(
            "/api/admin/videos",
            data={"property_id": str(property_id), "is_featured": "true"},
            files={"video": ("tour.mp4", b"video-bytes", "video/mp4")},
            headers=admin_headers,
        )
        assert response.status_code == 201
        video = response.json()
        assert video["media_type"] == "video"
        assert video["is_featured"] is True
        assert video["property_title"] == "Sea Facing 3 BHK"
        assert video["thumbnail_url"] is None

        response = client.patch(
            f"/api/admin/videos/{video['id']}/featured",
            json={"is_featured": False},
            headers=admin_headers,
        )
        assert response.json()["is_featured"] is False
        assert len(client.get("/api/admin/videos", headers=admin_headers).json()) == 1

    def test_property_options(self, client, admin_headers, sample_listings):
        options = client.get("/api/admin/property-options", headers=admin_headers).json()
        assert options[0]["title"] == "Furnished 2 BHK"


class TestDashboard:
    def test_counts_and_latest(self, client, admin_headers, test_user, sample_listings):
        data = client.get("/api/admin/dashboard", headers=admin_headers).json()
        assert data["property_count"] == 4
        assert data["profile_count"] == 2
        assert data["appointment_count"] == 0
        assert data["latest_properties"][0]["id"] == sample_listings["resale"].id

    def test_update_property_schema_keeps_unset_fields(self, test_db, sample_listings):
        prop = property_service.update_property(
            test_db, sample_listings["resale"].id, PropertyUpdate(bedrooms=4)
        )
        assert prop.bedrooms == 4
        assert prop.price == 52_000_000
