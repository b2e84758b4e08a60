"""Tests for the public site pages, compare flow, back office pages and SEO routes."""

from datetime import datetime

import pytest

from estatehub.models.appointment import Appointment
from estatehub.models.comparison import Comparison
from estatehub.services.compare import CAPACITY_MESSAGE
from estatehub.services.slug import to_property_slug


def slug_for(prop) -> str:
    return to_property_slug(prop.title, prop.id)


class TestPublicPages:
    def test_home(self, client, sample_listings):
        response = client.get("/")
        assert response.status_code == 200
        assert "Skyline Residences" in response.text

    @pytest.mark.parametrize(
        ("path", "title"),
        [
            ("/projects", "Skyline Residences"),
            ("/rent", "Furnished 2 BHK"),
            ("/resale", "Sea Facing 3 BHK"),
        ],
    )
    def test_listing_pages(self, client, sample_listings, path, title):
        response = client.get(path)
        assert response.status_code == 200
        assert title in response.text

    def test_rent_filters(self, client, sample_listings):
        response = client.get("/rent", params={"bedrooms": "1"})
        assert "Studio near Metro" in response.text
        assert "Furnished 2 BHK" not in response.text

    def test_invalid_filter_value_is_reported(self, client, sample_listings):
        response = client.get("/resale", params={"min_price": "lots"})
        assert response.status_code == 200
        assert "Minimum price must be a number." in response.text

    def test_search(self, client, sample_listings):
        response = client.get("/search", params={"q": "Mumbai"})
        assert response.status_code == 200
        assert "Sea Facing 3 BHK" in response.text
        assert "Studio near Metro" in response.text

    def test_empty_search(self, client, sample_listings):
        assert client.get("/search").status_code == 200


class TestPropertyPage:
    def test_canonical_slug(self, client, sample_listings):
        prop = sample_listings["resale"]
        response = client.get(f"/property/{slug_for(prop)}")
        assert response.status_code == 200
        assert "Sea Facing 3 BHK" in response.text

    def test_non_canonical_slug_redirects(self, client, sample_listings):
        prop = sample_listings["resale"]
        response = client.get(f"/property/old-title-{prop.id}", follow_redirects=False)
        assert response.status_code == 301
        assert response.headers["location"] == f"/property/{slug_for(prop)}"

    def test_bare_id_redirects(self, client, sample_listings):
        prop = sample_listings["project"]
        response = client.get(f"/property/{prop.id}", follow_redirects=False)
        assert response.status_code == 301

    @pytest.mark.parametrize("slug", ["not-a-property", "missing-9999"])
    def test_unknown_property(self, client, sample_listings, slug):
        assert client.get(f"/property/{slug}").status_code == 404


class TestCompareFlow:
    def test_add_remove_and_clear(self, client, sample_listings):
        rent, resale = sample_listings["rent"], sample_listings["resale"]
        client.post("/compare/add", data={"property_id": str(rent.id)})
        client.post("/compare/add", data={"property_id": str(resale.id)})

        page = client.get("/compare")
        assert page.status_code == 200
        assert "Furnished 2 BHK" in page.text
        assert "Sea Facing 3 BHK" in page.text

        client.post("/compare/remove", data={"property_id": str(rent.id)})
        assert "Furnished 2 BHK" not in client.get("/compare").text

        client.post("/compare/clear")
        assert "Your compare list is empty." in client.get("/compare").text

    def test_fourth_property_shows_toast(self, client, sample_listings):
        for prop in sample_listings.values():
            response = client.post("/compare/add", data={"property_id": str(prop.id)})
        assert response.status_code == 200
        assert CAPACITY_MESSAGE in response.text

    @pytest.mark.parametrize(
        ("referer", "location"),
        [
            ("http://testserver/rent?bedrooms=2", "/rent?bedrooms=2"),
            ("https://evil.example.com/phish", "/compare"),
            ("//evil.example.com/phish", "/compare"),
        ],
    )
    def test_add_returns_to_local_referer_only(self, client, sample_listings, referer, location):
        response = client.post(
            "/compare/add",
            data={"property_id": str(sample_listings["rent"].id)},
            headers={"referer": referer},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == location

    def test_save_requires_login(self, client, sample_listings):
        response = client.post("/compare/save", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/login?next=/compare"

    def test_save(self, client, test_db, test_user, login, sample_listings):
        login("testuser")
        client.post("/compare/add", data={"property_id": str(sample_listings["project"].id)})
        client.post("/compare/add", data={"property_id": str(sample_listings["rent"].id)})
        response = client.post("/compare/save")
        assert response.status_code == 200
        assert "Comparison saved." in response.text
        saved = test_db.query(Comparison).one()
        assert saved.user_id == test_user.id
        assert saved.listing_type == 1


class TestProfilePage:
    def test_requires_login(self, client):
        response = client.get("/profile", follow_redirects=False)
        assert response.headers["location"] == "/login?next=/profile"

    def test_update(self, client, test_db, test_user, login):
        login("testuser")
        assert client.get("/profile").status_code == 200
        client.post("/profile", data={"full_name": "  Asha Rao ", "phone": ""})
        test_db.refresh(test_user)
        assert test_user.full_name == "Asha Rao"
        assert test_user.phone is None


class TestAdminPages:
    ADMIN_PAGES = [
        "/admin",
        "/admin/properties",
        "/admin/properties/new",
        "/admin/amenities",
        "/admin/property-types",
        "/admin/property-videos",
        "/admin/scheduled-tours",
        "/admin/comparisons",
        "/admin/cms",
    ]

    @pytest.mark.parametrize("path", ADMIN_PAGES)
    def test_anonymous_redirects_to_login(self, client, path):
        response = client.get(path, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == f"/admin/login?next={path}"

    def test_regular_user_is_not_let_in(self, client, test_user):
        response = client.post("/admin/login", data={"username": "testuser", "password": "testpassword123"})
        assert response.status_code == 400
        assert "Invalid credentials or insufficient permissions" in response.text

    def test_login_honours_next(self, client, admin_user):
        response = client.post(
            "/admin/login",
            data={"username": "admin", "password": "testpassword123", "next_url": "/admin/amenities"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/admin/amenities"

    @pytest.mark.parametrize("path", ADMIN_PAGES)
    def test_pages_render_for_admin(self, client, admin_user, login, sample_listings, path):
        login("admin", "/admin/login")
        response = client.get(path)
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_property_detail(self, client, admin_user, login, sample_listings):
        login("admin", "/admin/login")
        response = client.get(f"/admin/properties/{sample_listings['project'].id}")
        assert response.status_code == 200
        assert "Skyline Residences" in response.text

        missing = client.get("/admin/properties/9999", follow_redirects=False)
        assert missing.headers["location"] == "/admin/properties"

    def test_create_property_form(self, client, test_db, admin_user, login, property_types):
        login("admin", "/admin/login")
        response = client.post(
            "/admin/properties/new",
            data={
                "title": "Hill View",
                "property_type_id": str(property_types["Resale"].id),
                "listing_type": "Resale",
                "price": "8000000",
                "street": "2 Ridge Road",
                "city": "Shimla",
                "state": "Himachal Pradesh",
                "zip_code": "171001",
                "bedrooms": "2",
            },
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"].startswith("/admin/properties/")

        invalid = client.post("/admin/properties/new", data={"title": ""})
        assert invalid.status_code == 400
        assert "Title is required." in invalid.text

    def test_add_units_from_table(self, client, test_db, admin_user, login, sample_listings):
        login("admin", "/admin/login")
        project = sample_listings["project"]
        client.post(
            f"/admin/properties/{project.id}/units",
            data={
                "unit_number": ["D-1", ""],
                "floor": ["4", ""],
                "bedrooms": ["2", ""],
                "bathrooms": ["", ""],
                "square_feet": ["1000", ""],
                "price": ["10000000", ""],
                "status": ["available", "under_construction"],
            },
        )
        test_db.refresh(project)
        assert "D-1" in {u.unit_number for u in project.units}
        assert len(project.units) == 3

    def test_tour_detail_and_status(self, client, test_db, test_user, admin_user, login, sample_listings):
        appointment = Appointment(
            property_id=sample_listings["rent"].id,
            user_id=test_user.id,
            appointment_date=datetime(2026, 11, 3, 11, 0),
        )
        test_db.add(appointment)
        test_db.commit()

        login("admin", "/admin/login")
        response = client.get(f"/admin/scheduled-tours/{appointment.id}")
        assert response.status_code == 200
        assert "Furnished 2 BHK" in response.text

        client.post(f"/admin/scheduled-tours/{appointment.id}/status", data={"status": "confirmed"})
        test_db.refresh(appointment)
        assert appointment.status == "confirmed"


class TestSeo:
    def test_robots(self, client):
        response = client.get("/robots.txt")
        assert response.status_code == 200
        assert "Disallow: /admin/" in response.text
        assert "Sitemap: " in response.text

    def test_sitemap(self, client, sample_listings):
        response = client.get("/sitemap.xml")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        for prop in sample_listings.values():
            assert f"/property/{slug_for(prop)}" in response.text
