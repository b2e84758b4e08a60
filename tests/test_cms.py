"""Tests for editable site content: sections, FAQs, testimonials, legal pages and inquiries."""

import pytest
from fastapi import HTTPException

from estatehub.models.cms import ContactInquiry, Testimonial
from estatehub.schemas.cms import (
    CompanyInfoIn,
    CompanyStatIn,
    ContactInquiryCreate,
    FaqIn,
    LegalPageIn,
    SiteSectionIn,
    TestimonialIn,
)
from estatehub.services import cms


class TestCmsService:
    def test_faq_sort_order_maps_to_display_order(self, test_db):
        cms.create_faq(test_db, FaqIn(question="Unordered?"))
        cms.create_faq(test_db, FaqIn(question="Second?", sort_order=2))
        cms.create_faq(test_db, FaqIn(question="First?", display_order=1))
        assert [f.question for f in cms.fetch_faqs(test_db)] == ["First?", "Second?", "Unordered?"]

    def test_faq_update_keeps_order_when_not_sent(self, test_db):
        faq = cms.create_faq(test_db, FaqIn(question="Q", sort_order=3))
        updated = cms.update_faq(test_db, faq.id, FaqIn(answer="A"))
        assert updated.display_order == 3
        assert updated.answer == "A"

    def test_faq_create_ignores_null_sort_order(self, test_db):
        faq = cms.create_faq(test_db, FaqIn(question="Q", sort_order=None, display_order=4))
        assert faq.display_order == 4
        stat = cms.create_company_stat(test_db, CompanyStatIn(label="Homes sold", sort_order=None, display_order=2))
        assert stat.display_order == 2

    def test_testimonial_rating_range(self, test_db):
        with pytest.raises(HTTPException) as exc_info:
            cms.create_testimonial(test_db, TestimonialIn(client_name="X", rating=6))
        assert exc_info.value.detail == "Rating must be between 1 and 5."

    def test_new_testimonials_are_hidden(self, test_db):
        testimonial = cms.create_testimonial(test_db, TestimonialIn(client_name="Asha", rating=5))
        assert testimonial.is_active is False
        assert cms.fetch_testimonials(test_db, active_only=True) == []
        cms.update_testimonial(test_db, testimonial.id, TestimonialIn(is_active=True))
        assert len(cms.fetch_testimonials(test_db, active_only=True)) == 1

    def test_site_section_upsert_by_key(self, test_db):
        first = cms.upsert_site_section(test_db, SiteSectionIn(section_key="about", title="About us"))
        second = cms.upsert_site_section(test_db, SiteSectionIn(section_key="about", subtitle="Since 2010"))
        assert first.id == second.id
        section = cms.fetch_site_section(test_db, "about")
        assert (section.title, section.subtitle, section.is_active) == ("About us", "Since 2010", True)

    def test_site_section_needs_key(self, test_db):
        with pytest.raises(HTTPException):
            cms.upsert_site_section(test_db, SiteSectionIn(title="No key"))

    def test_legal_page_accepts_slug(self, test_db):
        page = cms.upsert_legal_page(test_db, LegalPageIn(slug="privacy-policy", title="Privacy"))
        assert page.page_key == "privacy-policy"
        cms.upsert_legal_page(test_db, LegalPageIn(page_key="privacy-policy", content="Updated"))
        assert len(cms.fetch_legal_pages(test_db)) == 1
        assert cms.fetch_legal_page(test_db, "privacy-policy").content == "Updated"

    def test_contact_inquiry(self, test_db):
        inquiry = cms.create_contact_inquiry(
            test_db, ContactInquiryCreate(name=" Asha ", message=" Call me ", email="asha@example.com")
        )
        assert (inquiry.name, inquiry.message, inquiry.status) == ("Asha", "Call me", "new")
        with pytest.raises(HTTPException) as exc_info:
            cms.create_contact_inquiry(test_db, ContactInquiryCreate(name=" ", message="Hi"))
        assert exc_info.value.detail == "Name and message are required."

    def test_latest_company_info(self, test_db):
        cms.create_company_info(test_db, CompanyInfoIn(company_name="Old"))
        cms.create_company_info(test_db, CompanyInfoIn(company_name="New"))
        assert cms.fetch_company_info(test_db).company_name == "New"

    def test_delete_missing(self, test_db):
        with pytest.raises(HTTPException) as exc_info:
            cms.delete_service(test_db, 9999)
        assert exc_info.value.status_code == 404


class TestCmsAPI:
    def test_faq_crud(self, client, admin_headers):
        created = client.post(
            "/api/admin/cms/faqs",
            json={"question": "Brokerage?", "answer": "None", "sort_order": 1},
            headers=admin_headers,
        )
        assert created.status_code == 201
        faq = created.json()
        assert faq["display_order"] == 1

        patched = client.patch(f"/api/admin/cms/faqs/{faq['id']}", json={"answer": "Zero"}, headers=admin_headers)
        assert patched.json()["answer"] == "Zero"

        assert client.delete(f"/api/admin/cms/faqs/{faq['id']}", headers=admin_headers).status_code == 204
        assert client.get("/api/admin/cms/faqs", headers=admin_headers).json() == []

    def test_company_info(self, client, admin_headers):
        assert client.get("/api/admin/cms/company-info", headers=admin_headers).status_code == 404
        created = client.post(
            "/api/admin/cms/company-info",
            json={"company_name": "EstateHub Realty", "city": "Pune"},
            headers=admin_headers,
        ).json()
        client.patch(f"/api/admin/cms/company-info/{created['id']}", json={"city": "Mumbai"}, headers=admin_headers)
        info = client.get("/api/admin/cms/company-info", headers=admin_headers).json()
        assert (info["company_name"], info["city"]) == ("EstateHub Realty", "Mumbai")

    def test_requires_admin(self, client, user_headers):
        assert client.get("/api/admin/cms/services", headers=user_headers).status_code == 403


class TestPublicPages:
    def test_legal_page(self, client, test_db):
        cms.upsert_legal_page(test_db, LegalPageIn(page_key="terms-of-service", title="Terms", content="Be nice."))
        response = client.get("/legal/terms-of-service")
        assert response.status_code == 200
        assert "Be nice." in response.text
        assert client.get("/legal/unknown").status_code == 404

    def test_about_page(self, client, test_db):
        cms.upsert_site_section(test_db, SiteSectionIn(section_key="about", title="Our story"))
        response = client.get("/about")
        assert response.status_code == 200
        assert "Our story" in response.text

    def test_contact_form(self, client, test_db):
        assert client.get("/contact").status_code == 200
        response = client.post(
            "/contact",
            data={"name": "Asha", "email": "asha@example.com", "message": "Looking for a 2 BHK"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert test_db.query(ContactInquiry).count() == 1

        response = client.post("/contact", data={"name": "", "message": ""})
        assert response.status_code == 400
        assert "Name and message are required." in response.text


class TestAdminCmsPage:
    def test_requires_admin_session(self, client):
        response = client.get("/admin/cms", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/admin/login?next=/admin/cms"

    def test_create_toggle_delete(self, client, test_db, admin_user, login):
        login("admin", "/admin/login")

        response = client.post(
            "/admin/cms/testimonials",
            data={"client_name": "Ravi", "review": "Great service", "rating": "4"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/admin/cms#testimonials"
        testimonial = test_db.query(Testimonial).one()
        assert testimonial.is_active is False

        client.post(f"/admin/cms/testimonials/{testimonial.id}/toggle")
        test_db.refresh(testimonial)
        assert testimonial.is_active is True

        page = client.get("/admin/cms")
        assert page.status_code == 200
        assert "Ravi" in page.text

        client.post(f"/admin/cms/testimonials/{testimonial.id}/delete")
        assert test_db.query(Testimonial).count() == 0

    def test_company_info_form(self, client, test_db, admin_user, login):
        login("admin", "/admin/login")
        client.post("/admin/cms/company-info", data={"company_name": "EstateHub", "city": ""})
        client.post("/admin/cms/company-info", data={"city": "Pune"})
        info = cms.fetch_company_info(test_db)
        test_db.refresh(info)
        assert (info.company_name, info.city) == ("EstateHub", "Pune")
