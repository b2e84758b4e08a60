"""Admin CMS routes: one CRUD resource per content table."""

from collections.abc import Callable

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from estatehub.core.database import get_db
from estatehub.core.errors import not_found
from estatehub.schemas import cms as schemas
from estatehub.services import cms as cms_service

router = APIRouter()


def register_resource(
    path: str,
    schema_in: type[BaseModel],
    schema_out: type[BaseModel],
    fetch: Callable,
    create: Callable,
    update: Callable,
    delete: Callable | None = None,
) -> None:
    """Add list/create/update/delete routes for one CMS table."""

    @router.get(f"/{path}", response_model=list[schema_out], name=f"list_{path}")
    def list_items(db: Session = Depends(get_db)):
        return [schema_out.model_validate(item) for item in fetch(db)]

    @router.post(f"/{path}", response_model=schema_out, status_code=status.HTTP_201_CREATED, name=f"create_{path}")
    def create_item(data: schema_in, db: Session = Depends(get_db)):  # type: ignore[valid-type]
        return schema_out.model_validate(create(db, data))

    @router.patch(f"/{path}/{{item_id}}", response_model=schema_out, name=f"update_{path}")
    def update_item(item_id: int, data: schema_in, db: Session = Depends(get_db)):  # type: ignore[valid-type]
        return schema_out.model_validate(update(db, item_id, data))

    if delete is not None:

        @router.delete(f"/{path}/{{item_id}}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{path}")
        def delete_item(item_id: int, db: Session = Depends(get_db)) -> None:
            delete(db, item_id)


register_resource(
    "site-sections",
    schemas.SiteSectionIn,
    schemas.SiteSectionResponse,
    cms_service.fetch_site_sections,
    cms_service.upsert_site_section,
    cms_service.update_site_section,
    cms_service.delete_site_section,
)
register_resource(
    "services",
    schemas.ServiceIn,
    schemas.ServiceResponse,
    cms_service.fetch_services,
    cms_service.create_service,
    cms_service.update_service,
    cms_service.delete_service,
)
register_resource(
    "team-members",
    schemas.TeamMemberIn,
    schemas.TeamMemberResponse,
    cms_service.fetch_team_members,
    cms_service.create_team_member,
    cms_service.update_team_member,
    cms_service.delete_team_member,
)
register_resource(
    "testimonials",
    schemas.TestimonialIn,
    schemas.TestimonialResponse,
    cms_service.fetch_testimonials,
    cms_service.create_testimonial,
    cms_service.update_testimonial,
    cms_service.delete_testimonial,
)
register_resource(
    "faqs",
    schemas.FaqIn,
    schemas.FaqResponse,
    cms_service.fetch_faqs,
    cms_service.create_faq,
    cms_service.update_faq,
    cms_service.delete_faq,
)
register_resource(
    "company-stats",
    schemas.CompanyStatIn,
    schemas.CompanyStatResponse,
    cms_service.fetch_company_stats,
    cms_service.create_company_stat,
    cms_service.update_company_stat,
    cms_service.delete_company_stat,
)
register_resource(
    "legal-pages",
    schemas.LegalPageIn,
    schemas.LegalPageResponse,
    cms_service.fetch_legal_pages,
    cms_service.upsert_legal_page,
    cms_service.update_legal_page,
    cms_service.delete_legal_page,
)
register_resource(
    "hero-sections",
    schemas.HeroSectionIn,
    schemas.HeroSectionResponse,
    cms_service.fetch_hero_sections,
    cms_service.create_hero_section,
    cms_service.update_hero_section,
    cms_service.delete_hero_section,
)


@router.get("/company-info", response_model=schemas.CompanyInfoResponse)
def get_company_info(db: Session = Depends(get_db)) -> schemas.CompanyInfoResponse:
    """The current company info record."""
    info = cms_service.fetch_company_info(db)
    if not info:
        raise not_found("Company info")
    return schemas.CompanyInfoResponse.model_validate(info)


@router.post("/company-info", response_model=schemas.CompanyInfoResponse, status_code=status.HTTP_201_CREATED)
def create_company_info(
    data: schemas.CompanyInfoIn,
    db: Session = Depends(get_db),
) -> schemas.CompanyInfoResponse:
    return schemas.CompanyInfoResponse.model_validate(cms_service.create_company_info(db, data))


@router.patch("/company-info/{info_id}", response_model=schemas.CompanyInfoResponse)
def update_company_info(
    info_id: int,
    data: schemas.CompanyInfoIn,
    db: Session = Depends(get_db),
) -> schemas.CompanyInfoResponse:
    return schemas.CompanyInfoResponse.model_validate(cms_service.update_company_info(db, info_id, data))


@router.get("/contact-inquiries", response_model=list[schemas.ContactInquiryResponse])
def list_contact_inquiries(db: Session = Depends(get_db)) -> list[schemas.ContactInquiryResponse]:
    """Messages from the contact form, newest first."""
    return [schemas.ContactInquiryResponse.model_validate(i) for i in cms_service.fetch_contact_inquiries(db)]
