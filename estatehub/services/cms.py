"""CMS service: editable content blocks of the public site."""

from datetime import UTC, datetime
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session
from structlog import get_logger

from estatehub.core.database import Base
from estatehub.core.errors import bad_request, commit_or_400, not_found
from estatehub.models.cms import (
    CompanyInfo,
    CompanyStat,
    ContactInquiry,
    Faq,
    HeroSection,
    LegalPage,
    Service,
    SiteSection,
    Testimonial,
    TeamMember,
)
from estatehub.schemas.cms import (
    CompanyInfoIn,
    CompanyStatIn,
    ContactInquiryCreate,
    FaqIn,
    HeroSectionIn,
    LegalPageIn,
    ServiceIn,
    SiteSectionIn,
    TeamMemberIn,
    TestimonialIn,
)

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _get_or_404(db: Session, model: type[ModelT], item_id: int, label: str) -> ModelT:
    item = db.query(model).filter(model.id == item_id).first()
    if not item:
        raise not_found(label)
    return item


def _apply(item: Base, data: BaseModel, exclude: set[str] | None = None) -> None:
    """Copy explicitly set fields from a payload onto a row."""
    for field, value in data.model_dump(exclude_unset=True, exclude=exclude).items():
        setattr(item, field, value)


def _save(db: Session, item: ModelT) -> ModelT:
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def _delete(db: Session, model: type[Base], item_id: int, label: str) -> None:
    item = _get_or_404(db, model, item_id, label)
    db.delete(item)
    db.commit()
    logger.info("CMS item deleted", table=model.__tablename__, item_id=item_id)


def _display_order(data: FaqIn | CompanyStatIn, creating: bool = False) -> dict:
    """Map ``sort_order`` onto ``display_order`` when it was sent.

    On create a null ``sort_order`` leaves a sent ``display_order`` in place.
    """
    if "sort_order" in data.model_fields_set and not (creating and data.sort_order is None):
        return {"display_order": data.sort_order}
    if "display_order" in data.model_fields_set:
        return {"display_order": data.display_order}
    return {}


# Site sections


def fetch_site_sections(db: Session, active_only: bool = False) -> list[SiteSection]:
    """Get site sections ordered by key."""
    query = db.query(SiteSection)
    if active_only:
        query = query.filter(SiteSection.is_active.is_(True))
    return query.order_by(SiteSection.section_key).all()


def fetch_site_section(db: Session, section_key: str) -> SiteSection | None:
    """Get a site section by key."""
    return db.query(SiteSection).filter(SiteSection.section_key == section_key).first()


def upsert_site_section(db: Session, data: SiteSectionIn) -> SiteSection:
    """Create or update the section identified by ``section_key``."""
    key = (data.section_key or "").strip()
    if not key:
        raise bad_request("Section key is required.")
    section = fetch_site_section(db, key) or SiteSection(section_key=key)
    _apply(section, data, exclude={"section_key"})
    if section.is_active is None:
        section.is_active = True
    section.updated_at = datetime.now(UTC)
    return _save(db, section)


def update_site_section(db: Session, section_id: int, data: SiteSectionIn) -> SiteSection:
    """Update a site section."""
    section = _get_or_404(db, SiteSection, section_id, "Site section")
    _apply(section, data)
    section.updated_at = datetime.now(UTC)
    commit_or_400(db, "Section key already exists")
    db.refresh(section)
    return section


def delete_site_section(db: Session, section_id: int) -> None:
    """Delete a site section."""
    _delete(db, SiteSection, section_id, "Site section")


# Services


def fetch_services(db: Session, active_only: bool = False) -> list[Service]:
    """Get services, oldest first."""
    query = db.query(Service)
    if active_only:
        query = query.filter(Service.is_active.is_(True))
    return query.order_by(Service.created_at.asc(), Service.id.asc()).all()


def create_service(db: Session, data: ServiceIn) -> Service:
    """Create a service."""
    service = Service()
    _apply(service, data)
    return _save(db, service)


def update_service(db: Session, service_id: int, data: ServiceIn) -> Service:
    """Update a service."""
    service = _get_or_404(db, Service, service_id, "Service")
    _apply(service, data)
    return _save(db, service)


def delete_service(db: Session, service_id: int) -> None:
    """Delete a service."""
    _delete(db, Service, service_id, "Service")


# Team members


def fetch_team_members(db: Session, active_only: bool = False) -> list[TeamMember]:
    """Get team members, oldest first."""
    query = db.query(TeamMember)
    if active_only:
        query = query.filter(TeamMember.is_active.is_(True))
    return query.order_by(TeamMember.created_at.asc(), TeamMember.id.asc()).all()


def create_team_member(db: Session, data: TeamMemberIn) -> TeamMember:
    """Create a team member."""
    member = TeamMember()
    _apply(member, data)
    return _save(db, member)


def update_team_member(db: Session, member_id: int, data: TeamMemberIn) -> TeamMember:
    """Update a team member."""
    member = _get_or_404(db, TeamMember, member_id, "Team member")
    _apply(member, data)
    return _save(db, member)


def delete_team_member(db: Session, member_id: int) -> None:
    """Delete a team member."""
    _delete(db, TeamMember, member_id, "Team member")


# Testimonials


def fetch_testimonials(db: Session, active_only: bool = False) -> list[Testimonial]:
    """Testimonials, newest first; new ones stay hidden until activated."""
    query = db.query(Testimonial)
    if active_only:
        query = query.filter(Testimonial.is_active.is_(True))
    return query.order_by(Testimonial.created_at.desc(), Testimonial.id.desc()).all()


def get_testimonial(db: Session, testimonial_id: int) -> Testimonial:
    """Get a testimonial by id."""
    return _get_or_404(db, Testimonial, testimonial_id, "Testimonial")


def create_testimonial(db: Session, data: TestimonialIn) -> Testimonial:
    """Create a testimonial."""
    if data.rating is not None and not 1 <= data.rating <= 5:
        raise bad_request("Rating must be between 1 and 5.")
    testimonial = Testimonial()
    _apply(testimonial, data)
    return _save(db, testimonial)


def update_testimonial(db: Session, testimonial_id: int, data: TestimonialIn) -> Testimonial:
    """Update a testimonial."""
    if data.rating is not None and not 1 <= data.rating <= 5:
        raise bad_request("Rating must be between 1 and 5.")
    testimonial = _get_or_404(db, Testimonial, testimonial_id, "Testimonial")
    _apply(testimonial, data)
    return _save(db, testimonial)


def delete_testimonial(db: Session, testimonial_id: int) -> None:
    """Delete a testimonial."""
    _delete(db, Testimonial, testimonial_id, "Testimonial")


# FAQs


def fetch_faqs(db: Session, active_only: bool = False) -> list[Faq]:
    """Get FAQs by display order; unordered ones come last."""
    query = db.query(Faq)
    if active_only:
        query = query.filter(Faq.is_active.is_(True))
    return query.order_by(
        Faq.display_order.is_(None),
        Faq.display_order.asc(),
        Faq.created_at.asc(),
    ).all()


def create_faq(db: Session, data: FaqIn) -> Faq:
    """Create an FAQ."""
    faq = Faq()
    _apply(faq, data, exclude={"sort_order", "display_order"})
    for field, value in _display_order(data, creating=True).items():
        setattr(faq, field, value)
    return _save(db, faq)


def update_faq(db: Session, faq_id: int, data: FaqIn) -> Faq:
    """Update an FAQ."""
    faq = _get_or_404(db, Faq, faq_id, "FAQ")
    _apply(faq, data, exclude={"sort_order", "display_order"})
    for field, value in _display_order(data).items():
        setattr(faq, field, value)
    return _save(db, faq)


def delete_faq(db: Session, faq_id: int) -> None:
    """Delete an FAQ."""
    _delete(db, Faq, faq_id, "FAQ")


# Company stats


def fetch_company_stats(db: Session) -> list[CompanyStat]:
    """Get company stats by display order; unordered ones come last."""
    return db.query(CompanyStat).order_by(
        CompanyStat.display_order.is_(None),
        CompanyStat.display_order.asc(),
        CompanyStat.created_at.asc(),
    ).all()


def create_company_stat(db: Session, data: CompanyStatIn) -> CompanyStat:
    """Create a company stat."""
    stat = CompanyStat()
    _apply(stat, data, exclude={"sort_order", "display_order"})
    for field, value in _display_order(data, creating=True).items():
        setattr(stat, field, value)
    return _save(db, stat)


def update_company_stat(db: Session, stat_id: int, data: CompanyStatIn) -> CompanyStat:
    """Update a company stat."""
    stat = _get_or_404(db, CompanyStat, stat_id, "Company stat")
    _apply(stat, data, exclude={"sort_order", "display_order"})
    for field, value in _display_order(data).items():
        setattr(stat, field, value)
    return _save(db, stat)


def delete_company_stat(db: Session, stat_id: int) -> None:
    """Delete a company stat."""
    _delete(db, CompanyStat, stat_id, "Company stat")


# Company info


def fetch_company_info(db: Session) -> CompanyInfo | None:
    """The most recent company info record."""
    return db.query(CompanyInfo).order_by(CompanyInfo.created_at.desc(), CompanyInfo.id.desc()).first()


def create_company_info(db: Session, data: CompanyInfoIn) -> CompanyInfo:
    """Create a company info record."""
    info = CompanyInfo()
    _apply(info, data)
    return _save(db, info)


def update_company_info(db: Session, info_id: int, data: CompanyInfoIn) -> CompanyInfo:
    """Update a company info record."""
    info = _get_or_404(db, CompanyInfo, info_id, "Company info")
    _apply(info, data)
    return _save(db, info)


# Legal pages


def fetch_legal_pages(db: Session) -> list[LegalPage]:
    """Get legal pages ordered by key."""
    return db.query(LegalPage).order_by(LegalPage.page_key).all()


def fetch_legal_page(db: Session, page_key: str) -> LegalPage | None:
    """Get a legal page by key."""
    return db.query(LegalPage).filter(LegalPage.page_key == page_key).first()


def upsert_legal_page(db: Session, data: LegalPageIn) -> LegalPage:
    """Create or update a legal page keyed on ``page_key`` (or ``slug``)."""
    key = (data.page_key or data.slug or "").strip()
    if not key:
        raise bad_request("Page key is required.")
    page = fetch_legal_page(db, key) or LegalPage(page_key=key)
    _apply(page, data, exclude={"page_key", "slug"})
    page.updated_at = datetime.now(UTC)
    return _save(db, page)


def update_legal_page(db: Session, page_id: int, data: LegalPageIn) -> LegalPage:
    """Update a legal page."""
    page = _get_or_404(db, LegalPage, page_id, "Legal page")
    _apply(page, data, exclude={"page_key", "slug"})
    key = (data.page_key or data.slug or "").strip()
    if key:
        page.page_key = key
    page.updated_at = datetime.now(UTC)
    commit_or_400(db, "Page key already exists")
    db.refresh(page)
    return page


def delete_legal_page(db: Session, page_id: int) -> None:
    """Delete a legal page."""
    _delete(db, LegalPage, page_id, "Legal page")


# Contact inquiries


def fetch_contact_inquiries(db: Session) -> list[ContactInquiry]:
    """Get contact inquiries, newest first."""
    return db.query(ContactInquiry).order_by(ContactInquiry.created_at.desc(), ContactInquiry.id.desc()).all()


def create_contact_inquiry(db: Session, data: ContactInquiryCreate) -> ContactInquiry:
    """Store a message from the public contact form."""
    if not data.name.strip() or not data.message.strip():
        raise bad_request("Name and message are required.")
    inquiry = ContactInquiry(
        name=data.name.strip(),
        email=data.email,
        phone=data.phone,
        subject=data.subject,
        message=data.message.strip(),
        status="new",
    )
    _save(db, inquiry)
    logger.info("Contact inquiry received", inquiry_id=inquiry.id)
    return inquiry


# Hero sections


def fetch_hero_sections(db: Session) -> list[HeroSection]:
    """Get hero sections, newest first."""
    return db.query(HeroSection).order_by(HeroSection.created_at.desc(), HeroSection.id.desc()).all()


def fetch_latest_hero(db: Session) -> HeroSection | None:
    """Get the most recent hero section."""
    return db.query(HeroSection).order_by(HeroSection.created_at.desc(), HeroSection.id.desc()).first()


def create_hero_section(db: Session, data: HeroSectionIn) -> HeroSection:
    """Create a hero section."""
    hero = HeroSection()
    _apply(hero, data)
    return _save(db, hero)


def update_hero_section(db: Session, hero_id: int, data: HeroSectionIn) -> HeroSection:
    """Update a hero section."""
    hero = _get_or_404(db, HeroSection, hero_id, "Hero section")
    _apply(hero, data)
    return _save(db, hero)


def delete_hero_section(db: Session, hero_id: int) -> None:
    """Delete a hero section."""
    _delete(db, HeroSection, hero_id, "Hero section")
