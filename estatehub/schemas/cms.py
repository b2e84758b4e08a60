"""CMS Pydantic schemas.

Every ``*In`` schema doubles as create and partial-update payload; the
service applies only the fields that were explicitly set.
"""

from datetime import datetime

from pydantic import BaseModel


class SiteSectionIn(BaseModel):
    section_key: str | None = None
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    image_url: str | None = None
    button_text: str | None = None
    button_link: str | None = None
    is_active: bool | None = None


class SiteSectionResponse(SiteSectionIn):
    id: int
    section_key: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ServiceIn(BaseModel):
    title: str | None = None
    description: str | None = None
    icon: str | None = None
    is_active: bool | None = None


class ServiceResponse(ServiceIn):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class TeamMemberIn(BaseModel):
    name: str | None = None
    role: str | None = None
    bio: str | None = None
    phone: str | None = None
    email: str | None = None
    image_url: str | None = None
    experience_years: int | None = None
    is_active: bool | None = None


class TeamMemberResponse(TeamMemberIn):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class TestimonialIn(BaseModel):
    client_name: str | None = None
    client_image: str | None = None
    review: str | None = None
    rating: int | None = None
    is_active: bool | None = None


class TestimonialResponse(TestimonialIn):
    id: int
    is_active: bool = False
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class FaqIn(BaseModel):
    """FAQ payload; ``sort_order`` is accepted as an alias of display_order."""

    question: str | None = None
    answer: str | None = None
    sort_order: int | None = None
    display_order: int | None = None
    is_active: bool | None = None


class FaqResponse(BaseModel):
    id: int
    question: str | None
    answer: str | None
    display_order: int | None
    is_active: bool
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class CompanyStatIn(BaseModel):
    """Company stat payload; ``sort_order`` maps onto display_order."""

    label: str | None = None
    value: str | None = None
    suffix: str | None = None
    icon: str | None = None
    sort_order: int | None = None
    display_order: int | None = None


class CompanyStatResponse(BaseModel):
    id: int
    label: str | None
    value: str | None
    suffix: str | None
    icon: str | None
    display_order: int | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class CompanyInfoIn(BaseModel):
    company_name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    phone: str | None = None
    email: str | None = None
    google_map_embed: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None


class CompanyInfoResponse(CompanyInfoIn):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class LegalPageIn(BaseModel):
    """Legal page payload; ``slug`` is accepted when ``page_key`` is missing."""

    page_key: str | None = None
    slug: str | None = None
    title: str | None = None
    content: str | None = None


class LegalPageResponse(BaseModel):
    id: int
    page_key: str
    title: str | None
    content: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ContactInquiryCreate(BaseModel):
    name: str
    email: str | None = None
    phone: str | None = None
    subject: str | None = None
    message: str


class ContactInquiryResponse(BaseModel):
    id: int
    name: str | None
    email: str | None
    phone: str | None
    subject: str | None
    message: str | None
    status: str | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class HeroSectionIn(BaseModel):
    title: str | None = None
    sub_title: str | None = None
    file_url: str | None = None
    media_type: str | None = None
    logo_url: str | None = None


class HeroSectionResponse(HeroSectionIn):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
