"""Jinja2 template configuration."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from estatehub.core.config import settings
from estatehub.services.formatting import format_location, format_price, get_first_image
from estatehub.services.slug import to_property_slug
from estatehub.web.dependencies import get_flash_messages

# Template directory is at estatehub/templates/
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

templates.env.filters["price"] = format_price
templates.env.filters["location"] = format_location
templates.env.filters["first_image"] = get_first_image
templates.env.globals["property_slug"] = to_property_slug
templates.env.globals["get_flash_messages"] = get_flash_messages
templates.env.globals["site_name"] = settings.PROJECT_NAME
