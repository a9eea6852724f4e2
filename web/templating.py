"""
Jinja2 environment for server-rendered pages.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from shared.config import get_settings

from .formatted_date import DEFAULT_FALLBACK, FormattedDate, format_relative

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


def formatted_date_filter(value, fmt: str = "date", fallback: str = DEFAULT_FALLBACK):
    """Jinja filter: ``{{ value | formatted_date("time") }}``. Empty values render the fallback."""
    if value is None or value == "":
        return fallback
    return FormattedDate(value, fmt, fallback, locale=get_settings().default_locale)


def relative_date_filter(value, fmt: str = "date") -> str:
    """Jinja filter: ``{{ value | relative_date }}`` -> "3d ago"."""
    if value is None or value == "":
        return ""
    return format_relative(value, fmt)


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["formatted_date"] = formatted_date_filter
templates.env.filters["relative_date"] = relative_date_filter
templates.env.globals["default_locale"] = get_settings().default_locale
