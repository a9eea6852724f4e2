"""
Server-rendered pages (Jinja2) and presentation helpers.
"""

from .formatted_date import DateFormat, FormattedDate, format_date, format_relative

__all__ = [
    "DateFormat",
    "FormattedDate",
    "format_date",
    "format_relative",
]
