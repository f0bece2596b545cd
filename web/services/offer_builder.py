"""
Sales offer document builder.
Selects page templates for a property, renders them with Jinja2 and
assembles the multi-page HTML document handed to the PDF renderer.
"""

import logging
from typing import Optional
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape
from markupsafe import Markup

from web.config import get_static_dir, get_templates_dir
from web.models import PropertyOffer

logger = logging.getLogger(__name__)

COVER_TEMPLATE = "page-1.html"
APARTMENT_DETAILS_TEMPLATE = "page-2-apt.html"
VILLA_DETAILS_TEMPLATE = "page-2-villa.html"
IMAGE_TEMPLATE = "page-3.html"
CONTACT_TEMPLATE = "page-4.html"
DOCUMENT_TEMPLATE = "document.html"
STYLESHEET = "css/offer.css"

APARTMENT = "apartment"

# filename -> compiled template, kept for the life of the process
_templates_cache: dict = {}
_environment: Optional[Environment] = None


def format_value(value):
    """
    Print JSON scalars the way they were posted: null as blank, booleans as
    true/false, whole-number floats without a trailing .0.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def get_environment() -> Environment:
    """Lazily create the Jinja2 environment over the offer templates directory."""
    global _environment
    if _environment is None:
        templates_dir = get_templates_dir()
        _environment = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            finalize=format_value,
        )
        logger.debug(f"Loading offer templates from {templates_dir}")
    return _environment


def get_compiled_template(filename: str) -> Template:
    """
    Return the compiled template for a filename, compiling it on first use.

    Two requests racing on the same filename may both compile it; the second
    assignment simply replaces the first.
    """
    template = _templates_cache.get(filename)
    if template is None:
        template = get_environment().get_template(filename)
        _templates_cache[filename] = template
        logger.info(f"Compiled template {filename}")
    return template


def clear_template_cache() -> None:
    """Drop compiled templates so they are re-read from disk on next use."""
    global _environment
    _templates_cache.clear()
    _environment = None


def details_template_for(offer_type: Optional[str]) -> str:
    """Page 2 layout: apartment when asked for, villa otherwise."""
    if offer_type == APARTMENT:
        return APARTMENT_DETAILS_TEMPLATE
    return VILLA_DETAILS_TEMPLATE


def wrap_page(fragment: str) -> str:
    return f'<div class="pdf-page">{fragment}</div>'


def render_pages(offer: PropertyOffer, offer_type: Optional[str] = None) -> list:
    """
    Render every brochure page for a property, in document order.

    Args:
        offer: Property posted by the caller
        offer_type: Value of the ?type= flag ("apartment" or anything else for villa)

    Returns:
        List of page fragments, each wrapped in a .pdf-page div
    """
    context = offer.template_context()
    pages = []

    pages.append(wrap_page(get_compiled_template(COVER_TEMPLATE).render(context)))

    details_template = get_compiled_template(details_template_for(offer_type))
    pages.append(wrap_page(details_template.render(context)))

    images = offer.images
    if images:
        image_template = get_compiled_template(IMAGE_TEMPLATE)
        for img_src in images:
            pages.append(wrap_page(image_template.render(imgSrc=img_src)))

    if offer.wants_contact_page:
        contact_template = get_compiled_template(CONTACT_TEMPLATE)
        pages.append(wrap_page(contact_template.render()))

    return pages


def load_stylesheet() -> Markup:
    """Brochure CSS, inlined so the document renders without fetching /static."""
    stylesheet_path = get_static_dir() / STYLESHEET
    return Markup(stylesheet_path.read_text(encoding="utf-8"))


def build_document(offer: PropertyOffer, offer_type: Optional[str] = None) -> str:
    """Assemble the full HTML document for a property's sales offer."""
    pages = render_pages(offer, offer_type)
    logger.info(
        f"Built sales offer for unit {offer.unit_code} "
        f"({len(pages)} pages, layout={details_template_for(offer_type)})"
    )

    document = get_compiled_template(DOCUMENT_TEMPLATE)
    return document.render(
        pages=Markup("\n".join(pages)),
        stylesheet=load_stylesheet(),
    )


def offer_filename(offer: PropertyOffer) -> str:
    """Download filename for the generated PDF."""
    unit_code = format_value(offer.unit_code)
    if unit_code == "":
        unit_code = "unknown"
    return f"sales-offer-{unit_code}.pdf"


def content_disposition(filename: str) -> str:
    """
    Attachment header value for a download filename.

    Header values must stay ASCII, so a filename outside it gets an
    underscored fallback plus an RFC 5987 filename* parameter.
    """
    fallback = "".join(
        c if " " <= c <= "~" and c not in '"\\' else "_"
        for c in filename
    )
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
