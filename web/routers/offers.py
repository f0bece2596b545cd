"""
Sales offer PDF routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse, Response

from web.models import PropertyOffer
from web.services.offer_builder import build_document, content_disposition, offer_filename
from web.services.pdf_renderer import render_pdf

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-pdf")
async def generate_pdf(
    offer: PropertyOffer,
    offer_type: Optional[str] = Query(None, alias="type"),
):
    """
    Render the sales offer brochure for a property and return it as a PDF download.

    ?type=apartment selects the apartment details page; anything else gets the villa layout.
    """
    try:
        html = build_document(offer, offer_type)
        pdf_bytes = await render_pdf(html)

        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={
                "Content-Disposition": content_disposition(offer_filename(offer)),
            },
        )
    except Exception:
        logger.exception(f"PDF generation failed for unit {offer.unit_code}")
        return PlainTextResponse("Error generating PDF", status_code=500)
