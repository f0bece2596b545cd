"""
Request models for the sales offer service.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PropertyOffer(BaseModel):
    """
    Property data posted to /generate-pdf.

    Only the keys the service branches on are declared; every other key is
    kept as-is and handed to the page templates.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Left untyped: values reach the templates exactly as posted
    unit_code: Any = None
    # A non-list value is ignored rather than rejected
    img_url: Any = Field(default=None, alias="imgUrl")
    add_contact_page: Any = Field(default=None, alias="addContactPage")

    @property
    def images(self) -> list:
        """Image URLs, one brochure page each."""
        if isinstance(self.img_url, list):
            return self.img_url
        return []

    @property
    def wants_contact_page(self) -> bool:
        return bool(self.add_contact_page)

    def template_context(self) -> dict:
        """Template variables, using the same keys the caller posted."""
        return self.model_dump(by_alias=True, exclude_none=True)
