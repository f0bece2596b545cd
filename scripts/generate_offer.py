#!/usr/bin/env python3
"""
Generate a sales offer PDF from a property JSON file.
Uses the same templates and renderer as the web service, without starting it.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from web.models import PropertyOffer
from web.services.offer_builder import build_document, offer_filename
from web.services.pdf_renderer import render_pdf_sync


def load_offer(json_path: Path) -> PropertyOffer:
    """Read a property JSON file into an offer."""
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {json_path}")
    return PropertyOffer.model_validate(data)


def generate_offer(json_path: Path, offer_type: str = None, output: Path = None,
                   html_only: bool = False) -> Path:
    """
    Build the offer document for a property file and write it to disk.

    Args:
        json_path: Property JSON file
        offer_type: "apartment" or "villa"
        output: Destination file (defaults to sales-offer-<unit_code>.pdf/.html)
        html_only: Write the assembled HTML instead of printing a PDF

    Returns:
        Path of the written file
    """
    offer = load_offer(json_path)
    html = build_document(offer, offer_type)

    if output is None:
        output = Path(offer_filename(offer))
        if html_only:
            output = output.with_suffix(".html")

    if html_only:
        output.write_text(html, encoding="utf-8")
    else:
        output.write_bytes(render_pdf_sync(html))

    return output


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Generate a sales offer PDF")
    parser.add_argument("property_file", help="Path to the property JSON file")
    parser.add_argument("--type", "-t", dest="offer_type",
                       choices=["apartment", "villa"], default="villa",
                       help="Details page layout (default: villa)")
    parser.add_argument("--output", "-o", help="Output file path")
    parser.add_argument("--html", action="store_true",
                       help="Write the assembled HTML instead of a PDF")
    args = parser.parse_args()

    json_path = Path(args.property_file)
    if not json_path.exists():
        print(f"Error: Property file not found: {json_path}")
        sys.exit(1)

    output = Path(args.output) if args.output else None

    try:
        written = generate_offer(json_path, args.offer_type, output, html_only=args.html)
    except (ValueError, json.JSONDecodeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Sales offer generated: {written}")


if __name__ == "__main__":
    main()
