from __future__ import annotations

import logging
from typing import Callable, Optional

from ksef_pdf.core.models.content import ContentBlock, ImageBlock, TextBlock
from ksef_pdf.core.models.invoice import AdditionalData, Invoice, corrected_period_of
from ksef_pdf.core.services.invoice_types import InvoiceTypeLabels, resolve_invoice_type_label
from ksef_pdf.utils.barcode import make_barcode_data_uri

logger = logging.getLogger(__name__)

BarcodeEncoder = Callable[[str], str]

BARCODE_WIDTH = 180


def should_include_barcode(payload: str | None) -> bool:
    return isinstance(payload, str) and bool(payload.strip())


def build_barcode_block(payload: str | None, encoder: BarcodeEncoder | None = None) -> ImageBlock | None:
    if not should_include_barcode(payload):
        logger.debug("No barcode payload, skipping barcode image")
        return None
    encode = encoder or make_barcode_data_uri
    return ImageBlock(image=encode(payload), width=BARCODE_WIDTH)


def build_header_lines(invoice: Optional[Invoice], additional_data: Optional[AdditionalData]) -> list[str]:
    """Descriptive lines printed under the invoice title."""
    number = (invoice.invoice_number if invoice else None) or ""
    lines = [f"Numer faktury: {number}"]
    ksef_number = additional_data.ksef_number if additional_data else None
    if ksef_number and ksef_number.strip():
        lines.append(f"Numer KSeF: {ksef_number}")
    return lines


def generate_header(
    invoice: Optional[Invoice] = None,
    additional_data: Optional[AdditionalData] = None,
    *,
    labels: InvoiceTypeLabels | None = None,
    encoder: BarcodeEncoder | None = None,
) -> list[ContentBlock]:
    """
    Build the header block of the invoice printout.

    Order: invoice type title, invoice number, KSeF number (if any),
    barcode image (if additional_data carries a non-blank payload).
    """
    title = resolve_invoice_type_label(
        invoice.invoice_kind if invoice else None,
        corrected_period_of(invoice),
        labels,
    )
    blocks: list[ContentBlock] = [TextBlock(title, style="invoice_type")]

    lines = build_header_lines(invoice, additional_data)
    blocks.append(TextBlock(lines[0], style="invoice_number"))
    for line in lines[1:]:
        blocks.append(TextBlock(line, style="ksef_number"))

    barcode = build_barcode_block(additional_data.barcode if additional_data else None, encoder)
    if barcode is not None:
        blocks.append(barcode)
    return blocks
