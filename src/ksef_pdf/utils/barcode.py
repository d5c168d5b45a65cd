"""
Barcode helper.
Turns a payload (usually the KSeF number) into an inline PNG data URI.
"""

from __future__ import annotations

import base64
import io
import os

import barcode
import qrcode
from barcode.writer import ImageWriter

BARCODE_FORMAT_ENV = "KSEF_PDF_BARCODE_FORMAT"
DEFAULT_SYMBOLOGY = "code128"
SYMBOLOGIES = ("code128", "qr")

PNG_DATA_URI_PREFIX = "data:image/png;base64,"


def _normalize_symbology(value: str | None) -> str:
    return (value or "").strip().lower() or DEFAULT_SYMBOLOGY


def default_symbology() -> str:
    return _normalize_symbology(os.environ.get(BARCODE_FORMAT_ENV))


def _code128_png(data: str) -> bytes:
    code = barcode.get_barcode_class("code128")(data, writer=ImageWriter())
    buf = io.BytesIO()
    code.write(buf, options={"write_text": False, "module_height": 10.0, "quiet_zone": 2.0})
    return buf.getvalue()


def _qr_png(data: str) -> bytes:
    qr = qrcode.QRCode(border=1, box_size=10)
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def generate_barcode_png_base64(data: str, symbology: str | None = None) -> str:
    """
    Return the barcode as base64-encoded PNG.
    Raises ValueError for an unsupported symbology; encoder errors propagate.
    """
    kind = _normalize_symbology(symbology) if symbology and symbology.strip() else default_symbology()
    if kind == "code128":
        png = _code128_png(data)
    elif kind == "qr":
        png = _qr_png(data)
    else:
        raise ValueError(f"Unsupported barcode symbology: {kind} (expected one of {', '.join(SYMBOLOGIES)})")
    return base64.b64encode(png).decode("ascii")


def make_barcode_data_uri(data: str, symbology: str | None = None) -> str:
    return PNG_DATA_URI_PREFIX + generate_barcode_png_base64(data, symbology)
