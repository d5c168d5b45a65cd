import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("KSEF_PDF_INVOICE_TYPES", raising=False)
    monkeypatch.delenv("KSEF_PDF_BARCODE_FORMAT", raising=False)


@pytest.fixture
def vat_invoice():
    from ksef_pdf.core.models.invoice import Fa1

    return Fa1(invoice_kind="VAT", invoice_number="FV/2025/01")


@pytest.fixture
def collective_correction():
    from ksef_pdf.core.models.invoice import Fa3

    return Fa3(invoice_kind="KOR", invoice_number="FKZ/2025/05", corrected_period="2025-01")


@pytest.fixture
def fake_encoder():
    """Encoder stand-in recording the payloads it was asked to encode."""
    calls: list[str] = []

    def encode(payload: str) -> str:
        calls.append(payload)
        return "data:image/png;base64,RkFLRQ=="

    encode.calls = calls
    return encode
