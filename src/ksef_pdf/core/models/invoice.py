from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Union


@dataclass(frozen=True)
class Fa1:
    """Invoice section of an FA(1) document."""

    SCHEMA: ClassVar[str] = "FA(1)"

    invoice_kind: str | None = None  # RodzajFaktury
    invoice_number: str | None = None  # P_2


@dataclass(frozen=True)
class Fa2:
    """Invoice section of an FA(2) document."""

    SCHEMA: ClassVar[str] = "FA(2)"

    invoice_kind: str | None = None
    invoice_number: str | None = None
    corrected_period: str | None = None  # OkresFaKorygowanej


@dataclass(frozen=True)
class Fa3:
    """Invoice section of an FA(3) document."""

    SCHEMA: ClassVar[str] = "FA(3)"

    invoice_kind: str | None = None
    invoice_number: str | None = None
    corrected_period: str | None = None


Invoice = Union[Fa1, Fa2, Fa3]

_VARIANTS: dict[str, type] = {cls.SCHEMA: cls for cls in (Fa1, Fa2, Fa3)}


@dataclass(frozen=True)
class AdditionalData:
    """Data supplied next to the invoice, e.g. from the KSeF API."""

    ksef_number: str | None = None  # nrKSeF
    barcode: str | None = None


def corrected_period_of(invoice: Optional[Invoice]) -> str | None:
    if isinstance(invoice, (Fa2, Fa3)):
        return invoice.corrected_period
    return None


def text_value(node: Any) -> str | None:
    """
    Unwrap a value from the parser output.
    Elements come either as ``{"_text": value}`` or as bare scalars.
    """
    if node is None:
        return None
    if isinstance(node, Mapping):
        node = node.get("_text")
        if node is None:
            return None
    return str(node)


def invoice_from_mapping(data: Mapping | None, schema: str = "FA(3)") -> Invoice:
    cls = _VARIANTS.get(schema)
    if cls is None:
        raise ValueError(f"Unsupported invoice schema: {schema}")
    d = data or {}
    fields = {
        "invoice_kind": text_value(d.get("RodzajFaktury")),
        "invoice_number": text_value(d.get("P_2")),
    }
    if cls is not Fa1:
        fields["corrected_period"] = text_value(d.get("OkresFaKorygowanej"))
    return cls(**fields)


def additional_data_from_mapping(data: Mapping | None) -> AdditionalData:
    d = data or {}
    return AdditionalData(
        ksef_number=text_value(d.get("nrKSeF")),
        barcode=text_value(d.get("barcode")),
    )
