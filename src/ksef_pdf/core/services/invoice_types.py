from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

INVOICE_TYPES_ENV = "KSEF_PDF_INVOICE_TYPES"

# TRodzajFaktury
CORRECTION_KIND = "KOR"

DEFAULT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "VAT": "Faktura",
        "KOR": "Faktura korygująca",
        "ZAL": "Faktura zaliczkowa",
        "ROZ": "Faktura rozliczeniowa",
        "UPR": "Faktura uproszczona",
        "KOR_ZAL": "Faktura korygująca zaliczkowa",
        "KOR_ROZ": "Faktura korygująca rozliczeniowa",
    }
)


@dataclass(frozen=True)
class InvoiceTypeLabels:
    labels: Mapping[str, str] = field(default_factory=lambda: DEFAULT_LABELS)
    default: str = "Faktura"
    collective_correction: str = "Faktura korygująca zbiorcza"
    placeholder: str = "???"


DEFAULT_INVOICE_TYPE_LABELS = InvoiceTypeLabels()


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def resolve_invoice_type_label(
    kind: str | None,
    corrected_period: str | None = None,
    labels: InvoiceTypeLabels | None = None,
) -> str:
    """
    Map an invoice kind code to the title printed in the header.

    - no kind (no invoice at all) -> generic label
    - KOR with a corrected period -> collective correction
    - unknown code -> placeholder, never an exception

    Without an explicit table, $KSEF_PDF_INVOICE_TYPES is consulted.
    """
    table = labels or load_invoice_type_labels()
    if _is_blank(kind):
        return table.default
    code = str(kind).strip()
    if code == CORRECTION_KIND and not _is_blank(corrected_period):
        return table.collective_correction
    label = table.labels.get(code)
    if label is None:
        logger.warning("Unknown invoice kind %r, using placeholder label", code)
        return table.placeholder
    return label


def load_invoice_type_labels(path: Path | str | None = None) -> InvoiceTypeLabels:
    """
    Load the label table from JSON, merged over the built-in one.

    Path order: argument, then $KSEF_PDF_INVOICE_TYPES. Missing or broken
    files fall back to the built-in table.
    """
    raw_path = path or os.environ.get(INVOICE_TYPES_ENV)
    if not raw_path:
        return DEFAULT_INVOICE_TYPE_LABELS
    target = Path(raw_path)
    if not target.exists():
        logger.debug("Invoice type table %s not found, using defaults", target)
        return DEFAULT_INVOICE_TYPE_LABELS
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load invoice type table %s: %s", target, exc)
        return DEFAULT_INVOICE_TYPE_LABELS
    if not isinstance(data, dict):
        logger.warning("Invoice type table %s is not a JSON object, ignoring", target)
        return DEFAULT_INVOICE_TYPE_LABELS

    merged = dict(DEFAULT_LABELS)
    custom = data.get("labels", {})
    if isinstance(custom, dict):
        for code, label in custom.items():
            code = str(code).strip()
            if not code or label is None or not str(label).strip():
                logger.warning("Skipping invoice type entry %r: %r in %s", code, label, target)
                continue
            merged[code] = str(label)

    base = DEFAULT_INVOICE_TYPE_LABELS
    return InvoiceTypeLabels(
        labels=MappingProxyType(merged),
        default=str(data.get("default") or base.default),
        collective_correction=str(data.get("collective_correction") or base.collective_correction),
        placeholder=str(data.get("placeholder") or base.placeholder),
    )
