from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class TextBlock:
    """A run of text; `style` names a style defined by the renderer."""

    text: str
    style: str | None = None


@dataclass(frozen=True)
class ImageBlock:
    """An inline image, `image` is a data URI (data:image/png;base64,...)."""

    image: str
    width: int | None = None


ContentBlock = Union[TextBlock, ImageBlock]


def to_document_content(blocks: Iterable[ContentBlock]) -> list[dict]:
    """Convert blocks to the plain dicts the document renderer consumes."""
    out: list[dict] = []
    for block in blocks:
        if isinstance(block, TextBlock):
            item = {"text": block.text, "style": block.style}
        elif isinstance(block, ImageBlock):
            item = {"image": block.image, "width": block.width}
        else:
            raise TypeError(f"Unsupported content block: {block!r}")
        out.append({k: v for k, v in item.items() if v is not None})
    return out
