# services/api/seopages/schemas_pages.py

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# --------------------------
# Content blocks (tagged on "type")
# --------------------------

class _Open(BaseModel):
    # unknown keys ride along untouched
    model_config = ConfigDict(extra="allow")

class TextInline(_Open):
    type: Literal["text"]
    value: str

class LinkInline(_Open):
    type: Literal["link"]
    href: str
    label: str

Inline = Annotated[Union[TextInline, LinkInline], Field(discriminator="type")]

class ParagraphBlock(_Open):
    type: Literal["p"]
    text: str

class ListBlock(_Open):
    type: Literal["ul"]
    items: list[str]

class SubheadingBlock(_Open):
    type: Literal["h3"]
    text: str

class RichParagraphBlock(_Open):
    type: Literal["p_rich"]
    inlines: list[Inline]

Block = Annotated[
    Union[ParagraphBlock, ListBlock, SubheadingBlock, RichParagraphBlock],
    Field(discriminator="type"),
]

BLOCK_ADAPTER = TypeAdapter(Block)
