"""Pydantic models for the Woof sample.

Records are frozen: the catalog is built once at import time and never
mutated.  Resource ids are plain strings resolved through
:class:`samples.woof.resources.Resources`.
"""

from __future__ import annotations

from string import Formatter
from typing import Optional

from pydantic import BaseModel, ConfigDict, RootModel, field_validator


class Dog(BaseModel):
    """A single dog profile shown as one card."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int
    image: str
    hobby_description: str


class ImageAsset(BaseModel):
    """Terminal stand-in for a bitmap: a short glyph plus an optional tint."""

    model_config = ConfigDict(frozen=True)

    glyph: str
    color: Optional[str] = None


class Typography(BaseModel):
    """Text styles keyed by role, in Textual ``text-style`` syntax."""

    model_config = ConfigDict(frozen=True)

    title: str = "bold"
    name: str = "bold"
    label: str = "bold"
    body: str = "none"


class Palette(BaseModel):
    """Colours and typography for one of the light / dark modes."""

    model_config = ConfigDict(frozen=True)

    dark: bool
    primary: str
    on_primary: str
    secondary: str
    background: str
    surface: str
    on_surface: str
    typography: Typography = Typography()


class StringTable(RootModel[dict[str, str]]):
    """id → format template.  Only positional fields (``{0}``, ``{}``) are allowed."""

    @field_validator("root")
    @classmethod
    def _positional_fields_only(cls, table: dict[str, str]) -> dict[str, str]:
        for key, template in table.items():
            for _, field, _, _ in Formatter().parse(template):
                if field is None:
                    continue
                head = field.split(".", 1)[0].split("[", 1)[0]
                if head and not head.isdigit():
                    raise ValueError(
                        f"String {key!r} uses named field {{{field}}}; "
                        "only positional fields are supported"
                    )
        return table


class DrawableTable(RootModel[dict[str, ImageAsset]]):
    """id → image asset."""
