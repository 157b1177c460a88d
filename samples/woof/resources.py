"""String, image and palette lookup for the Woof sample.

Strings and drawables are JSON tables bundled next to this module in
``res/``.  A strings overlay (e.g. a translation) can be layered on top;
its entries win id by id and anything it lacks falls back to the bundle.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from textual.theme import Theme

from .models import DrawableTable, ImageAsset, Palette, StringTable

logger = logging.getLogger(__name__)

RES_DIR = Path(__file__).parent / "res"
DEFAULT_STRINGS = RES_DIR / "strings.json"
DEFAULT_DRAWABLES = RES_DIR / "drawables.json"

# Resource tables are tiny; anything this large is a packaging mistake.
_MAX_JSON_BYTES = 1024 * 1024

LIGHT_PALETTE = Palette(
    dark=False,
    primary="#f8f9fa",
    on_primary="#202124",
    secondary="#5f6368",
    background="#ceead6",
    surface="#e6f4ea",
    on_surface="#202124",
)

DARK_PALETTE = Palette(
    dark=True,
    primary="#202124",
    on_primary="#ffffff",
    secondary="#f1f3f4",
    background="#007b83",
    surface="#129eaf",
    on_surface="#ffffff",
)

LIGHT_THEME_NAME = "woof-light"
DARK_THEME_NAME = "woof-dark"


class ResourceNotFoundError(LookupError):
    """Raised when a string or image id has no entry in its table."""

    def __init__(self, kind: str, resource_id: str) -> None:
        super().__init__(f"No {kind} resource named {resource_id!r}")
        self.kind = kind
        self.resource_id = resource_id


def resolve_path(path: str | Path | None, default: Path) -> Path:
    """Return an absolute Path, falling back to *default*."""
    p = Path(path) if path else default
    return p.expanduser().resolve()


def _read_json(path: Path, model: type[BaseModel]) -> Any:
    size = path.stat().st_size
    if size > _MAX_JSON_BYTES:
        raise RuntimeError(
            f"Resource file {path} is {size / 1024:.0f} KB, "
            f"exceeding the {_MAX_JSON_BYTES / 1024:.0f} KB safety limit."
        )
    raw = path.read_text(encoding="utf-8")
    table = model.model_validate_json(raw)
    logger.debug("Loaded %d entries from %s", len(table.root), path)
    return table.root


def load_strings(path: str | Path | None = None) -> dict[str, str]:
    """Read and validate a strings table."""
    return _read_json(resolve_path(path, DEFAULT_STRINGS), StringTable)


def load_drawables(path: str | Path | None = None) -> dict[str, ImageAsset]:
    """Read and validate a drawables table."""
    return _read_json(resolve_path(path, DEFAULT_DRAWABLES), DrawableTable)


def palette_to_theme(palette: Palette) -> Theme:
    """Build the Textual theme matching *palette*."""
    typo = palette.typography
    return Theme(
        name=DARK_THEME_NAME if palette.dark else LIGHT_THEME_NAME,
        primary=palette.primary,
        secondary=palette.secondary,
        background=palette.background,
        surface=palette.surface,
        foreground=palette.on_surface,
        dark=palette.dark,
        variables={
            "woof-on-primary": palette.on_primary,
            "woof-title-style": typo.title,
            "woof-name-style": typo.name,
            "woof-label-style": typo.label,
            "woof-body-style": typo.body,
        },
    )


class Resources:
    """Lookup surface used by the UI: strings, images and palettes."""

    def __init__(
        self,
        strings: dict[str, str] | None = None,
        drawables: dict[str, ImageAsset] | None = None,
    ) -> None:
        self._strings = load_strings() if strings is None else dict(strings)
        self._drawables = load_drawables() if drawables is None else dict(drawables)

    @classmethod
    def load(cls, strings_overlay: str | Path | None = None) -> Resources:
        """Bundled tables, with *strings_overlay* applied on top if given."""
        strings = load_strings()
        if strings_overlay:
            overlay = load_strings(strings_overlay)
            strings.update(overlay)
            logger.info("Applied %d string overrides from %s", len(overlay), strings_overlay)
        return cls(strings=strings, drawables=load_drawables())

    def resolve_string(self, resource_id: str, *format_args: Any) -> str:
        try:
            template = self._strings[resource_id]
        except KeyError:
            raise ResourceNotFoundError("string", resource_id) from None
        return template.format(*format_args) if format_args else template

    def resolve_image(self, resource_id: str) -> ImageAsset:
        try:
            return self._drawables[resource_id]
        except KeyError:
            raise ResourceNotFoundError("image", resource_id) from None

    @staticmethod
    def resolve_palette(dark: bool) -> Palette:
        return DARK_PALETTE if dark else LIGHT_PALETTE
