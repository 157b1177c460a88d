"""Woof — Textual app listing dogs as expandable cards.

Launch with:  python -m samples.woof
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.widgets import Button, Footer, Label, Static

from .data import DOGS
from .models import Dog, ImageAsset
from .resources import (
    DARK_THEME_NAME,
    LIGHT_PALETTE,
    LIGHT_THEME_NAME,
    Resources,
    palette_to_theme,
)

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────

# Same glyph in both states; the button does not show direction.
EXPAND_GLYPH = "⌄"
_ABOUT_FADE_IN: float = 0.3


# ── Header Bar ───────────────────────────────────────────────


class WoofTopAppBar(Horizontal):
    """Logo and app title on the primary colour."""

    def __init__(self, logo: ImageAsset, title: str, logo_description: str = "", **kw: Any) -> None:
        super().__init__(**kw)
        self.logo = logo
        self.title_text = title
        self._logo_description = logo_description

    def compose(self) -> ComposeResult:
        logo = Static(self.logo.glyph, id="logo")
        if self._logo_description:
            logo.tooltip = self._logo_description
        yield logo
        yield Label(self.title_text, id="app-title")


# ── Card pieces ──────────────────────────────────────────────


class DogIcon(Static):
    """Round-framed thumbnail.  Decorative, so it carries no tooltip."""

    def __init__(self, image: ImageAsset, **kw: Any) -> None:
        super().__init__(image.glyph, **kw)
        self.image = image
        if image.color:
            self.styles.color = image.color


class DogInformation(Vertical):
    """Name over "N years old"."""

    def __init__(self, dog_name: str, age_line: str, **kw: Any) -> None:
        super().__init__(**kw)
        self.dog_name = dog_name
        self.age_line = age_line

    def compose(self) -> ComposeResult:
        yield Label(self.dog_name, classes="dog-name")
        yield Label(self.age_line, classes="dog-age")


class DogAbout(Vertical):
    """The "About" block shown under an expanded card."""

    def __init__(self, label: str, description: str, **kw: Any) -> None:
        super().__init__(**kw)
        self.label = label
        self.description = description

    def compose(self) -> ComposeResult:
        yield Label(self.label, classes="about-label")
        yield Label(self.description, classes="about-text")

    def on_mount(self) -> None:
        self.styles.opacity = 0.0
        self.styles.animate("opacity", value=1.0, duration=_ABOUT_FADE_IN)


# ── Row Component ────────────────────────────────────────────


class DogItem(Vertical):
    """One card: thumbnail, name/age, spacer and expand button.

    ``expanded`` belongs to this widget alone; a freshly created card is
    always collapsed.
    """

    expanded: reactive[bool] = reactive(False, init=False)

    def __init__(self, dog: Dog, resources: Resources, **kw: Any) -> None:
        super().__init__(**kw)
        self.dog = dog
        self._resources = resources

    def compose(self) -> ComposeResult:
        res = self._resources
        with Horizontal(classes="dog-row"):
            yield DogIcon(res.resolve_image(self.dog.image), classes="dog-icon")
            yield DogInformation(
                res.resolve_string(self.dog.name),
                res.resolve_string("years_old", self.dog.age),
                classes="dog-info",
            )
            yield Static(classes="spacer")
            button = Button(EXPAND_GLYPH, classes="expand-button")
            button.tooltip = res.resolve_string("expand_button_content_description")
            yield button

    @on(Button.Pressed, ".expand-button")
    def _on_expand_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.toggle()

    def toggle(self) -> None:
        self.expanded = not self.expanded

    def watch_expanded(self, expanded: bool) -> None:
        if expanded:
            self.mount(
                DogAbout(
                    self._resources.resolve_string("about"),
                    self._resources.resolve_string(self.dog.hobby_description),
                )
            )
        else:
            self.query(DogAbout).remove()
        logger.debug("%s %s", self.id, "expanded" if expanded else "collapsed")


# ── Main App ─────────────────────────────────────────────────


class WoofApp(App[None]):
    """Header bar over a scrolling list of dog cards."""

    TITLE = "Woof"

    CSS = """
    WoofTopAppBar {
        dock: top;
        height: 3;
        width: 100%;
        align: left middle;
        background: $primary;
        color: $woof-on-primary;
    }

    #logo {
        width: auto;
        padding: 0 1;
    }

    #app-title {
        text-style: $woof-title-style;
    }

    #dog-list {
        height: 1fr;
        background: $background;
    }

    DogItem {
        height: auto;
        margin: 1 1 0 1;
        background: $surface;
        border: round $secondary;
    }

    .dog-row {
        height: auto;
        width: 100%;
    }

    .dog-icon {
        width: 11;
        height: 3;
        border: round $secondary;
        content-align: center middle;
    }

    .dog-info {
        width: auto;
        height: auto;
        padding: 0 1;
    }

    .dog-name {
        text-style: $woof-name-style;
    }

    .spacer {
        width: 1fr;
        height: 1;
    }

    .expand-button {
        min-width: 5;
        width: 5;
        color: $secondary;
    }

    DogAbout {
        height: auto;
        padding: 0 2 1 2;
    }

    .about-label {
        text-style: $woof-label-style;
    }

    .about-text {
        text-style: $woof-body-style;
    }
    """

    BINDINGS = [
        Binding("t", "toggle_theme", "Light/Dark"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Sequence[Dog] | None = None,
        resources: Resources | None = None,
        dark: bool = False,
        **kw: Any,
    ) -> None:
        super().__init__(**kw)
        self.catalog: tuple[Dog, ...] = tuple(DOGS if catalog is None else catalog)
        self.resources = Resources.load() if resources is None else resources
        self._start_dark = dark
        for dark_mode in (False, True):
            self.register_theme(palette_to_theme(self.resources.resolve_palette(dark_mode)))
        self.title = self.resources.resolve_string("app_name")

    def get_theme_variable_defaults(self) -> dict[str, str]:
        # Consulted before our themes are active, e.g. on the first CSS parse.
        return dict(palette_to_theme(LIGHT_PALETTE).variables)

    # ── compose ──────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        res = self.resources
        yield WoofTopAppBar(
            res.resolve_image("ic_woof_logo"),
            res.resolve_string("app_name"),
            res.resolve_string("logo_content_description"),
        )
        with VerticalScroll(id="dog-list"):
            for index, dog in enumerate(self.catalog):
                yield DogItem(dog, res, id=f"dog-{index}")
        yield Footer()

    def on_mount(self) -> None:
        self.theme = DARK_THEME_NAME if self._start_dark else LIGHT_THEME_NAME

    # ── actions ──────────────────────────────────────────────

    def action_toggle_theme(self) -> None:
        self.theme = LIGHT_THEME_NAME if self.theme == DARK_THEME_NAME else DARK_THEME_NAME
        logger.debug("Theme switched to %s", self.theme)
