"""Shared fixtures: a one-dog catalog and resources that can render it."""

import pytest

from samples.woof.models import Dog, ImageAsset
from samples.woof.resources import Resources, load_drawables, load_strings


@pytest.fixture
def fido() -> Dog:
    return Dog(name="fido_name", age=2, image="fido", hobby_description="fido_hobby")


@pytest.fixture
def rex() -> Dog:
    return Dog(name="rex_name", age=11, image="fido", hobby_description="rex_hobby")


@pytest.fixture
def resources() -> Resources:
    """Bundled tables plus entries for the test dogs."""
    strings = load_strings()
    strings.update(
        {
            "fido_name": "Fido",
            "fido_hobby": "Fetch",
            "rex_name": "Rex",
            "rex_hobby": "Napping",
        }
    )
    drawables = load_drawables()
    drawables["fido"] = ImageAsset(glyph="(o.o)", color="#aa7744")
    return Resources(strings=strings, drawables=drawables)
