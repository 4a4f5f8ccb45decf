import dataclasses
import warnings

import pytest

from chromaspace.colors import ColorContext
from chromaspace.errors import ContextDefaultWarning


def test_create_canonicalizes():
    context = ColorContext.create("601", "D50")
    assert context.working_space == "NTSC"
    assert context.white_point == "D50"


def test_effective_white_follows_working_space():
    assert ColorContext.create("ProPhoto").white_point_name() == "D50"
    assert ColorContext.create("NTSC").white_point_name() == "C"
    assert ColorContext.create("NTSC", "D65").white_point_name() == "D65"


def test_override_precedence():
    stored = ColorContext.create("NTSC", "D65")
    assert stored.override() == stored
    assert stored.override(working_space="sRGB").working_space == "sRGB"
    assert stored.override(white_point="A").white_point == "A"
    assert stored.override(white_point="A").working_space == "NTSC"


def test_defaults_warn():
    context = ColorContext()
    with pytest.warns(ContextDefaultWarning):
        assert context.rgb_space().name == "sRGB"
    with pytest.warns(ContextDefaultWarning):
        assert context.white_point_name() == "D65"


def test_set_context_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        context = ColorContext.create("sRGB")
        context.rgb_space()
        context.reference_white()


def test_reference_white():
    assert ColorContext.create("CIE").reference_white() == pytest.approx([1.0, 1.0, 1.0], abs=1e-5)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ColorContext().working_space = "sRGB"
