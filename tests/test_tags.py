"""Tests for the low-level tag builders."""
from __future__ import annotations

from markupsafe import Markup

from bootstrap_ui.tags import attr_name, content_tag, join, link_to, merge_attrs, render_attrs


def test_attr_name_maps_python_keywords() -> None:
    assert attr_name("class_") == "class"
    assert attr_name("type_") == "type"
    assert attr_name("data_toggle") == "data-toggle"
    assert attr_name("data-dismiss") == "data-dismiss"


def test_render_attrs_skips_none_and_false() -> None:
    rendered = render_attrs({"id": None, "hidden": False, "disabled": True, "class": "btn"})
    assert rendered == ' disabled="disabled" class="btn"'


def test_render_attrs_expands_data_mapping_and_lists() -> None:
    rendered = render_attrs({"data": {"toggle": "modal", "remote_url": "/x"}, "class_": ["a", None, "b"]})
    assert rendered == ' data-toggle="modal" data-remote-url="/x" class="a b"'


def test_content_tag_escapes_text_but_keeps_markup() -> None:
    assert content_tag("span", "<b>") == "<span>&lt;b&gt;</span>"
    assert content_tag("span", Markup("<b>x</b>")) == "<span><b>x</b></span>"


def test_content_tag_escapes_attribute_values() -> None:
    assert content_tag("a", "x", title='say "hi"') == '<a title="say &#34;hi&#34;">x</a>'


def test_link_to_puts_href_first() -> None:
    assert link_to("Home", "/", class_="nav") == '<a href="/" class="nav">Home</a>'


def test_merge_attrs_prefers_overrides_even_when_none() -> None:
    merged = merge_attrs({"class": "btn", "type": "submit"}, {"type_": None})
    assert merged == {"class": "btn", "type": None}


def test_join_skips_none() -> None:
    assert join(None, Markup("<i></i>"), "a&b") == "<i></i>a&amp;b"
