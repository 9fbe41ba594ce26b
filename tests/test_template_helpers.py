"""Tests for the Jinja integration of the helpers."""
from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
from jinja2 import Environment

from bootstrap_ui import template_helpers


def _request(path: str, query: str = ""):
    return SimpleNamespace(url=SimpleNamespace(path=path, query=query))


@pytest.fixture()
def env() -> Environment:
    return template_helpers.install(Environment(autoescape=True))


def test_install_registers_helpers_and_namespace(env: Environment, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    template_helpers.install(Environment(autoescape=True))
    assert "Installed 8 bootstrap helpers" in caplog.text
    assert env.from_string("{{ bootstrap.badge(4) }}").render() == '<span class="badge ">4</span>'
    assert env.from_string("{{ button('Go') }}").render() == '<button class="btn" type="submit">Go</button>'


def test_request_fullpath_includes_query() -> None:
    assert template_helpers.request_fullpath(_request("/inbox")) == "/inbox"
    assert template_helpers.request_fullpath(_request("/inbox", "page=2")) == "/inbox?page=2"


def test_sidebar_link_reads_request_from_context(env: Environment) -> None:
    template = env.from_string("{{ sidebar_link('Inbox', '/inbox', icon='icon-inbox') }}")
    active = template.render(request=_request("/inbox"))
    inactive = template.render(request=_request("/"))
    assert active.startswith('<li class="active">')
    assert "icon-inbox icon-white" in active
    assert inactive.startswith("<li>")


def test_sidebar_link_explicit_current_path_wins(env: Environment) -> None:
    template = env.from_string("{{ sidebar_link('Inbox', '/inbox', current_path='/inbox') }}")
    assert template.render(request=_request("/")).startswith('<li class="active">')


def test_sidebar_link_without_request(env: Environment) -> None:
    assert env.from_string("{{ sidebar_link('Inbox', '/inbox') }}").render() == '<li><a href="/inbox">Inbox</a></li>'


def test_modal_call_block_uses_block_as_body(env: Environment) -> None:
    template = env.from_string(
        "{% call modal('confirm', title='Sure?') %}<p>{{ message }}</p>{% endcall %}"
    )
    html = template.render(message="Fish & chips")
    assert '<div class="modal-body"><p>Fish &amp; chips</p></div>' in html
    assert "<h3>Sure?</h3>" in html
