from __future__ import annotations

import io
import textwrap

import pytest

from mdapi.conf import Registry
from mdapi.parse import Parser
from mdapi.render import MarkdownRenderer, Options, Sink


@pytest.fixture
def registry() -> Registry:
    """Provide an isolated registry so registrations don't leak between tests."""
    return Registry()


@pytest.fixture
def parse(registry):
    """Parse dedented source text into comments bound to the test registry."""
    def _parse(source: str):
        return Parser(registry).parse_source(textwrap.dedent(source), file='test.js')
    return _parse


@pytest.fixture
def render(registry):
    """Render comments as markdown and return the output."""
    def _render(comments, **options) -> str:
        buf = io.StringIO()
        renderer = MarkdownRenderer(Options.create(**options), registry)
        renderer.render(comments, Sink(buf, keep_open=True))
        return buf.getvalue()
    return _render
