"""Tests for the alternative output formats."""

from __future__ import annotations

import io
import json

import yaml

from mdapi.render import RENDERERS, HTMLRenderer, Options, Sink
from mdapi.render.json import JSONRenderer
from mdapi.render.yaml import YAMLRenderer

SOURCE = """
    /**
     * Create a new component.
     *
     * @function create
     * @param {String} [name=x] The
     *   component name.
     */
"""


def dump(cls, registry, comments, **options) -> str:
    buf = io.StringIO()
    cls(Options.create(**options), registry).render(comments, Sink(buf, keep_open=True))
    return buf.getvalue()


def test_renderer_names() -> None:
    assert list(RENDERERS) == ['markdown', 'html', 'json', 'yaml']


def test_json(registry, parse) -> None:
    comments = parse(SOURCE)
    ast = json.loads(dump(JSONRenderer, registry, comments))
    assert ast == [{
        'description': 'Create a new component.',
        'line': 2,
        'tags': [
            {'tag': 'function', 'name': 'create', 'type': '', 'description': '', 'optional': False},
            {'tag': 'param', 'name': 'name', 'type': 'String', 'description': 'The\ncomponent name.',
             'optional': True, 'default': 'x'},
        ],
    }]


def test_json_indent(registry, parse) -> None:
    comments = parse(SOURCE)
    assert '\n' not in dump(JSONRenderer, registry, comments, indent=0)
    assert '\n    {' in dump(JSONRenderer, registry, comments, indent=4)


def test_yaml(registry, parse) -> None:
    comments = parse(SOURCE)
    output = dump(YAMLRenderer, registry, comments)
    assert 'description: |' in output
    ast = yaml.safe_load(output)
    assert ast[0]['description'] == 'Create a new component.'
    assert ast[0]['tags'][1]['description'] == 'The\ncomponent name.'
    assert ast[0]['tags'][1]['default'] == 'x'


def test_html(registry, parse) -> None:
    comments = parse(SOURCE)
    output = dump(HTMLRenderer, registry, comments)
    assert output.startswith('<!DOCTYPE html>')
    assert '<title>API</title>' in output
    assert '<h1>API</h1>' in output
    assert '<h3>create</h3>' in output
    assert 'class="language-javascript"' in output
    assert '<p>Create a new component.</p>' in output


def test_html_title_escaped(registry, parse) -> None:
    output = dump(HTMLRenderer, registry, parse(SOURCE), heading='A & B')
    assert '<title>A &amp; B</title>' in output


def test_html_without_heading_uses_default_title(registry, parse) -> None:
    output = dump(HTMLRenderer, registry, parse(SOURCE), heading=False)
    assert '<title>API</title>' in output
    assert '<h1>' not in output
