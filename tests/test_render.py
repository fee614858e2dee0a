"""Tests for the markdown renderer and the built-in render routines."""

from __future__ import annotations

import io
import sys

import pytest

import mdapi
from mdapi.render import MarkdownRenderer, Options, RenderError, Sink
from mdapi.tags import Tag


def test_function(parse, render) -> None:
    comments = parse(
        """
        /**
         * Create a new component.
         * @function create
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '### create\n\n'
        '```javascript\ncreate()\n```\n\n'
        'Create a new component.\n\n'
    )


def test_static_function_with_returns_and_deprecation(parse, render) -> None:
    comments = parse(
        """
        /**
         * A static function declaration.
         * @static factory
         * @returns a new component.
         * @deprecated use create instead.
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '### #factory\n\n'
        '```javascript\nstatic factory()\n```\n\n'
        'A static function declaration.\n\n'
        'Returns a new component.\n\n'
        '> **Deprecated:** use create instead.\n\n'
    )


def test_module_class_and_member(parse, render) -> None:
    comments = parse(
        """
        /** @module API Documents */

        /**
         * A UI component.
         * @class Component
         */

        /**
         * Render it.
         * @function draw
         * @member
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '## API Documents\n\n'
        '### Component\n\n'
        'A UI component.\n\n'
        '#### .draw\n\n'
        '```javascript\nComponent.prototype.draw()\n```\n\n'
        'Render it.\n\n'
    )


def test_class_outside_module_owns_members(parse, render) -> None:
    comments = parse(
        """
        /** @class Foo */

        /**
         * @function bar
         * @member
         * @param {Object} [opts] Options.
         * @param {Function} cb Callback.
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '## Foo\n\n'
        '### .bar\n\n'
        '```javascript\nFoo.prototype.bar([opts], cb)\n```\n\n'
        '* `opts` Object Options.\n'
        '* `cb` Function Callback.\n\n'
    )


def test_member_with_explicit_owner(parse, render) -> None:
    comments = parse(
        """
        /** @class Foo */
        /**
         * @function bar
         * @member Other
         */
        """
    )
    assert '```javascript\nOther.prototype.bar()\n```' in render(comments)


def test_constructor_with_inheritance_and_sections(parse, render) -> None:
    comments = parse(
        """
        /**
         * Creates a component.
         * @constructor Component
         * @inherits EventEmitter Object
         * @param {Object} opts Options.
         * @option {String} name Component name.
         * @throws TypeError If opts is invalid.
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '## Component < EventEmitter < Object\n\n'
        '```javascript\nnew Component(opts)\n```\n\n'
        'Creates a component.\n\n'
        '* `opts` Object Options.\n\n'
        '### Options\n\n'
        '* `name` String Component name.\n\n'
        '### Throws\n\n'
        '* `TypeError` If opts is invalid.\n\n'
    )


def test_constructor_nests_following_blocks(parse, render) -> None:
    comments = parse(
        """
        /** @constructor Widget */
        /**
         * @function paint
         * @member
         */
        """
    )
    output = render(comments)
    assert '## Widget\n\n```javascript\nnew Widget()\n```' in output
    assert '### .paint\n\n```javascript\nWidget.prototype.paint()\n```' in output


def test_function_events(parse, render) -> None:
    comments = parse(
        """
        /**
         * @function start
         * @event ready Fired when ready.
         * @event {Error} error Fired on failure.
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '### start\n\n'
        '```javascript\nstart()\n```\n\n'
        '#### Events\n\n'
        '* `ready` Fired when ready.\n'
        '* `error` Error Fired on failure.\n\n'
    )


def test_class_with_inheritance(parse, render) -> None:
    comments = parse(
        """
        /**
         * @class Foo
         * @inherits Bar Baz
         */
        """
    )
    assert render(comments) == '# API\n\n## Foo < Bar < Baz\n\n'


def test_class_with_usage(parse, render) -> None:
    comments = parse(
        """
        /**
         * A widget.
         * @class Widget
         * @usage
         * var w = new Widget();
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '## Widget\n\n'
        '```javascript\nvar w = new Widget();\n```\n\n'
        'A widget.\n\n'
    )


def test_access_modifiers_in_signatures(parse, render) -> None:
    comments = parse(
        """
        /**
         * @function reset
         * @protected
         */
        /**
         * @function load
         * @public
         * @static
         */
        /**
         * @constructor Thing
         * @public
         */
        """
    )
    output = render(comments)
    assert '### reset\n\n```javascript\nprotected reset()\n```' in output
    assert '### #load\n\n```javascript\npublic static load()\n```' in output
    assert '## Thing\n\n```javascript\nnew Thing()\n```' in output


def test_properties(parse, render) -> None:
    comments = parse(
        """
        /**
         * Default name.
         * @property {String} BAZ
         * @default baz
         */

        /**
         * @constant ZAR
         * @default foo
         */

        /**
         * @property FOO
         * @static
         */
        """
    )
    assert render(comments) == (
        '# API\n\n'
        '### BAZ\n\n'
        '```javascript\nString BAZ = baz;\n```\n\n'
        'Default name.\n\n'
        '### ZAR\n\n'
        '```javascript\nconst ZAR = foo;\n```\n\n'
        '### FOO\n\n'
        '```javascript\nstatic FOO\n```\n\n'
    )


def test_meta_and_see(parse, render) -> None:
    comments = parse(
        """
        /**
         * @function create
         * @author muji
         * @version 1.0
         * @see https://example.com
         */
        """
    )
    assert render(comments).endswith(
        '* **Author** `muji`\n'
        '* **Version** `1.0`\n\n'
        '* [example.com](https://example.com)\n\n'
    )


def test_without_heading_and_language(parse, render) -> None:
    comments = parse('/** @function create */')
    assert render(comments, heading=False, lang=False) == '## create\n\n```\ncreate()\n```\n\n'


def test_custom_heading_and_level(parse, render) -> None:
    comments = parse('/** @function create */')
    output = render(comments, heading='Reference', level=2)
    assert output.startswith('## Reference\n\n#### create\n\n')


def test_usage_block(parse, render) -> None:
    comments = parse(
        """
        /**
         * Example usage.
         * @usage
         * var x = create();
         */
        """
    )
    assert render(comments, heading=False) == 'Example usage.\n\n```javascript\nvar x = create();\n```\n\n'


def test_usage_block_with_code_as_description(parse, render) -> None:
    comments = parse(
        """
        /**
         * var x = 1;
         * @usage
         */
        """
    )
    assert render(comments, heading=False) == '```javascript\nvar x = 1;\n```\n\n'


def test_usage_in_function_block(parse, render) -> None:
    comments = parse(
        """
        /**
         * @function create
         * @example create();
         */
        """
    )
    assert render(comments, heading=False) == (
        '## create\n\n'
        '```javascript\ncreate()\n```\n\n'
        '```javascript\ncreate();\n```\n\n'
    )


def test_blocks_without_type_or_name_are_skipped(parse, render) -> None:
    comments = parse(
        """
        /**
         * Just some text.
         * @author muji
         */
        /** @function */
        """
    )
    assert render(comments) == '# API\n\n'


def test_excluded_blocks_never_reach_routines(registry, parse, render) -> None:
    calls = []
    registry.register_renderer('function', lambda renderer, type, comment: calls.append(type.name))
    comments = parse(
        """
        /**
         * @function hidden
         * @private
         */
        /** @function shown */
        """
    )
    render(comments)
    assert calls == ['shown']
    registry.exclude = None
    render(comments)
    assert calls == ['shown', 'hidden', 'shown']


def test_custom_renderer(registry, parse, render) -> None:
    seen = []

    def render_custom(renderer, type, comment):
        seen.append((type, comment.description))
        renderer.heading(type.name, renderer.state.depth)
        renderer.paragraph(comment.description)

    table = registry.register_renderer('custom', render_custom)
    assert 'custom' in table
    assert 'custom' in registry.names
    comments = parse(
        """
        /**
         * Custom tag description.
         * @custom {Type} Name Description
         */
        """
    )
    assert render(comments) == '# API\n\n### Name\n\nCustom tag description.\n\n'
    assert seen == [(Tag(id='custom', name='Name', type='Type', description='Description'),
                     'Custom tag description.')]


def test_custom_renderer_replaces_builtin(registry, parse, render) -> None:
    registry.register_renderer('property', lambda renderer, type, comment: renderer.paragraph('prop ' + type.name))
    comments = parse('/** @property FOO */')
    assert render(comments, heading=False) == 'prop FOO\n\n'


def test_cues_disabled(registry, parse, render) -> None:
    registry.cues = None
    comments = parse(
        """
        /** @static factory */
        /**
         * @function bar
         * @member Foo
         */
        """
    )
    output = render(comments, heading=False)
    assert '## factory()\n\n```javascript\nstatic factory()\n```' in output
    assert '## bar()\n\n```javascript\nbar()\n```' in output


class BrokenStream(io.StringIO):
    def write(self, s):
        raise OSError('disk full')


def test_sink_failure_aborts_rendering(registry, parse) -> None:
    calls = []
    registry.register_renderer('custom', lambda renderer, type, comment: calls.append(type))
    comments = parse(
        """
        /** @function first */
        /** @custom second */
        """
    )
    renderer = MarkdownRenderer(Options.create(heading=False), registry)
    stream = BrokenStream()
    with pytest.raises(RenderError, match='disk full'):
        renderer.render(comments, Sink(stream))
    assert calls == []
    assert renderer.state is None
    assert stream.closed


class BrokenCloseStream(io.StringIO):
    failed = False

    def close(self):
        if not self.failed:
            self.failed = True
            raise OSError('close failed')
        super().close()


def test_close_failure_does_not_mask_render_error(registry, parse) -> None:
    def render_failing(renderer, type, comment):
        raise KeyError(type.name)

    registry.register_renderer('function', render_failing)
    renderer = MarkdownRenderer(Options(), registry)
    with pytest.raises(KeyError, match='first'):
        renderer.render(parse('/** @function first */'), Sink(BrokenCloseStream()))


def test_close_failure_raises_render_error(registry, parse) -> None:
    renderer = MarkdownRenderer(Options(), registry)
    with pytest.raises(RenderError, match='close failed'):
        renderer.render(parse('/** @function first */'), Sink(BrokenCloseStream()))


def test_generate_closes_stream_on_failure(parse) -> None:
    stream = BrokenStream()
    with pytest.raises(RenderError):
        mdapi.generate(parse('/** @function a */'), stream)
    assert stream.closed


def test_stream_closed_after_render(parse, registry) -> None:
    buf = io.StringIO()
    MarkdownRenderer(Options(), registry).render(parse('/** @function a */'), Sink(buf))
    assert buf.closed


def test_stdout_is_flushed_not_closed(monkeypatch, parse, registry) -> None:
    buf = io.StringIO()
    monkeypatch.setattr(sys, 'stdout', buf)
    sink = Sink()
    assert sink.is_stdout
    MarkdownRenderer(Options(), registry).render(parse('/** @function a */'), sink)
    assert not buf.closed
    assert '### a' in buf.getvalue()


def test_sink_close_is_idempotent() -> None:
    buf = io.StringIO()
    sink = Sink(buf)
    sink.close()
    sink.close()
    assert buf.closed


def test_option_coercion() -> None:
    assert Options.create(level='abc').level == 1
    assert Options.create(level=0).level == 1
    assert Options.create(level='3').level == 3
    assert Options.create(indent=-4).indent == 4
    assert Options.create(indent='x').indent == 2
    assert Options.create(heading='off').heading is False
    assert Options.create(lang='python').lang == 'python'
