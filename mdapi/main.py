# Copyright 2026 The mdapi Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
import os
import argparse
import glob
import locale
from configparser import ConfigParser
from typing import Generator, List, Optional

from . import __version__
from .log import log, configure
from .parse import Parser, ParseError
from .render import RENDERERS, Options, Sink, RenderError
from .utils import files_str_to_list


class FullHelpParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        sys.stderr.write('error: %s\n' % message)
        self.print_help()
        sys.exit(2)


def get_config(args: argparse.Namespace) -> ConfigParser:
    """
    Consolidates command line arguments and config file, returning a ConfigParser
    instance that has the reconciled configuration such that command line arguments
    take precedence
    """
    config = ConfigParser(inline_comment_prefixes='#')
    config.add_section('project')
    if args.config:
        if not os.path.exists(args.config):
            log.critical('config file "%s" does not exist', args.config)
            sys.exit(1)
        with open(args.config) as f:
            config.read_file(f)
    if args.files:
        config.set('project', 'files', '\n'.join(args.files))
    for prop in ('out', 'renderer', 'level', 'heading', 'lang', 'indent', 'encoding'):
        value = getattr(args, prop)
        if value is not None:
            config.set('project', prop, str(value))
    if args.noheading:
        config.set('project', 'heading', 'false')
    if args.nolang:
        config.set('project', 'lang', 'false')
    return config


def get_files(config: ConfigParser) -> Generator[str, None, None]:
    """
    Generates the files to parse based on config, expanding glob expressions.  Files
    are generated in the order given.
    """
    for pattern in files_str_to_list(config.get('project', 'files', fallback='')):
        matches = sorted(glob.glob(pattern))
        if not matches:
            log.error('no files match "%s"', pattern)
        yield from matches


def get_options(config: ConfigParser) -> Options:
    return Options.create(
        level=config.get('project', 'level', fallback=None),
        heading=config.get('project', 'heading', fallback=Options.heading),
        lang=config.get('project', 'lang', fallback=Options.lang),
        indent=config.get('project', 'indent', fallback=None),
    )


def main(argv: Optional[List[str]] = None) -> None:
    renderer_names = ', '.join(RENDERERS)
    p = FullHelpParser(prog='mdapi')
    p.add_argument('-c', '--config', type=str, metavar='FILE',
                   help='Configuration file')
    p.add_argument('-r', '--renderer', action='store', type=str, metavar='TYPE',
                   help=f'How to render the parsed comments: {renderer_names} '
                   '(default: markdown)')
    p.add_argument('-o', '--out', action='store', type=str, metavar='FILE',
                   help='File to write output to (default: stdout)')
    p.add_argument('-l', '--level', action='store', type=str, metavar='N',
                   help='Initial heading level (default 1)')
    p.add_argument('--heading', action='store', type=str, metavar='TEXT',
                   help='Document heading (default API)')
    p.add_argument('--no-heading', dest='noheading', action='store_true',
                   help='Omit the document heading')
    p.add_argument('--lang', action='store', type=str, metavar='LANG',
                   help='Language for fenced code blocks (default javascript)')
    p.add_argument('--no-lang', dest='nolang', action='store_true',
                   help='Omit the language from fenced code blocks')
    p.add_argument('--indent', action='store', type=str, metavar='N',
                   help='Indentation for json and yaml output (default 2)')
    p.add_argument('--encoding', action='store', type=str, metavar='CODEC', default=None,
                   help='Character set codec for input (default {})'.format(locale.getpreferredencoding()))
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Log debug messages')
    p.add_argument('files', type=str, metavar='FILE', nargs='*',
                   help='List of files to parse, concatenated in the order given')
    p.add_argument('--version', action='version', version='%(prog)s ' + __version__)

    args = p.parse_args(argv)
    configure(verbose=args.verbose)
    config = get_config(args)
    files = list(get_files(config))
    if not files:
        # Files are mandatory
        log.critical('no input files specified on command line or config file')
        sys.exit(1)

    renderer = config.get('project', 'renderer', fallback='markdown')
    try:
        rendercls = RENDERERS[renderer]
    except KeyError:
        log.error('unknown renderer "%s", valid types are: %s', renderer, renderer_names)
        sys.exit(1)

    parser = Parser()
    encoding = config.get('project', 'encoding', fallback=locale.getpreferredencoding())
    try:
        comments = parser.parse_files(files, encoding=encoding)
    except (ParseError, OSError) as e:
        log.error('error parsing around %s:%s: %s', parser.ctx.file, parser.ctx.line, e)
        sys.exit(1)

    out = config.get('project', 'out', fallback=None)
    try:
        stream = open(out, 'w', encoding='utf8') if out else sys.stdout
    except OSError as e:
        log.error('could not open output file: %s', e)
        sys.exit(1)

    try:
        log.info('rendering %d comments', len(comments))
        rendercls(get_options(config), parser.registry).render(comments, Sink(stream))
    except RenderError as e:
        log.error('%s', e)
        sys.exit(1)
    log.info('done')
