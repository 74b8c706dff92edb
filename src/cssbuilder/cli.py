"""
cli.py
=======
Command line entry point: build a CSS selector from tokens and optionally
check it against an HTML file.

Example:
    cssbuilder element=div id=main + element=table id=data
    cssbuilder --html page.html element=a 'attr=href$=".png"'

"""

import argparse
import json
from pathlib import Path

import logfire
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from cssbuilder import __version__
from cssbuilder.builder import Selector, SelectorLike
from cssbuilder.chain import build_from_tokens
from cssbuilder.config import LOG_LEVELS, get_settings
from cssbuilder.exceptions import CSSBuilderError
from cssbuilder.utils.logging import setup_local_logging
from cssbuilder.validator import SelectorValidator

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='cssbuilder',
        description='Build a CSS selector from kind=value tokens and combinators',
        epilog='Kinds: element, id, class, attr, pseudo-class, pseudo-element. Combinators: > + ~ descendant',
    )
    parser.add_argument('tokens', nargs='+', metavar='TOKEN', help='kind=value fragment or combinator')
    parser.add_argument('--html', type=Path, help='HTML file to check the selector against')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Log level for the local log file (default: CSSBUILDER_LOG_LEVEL or INFO)',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def render_result(selector: SelectorLike, as_json: bool) -> str:
    """Format a built selector for stdout."""
    if not as_json:
        return selector.stringify()

    kinds = [kind.label for kind in selector.kinds] if isinstance(selector, Selector) else []
    return json.dumps({'selector': selector.stringify(), 'kinds': kinds}, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    console = Console(theme=THEME, stderr=True)

    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f'[danger]Invalid settings: {escape(str(e))}[/danger]')
        logfire.error('Invalid settings', error=str(e))
        return 1

    if settings.log_to_file:
        log_file = setup_local_logging(args.log_level or settings.log_level)
        console.print(f'[info]Logging to {escape(str(log_file))}[/info]')

    if settings.logfire_token:
        logfire.configure(token=settings.logfire_token)

    with logfire.span('build_selector', tokens=args.tokens):
        try:
            selector = build_from_tokens(args.tokens)
        except CSSBuilderError as e:
            console.print(f'[danger]✗ {escape(str(e))}[/danger]')
            logfire.error('Selector build failed', tokens=args.tokens, error=str(e))
            return 1

        print(render_result(selector, args.json))
        logfire.info('Selector built', selector=selector.stringify())

        if args.html is None:
            return 0

        if not args.html.is_file():
            console.print(f'[danger]HTML file not found: {escape(str(args.html))}[/danger]')
            return 1

        with logfire.span('validate_selector', html=str(args.html)):
            try:
                html = args.html.read_bytes()
            except OSError as e:
                console.print(f'[danger]Could not read {escape(str(args.html))}: {escape(str(e))}[/danger]')
                logfire.error('HTML read failed', html=str(args.html), error=str(e))
                return 1
            # BeautifulSoup detects the encoding from the raw bytes
            count = SelectorValidator(console=console).count_matches(html, selector)

        if count == 0:
            console.print('[warning]Selector matched no elements[/warning]')
            logfire.warn('Selector matched nothing', selector=selector.stringify(), html=str(args.html))
            return 1

        console.print(f'[success]✓ Selector matched {count} element(s)[/success]')
        return 0
