"""
cssbuilder - Immutable CSS Selector Builder
===========================================

Build CSS selectors fragment by fragment, with the ordering and uniqueness
rules of compound selectors checked on every step.

Main Components:
    - css_selector_builder: Facade that starts and combines selectors
    - Selector: Immutable compound selector with fluent append methods
    - build_from_tokens: Build a selector from kind=value tokens
    - SelectorValidator: Check built selectors against HTML

Example:
    >>> from cssbuilder import css_selector_builder as builder
    >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

__version__ = '0.1.0'

from cssbuilder.builder import (
    CombinedSelector,
    CSSSelectorBuilder,
    Selector,
    SelectorLike,
    css_selector_builder,
    validate_kinds,
)
from cssbuilder.chain import build_from_tokens, parse_token
from cssbuilder.exceptions import (
    ChainParseError,
    CSSBuilderError,
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorBuildError,
)
from cssbuilder.models import Combinator, FragmentKind
from cssbuilder.validator import SelectorValidator

__all__ = [
    # Core
    'CSSSelectorBuilder',
    'CombinedSelector',
    'Selector',
    'SelectorLike',
    'css_selector_builder',
    'validate_kinds',
    # Fragments and combinators
    'Combinator',
    'FragmentKind',
    # Token chains
    'build_from_tokens',
    'parse_token',
    # Validation
    'SelectorValidator',
    # Errors
    'CSSBuilderError',
    'ChainParseError',
    'DuplicateFragmentError',
    'OutOfOrderError',
    'SelectorBuildError',
]
