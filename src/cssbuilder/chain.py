"""Build selectors from flat token chains such as command line arguments.

A chain is a list of fragment tokens (``kind=value``) separated by combinator
tokens (``>``, ``+``, ``~`` or a word alias)::

    ['element=div', 'id=main', '+', 'element=table', 'id=data']

renders ``div#main + table#data``.
"""

import logging
from collections.abc import Sequence

from cssbuilder.builder import CombinedSelector, Selector, css_selector_builder
from cssbuilder.exceptions import ChainParseError
from cssbuilder.models import Combinator, FragmentKind

logger = logging.getLogger(__name__)

KIND_ALIASES: dict[str, FragmentKind] = {
    'element': FragmentKind.ELEMENT,
    'tag': FragmentKind.ELEMENT,
    'id': FragmentKind.ID,
    'class': FragmentKind.CLASS,
    'attr': FragmentKind.ATTRIBUTE,
    'attribute': FragmentKind.ATTRIBUTE,
    'pseudo-class': FragmentKind.PSEUDO_CLASS,
    'pseudo-element': FragmentKind.PSEUDO_ELEMENT,
}

COMBINATOR_ALIASES: dict[str, Combinator] = {
    ' ': Combinator.DESCENDANT,
    '>': Combinator.CHILD,
    '+': Combinator.ADJACENT_SIBLING,
    '~': Combinator.GENERAL_SIBLING,
    'descendant': Combinator.DESCENDANT,
    'child': Combinator.CHILD,
    'adjacent': Combinator.ADJACENT_SIBLING,
    'sibling': Combinator.GENERAL_SIBLING,
}


def parse_token(token: str, position: int | None = None) -> Combinator | tuple[FragmentKind, str]:
    """Classify a single chain token.

    Args:
        token: A ``kind=value`` fragment or a combinator
        position: Index of the token in its chain, used in error messages

    Returns:
        The Combinator, or a (kind, value) pair for fragments.

    Raises:
        ChainParseError: If the token is neither a known combinator nor a valid fragment

    """
    combinator = COMBINATOR_ALIASES.get(token) or COMBINATOR_ALIASES.get(token.strip().lower())
    if combinator is not None:
        return combinator

    if '=' not in token:
        raise ChainParseError('Expected kind=value or a combinator', token, position)

    name, value = token.split('=', 1)
    kind = KIND_ALIASES.get(name.strip().lower().replace('_', '-'))
    if kind is None:
        raise ChainParseError(f'Unknown fragment kind {name.strip()!r}', token, position)
    if not value:
        raise ChainParseError('Empty fragment value', token, position)

    return kind, value


def build_from_tokens(tokens: Sequence[str]) -> Selector | CombinedSelector:
    """Build a selector from a token chain.

    Fragments between combinators form one compound selector. Compounds are
    combined right to left, the same nesting as chained ``combine`` calls.

    Args:
        tokens: Fragment and combinator tokens in order

    Returns:
        A Selector for a single compound, otherwise a CombinedSelector.

    Raises:
        ChainParseError: Empty chain, bad token, or misplaced combinator
        DuplicateFragmentError: A compound repeats element, id or pseudo-element
        OutOfOrderError: A compound lists fragments out of order

    """
    if not tokens:
        raise ChainParseError('No tokens given')

    compounds: list[Selector] = []
    combinators: list[Combinator] = []
    current: Selector | None = None

    for position, token in enumerate(tokens):
        parsed = parse_token(token, position)
        if isinstance(parsed, Combinator):
            if current is None:
                raise ChainParseError('Combinator without a selector before it', token, position)
            compounds.append(current)
            combinators.append(parsed)
            current = None
        else:
            kind, value = parsed
            base = css_selector_builder.root if current is None else current
            current = base.append(kind, value)

    if current is None:
        raise ChainParseError('Combinator without a selector after it', tokens[-1], len(tokens) - 1)
    compounds.append(current)

    result: Selector | CombinedSelector = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = css_selector_builder.combine(left, combinator, result)

    logger.debug('Built %r from %d tokens', result.text, len(tokens))
    return result
