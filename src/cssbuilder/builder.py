"""
builder.py
==========
Immutable CSS selector builder.

Each complex selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element fragments, in that order::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              can be several occurrences

Selectors can be joined with the ' ', '>', '+' and '~' combinators.

Example:
    >>> from cssbuilder import css_selector_builder as builder
    >>> builder.id('main').class_('container').class_('editable').stringify()
    '#main.container.editable'
    >>> builder.combine(builder.element('div').id('main'), '+', builder.element('table')).stringify()
    'div#main + table'

"""

import logging
from collections import Counter
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from cssbuilder.exceptions import DuplicateFragmentError, OutOfOrderError
from cssbuilder.models import UNIQUE_KINDS, Combinator, FragmentKind

logger = logging.getLogger(__name__)


def check_cardinality(kinds: Sequence[FragmentKind]) -> None:
    """Raise DuplicateFragmentError if a unique kind occurs more than once."""
    counts = Counter(kinds)
    if any(counts[kind] > 1 for kind in UNIQUE_KINDS):
        raise DuplicateFragmentError(kinds)


def check_order(kinds: Sequence[FragmentKind]) -> None:
    """Raise OutOfOrderError if a fragment follows one of a higher rank."""
    for earlier, later in zip(kinds, kinds[1:]):
        if earlier > later:
            raise OutOfOrderError(kinds)


def validate_kinds(kinds: Sequence[FragmentKind]) -> None:
    """Validate a fragment kind sequence.

    Cardinality is checked before ordering, so a sequence that breaks both
    rules reports DuplicateFragmentError.

    Args:
        kinds: Candidate sequence in append order

    Raises:
        DuplicateFragmentError: element, id or pseudo-element repeated
        OutOfOrderError: a kind appears after a kind of higher rank

    """
    check_cardinality(kinds)
    check_order(kinds)


class Selector(BaseModel):
    """A compound selector under construction.

    Every method returns a new Selector; the receiver is never modified, so
    any intermediate selector can be extended in several directions.

    Attributes:
        text: Selector rendered so far
        kinds: Fragment kinds in append order

    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(default='', description='Rendered selector text')
    kinds: tuple[FragmentKind, ...] = Field(default=(), description='Fragment kinds in append order')

    def append(self, kind: FragmentKind, value: str) -> 'Selector':
        """Return a new selector with one more fragment.

        Args:
            kind: Kind of the fragment to append
            value: Raw fragment value (without '#', '.', brackets or colons)

        Returns:
            New Selector including the fragment.

        Raises:
            DuplicateFragmentError: If the fragment would repeat element, id or pseudo-element
            OutOfOrderError: If the fragment would break the element..pseudo-element order

        """
        kinds = (*self.kinds, kind)
        try:
            validate_kinds(kinds)
        except (DuplicateFragmentError, OutOfOrderError) as e:
            logger.debug('Rejected %s %r after %r: %s', kind.label, value, self.text, type(e).__name__)
            raise
        return self.model_copy(update={'text': self.text + kind.render(value), 'kinds': kinds})

    def element(self, value: str) -> 'Selector':
        """Append an element (type) selector, e.g. 'div'."""
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> 'Selector':
        """Append an id selector, rendered as '#value'."""
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> 'Selector':
        """Append a class selector, rendered as '.value'."""
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> 'Selector':
        """Append an attribute selector, rendered as '[value]'.

        The full bracket interior is supplied by the caller, e.g. 'href$=".png"'.
        """
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> 'Selector':
        """Append a pseudo-class, rendered as ':value'."""
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> 'Selector':
        """Append a pseudo-element, rendered as '::value'."""
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the rendered selector."""
        return self.text

    def __str__(self) -> str:
        """Return the rendered selector."""
        return self.text


class CombinedSelector(BaseModel):
    """Two selectors joined by a combinator.

    A combined selector is rendered text only; it can be stringified or
    combined again but not extended with fragments.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description='Rendered selector text')

    def stringify(self) -> str:
        """Return the rendered selector."""
        return self.text

    def __str__(self) -> str:
        """Return the rendered selector."""
        return self.text


SelectorLike = Selector | CombinedSelector


class CSSSelectorBuilder:
    """Facade for starting and combining selectors.

    Attributes:
        root: The empty selector every new chain starts from

    """

    root = Selector()

    def element(self, value: str) -> Selector:
        """Start a selector with an element."""
        return self.root.element(value)

    def id(self, value: str) -> Selector:
        """Start a selector with an id."""
        return self.root.id(value)

    def class_(self, value: str) -> Selector:
        """Start a selector with a class."""
        return self.root.class_(value)

    def attr(self, value: str) -> Selector:
        """Start a selector with an attribute."""
        return self.root.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        """Start a selector with a pseudo-class."""
        return self.root.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        """Start a selector with a pseudo-element."""
        return self.root.pseudo_element(value)

    def combine(
        self,
        selector1: SelectorLike,
        combinator: Combinator | str,
        selector2: SelectorLike,
    ) -> CombinedSelector:
        """Join two selectors with a combinator.

        The operands are not revalidated against each other. Exactly one space
        is placed on each side of the combinator, so the descendant combinator
        ' ' yields three spaces.

        Args:
            selector1: Left-hand selector
            combinator: One of ' ', '>', '+', '~' (used verbatim)
            selector2: Right-hand selector

        Returns:
            A CombinedSelector holding the joined text.

        """
        text = f'{selector1.text} {combinator} {selector2.text}'
        logger.debug('Combined %r', text)
        return CombinedSelector(text=text)


css_selector_builder = CSSSelectorBuilder()
