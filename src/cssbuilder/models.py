"""Fragment kinds and combinators that make up a CSS selector."""

from enum import IntEnum, StrEnum


class FragmentKind(IntEnum):
    """Kind of a single compound-selector fragment.

    The integer value is the rank: fragments inside one selector must appear
    in non-decreasing rank order.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        """Return True if the kind may occur at most once in a selector."""
        return self in UNIQUE_KINDS

    @property
    def label(self) -> str:
        """Return the human readable name, e.g. 'pseudo-class'."""
        return self.name.lower().replace('_', '-')

    def render(self, value: str) -> str:
        """Render a raw value as this kind of fragment.

        Args:
            value: Element name, id, class name, attribute content, etc.

        Returns:
            The fragment text, e.g. '#main' for an id.

        """
        prefix, suffix = _DECORATIONS[self]
        return f'{prefix}{value}{suffix}'


UNIQUE_KINDS = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})

_DECORATIONS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ('', ''),
    FragmentKind.ID: ('#', ''),
    FragmentKind.CLASS: ('.', ''),
    FragmentKind.ATTRIBUTE: ('[', ']'),
    FragmentKind.PSEUDO_CLASS: (':', ''),
    FragmentKind.PSEUDO_ELEMENT: ('::', ''),
}


class Combinator(StrEnum):
    """CSS combinators used to join two selectors."""

    DESCENDANT = ' '
    CHILD = '>'
    ADJACENT_SIBLING = '+'
    GENERAL_SIBLING = '~'
