"""Custom exceptions for cssbuilder."""

from collections.abc import Sequence


class CSSBuilderError(Exception):
    """Base class for all cssbuilder exceptions."""

    pass


class SelectorBuildError(CSSBuilderError):
    """Raised when appending a fragment would produce an invalid selector."""

    message = 'Invalid selector'

    def __init__(self, kinds: Sequence[int]):
        """Initialize the build error.

        Args:
            kinds: Fragment kind sequence that was rejected, including the new fragment

        """
        self.kinds = tuple(kinds)
        super().__init__(self.message)


class DuplicateFragmentError(SelectorBuildError):
    """Raised when element, id or pseudo-element would occur twice."""

    message = 'Element, id and pseudo-element should not occur more then one time inside the selector.'


class OutOfOrderError(SelectorBuildError):
    """Raised when a fragment is placed after a fragment of a higher rank."""

    message = (
        'Selector parts should be arranged in the following order: '
        'element, id, class, attribute, pseudo-class, pseudo-element.'
    )


class ChainParseError(CSSBuilderError):
    """Raised when a token chain cannot be turned into a selector."""

    def __init__(self, reason: str, token: str | None = None, position: int | None = None):
        """Initialize chain parse error with the offending token.

        Args:
            reason: Human readable description of the problem
            token: Token that failed to parse, if any
            position: Zero-based index of the token in the chain, if any

        """
        self.reason = reason
        self.token = token
        self.position = position

        if token is None:
            super().__init__(reason)
        else:
            super().__init__(f'{reason} (token {position}: {token!r})')
