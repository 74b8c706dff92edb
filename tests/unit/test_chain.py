import pytest

from cssbuilder import (
    ChainParseError,
    CombinedSelector,
    Combinator,
    DuplicateFragmentError,
    FragmentKind,
    OutOfOrderError,
    Selector,
    build_from_tokens,
    parse_token,
)


def test_parse_fragment_token():
    assert parse_token('element=div') == (FragmentKind.ELEMENT, 'div')
    assert parse_token('Pseudo_Class=hover') == (FragmentKind.PSEUDO_CLASS, 'hover')
    assert parse_token('tag=p') == (FragmentKind.ELEMENT, 'p')


def test_parse_attribute_keeps_inner_equals():
    assert parse_token('attr=href$=".png"') == (FragmentKind.ATTRIBUTE, 'href$=".png"')


@pytest.mark.parametrize(
    ('token', 'expected'),
    [
        ('>', Combinator.CHILD),
        ('+', Combinator.ADJACENT_SIBLING),
        ('~', Combinator.GENERAL_SIBLING),
        (' ', Combinator.DESCENDANT),
        ('descendant', Combinator.DESCENDANT),
        ('Sibling', Combinator.GENERAL_SIBLING),
    ],
)
def test_parse_combinator_token(token, expected):
    assert parse_token(token) is expected


@pytest.mark.parametrize('token', ['div', 'colour=red', 'class='])
def test_parse_bad_token(token):
    with pytest.raises(ChainParseError) as exc_info:
        parse_token(token, 3)

    assert exc_info.value.token == token
    assert exc_info.value.position == 3


def test_single_compound():
    selector = build_from_tokens(['element=a', 'attr=href$=".png"', 'pseudo-class=focus'])

    assert isinstance(selector, Selector)
    assert selector.stringify() == 'a[href$=".png"]:focus'


def test_combined_chain():
    selector = build_from_tokens(['element=div', 'id=main', '+', 'element=table', 'id=data'])

    assert isinstance(selector, CombinedSelector)
    assert selector.stringify() == 'div#main + table#data'


def test_chain_nests_like_combine_calls(builder):
    tokens = [
        'element=div', 'id=main', 'class=container', 'class=draggable',
        '+', 'element=table', 'id=data',
        '~', 'element=tr', 'pseudo-class=nth-of-type(even)',
        'descendant', 'element=td', 'pseudo-class=nth-of-type(even)',
    ]  # fmt: skip
    expected = builder.combine(
        builder.element('div').id('main').class_('container').class_('draggable'),
        '+',
        builder.combine(
            builder.element('table').id('data'),
            '~',
            builder.combine(
                builder.element('tr').pseudo_class('nth-of-type(even)'),
                ' ',
                builder.element('td').pseudo_class('nth-of-type(even)'),
            ),
        ),
    )

    assert build_from_tokens(tokens) == expected


@pytest.mark.parametrize(
    'tokens',
    [
        [],
        ['>', 'element=a'],
        ['element=a', '>'],
        ['element=a', '>', '+', 'element=b'],
    ],
)
def test_misplaced_combinators(tokens):
    with pytest.raises(ChainParseError):
        build_from_tokens(tokens)


def test_builder_errors_propagate():
    with pytest.raises(DuplicateFragmentError):
        build_from_tokens(['id=a', 'id=b'])

    with pytest.raises(OutOfOrderError):
        build_from_tokens(['element=a', '>', 'class=x', 'element=b'])


def test_fragments_reset_after_combinator():
    # Each side of a combinator may hold its own element and id
    assert build_from_tokens(['element=a', 'id=x', '>', 'element=b', 'id=y']).stringify() == 'a#x > b#y'
