import pytest

from animscript.lexing import TokenFactory, TokenKind, TokenPosition


def test_factory_stamps_start_position_and_span():
    factory = TokenFactory("  abc")
    factory.move_next()
    factory.move_next()
    factory.begin_token()
    for _ in range(3):
        factory.move_next()
    token = factory.identifier(3)

    assert token.kind is TokenKind.IDENTIFIER
    assert token.position == TokenPosition(1, 3)
    assert (token.offset, token.length) == (2, 3)
    assert token.text == "abc"


def test_newline_resets_column():
    factory = TokenFactory("a\nb")
    factory.move_next()
    factory.on_new_line()
    factory.move_next()
    assert factory.position == TokenPosition(2, 1)
    assert factory.index == 2


def test_token_requires_begin_token():
    factory = TokenFactory("(")
    factory.move_next()
    with pytest.raises(RuntimeError, match="begin_token"):
        factory.left_paren()


def test_start_position_is_consumed_by_each_token():
    factory = TokenFactory("()")
    factory.begin_token()
    factory.move_next()
    factory.left_paren()
    factory.move_next()
    with pytest.raises(RuntimeError):
        factory.right_paren()


def test_widen_left_includes_sign():
    factory = TokenFactory("-12")
    factory.begin_token()
    factory.move_next()
    factory.move_next()
    factory.move_next()
    number = factory.number(2)
    assert number.text == "12"

    signed = TokenFactory.widen_left(number)
    assert signed.text == "-12"
    assert signed.position == number.position == TokenPosition(1, 1)


def test_tokens_compare_by_kind_text_and_position():
    a = TokenFactory("x")
    a.begin_token()
    a.move_next()
    b = TokenFactory("  x")
    b.move_next()
    b.move_next()
    b.begin_token()
    b.move_next()

    left = a.identifier(1)
    right = b.identifier(1)
    assert left.text == right.text
    assert left != right  # same text, different column

    c = TokenFactory("x!")
    c.begin_token()
    c.move_next()
    assert c.identifier(1) == left
