import pytest

from bfcompile.lexer import Dialect, Lexer, Token, TokenType, tokenize

CLASSIC = "><+-.,[]?"
V2_EXTRA = "'\""
V3_EXTRA = "*&"


def _char_at(source, tok):
    return source.split("\n")[tok.line - 1][tok.column - 1]


def _recognised(source, dialect):
    return {_char_at(source, t) for t in tokenize(source, dialect)[:-1]}


def test_empty_source_gives_only_end_of_file():
    assert tokenize("") == [Token(TokenType.END_OF_FILE, 1, 1)]


def test_classic_commands_map_to_their_types():
    tokens = tokenize(CLASSIC, Dialect.V1)
    assert [t.type for t in tokens[:-1]] == [
        TokenType.INCREMENT_POINTER,
        TokenType.DECREMENT_POINTER,
        TokenType.INCREMENT_VALUE,
        TokenType.DECREMENT_VALUE,
        TokenType.OUTPUT,
        TokenType.INPUT,
        TokenType.LOOP_START,
        TokenType.LOOP_END,
        TokenType.PRINT_POSITION,
    ]
    assert tokens[-1].type is TokenType.END_OF_FILE


@pytest.mark.parametrize("dialect", list(Dialect))
def test_last_token_is_end_of_file(dialect):
    tokens = tokenize("+[->+<]\n.", dialect)
    assert tokens[-1].type is TokenType.END_OF_FILE
    assert all(t.type is not TokenType.END_OF_FILE for t in tokens[:-1])


def test_v1_ignores_later_extensions():
    tokens = tokenize(V2_EXTRA + V3_EXTRA, Dialect.V1)
    assert [t.type for t in tokens] == [TokenType.END_OF_FILE]


def test_v2_recognises_numeric_io_but_not_saved_loops():
    tokens = tokenize(V2_EXTRA + V3_EXTRA, Dialect.V2)
    assert [t.type for t in tokens] == [
        TokenType.OUTPUT_AS_NUM,
        TokenType.INPUT_AS_NUM,
        TokenType.END_OF_FILE,
    ]


def test_v3_recognises_all_extensions():
    tokens = tokenize(V2_EXTRA + V3_EXTRA, Dialect.V3)
    assert [t.type for t in tokens] == [
        TokenType.OUTPUT_AS_NUM,
        TokenType.INPUT_AS_NUM,
        TokenType.SAVE_LOOP_TRIGGER,
        TokenType.RUN_LOOP,
        TokenType.END_OF_FILE,
    ]


def test_default_dialect_is_latest():
    source = "*[+]&"
    assert Lexer(source).tokenize() == tokenize(source, Dialect.V3)


def test_dialects_are_nested():
    source = CLASSIC + V2_EXTRA + V3_EXTRA
    v1 = _recognised(source, Dialect.V1)
    v2 = _recognised(source, Dialect.V2)
    v3 = _recognised(source, Dialect.V3)
    assert v1 == set(CLASSIC)
    assert v1 < v2 < v3
    assert v2 - v1 == set(V2_EXTRA)
    assert v3 - v2 == set(V3_EXTRA)


def test_comment_characters_are_skipped():
    source = "hello + world - 42"
    tokens = tokenize(source)
    assert [t.type for t in tokens[:-1]] == [
        TokenType.INCREMENT_VALUE,
        TokenType.DECREMENT_VALUE,
    ]


def test_positions_point_at_their_characters():
    source = "ab+\n  [-]\n\n>x<.\n,?'\"*&"
    tokens = tokenize(source, Dialect.V3)
    for item in tokens[:-1]:
        assert _char_at(source, item) == item.type.value


def test_positions_are_in_source_order():
    source = "+ +\n- -\n[ ]"
    tokens = tokenize(source)
    positions = [(t.line, t.column) for t in tokens]
    assert positions == sorted(positions)


def test_newline_resets_column():
    tokens = tokenize("+\n+")
    assert tokens[0].column == tokens[1].column
    assert tokens[1].line == tokens[0].line + 1


def test_end_of_file_follows_last_character():
    source = "+++"
    tokens = tokenize(source)
    assert tokens[-1] == Token(TokenType.END_OF_FILE, 1, len(source) + 1)


def test_end_of_file_after_trailing_newline():
    tokens = tokenize("+\n")
    assert tokens[-1] == Token(TokenType.END_OF_FILE, 2, 1)


def test_token_count_matches_command_characters():
    source = "++[>+<-]>. comment ?"
    tokens = tokenize(source, Dialect.V1)
    expected = sum(1 for c in source if c in Dialect.V1.commands)
    assert len(tokens) == expected + 1


def test_tokenize_is_repeatable():
    lexer = Lexer("+[>]\n<", Dialect.V2)
    expected = [
        Token(TokenType.INCREMENT_VALUE, 1, 1),
        Token(TokenType.LOOP_START, 1, 2),
        Token(TokenType.INCREMENT_POINTER, 1, 3),
        Token(TokenType.LOOP_END, 1, 4),
        Token(TokenType.DECREMENT_POINTER, 2, 1),
        Token(TokenType.END_OF_FILE, 2, 2),
    ]
    assert lexer.tokenize() == expected
    assert lexer.tokenize() == expected


def test_token_is_immutable():
    first = tokenize("+")[0]
    with pytest.raises(AttributeError):
        first.line = 5
    assert first == Token(TokenType.INCREMENT_VALUE, 1, 1)