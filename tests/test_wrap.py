from rich.cells import cell_len

from weblog.text.wrap import tokenize, wrap


def test_wrap_moves_overflowing_word_to_next_line() -> None:
    assert wrap("The quick brown fox jumps", 20) == "The quick brown fox\njumps"


def test_wrap_indents_every_line() -> None:
    assert wrap("alpha beta gamma", 12, 2) == "  alpha beta\n  gamma"


def test_wrap_empty_text_yields_indent() -> None:
    assert wrap("", 10, 3) == "   "


def test_wrap_splits_long_token_into_width_chunks() -> None:
    assert wrap("abcdefghij", 4) == "abcd\nefgh\nij"
    assert wrap("go abcdefghij", 6, 1) == " go\n abcde\n fghij"


def test_wrap_breaks_after_hyphen() -> None:
    assert wrap("see well-known fact", 10) == "see well-\nknown fact"


def test_wrap_preserves_inner_spacing() -> None:
    assert wrap("one  two", 20) == "one  two"


def test_wrap_breaks_on_unicode_spaces_but_not_no_break_space() -> None:
    assert wrap("alpha\u2003beta", 7) == "alpha\nbeta"
    assert wrap("alpha\u00a0beta", 7).split("\n")[0] == "alpha\u00a0b"


def test_wrap_keeps_sentence_break_indented() -> None:
    assert wrap("End. Next", 5, 1) == " End.\n Next"


def test_wrap_never_exceeds_width() -> None:
    text = (
        "A line-oriented renderer should never overflow, even with "
        "supercalifragilisticexpialidocious words and well-behaved-hyphenated ones."
    )
    for width in range(5, 40):
        for indent in (0, 2, 4):
            if indent >= width:
                continue
            for line in wrap(text, width, indent).split("\n"):
                assert len(line) <= width, (width, indent, line)
                assert line.startswith(" " * indent)


def test_tokenize_keeps_space_runs() -> None:
    assert tokenize("a  b\tc") == ["a", "  ", "b", "\t", "c"]


def test_wrap_counts_wide_characters_as_two_cells() -> None:
    text = " ".join(["漢字"] * 6)
    assert wrap(text, 20) == "漢字 漢字 漢字 漢字\n漢字 漢字"
    for line in wrap(text, 20, 2).split("\n"):
        assert cell_len(line) <= 20


def test_wrap_chops_wide_tokens_by_cells() -> None:
    assert wrap("漢" * 12, 10) == "漢漢漢漢漢\n漢漢漢漢漢\n漢漢"
