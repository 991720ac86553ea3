from weblog.config import RenderConfig
from weblog.text.typography import beautify, capitalize, normalize_sentence_spacing


def test_beautify_curls_quotes_and_dashes() -> None:
    assert beautify('He said "hi" - ok') == "He said “hi” — ok"


def test_beautify_apostrophes_and_leading_dash() -> None:
    assert beautify("it's") == "it’s"
    assert beautify("a -b") == "a —b"
    assert beautify("-Yes\n-No") == "—Yes\n—No"


def test_beautify_asterisms() -> None:
    assert beautify("***") == "⁂"
    assert beautify("* * *") == "⁂"


def test_beautify_leaves_plain_text_alone() -> None:
    assert beautify("nothing to do here") == "nothing to do here"


def test_normalize_sentence_spacing_collapses_runs() -> None:
    assert normalize_sentence_spacing("One.  Two!   Three?\tFour") == "One. Two! Three? Four"


def test_normalize_sentence_spacing_handles_closing_quotes_and_ellipsis() -> None:
    assert normalize_sentence_spacing('He said "stop."   Then') == 'He said "stop." Then'
    assert normalize_sentence_spacing("Wait...  what") == "Wait... what"


def test_capitalize_follows_config() -> None:
    assert capitalize("Title", RenderConfig()) == "Title"
    assert capitalize("Title", RenderConfig(capitalize_titles=True)) == "TITLE"
