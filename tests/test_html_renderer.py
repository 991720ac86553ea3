from weblog.config import RenderConfig
from weblog.render import render_rss_fragment
from weblog.render.html import linkify


def test_quote_line_becomes_blockquote() -> None:
    assert render_rss_fragment("> quoted line") == "<blockquote>quoted line</blockquote>"


def test_quote_run_joins_with_breaks() -> None:
    assert render_rss_fragment("> a\n> b") == "<blockquote>a<br />b</blockquote>"


def test_empty_quote_edges_leave_no_dangling_break() -> None:
    assert render_rss_fragment("> a\n>") == "<blockquote>a</blockquote>"
    assert render_rss_fragment(">\n> a\n>") == "<blockquote>a</blockquote>"
    assert render_rss_fragment("> a\n>\n> b") == "<blockquote>a<br /><br />b</blockquote>"


def test_lists() -> None:
    assert render_rss_fragment("1. a\n2. b") == "<ol><li>a</li><li>b</li></ol>"
    assert render_rss_fragment("- a\n* b") == "<ul><li>a</li><li>b</li></ul>"
    assert render_rss_fragment("1. a\n- b") == "<ol><li>a</li></ol><ul><li>b</li></ul>"


def test_headings_clamp_to_six() -> None:
    assert render_rss_fragment("## Title") == "<h2>Title</h2>"
    assert render_rss_fragment("####### x") == "<h6>x</h6>"


def test_each_line_is_a_paragraph() -> None:
    assert render_rss_fragment("one\ntwo") == "<p>one</p><p>two</p>"
    assert render_rss_fragment("one\n\ntwo") == "<p>one</p><p>two</p>"


def test_text_is_escaped() -> None:
    assert render_rss_fragment("a < b & c") == "<p>a &lt; b &amp; c</p>"
    assert render_rss_fragment('say "hi"') == "<p>say &quot;hi&quot;</p>"


def test_rss_beautify_mode() -> None:
    assert render_rss_fragment('say "hi"', RenderConfig(beautify="RSS")) == "<p>say “hi”</p>"
    assert render_rss_fragment('say "hi"', RenderConfig(beautify="Content")) == "<p>say &quot;hi&quot;</p>"


def test_asterism_and_separator() -> None:
    assert render_rss_fragment("***") == "<p>* * *</p>"
    assert render_rss_fragment("***", RenderConfig(beautify="All")) == "<p>⁂</p>"
    assert render_rss_fragment("---") == "<hr />"


def test_inline_markup_links_domains() -> None:
    assert render_rss_fragment("see example.com now", inline_markup=True) == (
        '<p>see <a href="https://example.com">example.com</a> now</p>'
    )


def test_inline_markup_unquotes_quoted_links() -> None:
    assert render_rss_fragment("> example.com", inline_markup=True) == (
        '<p><a href="https://example.com">example.com</a></p>'
    )


def test_inline_code_reverts_typography() -> None:
    html = render_rss_fragment("run `x - y`", RenderConfig(beautify="RSS"), inline_markup=True)
    assert html == "<p>run <code>x - y</code></p>"


def test_linkify_keeps_trailing_punctuation_outside() -> None:
    assert linkify("Go to https://example.com/a.") == (
        'Go to <a href="https://example.com/a">https://example.com/a</a>.'
    )


def test_linkify_ignores_email_addresses() -> None:
    assert linkify("mail me@example.com") == "mail me@example.com"
