from weblog.blocks import (
    Asterism,
    Heading,
    LineKind,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
    Separator,
    classify_line,
    parse_blocks,
    scan_lines,
)
from weblog.config import RenderConfig


def test_single_quote_line() -> None:
    blocks = parse_blocks("> one liner")
    assert blocks == [Quote(lines=("one liner",))]
    assert blocks[0].is_single_line


def test_ordered_list_counts_items() -> None:
    blocks = parse_blocks("1. a\n2. b\n3. c")
    assert blocks == [
        ListBlock(
            ordered=True,
            items=(ListItem("1.", "a"), ListItem("2.", "b"), ListItem("3.", "c")),
        )
    ]
    assert blocks[0].total_count == 3
    assert [item.number for item in blocks[0].items] == [1, 2, 3]


def test_list_family_switch_starts_new_list() -> None:
    blocks = parse_blocks("1. a\n- b")
    assert blocks == [
        ListBlock(ordered=True, items=(ListItem("1.", "a"),)),
        ListBlock(ordered=False, items=(ListItem("-", "b"),)),
    ]


def test_bullet_markers_share_a_list() -> None:
    [block] = parse_blocks("- a\n* b")
    assert isinstance(block, ListBlock)
    assert [item.marker for item in block.items] == ["-", "*"]


def test_plain_lines_continue_the_last_item() -> None:
    [block] = parse_blocks("1. Apples\nare red\n2. Pears")
    assert block.items[0] == ListItem("1.", "Apples", continuation=("are red",))
    assert block.items[1].text == "Pears"


def test_headings() -> None:
    assert parse_blocks("# Title") == [Heading(level=1, text="Title")]
    assert parse_blocks("######## Deep") == [Heading(level=6, text="Deep")]
    assert parse_blocks("#NoSpace") == [Heading(level=1, text="NoSpace")]


def test_heading_and_quote_do_not_swallow_following_lines() -> None:
    assert parse_blocks("# T\ntext") == [Heading(level=1, text="T"), Paragraph(text="text")]
    assert parse_blocks("> q\nafter") == [Quote(lines=("q",)), Paragraph(text="after")]


def test_asterism_and_separator_literals() -> None:
    assert parse_blocks("***") == [Asterism()]
    assert parse_blocks("* * *") == [Asterism()]
    assert parse_blocks("---") == [Separator()]


def test_literals_only_count_when_they_fill_the_chunk() -> None:
    assert parse_blocks("* * *\n- a") == [
        ListBlock(ordered=False, items=(ListItem("*", "* *"), ListItem("-", "a"))),
    ]
    assert parse_blocks("# T\n***") == [Heading(level=1, text="T"), Asterism()]
    assert classify_line("* * *").kind is LineKind.BULLET
    assert classify_line("---").kind is LineKind.TEXT


def test_scan_lines_recognizes_literal_lines() -> None:
    assert scan_lines("* * *\n- a") == [
        Asterism(),
        ListBlock(ordered=False, items=(ListItem("-", "a"),)),
    ]
    assert scan_lines("text\n---") == [Paragraph(text="text"), Separator()]


def test_paragraph_keeps_line_breaks() -> None:
    assert parse_blocks("Hello world.\nSecond line") == [Paragraph(text="Hello world.\nSecond line")]


def test_chunks_keep_source_order() -> None:
    body = "# T\n\nPara one\n\n\n> q1\n> q2\n\n- x"
    kinds = [type(block) for block in parse_blocks(body)]
    assert kinds == [Heading, Paragraph, Quote, ListBlock]
    assert parse_blocks(body)[2] == Quote(lines=("q1", "q2"))


def test_empty_bodies() -> None:
    assert parse_blocks("") == []
    assert parse_blocks("  \n\n  \n") == []


def test_windows_line_endings() -> None:
    assert parse_blocks("a\r\n\r\nb") == [Paragraph(text="a"), Paragraph(text="b")]


def test_sentence_spacing_is_normalized_except_on_mobile() -> None:
    assert parse_blocks("One.   Two") == [Paragraph(text="One. Two")]
    assert parse_blocks("One.   Two", RenderConfig().narrowed()) == [Paragraph(text="One.   Two")]


def test_classify_line() -> None:
    assert classify_line("   ").kind is LineKind.BLANK
    assert classify_line("12. twelve").marker == "12."
    assert classify_line("#tag").kind is LineKind.HEADING
    assert classify_line("#tag", strict_heading=True).kind is LineKind.TEXT
    assert classify_line("> quoted").text == "quoted"
    assert classify_line("-dash").kind is LineKind.TEXT


def test_scan_lines_groups_runs() -> None:
    assert scan_lines("intro\n> a\n> b\nouter") == [
        Paragraph(text="intro"),
        Quote(lines=("a", "b")),
        Paragraph(text="outer"),
    ]


def test_scan_lines_makes_one_paragraph_per_line() -> None:
    assert scan_lines("line one\nline two") == [Paragraph(text="line one"), Paragraph(text="line two")]


def test_scan_lines_family_switch() -> None:
    assert scan_lines("1. a\n- b") == [
        ListBlock(ordered=True, items=(ListItem("1.", "a"),)),
        ListBlock(ordered=False, items=(ListItem("-", "b"),)),
    ]


def test_scan_lines_requires_space_after_hash() -> None:
    assert scan_lines("#hashtag") == [Paragraph(text="#hashtag")]
    assert scan_lines("## Sub") == [Heading(level=2, text="Sub")]
