from __future__ import annotations

from helpers import formatter


def test_title_case_lowers_enum_values() -> None:
    assert formatter.title_case("RELEASING") == "Releasing"
    assert formatter.title_case("SPRING 2013") == "Spring 2013"
    assert formatter.title_case("sci-fi") == "Sci-Fi"
    assert formatter.title_case("studio's best") == "Studio's Best"


def test_remove_underscores_and_titlecase() -> None:
    assert formatter.remove_underscores_and_titlecase("NOT_YET_RELEASED") == "Not Yet Released"
    assert formatter.remove_underscores_and_titlecase("LIGHT_NOVEL") == "Light Novel"


def test_inline_markup() -> None:
    assert formatter.code("Action") == "`Action`"
    assert formatter.italics("Gore") == "*Gore*"
    assert formatter.bold("x") == "**x**"
    assert formatter.link("HBO", "https://hbo.com/x") == "[HBO](https://hbo.com/x)"


def test_present_or_uses_default_only_for_none() -> None:
    assert formatter.present_or(None) == "-"
    assert formatter.present_or(None, default="None") == "None"
    assert formatter.present_or(0) == "0"
    assert formatter.present_or(12, render=lambda n: f"{n} mins") == "12 mins"


def test_html_to_markdown_converts_anilist_subset() -> None:
    html = "First <b>bold</b> and <i>italic</i>.<br>\n<br>\nSee <a href=\"https://x.test\">here</a> &amp; more"
    assert formatter.html_to_markdown(html) == "First **bold** and *italic*.\n\nSee [here](https://x.test) & more"


def test_html_to_markdown_strips_unknown_tags_and_blank_runs() -> None:
    html = "<span>a</span><br><br><br><br>b"
    assert formatter.html_to_markdown(html) == "a\n\nb"


def test_truncate() -> None:
    assert formatter.truncate("abc", 5) == "abc"
    assert formatter.truncate("abcdef", 4) == "abc…"
