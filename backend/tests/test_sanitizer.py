"""
Noteful Backend — HTML Sanitizer Tests
========================================

Test Coverage:
    ✅ Disallowed tags become visible text
    ✅ Allowed tags keep only allowed attributes
    ✅ Unsafe URL schemes are dropped
    ✅ Plain text, entities and None pass through
"""

import pytest

from noteful.services.sanitizer import clean_html


class TestDisallowedMarkup:

    def test_script_tag_is_escaped(self):
        value = 'Naughty naughty very naughty <script>alert("xss");</script>'

        assert clean_html(value) == (
            'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
        )

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("<iframe src=\"x\"></iframe>", "&lt;iframe src=\"x\"&gt;&lt;/iframe&gt;"),
            ("<style>body{}</style>", "&lt;style&gt;body{}&lt;/style&gt;"),
            ("<unknown>hi</unknown>", "&lt;unknown&gt;hi&lt;/unknown&gt;"),
        ],
    )
    def test_other_disallowed_tags_are_escaped(self, value, expected):
        assert clean_html(value) == expected

    def test_comments_are_dropped(self):
        assert clean_html("a<!-- hidden -->b") == "ab"


class TestAllowedMarkup:

    def test_event_handler_attribute_is_dropped(self):
        value = (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        )

        assert clean_html(value) == (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        )

    def test_formatting_tags_survive(self):
        value = "<p><em>one</em> <b>two</b></p><ul><li>three</li></ul>"

        assert clean_html(value) == value

    @pytest.mark.parametrize(
        "href",
        ["javascript:alert(1)", "JavaScript:alert(1)", "java\tscript:alert(1)", "data:text/html,x"],
    )
    def test_unsafe_href_is_removed(self, href):
        assert clean_html(f'<a href="{href}">x</a>') == "<a>x</a>"

    def test_safe_href_is_kept(self):
        value = '<a href="https://example.com/a?b=1" title="Example">x</a>'

        assert clean_html(value) == value

    def test_attribute_quotes_are_escaped(self):
        assert clean_html("<a title='say \"hi\"'>x</a>") == '<a title="say &quot;hi&quot;">x</a>'

    def test_self_closing_tag(self):
        assert clean_html("line<br/>break") == "line<br />break"

    def test_tag_names_are_lowercased(self):
        assert clean_html("<STRONG>loud</STRONG>") == "<strong>loud</strong>"


class TestPlainText:

    @pytest.mark.parametrize("value", ["", "Dogs are cool", 'Tom & "Jerry"', "it's"])
    def test_text_without_markup_is_unchanged(self, value):
        assert clean_html(value) == value

    def test_stray_brackets_are_escaped(self):
        assert clean_html("1 < 2 and 3 > 2") == "1 &lt; 2 and 3 &gt; 2"

    def test_entities_pass_through(self):
        assert clean_html("<b>&amp; &#169;</b>") == "<b>&amp; &#169;</b>"

    def test_none_passes_through(self):
        assert clean_html(None) is None
