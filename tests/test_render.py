"""Tests for placeholder styles, the style registry and RenderedSQL."""

from __future__ import annotations

import pytest

from sqltemplate import (
    SQL,
    FormatStyle,
    NamedStyle,
    NumericStyle,
    PlaceholderStyle,
    QmarkStyle,
    RenderedSQL,
    StyleFactory,
    TemplateShapeError,
    UnknownStyleError,
)


@pytest.fixture()
def like_query():
    return SQL(["SELECT * FROM books WHERE title LIKE '100%' AND year > ", " AND author = ", ""], 1990, "Anon")


# ---------------------------------------------------------------------------
# Built-in styles
# ---------------------------------------------------------------------------


class TestBuiltinStyles:
    def test_qmark_matches_sql(self, like_query):
        rendered = like_query.render("qmark")
        assert rendered.sql == like_query.sql
        assert rendered.params == [1990, "Anon"]
        assert rendered.style == "qmark"

    def test_default_style_is_qmark(self, like_query):
        assert like_query.render().style == "qmark"

    def test_numeric_matches_text(self, like_query):
        rendered = like_query.render("numeric")
        assert rendered.sql == like_query.text
        assert rendered.params == [1990, "Anon"]

    def test_format_doubles_percent(self, like_query):
        rendered = like_query.render("format")
        assert rendered.sql == (
            "SELECT * FROM books WHERE title LIKE '100%%' AND year > %s AND author = %s"
        )
        assert rendered.params == [1990, "Anon"]

    def test_named_uses_dict_params(self, like_query):
        rendered = like_query.render("named")
        assert rendered.sql == (
            "SELECT * FROM books WHERE title LIKE '100%' AND year > :p1 AND author = :p2"
        )
        assert rendered.params == {"p1": 1990, "p2": "Anon"}

    def test_named_custom_prefix(self, like_query):
        rendered = like_query.render(NamedStyle(prefix="v"))
        assert rendered.params == {"v1": 1990, "v2": "Anon"}
        assert ":v2" in rendered.sql

    def test_style_instance_accepted(self, like_query):
        assert like_query.render(FormatStyle()).style == "format"

    def test_render_ignores_bind_mode(self, like_query):
        like_query.set_bind_mode()
        rendered = like_query.render("qmark")
        assert rendered.sql == like_query.sql
        assert rendered.params == [1990, "Anon"]

    def test_params_are_a_copy(self, like_query):
        rendered = like_query.render()
        rendered.params.append("junk")
        assert like_query.values == [1990, "Anon"]

    def test_statement_without_values(self):
        rendered = SQL("SELECT 1").render("named")
        assert rendered.sql == "SELECT 1"
        assert rendered.params == {}

    @pytest.mark.parametrize(
        "style, token",
        [
            (QmarkStyle(), "?"),
            (NumericStyle(), "$3"),
            (FormatStyle(), "%s"),
            (NamedStyle(), ":p3"),
        ],
    )
    def test_placeholder_tokens(self, style, token):
        assert style.placeholder(3) == token


def test_placeholder_count_equals_value_count(nested_three):
    for name in ("qmark", "numeric", "format", "named"):
        rendered = nested_three.render(name)
        assert len(rendered.params) == 3
    assert nested_three.render("format").sql.count("%s") == 3
    assert nested_three.render("named").sql.count(":p") == 3


# ---------------------------------------------------------------------------
# RenderedSQL
# ---------------------------------------------------------------------------


def test_rendered_carries_statement_name(simple):
    simple.set_name("find_by_column")
    rendered = simple.render("numeric")
    assert rendered.name == "find_by_column"


def test_as_tuple(simple):
    assert simple.render().as_tuple() == ("SELECT * FROM table WHERE column = ?", [1234])


def test_rendered_is_a_plain_dataclass():
    rendered = RenderedSQL(sql="SELECT 1", params=[], style="qmark")
    assert rendered.name == ""


def test_style_render_checks_shape():
    with pytest.raises(TemplateShapeError):
        QmarkStyle().render(["a", "b"], [])


# ---------------------------------------------------------------------------
# StyleFactory
# ---------------------------------------------------------------------------


class TestStyleFactory:
    def test_builtins_registered(self):
        assert {"qmark", "numeric", "format", "named"} <= set(StyleFactory.registered_styles())

    def test_create_returns_fresh_instance(self):
        first = StyleFactory.create("qmark")
        assert isinstance(first, QmarkStyle)
        assert StyleFactory.create("qmark") is not first

    def test_unknown_style(self, simple):
        with pytest.raises(UnknownStyleError) as exc_info:
            simple.render("oracle")
        assert exc_info.value.style == "oracle"
        assert "qmark" in str(exc_info.value)

    def test_register_decorator(self, simple):
        @StyleFactory.register("test_colon_numeric")
        class ColonNumericStyle(PlaceholderStyle):
            @property
            def style_name(self) -> str:
                return "test_colon_numeric"

            def placeholder(self, index: int) -> str:
                return f":{index}"

        try:
            rendered = simple.render("test_colon_numeric")
            assert rendered.sql == "SELECT * FROM table WHERE column = :1"
            assert rendered.params == [1234]
        finally:
            StyleFactory.unregister("test_colon_numeric")
        assert "test_colon_numeric" not in StyleFactory.registered_styles()

    def test_create_passes_options(self, simple):
        style = StyleFactory.create("named", prefix="arg")
        rendered = simple.render(style)
        assert rendered.sql == "SELECT * FROM table WHERE column = :arg1"
        assert rendered.params == {"arg1": 1234}

    def test_unregister_unknown_name_is_ignored(self):
        StyleFactory.unregister("never_registered")
        assert "never_registered" not in StyleFactory.registered_styles()


# ---------------------------------------------------------------------------
# Named style token boundaries
# ---------------------------------------------------------------------------


class TestNamedBoundaries:
    def test_word_character_after_placeholder_is_separated(self):
        rendered = SQL(["SELECT ", "_suffix"], 1).render("named")
        assert rendered.sql == "SELECT :p1 _suffix"
        assert rendered.params == {"p1": 1}

    def test_colon_before_placeholder_is_separated(self):
        rendered = SQL(["SELECT ARRAY[1,2][1:", "]"], 2).render("named")
        assert rendered.sql == "SELECT ARRAY[1,2][1: :p1]"

    def test_adjacent_placeholders_are_separated(self):
        rendered = SQL(["VALUES (", "", ")"], 1, 2).render("named")
        assert rendered.sql == "VALUES (:p1 :p2)"
        assert rendered.params == {"p1": 1, "p2": 2}

    def test_ordinary_boundaries_are_untouched(self, like_query):
        assert like_query.render("named").sql.endswith("year > :p1 AND author = :p2")

    def test_other_styles_are_not_padded(self):
        statement = SQL(["SELECT ", "_suffix"], 1)
        assert statement.sql == "SELECT ?_suffix"
        assert statement.text == "SELECT $1_suffix"
