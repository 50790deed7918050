import json

import pytest

import firefly.config
import firefly.data
import firefly.font
from firefly.definition import PLACEHOLDER_TYPE, PatternWarning
from firefly.syntax import Syntax

from .conftest import BLACK, FONT, GRAY, GREEN, RED, colors


class TestSyntax:
    def test_init(self, syntax):
        assert syntax.language == "demo"
        assert syntax.theme_name == "Test"
        assert syntax.font == FONT
        assert syntax.font_size == 12
        assert syntax.placeholders_allowed
        assert syntax.theme.font == FONT
        assert syntax.color_for("keyword") == RED
        assert [d.type for d in syntax.definitions] == [
            "comment",
            "keyword",
            PLACEHOLDER_TYPE,
        ]

    def test_defaults(self):
        syntax = Syntax()
        assert syntax.language == "default"
        assert syntax.theme_name == "Basic"
        assert syntax.font.is_system
        assert syntax.font_size == firefly.font.DEFAULT_FONT_SIZE
        assert [d.type for d in syntax.definitions] == [PLACEHOLDER_TYPE]
        assert syntax.available_languages() == set(firefly.data.LANGUAGES)
        assert syntax.available_themes() == set(firefly.data.THEMES)

    def test_paint(self, syntax):
        assert colors(syntax.paint("if (x) {} // note")) == [
            ("if", "#FF0000"),
            (" (x) {} ", "#000000"),
            ("// note", "#00FF00"),
        ]

    def test_placeholder_wins(self, syntax):
        # Placeholder is applied after the comment, even though
        # comment covers it.
        assert colors(syntax.paint("// <#todo#>")) == [
            ("// ", "#00FF00"),
            ("<#todo#>", "#888888"),
        ]

    def test_placeholder_doesnt_span_lines(self, syntax):
        assert colors(syntax.paint("<#a\nb#>")) == [("<#a\nb#>", "#000000")]

    def test_set_placeholders_allowed(self, syntax):
        syntax.set_placeholders_allowed(False)
        assert not syntax.placeholders_allowed
        assert [d.type for d in syntax.definitions] == ["comment", "keyword"]
        assert colors(syntax.paint("<#x#>")) == [("<#x#>", "#000000")]

        syntax.set_placeholders_allowed(True)
        assert syntax.definitions[-1].type == PLACEHOLDER_TYPE
        assert syntax.paint("<#x#>").color_at(0) == GRAY

    def test_set_language(self, syntax):
        syntax.set_language("Strings")
        assert syntax.language == "Strings"
        assert [d.type for d in syntax.definitions] == [
            "str",
            "esc",
            PLACEHOLDER_TYPE,
        ]
        assert colors(syntax.paint("if x")) == [("if x", "#000000")]

    def test_set_unknown_language(self, syntax):
        syntax.set_language("cobol")
        assert syntax.language == "cobol"
        assert [d.type for d in syntax.definitions] == [PLACEHOLDER_TYPE]
        assert colors(syntax.paint("if x // y")) == [("if x // y", "#000000")]

    def test_set_theme(self, syntax):
        syntax.set_theme("Other")
        assert syntax.theme_name == "Other"
        assert syntax.color_for("keyword") == GREEN
        assert syntax.theme.default_color.to_hex() == "#FFFFFF"
        assert syntax.theme.font == FONT

    def test_set_unknown_theme(self, syntax):
        theme = syntax.theme
        syntax.set_theme("Solarized")
        assert syntax.theme_name == "Test"
        assert syntax.theme is theme

    def test_unknown_initial_theme(self, languages, themes):
        syntax = Syntax("demo", "Solarized", languages=languages, themes=themes)
        assert syntax.theme_name is None
        assert syntax.theme.default_color == BLACK
        assert colors(syntax.paint("if")) == [("if", "#000000")]

    def test_set_font(self, syntax):
        syntax.set_font("Hack")
        assert syntax.font == firefly.font.Font("Hack", 12)
        assert syntax.theme.font == syntax.font
        assert syntax.paint("if").font_at(0) == syntax.font
        assert syntax.theme_name == "Test"
        assert syntax.color_for("keyword") == RED

    def test_set_unknown_font(self, syntax):
        syntax.set_font("Comic Sans MS")
        assert syntax.font.is_system
        assert syntax.font.size == 12
        assert syntax.theme.font == syntax.font

    def test_set_font_size(self, syntax):
        syntax.set_font_size(20)
        assert syntax.font_size == 20
        assert syntax.font == firefly.font.Font("Fira Code", 20)
        assert syntax.theme.font == syntax.font

    def test_set_font_size_keeps_system_font(self, languages, themes):
        syntax = Syntax("demo", "Test", languages=languages, themes=themes)
        syntax.set_font_size(18)
        assert syntax.font == firefly.font.system_font(18)
        assert syntax.theme.font == syntax.font

    def test_malformed_language_table(self, themes):
        with pytest.warns(PatternWarning, match=r"expected a mapping"):
            syntax = Syntax("broken", "Test", languages={"broken": ["kw"]}, themes=themes)
        assert [d.type for d in syntax.definitions] == [PLACEHOLDER_TYPE]
        assert colors(syntax.paint("<#x#>")) == [("<#x#>", "#888888")]

    def test_set_font_without_theme(self, languages, themes):
        syntax = Syntax("demo", "Solarized", languages=languages, themes=themes)
        syntax.set_font("Hack")
        assert syntax.theme_name is None
        assert syntax.theme.font == firefly.font.Font("Hack", 13)

    def test_get_theme(self, syntax):
        theme = syntax.get_theme("Other")
        assert theme is not None
        assert theme.color_for("keyword") == GREEN
        assert theme.font == FONT
        assert syntax.theme_name == "Test"
        assert syntax.get_theme("other") is None

    def test_available(self, syntax):
        assert syntax.available_languages() == {"demo", "strings"}
        assert syntax.available_themes() == {"Test", "Other"}

    def test_from_config(self, tmp_path):
        languages_file = tmp_path / "languages.json"
        languages_file.write_text(
            json.dumps({"Demo": {"keyword": {"pattern": r"\bif\b", "priority": 5}}})
        )
        themes_file = tmp_path / "themes.json"
        themes_file.write_text(
            json.dumps({"Test": {"definitions": {"keyword": "#FF0000"}}})
        )

        config = firefly.config.Config(
            language="demo",
            theme="Test",
            font="Hack",
            font_size=10,
            placeholders=False,
            languages_file=languages_file,
            themes_file=themes_file,
        )
        syntax = Syntax.from_config(config)

        assert syntax.language == "demo"
        assert syntax.theme_name == "Test"
        assert syntax.font == firefly.font.Font("Hack", 10)
        assert not syntax.placeholders_allowed
        assert "swift" in syntax.available_languages()
        assert "Basic" in syntax.available_themes()
        assert colors(syntax.paint("if x")) == [("if", "#FF0000"), (" x", "#000000")]
