import pytest

import firefly.color
import firefly.font
import firefly.syntax
import firefly.theme
from firefly import _typing as _t

RED = firefly.color.ColorValue.from_hex("#FF0000")
GREEN = firefly.color.ColorValue.from_hex("#00FF00")
BLUE = firefly.color.ColorValue.from_hex("#0000FF")
GRAY = firefly.color.ColorValue.from_hex("#888888")
BLACK = firefly.color.BLACK

FONT = firefly.font.Font("Fira Code", 12)


@pytest.fixture
def languages() -> dict[str, dict[str, dict[str, _t.Any]]]:
    return {
        "demo": {
            "keyword": {"regex": r"\bif\b", "relevance": 5},
            "comment": {"regex": r"//.*", "relevance": 1},
        },
        "strings": {
            "str": {"regex": r'"[^"]*"', "relevance": 2},
            "esc": {"regex": r"\\.", "relevance": 8},
        },
    }


@pytest.fixture
def themes() -> dict[str, dict[str, _t.Any]]:
    return {
        "Test": {
            "default": "#000000",
            "background": "#ffffff",
            "style": "light",
            "definitions": {
                "keyword": "#FF0000",
                "comment": "#00FF00",
                "str": "#0000FF",
                "esc": "#FF0000",
                "placeholder": "#888888",
            },
        },
        "Other": {
            "default": "#FFFFFF",
            "style": "dark",
            "definitions": {
                "keyword": "#00FF00",
            },
        },
    }


@pytest.fixture
def theme(themes) -> firefly.theme.Theme:
    return firefly.theme.resolve_theme(themes["Test"], font=FONT)


@pytest.fixture
def syntax(languages, themes) -> firefly.syntax.Syntax:
    return firefly.syntax.Syntax(
        "demo", "Test", "Fira Code", font_size=12, languages=languages, themes=themes
    )


def colors(styled) -> list[tuple[str, str]]:
    """Turn styled text into a list of runs with hex colors."""
    return [(text, attributes.color.to_hex()) for text, attributes in styled.runs()]
