# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Controlling the look of highlighted code with themes.

Theme tables
------------

Themes come from external configuration as plain records of hex strings:

.. code-block:: python

    {
        "default": "#3c3836",  # text color
        "background": "#f9f5d7",
        "currentLine": "#ebdbb260",
        "selection": "#689d6a40",
        "cursor": "#3c3836",
        "lineNumber": "#bdae93",
        "lineNumber-Active": "#bdae93",
        "style": "light",
        "definitions": {
            "keyword": "#9d0006",
            "string": "#79740e",
        },
    }

Every field is optional. Missing or malformed colors become black, and
``style`` is dark unless it is exactly ``"light"``.

Use :func:`resolve_theme` to turn such a record into a :class:`Theme`:

.. autofunction:: resolve_theme

.. autoclass:: Theme
   :members:

.. autoclass:: ThemeStyle
   :members:

"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import firefly.color
import firefly.font
from firefly import _typing as _t
from firefly.color import ColorValue, ThemeWarning

__all__ = [
    "Theme",
    "ThemeStyle",
    "ThemeWarning",
    "resolve_theme",
]


class ThemeStyle(enum.Enum):
    """
    Whether theme is designed for light or dark surroundings.

    """

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Theme:
    """
    A fully resolved color theme.

    Default values describe a plain black-on-white theme
    with no token colors.

    """

    default_color: ColorValue = firefly.color.BLACK
    """
    Color of text that isn't matched by any definition.

    """

    background: ColorValue = ColorValue(0xFF, 0xFF, 0xFF)
    """
    Editor background.

    """

    current_line: ColorValue = ColorValue(0, 0, 0, 0)
    """
    Background of the line with cursor.

    """

    selection: ColorValue = ColorValue(0, 0, 0xFF)
    """
    Background of selected text.

    """

    cursor: ColorValue = ColorValue(0, 0, 0xFF)
    """
    Cursor color.

    """

    line_number: ColorValue = ColorValue(0xFF, 0xFF, 0xFF)
    """
    Gutter line numbers.

    """

    line_number_active: ColorValue = ColorValue(0xFF, 0xFF, 0xFF)
    """
    Gutter line number of the line with cursor.

    """

    style: ThemeStyle = ThemeStyle.LIGHT
    """
    Light or dark.

    """

    font: firefly.font.Font = field(default_factory=firefly.font.system_font)
    """
    Font applied to all highlighted text.

    """

    colors: _t.Mapping[str, ColorValue] = field(default_factory=dict)
    """
    Token colors, keyed by definition type.

    """

    def color_for(self, token: str, /) -> ColorValue:
        """
        Get color for the given token type, falling back
        to :attr:`~Theme.default_color`.

        """

        return self.colors.get(token, self.default_color)


_FIELDS = {
    "default_color": "default",
    "background": "background",
    "current_line": "currentLine",
    "selection": "selection",
    "cursor": "cursor",
    "line_number": "lineNumber",
    "line_number_active": "lineNumber-Active",
}


def resolve_theme(
    raw: _t.Mapping[str, _t.Any],
    /,
    *,
    font: firefly.font.Font | None = None,
) -> Theme:
    """
    Convert a raw theme record into a :class:`Theme`.

    This function never fails. Missing colors default to black, malformed ones
    are replaced by black with a :class:`~firefly.color.ThemeWarning`.

    Token colors in ``definitions`` can be given as a mapping or as a list
    of key-value pairs. If a key appears more than once, the first value wins.

    :param raw:
        theme record, see above.
    :param font:
        font to embed into the theme. Default is the system font.
    :example:
        ::

            >>> theme = resolve_theme({
            ...     "default": "#000000",
            ...     "style": "light",
            ...     "definitions": [("keyword", "#ff0000"), ("keyword", "#00ff00")],
            ... })
            >>> theme.color_for("keyword")
            <ColorValue #FF0000>
            >>> theme.color_for("comment")
            <ColorValue #000000>

    """

    kwargs: dict[str, _t.Any] = {}
    for name, key in _FIELDS.items():
        kwargs[name] = ColorValue.parse(raw.get(key, "#000000"))

    style = ThemeStyle.LIGHT if raw.get("style") == "light" else ThemeStyle.DARK

    colors: dict[str, ColorValue] = {}
    definitions = raw.get("definitions") or ()
    if isinstance(definitions, _t.Mapping):
        definitions = definitions.items()
    for item in definitions:
        try:
            token, value = item
        except (TypeError, ValueError):
            firefly._logger.debug("skipping malformed token color %r", item)
            continue
        if token not in colors:
            colors[token] = ColorValue.parse(value)

    return Theme(
        style=style,
        font=font if font is not None else firefly.font.system_font(),
        colors=colors,
        **kwargs,
    )
