# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Result of highlighting is a :class:`StyledText`: a string where every character
has a foreground color and a font.

.. autoclass:: StyledText
   :members:

.. autoclass:: Attributes
   :members:

"""

from __future__ import annotations

from dataclasses import dataclass

import firefly.color
import firefly.font
from firefly import _typing as _t

__all__ = [
    "Attributes",
    "StyledText",
]


@dataclass(frozen=True, slots=True)
class Attributes:
    """
    Style of a single character.

    """

    color: firefly.color.ColorValue
    """
    Foreground color.

    """

    font: firefly.font.Font
    """
    Font.

    """


class StyledText:
    """StyledText(text: str, attributes: Attributes, /)

    A string with per-character colors and fonts.

    Raw characters of a styled text never change; only attributes layered
    over them can be overwritten with :meth:`~StyledText.set_attributes`.

    :param text:
        raw text.
    :param attributes:
        initial attributes for every character.
    :example:
        ::

            >>> import firefly.color, firefly.font
            >>> red = firefly.color.ColorValue.from_hex("#FF0000")
            >>> black = firefly.color.BLACK
            >>> font = firefly.font.Font("Menlo", 12)
            >>> s = StyledText("hello world", Attributes(black, font))
            >>> s.set_attributes(0, 5, Attributes(red, font))
            >>> [(text, attrs.color) for text, attrs in s.runs()]
            [('hello', <ColorValue #FF0000>), (' world', <ColorValue #000000>)]

    """

    # Invariants:
    #
    # - `len(self._attributes) == len(self._text)`.

    def __init__(self, text: str, attributes: Attributes, /):
        self._text = text
        self._attributes: list[Attributes] = [attributes] * len(text)

    @property
    def text(self) -> str:
        """
        Raw text without any styling.

        """

        return self._text

    def set_attributes(self, start: int, end: int, attributes: Attributes, /):
        """
        Overwrite attributes of characters in range ``[start, end)``.

        Out-of-range bounds are clipped to the text.

        """

        start = max(0, min(start, len(self._text)))
        end = max(start, min(end, len(self._text)))
        self._attributes[start:end] = [attributes] * (end - start)

    def reset(self, attributes: Attributes, /):
        """
        Set the same attributes for the entire text.

        """

        self._attributes = [attributes] * len(self._text)

    def attributes_at(self, i: int, /) -> Attributes:
        """
        Get attributes of the ``i``-th character.

        """

        return self._attributes[i]

    def color_at(self, i: int, /) -> firefly.color.ColorValue:
        """
        Get color of the ``i``-th character.

        """

        return self._attributes[i].color

    def font_at(self, i: int, /) -> firefly.font.Font:
        """
        Get font of the ``i``-th character.

        """

        return self._attributes[i].font

    def runs(self) -> _t.Iterator[tuple[str, Attributes]]:
        """
        Iterate over maximal substrings that share the same attributes.

        """

        start = 0
        for i in range(1, len(self._text) + 1):
            if i == len(self._text) or self._attributes[i] != self._attributes[start]:
                yield self._text[start:i], self._attributes[start]
                start = i

    def copy(self) -> StyledText:
        """
        Return a copy of this text.

        """

        res = StyledText.__new__(StyledText)
        res._text = self._text
        res._attributes = self._attributes.copy()
        return res

    def to_ansi(self) -> str:
        """
        Render text with 24-bit ANSI foreground colors, for terminal output.

        Fonts can't be changed in a terminal, so they're ignored.

        """

        res = []
        for text, attributes in self.runs():
            r, g, b = attributes.color.to_rgb()
            res.append(f"\x1b[38;2;{r};{g};{b}m{text}")
        if res:
            res.append("\x1b[0m")
        return "".join(res)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __eq__(self, value: object, /) -> bool:
        if isinstance(value, StyledText):
            return self._text == value._text and self._attributes == value._attributes
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        runs = ", ".join(
            f"({text!r}, {attributes.color.to_hex()!r})"
            for text, attributes in self.runs()
        )
        return f"StyledText([{runs}])"
