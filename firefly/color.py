# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Colors used by themes and styled text are stored as :class:`ColorValue`
instances. They hold RGBA components and know how to parse themselves from
hex strings found in theme tables.

.. autoclass:: ColorValue
   :members:

.. autoclass:: ThemeWarning

.. autodata:: BLACK

"""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass

import firefly
from firefly import _typing as _t

__all__ = [
    "BLACK",
    "ColorValue",
    "ThemeWarning",
]


class ThemeWarning(firefly.FireflyWarning):
    """
    Emitted when theme data contains something that can't be understood,
    like a malformed color string.

    """


_HEX_RE = re.compile(r"^#?(?P<rgb>[0-9a-fA-F]{6})(?P<alpha>[0-9a-fA-F]{2})?$")


@dataclass(frozen=True, slots=True)
class ColorValue:
    """
    Data about a single color.

    """

    r: int
    """
    Red component, between ``0`` and ``255``.

    """

    g: int
    """
    Green component, between ``0`` and ``255``.

    """

    b: int
    """
    Blue component, between ``0`` and ``255``.

    """

    a: int = 0xFF
    """
    Alpha component, between ``0`` (transparent) and ``255`` (opaque).

    """

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} component out of range: {value}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: int = 0xFF, /) -> ColorValue:
        """
        Create a color value from rgb components.

        Each component should be between 0 and 255.

        :example:
            ::

                >>> ColorValue.from_rgb(0xA0, 0x1E, 0x9C)
                <ColorValue #A01E9C>

        """

        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, h: str, /) -> ColorValue:
        """
        Create a color value from a hex string.

        Accepts ``#RRGGBB`` and ``#RRGGBBAA``, leading ``#`` is optional.

        :raises:
            :class:`ValueError` if string is not a valid hex color.
        :example:
            ::

                >>> ColorValue.from_hex('#A01E9C')
                <ColorValue #A01E9C>
                >>> ColorValue.from_hex('#ebdbb260')
                <ColorValue #EBDBB260>

        """

        match = _HEX_RE.match(h.strip()) if isinstance(h, str) else None
        if match is None:
            raise ValueError(f"invalid hex string {h!r}")
        rgb = match.group("rgb")
        alpha = match.group("alpha")
        return cls(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            int(alpha, 16) if alpha else 0xFF,
        )

    @classmethod
    def parse(cls, h: _t.Any, /, *, default: ColorValue | None = None) -> ColorValue:
        """
        Like :meth:`from_hex`, but never fails.

        If ``h`` is not a valid hex string, emits a :class:`ThemeWarning`
        and returns ``default`` (black, unless given).

        :example:
            ::

                >>> ColorValue.parse('#3c3836')
                <ColorValue #3C3836>
                >>> ColorValue.parse('not a color')
                <ColorValue #000000>

        """

        try:
            return cls.from_hex(h)
        except ValueError as e:
            warnings.warn(f"invalid color code {h!r}: {e}", ThemeWarning)
            firefly._logger.debug("invalid color code %r, using black", h)
            return BLACK if default is None else default

    def to_hex(self) -> str:
        """
        Return color in hex format with leading ``#``.

        Alpha is only included when color is not fully opaque.

        :example:
            ::

                >>> ColorValue.from_hex('#A01E9C').to_hex()
                '#A01E9C'

        """

        res = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if self.a != 0xFF:
            res += f"{self.a:02X}"
        return res

    def to_rgb(self) -> tuple[int, int, int]:
        """
        Return RGB components of the color.

        :example:
            ::

                >>> ColorValue.from_hex('#A01E9C').to_rgb()
                (160, 30, 156)

        """

        return self.r, self.g, self.b

    def __repr__(self) -> str:
        return f"<ColorValue {self.to_hex()}>"


BLACK: ColorValue = ColorValue(0, 0, 0)
"""
Color that replaces anything that can't be parsed.

"""
