# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Font descriptors attached to styled text.

Firefly doesn't render text, so it doesn't load actual font files. Instead,
it keeps a registry of font family names that the rendering side knows about,
and resolves requested names against it. Unknown names fall back to the
platform's default font.

.. autoclass:: Font
   :members:

.. autofunction:: resolve_font

.. autofunction:: system_font

.. autofunction:: register_font

.. autofunction:: available_fonts

"""

from __future__ import annotations

import platform
from dataclasses import dataclass

import firefly

__all__ = [
    "DEFAULT_FONT_SIZE",
    "SYSTEM",
    "Font",
    "available_fonts",
    "register_font",
    "resolve_font",
    "system_font",
]


SYSTEM = "system"
"""
Name that always resolves to the platform's default font.

"""

DEFAULT_FONT_SIZE: float = 13.0
"""
Font size used when none is given.

"""

_SYSTEM_FONTS = {
    "darwin": "Menlo",
    "windows": "Consolas",
    "linux": "DejaVu Sans Mono",
}

_FONTS: dict[str, str] = {}


@dataclass(frozen=True, slots=True)
class Font:
    """
    Font family and size.

    """

    name: str
    """
    Family name, as understood by the rendering side.

    """

    size: float = DEFAULT_FONT_SIZE
    """
    Point size.

    """

    is_system: bool = False
    """
    Whether this is the platform's default font.

    """

    def with_size(self, size: float, /) -> Font:
        """
        Return the same font at a different size.

        """

        return Font(self.name, size, self.is_system)


def system_font(size: float = DEFAULT_FONT_SIZE, /) -> Font:
    """
    Return the platform's default font at the given size.

    """

    name = _SYSTEM_FONTS.get(platform.system().lower(), "monospace")
    return Font(name, size, is_system=True)


def register_font(*names: str):
    """
    Make font families known to :func:`resolve_font`.

    Lookup is case-insensitive; the name is stored as given here.

    """

    for name in names:
        _FONTS[name.lower()] = name


def available_fonts() -> set[str]:
    """
    Return names of all registered font families.

    """

    return set(_FONTS.values())


def resolve_font(name: str, size: float = DEFAULT_FONT_SIZE, /) -> Font:
    """
    Look up a font by name.

    :param name:
        family name. ``"system"`` maps to the platform's default font.
    :param size:
        point size.
    :returns:
        a font descriptor. If the name is not registered, returns
        :func:`system_font` at the given size.
    :example:
        ::

            >>> resolve_font("Fira Code", 12)
            Font(name='Fira Code', size=12, is_system=False)
            >>> resolve_font("no such font", 12).is_system
            True

    """

    if name == SYSTEM:
        return system_font(size)
    if canonical := _FONTS.get(name.lower()):
        return Font(canonical, size)
    firefly._logger.debug("font %r is not available, using system font", name)
    return system_font(size)


register_font(
    "Menlo",
    "Monaco",
    "Courier",
    "Courier New",
    "Consolas",
    "DejaVu Sans Mono",
    "Fira Code",
    "Fira Mono",
    "Hack",
    "Inconsolata",
    "JetBrains Mono",
    "Source Code Pro",
    "SF Mono",
    "Ubuntu Mono",
)
