# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
A stateful highlighter for editors.

Editors usually highlight text many times with the same language, theme
and font. :class:`Syntax` keeps these settings, along with definitions compiled
for the current language and a resolved theme, and reuses them for every call
to :meth:`~Syntax.paint`:

.. code-block:: python

    syntax = firefly.syntax.Syntax(language="swift", theme="Monokai")
    styled = syntax.paint('let greeting = "Hello, <#name#>"')

Settings are only changed through setters; every setter recompiles whatever
depends on it right away. Unknown languages produce no highlighting, unknown
themes are ignored.

Unlike :func:`firefly.hl.highlight`, :class:`Syntax` always colors editor
placeholders like ``<#name#>``, unless this is disabled
with :meth:`~Syntax.set_placeholders_allowed`.

:class:`Syntax` is not thread safe; all calls should come from the same thread.

.. autoclass:: Syntax
   :members:

"""

from __future__ import annotations

import dataclasses

import firefly
import firefly.config
import firefly.data
import firefly.definition
import firefly.font
import firefly.hl
import firefly.string
import firefly.theme
from firefly import _typing as _t

__all__ = [
    "Syntax",
]


class Syntax:
    """
    Current language, theme and font, with definitions and theme
    compiled for them.

    :param language:
        initial language, case-insensitive.
    :param theme:
        initial theme name. If not found, a plain black-on-white theme is used.
    :param font:
        initial font name, ``"system"`` for the platform's default font.
    :param font_size:
        initial font size.
    :param placeholders_allowed:
        whether editor placeholders should be highlighted.
    :param languages:
        language table. Default is :data:`firefly.data.LANGUAGES`.
    :param themes:
        theme table. Default is :data:`firefly.data.THEMES`.
    :example:
        ::

            >>> syntax = Syntax(language="swift", theme="Basic")
            >>> styled = syntax.paint("if <#cond#> {}")
            >>> styled.color_at(0) == syntax.color_for("keyword")
            True
            >>> styled.color_at(3) == syntax.color_for("placeholder")
            True

    """

    def __init__(
        self,
        language: str = "default",
        theme: str = "Basic",
        font: str = firefly.font.SYSTEM,
        *,
        font_size: float = firefly.font.DEFAULT_FONT_SIZE,
        placeholders_allowed: bool = True,
        languages: firefly.definition.LanguageTable | None = None,
        themes: _t.Mapping[str, _t.Mapping[str, _t.Any]] | None = None,
    ):
        self._languages = firefly.data.LANGUAGES if languages is None else languages
        self._themes = firefly.data.THEMES if themes is None else themes

        self._language = language
        self._theme_name: str | None = None
        self._font_size = font_size
        self._font = firefly.font.resolve_font(font, font_size)
        self._placeholders_allowed = placeholders_allowed

        self._definitions: tuple[firefly.definition.Definition, ...] = ()
        self._theme = firefly.theme.Theme(font=self._font)

        self.set_language(language)
        self.set_theme(theme)

    @classmethod
    def from_config(cls, config: firefly.config.Config, /) -> Syntax:
        """
        Create a highlighter from a config, loading any extra language
        and theme tables it points to.

        """

        languages, themes = firefly.config.load_tables(config)
        return cls(
            language=config.language,
            theme=config.theme,
            font=config.font,
            font_size=config.font_size,
            placeholders_allowed=config.placeholders,
            languages=languages,
            themes=themes,
        )

    @property
    def language(self) -> str:
        """
        Current language, as it was given to :meth:`~Syntax.set_language`.

        """

        return self._language

    @property
    def theme_name(self) -> str | None:
        """
        Name of the current theme, or :data:`None` if no known theme
        was set yet.

        """

        return self._theme_name

    @property
    def theme(self) -> firefly.theme.Theme:
        """
        Current resolved theme.

        """

        return self._theme

    @property
    def font(self) -> firefly.font.Font:
        """
        Current font.

        """

        return self._font

    @property
    def font_size(self) -> float:
        """
        Current font size.

        """

        return self._font_size

    @property
    def placeholders_allowed(self) -> bool:
        """
        Whether editor placeholders are highlighted.

        """

        return self._placeholders_allowed

    @property
    def definitions(self) -> tuple[firefly.definition.Definition, ...]:
        """
        Definitions compiled for the current language, in the order
        they're applied.

        """

        return self._definitions

    def set_language(self, language: str, /):
        """
        Switch to another language and recompile definitions.

        Unknown languages are not an error: they simply have no definitions
        (except for placeholders).

        """

        self._definitions = tuple(
            firefly.definition.compile_definitions(
                language,
                self._languages,
                inject_placeholder=self._placeholders_allowed,
            )
        )
        self._language = language
        firefly._logger.debug(
            "compiled %s definition(s) for language %r",
            len(self._definitions),
            language,
        )

    def set_placeholders_allowed(self, placeholders_allowed: bool, /):
        """
        Enable or disable highlighting of editor placeholders,
        and recompile definitions.

        """

        self._placeholders_allowed = placeholders_allowed
        self.set_language(self._language)

    def set_theme(self, name: str, /):
        """
        Switch to another theme.

        If theme with this name doesn't exist, nothing happens.

        """

        theme = self.get_theme(name)
        if theme is None:
            firefly._logger.debug("unknown theme %r, keeping the current one", name)
            return
        self._theme = theme
        self._theme_name = name

    def set_font(self, name: str, /):
        """
        Switch to another font and update the theme.

        ``"system"`` means the platform's default font; unknown fonts
        fall back to it as well.

        """

        self._font = firefly.font.resolve_font(name, self._font_size)
        self._refresh_theme()

    def set_font_size(self, size: float, /):
        """
        Change font size and update the theme.

        """

        self._font_size = size
        self._font = self._font.with_size(size)
        self._refresh_theme()

    def _refresh_theme(self):
        if self._theme_name is not None:
            self.set_theme(self._theme_name)
        else:
            self._theme = dataclasses.replace(self._theme, font=self._font)

    def get_theme(self, name: str, /) -> firefly.theme.Theme | None:
        """
        Resolve a theme from the theme table with the current font,
        without switching to it.

        """

        raw = self._themes.get(name)
        if raw is None:
            return None
        return firefly.theme.resolve_theme(raw, font=self._font)

    def color_for(self, token: str, /):
        """
        Get color that the current theme assigns to a token type.

        """

        return self._theme.color_for(token)

    def available_languages(self) -> set[str]:
        """
        Names of all languages in the language table.

        """

        return set(self._languages)

    def available_themes(self) -> set[str]:
        """
        Names of all themes in the theme table.

        """

        return set(self._themes)

    def paint(
        self, text: str | firefly.string.StyledText, /
    ) -> firefly.string.StyledText:
        """
        Highlight text using the current definitions and theme.

        """

        return firefly.hl.paint(text, self._definitions, self._theme)
