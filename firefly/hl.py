# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Applying definitions to text.

Painting
--------

:func:`paint` takes an ordered list of definitions and applies them to text
one by one. Every match of every definition overwrites colors that were set
before, so the final color of a character comes from the *last* definition
that matched it. :func:`~firefly.definition.compile_definitions` orders
definitions by relevance, so the most relevant definition wins.

For example, let's highlight escape sequences inside strings. A string
definition colors the whole literal, and a more relevant escape definition
paints over a part of it:

.. invisible-code-block: python

    import firefly.definition, firefly.hl, firefly.theme
    theme = firefly.theme.Theme()

.. code-block:: python

    table = {
        "demo": {
            "str": {"regex": r'"[^"]*"', "relevance": 2},
            "esc": {"regex": r"\\\\.", "relevance": 8},
        }
    }

    definitions = firefly.definition.compile_definitions("demo", table)
    styled = firefly.hl.paint(r'"a\\nb"', definitions, theme)

Definitions that fail to compile are skipped with
a :class:`~firefly.definition.PatternWarning`; the rest are still applied.

.. autofunction:: paint


One-shot highlighting
---------------------

When there's no need to keep compiled definitions around,
use :func:`highlight`:

.. autofunction:: highlight

"""

from __future__ import annotations

import re
import warnings

import firefly
import firefly.data
import firefly.definition
import firefly.string
import firefly.theme
from firefly import _typing as _t
from firefly.definition import Definition, PatternWarning
from firefly.string import Attributes, StyledText

__all__ = [
    "PatternWarning",
    "highlight",
    "paint",
]


def _compile(definition: Definition) -> re.Pattern[str] | None:
    try:
        pattern = definition.compile()
    except (re.error, ValueError, OverflowError) as e:
        warnings.warn(
            f"skipping definition {definition.type!r}: "
            f"can't compile {definition.regex!r}: {e}",
            PatternWarning,
        )
        firefly._logger.debug("skipping definition %r: %s", definition.type, e)
        return None

    if not 0 <= definition.group <= pattern.groups:
        warnings.warn(
            f"skipping definition {definition.type!r}: "
            f"group {definition.group} is out of range, "
            f"pattern has {pattern.groups} group(s)",
            PatternWarning,
        )
        firefly._logger.debug(
            "skipping definition %r: group %s is out of range",
            definition.type,
            definition.group,
        )
        return None

    return pattern


def paint(
    text: str | StyledText,
    definitions: _t.Iterable[Definition],
    theme: firefly.theme.Theme,
    /,
) -> StyledText:
    """
    Apply definitions to text.

    First, the entire text gets the theme's default color and font. Then,
    for every definition in order, every non-overlapping match
    of its :attr:`~firefly.definition.Definition.regex` is found, and range
    of its :attr:`~firefly.definition.Definition.group` is painted with
    the color that the theme assigns to the definition's type.

    :param text:
        text to highlight. If given a :class:`~firefly.string.StyledText`,
        its raw characters are used and its previous styling is discarded.
    :param definitions:
        ordered definitions, see
        :func:`~firefly.definition.compile_definitions`.
    :param theme:
        theme that provides colors and font.
    :returns:
        a new styled text.
    :example:
        ::

            >>> import firefly.definition, firefly.theme
            >>> theme = firefly.theme.resolve_theme({
            ...     "definitions": {"keyword": "#FF0000", "comment": "#00FF00"},
            ... })
            >>> table = {
            ...     "demo": {
            ...         "keyword": {"regex": r"\\bif\\b", "relevance": 5},
            ...         "comment": {"regex": r"//.*", "relevance": 1},
            ...     }
            ... }
            >>> definitions = firefly.definition.compile_definitions("demo", table)
            >>> paint("if (x) {} // note", definitions, theme)
            StyledText([('if', '#FF0000'), (' (x) {} ', '#000000'), ('// note', '#00FF00')])

    """

    font = theme.font
    baseline = Attributes(theme.default_color, font)
    if isinstance(text, StyledText):
        res = text.copy()
        res.reset(baseline)
        text = res.text
    else:
        res = StyledText(text, baseline)

    for definition in definitions:
        pattern = _compile(definition)
        if pattern is None:
            continue

        attributes = Attributes(theme.color_for(definition.type), font)
        for match in pattern.finditer(text):
            start, end = match.span(definition.group)
            if start < end:
                res.set_attributes(start, end, attributes)

    return res


def highlight(
    text: str | StyledText,
    /,
    *,
    theme: firefly.theme.Theme | _t.Mapping[str, _t.Any],
    language: str,
    languages: firefly.definition.LanguageTable | None = None,
) -> StyledText:
    """
    Compile definitions for a language and apply them to text in one go.

    Unlike :class:`firefly.syntax.Syntax`, this function doesn't color editor
    placeholders.

    :param text:
        text to highlight.
    :param theme:
        resolved theme, or a raw theme record that will be passed
        to :func:`~firefly.theme.resolve_theme`.
    :param language:
        name of the language, case-insensitive. For unknown languages,
        the entire text gets the theme's default color.
    :param languages:
        language table. Default is :data:`firefly.data.LANGUAGES`.

    """

    if not isinstance(theme, firefly.theme.Theme):
        theme = firefly.theme.resolve_theme(theme)
    if languages is None:
        languages = firefly.data.LANGUAGES

    definitions = firefly.definition.compile_definitions(
        language, languages, inject_placeholder=False
    )
    return paint(text, definitions, theme)
