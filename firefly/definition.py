# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Languages are described by tables of named regular expressions, called
*definitions*. This module turns such tables into ordered lists
of :class:`Definition` objects that :func:`firefly.hl.paint` can apply.


Language tables
---------------

A language table maps lowercase language names to definitions. Each definition
is keyed by its token type, and contains a regular expression and some
optional settings:

.. code-block:: python

    {
        "swift": {
            "keyword": {
                "regex": r"\\b(if|else|return)\\b",
                "relevance": 5,
            },
            "comment": {
                "regex": r"//.*",
                "relevance": 1,
            },
            "string": {
                "regex": r'(")((?:\\\\.|[^\\\\"])*)(")',
                "group": 2,
                "options": ["caseInsensitive"],
                "multiline": False,
            },
        },
    }

``regex``
    regular expression source. Alias: ``pattern``.

``group``
    index of a capturing group that should be colored; ``0`` colors the whole
    match. Alias: ``captureGroup``.

``relevance``
    overlap precedence, higher wins. Alias: ``priority``.

``options``
    list of :class:`MatchOption` values or their names. Alias: ``matchOptions``.

``multiline``
    hint for editors that re-highlight text line by line. Firefly itself
    doesn't use it. Alias: ``spansMultipleLines``.


Compiling definitions
---------------------

.. autofunction:: compile_definitions

.. autofunction:: placeholder_definition

.. autodata:: PLACEHOLDER_PATTERN

.. autoclass:: Definition
   :members:

.. autoclass:: MatchOption
   :members:

"""

from __future__ import annotations

import enum
import functools
import operator
import re
import warnings
from dataclasses import dataclass

import firefly
from firefly import _typing as _t

__all__ = [
    "PLACEHOLDER_PATTERN",
    "PLACEHOLDER_RELEVANCE",
    "PLACEHOLDER_TYPE",
    "Definition",
    "LanguageTable",
    "MatchOption",
    "PatternWarning",
    "compile_definitions",
    "find_language",
    "placeholder_definition",
]


class PatternWarning(firefly.FireflyWarning):
    """
    Emitted when a definition can't be compiled or applied.

    """


class MatchOption(enum.IntFlag):
    """
    Regular expression options that can be attached to a definition.

    Values are compatible with flags from :mod:`re`.

    """

    #: Match letters regardless of their case.
    CASE_INSENSITIVE = int(re.IGNORECASE)

    #: Allow ``.`` to match newlines.
    DOT_MATCHES_LINE_SEPARATORS = int(re.DOTALL)

    #: Allow ``^`` and ``$`` to match at line boundaries.
    ANCHORS_MATCH_LINES = int(re.MULTILINE)

    #: Ignore whitespace and ``#``-comments in the pattern.
    ALLOW_COMMENTS_AND_WHITESPACE = int(re.VERBOSE)

    #: Treat the whole pattern as a literal string.
    IGNORE_METACHARACTERS = 1 << 24

    @classmethod
    def parse(cls, value: _t.Any, /) -> MatchOption:
        """
        Convert option name or value to :class:`MatchOption`.

        Accepts enum values, :mod:`re` flags, and names in ``camelCase``
        (``"caseInsensitive"``), ``UPPER_CASE`` (``"CASE_INSENSITIVE"``),
        or :mod:`re` spelling (``"ignorecase"``).

        :raises:
            :class:`ValueError` if the option is not known.
        :example:
            ::

                >>> MatchOption.parse("caseInsensitive")
                <MatchOption.CASE_INSENSITIVE: 2>
                >>> MatchOption.parse("dotall")
                <MatchOption.DOT_MATCHES_LINE_SEPARATORS: 16>

        """

        if isinstance(value, cls):
            return value
        elif isinstance(value, int) and not isinstance(value, bool):
            if value and not value & ~sum(option.value for option in cls):
                return cls(value)
        elif isinstance(value, str):
            key = re.sub(r"[^a-z]", "", value.lower())
            if key in _OPTION_NAMES:
                return _OPTION_NAMES[key]
        raise ValueError(f"unknown match option {value!r}")


_OPTION_NAMES = {
    **{option.name.replace("_", "").lower(): option for option in MatchOption},  # type: ignore
    "ignorecase": MatchOption.CASE_INSENSITIVE,
    "dotall": MatchOption.DOT_MATCHES_LINE_SEPARATORS,
    "multiline": MatchOption.ANCHORS_MATCH_LINES,
    "verbose": MatchOption.ALLOW_COMMENTS_AND_WHITESPACE,
    "literal": MatchOption.IGNORE_METACHARACTERS,
}


@dataclass(frozen=True, slots=True)
class Definition:
    """
    A single compiled definition.

    """

    type: str
    """
    Token type, used to look up color in a theme.

    """

    regex: str
    """
    Regular expression source.

    """

    group: int = 0
    """
    Index of capturing group to color.

    """

    relevance: int = 0
    """
    Overlap precedence, higher wins.

    """

    options: tuple[MatchOption, ...] = ()
    """
    Regular expression options. All of them are applied.

    """

    multiline: bool = False
    """
    Whether matches of this definition may span several lines.

    """

    def compile(self) -> re.Pattern[str]:
        """
        Compile :attr:`~Definition.regex` with all :attr:`~Definition.options`.

        :raises:
            :class:`re.error` if the pattern is malformed.

        """

        regex = self.regex
        options = functools.reduce(operator.or_, self.options, MatchOption(0))
        if options & MatchOption.IGNORE_METACHARACTERS:
            regex = re.escape(regex)
            options ^= MatchOption.IGNORE_METACHARACTERS
        return re.compile(regex, int(options))


PLACEHOLDER_TYPE = "placeholder"
"""
Token type of editor placeholders.

"""

PLACEHOLDER_RELEVANCE = 10
"""
Nominal relevance of editor placeholders. Placeholders are always applied
last regardless of this value.

"""

PLACEHOLDER_PATTERN = r'(<#)([^"\n]*?)(#>)'
"""
Pattern for editor placeholders, like ``<#name#>``.

"""


def placeholder_definition() -> Definition:
    """
    Create a definition for editor placeholders.

    """

    return Definition(PLACEHOLDER_TYPE, PLACEHOLDER_PATTERN, 0, PLACEHOLDER_RELEVANCE)


LanguageTable: _t.TypeAlias = _t.Mapping[str, _t.Mapping[str, _t.Any]]
"""
Language name to token type to raw definition record.

"""


def find_language(
    language: str, table: LanguageTable, /
) -> _t.Mapping[str, _t.Any] | None:
    """
    Look up a language in a table, ignoring case.

    """

    key = language.lower()
    if key in table:
        return table[key]
    for name, definitions in table.items():
        if name.lower() == key:
            return definitions
    return None


def _get(record: _t.Mapping[str, _t.Any], keys: tuple[str, ...], ty: type, default):
    for key in keys:
        if key in record:
            value = record[key]
            if ty is int and isinstance(value, float) and value.is_integer():
                return int(value)
            if isinstance(value, ty) and not (ty is int and isinstance(value, bool)):
                return value
            firefly._logger.debug(
                "ignoring %s=%r: expected %s", key, value, ty.__name__
            )
            return default
    return default


def _parse_options(value: _t.Any, type: str) -> tuple[MatchOption, ...]:
    if value is None:
        return ()
    elif isinstance(value, (str, int)):
        value = [value]
    elif not isinstance(value, (list, tuple)):
        warnings.warn(
            f"definition {type!r}: expected a list of match options, got {value!r}",
            PatternWarning,
        )
        return ()
    options = []
    for item in value:
        try:
            options.append(MatchOption.parse(item))
        except ValueError as e:
            warnings.warn(f"definition {type!r}: {e}", PatternWarning)
    return tuple(options)


def _make_definition(type: str, record: _t.Any) -> Definition | None:
    if not isinstance(record, _t.Mapping):
        warnings.warn(
            f"definition {type!r}: expected a mapping, got {record!r}", PatternWarning
        )
        return None

    return Definition(
        type=type,
        regex=_get(record, ("regex", "pattern"), str, ""),
        group=_get(record, ("group", "captureGroup"), int, 0),
        relevance=_get(record, ("relevance", "priority"), int, 0),
        options=_parse_options(
            record.get("options", record.get("matchOptions")), type
        ),
        multiline=_get(record, ("multiline", "spansMultipleLines"), bool, False),
    )


def compile_definitions(
    language: str,
    table: LanguageTable,
    /,
    *,
    inject_placeholder: bool = False,
) -> list[Definition]:
    """
    Build an ordered list of definitions for a language.

    Definitions are sorted by relevance in ascending order. Since
    :func:`firefly.hl.paint` applies definitions one after another and each one
    overwrites colors set by the previous ones, the most relevant definition wins
    when matches overlap. Definitions with equal relevance are applied in reverse
    order of their appearance in the table.

    :param language:
        name of the language, case-insensitive. Unknown languages produce
        an empty list.
    :param table:
        language table.
    :param inject_placeholder:
        if :data:`True`, a definition for editor placeholders is added
        at the very end, so that placeholders are always colored
        regardless of other definitions.
    :example:
        ::

            >>> table = {
            ...     "demo": {
            ...         "keyword": {"regex": r"\\bif\\b", "relevance": 5},
            ...         "comment": {"regex": r"//.*", "relevance": 1},
            ...     }
            ... }
            >>> [d.type for d in compile_definitions("Demo", table)]
            ['comment', 'keyword']
            >>> [d.type for d in compile_definitions("demo", table, inject_placeholder=True)]
            ['comment', 'keyword', 'placeholder']
            >>> compile_definitions("not-a-real-language", table)
            []

    """

    definitions: list[Definition] = []

    raw = find_language(language, table)
    if raw is None:
        firefly._logger.debug("unknown language %r", language)
    elif not isinstance(raw, _t.Mapping):
        warnings.warn(
            f"language {language!r}: expected a mapping of definitions, got {raw!r}",
            PatternWarning,
        )
    else:
        for type, record in raw.items():
            if (definition := _make_definition(type, record)) is not None:
                definitions.append(definition)

    definitions.reverse()
    definitions.sort(key=lambda definition: definition.relevance)

    if inject_placeholder:
        definitions.append(placeholder_definition())

    return definitions
