# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Highlighter settings that can be loaded from environment variables
and JSON files.

.. invisible-code-block: python

    import firefly.syntax

.. code-block:: python

    # Load config from a file.
    config = Config.load_from_json_file("~/.firefly.json", ignore_missing_file=True)

    # Update config with values from env.
    config.update(Config.load_from_env())

    syntax = firefly.syntax.Syntax.from_config(config)

Config also points to extra language and theme tables. They're JSON files
with the same format as :data:`firefly.data.LANGUAGES`
and :data:`firefly.data.THEMES`, and are merged on top of the built-in tables
by :func:`load_tables`.

.. autoclass:: Config
   :members:

.. autofunction:: load_tables

.. autoclass:: ConfigError

"""

from __future__ import annotations

import json
import os
import pathlib

import firefly
import firefly.data
import firefly.font
from firefly import _typing as _t

__all__ = [
    "Config",
    "ConfigError",
    "load_tables",
]


class ConfigError(ValueError):
    """
    Raised when config can't be loaded.

    """


_TRUE = {"1", "y", "yes", "true", "on"}
_FALSE = {"0", "n", "no", "false", "off"}


def _parse_bool(value: str, /) -> bool:
    value = value.strip().lower()
    if value in _TRUE:
        return True
    elif value in _FALSE:
        return False
    raise ValueError(f"can't parse {value!r} as a boolean")


def _parse_float(value: str, /) -> float:
    return float(value.strip())


def _parse_path(value: str, /) -> pathlib.Path:
    return pathlib.Path(value).expanduser()


class Config:
    """
    Highlighter settings.

    Fields that were never set fall back to class-level defaults. Only fields
    that were set explicitly are copied by :meth:`~Config.update`, so configs
    from several sources can be layered on top of each other.

    """

    #: language to highlight.
    language: str = "default"

    #: name of the color theme.
    theme: str = "Basic"

    #: font family, or ``"system"``.
    font: str = firefly.font.SYSTEM

    #: font size in points.
    font_size: float = firefly.font.DEFAULT_FONT_SIZE

    #: whether to highlight editor placeholders.
    placeholders: bool = True

    #: JSON file with additional language definitions.
    languages_file: pathlib.Path | None = None

    #: JSON file with additional themes.
    themes_file: pathlib.Path | None = None

    def __init__(self, *args: Config | dict[str, _t.Any], **kwargs):
        for arg in args:
            self.update(arg)

        self.update(kwargs)

    def update(self, other: Config | dict[str, _t.Any], /):
        """
        Update fields in this config with fields from another config.

        This function is similar to :meth:`dict.update`. Fields that weren't
        set in ``other`` are left untouched.

        :param other:
            data for update.
        :raises:
            :class:`TypeError` if ``other`` contains unknown fields.

        """

        if not other:
            return

        if isinstance(other, Config):
            ns = other.__dict__
        elif isinstance(other, dict):
            ns = other
            for name in ns:
                if name not in _FIELDS:
                    raise TypeError(f"unknown field: {name}")
        else:
            raise TypeError("expected a dict or a config class")

        for name in _FIELDS:
            if name in ns:
                setattr(self, name, ns[name])

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in _FIELDS)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in _FIELDS)
        return f"Config({fields})"

    @classmethod
    def load_from_env(cls, prefix: str = "FIREFLY") -> Config:
        """
        Load config from environment variables.

        Names of variables are field names in upper case, prefixed
        with ``prefix`` and an underscore, for example ``FIREFLY_FONT_SIZE``.
        Fields without a variable keep their defaults.

        :raises:
            :class:`ConfigError` if a variable can't be parsed.

        """

        fields = {}
        for name, parser in _FIELDS.items():
            env = f"{prefix}_{name.upper()}" if prefix else name.upper()
            if env in os.environ:
                try:
                    fields[name] = parser(os.environ[env])
                except ValueError as e:
                    raise ConfigError(
                        f"failed to load config from environment variable {env}: {e}"
                    ) from None
        return cls(**fields)

    @classmethod
    def load_from_json_file(
        cls,
        path: str | pathlib.Path,
        /,
        *,
        ignore_unknown_fields: bool = False,
        ignore_missing_file: bool = False,
    ) -> Config:
        """
        Load config from a ``.json`` file.

        :param path:
            path of the config file.
        :param ignore_unknown_fields:
            if :data:`True`, this method will ignore fields that aren't listed
            in config class.
        :param ignore_missing_file:
            if :data:`True`, silently ignore a missing file error. This is useful
            when loading a config from a home directory.
        :raises:
            :class:`ConfigError` if file can't be read or has invalid contents.

        """

        path = pathlib.Path(path).expanduser()
        if ignore_missing_file and not path.exists():
            return cls()

        data = _load_json(path)
        if not isinstance(data, dict):
            raise ConfigError(f"invalid config {path}: expected an object")

        fields = {}
        for name, value in data.items():
            if name not in _FIELDS:
                if ignore_unknown_fields:
                    continue
                raise ConfigError(f"invalid config {path}: unknown field {name}")
            try:
                fields[name] = _from_json(name, value)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"invalid config {path}: {name}: {e}") from None
        return cls(**fields)


_FIELDS: dict[str, _t.Callable[[str], _t.Any]] = {
    "language": str,
    "theme": str,
    "font": str,
    "font_size": _parse_float,
    "placeholders": _parse_bool,
    "languages_file": _parse_path,
    "themes_file": _parse_path,
}


def _from_json(name: str, value: _t.Any) -> _t.Any:
    if value is None and name.endswith("_file"):
        return None
    elif name == "font_size":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected a number, got {value!r}")
        return float(value)
    elif name == "placeholders":
        if not isinstance(value, bool):
            raise TypeError(f"expected a boolean, got {value!r}")
        return value
    elif not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return _FIELDS[name](value)


def _first_wins(pairs: list[tuple[str, _t.Any]]) -> dict[str, _t.Any]:
    res: dict[str, _t.Any] = {}
    for key, value in pairs:
        res.setdefault(key, value)
    return res


def _load_json(path: pathlib.Path) -> _t.Any:
    try:
        with open(path, encoding="utf-8") as file:
            return json.load(file, object_pairs_hook=_first_wins)
    except OSError as e:
        raise ConfigError(f"can't read {path}: {e}") from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in {path}: {e}") from None


def _load_table(path: pathlib.Path | None, what: str) -> dict[str, _t.Any]:
    if path is None:
        return {}
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ConfigError(f"invalid {what} table {path}: expected an object")
    firefly._logger.debug("loaded %s %s from %s", len(data), what, path)
    return data


def load_tables(
    config: Config, /
) -> tuple[dict[str, dict[str, _t.Any]], dict[str, dict[str, _t.Any]]]:
    """
    Build language and theme tables for a config.

    Tables from :attr:`Config.languages_file` and :attr:`Config.themes_file`
    are merged over the built-in ones. Language names are lowercased. Entries
    from files replace built-in entries with the same name. If a JSON object
    has duplicate keys, the first one wins.

    :returns:
        a tuple of language table and theme table.
    :raises:
        :class:`ConfigError` if a table can't be loaded.

    """

    languages = dict(firefly.data.LANGUAGES)
    for name, definitions in _load_table(config.languages_file, "languages").items():
        languages[name.lower()] = definitions

    themes = dict(firefly.data.THEMES)
    themes.update(_load_table(config.themes_file, "themes"))

    return languages, themes
