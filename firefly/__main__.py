# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Highlight a file and print it to the terminal.

Usage::

    python -m firefly [-l LANGUAGE] [-t THEME] [--font FONT] [FILE]

Settings not given on the command line are taken
from ``FIREFLY_*`` environment variables (see :mod:`firefly.config`).

"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import firefly
import firefly.config
import firefly.syntax
from firefly import _typing as _t

_LOGGER = logging.getLogger("firefly")


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="firefly",
        description="Highlight source code and print it with ANSI colors.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=pathlib.Path,
        help="file to highlight, reads stdin if not given",
    )
    parser.add_argument("-l", "--language", help="language to highlight")
    parser.add_argument("-t", "--theme", help="color theme")
    parser.add_argument("--font", help="font family")
    parser.add_argument(
        "--no-placeholders",
        dest="placeholders",
        action="store_false",
        default=None,
        help="don't highlight editor placeholders",
    )
    parser.add_argument(
        "--languages-file", type=pathlib.Path, help="extra language definitions"
    )
    parser.add_argument("--themes-file", type=pathlib.Path, help="extra themes")
    parser.add_argument(
        "--list-languages", action="store_true", help="print available languages"
    )
    parser.add_argument(
        "--list-themes", action="store_true", help="print available themes"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print debug messages"
    )
    return parser


def main(argv: _t.Sequence[str] | None = None, stdout: _t.TextIO | None = None) -> int:
    parser = _make_parser()
    namespace = parser.parse_args(argv)
    stdout = stdout or sys.stdout

    if namespace.verbose:
        logging.basicConfig(level=logging.DEBUG)
        firefly.enable_internal_logging(propagate=True)

    try:
        config = firefly.config.Config.load_from_env()
        overrides = {
            name: getattr(namespace, name)
            for name in (
                "language",
                "theme",
                "font",
                "placeholders",
                "languages_file",
                "themes_file",
            )
            if getattr(namespace, name) is not None
        }
        config.update(overrides)
        syntax = firefly.syntax.Syntax.from_config(config)
    except firefly.config.ConfigError as e:
        parser.exit(2, f"firefly: error: {e}\n")

    if namespace.list_languages or namespace.list_themes:
        if namespace.list_languages:
            for name in sorted(syntax.available_languages()):
                print(name, file=stdout)
        if namespace.list_themes:
            for name in sorted(syntax.available_themes()):
                print(name, file=stdout)
        return 0

    if namespace.file is None:
        text = sys.stdin.read()
    else:
        try:
            text = namespace.file.read_text(encoding="utf-8")
        except OSError as e:
            parser.exit(1, f"firefly: error: can't read {namespace.file}: {e}\n")

    _LOGGER.debug(
        "highlighting %s characters as %r with theme %r",
        len(text),
        syntax.language,
        syntax.theme_name,
    )
    stdout.write(syntax.paint(text).to_ansi())
    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
