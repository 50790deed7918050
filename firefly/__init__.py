# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Firefly is an embeddable syntax highlighting engine.

It takes a block of text, a language name and a color theme, and produces
a :class:`~firefly.string.StyledText` where every character carries
a foreground color and a font.

The quickest way to use it is the stateless entry point::

    >>> import firefly.hl, firefly.theme, firefly.data
    >>> theme = firefly.theme.resolve_theme(firefly.data.THEMES["Basic"])
    >>> styled = firefly.hl.highlight("if x { }", theme=theme, language="swift")
    >>> styled.color_at(0).to_hex()
    '#AA0D91'

For editors that keep a language, a theme, and a font around between
highlighting passes, use :class:`firefly.syntax.Syntax`.


Warnings and logging
--------------------

Firefly never fails because of bad grammar or theme data. Instead, it emits
a :class:`FireflyWarning` and degrades gracefully. These warnings are ignored
unless internal logging is enabled:

.. autofunction:: enable_internal_logging

.. autoclass:: FireflyWarning

"""

from __future__ import annotations

import logging as _logging
import os as _os
import warnings

try:
    from firefly._version import *  # noqa: F403
except ImportError:
    raise ImportError(
        "firefly._version not found. if you are developing locally, "
        "run `pip install -e .` to generate it"
    )

__all__ = [
    "FireflyWarning",
    "enable_internal_logging",
]


class FireflyWarning(RuntimeWarning):
    """
    Base class for all runtime warnings.

    """


_logger = _logging.getLogger("firefly.internal")
_logger.propagate = False
_logger.addHandler(_logging.NullHandler())


def enable_internal_logging(path: str | None = None, propagate: bool = False):
    """
    Show Firefly's warnings and debug messages.

    Skipped patterns, malformed colors, unknown languages and themes are
    reported through :class:`FireflyWarning` subclasses and the
    ``firefly.internal`` logger. Both are silent by default.

    :param path:
        if given, debug messages and warnings are also written to this file.
    :param propagate:
        if :data:`True`, messages are passed to the root logger, so that
        the application's logging setup handles them.

    """

    if path:
        handler = _logging.FileHandler(path, delay=True)
        handler.setFormatter(
            _logging.Formatter("%(name)s: %(levelname)s: %(message)s")
        )
        _logger.addHandler(handler)
        _logging.getLogger("py.warnings").addHandler(handler)

    _logger.setLevel(_logging.DEBUG)
    _logger.propagate = propagate
    _logging.captureWarnings(True)
    warnings.simplefilter("default", category=FireflyWarning)


if _os.environ.get("FIREFLY_DEBUG_FILE"):  # pragma: no cover
    enable_internal_logging(path=_os.environ["FIREFLY_DEBUG_FILE"])
elif _os.environ.get("FIREFLY_DEBUG"):  # pragma: no cover
    enable_internal_logging(path="firefly.log")
else:
    warnings.simplefilter("ignore", category=FireflyWarning, append=True)
