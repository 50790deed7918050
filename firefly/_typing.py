# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

# ruff: noqa: F403, I002

"""
Everything from :mod:`typing` and :mod:`typing_extensions` in one namespace,
so that modules can do ``from firefly import _typing as _t``.

"""

import typing as _typing
from typing import *  # type: ignore

import typing_extensions as _typing_extensions
from typing_extensions import *  # type: ignore

assert _typing.Union is _typing_extensions.Union
