# Firefly project, MIT license.
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Built-in language and theme tables.

Firefly supports the following languages out of the box:

- ``default`` (no highlighting),
- ``swift``,
- ``python``,
- ``bash``,
- ``json``,
- ``diff``.

And the following themes:

- ``Basic``,
- ``Gruvbox Light``,
- ``Monokai``.

More can be loaded from JSON files, see :mod:`firefly.config`.

.. autodata:: LANGUAGES

.. autodata:: THEMES

"""

from __future__ import annotations

from firefly import _typing as _t

__all__ = [
    "LANGUAGES",
    "THEMES",
]


_DQ_STRING = r'"(?:\\.|[^\\"\n])*"'
_SQ_STRING = r"'(?:\\.|[^\\'\n])*'"


LANGUAGES: dict[str, dict[str, dict[str, _t.Any]]] = {
    "default": {},
    "swift": {
        "keyword": {
            "regex": (
                r"\b(?:associatedtype|class|deinit|enum|extension|fileprivate|func"
                r"|import|init|inout|internal|let|open|operator|private|protocol"
                r"|public|rethrows|static|struct|subscript|typealias|var|break|case"
                r"|continue|default|defer|do|else|fallthrough|for|guard|if|in"
                r"|repeat|return|switch|where|while|as|catch|false|is|nil|self"
                r"|Self|super|throw|throws|true|try|async|await|some|any)\b"
            ),
            "relevance": 1,
        },
        "type": {
            "regex": r"\b(?:Int|Double|Float|String|Bool|Character|Array|Dictionary|Set|Optional|Void)\b",
            "relevance": 1,
        },
        "class": {
            "regex": r"\b[A-Z][A-Za-z0-9_]*\b",
            "relevance": 0,
        },
        "function": {
            "regex": r"\bfunc\s+([A-Za-z_][A-Za-z0-9_]*)",
            "group": 1,
            "relevance": 2,
        },
        "attribute": {
            "regex": r"@[A-Za-z_][A-Za-z0-9_]*",
            "relevance": 2,
        },
        "number": {
            "regex": r"(?<![\w.])(?:0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?)",
            "relevance": 2,
        },
        "string": {
            "regex": r'"""(?:\\.|[^\\])*?"""|' + _DQ_STRING,
            "relevance": 5,
            "multiline": True,
        },
        "escape": {
            "regex": r"\\(?:[0\\tnr\"']|u\{[0-9a-fA-F]{1,8}\})",
            "relevance": 6,
        },
        "comment": {
            "regex": r"//.*?$|/\*.*?\*/",
            "relevance": 7,
            "options": ["dotMatchesLineSeparators", "anchorsMatchLines"],
            "multiline": True,
        },
    },
    "python": {
        "keyword": {
            "regex": (
                r"\b(?:and|as|assert|async|await|break|class|continue|def|del|elif|else"
                r"|except|finally|for|from|global|if|import|in|is|lambda|nonlocal|not"
                r"|or|pass|raise|return|try|while|with|yield)\b"
            ),
            "relevance": 1,
        },
        "builtin": {
            "regex": r"(?<![\.\w])\b(?:None|True|False)\b",
            "relevance": 2,
        },
        "type": {
            "regex": (
                r"\b(?:str|int|float|complex|list|tuple|range|dict|set|frozenset|bool"
                r"|bytes|bytearray|memoryview)\b"
            ),
            "relevance": 1,
        },
        "class": {
            "regex": r"\b(?:[A-Z](?:[A-Z0-9_]*?[a-z]\w*)?)\b",
            "relevance": 0,
        },
        "function": {
            "regex": r"\bdef\s+([A-Za-z_]\w*)",
            "group": 1,
            "relevance": 2,
        },
        "number": {
            "regex": (
                r"(?<![\.\w])(?:0x[0-9a-fA-F]+|0o[0-7]+|0b[01]+"
                r"|\d+(?:\.\d*)?(?:e[+-]?\d+)?|\.\d+(?:e[+-]?\d+)?)"
            ),
            "relevance": 2,
            "options": ["caseInsensitive"],
        },
        "attribute": {
            "regex": r"^\s*(@[\w.]+)",
            "group": 1,
            "relevance": 2,
            "options": ["anchorsMatchLines"],
        },
        "string": {
            "regex": (
                r"(?:\b[rRfFbBuU]{1,2})?(?:\"\"\"(?:\\.|[^\\])*?\"\"\"|'''(?:\\.|[^\\])*?'''|"
                + _DQ_STRING
                + "|"
                + _SQ_STRING
                + ")"
            ),
            "relevance": 5,
            "multiline": True,
        },
        "comment": {
            # Only a `#` that is not inside a string on the same line.
            "regex": r"^(?:[^'\"\n#]|" + _DQ_STRING + "|" + _SQ_STRING + r")*(#.*)$",
            "group": 1,
            "relevance": 6,
            "options": ["anchorsMatchLines"],
        },
    },
    "bash": {
        "keyword": {
            "regex": (
                r"\b(?:if|then|elif|else|fi|time|for|in|until|while|do|done|case"
                r"|esac|coproc|select|function)\b|\[\[|\]\]|\|\|?|&&"
            ),
            "relevance": 1,
        },
        "program": {
            "regex": r"(?:^|\|\|?|&&|\$\()\s*([\w./~](?:[\w.@/-]|\\.)+)",
            "group": 1,
            "relevance": 2,
            "options": ["anchorsMatchLines"],
        },
        "flag": {
            "regex": r"(?<![\w-])-[a-zA-Z0-9_-]+\b",
            "relevance": 2,
        },
        "variable": {
            "regex": r"\$(?:\{[^}\n]*\}|\w+)",
            "relevance": 3,
        },
        "string": {
            "regex": r"'[^']*'|" + _DQ_STRING,
            "relevance": 5,
        },
        "comment": {
            "regex": r"(?<![\w$])#.*$",
            "relevance": 6,
            "options": ["anchorsMatchLines"],
        },
    },
    "json": {
        "builtin": {
            "regex": r"\b(?:true|false|null)\b",
            "relevance": 1,
        },
        "number": {
            "regex": r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?",
            "relevance": 1,
        },
        "punctuation": {
            "regex": r"[{}\[\],:]",
            "relevance": 0,
        },
        "string": {
            "regex": r'"(?:\\.|[^\\"])*"',
            "relevance": 5,
        },
        "key": {
            "regex": r'("(?:\\.|[^\\"])*")\s*:',
            "group": 1,
            "relevance": 6,
        },
        "escape": {
            "regex": r'\\(?:[\\/"bfnrt]|u[0-9a-fA-F]{4})',
            "relevance": 7,
        },
    },
    "diff": {
        "meta": {
            "regex": r"^(?:---|\+\+\+|@@)[^\r\n]*$",
            "relevance": 2,
            "options": ["anchorsMatchLines"],
        },
        "added": {
            "regex": r"^\+[^\r\n]*$",
            "relevance": 1,
            "options": ["anchorsMatchLines"],
        },
        "removed": {
            "regex": r"^-[^\r\n]*$",
            "relevance": 1,
            "options": ["anchorsMatchLines"],
        },
    },
}
"""
Built-in language table, see :mod:`firefly.definition` for its format.

"""


THEMES: dict[str, dict[str, _t.Any]] = {
    "Basic": {
        "default": "#000000",
        "background": "#ffffff",
        "currentLine": "#e8f2ff",
        "selection": "#b2d7ff",
        "cursor": "#000000",
        "lineNumber": "#a6a6a6",
        "lineNumber-Active": "#000000",
        "style": "light",
        "definitions": {
            "keyword": "#aa0d91",
            "builtin": "#aa0d91",
            "type": "#5c2699",
            "class": "#3f6e74",
            "function": "#326d74",
            "attribute": "#643820",
            "number": "#1c00cf",
            "string": "#c41a16",
            "escape": "#c41a16",
            "comment": "#007400",
            "key": "#0e0eff",
            "punctuation": "#000000",
            "program": "#326d74",
            "flag": "#643820",
            "variable": "#3f6e74",
            "meta": "#5c2699",
            "added": "#007400",
            "removed": "#c41a16",
            "placeholder": "#8e8e93",
        },
    },
    "Gruvbox Light": {
        "default": "#3c3836",
        "background": "#f9f5d7",
        "currentLine": "#ebdbb260",
        "selection": "#689d6a40",
        "cursor": "#3c3836",
        "lineNumber": "#bdae93",
        "lineNumber-Active": "#bdae93",
        "style": "light",
        "definitions": {
            "keyword": "#9d0006",
            "builtin": "#8f3f71",
            "type": "#b57614",
            "class": "#b57614",
            "function": "#79740e",
            "attribute": "#af3a03",
            "number": "#8f3f71",
            "string": "#79740e",
            "escape": "#af3a03",
            "comment": "#928374",
            "key": "#076678",
            "punctuation": "#3c3836",
            "program": "#427b58",
            "flag": "#af3a03",
            "variable": "#076678",
            "meta": "#076678",
            "added": "#79740e",
            "removed": "#9d0006",
            "placeholder": "#7c6f64",
        },
    },
    "Monokai": {
        "default": "#f8f8f2",
        "background": "#272822",
        "currentLine": "#3e3d32",
        "selection": "#49483e",
        "cursor": "#f8f8f0",
        "lineNumber": "#90908a",
        "lineNumber-Active": "#c2c2bf",
        "style": "dark",
        "definitions": {
            "keyword": "#f92672",
            "builtin": "#ae81ff",
            "type": "#66d9ef",
            "class": "#a6e22e",
            "function": "#a6e22e",
            "attribute": "#fd971f",
            "number": "#ae81ff",
            "string": "#e6db74",
            "escape": "#ae81ff",
            "comment": "#75715e",
            "key": "#66d9ef",
            "punctuation": "#f8f8f2",
            "program": "#a6e22e",
            "flag": "#fd971f",
            "variable": "#66d9ef",
            "meta": "#75715e",
            "added": "#a6e22e",
            "removed": "#f92672",
            "placeholder": "#75715e",
        },
    },
}
"""
Built-in theme table, see :mod:`firefly.theme` for its format.

"""
