import warnings

import pytest

import firefly.data
import firefly.definition
import firefly.theme


@pytest.mark.parametrize("language", sorted(firefly.data.LANGUAGES))
def test_language_compiles(language):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        definitions = firefly.definition.compile_definitions(
            language, firefly.data.LANGUAGES
        )
        assert len(definitions) == len(firefly.data.LANGUAGES[language])
        for definition in definitions:
            pattern = definition.compile()
            assert 0 <= definition.group <= pattern.groups


@pytest.mark.parametrize("name", sorted(firefly.data.THEMES))
def test_theme_resolves(name):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        theme = firefly.theme.resolve_theme(firefly.data.THEMES[name])
    types = {
        type for definitions in firefly.data.LANGUAGES.values() for type in definitions
    }
    assert types | {firefly.definition.PLACEHOLDER_TYPE} <= set(theme.colors)
