import pytest

import firefly.font


class TestResolveFont:
    def test_system(self):
        font = firefly.font.resolve_font("system", 20)
        assert font.is_system
        assert font.size == 20
        assert font == firefly.font.system_font(20)

    def test_known(self):
        font = firefly.font.resolve_font("Menlo", 11)
        assert font == firefly.font.Font("Menlo", 11)
        assert not font.is_system

    def test_case_insensitive(self):
        assert firefly.font.resolve_font("fira code").name == "Fira Code"

    def test_unknown_falls_back_to_system(self):
        font = firefly.font.resolve_font("Definitely Not A Font", 9)
        assert font == firefly.font.system_font(9)

    def test_default_size(self):
        assert firefly.font.resolve_font("Hack").size == firefly.font.DEFAULT_FONT_SIZE

    def test_register(self):
        firefly.font.register_font("My Custom Mono")
        assert "My Custom Mono" in firefly.font.available_fonts()
        assert firefly.font.resolve_font("my custom mono").name == "My Custom Mono"


class TestSystemFont:
    @pytest.mark.linux
    def test_linux(self):
        assert firefly.font.system_font().name == "DejaVu Sans Mono"

    @pytest.mark.darwin
    def test_darwin(self):
        assert firefly.font.system_font().name == "Menlo"

    def test_is_system(self):
        assert firefly.font.system_font().is_system


def test_with_size():
    font = firefly.font.Font("Hack", 10)
    assert font.with_size(14) == firefly.font.Font("Hack", 14)
    assert firefly.font.system_font(10).with_size(14).is_system
