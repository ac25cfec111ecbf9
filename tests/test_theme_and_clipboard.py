import pyperclip

from lexilookup.services.clipboard import copy_to_clipboard
from lexilookup.services.theme import (
    IconConfig,
    Theme,
    get_icon_config,
    get_theme,
    resolve_icon_path,
)


class TestTheme:
    def test_light_themes_use_light_icon(self):
        icons = IconConfig(light="l.png", dark="d.png")
        assert resolve_icon_path(Theme.LIGHT, icons) == "l.png"
        assert resolve_icon_path(Theme.HIGH_CONTRAST_WHITE, icons) == "l.png"
        assert resolve_icon_path(Theme.DARK, icons) == "d.png"
        assert resolve_icon_path(Theme.HIGH_CONTRAST_ONE, icons) == "d.png"

    def test_theme_from_environment(self, monkeypatch):
        monkeypatch.setenv("DICTIONARY_THEME", "Light")
        assert get_theme() is Theme.LIGHT
        monkeypatch.setenv("DICTIONARY_THEME", "sepia")
        assert get_theme() is Theme.DARK

    def test_icons_from_environment(self, monkeypatch):
        monkeypatch.setenv("DICTIONARY_ICON_LIGHT", "a.png")
        monkeypatch.setenv("DICTIONARY_ICON_DARK", "b.png")
        assert get_icon_config() == IconConfig("a.png", "b.png")


class TestClipboard:
    def test_default_sink_is_system_clipboard(self, monkeypatch):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        assert copy_to_clipboard("a fruit") is True
        assert copied == ["a fruit"]

    def test_unavailable_clipboard(self, monkeypatch):
        def unavailable(_):
            raise pyperclip.PyperclipException("no copy/paste mechanism")

        monkeypatch.setattr(pyperclip, "copy", unavailable)
        assert copy_to_clipboard("a fruit") is False
