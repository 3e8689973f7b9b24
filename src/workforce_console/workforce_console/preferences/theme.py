from __future__ import annotations

from typing import MutableMapping

THEME_KEY = "theme"
DARK = "dark"
LIGHT = "light"


class ThemeSettings:
    """Dark/light preference over a persisted mapping (the Flask session in the app).

    Light mode is the default until the user toggles.
    """

    def __init__(self, store: MutableMapping):
        self._store = store

    def is_dark_mode(self) -> bool:
        return self._store.get(THEME_KEY) == DARK

    def set_dark_mode(self, enabled: bool) -> None:
        self._store[THEME_KEY] = DARK if enabled else LIGHT

    def toggle(self) -> bool:
        self.set_dark_mode(not self.is_dark_mode())
        return self.is_dark_mode()
