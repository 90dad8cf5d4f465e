from __future__ import annotations

from typing import Mapping, MutableMapping

from ..core.enums import Theme, coerce_enum

SIDEBAR_SESSION_KEY = "sidebar_collapsed"
THEME_COOKIE = "theme"


class UiPreferences:
    """Shared UI state for every page.

    The sidebar flag lives in the session so it resets with the session; the
    theme is read from a long-lived cookie so it sticks to the device.
    """

    def __init__(self, session: MutableMapping, cookies: Mapping[str, str]):
        self._session = session
        self._cookies = cookies

    def is_sidebar_collapsed(self) -> bool:
        return bool(self._session.get(SIDEBAR_SESSION_KEY, False))

    def toggle_sidebar(self) -> bool:
        collapsed = not self.is_sidebar_collapsed()
        self._session[SIDEBAR_SESSION_KEY] = collapsed
        return collapsed

    def reset_sidebar(self) -> None:
        self._session.pop(SIDEBAR_SESSION_KEY, None)

    @property
    def theme(self) -> Theme:
        return coerce_enum(Theme, self._cookies.get(THEME_COOKIE), Theme.LIGHT)

    def toggle_theme(self) -> Theme:
        """Return the theme to store; the caller writes the cookie."""
        return Theme.LIGHT if self.theme == Theme.DARK else Theme.DARK
