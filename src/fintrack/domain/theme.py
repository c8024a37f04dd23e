"""Theme preference service."""

from fintrack.database.base import Storage
from fintrack.domain.entities import Theme
from fintrack.domain.errors import StorageError
from fintrack.logging_setup import get_logger

logger = get_logger(__name__)

THEME_KEY = "financeAppTheme_v2"


class ThemePreference:
    """Persisted light/dark preference."""

    def __init__(self, storage: Storage):
        """Initialize theme preference.

        Args:
            storage: Key-value storage backend
        """
        self.storage = storage
        self.theme = Theme.DARK

    def load(self) -> Theme:
        """Load the stored theme; anything but "light" means dark."""
        try:
            stored = self.storage.get_item(THEME_KEY)
        except StorageError as e:
            logger.warning("%s; using dark theme", e)
            stored = None
        self.theme = Theme.parse(stored)
        return self.theme

    def set(self, theme: Theme) -> Theme:
        """Set and persist the theme."""
        self.theme = Theme(theme)
        try:
            self.storage.set_item(THEME_KEY, self.theme.value)
        except StorageError as e:
            logger.warning("%s; theme kept in memory only", e)
        logger.info("Theme set to %s", self.theme.value)
        return self.theme

    def toggle(self) -> Theme:
        """Flip between light and dark and persist immediately."""
        return self.set(self.theme.toggled())
