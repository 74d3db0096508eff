"""
Path management for talkrow.

Three path modes:
- dev: Use local paths (./talkrow_dev_paths/*) - default for development
- xdg: Use XDG paths (~/.config, ~/.local/share) - XDG standard
- dot: Use dot directory (~/.talkrow/*)

Toggle via the TALKROW_PATH_MODE environment variable.
"""

import os
from pathlib import Path
from typing import Optional


# Path mode: 'dev', 'xdg', or 'dot'
PATH_MODE = os.getenv('TALKROW_PATH_MODE', 'dev').lower()


class Paths:
    """
    Centralized path management for the application.
    """

    def __init__(self, root: Optional[Path] = None):
        """
        Initialize paths for the application.

        Args:
            root: Override for the dev-mode root (defaults to the project root)
        """
        self._project_root = Path(root) if root else Path(__file__).parent.parent.parent

    @property
    def project_root(self) -> Path:
        """Project root directory (where main.py lives)."""
        return self._project_root

    @property
    def config_dir(self) -> Path:
        """Configuration directory (talkrow.yaml)."""
        if PATH_MODE == 'xdg':
            # XDG: ~/.config/talkrow/
            base = Path.home() / '.config' / 'talkrow'
        elif PATH_MODE == 'dot':
            # Dot: ~/.talkrow/config/
            base = Path.home() / '.talkrow' / 'config'
        else:  # dev
            base = self._project_root / 'talkrow_dev_paths' / 'config'

        base.mkdir(parents=True, exist_ok=True, mode=0o700)
        return base

    @property
    def log_dir(self) -> Path:
        """Log directory."""
        if PATH_MODE == 'xdg':
            # XDG: ~/.local/share/talkrow/logs/
            base = Path.home() / '.local' / 'share' / 'talkrow' / 'logs'
        elif PATH_MODE == 'dot':
            # Dot: ~/.talkrow/logs/
            base = Path.home() / '.talkrow' / 'logs'
        else:  # dev
            base = self._project_root / 'talkrow_dev_paths' / 'logs'

        base.mkdir(parents=True, exist_ok=True, mode=0o700)
        return base

    def main_log_path(self) -> Path:
        """Main application log path."""
        return self.log_dir / 'main.log'


# Global instance
_default_paths: Optional[Paths] = None


def get_paths() -> Paths:
    """
    Get the global Paths instance.

    Returns:
        Paths instance
    """
    global _default_paths
    if _default_paths is None:
        _default_paths = Paths()
    return _default_paths
