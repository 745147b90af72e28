"""Configuration defaults for wordbook."""

import os
from pathlib import Path

HOME_ENV_VAR = "WORDBOOK_HOME"
DEFAULT_HOME_DIR = Path.home() / ".wordbook"


def default_home_dir() -> Path:
    """Return the storage directory, honouring $WORDBOOK_HOME."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_HOME_DIR


def build_registry_config(home_dir: Path | None = None, autosave: bool = True) -> dict:
    """Build the config dict consumed by VocabularyRegistry."""
    return {
        "home_dir": Path(home_dir) if home_dir is not None else default_home_dir(),
        "autosave": autosave,
    }
