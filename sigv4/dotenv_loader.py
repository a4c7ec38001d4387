# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""``.env`` loading for credentials referenced by ``!env`` tags.

For a given config directory, two files are read in order: the ``.env``
beside the YAML config, then ``.env`` in the working directory.  Values
already in the environment win, so the config-directory file takes
precedence over the working-directory one.
"""

from pathlib import Path

from dotenv import load_dotenv

from sigv4.logging import get_logger


logger = get_logger(__name__)

_loaded_dirs: set[Path] = set()


def dotenv_candidates(config_dir: Path) -> list[Path]:
    """Return the ``.env`` files consulted for a config directory."""
    return [config_dir / ".env", Path.cwd() / ".env"]


def load_dotenv_once(config_dir: Path) -> list[Path]:
    """Load the ``.env`` files for ``config_dir`` on first use.

    Args:
        config_dir: Directory holding the YAML config.

    Returns:
        Files loaded by this call.  Empty when the directory was already
        handled or no candidate exists.
    """
    config_dir = config_dir.resolve()
    if config_dir in _loaded_dirs:
        return []
    _loaded_dirs.add(config_dir)

    loaded: list[Path] = []
    for path in dotenv_candidates(config_dir):
        if path in loaded or not path.is_file():
            continue
        load_dotenv(path)
        loaded.append(path)
        logger.debug("Loaded .env from %s", path)
    return loaded


def reset_dotenv_state() -> None:
    """Forget which directories were loaded. For testing."""
    _loaded_dirs.clear()
