# ==============================================
# Locator
# ==============================================
#
# PURPOSE:
#   Enumerate candidate desktop files under a list of root
#   directories.
#
# FUNCTIONS:
# ----------
# - default_search_roots(config: SearchConfig) -> list[Path]
#     System directory always; the per-user directory only when a
#     home directory can be resolved.
#
# - find_desktop_entries(roots, extension=".desktop") -> Iterator[Path]
#     Lazy, single-pass recursive walk over every root in order.
#     Directories that cannot be listed are skipped silently so one
#     unreadable directory never blocks the remaining roots.
#
# ==============================================

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from mimeselect.config import SearchConfig

logger = logging.getLogger(__name__)


def _home_dir() -> Optional[Path]:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def default_search_roots(config: SearchConfig) -> List[Path]:
    """
    Build the list of directories to search.

    Args:
        config: Search configuration

    Returns:
        Ordered list of root directories
    """
    roots = [Path(config.system_dir)]
    home = _home_dir()
    if home is not None:
        roots.append(home / config.user_dir)
    else:
        logger.warning("Failed to find home directory!")
    return roots


def _ignore_walk_error(error: OSError) -> None:
    logger.debug(f"Skipping unreadable entry {error.filename}: {error.strerror}")


def find_desktop_entries(
    roots: Iterable[Union[str, Path]],
    extension: str = ".desktop"
) -> Iterator[Path]:
    """
    Yield every file below ``roots`` whose suffix is ``extension``.

    Args:
        roots: Directories to walk recursively, in order
        extension: File suffix to keep, including the dot

    Yields:
        Path of each matching file
    """
    for root in roots:
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_ignore_walk_error):
            for name in filenames:
                path = Path(dirpath) / name
                if path.suffix == extension:
                    yield path
