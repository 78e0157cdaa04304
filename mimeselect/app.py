# ==============================================
# MimeSelect — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties both stages together. The CLI only talks to this class.
#
#   ┌──────────────────────────────────────────────┐
#   │                 MimeSelect                   │
#   │                                              │
#   │  STAGE 1: DISCOVERY                          │
#   │   default_search_roots → find_desktop_entries│
#   │   → process_desktop_entries → AssociationMap │
#   │                 │                            │
#   │                 ▼  (fully built first)       │
#   │  STAGE 2: RESOLUTION                         │
#   │   resolve → dispatch, one type at a time     │
#   └──────────────────────────────────────────────┘
#
# ==============================================

import logging
from pathlib import Path
from typing import List, Optional

from mimeselect.config import AppConfig, get_config
from mimeselect.discovery import (
    AssociationMap,
    default_search_roots,
    find_desktop_entries,
    process_desktop_entries
)
from mimeselect.resolution import (
    AssociationSummary,
    Selector,
    TerminalSelector,
    XdgMimeRegistry,
    associate_all
)

logger = logging.getLogger(__name__)


class MimeSelect:
    """
    Discover desktop files, then bind each MIME type to one handler.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        selector: Optional[Selector] = None,
        registry: Optional[XdgMimeRegistry] = None,
        roots: Optional[List[Path]] = None
    ):
        """
        Args:
            config: Application configuration. If None, loads from environment.
            selector: Operator prompt. Defaults to the terminal menu.
            registry: Default-handler sink. Defaults to xdg-mime.
            roots: Directories to search instead of the configured ones.
        """
        self._config = config or get_config()
        self._selector = selector or TerminalSelector()
        self._registry = registry or XdgMimeRegistry(self._config.registry.command)
        self._roots = roots

    def search_roots(self) -> List[Path]:
        if self._roots is not None:
            return list(self._roots)
        return default_search_roots(self._config.search)

    def discover(self) -> AssociationMap:
        """Run the Locator and Aggregator and return the complete map."""
        search = self._config.search
        files = find_desktop_entries(self.search_roots(), search.extension)
        associations = process_desktop_entries(
            files,
            entry_section=search.entry_section,
            mime_key=search.mime_key
        )
        logger.info(
            f"Found {associations.option_count()} total options "
            f"for {len(associations)} total MIME types."
        )
        return associations

    def run(self) -> AssociationSummary:
        """
        Discover, then resolve and dispatch every MIME type.

        Raises:
            FatalError: The prompt or the registry command broke down
        """
        associations = self.discover()
        summary = associate_all(associations, self._selector, self._registry)
        logger.debug(
            f"Done: {summary.automatic} automatic, {summary.interactive} chosen, "
            f"{summary.skipped} skipped, {summary.failed} failed"
        )
        return summary
