# ==============================================
# STAGE 1: DISCOVERY
# ==============================================
#
# This package finds desktop files on disk and folds the MIME
# types they declare into a single association map.
#
# Modules:
# --------
# - locator.py     → Root directories + recursive *.desktop walk
# - aggregator.py  → Parse desktop files, build AssociationMap
#
# ==============================================

from .locator import default_search_roots, find_desktop_entries
from .aggregator import AssociationMap, process_desktop_entries

__all__ = [
    "default_search_roots",
    "find_desktop_entries",
    "AssociationMap",
    "process_desktop_entries"
]
