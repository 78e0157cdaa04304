# ==============================================
# Aggregator
# ==============================================
#
# PURPOSE:
#   Parse each desktop file found by the Locator and fold the MIME
#   types it declares into one AssociationMap:
#
#       "text/plain" → ["/usr/share/applications/gvim.desktop",
#                       "/home/me/.local/share/applications/ed.desktop"]
#
# RULES:
# ------
#   1. Unparseable file               → warning, file skipped
#   2. Keys before any section header → warning "Missing section", those
#                                        keys ignored, later sections still read
#   3. Section other than [Desktop Entry] → warning, section ignored
#   4. [Desktop Entry] without MimeType   → warning, section ignored
#   5. MimeType=a;b;  → split on ';', empty tokens dropped,
#                       file appended to each token's list in order
#
#   No reordering and no deduplication happen here.
#
# ==============================================

import configparser
import logging
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

# configparser treats its default section specially; desktop files have none
_NO_DEFAULT_SECTION = "\x00mimeselect-default\x00"
# Holds any keys that appear before the first section header
_UNNAMED_SECTION = "\x00mimeselect-unnamed\x00"


class AssociationMap(dict):
    """
    MIME type → handler identifiers, in discovery order.

    Entries only come into existence through ``add``, so every key
    maps to a non-empty list.
    """

    def add(self, mimetype: str, handler: str) -> None:
        """Append ``handler`` to the list for ``mimetype``, creating it if needed."""
        self.setdefault(mimetype, []).append(handler)

    def option_count(self) -> int:
        """Total number of (type, handler) pairs across all entries."""
        return sum(len(programs) for programs in self.values())


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
        strict=False,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULT_SECTION,
        interpolation=None
    )
    # Desktop file keys are case-sensitive
    parser.optionxform = str
    return parser


def desktop_text(raw: str) -> str:
    """
    Prepare desktop file contents for configparser.

    Desktop files have no continuation lines, so leading whitespace is
    stripped from every line. A header is put in front so that keys
    before the first real section land in ``_UNNAMED_SECTION``.
    """
    lines = [line.lstrip() for line in raw.splitlines()]
    return "\n".join([f"[{_UNNAMED_SECTION}]"] + lines) + "\n"


def split_mime_types(value: str) -> List[str]:
    """Split a ``MimeType`` value on ';', dropping empty tokens."""
    return [mime for mime in value.split(";") if mime]


def process_desktop_entries(
    files: Iterable[Union[str, Path]],
    entry_section: str = "Desktop Entry",
    mime_key: str = "MimeType"
) -> AssociationMap:
    """
    Build the association map from a sequence of desktop files.

    Args:
        files: Desktop file paths, typically from find_desktop_entries()
        entry_section: The only section whose keys are read
        mime_key: Key holding the ';'-separated MIME type list

    Returns:
        AssociationMap of every declared MIME type
    """
    associations = AssociationMap()

    for file in files:
        filename = str(file)
        logger.debug(f"Found desktop file {filename}")

        parser = _new_parser()
        try:
            with open(file, encoding="utf-8") as fh:
                parser.read_string(desktop_text(fh.read()), source=filename)
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to parse {filename}, {e}")
            continue

        for section in parser.sections():
            if section == _UNNAMED_SECTION:
                if parser.options(section):
                    logger.warning(f"Missing section in desktop file {filename}")
                continue

            if section != entry_section:
                logger.warning(
                    f'Unrecognized section "{section}" in desktop file {filename}'
                )
                continue

            properties = parser[section]
            if mime_key not in properties:
                logger.warning(f"Missing {mime_key} in desktop file {filename}")
                continue

            for mime in split_mime_types(properties[mime_key]):
                logger.debug(f"Associating '{filename}' with '{mime}'")
                associations.add(mime, filename)

    return associations
