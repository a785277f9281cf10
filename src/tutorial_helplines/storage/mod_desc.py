"""Replace the <helpLines> region of a mod configuration file."""

import logging
import re
from pathlib import Path

from ..errors import HelpLinesNotFoundError

logger = logging.getLogger(__name__)

# Indentation before the opening tag belongs to the region; the fragment carries its own.
HELP_LINES_PATTERN = re.compile(r"[ \t]*<helpLines>[\s\S]*?</helpLines>")


def replace_help_lines(content: str, help_lines_xml: str) -> tuple[str, bool]:
    """
    Replace the first <helpLines>...</helpLines> region in content.

    Spaces and tabs before the opening tag are replaced too, so running
    again with the same fragment gives the same content. The fragment is
    inserted literally. Returns the new content and whether
    a region was found; without one the content comes back unchanged.
    """
    updated, count = HELP_LINES_PATTERN.subn(lambda _: help_lines_xml, content, count=1)
    return updated, count > 0


def update_mod_desc(mod_desc_path: Path, help_lines_xml: str, strict: bool = False) -> bool:
    """
    Write a new <helpLines> block into the configuration file in place.

    Line endings are preserved. When no region exists the file is written
    back byte-for-byte, unless ``strict`` is set.

    Args:
        mod_desc_path: Path to modDesc.xml
        help_lines_xml: Fragment from generate_help_lines_xml
        strict: Raise instead of writing when no region exists

    Returns:
        True if a region was replaced

    Raises:
        OSError: If the file cannot be read or written
        HelpLinesNotFoundError: In strict mode, if there is no region
    """
    with open(mod_desc_path, 'r', encoding='utf-8', newline='') as f:
        original = f.read()

    updated, replaced = replace_help_lines(original, help_lines_xml)
    if not replaced:
        if strict:
            raise HelpLinesNotFoundError(str(mod_desc_path))
        logger.warning("No <helpLines> region in %s, leaving it unchanged", mod_desc_path)

    with open(mod_desc_path, 'w', encoding='utf-8', newline='') as f:
        f.write(updated)

    if replaced:
        logger.info("%s updated with new <helpLines>", mod_desc_path.name)
    return replaced
