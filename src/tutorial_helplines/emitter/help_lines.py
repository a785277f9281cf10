"""Serialize the tutorial tree into a <helpLines> fragment with localization keys."""

import logging
import re
from dataclasses import dataclass

from ..parser.hierarchy import Category

logger = logging.getLogger(__name__)

ICON_FILENAME = "icons/icon_tutorial.dds"
IMAGE_DIR = "images"
KEY_PREFIX = "tutorial"
L10N_REF = "$l10n_"


@dataclass
class TranslationEntry:
    """A localization key and its display text."""
    key: str
    value: str


def humanize(identifier: str) -> str:
    """Turn a directory or file name into a display title ("getting-started" -> "Getting Started")."""
    spaced = re.sub(r'[-_]', ' ', identifier)
    return re.sub(r'\b\w', lambda m: m.group(0).upper(), spaced)


def category_key(category_name: str) -> str:
    return f"{KEY_PREFIX}_{category_name}"


def page_key(category_name: str, file_key: str) -> str:
    return f"{KEY_PREFIX}_{category_name}_{file_key}"


def paragraph_key(base_key: str, counter: int) -> str:
    """Key for the counter-th title or text of a page (counter starts at 1)."""
    return f"{base_key}_{counter:03d}"


def generate_help_lines_xml(
    categories: list[Category],
    translation_entries: list[TranslationEntry],
) -> str:
    """
    Build the <helpLines> fragment for the given categories.

    Translation entries are appended to ``translation_entries`` in emission
    order: category title, page title, then each paragraph's title and text.
    Within a page a single counter numbers titles and texts; images take no
    key.

    Args:
        categories: Tutorial tree from build_tutorial_tree
        translation_entries: List receiving the generated entries

    Returns:
        The fragment, from "  <helpLines>" to "  </helpLines>" with no
        trailing newline
    """
    seen_keys: set[str] = set()

    def add_entry(key: str, value: str) -> None:
        if key in seen_keys:
            logger.warning("Duplicate translation key: %s", key)
        seen_keys.add(key)
        translation_entries.append(TranslationEntry(key=key, value=value))

    lines = ["  <helpLines>"]

    for category in categories:
        cat_key = category_key(category.name)
        add_entry(cat_key, humanize(category.name))
        lines.append(f'    <category title="{L10N_REF}{cat_key}" iconFilename="{ICON_FILENAME}">')

        for page in category.pages:
            base_key = page_key(category.name, page.file_key)
            add_entry(base_key, humanize(page.file_key))
            lines.append(f'      <page title="{L10N_REF}{base_key}">')

            counter = 1
            for paragraph in page.paragraphs:
                lines.append("        <paragraph>")

                if paragraph.title:
                    key = paragraph_key(base_key, counter)
                    lines.append(f'          <title text="{L10N_REF}{key}"/>')
                    add_entry(key, paragraph.title)
                    counter += 1

                if paragraph.text:
                    key = paragraph_key(base_key, counter)
                    lines.append(f'          <text text="{L10N_REF}{key}"/>')
                    add_entry(key, paragraph.text)
                    counter += 1

                if paragraph.image:
                    lines.append(f'          <image filename="{IMAGE_DIR}/{paragraph.image}" />')

                lines.append("        </paragraph>")

            lines.append("      </page>")

        lines.append("    </category>")

    lines.append("  </helpLines>")
    return "\n".join(lines)
