"""Tool to regenerate the mod's help content from a tutorials directory."""

import logging
from pathlib import Path

from ..emitter.help_lines import TranslationEntry, generate_help_lines_xml
from ..parser.hierarchy import build_tutorial_tree
from ..storage.l10n_store import export_translations
from ..storage.mod_desc import update_mod_desc

logger = logging.getLogger(__name__)


def generate_help(
    tutorials_dir: Path,
    mod_desc_path: Path,
    l10n_path: Path,
    strict: bool = False,
) -> dict:
    """
    Rebuild <helpLines> in modDesc.xml and rewrite the localization file.

    Steps run in order and any failure aborts the run: build the tree,
    emit the fragment, patch the configuration, export translations.

    Args:
        tutorials_dir: Root with one subdirectory per category
        mod_desc_path: Configuration file to patch in place
        l10n_path: Localization file to (over)write
        strict: Fail if modDesc.xml has no <helpLines> region

    Returns:
        Dict with run statistics
    """
    categories = build_tutorial_tree(tutorials_dir)
    logger.debug("Loaded %d categories from %s", len(categories), tutorials_dir)

    translation_entries: list[TranslationEntry] = []
    help_lines_xml = generate_help_lines_xml(categories, translation_entries)

    replaced = update_mod_desc(mod_desc_path, help_lines_xml, strict=strict)
    export_translations(translation_entries, l10n_path)

    return {
        "success": True,
        "category_count": len(categories),
        "page_count": sum(len(c.pages) for c in categories),
        "paragraph_count": sum(len(p.paragraphs) for c in categories for p in c.pages),
        "translation_count": len(translation_entries),
        "help_lines_replaced": replaced,
        "mod_desc": str(mod_desc_path),
        "l10n": str(l10n_path),
    }
