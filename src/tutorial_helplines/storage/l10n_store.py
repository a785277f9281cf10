"""Localization file export."""

import logging
from pathlib import Path

from ..emitter.help_lines import TranslationEntry

logger = logging.getLogger(__name__)

# Order matters: '&' first so the other entities are not escaped twice.
ATTRIBUTE_ESCAPES = (
    ('&', '&amp;'),
    ('"', '&quot;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
)


def escape_xml(text: str) -> str:
    """Escape text for use inside a double-quoted XML attribute."""
    for char, entity in ATTRIBUTE_ESCAPES:
        text = text.replace(char, entity)
    return text


def render_translations_xml(entries: list[TranslationEntry]) -> str:
    """Render entries as an <l10n> document. Keys are written as-is."""
    parts = ["<l10n>\n  <elements>\n"]
    for entry in entries:
        parts.append(f'    <e k="{entry.key}" v="{escape_xml(entry.value)}" />\n')
    parts.append("  </elements>\n</l10n>\n")
    return "".join(parts)


def export_translations(entries: list[TranslationEntry], output_path: Path) -> None:
    """Write the localization file, replacing any existing one."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(render_translations_xml(entries))
    logger.info("Translations written to %s", output_path)
