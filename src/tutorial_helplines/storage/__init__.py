"""Output files: the patched modDesc.xml and the localization table."""

from .mod_desc import replace_help_lines, update_mod_desc
from .l10n_store import escape_xml, export_translations, render_translations_xml

__all__ = [
    "replace_help_lines",
    "update_mod_desc",
    "escape_xml",
    "export_translations",
    "render_translations_xml",
]
