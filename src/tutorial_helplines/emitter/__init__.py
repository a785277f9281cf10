"""helpLines XML generation."""

from .help_lines import TranslationEntry, generate_help_lines_xml, humanize

__all__ = ["TranslationEntry", "generate_help_lines_xml", "humanize"]
