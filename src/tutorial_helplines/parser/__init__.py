"""Markdown parsing utilities."""

from .markdown import Paragraph, parse_markdown_to_paragraphs
from .hierarchy import Category, Page, build_tutorial_tree

__all__ = ["Paragraph", "parse_markdown_to_paragraphs", "Category", "Page", "build_tutorial_tree"]
