"""Build the category -> page -> paragraph tree from a tutorials directory."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .markdown import Paragraph, parse_markdown_to_paragraphs

logger = logging.getLogger(__name__)

PAGE_EXTENSION = '.md'


@dataclass
class Page:
    """A tutorial page, one per markdown file."""
    file_key: str
    paragraphs: list[Paragraph] = field(default_factory=list)


@dataclass
class Category:
    """A group of pages, one per tutorials subdirectory."""
    name: str
    pages: list[Page] = field(default_factory=list)


def discover_page_files(category_path: Path) -> list[Path]:
    """List the markdown files directly inside a category directory, sorted by name."""
    files: list[Path] = []
    for item in sorted(category_path.iterdir(), key=lambda p: p.name):
        if item.suffix == PAGE_EXTENSION and item.is_file():
            files.append(item)
        else:
            logger.debug("Skipping non-page entry: %s", item)
    return files


def build_page(file_path: Path) -> Page:
    """Read and parse one tutorial page."""
    content = file_path.read_text(encoding='utf-8')
    return Page(file_key=file_path.stem, paragraphs=parse_markdown_to_paragraphs(content))


def build_tutorial_tree(base_path: Path) -> list[Category]:
    """
    Build the tutorial tree from a root directory.

    Each immediate subdirectory is a category and each .md file inside it
    a page. Listings are sorted by name so output does not depend on the
    host filesystem's enumeration order.

    Raises:
        OSError: If the root or a category cannot be listed, or a page
            cannot be read. Nothing is recovered.
    """
    base = Path(base_path)
    categories: list[Category] = []

    for entry in sorted(base.iterdir(), key=lambda p: p.name):
        if not entry.is_dir():
            logger.debug("Skipping non-directory entry: %s", entry)
            continue

        pages = [build_page(file_path) for file_path in discover_page_files(entry)]
        logger.debug("Category %s: %d pages", entry.name, len(pages))
        categories.append(Category(name=entry.name, pages=pages))

    return categories
