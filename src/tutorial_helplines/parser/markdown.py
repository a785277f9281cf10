"""Markdown parsing to extract help paragraphs (titles, text, images)."""

import logging
from dataclasses import dataclass
from typing import Optional

import marko
from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

# Headings that set the title of the next paragraph. Deeper levels are ignored.
TITLE_TAGS = ('h1', 'h2')

# CommonMark with GitHub extensions: lists may interrupt a paragraph, and
# fenced code, tables and strikethrough render as their own markup.
MARKDOWN_RENDERER = marko.Markdown(extensions=["gfm"])


@dataclass
class Paragraph:
    """One help paragraph: any combination of title, text and image."""
    title: Optional[str] = None
    text: Optional[str] = None
    image: Optional[str] = None


def image_filename(img: Tag) -> Optional[str]:
    """Return the basename of an <img> src, or None when it has no src."""
    src = img.get('src')
    if not src:
        logger.debug("Skipping <img> without src: %s", img)
        return None
    return src.rsplit('/', 1)[-1]


def render_markdown(content: str) -> str:
    """Render markdown to an HTML fragment."""
    return MARKDOWN_RENDERER.convert(content)


def parse_html_to_paragraphs(html: str) -> list[Paragraph]:
    """
    Walk the top-level elements of an HTML fragment and build paragraphs.

    - h1/h2 set a pending title, replacing any unused one.
    - <p> emits an image paragraph for its first <img>, then a text
      paragraph for its remaining text. The pending title goes to the
      first of those and is cleared after the block.
    - A bare <img> emits an image paragraph and clears the pending title.
    - Anything else is ignored.
    """
    soup = BeautifulSoup(html, 'html.parser')
    paragraphs: list[Paragraph] = []
    pending_title: Optional[str] = None

    for el in soup.find_all(recursive=False):
        if el.name in TITLE_TAGS:
            pending_title = el.get_text().strip()

        elif el.name == 'p':
            text = el.get_text().strip()
            img = el.find('img')

            if img is not None:
                filename = image_filename(img)
                if filename:
                    paragraphs.append(Paragraph(title=pending_title or None, image=filename))
                    pending_title = None

            if text and (img is None or text != str(img)):
                paragraphs.append(Paragraph(title=pending_title or None, text=text))

            pending_title = None

        elif el.name == 'img':
            filename = image_filename(el)
            if filename:
                paragraphs.append(Paragraph(title=pending_title or None, image=filename))
            pending_title = None

    return paragraphs


def parse_markdown_to_paragraphs(content: str) -> list[Paragraph]:
    """
    Parse the markdown of one tutorial page into help paragraphs.

    Malformed markdown is rendered best-effort; there are no error cases.
    """
    return parse_html_to_paragraphs(render_markdown(content))
