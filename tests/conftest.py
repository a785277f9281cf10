"""Shared test fixtures for tutorial-helplines tests."""

from pathlib import Path

import pytest


MOD_DESC_TEMPLATE = """<?xml version="1.0" encoding="utf-8" standalone="no" ?>
<modDesc descVersion="92">
  <author>Test Author</author>
  <version>1.0.0.0</version>
  <helpLines>
    <category title="$l10n_old" iconFilename="icons/old.dds">
    </category>
  </helpLines>
  <l10n filenamePrefix="translations/l10n" />
</modDesc>
"""


@pytest.fixture
def sample_markdown():
    """Return tutorial markdown mixing titles, text, images and ignored blocks."""
    return """# Buying a Tractor

Visit the shop to buy your first tractor.

## The Shop

![Shop screen](images/sub/shop.png)

Pick a tractor from the list.

### Details are ignored as titles

- list items are ignored
- as are code blocks

```
code
```

Final words.
"""


@pytest.fixture
def tutorials_dir(tmp_path):
    """Create a tutorials tree with two categories."""
    root = tmp_path / "tutorials"
    getting_started = root / "getting-started"
    getting_started.mkdir(parents=True)
    (getting_started / "intro-guide.md").write_text("# Welcome\nHello world.\n", encoding="utf-8")
    (getting_started / "notes.txt").write_text("not a page\n", encoding="utf-8")

    fields = root / "field_work"
    fields.mkdir()
    (fields / "plowing.md").write_text(
        "# Plowing\n\nAttach the plow & drive.\n\n![Plow](images/plow.png)\n",
        encoding="utf-8",
    )
    (fields / "harvesting.md").write_text(
        '## Harvest\n\nUse a "combine" when crops are > 90% ripe.\n',
        encoding="utf-8",
    )

    (root / "README.md").write_text("stray file at the root\n", encoding="utf-8")
    return root


@pytest.fixture
def mod_desc_path(tmp_path) -> Path:
    """Create a modDesc.xml with an existing <helpLines> block."""
    path = tmp_path / "modDesc.xml"
    path.write_text(MOD_DESC_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def l10n_path(tmp_path) -> Path:
    """Localization output path in a directory that does not exist yet."""
    return tmp_path / "translations" / "l10n_en.xml"
