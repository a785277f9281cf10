"""Run settings resolved from defaults and environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TUTORIALS_DIR = "./tutorials"
DEFAULT_MOD_DESC_PATH = "./modDesc.xml"
DEFAULT_L10N_PATH = "./translations/l10n_en.xml"

TRUTHY = ('true', '1', 'yes')


@dataclass
class Settings:
    """Paths and switches for one generator run."""
    tutorials_dir: Path = Path(DEFAULT_TUTORIALS_DIR)
    mod_desc_path: Path = Path(DEFAULT_MOD_DESC_PATH)
    l10n_path: Path = Path(DEFAULT_L10N_PATH)
    strict: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from HELPLINES_* environment variables.

        Unset variables fall back to the fixed default paths, so a bare
        invocation reads ./tutorials and writes ./modDesc.xml and
        ./translations/l10n_en.xml.
        """
        return cls(
            tutorials_dir=Path(os.environ.get('HELPLINES_TUTORIALS_DIR', DEFAULT_TUTORIALS_DIR)),
            mod_desc_path=Path(os.environ.get('HELPLINES_MOD_DESC', DEFAULT_MOD_DESC_PATH)),
            l10n_path=Path(os.environ.get('HELPLINES_L10N_PATH', DEFAULT_L10N_PATH)),
            strict=os.environ.get('HELPLINES_STRICT', '').lower() in TRUTHY,
        )
