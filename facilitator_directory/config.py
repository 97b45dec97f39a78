"""Central configuration for the facilitator directory build."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
# Build outputs resolve against the directory the build is started from.
BASE_DIR = Path.cwd()


@dataclass(slots=True, frozen=True)
class Settings:
    base_dir: Path
    output_dir: Path
    assets_dir: Path
    template_path: Path
    cname_path: Path
    index_filename: str
    validate_catalog: bool

    def with_overrides(self, **changes: object) -> "Settings":
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


SETTINGS = Settings(
    base_dir=BASE_DIR,
    output_dir=BASE_DIR / "dist",
    assets_dir=PACKAGE_DIR / "assets",
    template_path=PACKAGE_DIR / "website" / "template.html",
    cname_path=BASE_DIR / "CNAME",
    index_filename="index.html",
    validate_catalog=True,
)
