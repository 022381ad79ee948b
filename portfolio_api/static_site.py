# portfolio_api/static_site.py
"""
Built frontend detection.

In Docker the Vue build is copied to ``./static``:

    static/
      index.html
      favicon.ico
      assets/...

The directory is probed once at startup; if it is missing the server runs
API-only for the rest of the process lifetime.
"""
from __future__ import annotations

import logging
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticSite:
    root: Path
    enabled: bool

    @property
    def index(self) -> Path:
        return self.root / "index.html"

    @property
    def favicon(self) -> Path:
        return self.root / "favicon.ico"

    @property
    def assets(self) -> Path:
        return self.root / "assets"


def probe_static_dir(path: str | Path) -> StaticSite:
    root = Path(path)
    try:
        st = root.stat()
    except OSError as e:
        logger.info("Static directory not found (%s), serving API only", e)
        return StaticSite(root=root, enabled=False)

    if not stat.S_ISDIR(st.st_mode):
        logger.info("Static path %s exists but is not a directory, serving API only", root)
        return StaticSite(root=root, enabled=False)

    logger.info("Serving static files from %s", root)
    return StaticSite(root=root, enabled=True)
