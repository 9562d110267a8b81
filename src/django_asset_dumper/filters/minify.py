"""Minification filters for CSS and JS assets."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from django.conf import settings

from ..conf import get_setting
from .base import BaseAssetFilter

logger = logging.getLogger(__name__)

TERSER_TIMEOUT_SECONDS = 30


class CssMinFilter(BaseAssetFilter):
    """Minify CSS using rcssmin.

    Leaves the content unchanged if rcssmin is not installed.
    """

    def filter_dump(self, content: str) -> str:
        try:
            import rcssmin  # type: ignore[import-not-found, import-untyped]

            return rcssmin.cssmin(content)  # type: ignore[no-any-return]
        except ImportError:
            logger.warning("rcssmin is not installed. CSS minification skipped.")
            return content


class JsMinFilter(BaseAssetFilter):
    """Minify JS using rjsmin.

    Leaves the content unchanged if rjsmin is not installed.
    """

    def filter_dump(self, content: str) -> str:
        try:
            import rjsmin  # type: ignore[import-not-found, import-untyped]

            return rjsmin.jsmin(content)  # type: ignore[no-any-return]
        except ImportError:
            logger.warning("rjsmin is not installed. JS minification skipped.")
            return content


class TerserFilter(JsMinFilter):
    """Compress JS with terser, falling back to rjsmin."""

    def filter_dump(self, content: str) -> str:
        terser_path = find_terser()
        if terser_path is not None:
            try:
                result = subprocess.run(  # noqa: S603
                    [terser_path, *get_setting("TERSER_OPTIONS")],
                    input=content,
                    capture_output=True,
                    text=True,
                    timeout=TERSER_TIMEOUT_SECONDS,
                    check=True,
                )
                return result.stdout
            except (
                subprocess.CalledProcessError,
                subprocess.TimeoutExpired,
                OSError,
            ) as e:
                logger.warning("terser failed: %s. Falling back to rjsmin.", e)

        return super().filter_dump(content)


def find_terser() -> str | None:
    """Return the terser binary to run, or ``None`` when there is none.

    ``TERSER_PATH`` wins; otherwise the project's local npm install under
    ``BASE_DIR`` is preferred over a global one on ``PATH``.
    """
    configured: str | None = get_setting("TERSER_PATH")
    if configured:
        return configured

    project_dir = getattr(settings, "BASE_DIR", None)
    if project_dir:
        npm_bin = Path(project_dir, "node_modules", ".bin", "terser")
        if npm_bin.is_file():
            return str(npm_bin)

    return shutil.which("terser")
