"""Helper jar downloader with progress tracking.

This module downloads the jars the Java plugins need at run time (the JUnit
test runner and Checkstyle) and resolves them through the cache.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests
from tqdm import tqdm

from .cache import Cache

logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Raised when a download fails or no source for a jar is configured."""

    pass


class JarDownloader:
    """Downloads single files with a progress bar."""

    def __init__(self, chunk_size: int = 8192, show_progress: bool = True):
        """Initialize downloader.

        Args:
            chunk_size: Size of chunks for streaming the response
            show_progress: Whether to show a progress bar on stderr
        """
        self.chunk_size = chunk_size
        self.show_progress = show_progress

    def download(self, url: str, dest_path: Path) -> Path:
        """Download a file from a URL.

        Args:
            url: URL to download from
            dest_path: Destination file path

        Returns:
            Path to the downloaded file

        Raises:
            DownloadError: If download fails
        """
        dest_path = Path(dest_path)
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        # Use temporary file during download
        temp_file = dest_path.with_suffix(dest_path.suffix + ".tmp")

        logger.info(f"Downloading {url}")

        try:
            response = requests.get(url, stream=True, timeout=30)
            response.raise_for_status()

            total_size = int(response.headers.get("content-length", 0))

            progress_bar = None
            if self.show_progress and total_size > 0:
                progress_bar = tqdm(
                    total=total_size,
                    unit="B",
                    unit_scale=True,
                    unit_divisor=1024,
                    desc=f"Downloading {Path(urlparse(url).path).name}",
                )

            with open(temp_file, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        f.write(chunk)
                        if progress_bar:
                            progress_bar.update(len(chunk))

            if progress_bar:
                progress_bar.close()

            if dest_path.exists():
                dest_path.unlink()
            temp_file.rename(dest_path)

            return dest_path

        except requests.RequestException as e:
            if temp_file.exists():
                temp_file.unlink()
            raise DownloadError(f"Failed to download {url}: {e}") from e

        except Exception:
            if temp_file.exists():
                temp_file.unlink()
            raise


def ensure_jar(
    configured_path: Optional[Path],
    url: Optional[str],
    cache: Cache,
    downloader: Optional[JarDownloader] = None,
) -> Path:
    """Resolve a helper jar, downloading it into the cache on first use.

    Args:
        configured_path: Explicitly configured jar; used as-is when set
        url: Download URL used when no path is configured
        cache: Cache to store downloads in
        downloader: Downloader to use (a default one is created if None)

    Returns:
        Path to an existing jar file

    Raises:
        DownloadError: If the configured jar is missing, no source is
            configured, or the download fails
    """
    if configured_path is not None:
        if not Path(configured_path).is_file():
            raise DownloadError(f"Configured jar not found: {configured_path}")
        return Path(configured_path)

    if not url:
        raise DownloadError("No jar path or download URL configured")

    jar_path = cache.get_jar_path(url)
    if jar_path.is_file():
        logger.debug(f"Using cached {jar_path.name}")
        return jar_path

    if downloader is None:
        downloader = JarDownloader()
    return downloader.download(url, jar_path)
