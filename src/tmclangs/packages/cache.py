"""Cache management for helper jars.

Cache Structure:
    ~/.tmc-langs/cache/
    └── jars/
        └── {url_hash}/         # SHA256 hash of the download URL
            └── {filename}.jar  # Downloaded jar

Only tooling the orchestrator itself needs (the JUnit test runner and
Checkstyle) is cached here; nothing built from an exercise is ever stored.
"""

import hashlib
import os
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse


class Cache:
    """Manages the tmclangs cache directory structure.

    The cache root is taken from the explicit argument, else the
    TMC_LANGS_CACHE_DIR environment variable, else ~/.tmc-langs/cache.
    """

    def __init__(self, cache_root: Optional[Path] = None):
        """Initialize cache manager.

        Args:
            cache_root: Cache directory. If None, resolved from the environment.
        """
        if cache_root is None:
            cache_env = os.environ.get("TMC_LANGS_CACHE_DIR")
            if cache_env:
                cache_root = Path(cache_env)
            else:
                cache_root = Path.home() / ".tmc-langs" / "cache"

        self.cache_root = Path(cache_root).expanduser().resolve()

    @staticmethod
    def hash_url(url: str) -> str:
        """Generate a SHA256 hash of a URL for cache directory naming.

        Args:
            url: The URL to hash

        Returns:
            First 16 characters of SHA256 hash
        """
        return hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]

    @property
    def jars_dir(self) -> Path:
        """Directory for downloaded jars."""
        return self.cache_root / "jars"

    def get_jar_path(self, url: str) -> Path:
        """Get the cache location of the jar downloaded from a URL."""
        filename = Path(urlparse(url).path).name or "download.jar"
        return self.jars_dir / self.hash_url(url) / filename

    def is_jar_cached(self, url: str) -> bool:
        return self.get_jar_path(url).is_file()
