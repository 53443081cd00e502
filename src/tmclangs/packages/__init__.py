"""Helper jar management for tmclangs.

This module handles downloading and caching the external jars that the Java
plugins run: the JUnit test runner and Checkstyle.
"""

from .cache import Cache
from .downloader import DownloadError, JarDownloader, ensure_jar

__all__ = ["Cache", "DownloadError", "JarDownloader", "ensure_jar"]
