"""
Ordered registry of the supported project types.

Each entry pairs a toolchain plugin with the predicate that recognizes its
exercises. Detection walks the entries in registration order and the first
match wins, so a directory that satisfies several predicates (say, both
build.xml and pom.xml) always resolves the same way.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from .config import LangsSettings, load_settings
from .plugins import AntPlugin, ILanguagePlugin, MakePlugin, MavenPlugin
from .process import ProcessRunner

logger = logging.getLogger(__name__)


class NoLanguagePluginFoundError(Exception):
    """Raised when no registered plugin recognizes a directory."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"No suitable language plugin found for {self.path}")


@dataclass(frozen=True)
class ProjectTypeEntry:
    """A registered toolchain: its name, detection predicate and plugin."""

    name: str
    predicate: Callable[[Path], bool]
    plugin: ILanguagePlugin

    @classmethod
    def for_plugin(cls, plugin: ILanguagePlugin) -> "ProjectTypeEntry":
        return cls(plugin.get_language_name(), plugin.is_exercise_type_correct, plugin)


class ProjectType:
    """Read-only, ordered set of project types.

    Example usage:
        project_types = ProjectType.default()
        plugin = project_types.detect(Path("exercise"))
        print(plugin.get_language_name())
    """

    def __init__(self, entries: Iterable[ProjectTypeEntry]):
        self._entries: Tuple[ProjectTypeEntry, ...] = tuple(entries)

    @classmethod
    def from_plugins(cls, plugins: Iterable[ILanguagePlugin]) -> "ProjectType":
        return cls(ProjectTypeEntry.for_plugin(plugin) for plugin in plugins)

    @classmethod
    def default(
        cls,
        settings: Optional[LangsSettings] = None,
        runner: Optional[ProcessRunner] = None,
    ) -> "ProjectType":
        """The built-in project types in their detection order."""
        settings = settings or load_settings()
        return cls.from_plugins(
            [
                AntPlugin(settings=settings, runner=runner),
                MavenPlugin(settings=settings, runner=runner),
                MakePlugin(settings=settings, runner=runner),
            ]
        )

    @property
    def entries(self) -> Tuple[ProjectTypeEntry, ...]:
        return self._entries

    def find(self, path: Path) -> Optional[ProjectTypeEntry]:
        path = Path(path)
        for entry in self._entries:
            if entry.predicate(path):
                return entry
        return None

    def detect(self, path: Path) -> ILanguagePlugin:
        """Return the plugin of the first project type recognizing path.

        Raises:
            NoLanguagePluginFoundError: If no project type matches
        """
        entry = self.find(path)
        if entry is None:
            logger.info(f"No language plugin recognizes {path}")
            raise NoLanguagePluginFoundError(path)
        logger.debug(f"Detected {entry.name} project at {path}")
        return entry.plugin

    def is_exercise_root_directory(self, path: Path) -> bool:
        return self.find(path) is not None
