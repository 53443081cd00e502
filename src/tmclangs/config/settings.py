"""
Settings for tmclangs.

Settings control which executables are used for building and testing, where
helper jars (JUnit test runner, Checkstyle) come from and where they are
cached. There is no default JUnit test runner: Java exercises need
junit_runner_jar or junit_runner_url under [java].

Precedence (lowest to highest):
    1. Built-in defaults
    2. INI file (--config, or TMC_LANGS_CONFIG)
    3. TMC_LANGS_* environment variables

Example INI file:
    [tools]
    java = /usr/lib/jvm/java-17/bin/java
    ant = ant
    maven = mvn
    make = make

    [java]
    junit_runner_jar = /opt/tmc/tmc-junit-runner.jar
    default_locale = fi

    [checkstyle]
    jar = /opt/checkstyle/checkstyle-all.jar
    config = /sun_checks.xml

    [cache]
    dir = /var/cache/tmc-langs
"""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

CONFIG_ENV_VAR = "TMC_LANGS_CONFIG"

DEFAULT_CHECKSTYLE_URL = (
    "https://github.com/checkstyle/checkstyle/releases/download/"
    "checkstyle-10.12.5/checkstyle-10.12.5-all.jar"
)


class ConfigError(Exception):
    """Raised when a settings file cannot be read or holds invalid values."""

    pass


@dataclass(frozen=True)
class LangsSettings:
    """Resolved settings used by plugins and collaborators."""

    java_executable: str = "java"
    ant_executable: str = "ant"
    maven_executable: str = "mvn"
    make_executable: str = "make"
    junit_runner_jar: Optional[Path] = None
    junit_runner_url: Optional[str] = None
    default_locale: str = "en"
    checkstyle_jar: Optional[Path] = None
    checkstyle_url: Optional[str] = DEFAULT_CHECKSTYLE_URL
    checkstyle_config: str = "/sun_checks.xml"
    cache_dir: Optional[Path] = None


# (section, option) -> settings field
_INI_KEYS: Dict[Tuple[str, str], str] = {
    ("tools", "java"): "java_executable",
    ("tools", "ant"): "ant_executable",
    ("tools", "maven"): "maven_executable",
    ("tools", "make"): "make_executable",
    ("java", "junit_runner_jar"): "junit_runner_jar",
    ("java", "junit_runner_url"): "junit_runner_url",
    ("java", "default_locale"): "default_locale",
    ("checkstyle", "jar"): "checkstyle_jar",
    ("checkstyle", "url"): "checkstyle_url",
    ("checkstyle", "config"): "checkstyle_config",
    ("cache", "dir"): "cache_dir",
}

_ENV_KEYS: Dict[str, str] = {
    "TMC_LANGS_JAVA": "java_executable",
    "TMC_LANGS_ANT": "ant_executable",
    "TMC_LANGS_MAVEN": "maven_executable",
    "TMC_LANGS_MAKE": "make_executable",
    "TMC_LANGS_JUNIT_RUNNER_JAR": "junit_runner_jar",
    "TMC_LANGS_JUNIT_RUNNER_URL": "junit_runner_url",
    "TMC_LANGS_DEFAULT_LOCALE": "default_locale",
    "TMC_LANGS_CHECKSTYLE_JAR": "checkstyle_jar",
    "TMC_LANGS_CHECKSTYLE_URL": "checkstyle_url",
    "TMC_LANGS_CHECKSTYLE_CONFIG": "checkstyle_config",
    "TMC_LANGS_CACHE_DIR": "cache_dir",
}

_PATH_FIELDS = {"junit_runner_jar", "checkstyle_jar", "cache_dir"}


def _read_ini(config_path: Path) -> Dict[str, str]:
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    parser = configparser.ConfigParser()
    try:
        parser.read(config_path, encoding="utf-8")
    except configparser.Error as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    values = {}
    for section in parser.sections():
        for option, raw_value in parser[section].items():
            key = (section, option)
            if key not in _INI_KEYS:
                raise ConfigError(f"Unknown setting [{section}] {option} in {config_path}")
            values[_INI_KEYS[key]] = raw_value.strip()
    return values


def _convert(values: Dict[str, str]) -> Dict[str, object]:
    converted: Dict[str, object] = {}
    for name, value in values.items():
        if not value:
            converted[name] = None if name in _PATH_FIELDS else value
        elif name in _PATH_FIELDS:
            converted[name] = Path(value).expanduser()
        else:
            converted[name] = value
    return converted


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LangsSettings:
    """Load settings from defaults, an optional INI file and the environment.

    Args:
        config_path: INI file to read. Falls back to TMC_LANGS_CONFIG.
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved LangsSettings

    Raises:
        ConfigError: If the INI file is missing, malformed or has unknown keys
    """
    if environ is None:
        environ = os.environ

    values: Dict[str, str] = {}

    if config_path is None and environ.get(CONFIG_ENV_VAR):
        config_path = Path(environ[CONFIG_ENV_VAR])
    if config_path is not None:
        values.update(_read_ini(Path(config_path)))

    for env_name, field_name in _ENV_KEYS.items():
        if env_name in environ:
            values[field_name] = environ[env_name].strip()

    return LangsSettings(**_convert(values))  # type: ignore[arg-type]
