"""Registry configuration.

PathConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from pathhelper.errors import ConfigurationError

# Environment variable selecting the runtime environment (gates the watcher)
ENV_VAR = "PATHHELPER_ENV"


def _environment_from_env() -> str:
    return os.environ.get(ENV_VAR, "development")


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Registry configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PathConfig(project_root="~/code/site", debounce=0.5)
    """

    # Discovery
    project_root: str | Path | None = None  # None = cwd at rebuild time
    candidates: tuple[str, ...] = ("app", "src/app")  # Checked in order
    home_label: str = "Home"

    # Watcher
    debounce: float = 0.1  # Seconds to coalesce bursts of events (0 = inline)
    ignore_hidden: bool = True  # Skip paths with a dot-prefixed component

    # Runtime
    log_level: str = "info"
    environment: str = field(default_factory=_environment_from_env)

    def __post_init__(self) -> None:
        if not self.candidates:
            msg = "PathConfig.candidates must name at least one directory."
            raise ConfigurationError(msg)
        if self.debounce < 0:
            msg = f"PathConfig.debounce must be >= 0, got {self.debounce!r}."
            raise ConfigurationError(msg)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def resolve_project_root(self) -> Path:
        """Return the project root as an absolute path."""
        if self.project_root is None:
            return Path.cwd()
        return Path(self.project_root).expanduser().resolve()
