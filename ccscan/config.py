"""Configuration management for ccscan.

Reads the commit type vocabulary and the prompt order from YAML files:
- Global: $XDG_CONFIG_HOME/ccscan/config.yaml (~/.config/ccscan/config.yaml)
- Repository: .ccscan.yaml in the repository root

Files are applied in that order on top of the built-in defaults. A commit
type or prompt with an existing name replaces the earlier definition, new
names are added.

Example config.yaml:
    commit_types:
      - name: feat
        description: A new feature
        emoji: "🎁"
    prompts:
      - name: scope
        order: 1
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".ccscan.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a configuration file is well-formed but inconsistent."""

    pass


class PromptKind(Enum):
    """Questions the interactive commit flow can ask."""

    TYPE = "type"
    SCOPE = "scope"
    SUBJECT = "subject"
    BODY = "body"
    IS_BREAKING = "is_breaking"
    ISSUES = "issues"
    FOOTERS = "footers"


class CommitTypeOption(BaseModel):
    """A commit type offered to the user.

    Attributes:
        name: Header keyword, e.g. "feat".
        description: One-line explanation shown next to the keyword.
        emoji: Optional decoration shown in the selection list.
    """

    name: str
    description: str
    emoji: Optional[str] = None

    def label(self) -> str:
        """Selection list label, e.g. "🎁 - feat (A new feature)"."""
        prefix = f"{self.emoji} - " if self.emoji else ""
        return f"{prefix}{self.name} ({self.description})"


class PromptOption(BaseModel):
    """A prompt and its position in the interactive flow."""

    name: PromptKind
    order: int

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        """Accept prompt names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class FileConfig(BaseModel):
    """Contents of one configuration file."""

    commit_types: list[CommitTypeOption] = []
    prompts: list[PromptOption] = []

    @field_validator("commit_types", "prompts", mode="before")
    @classmethod
    def ensure_list(cls, v):
        """Treat an empty YAML key as an empty list."""
        if v is None:
            return []
        return v


DEFAULT_COMMIT_TYPES = [
    CommitTypeOption(name="feat", description="A new feature", emoji="🎁"),
    CommitTypeOption(name="fix", description="A bug fix", emoji="🐛"),
]

CONVENTIONAL_COMMIT_TYPES = [
    CommitTypeOption(
        name="chore",
        description="Other changes that don't modify src or test files",
        emoji="🧹",
    ),
    CommitTypeOption(name="docs", description="Documentation only changes", emoji="📚"),
    CommitTypeOption(
        name="style",
        description="Changes that do not affect the meaning of the code",
        emoji="💅",
    ),
    CommitTypeOption(
        name="perf",
        description="A code change that improves performance",
        emoji="⚡️",
    ),
    CommitTypeOption(
        name="refactor",
        description="A code change that neither fixes a bug nor adds a feature",
        emoji="♻️",
    ),
    CommitTypeOption(
        name="build",
        description="Changes that affect the build system or external dependencies",
        emoji="🛠️",
    ),
    CommitTypeOption(
        name="ci",
        description="Changes to our CI configuration files and scripts",
        emoji="⚙️",
    ),
    CommitTypeOption(name="revert", description="Reverts a previous commit", emoji="⏮️"),
    CommitTypeOption(
        name="test",
        description="Adding missing tests or correcting existing tests",
        emoji="✅",
    ),
]

DEFAULT_PROMPTS = [
    PromptOption(name=PromptKind.TYPE, order=0),
    PromptOption(name=PromptKind.SUBJECT, order=1),
]


@dataclass
class Config:
    """Effective configuration after merging defaults and config files."""

    commit_types: dict[str, CommitTypeOption] = field(default_factory=dict)
    prompts: dict[PromptKind, PromptOption] = field(default_factory=dict)

    @classmethod
    def defaults(cls, conventional_types: bool = False) -> "Config":
        """Build the built-in configuration.

        Args:
            conventional_types: Also offer the Angular-style commit types.

        Returns:
            Config with the default commit types and prompts.
        """
        types = list(DEFAULT_COMMIT_TYPES)
        if conventional_types:
            types.extend(CONVENTIONAL_COMMIT_TYPES)
        return cls(
            commit_types={option.name: option for option in types},
            prompts={option.name: option for option in DEFAULT_PROMPTS},
        )

    def merge_commit_types(self, file_config: FileConfig) -> None:
        for option in file_config.commit_types:
            self.commit_types[option.name] = option

    def merge_prompts(self, file_config: FileConfig) -> None:
        for option in file_config.prompts:
            self.prompts[option.name] = option

    def merge(self, file_config: FileConfig) -> None:
        self.merge_commit_types(file_config)
        self.merge_prompts(file_config)

    def ordered_prompts(self) -> list[PromptKind]:
        """Prompt kinds in the order they should be asked."""
        options = sorted(self.prompts.values(), key=lambda option: option.order)
        return [option.name for option in options]


def validate_config(file_config: FileConfig) -> None:
    """Check a single file's prompts for duplicate names and order indexes.

    Args:
        file_config: The parsed file.

    Raises:
        ConfigValidationError: On a duplicate prompt name or order index.
    """
    seen_names: set[PromptKind] = set()
    seen_orders: dict[int, PromptKind] = {}

    for prompt in file_config.prompts:
        if prompt.name in seen_names:
            raise ConfigValidationError(
                f"Duplicate prompt of '{prompt.name.value}' encountered."
            )
        seen_names.add(prompt.name)

        if prompt.order in seen_orders:
            existing = seen_orders[prompt.order]
            raise ConfigValidationError(
                f"Prompt '{prompt.name.value}' shares the same order of "
                f"{prompt.order} held by '{existing.value}'."
            )
        seen_orders[prompt.order] = prompt.name


def get_global_config_file() -> Path:
    """Get the global config path, honouring XDG_CONFIG_HOME.

    Returns:
        Path to ccscan/config.yaml under the XDG config directory.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "ccscan" / "config.yaml"


def get_repo_config_file(repo_root: Path) -> Path:
    """Get the repository config path.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .ccscan.yaml in the repository root.
    """
    return repo_root / CONFIG_FILE_NAME


def read_config_file(path: Path) -> Optional[FileConfig]:
    """Read and validate one configuration file.

    Args:
        path: File to read.

    Returns:
        The parsed file, or None if it does not exist.

    Raises:
        ConfigError: If the file cannot be read or is not valid YAML.
        ConfigValidationError: If the content does not fit the schema.
    """
    if not path.exists():
        logger.debug("No config file at %s", path)
        return None

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"I/O error reading {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")

    try:
        file_config = FileConfig(**data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config in {path}: {e}")

    validate_config(file_config)
    logger.debug("Loaded config from %s", path)
    return file_config


def load_config(
    repo_root: Optional[Path] = None,
    conventional_types: bool = False,
) -> Config:
    """Load the effective configuration.

    Args:
        repo_root: Repository whose .ccscan.yaml should be applied, if any.
        conventional_types: Start from the extended commit type defaults.

    Returns:
        The merged Config.
    """
    config = Config.defaults(conventional_types)

    paths = [get_global_config_file()]
    if repo_root is not None:
        paths.append(get_repo_config_file(repo_root))

    for path in paths:
        file_config = read_config_file(path)
        if file_config is not None:
            config.merge(file_config)

    logger.info(
        "Config: %d commit types, prompts %s",
        len(config.commit_types),
        [kind.value for kind in config.ordered_prompts()],
    )
    return config


def save_config(path: Path, file_config: FileConfig) -> None:
    """Write a configuration file.

    Args:
        path: Destination file.
        file_config: Content to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            file_config.model_dump(mode="json", exclude_none=True),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
