"""Configuration management for git-commit-lint."""
from pathlib import Path
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".gitcommitlint.toml"
CONFIG_SECTION = "gitcommitlint"

DEFAULT_FOOTER_KEYS = [
    "BREAKING CHANGE",
    "BREAKING-CHANGE",
    "Closes",
    "Fixes",
    "Refs",
    "Relates to",
    "Reviewed-by",
    "Signed-off-by",
    "Co-authored-by",
]

console = Console(stderr=True)


class Config(BaseModel):
    """Configuration settings for git-commit-lint.

    This class defines all configurable options that can be set either
    via the config file, environment variables or command line arguments.
    """

    max_subject_length: int = Field(
        default=50,
        gt=0,
        description="Maximum number of characters in the subject"
    )

    max_body_line_length: int = Field(
        default=72,
        gt=0,
        description="Maximum number of characters in a body line"
    )

    past_tense_words: List[str] = Field(
        default_factory=lambda: ["added", "fixed", "updated", "changed", "removed"],
        description="Subject opening words reported as non-imperative"
    )

    footer_keys: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FOOTER_KEYS),
        description="Footer keys recognised as trailers, including multi-word keys"
    )

    strip_comments: bool = Field(
        default=True,
        description="Drop lines starting with '#' before parsing, as git does"
    )

    strict: bool = Field(
        default=False,
        description="Whether style violations fail the check"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and cap the length of a string setting."""
        if not value:
            return value

        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, config_dir: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            config_dir: Directory containing the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = config_dir / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            # Accept both a flat file and a [gitcommitlint] table
            config_data = config_data.get(CONFIG_SECTION, config_data)

            if isinstance(config_data.get('log_file'), str):
                log_file = cls._sanitize_string(config_data['log_file'])
                if not cls._is_safe_path(log_file):
                    console.print(f"[yellow]Warning: Unsafe log file path '{log_file}', using default[/yellow]")
                    log_file = None
                config_data['log_file'] = log_file

            return cls(**config_data)
        except Exception as e:
            # If there's any error reading the config, use defaults
            console.print(f"[yellow]Warning: Error reading config file: {e}[/yellow]")
            return cls()

    def save(self, config_dir: Path) -> None:
        """Save configuration to the config file.

        Args:
            config_dir: Directory to write the config file into
        """
        config_path = config_dir / DEFAULT_CONFIG_FILENAME

        try:
            # TOML has no null, so unset values are left out
            config_dict = {k: v for k, v in self.model_dump().items() if v is not None}

            if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
                console.print(f"[yellow]Warning: Unsafe log file path '{config_dict['log_file']}', not saving[/yellow]")
                del config_dict['log_file']

            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            console.print(f"[red]Error saving config file: {e}[/red]")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"gcl_log-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                console.print(f"[yellow]Warning: Unsafe log file path '{self.log_file}', using default[/yellow]")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH': 'max_subject_length',
            'GIT_COMMIT_LINT_MAX_BODY_LINE_LENGTH': 'max_body_line_length',
            'GIT_COMMIT_LINT_PAST_TENSE_WORDS': 'past_tense_words',
            'GIT_COMMIT_LINT_FOOTER_KEYS': 'footer_keys',
            'GIT_COMMIT_LINT_STRIP_COMMENTS': 'strip_comments',
            'GIT_COMMIT_LINT_STRICT': 'strict',
            'GIT_COMMIT_LINT_ALWAYS_LOG': 'always_log',
            'GIT_COMMIT_LINT_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = self._sanitize_string(os.environ[env_var])

                # Positive integer limits; a bad value keeps the default
                if field_name in ['max_subject_length', 'max_body_line_length']:
                    try:
                        limit = int(value)
                    except ValueError:
                        limit = 0
                    if limit <= 0:
                        console.print(
                            f"[yellow]Warning: Ignoring {env_var}={escape(repr(value))}, "
                            "expected a positive integer[/yellow]"
                        )
                        continue
                    value = limit

                # Comma separated lists
                if field_name in ['past_tense_words', 'footer_keys']:
                    value = [item.strip() for item in value.split(',') if item.strip()]

                # Convert boolean values
                if field_name in ['strip_comments', 'strict', 'always_log']:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Merge with provided data
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
