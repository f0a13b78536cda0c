"""Waystations solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Waystations solver."""

    sort_words_by_length: bool = True
    """Whether to place words shortest first (the input order is used otherwise). Default: True."""

    report_interval: int = 100_000
    """Interval (in number of grid states examined) at which to report search progress.

    Default: 100000.
    """

    candidate_warning_threshold: int = 50_000
    """Print a notice when the candidate set grows beyond this many grids. Default: 50000."""

    deduplicate_candidates: bool = False
    """Whether to drop exact duplicate grids from the candidate set after each word.

    Duplicates are harmless but cost memory.  Default: False.
    """

    show_word_views: bool = True
    """Whether to print the placement of each word separately at the end. Default: True."""

    log_dir: str = "logs"
    """Directory in which per-puzzle log files are written."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
