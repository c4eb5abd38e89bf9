from __future__ import annotations

import logging
from configparser import ConfigParser

NO_ROOTS_POLICIES = ("raise", "zero")


class ForestConfig:
    """Configuration for the file forest queries."""

    logger = logging.getLogger("file_forest.ForestConfig")

    def __init__(self, filepath: str | None = None) -> None:
        """
        Load the configuration from the given file.

        Args:
            filepath: Path to an INI file. When None, every value uses its
                default.
        """
        self._config = ConfigParser()

        if filepath is None:
            self.logger.debug("Using default config")
            return

        success = self._config.read(filepath)

        if not success:
            raise ValueError(f"Could not read config file at {filepath}")

        self.logger.debug("Loaded config from %s", filepath)

    @property
    def config_name(self) -> str:
        """Return the name of the config."""
        return self._config.get("system", "config_name", fallback="file_forest")

    @property
    def category_limit(self) -> int:
        """Return the default number of categories to rank. Will raise if negative."""
        limit = self._config.getint("queries", "category_limit", fallback=3)
        if limit < 0:
            raise ValueError(f"category_limit must be non-negative, got {limit}")
        return limit

    @property
    def no_roots(self) -> str:
        """Return the policy for input without roots. Will raise if unknown."""
        policy = self._config.get("queries", "no_roots", fallback="raise")
        policy = policy.strip().lower()
        if policy not in NO_ROOTS_POLICIES:
            raise ValueError(f"Unknown no_roots policy: {policy}")
        return policy

