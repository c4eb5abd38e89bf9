from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Iterable

from .forestconfig import ForestConfig
from .forestindex import ForestIndex
from .forestmodel import File


class NoRootsError(ValueError):
    """Raised when a non-empty set of files contains no root."""


class FileForest:
    """Answer leaf, category and subtree-size queries over a set of files."""

    logger = logging.getLogger(__name__)

    def __init__(
        self,
        files: Iterable[File],
        config: ForestConfig | None = None,
    ) -> None:
        """
        Initialize a new FileForest.

        Args:
            files: The files to query. They are read once and never mutated.
            config: The configuration to use. Defaults to ForestConfig().
        """
        self._config = config or ForestConfig()
        self._index = ForestIndex(files)

    @classmethod
    def from_config(cls, files: Iterable[File], config: ForestConfig) -> FileForest:
        """Build a FileForest using the given configuration."""
        return cls(files, config)

    def leaf_files(self) -> list[str]:
        """Return the names of files no other file references as parent."""
        tic = time.perf_counter()

        parent_ids = self._index.parent_ids
        names = [file.name for file in self._index.files if file.id not in parent_ids]

        toc = time.perf_counter()
        self.logger.debug("Found %s leaf files in %s seconds", len(names), toc - tic)
        return names

    def category_counts(self) -> dict[str, int]:
        """Return how often each category label occurs, duplicates included."""
        counts: Counter[str] = Counter()
        for file in self._index.files:
            counts.update(file.categories)
        return dict(counts)

    def k_largest_categories(self, k: int | None = None) -> list[str]:
        """
        Return up to k category labels ordered by count, then label.

        Args:
            k: Number of labels to return. Defaults to config.category_limit.

        Raises:
            ValueError: k is negative.
        """
        if k is None:
            k = self._config.category_limit

        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        tic = time.perf_counter()

        counts = self.category_counts()
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        labels = [label for label, _ in ranked[:k]]

        toc = time.perf_counter()
        self.logger.debug(
            "Ranked %s of %s categories in %s seconds",
            len(labels),
            len(counts),
            toc - tic,
        )
        return labels

    def subtree_size(self, file_id: int) -> int:
        """
        Return the total size of the subtree rooted at the given file.

        Raises:
            KeyError: No file has the given id.
        """
        return self._index.subtree_size(file_id)

    def largest_file_size(self) -> int:
        """
        Return the largest total size of any subtree rooted at a root file.

        Returns 0 for an empty set of files.

        Raises:
            NoRootsError: Files were given but none is a root, and the
                no_roots policy is "raise".
        """
        if not len(self._index):
            return 0

        roots = self._index.roots
        if not roots:
            if self._config.no_roots == "zero":
                self.logger.warning("No root files in %s files", len(self._index))
                return 0
            raise NoRootsError(f"No root files in {len(self._index)} files")

        tic = time.perf_counter()

        largest = max(self._index.subtree_size(root.id) for root in roots)

        toc = time.perf_counter()
        self.logger.debug(
            "Largest of %s subtrees is %s bytes (%s seconds)",
            len(roots),
            largest,
            toc - tic,
        )
        return largest


def leaf_files(files: Iterable[File]) -> list[str]:
    """Return the names of files that are not the parent of any file."""
    return FileForest(files).leaf_files()


def k_largest_categories(files: Iterable[File], k: int) -> list[str]:
    """Return the k most frequent category labels, ties broken by label."""
    return FileForest(files).k_largest_categories(k)


def largest_file_size(files: Iterable[File]) -> int:
    """Return the largest total size of any root file's subtree."""
    return FileForest(files).largest_file_size()
