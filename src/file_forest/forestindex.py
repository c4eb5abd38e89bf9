from __future__ import annotations

import logging
from collections.abc import Iterable

from .forestmodel import File


class ForestIndex:
    """Lookup tables built from a single pass over a sequence of files."""

    logger = logging.getLogger(__name__)

    def __init__(self, files: Iterable[File]) -> None:
        """
        Index the given files by id and by parent.

        Args:
            files: The files to index. The sequence is copied and never mutated.
        """
        self._files = tuple(files)
        self._by_id: dict[int, File] = {}
        self._children: dict[int, list[int]] = {}
        self._roots: list[File] = []

        for file in self._files:
            self._by_id[file.id] = file

            parent_id = file.parent_id
            if parent_id is None:
                self._roots.append(file)
            else:
                self._children.setdefault(parent_id, []).append(file.id)

        self.logger.debug(
            "Indexed %s files (%s roots, %s parents)",
            len(self._files),
            len(self._roots),
            len(self._children),
        )

    def __len__(self) -> int:
        return len(self._files)

    @property
    def files(self) -> tuple[File, ...]:
        """Return the indexed files in input order."""
        return self._files

    @property
    def roots(self) -> list[File]:
        """Return the root files in input order."""
        return list(self._roots)

    @property
    def parent_ids(self) -> set[int]:
        """Return every id referenced as a parent."""
        return set(self._children)

    def get_file(self, file_id: int) -> File:
        """
        Return the file with the given id.

        Raises:
            KeyError
        """
        return self._by_id[file_id]

    def children(self, file_id: int) -> list[int]:
        """Return the ids of the direct children of the given file."""
        return list(self._children.get(file_id, []))

    def subtree_size(self, file_id: int) -> int:
        """
        Return the size of the file plus the sizes of all its descendants.

        Walks the subtree with a worklist, not recursion.

        Raises:
            KeyError: The file id is not in the index.
        """
        total = 0
        pending = [file_id]

        while pending:
            current = pending.pop()
            total += self._by_id[current].size
            pending.extend(self._children.get(current, []))

        return total
