from __future__ import annotations

import dataclasses
from collections.abc import Sequence

ROOT_PARENT = -1


@dataclasses.dataclass(frozen=True)
class File:
    """
    A file record. `parent` is another file's id or ROOT_PARENT.

    `categories` accepts any sequence of labels and is stored as a tuple.
    """

    id: int
    name: str
    categories: Sequence[str]
    parent: int
    size: int

    def __post_init__(self) -> None:
        # Accept any iterable of labels, keep construction order
        object.__setattr__(self, "categories", tuple(self.categories))

    def __str__(self) -> str:
        parent = "root" if self.is_root else self.parent
        return f"{self.name} (id={self.id}, parent={parent}, {self.size} bytes)"

    @property
    def parent_id(self) -> int | None:
        """Return the parent id, or None if this file is a root."""
        return None if self.parent == ROOT_PARENT else self.parent

    @property
    def is_root(self) -> bool:
        """True if the file has no parent."""
        return self.parent == ROOT_PARENT
