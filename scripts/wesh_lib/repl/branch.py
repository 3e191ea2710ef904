"""
Branch tree for the WeSh REPL.

Branches are the navigation targets of the shell (operational mode,
configuration mode, ...). All branches of a shell live in one BranchTree
arena, created at startup in parent-before-child order. A branch names its
parent by arena index instead of holding it, so the tree has no reference
cycles and a child never keeps its parent alive.
"""

import sys
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .outcome import MoveToBranch


class BranchLookupError(Exception):
    """Raised when a branch's parent is not a live slot of the tree."""
    pass


@dataclass(frozen=True)
class Branch:
    """One point in the navigation hierarchy."""
    index: int
    display: str  # Prompt text while positioned here
    command_str: str  # Exact input that moves the user here
    brief: str = ""
    parent: Optional[int] = None  # Arena index of the parent, None at the root

    def resolve(self) -> MoveToBranch:
        return MoveToBranch(self)

    @property
    def is_root(self) -> bool:
        return self.parent is None


class BranchTree:
    """Arena owning every branch of a shell."""

    def __init__(self):
        self._slots: List[Optional[Branch]] = []

    def add(
        self,
        parent: Optional[Branch],
        display: str,
        command_str: str,
        brief: str = "",
    ) -> Branch:
        """
        Create a branch below parent (or a root when parent is None).

        Raises:
            BranchLookupError: parent is not a live branch of this tree
        """
        parent_index = None
        if parent is not None:
            if self.get(parent.index) is not parent:
                raise BranchLookupError(
                    f"Parent '{parent.command_str}' is not a live branch of this tree"
                )
            parent_index = parent.index

        branch = Branch(
            index=len(self._slots),
            display=display,
            command_str=command_str,
            brief=brief,
            parent=parent_index,
        )
        self._slots.append(branch)
        return branch

    def get(self, index: int) -> Optional[Branch]:
        """Return the branch in slot index, or None if it was discarded."""
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def parent_of(self, branch: Branch) -> Optional[Branch]:
        """
        Resolve a branch's parent.

        Returns:
            The parent branch, or None when branch is a root

        Raises:
            BranchLookupError: the parent slot no longer holds a branch
        """
        if branch.parent is None:
            return None
        parent = self.get(branch.parent)
        if parent is None:
            raise BranchLookupError(
                f"Parent of '{branch.command_str}' (slot {branch.parent}) has been discarded"
            )
        return parent

    def discard(self, branch: Branch) -> None:
        """Empty a branch's slot. Children keep their (now dangling) index."""
        if self.get(branch.index) is branch:
            self._slots[branch.index] = None

    def __iter__(self) -> Iterator[Branch]:
        return (b for b in self._slots if b is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)


def prompt_text(branch: Branch) -> str:
    """Generate the prompt string for a branch."""
    return f"{branch.display} "


def print_prompt(branch: Branch, stream=None) -> None:
    """Write the prompt without a newline so input stays on the same line."""
    out = stream if stream is not None else sys.stdout
    out.write(prompt_text(branch))
    out.flush()
