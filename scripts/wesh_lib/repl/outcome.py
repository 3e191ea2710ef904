"""
Outcomes of resolving one input line against the registry.

An outcome is exactly one of MoveToBranch, InvokeAction or Unresolved.
Code handling an Outcome must cover all three.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .action import Action
    from .branch import Branch


@dataclass(frozen=True)
class MoveToBranch:
    """Move the cursor to a branch."""
    branch: "Branch"


@dataclass(frozen=True)
class InvokeAction:
    """Run an action's handler against the shell state."""
    action: "Action"


@dataclass(frozen=True)
class Unresolved:
    """No directive matched. Carries the input exactly as typed."""
    line: str


Outcome = Union[MoveToBranch, InvokeAction, Unresolved]
