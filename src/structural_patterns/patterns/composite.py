from __future__ import annotations

"""
Composite Pattern: File System Tree.

Files (leaves) and folders (composites) share one component interface so a
client can display a whole hierarchy through a single call on the root.
The variant set is closed: `File` and `Folder` are the only implementers.
"""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from structural_patterns.patterns.output import Emitter, console_emitter

logger = logging.getLogger(__name__)

# Indentation added per tree level
INDENT_UNIT: str = "  "

# Guards every folder's child list; reentrant so traversal may read snapshots
_TREE_LOCK = threading.RLock()


# -----------------------------------------------------------------------------
# COMPONENT INTERFACE
# -----------------------------------------------------------------------------

class FileSystemComponent(ABC):
    """
    Capability shared by every node of the file system tree.
    """

    @abstractmethod
    def get_name(self) -> str:
        """Return the node label."""

    def render(self, indentation: str = "") -> List[str]:
        """
        Produce the display lines of this node and all of its descendants.

        Args:
            indentation: Prefix applied to this node's own line.

        Returns:
            List[str]: Lines in pre-order, one per visited node.
        """
        return render_tree(self, indentation)

    def display(self, indentation: str = "", emit: Emitter = console_emitter) -> None:
        """
        Emit the pre-order rendering of this node line by line.

        Args:
            indentation: Prefix applied to this node's own line.
            emit: Destination for each rendered line.
        """
        for line in self.render(indentation):
            emit(line)


# -----------------------------------------------------------------------------
# LEAF
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class File(FileSystemComponent):
    """
    Terminal node of the tree. Immutable after construction.

    Attributes:
        name: File label shown in the rendering.
    """
    name: str

    def get_name(self) -> str:
        return self.name


# -----------------------------------------------------------------------------
# COMPOSITE
# -----------------------------------------------------------------------------

class Folder(FileSystemComponent):
    """
    Node owning an ordered sequence of child components.

    Insertion order drives display order. Children are compared by identity,
    so two distinct files with the same name are separate entries. All
    folders share one tree lock: mutations and whole traversals are
    serialized against each other.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._children: List[FileSystemComponent] = []

    def get_name(self) -> str:
        return self._name

    @property
    def children(self) -> Tuple[FileSystemComponent, ...]:
        """Snapshot of the current child sequence."""
        with _TREE_LOCK:
            return tuple(self._children)

    def add(self, component: FileSystemComponent) -> None:
        """
        Append a component to the end of the child sequence.

        Raises:
            ValueError: If the component is this folder or already contains it.
        """
        with _TREE_LOCK:
            if _contains(component, self):
                raise ValueError(
                    f"Cannot add '{component.get_name()}' to '{self._name}': it would create a cycle."
                )
            self._children.append(component)
        logger.debug(f"Folder '{self._name}': added '{component.get_name()}'.")

    def remove(self, component: FileSystemComponent) -> None:
        """
        Remove the first child that is the given instance.

        Removing a component that is not a child leaves the folder untouched.
        """
        with _TREE_LOCK:
            for i, child in enumerate(self._children):
                if child is component:
                    del self._children[i]
                    break
            else:
                logger.debug(
                    f"Folder '{self._name}': '{component.get_name()}' not present, nothing removed."
                )
                return
        logger.debug(f"Folder '{self._name}': removed '{component.get_name()}'.")


def _contains(node: FileSystemComponent, target: Folder) -> bool:
    """Whether `target` is `node` itself or reachable below it. Caller holds the tree lock."""
    pending: List[FileSystemComponent] = [node]
    seen = set()
    while pending:
        current = pending.pop()
        if current is target:
            return True
        if isinstance(current, Folder) and id(current) not in seen:
            seen.add(id(current))
            pending.extend(current._children)
    return False


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def render_tree(root: FileSystemComponent, indentation: str = "") -> List[str]:
    """
    Walk the tree depth-first in pre-order and format one line per node.

    Uses an explicit stack, so tree depth is not bounded by the interpreter
    recursion limit. The tree lock is held for the whole walk, so a
    concurrent add or remove lands either before or after the rendering.

    Args:
        root: Node where the walk starts.
        indentation: Prefix for the root line; grows by INDENT_UNIT per level.

    Returns:
        List[str]: Rendered lines.
    """
    lines: List[str] = []
    stack: List[Tuple[FileSystemComponent, str]] = [(root, indentation)]

    with _TREE_LOCK:
        while stack:
            node, prefix = stack.pop()

            # Case A: Folder header, then children in insertion order
            if isinstance(node, Folder):
                lines.append(f"{prefix}+ Folder: {node.get_name()}")
                child_prefix = prefix + INDENT_UNIT
                for child in reversed(node._children):
                    stack.append((child, child_prefix))
                continue

            # Case B: File (Leaf)
            if isinstance(node, File):
                lines.append(f"{prefix}- File: {node.get_name()}")
                continue

            raise TypeError(f"Unsupported tree node: {type(node).__name__}")

    return lines
