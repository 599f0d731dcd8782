from __future__ import annotations

"""
Flyweight Pattern: Game Map Trees.

Tree objects carry only intrinsic state (type and color). Positions are
extrinsic and supplied on every display call, so a map with many trees
needs one object per distinct type/color pair.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict

from structural_patterns.patterns.output import Emitter, console_emitter

logger = logging.getLogger(__name__)


class TreeFlyweight(ABC):
    """
    Shared tree representation placed at arbitrary map coordinates.
    """

    @abstractmethod
    def display(self, x: int, y: int) -> None:
        """Show the tree at the given position."""


class Tree(TreeFlyweight):
    """
    Concrete flyweight storing the intrinsic state of a tree kind.
    """

    def __init__(self, tree_type: str, color: str, emit: Emitter = console_emitter) -> None:
        self._tree_type = tree_type
        self._color = color
        self._emit = emit
        self._emit(f"Creating new Tree object: {tree_type}, {color}")

    @property
    def tree_type(self) -> str:
        return self._tree_type

    @property
    def color(self) -> str:
        return self._color

    def display(self, x: int, y: int) -> None:
        self._emit(
            f"Tree [Type: {self._tree_type}, Color: {self._color}] at position ({x}, {y})"
        )


class TreeFactory:
    """
    Creates tree flyweights on demand and hands out shared instances.
    """

    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._trees: Dict[str, Tree] = {}
        self._unique_count = 0
        self._emit = emit

    def get_tree(self, tree_type: str, color: str) -> TreeFlyweight:
        """
        Return the flyweight for a type/color pair, creating it on first use.

        Args:
            tree_type: Kind of tree (Oak, Pine, ...).
            color: Foliage color.

        Returns:
            TreeFlyweight: Shared instance for this intrinsic state.
        """
        key = f"{tree_type}_{color}"

        tree = self._trees.get(key)
        if tree is None:
            tree = Tree(tree_type, color, emit=self._emit)
            self._trees[key] = tree
            self._unique_count += 1
            logger.debug(f"Flyweight cache miss for '{key}' ({self._unique_count} cached).")
        else:
            self._emit(f"Reusing existing Tree object: {tree_type}, {color}")

        return tree

    def get_unique_tree_count(self) -> int:
        """Number of distinct flyweights created so far."""
        return self._unique_count
