from __future__ import annotations

"""
Adapter Pattern: Restaurant Menus.

Each restaurant exposes its menu through an incompatible API. Adapters
translate those formats into a unified list of MenuItem so the online app
can display every menu the same way.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List

from structural_patterns.patterns.output import Emitter, console_emitter

logger = logging.getLogger(__name__)

# Conversion rate applied to Japanese prices
YEN_TO_AMD: float = 3.2


# -----------------------------------------------------------------------------
# TARGET INTERFACE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuItem:
    """
    Unified menu entry.

    Attributes:
        name: Dish name.
        price: Price in AMD.
    """
    name: str
    price: int


class Menu(ABC):
    """Menu interface understood by the online app."""

    @abstractmethod
    def get_items(self) -> List[MenuItem]:
        """Return every dish of the menu in unified form."""


# -----------------------------------------------------------------------------
# VENDOR APIS
# -----------------------------------------------------------------------------

class ItalianRestaurantAPI:
    """Returns the menu as a single 'Name:Price, Name:Price' string."""

    def get_italian_menu(self) -> str:
        return "Pizza:3500, Pasta:3000, Risotto:3800"


class JapaneseRestaurantAPI:
    """Returns dishes with a title and a price in yen."""

    def get_japanese_menu(self) -> List[Dict[str, object]]:
        return [
            {"title": "Sushi", "yen_price": 1200},
            {"title": "Ramen", "yen_price": 900},
            {"title": "Tempura", "yen_price": 1500},
        ]


class ArmenianRestaurantAPI:
    """Returns a dish-name to AMD price mapping."""

    def get_armenian_menu(self) -> Dict[str, int]:
        return {
            "Khorovats": 4500,
            "Dolma": 3800,
            "Lavash": 1000,
        }


# -----------------------------------------------------------------------------
# ADAPTERS
# -----------------------------------------------------------------------------

class ItalianMenuAdapter(Menu):
    def __init__(self, api: ItalianRestaurantAPI) -> None:
        self._api = api

    def get_items(self) -> List[MenuItem]:
        """
        Parse the comma separated 'Name:Price' string.

        Raises:
            ValueError: If an entry lacks a name or a numeric price.
        """
        raw_menu = self._api.get_italian_menu()
        items: List[MenuItem] = []

        for entry in raw_menu.split(","):
            name, sep, price = entry.partition(":")
            name = name.strip()
            if not sep or not name:
                raise ValueError(f"Malformed Italian menu entry: '{entry.strip()}'.")
            try:
                items.append(MenuItem(name=name, price=int(price.strip())))
            except ValueError:
                raise ValueError(f"Invalid price in Italian menu entry: '{entry.strip()}'.") from None

        return items


class JapaneseMenuAdapter(Menu):
    def __init__(self, api: JapaneseRestaurantAPI) -> None:
        self._api = api

    def get_items(self) -> List[MenuItem]:
        return [
            MenuItem(name=str(dish["title"]), price=_round_half_up(float(dish["yen_price"]) * YEN_TO_AMD))
            for dish in self._api.get_japanese_menu()
        ]


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive prices."""
    return int(math.floor(value + 0.5))


class ArmenianMenuAdapter(Menu):
    def __init__(self, api: ArmenianRestaurantAPI) -> None:
        self._api = api

    def get_items(self) -> List[MenuItem]:
        menu = self._api.get_armenian_menu()
        return [MenuItem(name=dish, price=price) for dish, price in menu.items()]


# -----------------------------------------------------------------------------
# CLIENT
# -----------------------------------------------------------------------------

class OnlineMenuApp:
    """
    Client that only knows the unified Menu interface.
    """

    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._menus: List[Menu] = []
        self._emit = emit

    def add_menu(self, menu: Menu) -> None:
        self._menus.append(menu)
        logger.debug(f"Registered menu source {type(menu).__name__}.")

    def show_all_menus(self) -> None:
        self._emit("- Online Restaurant Menu -")
        for menu in self._menus:
            for item in menu.get_items():
                self._emit(f"{item.name} - {item.price} AMD")
