from __future__ import annotations

"""
Decorator Pattern: Coffee Shop.

Condiments wrap a coffee and extend both its description and its cost,
so any combination can be built by stacking wrappers at runtime.
"""

from abc import ABC, abstractmethod


class CoffeeComponent(ABC):
    """Interface shared by plain coffee and every condiment wrapper."""

    @abstractmethod
    def get_description(self) -> str:
        """Human readable composition of the drink."""

    @abstractmethod
    def get_cost(self) -> int:
        """Total price in AMD."""


class Coffee(CoffeeComponent):
    def get_description(self) -> str:
        return "Coffee"

    def get_cost(self) -> int:
        return 200


class CoffeeDecorator(CoffeeComponent):
    """
    Base wrapper holding the decorated coffee.

    Subclasses add their own description suffix and surcharge.
    """

    def __init__(self, coffee: CoffeeComponent) -> None:
        self._coffee = coffee

    @property
    def wrapped(self) -> CoffeeComponent:
        return self._coffee


class MilkDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + " + Milk"

    def get_cost(self) -> int:
        return self._coffee.get_cost() + 50


class SugarDecorator(CoffeeDecorator):
    def get_description(self) -> str:
        return self._coffee.get_description() + " + Sugar"

    def get_cost(self) -> int:
        return self._coffee.get_cost() + 30
