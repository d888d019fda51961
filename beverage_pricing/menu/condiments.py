from abc import abstractmethod

from beverage_pricing.menu.beverage import Beverage
from beverage_pricing.menu.registry import CONDIMENTS, registrar
from beverage_pricing.menu.size import Size


class CondimentDecorator(Beverage):
    def __init__(self, beverage: Beverage) -> None:
        if not isinstance(beverage, Beverage):
            raise TypeError(f"Cannot add {self.suffix} to {type(beverage).__name__}.")
        self._beverage = beverage

    # Concrete condiments set these as plain class attributes.
    @property
    @abstractmethod
    def suffix(self) -> str:
        pass

    @property
    @abstractmethod
    def surcharge(self) -> float:
        pass

    @property
    def inner(self) -> Beverage:
        return self._beverage

    @property
    def description(self) -> str:
        return f"{self._beverage.description} with {self.suffix}"

    # The size belongs to the drink underneath, not to the condiment.
    @property
    def size(self) -> Size:
        return self._beverage.size

    def cost(self) -> float:
        return self.surcharge + self._beverage.cost()


register_condiment = registrar(CONDIMENTS, CondimentDecorator, "Condiment")


# Condiments
@register_condiment
class Sugar(CondimentDecorator):
    suffix = "Sugar"
    surcharge = 0.75


@register_condiment
class Cream(CondimentDecorator):
    suffix = "Cream"
    surcharge = 1.0


@register_condiment
class Milk(CondimentDecorator):
    suffix = "Milk"
    surcharge = 0.5


@register_condiment
class WhipCream(CondimentDecorator):
    suffix = "WhipCream"
    surcharge = 0.25
