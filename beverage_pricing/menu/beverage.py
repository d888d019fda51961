from abc import ABC, abstractmethod

from beverage_pricing.menu.registry import BEVERAGES, registrar
from beverage_pricing.menu.size import Size


class Beverage(ABC):
    @property
    @abstractmethod
    def description(self) -> str:
        pass

    # Small unless a concrete beverage says otherwise
    @property
    def size(self) -> Size:
        return Size.SMALL

    @abstractmethod
    def cost(self) -> float:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description!r} {self.size}>"


class BaseBeverage(Beverage):
    def __init__(self, size: Size = Size.SMALL) -> None:
        if not isinstance(size, Size):
            raise TypeError(f"Expected a Size, got {type(size).__name__}.")
        self._size = size

    # Concrete beverages set these as plain class attributes.
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def base_price(self) -> float:
        pass

    @property
    def description(self) -> str:
        return self.name

    @property
    def size(self) -> Size:
        return self._size

    def cost(self) -> float:
        return self.base_price + self.size.surcharge()


register_beverage = registrar(BEVERAGES, BaseBeverage, "Beverage")


# Beverage Implementations
@register_beverage
class HouseBlend(BaseBeverage):
    name = "HouseBlend"
    base_price = 2.99


@register_beverage
class DarkRoast(BaseBeverage):
    name = "DarkRoast"
    base_price = 2.99


@register_beverage
class Tea(BaseBeverage):
    name = "Tea"
    base_price = 0.99
