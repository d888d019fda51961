from collections.abc import Iterable

from beverage_pricing.menu.beverage import Beverage
import beverage_pricing.menu.condiments  # noqa: F401  registers condiments
from beverage_pricing.menu.registry import BEVERAGES, CONDIMENTS
from beverage_pricing.menu.size import Size


def make_beverage(name: str, size: Size = Size.SMALL) -> Beverage:
    if name not in BEVERAGES:
        raise ValueError(f"Unknown beverage {name}. Available: {sorted(BEVERAGES)}")
    return BEVERAGES[name](size)


def add_condiments(beverage: Beverage, names: Iterable[str]) -> Beverage:
    """Wrap ``beverage`` in each named condiment, first name innermost."""
    if isinstance(names, str):
        raise TypeError(f"Expected a sequence of condiment names, got the string {names!r}.")
    for name in names:
        if name not in CONDIMENTS:
            raise ValueError(f"Unknown condiment {name}. Available: {sorted(CONDIMENTS)}")
        beverage = CONDIMENTS[name](beverage)
    return beverage


def order(name: str, *condiments: str, size: Size = Size.SMALL) -> Beverage:
    return add_condiments(make_beverage(name, size), condiments)
