import logging

import pandas as pd

from beverage_pricing.menu.beverage import BaseBeverage, Beverage
from beverage_pricing.menu.condiments import CondimentDecorator


columns = ["item", "kind", "amount"]

class Receipt:
    def __init__(self, precision: int = 2) -> None:
        if precision < 0:
            raise ValueError(f"Precision must be non-negative, got {precision}.")
        self.precision = precision

    def _lines(self, beverage: Beverage) -> list[list]:
        # Every amount is a difference of cost() calls, so the lines always add up to the total.
        condiments = []
        while isinstance(beverage, CondimentDecorator):
            amount = beverage.cost() - beverage.inner.cost()
            condiments.append([beverage.suffix, "condiment", amount])
            beverage = beverage.inner

        lines = []
        if isinstance(beverage, BaseBeverage):
            surcharge = beverage.size.surcharge()
            lines.append([beverage.name, "base", beverage.cost() - surcharge])
            lines.append([str(beverage.size), "size", surcharge])
        else:
            # Beverage with no declared base price
            lines.append([beverage.description, "base", beverage.cost()])
        lines.extend(reversed(condiments))
        return lines

    def breakdown(self, beverage: Beverage) -> pd.DataFrame:
        return pd.DataFrame(self._lines(beverage), columns=columns)

    def total(self, beverage: Beverage) -> float:
        return round(beverage.cost(), self.precision)

    def log_receipt(self, beverage: Beverage):
        df = self.breakdown(beverage)
        lines = [f"Receipt: {beverage.description}"]
        for item, kind, amount in df.values.tolist():
            lines.append(f"  - {kind:<9} {item:<10} {amount:>6.{self.precision}f}")
        lines.append(f"  = total{'':<16}{self.total(beverage):>6.{self.precision}f}")
        logging.info("\n" + "\n".join(lines))
