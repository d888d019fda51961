import logging

from beverage_pricing.menu.beverage import Beverage, DarkRoast, HouseBlend, Tea
from beverage_pricing.menu.condiments import Milk, Sugar
from beverage_pricing.menu.receipt import Receipt


logging.basicConfig(level=logging.INFO, format="%(message)s")

receipt = Receipt()

# HouseBlend with Milk and Sugar
house_blend: Beverage = HouseBlend()
house_blend = Milk(house_blend)
house_blend = Sugar(house_blend)

# Tea with Sugar
tea: Beverage = Tea()
tea = Sugar(tea)

# DarkRoast with double Milk
dark_roast: Beverage = DarkRoast()
dark_roast = Milk(dark_roast)
dark_roast = Milk(dark_roast)

for beverage in (house_blend, tea, dark_roast):
    print(beverage.description, ":", f"{beverage.cost():.2f}")
    receipt.log_receipt(beverage)
