from enum import Enum


class Size(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    def surcharge(self) -> float:
        return _SURCHARGES[self]

    def __str__(self) -> str:
        return self.value


_SURCHARGES: dict[Size, float] = {
    Size.SMALL: 0.99,
    Size.MEDIUM: 1.99,
    Size.LARGE: 2.99,
}
