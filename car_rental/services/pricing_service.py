"""Pricing service."""
from car_rental.domain.exceptions import InvalidConfigurationException


class PricingService:
    """Applies discount and tax to a base price."""

    def __init__(self, tax_rate: float = 0.18):
        if tax_rate < 0:
            raise InvalidConfigurationException(
                f"Tax rate must be non-negative, got {tax_rate}"
            )
        self._tax_rate = tax_rate

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    def compute_total(self, base_price: float, discount_percent: float) -> float:
        """Total price after discount and tax.

        A discount above 100% clamps the discounted price to zero instead of
        producing a negative total.
        """
        after_discount = base_price * (1 - discount_percent / 100.0)
        if after_discount < 0:
            after_discount = 0.0
        tax = after_discount * self._tax_rate
        return after_discount + tax
