"""Domain models for the car rental desk."""
from datetime import date
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from car_rental.utils import days_between, format_money

DEFAULT_CUSTOMER_ID_PREFIX = "CUS-"


def generate_customer_id(prefix: str = DEFAULT_CUSTOMER_ID_PREFIX) -> str:
    """Generate a customer id such as ``CUS-1a2b3c4d``."""
    return f"{prefix}{uuid4().hex[:8]}"


class Outcome(str, Enum):
    """Outcome of a rental desk operation."""

    QUOTED = "QUOTED"
    RENTED = "RENTED"
    RETURNED = "RETURNED"
    INVALID_CAR_ID = "INVALID_CAR_ID"
    CAR_NOT_AVAILABLE = "CAR_NOT_AVAILABLE"
    NOT_RENTED = "NOT_RENTED"


class Car(BaseModel):
    """Car domain model."""

    car_id: str
    brand: str
    model: str
    price_per_day: float = Field(ge=0)
    is_available: bool = True

    model_config = {"from_attributes": True}

    def calculate_base_price(self, days: int) -> float:
        """Price of ``days`` rental days before discount and tax."""
        return self.price_per_day * days

    def display(self, currency_symbol: str = "Rs.") -> str:
        status = "[Available]" if self.is_available else "[Rented]"
        price = format_money(self.price_per_day, currency_symbol)
        return f"{self.car_id} - {self.brand} {self.model} ({price}/day) {status}"

    def __str__(self) -> str:
        return self.display()


class Customer(BaseModel):
    """Customer domain model."""

    customer_id: str = Field(default_factory=generate_customer_id)
    name: str = Field(min_length=1)

    model_config = {"from_attributes": True}


class Rental(BaseModel):
    """Active rental of one car by one customer."""

    car: Car
    customer: Customer
    start_date: date
    end_date: date
    discount_percent: float = 0.0

    model_config = {"from_attributes": True}

    @property
    def days(self) -> int:
        """Rental length in days, never less than one."""
        return days_between(self.start_date, self.end_date)


class ActiveRental(BaseModel):
    """Read-only view of a ledger entry."""

    car: Car
    customer: Customer
    start_date: date
    end_date: date
    days: int


class PriceQuote(BaseModel):
    """Price breakdown for a prospective rental."""

    car_id: str
    days: int
    base_price: float
    discount_percent: float
    tax_rate: float
    total: float


class ReturnSummary(BaseModel):
    """Summary produced when a rented car comes back."""

    customer_id: str
    customer_name: str
    car_id: str
    brand: str
    model: str
    start_date: date
    end_date: date
    days: int
    base_price: float
    discount_percent: float
    tax_rate: float
    total: float


class OperationResult(BaseModel):
    """Base result returned by the rental system facade."""

    outcome: Outcome
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.QUOTED, Outcome.RENTED, Outcome.RETURNED)


class PreviewResult(OperationResult):
    """Result of a price preview."""

    quote: Optional[PriceQuote] = None


class RentResult(OperationResult):
    """Result of a rent request."""

    car_id: str
    customer: Optional[Customer] = None


class ReturnResult(OperationResult):
    """Result of a return request."""

    car_id: str
    summary: Optional[ReturnSummary] = None
