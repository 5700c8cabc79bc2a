"""Domain layer."""
from car_rental.domain.exceptions import (
    CarNotAvailableException,
    DomainException,
    InvalidCarIdException,
    InvalidConfigurationException,
    NotRentedException,
)
from car_rental.domain.models import (
    ActiveRental,
    Car,
    Customer,
    OperationResult,
    Outcome,
    PreviewResult,
    PriceQuote,
    Rental,
    RentResult,
    ReturnResult,
    ReturnSummary,
)

__all__ = [
    # Models
    "Car",
    "Customer",
    "Rental",
    "ActiveRental",
    "PriceQuote",
    "ReturnSummary",
    "Outcome",
    "OperationResult",
    "PreviewResult",
    "RentResult",
    "ReturnResult",
    # Exceptions
    "DomainException",
    "InvalidCarIdException",
    "CarNotAvailableException",
    "NotRentedException",
    "InvalidConfigurationException",
]
