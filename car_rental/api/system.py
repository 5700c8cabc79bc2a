"""Rental system facade used by the interactive menu."""
import logging
from datetime import date
from typing import Iterator, List, Optional, Union

from prometheus_client import Counter, Histogram

from car_rental.domain.exceptions import (
    CarNotAvailableException,
    InvalidCarIdException,
    NotRentedException,
)
from car_rental.domain.models import (
    ActiveRental,
    Car,
    Customer,
    Outcome,
    PreviewResult,
    RentResult,
    ReturnResult,
)
from car_rental.infrastructure.repositories import CarRepository
from car_rental.services.customer_service import CustomerService
from car_rental.services.rental_service import RentalService

logger = logging.getLogger(__name__)

# Prometheus metrics
rental_operation_counter = Counter(
    "car_rental_operations_total",
    "Total number of rental desk operations",
    ["operation", "status"],
)
rent_duration = Histogram(
    "car_rental_rent_duration_seconds", "Time spent renting cars"
)


class CarRentalSystem:
    """Entry point to the fleet, customer registry and rental ledger.

    Expected rejections (unknown car, car already rented, car not rented)
    come back as result values carrying an :class:`Outcome`, never as
    exceptions.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        customer_service: CustomerService,
        rental_service: RentalService,
    ):
        self.car_repository = car_repository
        self.customer_service = customer_service
        self.rental_service = rental_service

    @property
    def tax_rate(self) -> float:
        return self.rental_service.pricing_service.tax_rate

    def add_car(
        self, car_id: str, brand: str, model: str, price_per_day: float
    ) -> Car:
        """Add a car to the fleet, replacing any car with the same ID."""
        car = Car(car_id=car_id, brand=brand, model=model, price_per_day=price_per_day)
        self.car_repository.add(car)
        logger.info(f"Added car {car_id} ({brand} {model})")
        return car

    def list_all_cars(self) -> List[Car]:
        return self.car_repository.list_all()

    def list_available_cars(self) -> List[Car]:
        return self.car_repository.list_available()

    def get_car(self, car_id: str) -> Optional[Car]:
        return self.car_repository.get_by_id(car_id)

    def create_customer(self, name: str) -> Customer:
        """Create an unregistered customer for a prospective rental."""
        return self.customer_service.create(name)

    def preview_price(
        self,
        car_id: str,
        start_date: date,
        end_date: date,
        discount_percent: float = 0.0,
    ) -> PreviewResult:
        try:
            quote = self.rental_service.preview_price(
                car_id, start_date, end_date, discount_percent
            )
            rental_operation_counter.labels(operation="preview", status="quoted").inc()
            return PreviewResult(
                outcome=Outcome.QUOTED,
                message=f"Total for {quote.days} days: {quote.total:.2f}",
                quote=quote,
            )
        except InvalidCarIdException as e:
            logger.warning(f"Preview rejected: {e.message}")
            rental_operation_counter.labels(operation="preview", status="invalid_car_id").inc()
            return PreviewResult(outcome=Outcome.INVALID_CAR_ID, message=e.message)

    def rent(
        self,
        car_id: str,
        customer: Union[Customer, str],
        start_date: date,
        end_date: date,
        discount_percent: float = 0.0,
    ) -> RentResult:
        """Rent a car to a customer or to a new customer with the given name."""
        if isinstance(customer, str):
            customer = self.create_customer(customer)

        try:
            with rent_duration.time():
                self.rental_service.rent(
                    car_id, customer, start_date, end_date, discount_percent
                )
            rental_operation_counter.labels(operation="rent", status="rented").inc()
            return RentResult(
                outcome=Outcome.RENTED,
                message=f"Car rented successfully. Rental ID (car): {car_id}",
                car_id=car_id,
                customer=customer,
            )
        except InvalidCarIdException as e:
            logger.warning(f"Rent rejected: {e.message}")
            rental_operation_counter.labels(operation="rent", status="invalid_car_id").inc()
            return RentResult(
                outcome=Outcome.INVALID_CAR_ID, message=e.message, car_id=car_id
            )
        except CarNotAvailableException as e:
            logger.warning(f"Rent rejected: {e.message}")
            rental_operation_counter.labels(operation="rent", status="not_available").inc()
            return RentResult(
                outcome=Outcome.CAR_NOT_AVAILABLE, message=e.message, car_id=car_id
            )

    def return_car(self, car_id: str) -> ReturnResult:
        try:
            summary = self.rental_service.return_car(car_id)
            rental_operation_counter.labels(operation="return", status="returned").inc()
            return ReturnResult(
                outcome=Outcome.RETURNED,
                message="Car returned successfully",
                car_id=car_id,
                summary=summary,
            )
        except NotRentedException as e:
            logger.warning(f"Return rejected: {e.message}")
            rental_operation_counter.labels(operation="return", status="not_rented").inc()
            return ReturnResult(
                outcome=Outcome.NOT_RENTED, message=e.message, car_id=car_id
            )

    def list_active_rentals(self) -> Iterator[ActiveRental]:
        return self.rental_service.list_active()
