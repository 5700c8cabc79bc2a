"""Rental service implementation."""
import logging
import threading
from datetime import date
from typing import Iterator

from car_rental.domain.exceptions import (
    CarNotAvailableException,
    InvalidCarIdException,
    NotRentedException,
)
from car_rental.domain.models import (
    ActiveRental,
    Customer,
    PriceQuote,
    Rental,
    ReturnSummary,
)
from car_rental.infrastructure.repositories import CarRepository, RentalRepository
from car_rental.services.customer_service import CustomerService
from car_rental.services.pricing_service import PricingService
from car_rental.utils import days_between

logger = logging.getLogger(__name__)


class RentalService:
    """Ledger of active rentals.

    Owns the ``car_id -> Rental`` mapping and drives the
    ``Available -> Rented -> Available`` transition of each car.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        rental_repository: RentalRepository,
        customer_service: CustomerService,
        pricing_service: PricingService,
    ):
        self.car_repository = car_repository
        self.rental_repository = rental_repository
        self.customer_service = customer_service
        self.pricing_service = pricing_service
        self._lock = threading.RLock()

    def preview_price(
        self,
        car_id: str,
        start_date: date,
        end_date: date,
        discount_percent: float = 0.0,
    ) -> PriceQuote:
        """Quote a rental of any known car, rented or not."""
        car = self.car_repository.get_by_id(car_id)
        if car is None:
            raise InvalidCarIdException(car_id)

        days = days_between(start_date, end_date)
        base_price = car.calculate_base_price(days)
        total = self.pricing_service.compute_total(base_price, discount_percent)

        return PriceQuote(
            car_id=car.car_id,
            days=days,
            base_price=base_price,
            discount_percent=discount_percent,
            tax_rate=self.pricing_service.tax_rate,
            total=total,
        )

    def rent(
        self,
        car_id: str,
        customer: Customer,
        start_date: date,
        end_date: date,
        discount_percent: float = 0.0,
    ) -> Rental:
        """Rent an available car to a customer."""
        logger.info(f"Renting car {car_id} to customer {customer.customer_id}")

        with self._lock:
            car = self.car_repository.get_by_id(car_id)
            if car is None:
                raise InvalidCarIdException(car_id)

            if not car.is_available:
                raise CarNotAvailableException(car_id)

            rental = Rental(
                car=car,
                customer=customer,
                start_date=start_date,
                end_date=end_date,
                discount_percent=discount_percent,
            )
            self.car_repository.mark_rented(car_id)
            self.customer_service.register(customer)
            self.rental_repository.add(rental)

        logger.info(f"Car {car_id} rented for {rental.days} days")
        return rental

    def return_car(self, car_id: str) -> ReturnSummary:
        """Close the active rental of a car and price it.

        The total is recomputed with the pricing service's current tax rate.
        """
        logger.info(f"Returning car {car_id}")

        with self._lock:
            rental = self.rental_repository.get_by_car_id(car_id)
            if rental is None:
                raise NotRentedException(car_id)

            car = rental.car
            days = rental.days
            base_price = car.calculate_base_price(days)
            total = self.pricing_service.compute_total(
                base_price, rental.discount_percent
            )

            self.car_repository.mark_returned(car_id)
            self.rental_repository.remove(car_id)

        logger.info(f"Car {car_id} returned, total {total:.2f}")

        return ReturnSummary(
            customer_id=rental.customer.customer_id,
            customer_name=rental.customer.name,
            car_id=car.car_id,
            brand=car.brand,
            model=car.model,
            start_date=rental.start_date,
            end_date=rental.end_date,
            days=days,
            base_price=base_price,
            discount_percent=rental.discount_percent,
            tax_rate=self.pricing_service.tax_rate,
            total=total,
        )

    def list_active(self) -> Iterator[ActiveRental]:
        """Iterate over a snapshot of the active rentals."""
        with self._lock:
            rentals = self.rental_repository.list_active()

        for rental in rentals:
            yield ActiveRental(
                car=rental.car,
                customer=rental.customer,
                start_date=rental.start_date,
                end_date=rental.end_date,
                days=rental.days,
            )
