"""In-memory repository implementations."""
from typing import Dict, List, Optional

from car_rental.domain.models import Car, Customer, Rental
from car_rental.infrastructure.repositories import (
    CarRepository,
    CustomerRepository,
    RentalRepository,
)


class InMemoryCarRepository(CarRepository):
    """In-memory fleet inventory, insertion ordered."""

    def __init__(self) -> None:
        self._cars: Dict[str, Car] = {}

    def add(self, car: Car) -> Car:
        """Add a car, replacing any car with the same ID."""
        self._cars[car.car_id] = car
        return car

    def get_by_id(self, car_id: str) -> Optional[Car]:
        """Get car by ID."""
        return self._cars.get(car_id)

    def list_all(self) -> List[Car]:
        """List every car in the fleet."""
        return list(self._cars.values())

    def list_available(self) -> List[Car]:
        """List cars that are not out on rent."""
        return [car for car in self._cars.values() if car.is_available]

    def mark_rented(self, car_id: str) -> None:
        """Mark car as rented."""
        car = self._cars.get(car_id)
        if car:
            car.is_available = False

    def mark_returned(self, car_id: str) -> None:
        """Mark car as available again."""
        car = self._cars.get(car_id)
        if car:
            car.is_available = True

    def clear(self) -> None:
        """Clear all data (for testing)."""
        self._cars.clear()


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory customer registry, insertion ordered."""

    def __init__(self) -> None:
        self._customers: Dict[str, Customer] = {}

    def register(self, customer: Customer) -> Customer:
        """Register a customer, replacing any customer with the same ID."""
        self._customers[customer.customer_id] = customer
        return customer

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID."""
        return self._customers.get(customer_id)

    def list_all(self) -> List[Customer]:
        """List every registered customer."""
        return list(self._customers.values())

    def clear(self) -> None:
        """Clear all data (for testing)."""
        self._customers.clear()


class InMemoryRentalRepository(RentalRepository):
    """In-memory ledger of active rentals."""

    def __init__(self) -> None:
        self._rentals: Dict[str, Rental] = {}

    def add(self, rental: Rental) -> Rental:
        """Store an active rental."""
        self._rentals[rental.car.car_id] = rental
        return rental

    def get_by_car_id(self, car_id: str) -> Optional[Rental]:
        """Get the active rental of a car."""
        return self._rentals.get(car_id)

    def remove(self, car_id: str) -> Optional[Rental]:
        """Drop the active rental of a car."""
        return self._rentals.pop(car_id, None)

    def list_active(self) -> List[Rental]:
        """List all active rentals."""
        return list(self._rentals.values())

    def clear(self) -> None:
        """Clear all data (for testing)."""
        self._rentals.clear()
