"""Abstract repository interfaces."""
from abc import ABC, abstractmethod
from typing import List, Optional

from car_rental.domain.models import Car, Customer, Rental


class CarRepository(ABC):
    """Abstract fleet inventory interface."""

    @abstractmethod
    def add(self, car: Car) -> Car:
        """Add a car, replacing any car with the same ID."""
        pass

    @abstractmethod
    def get_by_id(self, car_id: str) -> Optional[Car]:
        """Get car by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Car]:
        """List every car in the fleet."""
        pass

    @abstractmethod
    def list_available(self) -> List[Car]:
        """List cars that are not out on rent."""
        pass

    @abstractmethod
    def mark_rented(self, car_id: str) -> None:
        """Mark car as rented."""
        pass

    @abstractmethod
    def mark_returned(self, car_id: str) -> None:
        """Mark car as available again."""
        pass


class CustomerRepository(ABC):
    """Abstract customer registry interface."""

    @abstractmethod
    def register(self, customer: Customer) -> Customer:
        """Register a customer, replacing any customer with the same ID."""
        pass

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def list_all(self) -> List[Customer]:
        """List every registered customer."""
        pass


class RentalRepository(ABC):
    """Abstract ledger of active rentals keyed by car ID."""

    @abstractmethod
    def add(self, rental: Rental) -> Rental:
        """Store an active rental."""
        pass

    @abstractmethod
    def get_by_car_id(self, car_id: str) -> Optional[Rental]:
        """Get the active rental of a car."""
        pass

    @abstractmethod
    def remove(self, car_id: str) -> Optional[Rental]:
        """Drop the active rental of a car."""
        pass

    @abstractmethod
    def list_active(self) -> List[Rental]:
        """List all active rentals."""
        pass
