"""Pytest configuration and fixtures."""
from datetime import date

import pytest

from car_rental.api.dependencies import build_rental_system
from car_rental.api.system import CarRentalSystem
from car_rental.config import Settings
from car_rental.domain.models import Car, Customer
from car_rental.infrastructure.repositories_inmemory import (
    InMemoryCarRepository,
    InMemoryCustomerRepository,
    InMemoryRentalRepository,
)
from car_rental.services.customer_service import CustomerService
from car_rental.services.pricing_service import PricingService
from car_rental.services.rental_service import RentalService


@pytest.fixture
def start_date() -> date:
    """Rental start date."""
    return date(2024, 1, 1)


@pytest.fixture
def end_date() -> date:
    """Rental end date, three days after start."""
    return date(2024, 1, 4)


@pytest.fixture
def sample_car() -> Car:
    """Sample car."""
    return Car(car_id="C001", brand="Toyota", model="Camry", price_per_day=3000.0)


@pytest.fixture
def second_car() -> Car:
    """Second sample car."""
    return Car(car_id="C002", brand="Honda", model="Accord", price_per_day=3200.0)


@pytest.fixture
def sample_customer() -> Customer:
    """Sample customer."""
    return Customer(customer_id="CUS-0000abcd", name="Alice")


@pytest.fixture
def in_memory_car_repository(
    sample_car: Car, second_car: Car
) -> InMemoryCarRepository:
    """In-memory fleet with two cars."""
    repo = InMemoryCarRepository()
    repo.add(sample_car)
    repo.add(second_car)
    yield repo
    repo.clear()


@pytest.fixture
def in_memory_customer_repository() -> InMemoryCustomerRepository:
    """In-memory customer registry."""
    repo = InMemoryCustomerRepository()
    yield repo
    repo.clear()


@pytest.fixture
def in_memory_rental_repository() -> InMemoryRentalRepository:
    """In-memory rental ledger."""
    repo = InMemoryRentalRepository()
    yield repo
    repo.clear()


@pytest.fixture
def pricing_service() -> PricingService:
    """Pricing service with 18% tax."""
    return PricingService(tax_rate=0.18)


@pytest.fixture
def customer_service(
    in_memory_customer_repository: InMemoryCustomerRepository,
) -> CustomerService:
    """Customer service fixture."""
    return CustomerService(customer_repository=in_memory_customer_repository)


@pytest.fixture
def rental_service(
    in_memory_car_repository: InMemoryCarRepository,
    in_memory_rental_repository: InMemoryRentalRepository,
    customer_service: CustomerService,
    pricing_service: PricingService,
) -> RentalService:
    """Rental service over the two-car fleet."""
    return RentalService(
        car_repository=in_memory_car_repository,
        rental_repository=in_memory_rental_repository,
        customer_service=customer_service,
        pricing_service=pricing_service,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings without the demo fleet."""
    return Settings(tax_rate=0.18, seed_fleet=False, currency_symbol="Rs.")


@pytest.fixture
def rental_system(test_settings: Settings) -> CarRentalSystem:
    """Rental system with C001 and C002."""
    system = build_rental_system(test_settings)
    system.add_car("C001", "Toyota", "Camry", 3000.0)
    system.add_car("C002", "Honda", "Accord", 3200.0)
    return system
