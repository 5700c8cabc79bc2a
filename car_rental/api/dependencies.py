"""Wiring of repositories and services."""
from typing import Optional

from car_rental.api.system import CarRentalSystem
from car_rental.config import Settings, settings as default_settings
from car_rental.infrastructure.repositories_inmemory import (
    InMemoryCarRepository,
    InMemoryCustomerRepository,
    InMemoryRentalRepository,
)
from car_rental.services.customer_service import CustomerService
from car_rental.services.pricing_service import PricingService
from car_rental.services.rental_service import RentalService


def get_pricing_service(settings: Settings) -> PricingService:
    """Get PricingService for the configured tax rate."""
    return PricingService(tax_rate=settings.tax_rate)


def get_customer_service(
    settings: Settings, repository: InMemoryCustomerRepository
) -> CustomerService:
    """Get CustomerService with dependencies."""
    return CustomerService(
        customer_repository=repository,
        id_prefix=settings.customer_id_prefix,
    )


def build_rental_system(settings: Optional[Settings] = None) -> CarRentalSystem:
    """Build a rental system that owns fresh in-memory state."""
    settings = settings or default_settings

    car_repository = InMemoryCarRepository()
    customer_service = get_customer_service(settings, InMemoryCustomerRepository())
    rental_service = RentalService(
        car_repository=car_repository,
        rental_repository=InMemoryRentalRepository(),
        customer_service=customer_service,
        pricing_service=get_pricing_service(settings),
    )

    return CarRentalSystem(
        car_repository=car_repository,
        customer_service=customer_service,
        rental_service=rental_service,
    )
