"""Customer service."""
import logging
from typing import Optional

from car_rental.domain.models import (
    DEFAULT_CUSTOMER_ID_PREFIX,
    Customer,
    generate_customer_id,
)
from car_rental.infrastructure.repositories import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for customer registry operations."""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        id_prefix: str = DEFAULT_CUSTOMER_ID_PREFIX,
    ):
        self.customer_repository = customer_repository
        self.id_prefix = id_prefix

    def create(self, name: str) -> Customer:
        """Create a customer with a fresh ID without registering it."""
        customer_id = generate_customer_id(self.id_prefix)
        while self.customer_repository.get_by_id(customer_id) is not None:
            customer_id = generate_customer_id(self.id_prefix)
        return Customer(customer_id=customer_id, name=name)

    def register(self, customer: Customer) -> Customer:
        """Add customer to the registry."""
        registered = self.customer_repository.register(customer)
        logger.info(f"Registered customer {customer.customer_id} ({customer.name})")
        return registered

    def get(self, customer_id: str) -> Optional[Customer]:
        return self.customer_repository.get_by_id(customer_id)
