"""Tests for the CarRentalSystem facade."""
from datetime import date

import pytest
from prometheus_client import REGISTRY

from car_rental.api.dependencies import build_rental_system
from car_rental.api.system import CarRentalSystem
from car_rental.config import Settings
from car_rental.domain.exceptions import InvalidConfigurationException
from car_rental.domain.models import Outcome


def _operation_count(operation: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "car_rental_operations_total",
        {"operation": operation, "status": status},
    )
    return value or 0.0


def test_add_and_list_cars(rental_system: CarRentalSystem) -> None:
    """Test fleet listing."""
    assert [car.car_id for car in rental_system.list_all_cars()] == ["C001", "C002"]
    assert [car.car_id for car in rental_system.list_available_cars()] == ["C001", "C002"]
    assert rental_system.get_car("C002").price_per_day == 3200.0
    assert rental_system.get_car("ZZZZ") is None


def test_tax_rate(rental_system: CarRentalSystem) -> None:
    """Test tax rate comes from settings."""
    assert rental_system.tax_rate == 0.18


def test_preview_price(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test successful preview."""
    # Act
    result = rental_system.preview_price("C001", start_date, end_date, 10)

    # Assert
    assert result.ok is True
    assert result.outcome == Outcome.QUOTED
    assert result.quote.total == pytest.approx(9558.0)


def test_preview_price_unknown_car(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test preview of unknown car returns an error value."""
    # Act
    result = rental_system.preview_price("ZZZZ", start_date, end_date, 0)

    # Assert
    assert result.ok is False
    assert result.outcome == Outcome.INVALID_CAR_ID
    assert result.quote is None
    assert "ZZZZ" in result.message


def test_rent_with_customer_name(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test renting with a name creates and registers a customer."""
    # Arrange
    before = _operation_count("rent", "rented")

    # Act
    result = rental_system.rent("C001", "Alice", start_date, end_date, 10)

    # Assert
    assert result.outcome == Outcome.RENTED
    assert result.customer.name == "Alice"
    assert rental_system.customer_service.get(result.customer.customer_id) is not None
    assert rental_system.get_car("C001").is_available is False
    assert _operation_count("rent", "rented") == before + 1


def test_rent_unknown_car(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test renting ZZZZ creates no ledger entry and no customer record."""
    # Arrange
    customer = rental_system.create_customer("Bob")
    before = _operation_count("rent", "invalid_car_id")

    # Act
    result = rental_system.rent("ZZZZ", customer, start_date, end_date, 0)

    # Assert
    assert result.outcome == Outcome.INVALID_CAR_ID
    assert result.customer is None
    assert list(rental_system.list_active_rentals()) == []
    assert rental_system.customer_service.get(customer.customer_id) is None
    assert _operation_count("rent", "invalid_car_id") == before + 1


def test_rent_car_not_available(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test renting a rented car returns CAR_NOT_AVAILABLE."""
    # Arrange
    rental_system.rent("C001", "Alice", start_date, end_date, 0)

    # Act
    result = rental_system.rent("C001", "Bob", start_date, end_date, 0)

    # Assert
    assert result.outcome == Outcome.CAR_NOT_AVAILABLE
    active = list(rental_system.list_active_rentals())
    assert len(active) == 1
    assert active[0].customer.name == "Alice"


def test_return_car(
    rental_system: CarRentalSystem, start_date: date, end_date: date
) -> None:
    """Test return produces a summary and frees the car."""
    # Arrange
    rental_system.rent("C001", "Alice", start_date, end_date, 10)

    # Act
    result = rental_system.return_car("C001")

    # Assert
    assert result.outcome == Outcome.RETURNED
    assert result.summary.total == pytest.approx(9558.0)
    assert rental_system.get_car("C001").is_available is True
    assert list(rental_system.list_active_rentals()) == []


def test_return_car_not_rented(rental_system: CarRentalSystem) -> None:
    """Test return of a car that is not rented."""
    # Arrange
    before = _operation_count("return", "not_rented")

    # Act
    result = rental_system.return_car("C002")

    # Assert
    assert result.outcome == Outcome.NOT_RENTED
    assert result.summary is None
    assert rental_system.get_car("C002").is_available is True
    assert _operation_count("return", "not_rented") == before + 1


def test_systems_do_not_share_state(test_settings: Settings) -> None:
    """Test each built system owns its state."""
    # Arrange
    first = build_rental_system(test_settings)
    second = build_rental_system(test_settings)

    # Act
    first.add_car("C001", "Toyota", "Camry", 3000.0)

    # Assert
    assert second.list_all_cars() == []


def test_custom_tax_rate() -> None:
    """Test tax rate from settings drives pricing."""
    # Arrange
    system = build_rental_system(Settings(tax_rate=0.0, seed_fleet=False))
    system.add_car("C001", "Toyota", "Camry", 3000.0)

    # Act
    result = system.preview_price("C001", date(2024, 1, 1), date(2024, 1, 3), 0)

    # Assert
    assert result.quote.total == pytest.approx(6000.0)


def test_negative_tax_rate_rejected_by_pricing() -> None:
    """Test negative tax rate fails when the system is built."""
    settings = Settings.model_construct(tax_rate=-0.5, customer_id_prefix="CUS-")
    with pytest.raises(InvalidConfigurationException):
        build_rental_system(settings)
