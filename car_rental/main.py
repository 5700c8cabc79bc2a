"""Main application entry point."""
import logging
from typing import Optional

import structlog

from car_rental.api.dependencies import build_rental_system
from car_rental.api.system import CarRentalSystem
from car_rental.cli import RentalMenu
from car_rental.config import Settings, settings

SEED_FLEET = [
    ("C001", "Toyota", "Camry", 3000.0),
    ("C002", "Honda", "Accord", 3200.0),
    ("C003", "Mahindra", "Thar", 7000.0),
]

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard logging
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )


def seed_fleet(system: CarRentalSystem) -> None:
    """Load the demo fleet."""
    for car_id, brand, model, price_per_day in SEED_FLEET:
        system.add_car(car_id, brand, model, price_per_day)
    logger.info(f"Seeded fleet with {len(SEED_FLEET)} cars")


def create_system(app_settings: Optional[Settings] = None) -> CarRentalSystem:
    app_settings = app_settings or settings
    system = build_rental_system(app_settings)
    if app_settings.seed_fleet:
        seed_fleet(system)
    return system


def main() -> None:
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    system = create_system(settings)
    try:
        RentalMenu(system, currency_symbol=settings.currency_symbol).run()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting. Goodbye!")

    logger.info("Shutting down")


if __name__ == "__main__":
    main()
