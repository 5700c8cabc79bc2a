"""Domain exceptions for the car rental desk."""


class DomainException(Exception):
    """Base domain exception."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidCarIdException(DomainException):
    """Car not found exception."""

    def __init__(self, car_id: str) -> None:
        super().__init__(
            message=f"Invalid car ID: {car_id}",
            code="INVALID_CAR_ID",
        )


class CarNotAvailableException(DomainException):
    """Car is already out on rent."""

    def __init__(self, car_id: str) -> None:
        super().__init__(
            message=f"Car {car_id} is not available for rent",
            code="CAR_NOT_AVAILABLE",
        )


class NotRentedException(DomainException):
    """Return requested for a car without an active rental."""

    def __init__(self, car_id: str) -> None:
        super().__init__(
            message=f"Car {car_id} was not rented or invalid car ID",
            code="NOT_RENTED",
        )


class InvalidConfigurationException(DomainException):
    """Invalid pricing or fleet configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            code="INVALID_CONFIGURATION",
        )
