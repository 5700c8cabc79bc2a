"""Interactive text menu for the car rental desk."""
from datetime import date
from typing import Callable, Optional

from car_rental.api.system import CarRentalSystem
from car_rental.domain.models import ReturnSummary
from car_rental.utils import days_between, format_money, parse_date

MENU = """
===== Car Rental System =====
1. List all cars
2. List available cars
3. Rent a car
4. Return a car
5. View active rentals
6. Exit"""

EXIT_CHOICE = 6


class RentalMenu:
    """Read-eval-print loop over a :class:`CarRentalSystem`.

    ``input_func`` and ``output_func`` default to the terminal and are
    replaced in tests with scripted input and captured output.
    """

    def __init__(
        self,
        system: CarRentalSystem,
        currency_symbol: str = "Rs.",
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        self.system = system
        self.currency_symbol = currency_symbol
        self._input = input_func or input
        self._output = output_func or print

    def run(self) -> None:
        while True:
            self._output(MENU)
            choice = self.read_int_in_range("Enter your choice: ", 1, EXIT_CHOICE)
            if choice == 1:
                self.show_all_cars()
            elif choice == 2:
                self.show_available_cars()
            elif choice == 3:
                self.handle_rent()
            elif choice == 4:
                self.handle_return()
            elif choice == 5:
                self.show_active_rentals()
            else:
                self._output("Exiting. Goodbye!")
                return

    def show_all_cars(self) -> None:
        self._output("--- Cars in fleet ---")
        for car in self.system.list_all_cars():
            self._output(car.display(self.currency_symbol))

    def show_available_cars(self) -> None:
        available = self.system.list_available_cars()
        if not available:
            self._output("No cars available.")
            return
        for car in available:
            self._output(car.display(self.currency_symbol))

    def handle_rent(self) -> None:
        name = self.read_non_empty("Enter your name: ")
        customer = self.system.create_customer(name)

        available = self.system.list_available_cars()
        if not available:
            self._output("No cars available right now.")
            return
        self._output("Available cars:")
        for car in available:
            self._output(car.display(self.currency_symbol))

        car_id = self._input("Enter car ID to rent: ").strip()
        start = self.read_date("Enter start date (yyyy-MM-dd): ")
        end = self.read_date("Enter end date (yyyy-MM-dd): ")
        discount = self.read_float_min("Enter discount percent (0 if none): ", 0)

        if end <= start:
            self._output("End date must be after start date. Using 1 day minimum.")

        car = self.system.get_car(car_id)
        if car is None:
            self._output("Invalid car ID.")
            return

        preview = self.system.preview_price(car_id, start, end, discount)
        if not preview.ok:
            self._output(f"Unable to compute price: {preview.message}")
            return
        quote = preview.quote

        self._output("\n--- Rental Summary ---")
        self._output(f"Customer: {customer.name} ({customer.customer_id})")
        self._output(f"Car: {car.brand} {car.model} ({car.car_id})")
        self._output(f"Period: {start} to {end} ({days_between(start, end)} days)")
        self._output(f"Base price: {self._money(quote.base_price)}")
        self._output(
            f"Total with tax (incl. {self.system.tax_rate * 100:.2f}%): "
            f"{self._money(quote.total)}"
        )

        confirm = self._input("Confirm rental? (Y/N): ").strip()
        if confirm.lower() != "y":
            self._output("Rental canceled.")
            return

        result = self.system.rent(car_id, customer, start, end, discount)
        self._output(result.message)

    def handle_return(self) -> None:
        car_id = self._input("Enter car ID to return: ").strip()
        result = self.system.return_car(car_id)
        if not result.ok:
            self._output(result.message)
            return
        self.print_return_summary(result.summary)

    def print_return_summary(self, summary: ReturnSummary) -> None:
        self._output("=== Return Summary ===")
        self._output(f"Customer: {summary.customer_name} ({summary.customer_id})")
        self._output(f"Car: {summary.brand} {summary.model} ({summary.car_id})")
        self._output(
            f"Rental period: {summary.start_date} to {summary.end_date} "
            f"({summary.days} days)"
        )
        self._output(f"Base price: {self._money(summary.base_price)}")
        self._output(f"Discount: {summary.discount_percent:.2f}%")
        self._output(
            f"Total (incl. tax {summary.tax_rate * 100:.2f}%): "
            f"{self._money(summary.total)}"
        )
        self._output("Thank you, car returned successfully.")

    def show_active_rentals(self) -> None:
        self._output("--- Active Rentals ---")
        rentals = list(self.system.list_active_rentals())
        if not rentals:
            self._output("No active rentals.")
            return
        for rental in rentals:
            self._output(
                f"Car {rental.car.car_id} -> {rental.customer.name} "
                f"({rental.start_date} to {rental.end_date}, {rental.days} days)"
            )

    # input helpers

    def read_int_in_range(self, prompt: str, low: int, high: int) -> int:
        line = self._input(prompt)
        while True:
            try:
                value = int(line.strip())
                if low <= value <= high:
                    return value
            except ValueError:
                pass
            line = self._input(f"Please enter a valid number ({low}-{high}): ")

    def read_non_empty(self, prompt: str) -> str:
        text = self._input(prompt).strip()
        while not text:
            text = self._input("Input cannot be empty. Please enter again: ").strip()
        return text

    def read_date(self, prompt: str) -> date:
        parsed: Optional[date] = parse_date(self._input(prompt))
        while parsed is None:
            parsed = parse_date(self._input("Invalid date format. Use yyyy-MM-dd: "))
        return parsed

    def read_float_min(self, prompt: str, minimum: float) -> float:
        line = self._input(prompt)
        while True:
            try:
                value = float(line.strip())
                if value >= minimum:
                    return value
            except ValueError:
                pass
            line = self._input(f"Please enter a valid number >= {minimum}: ")

    def _money(self, amount: float) -> str:
        return format_money(amount, self.currency_symbol)
