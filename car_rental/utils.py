from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"


def days_between(start: date, end: date) -> int:
    days = (end - start).days
    return days if days > 0 else 1


def parse_date(text: str) -> Optional[date]:
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def format_money(amount: float, currency_symbol: str = "Rs.") -> str:
    return f"{currency_symbol}{amount:.2f}"
