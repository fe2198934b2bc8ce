import re
from typing import Dict, List

from croniter import croniter


class InvalidExpression(ValueError):
    """
    Raised when a schedule expression cannot be converted to a cron expression.
    """
    def __init__(self, expression: object, reason: str = "unsupported schedule expression"):
        self.expression = expression
        super().__init__(f"Invalid schedule expression {expression!r}: {reason}")


RATE_PATTERN = re.compile(r"^rate\(\s*(\d+)\s+([a-z]+)\s*\)$")
CRON_PATTERN = re.compile(r"^cron\((.*)\)$")

# unit -> position of the step field in "minute hour day-of-month month day-of-week"
RATE_UNIT_FIELDS: Dict[str, int] = {
    "minute": 0,
    "minutes": 0,
    "hour": 1,
    "hours": 1,
    "day": 2,
    "days": 2,
}


def convert_expression_to_cron(expression: str) -> str:
    """
    Convert a schedule expression into a canonical 5-field cron expression.

    Args:
        expression (str): A rate expression such as ``rate(5 minutes)`` or a
            calendar expression such as ``cron(0 12 * * ? *)``.

    Returns:
        str: The cron expression, e.g. ``*/5 * * * *``.

    Raises:
        InvalidExpression: If the expression is not recognised.
    """
    if not isinstance(expression, str):
        raise InvalidExpression(expression, "expected a string")

    stripped = expression.strip()
    if stripped.startswith("rate("):
        return _convert_rate(stripped)
    if stripped.startswith("cron("):
        return _convert_calendar(stripped)
    raise InvalidExpression(expression)


def _convert_rate(expression: str) -> str:
    match = RATE_PATTERN.match(expression)
    if not match:
        raise InvalidExpression(expression, "expected rate(<value> <unit>)")

    value, unit = int(match.group(1)), match.group(2)
    if value <= 0:
        raise InvalidExpression(expression, "rate value must be a positive integer")
    if unit not in RATE_UNIT_FIELDS:
        raise InvalidExpression(expression, f"unknown rate unit '{unit}'")

    fields: List[str] = ["*"] * 5
    fields[RATE_UNIT_FIELDS[unit]] = f"*/{value}"
    return " ".join(fields)


def _convert_calendar(expression: str) -> str:
    match = CRON_PATTERN.match(expression)
    if not match:
        raise InvalidExpression(expression, "expected cron(<fields>)")

    fields = match.group(1).split()
    if len(fields) != 6:
        raise InvalidExpression(expression, f"expected 6 fields, got {len(fields)}")

    minute, hour, day_of_month, month, day_of_week, _year = fields
    day_of_month = "*" if day_of_month == "?" else day_of_month
    day_of_week = "*" if day_of_week == "?" else _shift_weekdays(day_of_week)

    cron = " ".join([minute, hour, day_of_month, month, day_of_week])
    if not croniter.is_valid(cron):
        raise InvalidExpression(expression, f"'{cron}' is not a valid cron expression")
    return cron


def _shift_weekdays(field: str) -> str:
    # 1-7 (Sunday=1) -> 0-6 (Sunday=0); names are left untouched
    return re.sub(r"(?<![#/\d])([1-7])(?!\d)", lambda m: str(int(m.group(1)) - 1), field)
