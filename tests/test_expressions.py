import pytest
from croniter import croniter

from offline_scheduler.expressions import InvalidExpression, convert_expression_to_cron


@pytest.mark.parametrize("expression, expected", [
    ("rate(1 minute)", "*/1 * * * *"),
    ("rate(5 minutes)", "*/5 * * * *"),
    ("rate(1 hour)", "* */1 * * *"),
    ("rate(2 hours)", "* */2 * * *"),
    ("rate(1 day)", "* * */1 * *"),
    ("rate(3 days)", "* * */3 * *"),
])
def test_convert_rate(expression: str, expected: str) -> None:
    assert convert_expression_to_cron(expression) == expected


def test_convert_rate_places_value_in_unit_field() -> None:
    for value in range(1, 60):
        for unit, position in (("minutes", 0), ("hours", 1), ("days", 2)):
            fields = convert_expression_to_cron(f"rate({value} {unit})").split(" ")
            assert len(fields) == 5
            assert fields[position] == f"*/{value}"
            assert all(field == "*" for i, field in enumerate(fields) if i != position)


def test_convert_is_deterministic() -> None:
    results = {convert_expression_to_cron("rate(10 minutes)") for _ in range(20)}
    assert results == {"*/10 * * * *"}


def test_convert_tolerates_whitespace() -> None:
    assert convert_expression_to_cron("  rate( 15  minutes )  ") == "*/15 * * * *"


def test_converted_rates_are_valid_cron() -> None:
    for expression in ("rate(1 minute)", "rate(12 hours)", "rate(7 days)"):
        assert croniter.is_valid(convert_expression_to_cron(expression))


@pytest.mark.parametrize("expression", [
    "rate(0 minutes)",
    "rate(-1 minutes)",
    "rate(1 second)",
    "rate(1 week)",
    "rate(minutes)",
    "rate(1.5 hours)",
    "rate(1 Minute)",
    "every 5 minutes",
    "",
])
def test_convert_invalid_rate(expression: str) -> None:
    with pytest.raises(InvalidExpression) as exc_info:
        convert_expression_to_cron(expression)
    assert exc_info.value.expression == expression


def test_convert_non_string() -> None:
    with pytest.raises(InvalidExpression, match="expected a string"):
        convert_expression_to_cron(None)


def test_invalid_expression_is_value_error() -> None:
    with pytest.raises(ValueError):
        convert_expression_to_cron("rate(1 fortnight)")


@pytest.mark.parametrize("expression, expected", [
    ("cron(0 12 * * ? *)", "0 12 * * *"),
    ("cron(0 8 ? * MON-FRI *)", "0 8 * * MON-FRI"),
    ("cron(0 18 ? * 2-6 *)", "0 18 * * 1-5"),
    ("cron(0 9 1 * ? *)", "0 9 1 * *"),
    ("cron(*/15 * * * ? 2030)", "*/15 * * * *"),
    ("cron(0 10 ? * 1,7 *)", "0 10 * * 0,6"),
])
def test_convert_calendar(expression: str, expected: str) -> None:
    assert convert_expression_to_cron(expression) == expected


@pytest.mark.parametrize("expression", [
    "cron(0 12 * * ?)",
    "cron(0 12 * * ? * *)",
    "cron(99 12 * * ? *)",
    "cron()",
])
def test_convert_invalid_calendar(expression: str) -> None:
    with pytest.raises(InvalidExpression):
        convert_expression_to_cron(expression)
