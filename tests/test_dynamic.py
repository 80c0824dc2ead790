import pytest
from hypothesis import given, strategies as st

from dsakit.dynamic import (
    DEFAULT_COINS,
    max_expression_value,
    max_gold,
    money_change,
    repetitive_knapsack,
)


def test_money_change_zero_needs_no_coins():
    assert money_change(0) == 0


@pytest.mark.parametrize("coin", DEFAULT_COINS)
def test_money_change_single_coin(coin):
    assert money_change(coin) == 1


def test_money_change_unreachable():
    assert money_change(7, coins=(2, 4)) is None


def test_money_change_rejects_bad_input():
    with pytest.raises(ValueError):
        money_change(-1)
    with pytest.raises(ValueError):
        money_change(5, coins=(0, 1))


@given(st.integers(0, 200), st.integers(0, 200))
def test_money_change_subadditive(a, b):
    assert money_change(a + b) <= money_change(a) + money_change(b)


@given(st.integers(0, 300))
def test_money_change_never_worse_than_ones(money):
    result = money_change(money)
    assert result <= money
    assert result * max(DEFAULT_COINS) >= money


@given(st.integers(0, 60), st.lists(st.integers(0, 30), max_size=6))
def test_max_gold_within_capacity(capacity, weights):
    result = max_gold(capacity, weights)
    assert 0 <= result <= capacity
    if sum(weights) <= capacity:
        assert result == sum(weights)


@given(st.integers(0, 60), st.lists(st.integers(0, 30), max_size=6))
def test_max_gold_at_least_any_single_fitting_bar(capacity, weights):
    result = max_gold(capacity, weights)
    for weight in weights:
        if weight <= capacity:
            assert result >= weight


def test_max_gold_rejects_negative_weight():
    with pytest.raises(ValueError):
        max_gold(10, [3, -1])


def test_repetitive_knapsack_worked_example():
    items = [(6, 30), (3, 14), (4, 16), (2, 9)]
    assert repetitive_knapsack(10, items) == 48


def test_repetitive_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        repetitive_knapsack(5, [(0, 3)])


@given(
    st.integers(0, 40),
    st.lists(st.tuples(st.integers(1, 10), st.integers(0, 50)), max_size=5),
)
def test_repetitive_knapsack_monotone(capacity, items):
    assert repetitive_knapsack(capacity, items) <= repetitive_knapsack(
        capacity + 1, items
    )


@given(st.integers(1, 10), st.integers(0, 50), st.integers(0, 10))
def test_repetitive_knapsack_repeats_single_item(weight, value, copies):
    assert repetitive_knapsack(weight * copies, [(weight, value)]) == value * copies


def test_max_expression_value_worked_example():
    assert max_expression_value("5-8+7*4-8+9") == 200


def test_max_expression_value_single_operand():
    assert max_expression_value("7") == 7


@pytest.mark.parametrize("text", ["", "1++2", "+1", "3-", "2/4", "a+b"])
def test_max_expression_value_rejects_malformed(text):
    with pytest.raises(ValueError):
        max_expression_value(text)


@given(st.lists(st.integers(0, 9), min_size=1, max_size=7))
def test_max_expression_value_of_sums(digits):
    expression = "+".join(str(d) for d in digits)
    assert max_expression_value(expression) == sum(digits)


@given(st.lists(st.integers(0, 9), min_size=2, max_size=6))
def test_max_expression_value_at_least_left_to_right(digits):
    expression = "-".join(str(d) for d in digits)
    left_to_right = digits[0] - sum(digits[1:])
    assert max_expression_value(expression) >= left_to_right