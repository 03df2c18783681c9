import pytest
from behavioral.strategy.sorting_strategy import AscendingStrategy, Context, DescendingStrategy, StrategyError


@pytest.mark.unit
def test_context_sorts_with_initial_strategy():
    assert Context(AscendingStrategy()).do_some_business_logic() == "abcde"


@pytest.mark.unit
def test_strategy_can_be_swapped_at_runtime():
    ctx = Context(AscendingStrategy())
    ctx.strategy = DescendingStrategy()
    assert isinstance(ctx.strategy, DescendingStrategy)
    assert ctx.do_some_business_logic() == "edcba"
    assert ctx.do_some_business_logic(["x", "ab"]) == "xba"


@pytest.mark.unit
def test_context_without_strategy_raises():
    with pytest.raises(StrategyError):
        Context().do_some_business_logic()
