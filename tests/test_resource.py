import pytest

from EconOPS.domain.resource import Resource, ResourceAmount


def test_resource_order_and_names():
    assert [r.index for r in Resource] == [0, 1, 2]
    assert Resource.names() == ["Iron", "Copper", "Stone"]
    assert Resource("Copper") is Resource.COPPER


def test_default_amount_is_zero():
    amount = ResourceAmount()
    assert list(amount) == [0, 0, 0]
    assert all(amount.get(r) == 0 for r in Resource)


def test_of_and_iteration_order():
    amount = ResourceAmount.of({Resource.STONE: 7, Resource.IRON: 2})
    assert list(amount) == [2, 0, 7]
    # itération relançable
    assert list(amount) == list(amount)
    assert dict(amount.items()) == {
        Resource.IRON: 2,
        Resource.COPPER: 0,
        Resource.STONE: 7,
    }


def test_add_increments_single_counter():
    amount = ResourceAmount()
    amount.add(Resource.COPPER)
    amount.add(Resource.COPPER, 4)
    assert amount.get(Resource.COPPER) == 5
    assert amount.get(Resource.IRON) == 0


def test_add_rejects_negative_amount():
    with pytest.raises(ValueError):
        ResourceAmount().add(Resource.IRON, -1)


def test_negative_counters_are_rejected():
    with pytest.raises(ValueError):
        ResourceAmount(counts=[1, -1, 0])
    with pytest.raises(ValueError):
        ResourceAmount(counts=[1, 2])


def test_consume_success_subtracts_every_component():
    stock = ResourceAmount.of({Resource.IRON: 150, Resource.STONE: 20})
    cost = ResourceAmount.of({Resource.IRON: 100, Resource.STONE: 20})
    assert stock.consume(cost) is True
    assert list(stock) == [50, 0, 0]


def test_consume_failure_leaves_stock_untouched():
    stock = ResourceAmount.of({Resource.IRON: 150, Resource.STONE: 5})
    before = stock.copy()
    cost = ResourceAmount.of({Resource.IRON: 100, Resource.STONE: 20})
    assert stock.consume(cost) is False
    assert stock == before


@pytest.mark.parametrize(
    "stock_counts, cost_counts",
    [
        ([0, 0, 0], [0, 0, 0]),
        ([3, 1, 4], [3, 1, 4]),
        ([3, 1, 4], [4, 0, 0]),
        ([10, 10, 10], [1, 11, 1]),
        ([5, 0, 9], [2, 0, 9]),
    ],
)
def test_consume_is_all_or_nothing(stock_counts, cost_counts):
    stock = ResourceAmount(counts=list(stock_counts))
    cost = ResourceAmount(counts=list(cost_counts))
    ok = stock.consume(cost)
    if ok:
        assert list(stock) == [s - c for s, c in zip(stock_counts, cost_counts)]
        assert all(count >= 0 for count in stock)
    else:
        assert list(stock) == stock_counts


def test_str_lists_every_resource():
    amount = ResourceAmount.of({Resource.IRON: 3})
    assert str(amount) == "Iron: 3\tCopper: 0\tStone: 0\t"
