import pytest

from leaftree.work_pool import WorkPool


def test_basic_initialization():
    wp = WorkPool(8)
    assert wp.capacity == 8


@pytest.mark.parametrize("capacity", [1, 2, 64, 1024])
def test_power_of_two_capacities_accepted(capacity):
    assert WorkPool(capacity).capacity == capacity


@pytest.mark.parametrize("capacity", [0, -8, 5, 100])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        WorkPool(capacity)