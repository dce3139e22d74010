"""
test_particle.py
----------------
Unit tests for ParticleField: burst spawning, id assignment and the
FIFO capacity bound.
"""
import numpy as np
import pytest

from particle import ParticleField


@pytest.fixture
def field(params):
    return ParticleField(params)


def test_field_starts_empty(field):
    assert len(field) == 0
    assert field.positions.shape == (0, 2)


def test_burst_adds_two_fresh_particles(field):
    new_ids = field.spawn_burst(100, 100)

    assert len(field) == 2
    assert new_ids.tolist() == [0, 1]
    assert np.all(field.lives == 1.0)
    assert np.all(field.opacities == 1.0)


def test_burst_values_within_spawn_ranges(field):
    for _ in range(50):
        field.spawn_burst(100, 100)

    assert np.all((field.positions >= 87.5) & (field.positions <= 112.5))
    assert np.all((field.velocities[:, 0] >= -1.25) & (field.velocities[:, 0] <= 1.25))
    assert np.all((field.velocities[:, 1] >= -1.75) & (field.velocities[:, 1] <= 0.75))
    assert np.all((field.sizes >= 3.0) & (field.sizes <= 9.0))


def test_ids_are_monotonic_across_bursts(field):
    field.spawn_burst(0, 0)
    field.spawn_burst(0, 0)
    field.spawn_burst(0, 0)
    assert field.ids.tolist() == [0, 1, 2, 3, 4, 5]


def test_field_fills_to_capacity(field):
    for _ in range(75):
        field.spawn_burst(10, 10)
    assert len(field) == 150
    assert field.ids.tolist() == list(range(150))


def test_overflow_evicts_oldest_by_insertion_order(field):
    for _ in range(75):
        field.spawn_burst(10, 10)
    # Make the oldest particles the "youngest" by life to show eviction ignores it.
    field.lives[:2] = 1.0
    field.lives[2:] = 0.5

    field.spawn_burst(500, 500)

    assert len(field) == 150
    assert field.ids[0] == 2
    assert field.ids[-2:].tolist() == [150, 151]
    assert np.all(field.positions[-2:] >= 487.5)


def test_length_never_exceeds_capacity(field):
    for i in range(400):
        field.spawn_burst(i, i)
        assert len(field) <= 150


def test_custom_capacity_and_burst_size(params):
    params.update(max_particles=5, burst_size=3)
    field = ParticleField(params)
    field.spawn_burst(0, 0)
    field.spawn_burst(0, 0)
    assert len(field) == 5
    assert field.ids.tolist() == [1, 2, 3, 4, 5]


def test_same_seed_reproduces_bursts(params):
    a = ParticleField(params)
    b = ParticleField(params)
    a.spawn_burst(40, 60)
    b.spawn_burst(40, 60)
    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.velocities, b.velocities)


def test_retain_keeps_order_and_reports_removed(field):
    for _ in range(3):
        field.spawn_burst(0, 0)
    removed = field.retain(np.array([True, False, True, False, True, True]))
    assert removed == 2
    assert field.ids.tolist() == [0, 2, 4, 5]
    assert field.positions.shape == (4, 2)


def test_clear_keeps_id_counter(field):
    field.spawn_burst(0, 0)
    field.clear()
    assert len(field) == 0
    assert field.spawn_burst(0, 0).tolist() == [2, 3]


def test_capacity_smaller_than_burst_is_rejected(params):
    params.update(max_particles=1, burst_size=2)
    with pytest.raises(ValueError):
        ParticleField(params)


def test_inverted_size_range_is_rejected(params):
    params.update(size_min=9.0, size_max=3.0)
    with pytest.raises(ValueError):
        ParticleField(params)
