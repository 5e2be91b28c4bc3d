import numpy as np
import pytest

from motion import StepGenerator, apply_outward_bias, resolve_wrap


def norms(vectors):
    return np.hypot(vectors[:, 0], vectors[:, 1])


def test_unbiased_directions_are_unit_length():
    gen = StepGenerator(np.random.default_rng(1), boost_strength=0.2)
    positions = np.random.default_rng(2).uniform(0, 400, size=(500, 2))
    directions = gen.directions(positions, (200.0, 200.0), boosted=False)
    assert directions.shape == (500, 2)
    np.testing.assert_allclose(norms(directions), 1.0, atol=1e-12)


@pytest.mark.parametrize("strength", [0.0, 0.2, 0.5, 0.9, 1.0])
def test_biased_directions_are_unit_length(strength):
    gen = StepGenerator(np.random.default_rng(3), boost_strength=strength)
    positions = np.random.default_rng(4).uniform(0, 400, size=(500, 2))
    positions[0] = (200.0, 200.0)  # exactly at center
    directions = gen.directions(positions, (200.0, 200.0), boosted=True)
    np.testing.assert_allclose(norms(directions), 1.0, atol=1e-12)


def test_forced_heading(fixed_heading):
    gen = StepGenerator(fixed_heading(np.pi / 2), boost_strength=0.0)
    directions = gen.random_directions(3)
    np.testing.assert_allclose(directions, [[0.0, 1.0]] * 3, atol=1e-12)


def test_full_strength_bias_points_outward():
    directions = np.array([[0.0, 1.0], [1.0, 0.0]])
    positions = np.array([[300.0, 200.0], [200.0, 100.0]])
    biased = apply_outward_bias(directions, positions, (200.0, 200.0), 1.0)
    np.testing.assert_allclose(biased, [[1.0, 0.0], [0.0, -1.0]], atol=1e-12)


def test_partial_bias_blends_then_renormalizes():
    directions = np.array([[0.0, 1.0]])
    positions = np.array([[300.0, 200.0]])
    biased = apply_outward_bias(directions, positions, (200.0, 200.0), 0.5)
    expected = np.array([[1.0, 1.0]]) / np.sqrt(2.0)
    np.testing.assert_allclose(biased, expected, atol=1e-12)


def test_walker_at_center_keeps_random_heading():
    directions = np.array([[0.6, 0.8]])
    positions = np.array([[200.0, 200.0]])
    biased = apply_outward_bias(directions, positions, (200.0, 200.0), 0.2)
    np.testing.assert_allclose(biased, directions, atol=1e-12)


def test_cancelling_blend_falls_back_to_random_heading():
    # Half-strength bias exactly opposite to the random heading cancels out
    directions = np.array([[-1.0, 0.0]])
    positions = np.array([[300.0, 200.0]])
    biased = apply_outward_bias(directions, positions, (200.0, 200.0), 0.5)
    np.testing.assert_allclose(biased, directions, atol=1e-12)


def test_boost_ignored_when_not_boosted(fixed_heading):
    gen = StepGenerator(fixed_heading(0.0), boost_strength=1.0)
    positions = np.array([[200.0, 300.0]])
    directions = gen.directions(positions, (200.0, 200.0), boosted=False)
    np.testing.assert_allclose(directions, [[1.0, 0.0]], atol=1e-12)


def test_wrap_right_edge():
    wrapped_pos, wrapped = resolve_wrap(np.array([[400.5, 200.0]]), 400, 400)
    np.testing.assert_allclose(wrapped_pos, [[0.5, 200.0]])
    assert wrapped.tolist() == [True]


def test_wrap_left_and_top_edges():
    wrapped_pos, wrapped = resolve_wrap(np.array([[-0.5, 10.0], [10.0, -2.0]]), 400, 300)
    np.testing.assert_allclose(wrapped_pos, [[399.5, 10.0], [10.0, 298.0]])
    assert wrapped.tolist() == [True, True]


def test_exact_upper_bound_wraps_to_zero():
    wrapped_pos, wrapped = resolve_wrap(np.array([[400.0, 300.0]]), 400, 300)
    np.testing.assert_allclose(wrapped_pos, [[0.0, 0.0]])
    assert wrapped.tolist() == [True]


def test_inside_positions_are_untouched():
    proposed = np.array([[0.0, 0.0], [399.999, 299.999], [123.4, 56.7]])
    wrapped_pos, wrapped = resolve_wrap(proposed, 400, 300)
    np.testing.assert_array_equal(wrapped_pos, proposed)
    assert not wrapped.any()


def test_one_axis_wrapping_flags_the_whole_step():
    wrapped_pos, wrapped = resolve_wrap(np.array([[50.0, 301.0]]), 400, 300)
    np.testing.assert_allclose(wrapped_pos, [[50.0, 1.0]])
    assert wrapped.tolist() == [True]


def test_tiny_negative_does_not_land_on_upper_bound():
    wrapped_pos, _ = resolve_wrap(np.array([[-1e-20, 5.0]]), 400, 300)
    assert 0.0 <= wrapped_pos[0, 0] < 400


def test_wrapped_positions_always_in_bounds():
    rng = np.random.default_rng(7)
    proposed = rng.uniform(-1000, 1400, size=(2000, 2))
    wrapped_pos, _ = resolve_wrap(proposed, 400, 250)
    assert (wrapped_pos[:, 0] >= 0).all() and (wrapped_pos[:, 0] < 400).all()
    assert (wrapped_pos[:, 1] >= 0).all() and (wrapped_pos[:, 1] < 250).all()
