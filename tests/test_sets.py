import pytest

from fractscope.sets import burning_ship, julia, mandelbrot


@pytest.mark.parametrize("func", [mandelbrot, burning_ship])
def test_origin_never_escapes(func):
    assert func(0j, 50) == 50


def test_julia_bounded_point_reaches_limit():
    assert julia(0j, 0j, 75) == 75


@pytest.mark.parametrize("func", [mandelbrot, burning_ship])
def test_zero_iterations(func):
    assert func(1 + 1j, 0) == 0


def test_julia_start_outside_radius_does_not_iterate():
    assert julia(3 + 0j, -0.7 + 0.27015j, 50) == 0


def test_far_point_escapes_after_first_step():
    assert mandelbrot(10 + 10j, 50) == 1
    assert burning_ship(10 + 10j, 50) == 1


@pytest.mark.parametrize(
    "c", [0.3 + 0.5j, -0.75 + 0.1j, -1.5 + 0j, 0.26 + 0j, -0.1 + 0.9j, 1 + 1j]
)
def test_mandelbrot_is_julia_started_at_c(c):
    # The first Mandelbrot step always maps 0 to c.
    assert mandelbrot(c, 100) == julia(c, c, 99) + 1


@pytest.mark.parametrize("c", [0.3 + 0.5j, -0.75 + 0.1j, 0.26 + 0j, -1.2 - 0.3j])
@pytest.mark.parametrize("func", [mandelbrot, burning_ship])
def test_count_is_capped_by_limit(func, c):
    full = func(c, 500)
    for limit in (1, 5, 20, 100):
        assert func(c, limit) == min(full, limit)


@pytest.mark.parametrize("c", [0.3 + 0.5j, -0.75 + 0.1j, 2 + 0j, -2 + 0j])
def test_mandelbrot_symmetric_about_real_axis(c):
    assert mandelbrot(c, 200) == mandelbrot(c.conjugate(), 200)


def test_accepts_real_numbers():
    assert mandelbrot(-1, 30) == mandelbrot(-1 + 0j, 30)
    assert julia(0.5, -0.7, 30) == julia(0.5 + 0j, -0.7 + 0j, 30)


@pytest.mark.parametrize("c", [0.1 + 0.2j, 0.2 + 0.1j, 0.3 + 0.3j])
def test_burning_ship_matches_mandelbrot_when_orbit_stays_positive(c):
    # For small positive c the orbit never leaves the first quadrant,
    # so folding changes nothing.
    assert burning_ship(c, 100) == mandelbrot(c, 100)