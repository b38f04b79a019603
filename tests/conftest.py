import pytest

from routeclean.core.point import Point

REFERENCE_ROWS = [
    (51.51138670225, -0.17560958862388, 1326379271),
    (51.511520245835, -0.17449378967286, 1326379365),
    (51.511306575914, -0.17294883728027, 1326379585),
    (51.528290206973, -0.18110275268554, 1326380144),
    (51.510371582676, -0.14917373657562, 1326380169),
    (51.527188959817, -0.13130907659162, 1326380272),
    (51.524659019479, -0.12767314910872, 1326380295),
]

# Eastbound along the equator at ~80 km/h, with a northern spike at the
# 4th fix and a southern spike at the 5th.
SPIKE_ROWS = [
    (0.0, 0.000, 0),
    (0.0, 0.001, 5),
    (0.0, 0.002, 10),
    (0.03, 0.003, 15),
    (-0.03, 0.004, 20),
    (0.0, 0.005, 25),
    (0.0, 0.006, 30),
]


def to_csv(rows):
    return "".join(f"{lat!r},{lon!r},{ts}\n" for lat, lon, ts in rows)


@pytest.fixture
def reference_route():
    return [Point(*row) for row in REFERENCE_ROWS]


@pytest.fixture
def spike_route():
    return [Point(*row) for row in SPIKE_ROWS]


@pytest.fixture
def reference_csv(tmp_path):
    p = tmp_path / "reference_route.csv"
    p.write_text(to_csv(REFERENCE_ROWS))
    return p


@pytest.fixture
def spike_csv(tmp_path):
    p = tmp_path / "spike_route.csv"
    p.write_text(to_csv(SPIKE_ROWS))
    return p
