import numpy as np
import pytest

from kinkal.axialfield import AxialBFieldMap


def _linear_map():
    values = [0.1 * i for i in range(11)]
    return AxialBFieldMap(0.0, 10.0, values), values


def test_bz_on_grid_and_clamped():
    amap, values = _linear_map()
    assert amap.bz(3.0) == pytest.approx(values[3])
    assert amap.bz(-50.0) == values[0]
    assert amap.bz(500.0) == values[-1]


def test_gradient_of_linear_field():
    amap, _ = _linear_map()
    assert amap.gradient(5.0) == pytest.approx(0.1)


def test_field_vect_on_axis_matches_grid():
    amap, values = _linear_map()
    vec = amap.field_vect([0.0, 0.0, 4.0])
    assert vec[0] == 0.0
    assert vec[1] == 0.0
    assert vec[2] == pytest.approx(values[4])


def test_field_vect_off_axis_and_grad_consistency():
    amap, _ = _linear_map()
    pos = [2.0, -1.0, 5.0]
    grad = amap.field_grad(pos)
    vec = amap.field_vect(pos)
    assert grad[2][2] == pytest.approx(-amap.gradient(5.0))
    assert vec[0] == pytest.approx(grad[0][0] * 2.0)
    assert vec[1] == pytest.approx(grad[1][1] * -1.0)
    deriv = amap.field_deriv(pos, [1.0, 1.0, 1.0])
    assert deriv[2] == pytest.approx(amap.gradient(5.0))
    assert deriv[0] == pytest.approx(grad[0][0])


def test_in_range_is_open_interval():
    amap, _ = _linear_map()
    assert amap.in_range([0.0, 0.0, 5.0]) is True
    assert amap.in_range([0.0, 0.0, 0.0]) is False
    assert amap.in_range([0.0, 0.0, 10.0]) is False


def test_describe():
    amap = AxialBFieldMap(0.0, 10.0, [0.0] * 10 + [1.0])
    assert amap.describe() == (
        "Axial Bfield between 0 and 10 with 11 field values from 0 to 1\n"
    )


def test_too_few_values_rejected():
    with pytest.raises(ValueError):
        AxialBFieldMap(0.0, 1.0, [1.0])


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "axial.txt"
    lines = ["# z bz", ""]
    lines += [f"{z:.1f} {b}" for z, b in zip((-2.0, -1.0, 0.0, 1.0, 2.0), (1.0, 1.1, 1.2, 1.3, 1.4))]
    path.write_text("\n".join(lines) + "\n")
    amap = AxialBFieldMap.from_file(path)
    assert amap.zmin == -2.0
    assert amap.zmax == 2.0
    assert amap.field == (1.0, 1.1, 1.2, 1.3, 1.4)
    direct = AxialBFieldMap(-2.0, 2.0, [1.0, 1.1, 1.2, 1.3, 1.4])
    for pos in ([0.0, 0.0, -1.5], [1.0, 2.0, 0.3], [0.0, 0.0, 1.9]):
        np.testing.assert_allclose(amap.field_vect(pos), direct.field_vect(pos))


def test_from_file_nonuniform_spacing(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("0.0 1.0\n1.0 1.0\n2.5 1.0\n")
    with pytest.raises(ValueError):
        AxialBFieldMap.from_file(path)


def test_from_file_missing(tmp_path):
    with pytest.raises(ValueError):
        AxialBFieldMap.from_file(tmp_path / "absent.txt")