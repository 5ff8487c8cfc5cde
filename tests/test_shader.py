import numpy as np
import pytest

from meshview.shader import ShaderSourceError, Transform, read_shader_sources, rotation


def test_quarter_turn_about_z_maps_x_to_y():
    result = rotation(90.0, (0.0, 0.0, 1.0)) @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(result, [0.0, 1.0, 0.0, 1.0])


def test_full_turn_is_identity():
    assert np.allclose(rotation(360.0, (1.0, 2.0, 3.0)), np.identity(4))


def test_rotation_is_orthonormal_with_unit_determinant():
    matrix = rotation(37.0, (0.3, -1.0, 2.0))
    assert np.allclose(matrix @ matrix.T, np.identity(4))
    assert np.isclose(np.linalg.det(matrix), 1.0)


def test_axis_length_does_not_matter():
    assert np.allclose(rotation(25.0, (0.0, 5.0, 0.0)), rotation(25.0, (0.0, 1.0, 0.0)))


def test_opposite_angle_is_inverse():
    axis = (1.0, 1.0, 0.0)
    assert np.allclose(rotation(40.0, axis) @ rotation(-40.0, axis), np.identity(4))


def test_rotation_leaves_axis_fixed():
    axis = np.array([1.0, 2.0, -1.0])
    moved = rotation(73.0, axis)[:3, :3] @ axis
    assert np.allclose(moved, axis)


def test_zero_axis_rejected():
    with pytest.raises(ValueError):
        rotation(10.0, (0.0, 0.0, 0.0))


def test_transform_starts_at_identity():
    assert np.allclose(Transform().matrix, np.identity(4))


def test_transform_steps_compose_consistently():
    transform = Transform()
    first = transform.step().copy()
    second = transform.step()
    assert np.allclose(second, first @ first)


def test_transform_step_order_yaw_then_pitch():
    transform = Transform(yaw_step=90.0, pitch_step=90.0)
    expected = rotation(90.0, (0.0, 1.0, 0.0)) @ rotation(90.0, (1.0, 0.0, 0.0))
    assert np.allclose(transform.step(), expected)


def test_transform_stays_a_rotation():
    transform = Transform()
    for _ in range(500):
        matrix = transform.step()
    assert np.allclose(matrix @ matrix.T, np.identity(4))


def test_read_shader_sources(tmp_path):
    vert = tmp_path / "default.vert"
    frag = tmp_path / "default.frag"
    vert.write_text("void main() { gl_Position = vec4(0.0); }\n", encoding="utf-8")
    frag.write_text("out vec4 c; void main() { c = vec4(1.0); }\n", encoding="utf-8")
    assert read_shader_sources(vert, frag) == (vert.read_text(), frag.read_text())


def test_read_shader_sources_missing_file(tmp_path):
    vert = tmp_path / "default.vert"
    vert.write_text("void main() {}\n", encoding="utf-8")
    with pytest.raises(ShaderSourceError):
        read_shader_sources(vert, tmp_path / "missing.frag")