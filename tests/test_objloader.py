import pytest

from jmart.objloader import ObjParseError, index_vbo, load_obj, parse_obj
from jmart.vertex import Color, Position, TexCoord

TRIANGLE = """# a triangle
v 0 0 0
v 1 0 0
v 0 1 0
vt 0 0
vt 1 0
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1
""".splitlines(keepends=True)

QUAD = """v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
""".splitlines(keepends=True)


def test_parse_triangle():
    positions, uvs, normals = parse_obj(TRIANGLE)
    assert positions == [Position(0, 0, 0), Position(1, 0, 0), Position(0, 1, 0)]
    assert uvs == [TexCoord(0, 0), TexCoord(1, 0), TexCoord(0, 1)]
    assert normals == [Position(0, 0, 1)] * 3


def test_parse_quad_splits_into_two_triangles():
    positions, uvs, normals = parse_obj(QUAD)
    corners = [Position(0, 0, 0), Position(1, 0, 0), Position(1, 1, 0), Position(0, 1, 0)]
    order = [0, 1, 2, 2, 3, 0]
    assert positions == [corners[n] for n in order]
    assert len(uvs) == len(normals) == 6


def test_parse_floats_with_signs_and_exponents():
    lines = ["v -1.5 2e1 .25\n", "vt 0.5 0.75\n", "vn 0 -1 0\n", "f 1/1/1 1/1/1 1/1/1\n"]
    positions, uvs, normals = parse_obj(lines)
    assert positions[0] == Position(-1.5, 20.0, 0.25)
    assert uvs[0] == TexCoord(0.5, 0.75)
    assert normals[0] == Position(0, -1, 0)


def test_face_without_texture_indices_is_rejected():
    lines = ["v 0 0 0\n", "vn 0 0 1\n", "f 1//1 1//1 1//1\n"]
    with pytest.raises(ObjParseError):
        parse_obj(lines)


def test_out_of_range_index_is_rejected():
    lines = ["v 0 0 0\n", "vt 0 0\n", "vn 0 0 1\n", "f 1/1/1 2/1/1 1/1/1\n"]
    with pytest.raises(ObjParseError):
        parse_obj(lines)


def test_load_obj_from_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("".join(TRIANGLE))
    assert load_obj(path) == parse_obj(TRIANGLE)


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "missing.obj")


def test_index_vbo_merges_shared_corners():
    indices, vertices = index_vbo(*parse_obj(QUAD))
    assert indices == [0, 1, 2, 2, 3, 0]
    assert len(vertices) == 4
    assert all(vertex.color == Color() for vertex in vertices)


def test_index_vbo_round_trip():
    positions, uvs, normals = parse_obj(QUAD)
    indices, vertices = index_vbo(positions, uvs, normals)
    assert [vertices[n].pos for n in indices] == positions
    assert [vertices[n].tex_coord for n in indices] == uvs
    assert [vertices[n].normal for n in indices] == normals


def test_index_vbo_length_mismatch():
    with pytest.raises(ValueError):
        index_vbo([Position()], [], [Position()])