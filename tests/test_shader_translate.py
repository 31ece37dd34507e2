from matgui.shader_translate import FRAGMENT_SHADER, VERTEX_SHADER, translate_shader

HEADER = "#version 300 es\n\nprecision mediump float;\n"


def last_line(code):
    lines = [line for line in code.split("\n") if line]
    return lines[-1] if lines else ""


def test_frag_color_out():
    code = (
        "#version 330\n"
        "out vec4 fragColor;\n"
        "void main() {\n"
        "   fragColor = vec4(1, 1, 1);\n"
        "}"
    )
    res = translate_shader(code, FRAGMENT_SHADER)
    assert res.startswith(HEADER)
    assert "#version 330" not in res
    assert "out vec4 fragColor;\n" in res
    assert "\nfragColor = vec4(1, 1, 1);\n" in res
    assert res.endswith("}\n")


def test_frag_in_is_kept():
    res = last_line(translate_shader(" in apa;", FRAGMENT_SHADER))
    assert res == "in apa;"


def test_vertex_out_is_kept():
    res = last_line(translate_shader(" out apa;", VERTEX_SHADER))
    assert res == "out apa;"


def test_vertex_in_is_kept():
    res = last_line(translate_shader(" in apa;", VERTEX_SHADER))
    assert res == "in apa;"


def test_version():
    res = last_line(translate_shader("#version 330", VERTEX_SHADER))
    assert res != "#version 330"
    assert res == "precision mediump float;"


def test_remove_layout():
    code = "layout (location = 0) in vec4 vPosition;"
    res = last_line(translate_shader(code, VERTEX_SHADER))
    assert res != code
    assert res == "in vec4 vPosition;"


def test_texture2d_to_texture():
    res = last_line(translate_shader("texture2D texture2D", FRAGMENT_SHADER))
    assert res == "texture texture"


def test_empty_source_gives_header_only():
    assert translate_shader("") == HEADER


def test_blank_lines_are_kept():
    res = translate_shader("a\n\nb\n")
    assert res == HEADER + "a\n\nb\n"