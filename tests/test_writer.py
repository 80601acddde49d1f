"""Tests for the line writer, output root and template rendering."""

import pytest

from rulegen.lib.errors import OutputError, TemplateRenderError
from rulegen.lib.template import render
from rulegen.lib.writer import LineWriter, Output


def test_write_formats_args():
    out = LineWriter()
    out.write("load(%s)", '":a.bzl"')
    assert out.lines == ['load(":a.bzl")']


def test_write_without_args_keeps_percent_signs():
    out = LineWriter()
    out.write("100% literal")
    assert out.lines == ["100% literal"]


def test_write_splits_multiline_strings():
    """Each entry is one logical line."""
    out = LineWriter()
    out.write("a\nb\nc")
    out.blank()
    assert out.lines == ["a", "b", "c", ""]
    assert out.content() == "a\nb\nc\n"


def test_template_indents_non_empty_lines():
    out = LineWriter()
    out.template("{{ first }}\n\n{{ second }}", {"first": "x", "second": "y"}, "   ")
    assert out.lines == ["   x", "", "   y"]


def test_template_block_tags_leave_no_blank_lines():
    out = LineWriter()
    out.template(
        "start\n{% for item in items %}\n- {{ item }}\n{% endfor %}\nend",
        {"items": ["a", "b"]},
    )
    assert out.lines == ["start", "- a", "- b", "end"]


def test_template_undefined_variable_raises():
    out = LineWriter()
    with pytest.raises(TemplateRenderError):
        out.template("{{ missing }}", {})


def test_render_syntax_error_names_template():
    with pytest.raises(TemplateRenderError) as exc_info:
        render("{% for %}", {}, name="broken.tmpl")
    assert "broken.tmpl" in exc_info.value.message


def test_template_file_renders(tmp_path):
    path = tmp_path / "header.md"
    path.write_text("Ref {{ ref }}\n")
    out = LineWriter()
    out.template_file(path, {"ref": "1.2.3"})
    assert out.lines == ["Ref 1.2.3", ""]


def test_template_file_keeps_trailing_newline(tmp_path):
    """A file rendered from a template ends the way the template does."""
    path = tmp_path / "index.rst"
    path.write_text("   lang/*\n")
    out = LineWriter()
    out.template_file(path, {})

    Output(tmp_path / "out").write(out, "index.rst")
    assert (tmp_path / "out" / "index.rst").read_bytes() == b"   lang/*\n"


def test_template_file_without_trailing_newline(tmp_path):
    path = tmp_path / "footer.md"
    path.write_text("## Footer")
    out = LineWriter()
    out.template_file(path, {})
    assert out.content() == "## Footer"


def test_template_file_missing_raises_with_path(tmp_path):
    path = tmp_path / "missing.md"
    out = LineWriter()
    with pytest.raises(TemplateRenderError) as exc_info:
        out.template_file(path, {})
    assert exc_info.value.source == str(path)


def test_template_file_invalid_utf8_raises_with_path(tmp_path):
    path = tmp_path / "header.md"
    path.write_bytes(b"# Header\n\xff\xfe\n")
    out = LineWriter()
    with pytest.raises(TemplateRenderError) as exc_info:
        out.template_file(path, {})
    assert exc_info.value.source == str(path)
    assert isinstance(exc_info.value.error, UnicodeDecodeError)


def test_must_write_creates_parents_and_overwrites(tmp_path):
    path = tmp_path / "a" / "b" / "file.txt"
    path.parent.mkdir(parents=True)
    path.write_text("old content that is longer")

    out = LineWriter()
    out.write("new")
    out.must_write(path)

    assert path.read_text() == "new"


def test_must_write_to_directory_raises(tmp_path):
    out = LineWriter()
    out.write("x")
    with pytest.raises(OutputError) as exc_info:
        out.must_write(tmp_path)
    assert exc_info.value.path == tmp_path


def test_output_skips_unchanged_files(tmp_path):
    output = Output(tmp_path)
    out = LineWriter()
    out.write("same")

    assert output.write(out, "dir", "file.txt") is True
    assert output.write(out, "dir", "file.txt") is False
    assert output.written == [tmp_path / "dir" / "file.txt"]
    assert output.unchanged == [tmp_path / "dir" / "file.txt"]


def test_output_force_rewrites_unchanged_files(tmp_path):
    output = Output(tmp_path, force=True)
    out = LineWriter()
    out.write("same")

    assert output.write(out, "file.txt") is True
    assert output.write(out, "file.txt") is True
    assert output.unchanged == []


def test_output_writes_changed_content(tmp_path):
    output = Output(tmp_path)
    first = LineWriter()
    first.write("one")
    second = LineWriter()
    second.write("two")

    output.write(first, "file.txt")
    assert output.write(second, "file.txt") is True
    assert (tmp_path / "file.txt").read_text() == "two"


def test_empty_writer_writes_empty_file(tmp_path):
    output = Output(tmp_path)
    output.write(LineWriter(), "WORKSPACE")
    assert (tmp_path / "WORKSPACE").read_text() == ""
