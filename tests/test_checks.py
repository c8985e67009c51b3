import io

import pytest

from starjumper.checks import (
    CheckFailure,
    OnFail,
    is_str_eq,
    is_substr,
    print_int_expression,
    print_str_diff,
    print_str_expression,
    verify_false,
    verify_int_eq,
    verify_none,
    verify_not_none,
    verify_str_contains,
    verify_str_eq,
    verify_true,
)

LOCATION = "file.c:10: in test_file():"


def test_verify_false_passes():
    out = io.StringIO()
    verify_false("file.c", 10, "test_file", "value", False, out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_false_fails():
    out = io.StringIO()
    verify_false("file.c", 10, "test_file", "value", True, out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`value` expected to be false" in text


def test_verify_int_eq_passes():
    out = io.StringIO()
    verify_int_eq("file.c", 10, "test_file", "i", 42, "42", 42, out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_int_eq_fails():
    out = io.StringIO()
    verify_int_eq("file.c", 10, "test_file", "i", 17, "42", 42, out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`i` expected to equal `42`" in text
    assert "int1 (i): 17" in text
    assert "int2: 42" in text


def test_verify_not_none_passes():
    out = io.StringIO()
    verify_not_none("file.c", 10, "test_file", "ptr", 42, out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_not_none_fails():
    out = io.StringIO()
    verify_not_none("file.c", 10, "test_file", "ptr", None, out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`ptr` expected to be non-NULL" in text


def test_verify_none_passes():
    out = io.StringIO()
    verify_none("file.c", 10, "test_file", "ptr", None, out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_none_fails():
    out = io.StringIO()
    verify_none("file.c", 10, "test_file", "ptr", 42, out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`ptr` expected to be NULL" in text


def test_verify_str_contains_passes():
    out = io.StringIO()
    verify_str_contains(
        "file.c", 10, "test_file", "str", "foobar", "substring", "foo", out, OnFail.CONTINUE
    )
    assert out.getvalue() == ""


def test_verify_str_contains_fails():
    out = io.StringIO()
    verify_str_contains(
        "file.c", 10, "test_file", "line", "foo", "fragment", "bar", out, OnFail.CONTINUE
    )
    text = out.getvalue()
    assert LOCATION in text
    assert "`line` expected to contain `fragment`" in text
    assert 'str (line): "foo"' in text
    assert 'substr (fragment): "bar"' in text


def test_verify_str_eq_passes():
    out = io.StringIO()
    verify_str_eq("file.c", 10, "test_file", "name1", "foo", "name2", "foo", out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_str_eq_fails():
    out = io.StringIO()
    verify_str_eq("file.c", 10, "test_file", "name1", "foo", "name2", "bar", out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`name1` expected to equal `name2`" in text
    assert 'str1 (name1): "foo"' in text
    assert 'str2 (name2): "bar"' in text


def test_verify_str_eq_fails_when_multiline():
    out = io.StringIO()
    verify_str_eq(
        "file.c", 10, "test_file",
        "name1", "foo\n  bar\n  baz\n",
        "name2", "foo\n  xam\n  baz\n",
        out, OnFail.CONTINUE,
    )
    text = out.getvalue()
    assert LOCATION in text
    assert "`name1` expected to equal `name2`" in text
    assert "str1 (name1): 3 lines" in text
    assert "str2 (name2): 3 lines" in text
    assert '====== "foo"' in text
    assert 'str1 < "  bar"' in text
    assert 'str2 > "  xam"' in text
    assert '====== "  baz"' in text


def test_verify_true_passes():
    out = io.StringIO()
    verify_true("file.c", 10, "test_file", "value", True, out, OnFail.CONTINUE)
    assert out.getvalue() == ""


def test_verify_true_fails():
    out = io.StringIO()
    verify_true("file.c", 10, "test_file", "value", False, out, OnFail.CONTINUE)
    text = out.getvalue()
    assert LOCATION in text
    assert "`value` expected to be true" in text


def test_halt_raises_after_reporting():
    out = io.StringIO()
    with pytest.raises(CheckFailure) as excinfo:
        verify_true("file.c", 10, "test_file", "value", False, out, OnFail.HALT)
    assert "`value` expected to be true" in str(excinfo.value)
    assert LOCATION in out.getvalue()


def test_is_substr():
    assert is_substr("foobar", "foo")
    assert is_substr("foo", "foo")
    assert is_substr("foo", "")
    assert is_substr("", "")
    assert not is_substr("foo", None)
    assert not is_substr(None, "bar")
    assert not is_substr(None, None)
    assert not is_substr("foo", "bar")


def test_is_str_eq():
    foo1 = "foo"
    foo2 = "".join(["f", "oo"])
    assert is_str_eq(None, None)
    assert is_str_eq(foo1, foo1)
    assert is_str_eq(foo1, foo2)
    assert not is_str_eq("foo", None)
    assert not is_str_eq(None, "foo")
    assert not is_str_eq("foo", "bar")


def test_print_int_expression():
    out = io.StringIO()
    print_int_expression(out, "int1", "i", 42)
    assert "int1 (i): 42\n" in out.getvalue()


def test_print_int_expression_for_int_literal():
    out = io.StringIO()
    print_int_expression(out, "int1", "42", 42)
    assert "int1: 42\n" in out.getvalue()


def test_print_str_diff_for_equal_line_count():
    out = io.StringIO()
    print_str_diff(out, "foo\n  bar\n  baz\n", "foo\n  xam\n  baz\n")
    text = out.getvalue()
    assert '====== "foo"' in text
    assert 'str1 < "  bar"' in text
    assert 'str2 > "  xam"' in text
    assert '====== "  baz"' in text


def test_print_str_diff_for_different_line_count():
    out = io.StringIO()
    print_str_diff(out, "foo\n  bar\n  baz\n", "foo\n  xam")
    text = out.getvalue()
    assert '====== "foo"' in text
    assert 'str1 < "  bar"' in text
    assert 'str2 > "  xam"' in text
    assert 'str1 < "  baz"' in text
    assert 'str2 > ""' in text


def test_print_str_expression():
    out = io.StringIO()
    print_str_expression(out, "str", "buffer", "Hello!")
    assert 'str (buffer): "Hello!"\n' in out.getvalue()


def test_print_str_expression_for_string_literal():
    out = io.StringIO()
    print_str_expression(out, "str", '"Hello!"', "Hello!")
    assert 'str: "Hello!"\n' in out.getvalue()


def test_print_str_expression_for_null_value():
    out = io.StringIO()
    print_str_expression(out, "str", "title", None)
    assert "str (title): NULL\n" in out.getvalue()