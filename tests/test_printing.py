import io

from samplekit.config import SampleKitConfig, set_config
from samplekit.printing import dash_line, format_item, print_items, print_range

DASHES = "\n" + "-" * 77 + "\n"


def test_print_items_writes_each_item_then_dash_line():
    buf = io.StringIO()
    print_items([1, 2, 3], ", ", buf)
    assert buf.getvalue() == "1, 2, 3, " + DASHES


def test_print_items_defaults_to_stdout_and_space(capsys):
    print_items(["a", "b"])
    assert capsys.readouterr().out == "a b " + DASHES


def test_print_items_empty_container_prints_only_dash_line():
    buf = io.StringIO()
    print_items([], file=buf)
    assert buf.getvalue() == DASHES


def test_pairs_are_bracketed():
    assert format_item((1, "x")) == "[1, x]"
    assert format_item((1, (2, 3))) == "[1, [2, 3]]"
    assert format_item((1, 2, 3)) == "(1, 2, 3)"

    buf = io.StringIO()
    print_items({"k": 5}.items(), " ", buf)
    assert buf.getvalue().startswith("[k, 5] ")


def test_print_range_prints_slice_of_any_iterable():
    buf = io.StringIO()
    print_range(iter(range(10)), 2, 5, "-", buf)
    assert buf.getvalue() == "2-3-4-" + DASHES


def test_dash_line_width_follows_config():
    set_config(SampleKitConfig(dash_width=5, separator="|"))
    buf = io.StringIO()
    print_items([1, 2], file=buf)
    assert buf.getvalue() == "1|2|\n-----\n"

    buf = io.StringIO()
    dash_line(buf, width=3)
    assert buf.getvalue() == "\n---\n"


def test_mappings_print_key_value_pairs():
    buf = io.StringIO()
    print_items({"a": 1, "b": 2}, " ", buf)
    assert buf.getvalue() == "[a, 1] [b, 2] " + DASHES

    buf = io.StringIO()
    print_range({"a": 1, "b": 2, "c": 3}, 1, 3, " ", buf)
    assert buf.getvalue() == "[b, 2] [c, 3] " + DASHES
