from badge_bitmap.utils import (
    format_seconds_compact,
    format_value,
    key_value_pairs_to_string,
    print_config_line,
)


def test_format_value():
    assert format_value(True) == "on"
    assert format_value(False) == "off"
    assert format_value(3936) == "3,936"
    assert format_value("246x128") == "246x128"


def test_key_value_pairs_to_string():
    text = key_value_pairs_to_string([("Bytes", 1968), ("Dither", False)])
    assert text == "Bytes: 1,968  Dither: off"


def test_format_seconds_compact():
    assert format_seconds_compact(0.0125) == "12.5ms"
    assert format_seconds_compact(2.5) == "2.500s"
    assert format_seconds_compact(75.0) == "1m 15.0s"


def test_print_config_line_goes_to_stderr(capsys):
    print_config_line("run", [("Size", "120x128"), ("Show", True)])
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "[debug] [run] Size: 120x128  Show: on\n"
