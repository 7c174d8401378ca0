import pytest

from fractview.xpm import (
    XpmError,
    parse_color,
    quoted_lines,
    read_xpm_file,
    split_words,
    strip_comments,
    xpm_to_image,
)


def test_split_words_spaces_and_tabs():
    assert split_words("  a  b\tc\t ") == ["a", "b", "c"]


def test_split_words_newline_is_not_separator():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_block_and_line():
    text = '/* head */"a" // tail\n"b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert list(quoted_lines(result)) == ["a", "b"]
    assert "head" not in result and "tail" not in result


def test_strip_comments_keeps_quoted_markers():
    text = '"x /* y */ z" "p // q"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated_block_blanks_rest():
    text = '"a" /* never closed "b"'
    result = strip_comments(text)
    assert list(quoted_lines(result)) == ["a"]
    assert len(result) == len(text)


def test_quoted_lines_skips_unpaired_quote():
    assert list(quoted_lines('x "one", "two",\n "three')) == ["one", "two"]


def test_parse_color_hex():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#00ff00", "ignored") == 0x00FF00


def test_parse_color_hex_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_color_names_ignore_case():
    assert parse_color("Red") == 0xFF0000
    assert parse_color("None") == -1


def test_parse_color_joins_extra_word():
    assert parse_color("light", "green") == 0x90EE90
    assert parse_color("red", "m") == 0


def test_parse_color_unknown_is_zero():
    assert parse_color("notacolour") == 0


def _sample():
    return [
        "2 2 3 1",
        "r c #FF0000",
        "g c #00FF00",
        ". c None",
        "rg",
        ".r",
    ]


def test_xpm_to_image_pixels():
    image = xpm_to_image(_sample())
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x00FF00
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_xpm_to_image_multi_char_keys():
    lines = [
        "2 1 2 3",
        "aaa c #0000FF",
        "bbb c white",
        "bbbaaa",
    ]
    image = xpm_to_image(lines)
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0x0000FF


def test_duplicate_keys_last_wins_for_short_keys():
    lines = ["1 1 2 1", "a c #000011", "a c #000022", "a"]
    assert xpm_to_image(lines).get_pixel(0, 0) == 0x000022


def test_duplicate_keys_first_wins_for_long_keys():
    lines = ["1 1 2 3", "abc c #000011", "abc c #000022", "abc"]
    assert xpm_to_image(lines).get_pixel(0, 0) == 0x000011


def test_undefined_key_gives_zero():
    lines = ["1 1 1 1", "a c #123456", "z"]
    assert xpm_to_image(lines).get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c #000000", "a", "a"],
        ["2 2 1"],
        ["x y z w"],
        ["1 1 1 1", "a s #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_invalid_xpm_raises(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_read_xpm_file(tmp_path):
    content = (
        "/* XPM */\n"
        "static char *sample[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 3 1",\n'
        '"r c #FF0000",\n'
        '"g c #00FF00",\n'
        '". c None",\n'
        "// pixels\n"
        '"rg",\n'
        '".r"\n'
        "};\n"
    )
    path = tmp_path / "sample.xpm"
    path.write_text(content, encoding="latin-1")
    from_file = read_xpm_file(path)
    from_lines = xpm_to_image(_sample())
    assert from_file.data == from_lines.data
    assert (from_file.width, from_file.height) == (2, 2)


def test_read_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "absent.xpm")