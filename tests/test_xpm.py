import pytest

from sotile.colors import lookup_color
from sotile.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    split_words,
    strip_comments,
)

SMALL = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment():
    text = '/* hello */"ab"'
    result = strip_comments(text)
    assert result == " " * len("/* hello */") + '"ab"'


def test_strip_line_comment_includes_newline():
    text = '// note\n"ab"'
    assert strip_comments(text) == " " * len("// note\n") + '"ab"'


def test_comment_markers_in_quotes_are_kept():
    text = '"a/*b*/c" "d//e"'
    assert strip_comments(text) == text


def test_strip_preserves_length():
    text = 'x /* a */ "q" // tail\n"r"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert quoted_lines(result) == ["q", "r"]


def test_quoted_lines():
    assert quoted_lines('x "a" y "b c" z') == ["a", "b c"]


def test_parse_small_image():
    image = parse_xpm(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == ((0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000))


def test_none_colour_becomes_transparent_pixel():
    image = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert image.pixels[0][0] == 0xFF000000


def test_named_colour():
    image = parse_xpm(["1 1 1 1", "r c red", "r"])
    assert image.pixels == ((lookup_color("red"),),)
    assert image.pixels[0][0] == 0xFF0000


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "r c ghost white", "r"])
    assert image.pixels[0][0] == lookup_color("ghost", "white")


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels[0][0] == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels[0][0] == 0x000001


def test_unknown_key_gives_black():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixels[0][0] == 0


def test_multi_char_keys():
    image = parse_xpm(["2 1 2 2", "aa c #000011", "bb c #000022", "bbaa"])
    assert image.pixels == ((0x000022, 0x000011),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s thing", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_bad_input_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        parse_xpm(["x y z w"])


def test_to_bytes_little_and_big():
    image = XpmImage(1, 1, ((0x112233,),))
    assert image.to_bytes(4, False) == bytes([0x33, 0x22, 0x11, 0x00])
    assert image.to_bytes(4, True) == bytes([0x00, 0x11, 0x22, 0x33])


def test_to_bytes_transparent_little_endian():
    image = XpmImage(1, 1, ((TRANSPARENT,),))
    assert image.to_bytes(4, False) == bytes([0x00, 0x00, 0x00, 0xFF])


def test_to_bytes_length_and_reversal():
    image = parse_xpm(SMALL)
    little = image.to_bytes(3, False)
    big = image.to_bytes(3, True)
    assert len(little) == image.width * image.height * 3
    chunks_l = [little[i:i + 3] for i in range(0, len(little), 3)]
    chunks_b = [big[i:i + 3] for i in range(0, len(big), 3)]
    assert [c[::-1] for c in chunks_l] == chunks_b


def test_to_bytes_rejects_zero_width():
    with pytest.raises(ValueError):
        parse_xpm(SMALL).to_bytes(0, False)


def test_read_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "// width height colours chars\n"
        '"2 1 2 1",\n'
        '"a c #0000FF", /* blue */\n'
        '"b c None",\n'
        '"ab"\n'
        "};\n"
    )
    image = read_xpm_file(path)
    assert image.pixels == ((0x0000FF, TRANSPARENT),)


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "absent.xpm")