from ghostty_themes.theme.engine import ThemeColors, parse_theme_file

from .conftest import DRACULA


def test_empty_file_gives_defaults():
    colors = parse_theme_file("")
    assert colors.background == "#1a1a1a"
    assert colors.foreground == "#ffffff"
    assert colors.cursor == "#ffffff"
    assert colors.palette == ["#888888"] * 16


def test_no_recognized_directives_gives_defaults():
    colors = parse_theme_file("font-size = 14\nwindow-padding-x = 4\nnot a directive\n")
    assert colors == ThemeColors()


def test_basic_keys():
    colors = parse_theme_file(DRACULA)
    assert colors.background == "#282a36"
    assert colors.foreground == "#f8f8f2"
    assert colors.cursor == "#f8f8f2"
    assert colors.palette[:3] == ["#21222c", "#ff5555", "#50fa7b"]
    assert colors.palette[3:] == ["#888888"] * 13


def test_values_are_trimmed_and_kept_verbatim():
    colors = parse_theme_file("  background   =   not-a-color  \nforeground=282a36")
    assert colors.background == "not-a-color"
    assert colors.foreground == "282a36"


def test_cursor_color_key_maps_to_cursor():
    colors = parse_theme_file("cursor = #123456\ncursor-color = #abcdef")
    assert colors.cursor == "#abcdef"


def test_palette_last_slot():
    colors = parse_theme_file("palette = 15=#eeeeee")
    assert colors.palette[15] == "#eeeeee"
    assert len(colors.palette) == 16


def test_palette_out_of_range_ignored():
    colors = parse_theme_file("palette = 16=#ff0000\npalette = 99=#ff0000\npalette = -1=#ff0000")
    assert colors.palette == ["#888888"] * 16


def test_malformed_palette_ignored():
    colors = parse_theme_file("palette = #ff0000\npalette = x=#ff0000\npalette = 3=")
    assert colors.palette == ["#888888"] * 16


def test_comments_and_blank_lines_ignored():
    text = "\n   \n# background = #000000\n   # palette = 0=#000000\nbackground = #101010\n"
    colors = parse_theme_file(text)
    assert colors.background == "#101010"
    assert colors.palette[0] == "#888888"


def test_later_directive_wins():
    colors = parse_theme_file("background = #111111\nbackground = #222222")
    assert colors.background == "#222222"


def test_crlf_line_endings():
    colors = parse_theme_file("background = #111111\r\nforeground = #222222\r\n")
    assert colors.background == "#111111"
    assert colors.foreground == "#222222"


def test_palettes_are_not_shared_between_records():
    first = parse_theme_file("palette = 0=#000000")
    second = parse_theme_file("")
    assert first.palette[0] == "#000000"
    assert second.palette[0] == "#888888"


def test_from_dict_pads_palette():
    colors = ThemeColors.from_dict({"background": "#000000", "palette": ["#111111"]})
    assert colors.background == "#000000"
    assert colors.palette[0] == "#111111"
    assert len(colors.palette) == 16


def test_only_newlines_separate_lines():
    # Form feed and vertical tab are not line breaks in theme files
    colors = parse_theme_file("background = #111111\x0cforeground = #222222\nforeground = #333333")
    assert colors.background == "#111111\x0cforeground = #222222"
    assert colors.foreground == "#333333"
