import pytest

from textfit.fonts import FontSpec, coerce_font, to_font_spec


def test_to_string_omits_missing_fields():
    assert FontSpec(family="Arial", size="16px").to_string() == "16px Arial"
    assert FontSpec().to_string() == ""


def test_to_string_field_order():
    spec = FontSpec(family="Arial", style="italic", weight="bold", size="16px")
    assert str(spec) == "italic bold 16px Arial"


def test_numeric_size_serializes_as_pixels():
    assert FontSpec(family="Arial", size=16).to_string() == "16px Arial"
    assert FontSpec(size=10.5).to_string() == "10.5px"


def test_from_string():
    spec = FontSpec.from_string("italic bold 16px/1.2 'DejaVu Sans', sans-serif")
    assert spec.style == "italic"
    assert spec.weight == "bold"
    assert spec.size == "16px"
    assert spec.families() == ["DejaVu Sans", "sans-serif"]


def test_from_string_family_only():
    assert FontSpec.from_string("Arial") == FontSpec(family="Arial")


def test_from_string_numeric_weight():
    spec = FontSpec.from_string("700 12pt Verdana")
    assert spec.weight == "700"
    assert spec.is_bold
    assert spec.pixel_size() == 16


def test_from_dict_ignores_unknown_and_empty_keys():
    spec = FontSpec.from_dict({"family": "Arial", "style": None, "color": "red"})
    assert spec == FontSpec(family="Arial")


@pytest.mark.parametrize("size, expected", [
    (None, 16),
    (20, 20),
    ("24px", 24),
    ("9pt", 12),
    ("1.5em", 16),
])
def test_pixel_size(size, expected):
    assert FontSpec(size=size).pixel_size() == expected


def test_is_bold():
    assert FontSpec(weight="bold").is_bold
    assert not FontSpec(weight="normal").is_bold
    assert not FontSpec(weight="400").is_bold
    assert not FontSpec().is_bold


def test_coerce_font():
    assert coerce_font("16px Arial") == "16px Arial"
    assert coerce_font({"family": "Arial"}) == FontSpec(family="Arial")
    with pytest.raises(TypeError, match="font must be"):
        coerce_font(16)


def test_to_font_spec_parses_strings():
    assert to_font_spec("bold 12px Arial") == FontSpec(family="Arial", weight="bold", size="12px")


@pytest.mark.parametrize("shorthand", [
    "italic bold 24px Arial",
    "bold italic 24px Arial",
    "small-caps bold italic 24px Arial",
    "italic condensed bold 24px Arial",
])
def test_from_string_accepts_style_and_weight_in_any_order(shorthand):
    spec = FontSpec.from_string(shorthand)
    assert spec == FontSpec(family="Arial", style="italic", weight="bold", size="24px")
    assert spec.pixel_size() == 24


def test_from_string_skips_normal_keywords():
    assert FontSpec.from_string("normal 700 12px Arial") == FontSpec(
        family="Arial", weight="700", size="12px")
    assert FontSpec.from_string("normal normal 12px Arial") == FontSpec(family="Arial", size="12px")
