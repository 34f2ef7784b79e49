import pytest

from spkg.metadata import Metadata, MetadataParseError


@pytest.mark.parametrize(
    ("text", "srcpkg", "binpkg"),
    [
        ("s1:b1", True, True),
        ("s1:b0", True, False),
        ("s0:b1", False, True),
        ("b1", False, True),
        ("s1", True, False),
        ("s1:s0", False, False),
    ],
)
def test_parse(text, srcpkg, binpkg):
    assert Metadata.parse(text) == Metadata(srcpkg=srcpkg, binpkg=binpkg)


@pytest.mark.parametrize("text", ["x1", "s1:b2", "", "s1:"])
def test_parse_rejects_unknown_parts(text):
    with pytest.raises(MetadataParseError):
        Metadata.parse(text)


def test_parse_error_message():
    with pytest.raises(MetadataParseError, match="Invalid format"):
        Metadata.parse("bogus")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        Metadata.parse("bogus")


def test_row_value_ignores_unknown_parts():
    assert Metadata.from_row_value("s1:junk:b1") == Metadata(srcpkg=True, binpkg=True)


def test_row_value_empty_is_all_false():
    assert Metadata.from_row_value("") == Metadata(srcpkg=False, binpkg=False)


@pytest.mark.parametrize("text", ["s1:b1", "s0:b0", "s1:b0", "s0:b1"])
def test_lenient_and_strict_agree_on_valid_text(text):
    assert Metadata.from_row_value(text) == Metadata.parse(text)