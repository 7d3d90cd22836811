import dataclasses

import pytest

from quillmark import exportformat
from quillmark.exportformat import ExportFormat, all_formats


def test_named_filter_combines_name_and_filter():
    assert exportformat.HTML.named_filter() == "HTML (*.html *.htm)"


def test_named_filter_without_name_is_filter_only():
    fmt = ExportFormat("", "(*.txt)", "txt")
    assert fmt.named_filter() == "(*.txt)"


def test_named_filter_without_filter_keeps_trailing_space():
    fmt = ExportFormat("Plain", "")
    assert fmt.named_filter() == "Plain "


def test_empty_format_has_empty_named_filter():
    fmt = ExportFormat()
    assert fmt.named_filter() == ""
    assert fmt.file_extension_mandatory is False


def test_named_filter_starts_with_name_and_ends_with_filter():
    for fmt in all_formats():
        assert fmt.named_filter() == f"{fmt.name} {fmt.file_filter}"


def test_all_formats_order_and_count():
    formats = all_formats()
    assert len(formats) == 18
    assert formats[0] is exportformat.HTML
    assert formats[-1] is exportformat.MANPAGE


def test_all_formats_returns_fresh_list():
    formats = all_formats()
    formats.clear()
    assert len(all_formats()) == 18


def test_format_names_are_unique():
    names = [fmt.name for fmt in all_formats()]
    assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "fmt, extension, mandatory",
    [
        (exportformat.HTML, "html", False),
        (exportformat.ODT, "odt", True),
        (exportformat.ODF, "odt", False),
        (exportformat.DOCX, "docx", True),
        (exportformat.LATEX, "tex", False),
        (exportformat.MEMOIR, "tex", False),
        (exportformat.LYX, "lyx", True),
        (exportformat.GROFFMAN, "man", True),
    ],
)
def test_default_extensions_and_mandatory_flags(fmt, extension, mandatory):
    assert fmt.default_file_extension == extension
    assert fmt.file_extension_mandatory is mandatory


def test_predefined_formats_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        exportformat.PDF.name = "Other"
    assert exportformat.PDF.named_filter() == "PDF (*.pdf)"


def test_formats_are_usable_as_keys():
    table = {fmt: fmt.name for fmt in all_formats()}
    assert table[exportformat.EPUBV3] == "EPUB v3 Book"