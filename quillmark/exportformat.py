"""Export file formats and the file-dialog filters that describe them."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ExportFormat",
    "all_formats",
    "HTML",
    "HTML5",
    "ODT",
    "ODF",
    "RTF",
    "DOCX",
    "PDF",
    "PDF_LATEX",
    "PDF_CONTEXT",
    "PDF_WKHTML",
    "EPUBV2",
    "EPUBV3",
    "FICTIONBOOK2",
    "LATEX",
    "LYX",
    "MEMOIR",
    "GROFFMAN",
    "MANPAGE",
]


@dataclass(frozen=True)
class ExportFormat:
    """A file format that a document can be exported to.

    ``file_filter`` holds the extensions only, enclosed in parentheses,
    for example ``"(*.html *.htm)"``.
    """

    name: str = ""
    file_filter: str = ""
    default_file_extension: str = ""
    file_extension_mandatory: bool = False

    def named_filter(self) -> str:
        """Return the name combined with the file filter for a file dialog."""
        result = f"{self.name} " if self.name else ""
        if self.file_filter:
            result += self.file_filter
        return result


_MAN_FILTER = "(*.man *.1 *.2 *.3 *.4 *.5 *.6 *.7 *.8)"
_TEX_FILTER = "(*.tex *.ltx *.latex)"

HTML = ExportFormat("HTML", "(*.html *.htm)", "html")
HTML5 = ExportFormat("HTML 5", "(*.html *.htm)", "html")
ODT = ExportFormat("OpenDocument Text", "(*.odt)", "odt", True)
ODF = ExportFormat("OpenDocument Flat XML Format", "(*.odt *.fodt *.xml)", "odt")
RTF = ExportFormat("Rich Text Format", "(*.rtf)", "rtf", True)
DOCX = ExportFormat("Word Document", "(*.docx)", "docx", True)
PDF = ExportFormat("PDF", "(*.pdf)", "pdf", True)
PDF_LATEX = ExportFormat("PDF (LaTeX)", "(*.pdf)", "pdf", True)
PDF_CONTEXT = ExportFormat("PDF (ConTeXt)", "(*.pdf)", "pdf", True)
PDF_WKHTML = ExportFormat("PDF (wkhtmltopdf)", "(*.pdf)", "pdf", True)
EPUBV2 = ExportFormat("EPUB v2 Book", "(*.epub)", "epub", True)
EPUBV3 = ExportFormat("EPUB v3 Book", "(*.epub)", "epub", True)
FICTIONBOOK2 = ExportFormat("FictionBook2 e-book", "(*.fb2)", "fb2", True)
LATEX = ExportFormat("LaTeX", _TEX_FILTER, "tex")
LYX = ExportFormat("LyX", "(*.lyx)", "lyx", True)
MEMOIR = ExportFormat("memoir", _TEX_FILTER, "tex")
GROFFMAN = ExportFormat("groff man page", _MAN_FILTER, "man", True)
MANPAGE = ExportFormat("man page", _MAN_FILTER, "man", True)

_ALL_FORMATS = (
    HTML,
    HTML5,
    ODT,
    ODF,
    RTF,
    DOCX,
    PDF,
    PDF_LATEX,
    PDF_CONTEXT,
    PDF_WKHTML,
    EPUBV2,
    EPUBV3,
    FICTIONBOOK2,
    LATEX,
    LYX,
    MEMOIR,
    GROFFMAN,
    MANPAGE,
)


def all_formats() -> list[ExportFormat]:
    """Return every predefined export format in declaration order."""
    return list(_ALL_FORMATS)