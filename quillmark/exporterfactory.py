"""Exporters that render Markdown through external command-line processors.

The factory does not probe the system itself: the caller supplies the
versions of the processors that are installed (see :func:`parse_version`
for turning a ``--version`` banner into a version tuple).
"""

from __future__ import annotations

import logging
import re
import shlex
from collections.abc import Iterable
from typing import Any

from quillmark.exportformat import (
    DOCX,
    EPUBV2,
    EPUBV3,
    FICTIONBOOK2,
    GROFFMAN,
    HTML,
    HTML5,
    LATEX,
    LYX,
    MANPAGE,
    MEMOIR,
    ODF,
    ODT,
    PDF_CONTEXT,
    PDF_LATEX,
    PDF_WKHTML,
    RTF,
    ExportFormat,
)

__all__ = [
    "CommandLineExporter",
    "ExporterFactory",
    "parse_version",
    "SMART_TYPOGRAPHY_ARG",
    "OUTPUT_FILE_PATH_VAR",
]

logger = logging.getLogger(__name__)

SMART_TYPOGRAPHY_ARG = "${SMART_TYPOGRAPHY_ARG}"
OUTPUT_FILE_PATH_VAR = "${OUTPUT_FILE_PATH}"

Version = tuple[int, ...]

_VERSION_WITH_V = re.compile(r"v(\d+(\.\d+)*)")
_VERSION_PLAIN = re.compile(r"(\d+(\.\d+)*)")


def parse_version(output: str) -> Version | None:
    """Extract a version number from a program's ``--version`` output.

    A ``v1.6.3`` form is preferred over a bare ``1.6.3``.  Returns None
    when no version number can be found.
    """
    match = _VERSION_WITH_V.search(output) or _VERSION_PLAIN.search(output)
    if match is None:
        return None
    return tuple(int(part) for part in match.group(1).split("."))


class CommandLineExporter:
    """Renders Markdown by running a command-line processor.

    Command templates may contain :data:`SMART_TYPOGRAPHY_ARG`, replaced by
    the on or off argument for smart typography, and
    :data:`OUTPUT_FILE_PATH_VAR`, replaced by the output file path.
    """

    def __init__(
        self,
        name: str,
        *,
        smart_typography_on_argument: str = "",
        smart_typography_off_argument: str = "",
        html_render_command: str | None = None,
    ) -> None:
        self.name = name
        self.smart_typography_on_argument = smart_typography_on_argument
        self.smart_typography_off_argument = smart_typography_off_argument
        self.html_render_command = html_render_command
        self._file_commands: dict[ExportFormat, str] = {}

    def __repr__(self) -> str:
        return f"CommandLineExporter({self.name!r})"

    @property
    def supports_smart_typography(self) -> bool:
        """True if the processor has an argument to turn smart typography on."""
        return bool(self.smart_typography_on_argument)

    def add_file_export_command(self, export_format: ExportFormat, command: str) -> None:
        """Register the command template used to export to ``export_format``."""
        self._file_commands[export_format] = command

    def supported_formats(self) -> list[ExportFormat]:
        """Return the file formats this exporter can write, in registration order."""
        return list(self._file_commands)

    def html_command(self, smart_typography: bool) -> list[str]:
        """Return the argument list that renders Markdown on stdin to HTML."""
        if self.html_render_command is None:
            raise ValueError(f"exporter {self.name!r} has no HTML render command")
        return self._expand(self.html_render_command, smart_typography, None)

    def export_command(
        self,
        export_format: ExportFormat,
        output_path: str,
        smart_typography: bool,
    ) -> list[str]:
        """Return the argument list that exports to ``output_path``."""
        try:
            template = self._file_commands[export_format]
        except KeyError:
            raise ValueError(
                f"exporter {self.name!r} does not support {export_format.name!r}"
            ) from None
        return self._expand(template, smart_typography, output_path)

    def _expand(
        self, template: str, smart_typography: bool, output_path: str | None
    ) -> list[str]:
        smart_arg = (
            self.smart_typography_on_argument
            if smart_typography
            else self.smart_typography_off_argument
        )
        tokens = shlex.split(template.replace(SMART_TYPOGRAPHY_ARG, smart_arg))
        if output_path is None:
            return tokens
        return [token.replace(OUTPUT_FILE_PATH_VAR, output_path) for token in tokens]


def _pandoc_exporter(name: str, input_format: str) -> CommandLineExporter:
    exporter = CommandLineExporter(
        name,
        smart_typography_on_argument="+smart",
        smart_typography_off_argument="-smart",
        html_render_command=(
            f"pandoc -f {input_format}{SMART_TYPOGRAPHY_ARG} -t html --mathjax"
        ),
    )

    def standard(target: str) -> str:
        return (
            f"pandoc -f {input_format}{SMART_TYPOGRAPHY_ARG} -t {target} "
            f"--standalone --quiet -o {OUTPUT_FILE_PATH_VAR}"
        )

    margins = "-Vmargin-left=1in -Vmargin-right=1in -Vmargin-top=1in -Vmargin-bottom=1in"
    ebook = " --mathml --toc --toc-depth 6"

    exporter.add_file_export_command(HTML, standard("html") + " --mathjax")
    exporter.add_file_export_command(HTML5, standard("html5") + " --mathjax")
    exporter.add_file_export_command(ODT, standard("odt"))
    exporter.add_file_export_command(ODF, standard("opendocument"))
    exporter.add_file_export_command(RTF, standard("rtf"))
    exporter.add_file_export_command(DOCX, standard("docx"))
    exporter.add_file_export_command(
        PDF_LATEX,
        standard("latex")
        + " -Vlinkcolor=blue -Vcitecolor=blue -Vurlcolor=blue -Vtoccolor=blue "
        + margins
        + " ",
    )
    exporter.add_file_export_command(
        PDF_CONTEXT,
        standard("context")
        + " --variable pagenumbering:location=footer --variable layout:header=0mm"
        " --variable layout:top=1in --variable layout:bottom=1in"
        " --variable layout:leftmargin=1in --variable layout:rightmargin=1in"
        " -Vlinkcolor=blue",
    )
    # MathJax makes pandoc hang when producing HTML for wkhtmltopdf; KaTeX works.
    exporter.add_file_export_command(
        PDF_WKHTML, standard("html5") + " --katex " + margins
    )
    exporter.add_file_export_command(EPUBV2, standard("epub") + ebook)
    exporter.add_file_export_command(EPUBV3, standard("epub3") + ebook)
    exporter.add_file_export_command(FICTIONBOOK2, standard("fb2") + ebook)
    exporter.add_file_export_command(LATEX, standard("latex"))
    exporter.add_file_export_command(GROFFMAN, standard("man"))
    return exporter


def _multimarkdown_exporter(major: int) -> CommandLineExporter:
    exporter = CommandLineExporter(
        "MultiMarkdown",
        # --smart was removed in version 6, where it became the default.
        smart_typography_on_argument="--smart" if major < 6 else "",
        smart_typography_off_argument="--nosmart",
        html_render_command=f"multimarkdown {SMART_TYPOGRAPHY_ARG} -t html",
    )

    def command(options: str) -> str:
        return f"multimarkdown {SMART_TYPOGRAPHY_ARG} {options} -o {OUTPUT_FILE_PATH_VAR}"

    exporter.add_file_export_command(HTML, command("-t html"))
    if major >= 6:
        exporter.add_file_export_command(ODT, command("-t odt"))
        exporter.add_file_export_command(ODF, command("-t fodt"))
        exporter.add_file_export_command(EPUBV3, command("-b -t epub"))
    else:
        exporter.add_file_export_command(ODF, command("-t odf"))
    exporter.add_file_export_command(LATEX, command("-t latex"))
    exporter.add_file_export_command(MEMOIR, command("-t memoir"))
    exporter.add_file_export_command(LYX, command("-t lyx"))
    return exporter


def _cmark_exporter() -> CommandLineExporter:
    exporter = CommandLineExporter(
        "cmark",
        smart_typography_on_argument="--smart",
        html_render_command=f"cmark -t html --smart {SMART_TYPOGRAPHY_ARG}",
    )
    exporter.add_file_export_command(HTML, f"cmark -t html {SMART_TYPOGRAPHY_ARG}")
    exporter.add_file_export_command(LATEX, f"cmark -t latex {SMART_TYPOGRAPHY_ARG}")
    exporter.add_file_export_command(MANPAGE, f"cmark -t man {SMART_TYPOGRAPHY_ARG}")
    return exporter


_PANDOC_FLAVORS = (
    ("Pandoc", "markdown"),
    ("Pandoc CommonMark", "commonmark"),
    ("Pandoc GitHub-flavored Markdown", "markdown_github-hard_line_breaks"),
    ("Pandoc PHP Markdown Extra", "markdown_phpextra"),
    ("Pandoc MultiMarkdown", "markdown_mmd"),
    ("Pandoc Strict", "markdown_strict"),
)


class ExporterFactory:
    """Builds the exporters available for HTML preview and file export.

    ``builtin_exporters`` are placed first in both lists; exporters for the
    external processors follow for each processor whose version is given.
    """

    def __init__(
        self,
        *,
        pandoc_version: Version | None = None,
        multimarkdown_version: Version | None = None,
        cmark_version: Version | None = None,
        builtin_exporters: Iterable[Any] = (),
    ) -> None:
        self._file_exporters: list[Any] = list(builtin_exporters)
        self._html_exporters: list[Any] = list(self._file_exporters)

        if pandoc_version:
            if pandoc_version[0] >= 2:
                for name, input_format in _PANDOC_FLAVORS:
                    self._add(_pandoc_exporter(name, input_format))
            else:
                logger.warning(
                    "Version %s of pandoc is unsupported.",
                    ".".join(map(str, pandoc_version)),
                )

        if multimarkdown_version:
            self._add(_multimarkdown_exporter(multimarkdown_version[0]))

        if cmark_version:
            self._add(_cmark_exporter())

    def _add(self, exporter: Any) -> None:
        self._file_exporters.append(exporter)
        self._html_exporters.append(exporter)

    def file_exporters(self) -> list[Any]:
        """Return the exporters that can export to a file."""
        return list(self._file_exporters)

    def html_exporters(self) -> list[Any]:
        """Return the exporters that can render HTML for live preview."""
        return list(self._html_exporters)

    def exporter_by_name(self, name: str) -> Any | None:
        """Return the exporter with ``name``, or None if there is none."""
        for exporter in (*self._html_exporters, *self._file_exporters):
            if exporter.name == name:
                return exporter
        return None