# quillmark

The pieces behind a Markdown writing tool, in plain Python with no
third-party dependencies.

- `quillmark.exportformat`: the catalogue of file formats a document can be
  exported to (HTML, HTML 5, OpenDocument, RTF, Word, several PDF routes,
  EPUB v2/v3, FictionBook2, LaTeX, LyX, memoir, man pages). Each
  `ExportFormat` has a name, a file-dialog filter, a default extension and
  a flag saying whether the extension is mandatory. `all_formats()` lists
  them in order.
- `quillmark.markdowndocument`: `MarkdownDocument` holds text, a file path
  and display name, read-only/modified flags and a timestamp, and calls
  registered callbacks when its path is set or it is cleared.
- `quillmark.exporterfactory`: `CommandLineExporter` describes how to
  render Markdown with an external processor and expands its command
  templates into argument lists. `ExporterFactory` builds the exporters for
  Pandoc (six Markdown flavours, version 2 or later), MultiMarkdown
  (commands differ before and from version 6) and cmark, from versions the
  caller passes in. `parse_version(output)` reads a version tuple from a
  `--version` banner, preferring a `v1.2.3` form.
- `quillmark.findreplace`: `FindReplace` searches a `TextBuffer` with
  `SearchOptions` (match case, whole word, regular expression), with
  wrap-around, replace, replace-all and match highlighting.
- `quillmark.markdownast`: `MarkdownNode` and `MarkdownAST`, a block-level
  Markdown tree that can find the deepest block at a line, list top-level
  headings and print itself for debugging.

## Installing

```
pip install quillmark
```

Python 3.10 or later is required.

## Examples

Export formats and their file-dialog filters:

```python
from quillmark.exportformat import all_formats

for fmt in all_formats():
    print(fmt.named_filter())
# HTML (*.html *.htm)
# HTML 5 (*.html *.htm)
# OpenDocument Text (*.odt)
# ...
```

A document's path and name:

```python
from quillmark.markdowndocument import MarkdownDocument

doc = MarkdownDocument()
print(doc.display_name(), doc.is_new())   # untitled True

doc.on_file_path_changed(lambda: print("path changed"))
doc.set_file_path("notes/todo.md")        # path changed
print(doc.display_name(), doc.is_new())   # todo.md False
```

Building command lines for an installed processor:

```python
from quillmark.exporterfactory import ExporterFactory, parse_version
from quillmark.exportformat import DOCX

factory = ExporterFactory(pandoc_version=parse_version("pandoc 2.19.2"))
strict = factory.exporter_by_name("Pandoc Strict")

print(strict.html_command(smart_typography=True))
# ['pandoc', '-f', 'markdown_strict+smart', '-t', 'html', '--mathjax']
print(strict.export_command(DOCX, "out.docx", smart_typography=False))
# ['pandoc', '-f', 'markdown_strict-smart', '-t', 'docx',
#  '--standalone', '--quiet', '-o', 'out.docx']
```

`file_exporters()` and `html_exporters()` list everything the factory
built; exporters passed as `builtin_exporters` come first.

Find and replace:

```python
from quillmark.findreplace import FindReplace, TextBuffer

buf = TextBuffer("one two one")
finder = FindReplace(buf, find_text="one", replace_text="1")
finder.find_next()            # True; buf.selected_text() == "one"
finder.replace_all()          # 2
print(buf.text)               # 1 two 1
```

A syntax tree:

```python
from quillmark.markdownast import MarkdownAST, MarkdownNode, NodeType

root = MarkdownNode(NodeType.DOCUMENT, 1, 3)
heading = root.append_child(MarkdownNode(NodeType.HEADING, 1, 1, heading_level=1))
para = root.append_child(MarkdownNode(NodeType.PARAGRAPH, 3, 3))

ast = MarkdownAST(root)
ast.find_block_at_line(3) is para   # True
ast.headings() == [heading]         # True
print(ast.to_string())
```

## What it does not do

- There is no editor window, live preview, dialog or command-line program.
- Exporters only build argument lists; nothing here runs Pandoc,
  MultiMarkdown or cmark, and the factory does not look for them on the
  system. Pass in the versions you have found yourself.
- Markdown text is not parsed into a tree; `MarkdownAST` works on nodes
  you build or convert from a parser of your choice.
- `MarkdownDocument` does not load or save files.

## Running the tests

```
pip install -e ".[test]"
pytest
```