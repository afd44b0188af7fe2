# pysuals

Tooling for PySuals component files: a CSS pipeline, a lexer with an
indentation checker, and a small line-based language server.

No third-party libraries are needed at run time.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## CSS

`pysuals.css.processor.CssProcessor` parses a stylesheet, adds vendor
prefixes, optionally scopes every selector to a component, and minifies the
result.

```python
from pysuals.css.processor import CssProcessor

processor = CssProcessor()
print(processor.process(".btn { transform: scale(2); }", "abc"))
# .btn[data-pysuals-abc]{-webkit-transform:scale(2);transform:scale(2);}
```

The stages can be used on their own:

- `pysuals.css.parser.CssParser` – `parse(css)` returns a
  `pysuals.css.model.Stylesheet` of `CssRule`s and `CssDeclaration`s, and
  collects `@import` paths; `parse_selector` and `parse_declaration` split
  single pieces.
- `pysuals.css.vendor.VendorPrefixer` – `process(stylesheet)` adds
  `-webkit-` (and for `appearance` also `-moz-`) variants of `user-select`,
  `transform`, `transition`, `animation` and `appearance`, and
  `display: -webkit-flex` before `display: flex`; also `prefix_keyframes` and
  `needs_prefix`.
- `pysuals.css.scoped.ScopedCss` – `scope(stylesheet, scope)` appends
  `[data-pysuals-<scope>]` to every selector not starting with `:` or `@`;
  also `generate_scope_id`, `scope_keyframes` and `add_data_attribute`.
- `pysuals.css.minify.CssMinifier` – `minify(stylesheet)` writes compact CSS
  (dropping `0px` units, turning `rgba(r,g,b,1)` into `rgb(r,g,b)`);
  `remove_comments(css)` strips `/* ... */` comments.

## Lexer and indentation

```python
from pysuals.lang.tokens import tokenize, TokenStream
from pysuals.lang.indentation import check_indentation, IndentationCheckError

tokens = tokenize("component App(): return 1")   # list of Token, ending with EOF
check_indentation("def f():\n    return 1\n")     # raises IndentationCheckError on bad indentation
```

`Lexer` stops at the first invalid character, records the message in its
`errors` list and prints it to standard error. `TokenStream` iterates over
the tokens with `peek()` for one token of lookahead. `IndentationCheckError`
carries every problem found in its `errors` attribute.

## Language server

The server reads one JSON-RPC message per line on standard input and writes
one JSON message per line on standard output. It answers `initialize`,
`textDocument/completion`, `textDocument/hover`, `textDocument/definition`,
`textDocument/rename`, `textDocument/formatting` and `shutdown`, publishes
diagnostics after `textDocument/didOpen` and `textDocument/didChange`, and
remembers the settings sent with `workspace/didChangeConfiguration`. Other
methods and lines that are not JSON are ignored. After `shutdown` the server
stops reading and returns.

Start it with:

    pysuals-lsp

From Python, `pysuals.lsp.server.run(input_stream, output_stream)` serves on
any text streams, and `LspServer.handle_request` handles one decoded message.

The providers can also be used directly: `CompletionProvider`
(`pysuals.lsp.completion`), `DiagnosticProvider` (`pysuals.lsp.diagnostics`),
`Formatter` (`pysuals.lsp.formatting`), `GotoProvider` (`pysuals.lsp.goto`),
`HoverProvider` (`pysuals.lsp.hover`), `RenameProvider`
(`pysuals.lsp.rename`) and `WorkspaceManager` (`pysuals.lsp.workspace`).
`pysuals.lsp.types.to_json` turns their results into plain JSON values.

## What it does not do

- There is no parser or compiler for component files: the package tokenizes
  source and checks its indentation, but builds no syntax tree and produces
  no JavaScript.
- Messages are framed one per line, not with `Content-Length` headers, so
  editors that speak the standard framing cannot talk to the server directly.
- Completion always offers the same keywords and HTML elements, hover and
  go-to-definition point at the requested line, and rename returns an empty
  edit.
- The server advertises workspace symbols and references but does not answer
  those requests; `WorkspaceManager.search_symbols` and `get_references` are
  available only from Python, after `initialize(root_uri)`.