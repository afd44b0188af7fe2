"""A line-delimited JSON-RPC language server."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from pysuals.lsp.completion import CompletionProvider
from pysuals.lsp.diagnostics import DiagnosticProvider
from pysuals.lsp.formatting import Formatter
from pysuals.lsp.goto import GotoProvider
from pysuals.lsp.hover import HoverProvider
from pysuals.lsp.rename import RenameProvider
from pysuals.lsp.types import to_json
from pysuals.lsp.workspace import WorkspaceManager

SERVER_NAME = "PySuals LSP"
SERVER_VERSION = "0.1.0"

_CAPABILITIES: dict[str, Any] = {
    "textDocumentSync": {"openClose": True, "change": 1, "save": True},
    "completionProvider": {
        "resolveProvider": True,
        "triggerCharacters": [".", ":", "@"],
    },
    "hoverProvider": True,
    "definitionProvider": True,
    "renameProvider": True,
    "documentFormattingProvider": True,
    "workspaceSymbolProvider": True,
    "referencesProvider": True,
}


@dataclass
class Document:
    """An open document as last reported by the client."""

    uri: str
    content: str
    version: int


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_i32(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        return 0
    return ((value + 2**31) % 2**32) - 2**31


class LspServer:
    """Reads one JSON request per line and writes one JSON message per line."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.completion = CompletionProvider()
        self.hover = HoverProvider()
        self.goto = GotoProvider()
        self.rename = RenameProvider()
        self.diagnostics = DiagnosticProvider()
        self.formatter = Formatter()
        self.workspace = WorkspaceManager()
        self.documents: list[Document] = []
        self.settings: Any = None
        self._running = False
        self._handlers: dict[str, Callable[[dict[str, Any]], None]] = {
            "initialize": self._send_initialize_response,
            "textDocument/completion": self._send_completion_response,
            "textDocument/hover": self._send_hover_response,
            "textDocument/definition": self._send_definition_response,
            "textDocument/rename": self._send_rename_response,
            "textDocument/didOpen": self._handle_did_open,
            "textDocument/didChange": self._handle_did_change,
            "textDocument/formatting": self._send_formatting_response,
            "workspace/didChangeConfiguration": self._handle_config_change,
            "shutdown": self._handle_shutdown,
        }

    def start(self) -> None:
        """Serve requests until shutdown is requested or input ends."""
        self._running = True
        for line in self.input_stream:
            if not line.strip():
                continue
            try:
                request = json.loads(line)
            except json.JSONDecodeError:
                continue
            self.handle_request(request)
            if not self._running:
                break
        self._running = False

    def handle_request(self, request: Any) -> None:
        """Dispatch one decoded request; unknown methods are ignored."""
        if not isinstance(request, dict):
            return
        method = request.get("method")
        handler = self._handlers.get(method) if isinstance(method, str) else None
        if handler is not None:
            handler(request)

    def _respond(self, request: dict[str, Any], result: Any) -> None:
        self._write({"jsonrpc": "2.0", "id": request.get("id"), "result": result})

    def _send_initialize_response(self, request: dict[str, Any]) -> None:
        self._respond(
            request,
            {
                "capabilities": _CAPABILITIES,
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            },
        )

    def _send_completion_response(self, request: dict[str, Any]) -> None:
        items = self.completion.get_completions(request.get("params"))
        self._respond(request, to_json(items))

    def _send_hover_response(self, request: dict[str, Any]) -> None:
        self._respond(request, to_json(self.hover.get_hover(request.get("params"))))

    def _send_definition_response(self, request: dict[str, Any]) -> None:
        self._respond(request, to_json(self.goto.get_definition(request.get("params"))))

    def _send_rename_response(self, request: dict[str, Any]) -> None:
        self._respond(request, to_json(self.rename.rename_symbol(request.get("params"))))

    def _send_formatting_response(self, request: dict[str, Any]) -> None:
        self._respond(request, to_json(self.formatter.format(request.get("params"))))

    def _handle_did_open(self, request: dict[str, Any]) -> None:
        params = request.get("params")
        text_doc = params.get("textDocument") if isinstance(params, dict) else None
        if not isinstance(text_doc, dict):
            return
        uri = _as_str(text_doc.get("uri"))
        content = _as_str(text_doc.get("text"))
        version = _as_i32(text_doc.get("version"))
        self.documents.append(Document(uri, content, version))
        self._publish_diagnostics(uri, content)

    def _handle_did_change(self, request: dict[str, Any]) -> None:
        params = request.get("params")
        if not isinstance(params, dict):
            return
        text_doc = params.get("textDocument")
        if not isinstance(text_doc, dict):
            return
        uri = _as_str(text_doc.get("uri"))
        version = _as_i32(text_doc.get("version"))
        changes = params.get("contentChanges")
        if not isinstance(changes, list) or not changes:
            return
        first = changes[0]
        new_content = _as_str(first.get("text")) if isinstance(first, dict) else ""
        self._update_document(uri, version, new_content)
        self._publish_diagnostics(uri, new_content)

    def _handle_config_change(self, request: dict[str, Any]) -> None:
        # Settings are remembered but nothing is sent back.
        params = request.get("params")
        if isinstance(params, dict):
            self.settings = params.get("settings")

    def _handle_shutdown(self, request: dict[str, Any]) -> None:
        self._respond(request, None)
        self._running = False

    def _update_document(self, uri: str, version: int, content: str) -> None:
        doc = next((d for d in self.documents if d.uri == uri), None)
        if doc is not None:
            doc.content = content
            doc.version = version

    def _publish_diagnostics(self, uri: str, content: str) -> None:
        diagnostics = self.diagnostics.get_diagnostics(uri, content)
        self._write(
            {
                "jsonrpc": "2.0",
                "method": "textDocument/publishDiagnostics",
                "params": {"uri": uri, "diagnostics": to_json(diagnostics)},
            }
        )

    def _write(self, message: dict[str, Any]) -> None:
        self.output_stream.write(json.dumps(message, separators=(",", ":")))
        self.output_stream.write("\n")
        self.output_stream.flush()


def run(input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
    """Start a server on the given streams, standard input and output by default."""
    LspServer(input_stream, output_stream).start()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: serve over standard input and output."""
    run()
    return 0