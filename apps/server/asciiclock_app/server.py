"""Minimal HTTP surface: the polling page and per-request clock ticks."""

from __future__ import annotations

from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

from asciiclock_core import AppConfig, render_from_config
from asciiclock_core.logging_setup import get_logger

from .page import build_page


logger = get_logger("server")


class ClockRequestHandler(BaseHTTPRequestHandler):
    """Serves ``/`` as the page, or ``/?tick=1&time=N`` as clock text."""

    config: AppConfig = AppConfig()

    def do_GET(self) -> None:
        parts = urlsplit(self.path)
        if parts.path not in ("/", "/index.html"):
            self._send(404, "text/plain; charset=utf-8", "Not found")
            return

        query = parse_qs(parts.query, keep_blank_values=True)
        if "tick" not in query:
            page = build_page(self.config.server.poll_ms, self.config.server.pause_ticks)
            self._send(200, "text/html; charset=utf-8", page)
            return

        raw_time = query.get("time", [None])[0]
        try:
            frame = render_from_config(self.config, raw_time)
        except Exception:
            logger.exception("clock render failed", extra={"event": "render_failed", "path": self.path})
            self._send(500, "text/plain; charset=utf-8", "Render failed")
            return
        self._send(200, "text/plain; charset=utf-8", frame.text)

    def _send(self, status: int, content_type: str, body: str) -> None:
        payload = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args) -> None:
        logger.debug(format % args, extra={"event": "http_request"})


def make_server(cfg: AppConfig, host: str | None = None, port: int | None = None) -> ThreadingHTTPServer:
    handler = type("BoundClockRequestHandler", (ClockRequestHandler,), {"config": cfg})
    server = ThreadingHTTPServer((host or cfg.server.host, cfg.server.port if port is None else port), handler)
    server.daemon_threads = True
    return server


def serve(cfg: AppConfig, host: str | None = None, port: int | None = None) -> int:
    server = make_server(cfg, host=host, port=port)
    bound_host, bound_port = server.server_address[:2]
    logger.info(f"serving clock on http://{bound_host}:{bound_port}/", extra={"event": "server_started"})
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("server interrupted", extra={"event": "server_interrupted"})
    finally:
        server.server_close()
    return 0
