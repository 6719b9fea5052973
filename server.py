# server.py
from __future__ import annotations

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from debug import Debug
from machine import Machine
from utilities import BLOCK, format_blocks

debug = Debug()


class EncryptServer(ThreadingHTTPServer):
    """
    HTTP front end around one shared :class:`Machine`.

    Every request steps the same rotors, so ``encrypt`` runs under a lock:
    two requests never interleave their stepping, and the rotor state carries
    over from one request to the next.
    """

    daemon_threads = True

    def __init__(self, address: tuple[str, int], machine: Machine, *, block: int = BLOCK) -> None:
        super().__init__(address, EncryptHandler)
        self.machine = machine
        self.block = block
        self._lock = threading.Lock()

    def encrypt(self, message: str) -> str:
        with self._lock:
            return self.machine.encrypt(message)


class EncryptHandler(BaseHTTPRequestHandler):
    server: EncryptServer

    def do_POST(self) -> None:
        raw = self._read_body()
        if raw is None:
            return
        message = raw.decode("utf-8", errors="replace")

        cipher = self.server.encrypt(message)
        debug.log("server", f"{len(message)} chars in, {len(cipher)} letters out")

        body = format_blocks(cipher, self.server.block).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    # ── request body ────────────────────────────────────────────

    def _read_body(self) -> bytes | None:
        """Return the whole request body, or None once an error reply has been sent."""
        if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
            try:
                return self._read_chunked()
            except ValueError:
                self.send_error(400, "Malformed chunked body")
                return None

        raw_length = self.headers.get("Content-Length")
        if raw_length is None:
            self.send_error(411, "Content-Length or chunked Transfer-Encoding required")
            return None
        try:
            length = int(raw_length)
        except ValueError:
            length = -1
        if length < 0:
            self.send_error(400, f"Invalid Content-Length {raw_length!r}")
            return None
        return self.rfile.read(length)

    def _read_chunked(self) -> bytes:
        chunks: list[bytes] = []
        while True:
            size_line = self.rfile.readline(65537)
            if not size_line:
                raise ValueError("connection closed inside chunked body")
            size = int(size_line.split(b";", 1)[0].strip(), 16)
            if size < 0:
                raise ValueError("negative chunk size")
            if size == 0:
                break
            chunk = self.rfile.read(size)
            if len(chunk) != size or self.rfile.readline(3) not in (b"\r\n", b"\n"):
                raise ValueError("truncated chunk")
            chunks.append(chunk)

        # trailers end at the first blank line
        while self.rfile.readline(65537) not in (b"\r\n", b"\n", b""):
            pass
        return b"".join(chunks)

    def do_GET(self) -> None:
        self.send_error(405, "POST the message as the request body")

    do_PUT = do_DELETE = do_GET

    def log_message(self, format: str, *args) -> None:
        debug.log("server", f"{self.address_string()} {format % args}")


def serve(machine: Machine, host: str = "127.0.0.1", port: int = 8080, *, block: int = BLOCK) -> None:
    """Serve until interrupted."""
    with EncryptServer((host, port), machine, block=block) as httpd:
        debug.info(f"Listening on http://{host}:{httpd.server_address[1]}/")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            debug.info("Shutting down")
