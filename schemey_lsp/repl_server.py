from __future__ import annotations

"""
Simple TCP REPL server for Schemey.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(define x 1) (+ x 1)"}
- Response: {"ok": true, "result": <rendered value>} or {"ok": false, "error": <message>}

One Interpreter is kept alive for the server's lifetime so that definitions
persist across requests. Requests are evaluated one at a time.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from schemey.config import get_repl_address
from schemey.errors import SchemeyError
from schemey.interpreter import Interpreter, guard_recursion
from schemey.printer import render_result

log = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port
        self.interp = Interpreter()
        # Evaluation is single-threaded; clients take turns
        self._lock = threading.Lock()

    def handle_request(self, raw: bytes) -> Dict[str, Any]:
        try:
            req = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        with self._lock:
            try:
                text = guard_recursion(lambda: render_result(self.interp.eval(code)))
            except SchemeyError as ex:
                return {"ok": False, "error": str(ex)}
        return {"ok": True, "result": text}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            log.info("REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        log.debug("client connected from %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_request(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        log.debug("client %s:%d disconnected", *addr)


def main():
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
