from __future__ import annotations

"""
Simple TCP REPL server for bprog.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "1 2 +"}
- Response: {"ok": true, "result": "3", "reported": []}
        or  {"ok": false, "error": "StackEmpty", "reported": [...]}

Each request is evaluated on a fresh stack; nothing persists between lines.
"""

import json
import logging
import socket
import threading
from typing import Any, Dict, Tuple

from bprog.config import get_repl_address
from bprog.interpreter import Interpreter
from bprog.printer import format_value

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port if port is not None else default_port
        self.interp = Interpreter()

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("bprog REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def handle_request(self, raw: bytes) -> Dict[str, Any]:
        try:
            req = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict) or req.get("cmd") != "eval":
            cmd = req.get("cmd") if isinstance(req, dict) else None
            return {"ok": False, "error": f"Unknown cmd: {cmd}"}

        outcome = self.interp.run(str(req.get("code", "")))
        reported = [err.kind for err in outcome.reported]
        if outcome.error is not None:
            return {"ok": False, "error": outcome.error.kind, "reported": reported}
        return {"ok": True, "result": format_value(outcome.value), "reported": reported}

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s", addr)
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


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
