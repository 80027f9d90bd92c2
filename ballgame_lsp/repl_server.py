from __future__ import annotations

"""
Simple TCP REPL server for Ballgame.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(+ 1 2)"}
- Response: {"ok": true, "result": "3"} or {"ok": false, "error": <message>}

Requests are independent: evaluation keeps no state, so one Interpreter
serves every client thread.
"""

import json
import logging
import socket
import sys
import threading
from typing import Any, Dict, Tuple

from ballgame.config import get_log_level, get_repl_address
from ballgame.interpreter import Interpreter
from ballgame.types.errors import BallgameError

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, interpreter: Interpreter | None = None):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port or default_port
        self.interp = interpreter or Interpreter()

    def handle_request(self, line: bytes) -> Dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
            if not isinstance(req, dict):
                raise ValueError("request must be a JSON object")
        except (ValueError, UnicodeDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            return {"ok": True, "result": self.interp.show(self.interp.eval(code))}
        except BallgameError as ex:
            return {"ok": False, "error": str(ex)}

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("ballgame REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
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


def main():
    logging.basicConfig(level=get_log_level(), format="%(message)s", stream=sys.stderr)
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
