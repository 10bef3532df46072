from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional, Tuple

from flask import Flask, Response, request
from werkzeug.serving import make_server

logging.getLogger("werkzeug").setLevel(logging.ERROR)


class MockServer:
    """Flask app served from a background thread, standing in for the API.

    Register every handler before the first request is made.
    """

    def __init__(self) -> None:
        self.app = Flask(__name__)
        self.requests: List[Tuple[str, str]] = []
        self._server = make_server("127.0.0.1", 0, self.app, threaded=True)
        self.url = f"http://127.0.0.1:{self._server.server_port}/"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def handle(
        self,
        path: str,
        body: str,
        status: int = 200,
        content_type: str = "application/json",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        def view():
            self.requests.append((request.method, request.path))
            return Response(body, status=status, content_type=content_type, headers=headers)

        self.app.add_url_rule(path, endpoint=path, view_func=view, methods=["GET", "POST"])

    def close(self) -> None:
        self._server.shutdown()
        self._server.server_close()
        self._thread.join(timeout=5)
