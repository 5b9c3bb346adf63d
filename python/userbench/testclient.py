import json
import socket
import threading
import time

import httpx
import uvicorn


class TestResponse:
    def __init__(self, status_code, body, headers):
        self.status_code = status_code
        self._body = body
        self.headers = headers
        self.text = body if isinstance(body, str) else body.decode("utf-8", errors="replace")

    def json(self):
        return json.loads(self.text)


class TestClient:
    """Serves an app with uvicorn on a free local port and talks to it over real HTTP."""

    __test__ = False

    def __init__(self, app, timeout: float = 120.0):
        s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
        s.close()

        self._app = app
        self._base = f"http://127.0.0.1:{port}"
        self._timeout = timeout
        self._server = uvicorn.Server(
            uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning", lifespan="off")
        )
        self._thread = threading.Thread(target=self._server.run, daemon=True)
        self._thread.start()

        # Poll until server is up
        for _ in range(50):
            try:
                with socket.create_connection(("127.0.0.1", port), timeout=0.1):
                    break
            except OSError:
                time.sleep(0.1)

    def _request(self, method, path, **kwargs):
        kwargs.setdefault("timeout", self._timeout)
        resp = httpx.request(method, self._base + path, **kwargs)
        return TestResponse(resp.status_code, resp.content, resp.headers)

    def get(self, path, **kwargs): return self._request("GET", path, **kwargs)
    def post(self, path, **kwargs): return self._request("POST", path, **kwargs)

    def close(self):
        self._server.should_exit = True
        self._thread.join(timeout=5)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
