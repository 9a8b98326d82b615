"""HTTP access to mirai-api-http and decoding of its replies."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import requests

CONTENT_TYPE = "application/json;charset=UTF-8"


class NetworkError(ConnectionError):
    """The server could not be reached or did not answer."""

    def __init__(self, message: str = "network error") -> None:
        super().__init__(message)


class MiraiApiHttpError(RuntimeError):
    """mirai-api-http answered with a non-zero status code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def parse_response(response: requests.Response | None) -> Any:
    """Decode a reply body, raising if it reports an error.

    A missing response raises NetworkError; a body whose ``code`` is not
    zero raises MiraiApiHttpError; a body that is not JSON raises ValueError.
    """
    if response is None:
        raise NetworkError()
    body = json.loads(response.content)
    if isinstance(body, dict) and "code" in body:
        code = int(body["code"])
        if code != 0:
            raise MiraiApiHttpError(code, str(body.get("msg", "")))
    return body


def read_file(path: str | Path) -> bytes:
    """Return the whole content of a file."""
    return Path(path).read_bytes()


class Transport:
    """Sends requests to one mirai-api-http HTTP adapter."""

    def __init__(
        self,
        hostname: str,
        port: int,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = f"http://{hostname}:{port}"
        self.session = session if session is not None else requests.Session()
        self.connect_timeout = 300.0
        self.read_timeout = 5.0

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Send a request and return the raw response."""
        try:
            return self.session.request(
                method,
                self.base_url + path,
                timeout=(self.connect_timeout, self.read_timeout),
                **kwargs,
            )
        except requests.RequestException as exc:
            raise NetworkError(str(exc)) from exc

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` with query ``params`` and return the decoded reply."""
        return parse_response(self.request("GET", path, params=params))

    def post_json(self, path: str, data: Any) -> Any:
        """POST ``data`` as JSON and return the decoded reply."""
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        response = self.request(
            "POST", path, data=body, headers={"Content-Type": CONTENT_TYPE}
        )
        return parse_response(response)

    def post_multipart(
        self,
        path: str,
        fields: Mapping[str, str],
        files: Mapping[str, tuple[str, bytes, str]],
    ) -> Any:
        """POST a multipart form; ``files`` maps a field to (name, data, type)."""
        response = self.request("POST", path, data=dict(fields), files=dict(files))
        return parse_response(response)