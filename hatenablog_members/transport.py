"""
Signing Transport

httpx transport wrapper that signs every outgoing request with an
X-WSSE header and stamps it with the client's User-Agent.
"""

import base64
import hashlib
import secrets
from datetime import datetime, timezone
from typing import Optional

import httpx

PROJECT_NAME = "hatenablog-members"
PROJECT_URL = "https://github.com/hatena/terraform-provider-hatenablog-members"

WSSE_HEADER = "X-WSSE"
NONCE_SIZE = 16


def build_user_agent(version: str) -> str:
    return f"{PROJECT_NAME}/{version} (+{PROJECT_URL})"


def create_wsse_header(
    username: str,
    password: str,
    nonce: Optional[bytes] = None,
    created: Optional[str] = None
) -> str:
    """
    Build a WSSE UsernameToken header value.

    PasswordDigest is base64(sha1(nonce + created + password)), so the
    password itself never goes over the wire. A fresh nonce and timestamp
    are generated unless given.
    """
    if nonce is None:
        nonce = secrets.token_bytes(NONCE_SIZE)
    if created is None:
        created = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    digest = hashlib.sha1(nonce + created.encode() + password.encode()).digest()

    return (
        f'UsernameToken Username="{username}", '
        f'PasswordDigest="{base64.b64encode(digest).decode()}", '
        f'Nonce="{base64.b64encode(nonce).decode()}", '
        f'Created="{created}"'
    )


class WSSETransport(httpx.BaseTransport):
    """
    Wraps another transport to add X-WSSE and User-Agent headers.

    Headers are set on the request in place before it is forwarded;
    method, body and all other headers are left alone. The wrapped
    transport's response or exception is passed through unchanged.
    """

    def __init__(
        self,
        username: str,
        password: str,
        version: str,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.username = username
        self._password = password
        self.user_agent = build_user_agent(version)
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.headers[WSSE_HEADER] = create_wsse_header(self.username, self._password)
        request.headers["User-Agent"] = self.user_agent
        return self._transport.handle_request(request)

    def close(self) -> None:
        self._transport.close()
