"""
Hatena Blog API Client

Client for the Hatena Blog member management API. The API is not
publicly documented and may change without notice.
"""

import logging
import posixpath
from typing import List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .cache import MembersCache
from .exceptions import APIError, DecodeError, TransportError
from .models import BlogMember, MembersResponse
from .transport import WSSETransport

logger = logging.getLogger(__name__)

DEFAULT_HATENABLOG_HOST = "blog.hatena.ne.jp"

ModelT = TypeVar("ModelT", bound=BaseModel)


class HatenaBlogClient:
    """Client for managing the members of one Hatena Blog."""

    def __init__(
        self,
        version: str,
        username: str,
        apikey: str,
        owner: str,
        blog_host: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            version: Client version, embedded in the User-Agent
            username: Hatena ID of the operator
            apikey: API key of the operator
            owner: Hatena ID of the account that owns the blog
            blog_host: Blog domain (e.g. "staff.hatenablog.com")
            timeout: Request timeout in seconds
            transport: Transport to send signed requests through
                (defaults to a plain HTTP transport)
        """
        self.username = username
        self.owner = owner
        self.blog_host = blog_host
        self.hatenablog_host = DEFAULT_HATENABLOG_HOST
        self.insecure = False
        self.client = httpx.Client(
            transport=WSSETransport(username, apikey, version, transport=transport),
            timeout=timeout
        )
        self._members_cache = MembersCache()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.client.close()

    def set_hatenablog_host(self, host: str):
        self.hatenablog_host = host

    def set_insecure(self, insecure: bool):
        self.insecure = insecure

    def build_url(self, *paths: str) -> str:
        """
        Build an API URL of the form
        (http|https)://<hatenablog_host>/<owner>/<blog_host>/api/<paths...>
        """
        segments = [self.owner, self.blog_host, "api", *paths]
        path = posixpath.normpath("/" + "/".join(s for s in segments if s))
        # normpath keeps a leading "//"
        path = "/" + path.lstrip("/")

        scheme = "http" if self.insecure else "https"
        return f"{scheme}://{self.hatenablog_host}{quote(path)}"

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not response.is_success:
            raise APIError(response.status_code, response.text)
        return response

    @staticmethod
    def _decode(model: Type[ModelT], response: httpx.Response) -> ModelT:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"invalid response body: {e}") from e

    # ==================== Members ====================

    def add_member(self, username: str, role: str) -> BlogMember:
        """
        Add a member, or change the role of an existing one.

        Returns the member as confirmed by the server.
        """
        response = self._request(
            "POST",
            self.build_url("members"),
            json={"username": username, "role": role}
        )
        member = self._decode(BlogMember, response)

        # the remote list has changed
        self._members_cache.invalidate()
        logger.info(f"Added member {member.username} as {member.role}")
        return member

    def update_member(self, username: str, role: str) -> BlogMember:
        """Change a member's role. The API has no separate update call."""
        return self.add_member(username, role)

    def list_members(self) -> List[BlogMember]:
        """
        List the members of the blog.

        The result is cached until the next add or delete, since callers
        tend to enumerate members many times in a row.
        """
        cached = self._members_cache.get()
        if cached is not None:
            logger.debug(f"Serving {len(cached)} members from cache")
            return cached

        response = self._request("GET", self.build_url("members"))
        members = self._decode(MembersResponse, response).members

        self._members_cache.store(members)
        logger.debug(f"Cached {len(members)} members")
        return list(members)

    def get_member(self, username: str) -> Optional[BlogMember]:
        """Find a member by username, or None."""
        for member in self.list_members():
            if member.username == username:
                return member
        return None

    def delete_member(self, username: str) -> None:
        """Remove a member from the blog."""
        self._request("DELETE", self.build_url("members", username))

        self._members_cache.invalidate()
        logger.info(f"Deleted member {username}")
