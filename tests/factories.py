"""Test doubles and data factories for the Hatena Blog client tests"""

import httpx

MEMBERS_PATH = "/owner/blog.example.com/api/members"


def member_dict(username: str = "member", role: str = "admin") -> dict:
    """Create a member as the API serializes it"""
    return {"username": username, "role": role}


class FakeBlogAPI:
    """
    In-memory stand-in for the Hatena Blog API.

    Used as the handler of an httpx.MockTransport. Responses are
    registered per (method, path); unregistered routes answer 404.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def on(self, method: str, path: str, status: int = 200, **response_kwargs):
        self.routes[(method, path)] = (status, response_kwargs)

    def count(self, method: str, path: str) -> int:
        return sum(
            1 for r in self.requests
            if r.method == method and r.url.path == path
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="not found")
        status, response_kwargs = route
        return httpx.Response(status, **response_kwargs)
