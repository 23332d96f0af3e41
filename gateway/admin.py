# =============================================================================
# gateway/admin.py  —  Ghost Admin API client (the authenticated write surface)
# =============================================================================
#
# AUTHENTICATION:
#   Admin API keys have the form "<id>:<secret>".  Every request carries a
#   short-lived HS256 token signed with the hex-decoded secret, with the key
#   id in the "kid" header and "/admin/" as the audience.
#
# WRITES USE source=html:
#   Ghost stores Lexical documents; source=html asks it to convert the HTML
#   we send instead of dropping it.
# =============================================================================

import time
from typing import Optional
from urllib.parse import quote

import httpx
import jwt

from core.call_specs import AddPostSpec, EditPostSpec
from core.models import Post
from gateway.http import GhostAPIError, send

ADMIN_API_PATH = "/ghost/api/admin"
TOKEN_TTL_SECONDS = 5 * 60


def make_admin_token(admin_api_key: str, now: Optional[int] = None) -> str:
    key_id, secret = admin_api_key.split(":", 1)
    issued_at = int(time.time()) if now is None else now
    return jwt.encode(
        {"iat": issued_at, "exp": issued_at + TOKEN_TTL_SECONDS, "aud": "/admin/"},
        bytes.fromhex(secret),
        algorithm="HS256",
        headers={"kid": key_id},
    )


class GhostAdminClient:
    def __init__(self, client: httpx.AsyncClient, admin_api_key: str):
        self._client = client
        self._key = admin_api_key

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Ghost {make_admin_token(self._key)}"}

    def _post_path(self, post_id: str) -> str:
        return f"{ADMIN_API_PATH}/posts/{quote(post_id, safe='')}/"

    async def add_post(self, spec: AddPostSpec) -> Post:
        body = await send(
            self._client,
            "POST",
            f"{ADMIN_API_PATH}/posts/",
            params={"source": "html"},
            json={"posts": [spec.to_payload()]},
            headers=self._headers(),
        )
        return _first_post(body)

    async def edit_post(self, spec: EditPostSpec) -> Post:
        # Ghost rejects edits that don't echo the current updated_at
        current = _first_post(
            await send(self._client, "GET", self._post_path(spec.id), headers=self._headers())
        )
        payload = spec.to_payload()
        payload.pop("id")
        payload["updated_at"] = current.updated_at

        body = await send(
            self._client,
            "PUT",
            self._post_path(spec.id),
            params={"source": "html"},
            json={"posts": [payload]},
            headers=self._headers(),
        )
        return _first_post(body)

    async def delete_post(self, post_id: str) -> None:
        await send(self._client, "DELETE", self._post_path(post_id), headers=self._headers())


def _first_post(body: dict) -> Post:
    posts = body.get("posts") or []
    if not posts:
        raise GhostAPIError("Ghost returned no post in its response")
    return Post.from_api(posts[0])
