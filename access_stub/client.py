"""
Controller-side client for the access system.

Door and machine controllers ask the access system whether a card may be
used on a given thing, and send it free-form log messages. This client
speaks that protocol, so it can be pointed at the stub or at a real server.
"""
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from access_stub.config import (
    ACCESS_SYSTEM_TIMEOUT,
    ACCESS_SYSTEM_URL,
    ACCESS_SYSTEM_URLPREFIX,
)

logger = logging.getLogger(__name__)

# --- Access flags ---
TOKEN_ACCESS = 0x01
TOKEN_TRAINER = 0x02
TOKEN_ERROR = 0x04


class AccessReply(BaseModel):
    # Only access == 1 and trainer == 1 mean anything, other values are ignored
    access: Any
    trainer: Any = None
    error: Any = None


class AccessSystemClient:
    def __init__(
        self,
        thing_id: str,
        base_url: str = ACCESS_SYSTEM_URL,
        url_prefix: str = ACCESS_SYSTEM_URLPREFIX,
        timeout: float = ACCESS_SYSTEM_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.thing_id = thing_id
        self.url_prefix = url_prefix
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def get_access(self, card_id: str) -> int:
        """Asks the access system for the card's flags on this thing"""
        try:
            response = await self._client.get(
                f"{self.url_prefix}verify",
                params={"token": card_id, "thing": self.thing_id},
            )
        except httpx.RequestError as e:
            logger.error(f"Access request failed: {e}")
            return TOKEN_ERROR

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Couldn't parse JSON: {response.text!r}")
            return TOKEN_ERROR

        if not isinstance(data, dict) or "access" not in data:
            logger.error("No access info")
            return TOKEN_ERROR

        reply = AccessReply(**data)

        flags = 0
        if reply.access == 1:
            flags |= TOKEN_ACCESS
        if reply.trainer == 1:
            flags |= TOKEN_TRAINER
        return flags

    async def send_log_msg(self, msg: str) -> None:
        """Sends a log message to the access system, fire and forget"""
        try:
            await self._client.get(
                f"{self.url_prefix}msglog",
                params={"thing": self.thing_id, "msg": msg},
            )
        except httpx.RequestError as e:
            logger.error(f"Failed to send log message: {e}")
