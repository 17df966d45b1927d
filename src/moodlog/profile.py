"""User profile storage: display name and avatar."""

import base64
import logging
from dataclasses import dataclass

from .errors import ValidationError
from .ports.kv_backend import KeyValueBackend

logger = logging.getLogger(__name__)

PSEUDO_KEY = "pseudo"
AVATAR_KEY = "profileImage"


@dataclass
class Profile:
    """The user's display name and avatar data URI."""

    display_name: str = ""
    avatar: str | None = None


def avatar_data_uri(data: bytes, mime_type: str = "image/jpeg") -> str:
    """Encode raw image bytes as a self-describing data URI."""
    if not mime_type.startswith("image/"):
        raise ValidationError(f"Avatar must be an image, got {mime_type}")
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def _check_avatar(avatar: str) -> None:
    header, sep, _ = avatar.partition(",")
    if not sep or not header.startswith("data:image/") or not header.endswith(";base64"):
        raise ValidationError("Avatar must be a data:image/...;base64, URI")


class ProfileStore:
    """Reads and writes the reserved profile keys."""

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    async def load(self) -> Profile:
        values = await self.backend.get_many([PSEUDO_KEY, AVATAR_KEY])
        return Profile(
            display_name=values.get(PSEUDO_KEY) or "",
            avatar=values.get(AVATAR_KEY) or None,
        )

    async def save(self, display_name: str, avatar: str | None = None) -> None:
        """
        Write the display name, and the avatar if one is given.

        An empty avatar never replaces a stored one.
        """
        if avatar:
            _check_avatar(avatar)
        await self.backend.set(PSEUDO_KEY, display_name)
        if avatar:
            await self.backend.set(AVATAR_KEY, avatar)
        logger.info("Saved profile")
