from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, Literal, Mapping, Optional, Sequence, Union

Role = Literal["system", "user", "assistant"]
ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class TextPart:
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class ImagePart:
    """Image reference: an http(s) URL or a base64 / data-URL payload."""

    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "image_url", "image_url": {"url": self.url}}


ContentPart = Union[TextPart, ImagePart]
# Plain text, or an ordered sequence of parts.
Content = Union[str, tuple[ContentPart, ...]]


def _part_from_dict(raw: Any) -> ContentPart:
    if not isinstance(raw, Mapping):
        raise ValueError(f"Content part must be a mapping, got {type(raw).__name__}")
    kind = raw.get("type")
    if kind == "text":
        text = raw.get("text")
        if not isinstance(text, str):
            raise ValueError("text part is missing its text")
        return TextPart(text=text)
    if kind == "image_url":
        image_url = raw.get("image_url")
        url = image_url.get("url") if isinstance(image_url, Mapping) else image_url
        if not isinstance(url, str):
            raise ValueError("image_url part is missing its url")
        return ImagePart(url=url)
    raise ValueError(f"Unknown content part type: {kind!r}")


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: Content

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")
        # Lists are accepted for convenience but stored as tuples.
        if not isinstance(self.content, str):
            object.__setattr__(self, "content", tuple(self.content))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ChatMessage":
        content = raw.get("content")
        if isinstance(content, str):
            return cls(role=raw.get("role"), content=content)  # type: ignore[arg-type]
        if isinstance(content, Sequence):
            parts = tuple(
                p if isinstance(p, (TextPart, ImagePart)) else _part_from_dict(p)
                for p in content
            )
            return cls(role=raw.get("role"), content=parts)  # type: ignore[arg-type]
        raise ValueError("Message content must be a string or a list of parts")

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {"role": self.role, "content": [p.to_dict() for p in self.content]}


MessageLike = Union[ChatMessage, Mapping[str, Any]]


def _wire_form(message: MessageLike) -> Any:
    if isinstance(message, ChatMessage):
        return message.to_dict()
    if not isinstance(message, Mapping):
        raise ValueError(f"Message must be a mapping, got {type(message).__name__}")
    # Validated, then sent as given so extra keys (name, image detail) survive.
    ChatMessage.from_dict(message)
    content = message.get("content")
    if not isinstance(content, str) and any(
        isinstance(p, (TextPart, ImagePart)) for p in content
    ):
        parts = [
            p.to_dict() if isinstance(p, (TextPart, ImagePart)) else p
            for p in content
        ]
        return {**message, "content": parts}
    return message


def serialize_messages(messages: Iterable[MessageLike]) -> list[Any]:
    """Wire form of a conversation, in order.

    ChatMessage objects are converted with ``to_dict``; mappings are checked
    for a known role and known part types and otherwise passed through
    untouched.
    """

    out = [_wire_form(m) for m in messages]
    if not out:
        raise ValueError("messages must contain at least one message")
    return out


@dataclass(frozen=True)
class ImageGenerationRequest:
    prompt: str
    n: Optional[int] = None
    size: Optional[str] = None
    quality: Optional[str] = None
    style: Optional[str] = None
    response_format: Optional[str] = None
    seed: Optional[int] = None
    user: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.prompt:
            raise ValueError("prompt is required")

    def to_body(self) -> dict[str, Any]:
        """Request body with unset fields left out."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
