from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]


class ResponseFormat(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


class InferenceGateway(Protocol):
    threads_enabled: bool

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat = ResponseFormat.TEXT,
    ) -> str | dict[str, Any]: ...

    async def run_thread(self, instructions: str, prompt: str) -> dict[str, Any]: ...
