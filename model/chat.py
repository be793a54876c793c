from typing import Literal
from pydantic import BaseModel

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    role: ChatRole
    content: str


class ChatChoiceMessage(BaseModel):
    role: str | None = None
    content: str


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatChoiceMessage


class ChatCompletion(BaseModel):
    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice]
