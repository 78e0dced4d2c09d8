"""Message types for agent conversations."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    SystemMessage,
    ToolMessage,
)


class MessageRole(StrEnum):
    """Message role in conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class Message:
    """A message in the conversation."""

    role: MessageRole
    content: str
    tool_call_id: str | None = None
    tool_calls: list[dict[str, Any]] | None = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=MessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str, tool_calls: list[dict] | None = None) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "Message":
        return cls(role=MessageRole.TOOL, content=content, tool_call_id=tool_call_id)

    def to_langchain(self) -> BaseMessage:
        """Convert to the matching LangChain message class."""
        match self.role:
            case MessageRole.SYSTEM:
                return SystemMessage(content=self.content)
            case MessageRole.USER:
                return HumanMessage(content=self.content)
            case MessageRole.ASSISTANT:
                if self.tool_calls:
                    return AIMessage(content=self.content, tool_calls=self.tool_calls)
                return AIMessage(content=self.content)
            case MessageRole.TOOL:
                return ToolMessage(content=self.content, tool_call_id=self.tool_call_id or "")


@dataclass
class Conversation:
    """A conversation with message history."""

    messages: list[Message] = field(default_factory=list)

    def add(self, message: Message) -> None:
        """Add a message to the conversation."""
        self.messages.append(message)

    def extend(self, messages: Iterable[Message]) -> None:
        """Add several messages, preserving order."""
        self.messages.extend(messages)

    def add_user(self, content: str) -> None:
        """Add a user message."""
        self.add(Message.user(content))

    def add_assistant(self, content: str, tool_calls: list[dict] | None = None) -> None:
        """Add an assistant message."""
        self.add(Message.assistant(content, tool_calls))

    def add_tool_result(self, content: str, tool_call_id: str) -> None:
        """Add a tool result message."""
        self.add(Message.tool(content, tool_call_id))

    def to_langchain(self) -> list[BaseMessage]:
        """Convert the whole conversation to LangChain messages."""
        return [msg.to_langchain() for msg in self.messages]

    def clear(self) -> None:
        """Clear all messages."""
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)


def extract_text(content: Any) -> str:
    """Extract plain text from a model reply's content.

    Content is either a string or a list of fragments. String fragments and
    dict fragments carrying a string ``text`` key are concatenated; anything
    else (tool-use blocks, images) is dropped.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and isinstance(block.get("text"), str):
                parts.append(block["text"])
        return "".join(parts)
    return ""
