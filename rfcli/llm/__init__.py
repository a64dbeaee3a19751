# rfcli/llm/__init__.py
"""TLDR generation: chat backends and document excerpting."""

from rfcli.llm.backends import ChatBackend, HostedChatBackend, OllamaChatBackend, create_backend
from rfcli.llm.summarizer import Excerpt, Summarizer, build_messages, extract_excerpt

__all__ = [
    "ChatBackend",
    "Excerpt",
    "HostedChatBackend",
    "OllamaChatBackend",
    "Summarizer",
    "build_messages",
    "create_backend",
    "extract_excerpt",
]
