"""Recipient store implementations."""

from .memory_recipient_store import MemoryRecipientStore
from .json_file_recipient_store import JsonFileRecipientStore

__all__ = ["MemoryRecipientStore", "JsonFileRecipientStore"]
