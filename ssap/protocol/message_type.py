"""Envelope type tags."""

from __future__ import annotations

from enum import Enum


class MessageType(str, Enum):
    REGISTER = "register"
    REQUEST = "request"
    REGISTERED = "registered"
    RESPONSE = "response"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> MessageType | None:
        try:
            return cls(value)
        except ValueError:
            return None


__all__ = ["MessageType"]
