"""Frame-by-frame message cycle of a sketch: initialise, clear, render, idle."""

from __future__ import annotations

from enum import Enum


class Message(Enum):
    INITIALIZE = "initialize"
    CLEAR = "clear"
    RENDER_READY = "render_ready"
    NOTHING = "nothing"


_NEXT = {
    Message.INITIALIZE: Message.CLEAR,
    Message.CLEAR: Message.RENDER_READY,
    Message.RENDER_READY: Message.NOTHING,
}


def next_message(message: Message, key_pressed: bool = False) -> Message:
    """Message for the next frame; a key press always asks to clear."""
    if key_pressed:
        return Message.CLEAR
    return _NEXT.get(message, Message.NOTHING)