"""Display sink protocol, in-memory sink and width helpers."""

from .memory import MemoryDisplay
from .sink import DisplaySink
from .width import char_width, visual_column

__all__ = ["DisplaySink", "MemoryDisplay", "char_width", "visual_column"]
