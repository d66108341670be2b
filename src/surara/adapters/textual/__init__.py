"""Textual host for the editor session."""

from .controller import TextualEditorAdapter, TextualUIHooks, decode_textual_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "decode_textual_key"]
