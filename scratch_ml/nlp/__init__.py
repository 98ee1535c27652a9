"""Text processing helpers."""

from .tokenizer import simple_tokenizer

__all__ = ['simple_tokenizer']
