"""Text helpers."""
from pushy_proxy.text.emoji import Expander, expand_emoji

__all__ = ["Expander", "expand_emoji"]
