"""
Adapters Layer
Concrete implementations of the domain ports

Import adapters directly:
    from mindscope.adapters.ai.openai import OpenAICompatibleAdapter
"""

__all__ = [
    "ai",
]
