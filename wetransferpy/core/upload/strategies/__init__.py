"""Upload strategies module."""
from .chunking import plan_chunks, plan_file, FixedSizeChunkingStrategy

__all__ = [
    'plan_chunks',
    'plan_file',
    'FixedSizeChunkingStrategy',
]
