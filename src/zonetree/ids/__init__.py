"""Id generators implementing the IdGenerator protocol."""

from zonetree.ids.allocator import SequentialIdGenerator, UuidIdGenerator, create_id_generator

__all__ = [
    "UuidIdGenerator",
    "SequentialIdGenerator",
    "create_id_generator",
]
