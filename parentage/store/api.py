"""Public api for parentage store package."""
__all__ = ["RecordStore", "MemoryStore", "Record", "Queryset", "MultiTypeQueryset"]

from .record_store import RecordStore
from .memory_store import MemoryStore
from .record import Record
from .queryset import Queryset
from .multi_type_queryset import MultiTypeQueryset
