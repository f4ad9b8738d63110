__all__ = ["__version__", "CONF", "RecordDoesNotExistError", "MultipleRecordsReturnedError", "RecordValidationError",
           "RelationshipDeclarationError", "RelationshipDeclarations", "RelationshipRegistry", "RecordStore",
           "MemoryStore", "Record", "Queryset", "MultiTypeQueryset", "PointerRepository", "RelationsManager",
           "Hierarchy", "NOT_SUBMITTED", "check_consistency", "get_consistency_report"]

from .version import version as __version__

from parentage.conf import CONF
from parentage.registry.api import RelationshipDeclarations, RelationshipRegistry
from parentage.store.api import RecordStore, MemoryStore, Record, Queryset, MultiTypeQueryset
from parentage.pointers import PointerRepository
from parentage.relations_manager import RelationsManager
from parentage.hierarchy import Hierarchy, NOT_SUBMITTED
from parentage.consistency import check_consistency, get_consistency_report
from .exceptions import RecordDoesNotExistError, MultipleRecordsReturnedError, RecordValidationError, \
    RelationshipDeclarationError
