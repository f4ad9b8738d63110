"""
Hierarchy wires the relations manager to the lifecycle of a record store.

create/update/delete methods (see methods documentation):
 - hierarchy.add
 - hierarchy.save
 - hierarchy.delete
"""

import collections
import logging

from .registry.declarations import RelationshipDeclarations
from .registry.registry import RelationshipRegistry
from .relations_manager import RelationsManager
from .store.memory_store import MemoryStore

logger = logging.getLogger(__name__)


class _NotSubmitted:
    def __repr__(self):
        return "NOT_SUBMITTED"

    def __bool__(self):
        return False


NOT_SUBMITTED = _NotSubmitted()


class Hierarchy:
    """
    Host of parent/child relationships between records.

    Parameters
    ----------
    declarations: RelationshipDeclarations or RelationshipRegistry or dict
        relationships, {child_type: parent_type, ...} if dict. Declarations are resolved here, once.
    store: parentage.store.record_store.RecordStore or None
        if None, an empty MemoryStore is used

    Notes
    -----
    add/save
        store write
        relations_manager.set_parent, if a parent was submitted

    delete
        relations_manager.on_delete
        store delete
    """

    _dev_store_cls = MemoryStore  # for subclassing

    def __init__(self, declarations, store=None):
        # startup: resolve relationships
        if isinstance(declarations, RelationshipRegistry):
            registry = declarations
        else:
            if not isinstance(declarations, RelationshipDeclarations):
                declarations = RelationshipDeclarations(declarations)
            registry = declarations.resolve()

        self._store = self._dev_store_cls() if store is None else store
        self._relations_manager = RelationsManager(registry, self._store)

    # --------------------------------------------- public api ---------------------------------------------------------
    def __repr__(self):
        return f"<Hierarchy: {len(self.get_registry())} relationships>"

    def __str__(self):
        return str(self.get_registry())

    # get context
    def get_registry(self):
        return self._relations_manager.get_registry()

    def get_store(self):
        return self._store

    def get_relations_manager(self):
        return self._relations_manager

    # construct
    def add(self, record_type, record_id=None, parent_id=NOT_SUBMITTED, **fields):
        """
        Add a record to the store.

        Parameters
        ----------
        record_type: str
        record_id: int or str or None
            if None (default), store will choose the id
        parent_id
            parent selection: NOT_SUBMITTED (default) to leave parent unchanged, None to unassign parent
        fields: record fields

        Returns
        -------
        parentage.store.record.Record
        """
        record = self._store.add(record_type, record_id=record_id, **fields)
        self._post_save(record, parent_id)
        return record

    def save(self, record_id, parent_id=NOT_SUBMITTED, **fields):
        """
        Update an existing record.

        Parameters
        ----------
        record_id
        parent_id
            parent selection: NOT_SUBMITTED (default) to leave parent unchanged, None to unassign parent
        fields: record fields to update

        Returns
        -------
        parentage.store.record.Record
        """
        record = self._store.update(record_id, **fields)
        self._post_save(record, parent_id)
        return record

    def _post_save(self, record, parent_id):
        if parent_id is NOT_SUBMITTED:
            return
        self._relations_manager.set_parent(record.id, record.type, parent_id)

    def delete(self, record_id):
        """
        Delete a record, after having cleaned its relationships. Does nothing if record does not exist.

        Parameters
        ----------
        record_id
        """
        record_type = self._store.get_type(record_id)
        if record_type is None:
            return
        self._relations_manager.on_delete(record_id, record_type)
        self._store.delete(record_id)
        logger.debug(f"{record_type} {record_id!r} deleted")

    # explore
    def get_parent(self, record_id):
        record_type = self._store.get_type(record_id)
        return self._relations_manager.get_parent(record_id, record_type)

    def get_children(self, record_id):
        """
        Get children records.

        Returns
        -------
        parentage.store.multi_type_queryset.MultiTypeQueryset
        """
        record_type = self._store.get_type(record_id)
        return self._relations_manager.get_children(record_id, record_type)

    def shows_hierarchies(self, record_type):
        """
        Return whether records of given type have relationships to edit or display.

        Parameters
        ----------
        record_type: str

        Returns
        -------
        bool
        """
        return self.get_registry().has_relationships(record_type)

    def get_parent_choices(self, child_type):
        """
        Get the records a record of child_type may belong to.

        Parameters
        ----------
        child_type: str

        Returns
        -------
        collections.OrderedDict
            {parent_id: label, ...}, sorted by label. Empty if child_type is not a registered child type.
        """
        relationship = self.get_registry().relationship_for(child_type)
        if relationship is None:
            return collections.OrderedDict()
        return collections.OrderedDict(self._store.select(relationship).to_labels())

    def get_children_labels(self, record_id):
        """
        Get labels of children records, by child type.

        Parameters
        ----------
        record_id

        Returns
        -------
        collections.OrderedDict
            {child_type: [(child_id, label), ...], ...}, in child types declaration order, children sorted by label.
            Child types without children are skipped.
        """
        record_type = self._store.get_type(record_id)
        children = self._relations_manager.get_children(record_id, record_type)
        labels = collections.OrderedDict()
        for child_type in self.get_registry().child_types_of(record_type):
            qs = children[child_type]
            if len(qs) == 0:
                continue
            labels[child_type] = list(qs.to_labels().items())
        return labels
