"""Relations manager keeps parent and children pointers consistent when records are saved or deleted."""

import logging

from .pointers import PointerRepository
from .store.multi_type_queryset import MultiTypeQueryset

logger = logging.getLogger(__name__)


class RelationsManager:
    """
    Relations manager class to handle parent/child links between records.

    Parameters
    ----------
    registry: parentage.registry.registry.RelationshipRegistry
    store: parentage.store.record_store.RecordStore

    Notes
    -----
    child: set parent
        relations_manager
            unregistered child type => leave
            same parent as current one => leave
            remove child from old parent children pointer (delete pointer if empty)
            set child parent pointer
            add child to new parent children pointer

    child: delete
        relations_manager
            remove child from parent children pointer (delete pointer if empty)

    parent: delete
        relations_manager
            for each child type of parent type
                for each child of children pointer still pointing on parent
                    delete child parent pointer (child becomes orphan)
                delete parent children pointer

    None of these operations raise: missing records or unregistered types lead to no-ops.
    """

    def __init__(self, registry, store):
        self._registry = registry
        self._store = store
        self._pointers = PointerRepository(store)

    def __repr__(self):
        return f"<RelationsManager: {len(self._registry)} relationships>"

    # ------------------------------------------- context --------------------------------------------------------------
    def get_registry(self):
        return self._registry

    def get_store(self):
        return self._store

    def get_pointers(self):
        return self._pointers

    # --------------------------------------------- write --------------------------------------------------------------
    def set_parent(self, child_id, child_type, new_parent_id):
        """
        Set the parent of a child record.

        Parameters
        ----------
        child_id
        child_type: str
        new_parent_id
            if None, child's current parent is unassigned

        Notes
        -----
        Does nothing if child_type is not a registered child type, if child does not exist, or if new parent is not an
        existing record of the relationship parent type.
        """
        relationship = self._registry.relationship_for(child_type)
        if relationship is None:
            return

        if self._store.get_by_id(child_type, child_id) is None:
            logger.warning(f"{child_type} {child_id!r} does not exist, parent not set")
            return

        old_parent_id = self._pointers.get_parent_id(child_id, relationship)

        # already set
        if old_parent_id == new_parent_id:
            return

        if new_parent_id is not None and self._store.get_by_id(relationship, new_parent_id) is None:
            logger.warning(
                f"{relationship} {new_parent_id!r} does not exist, can't be set as parent of "
                f"{child_type} {child_id!r}"
            )
            return

        # leave old parent
        if old_parent_id is not None:
            self._pointers.remove_child_id(old_parent_id, child_type, child_id)

        # unassign
        if new_parent_id is None:
            self._pointers.delete_parent_id(child_id, relationship)
            return

        # join new parent
        self._pointers.set_parent_id(child_id, relationship, new_parent_id)
        self._pointers.add_child_id(new_parent_id, child_type, child_id)

    def on_delete(self, record_id, record_type=None):
        """
        Clean relationships of a record that is about to be deleted.

        Parameters
        ----------
        record_id
        record_type: str or None
            if None, type is retrieved from store

        Notes
        -----
        Children of a deleted parent are not deleted: their parent pointer is cleared (they become orphans).
        """
        if record_type is None:
            record_type = self._store.get_type(record_id)
            if record_type is None:
                return

        # as a child
        relationship = self._registry.relationship_for(record_type)
        if relationship is not None:
            parent_id = self._pointers.get_parent_id(record_id, relationship)
            if parent_id is not None:
                self._pointers.remove_child_id(parent_id, record_type, record_id)

        # as a parent
        for child_type in self._registry.child_types_of(record_type):
            child_ids = self._pointers.get_child_ids(record_id, child_type)
            for child_id in child_ids:
                # child may point elsewhere if data is stale
                if self._pointers.get_parent_id(child_id, record_type) != record_id:
                    logger.warning(
                        f"{child_type} {child_id!r} is listed in children of {record_type} {record_id!r} but does "
                        f"not point on it, skipped"
                    )
                    continue
                self._pointers.delete_parent_id(child_id, record_type)
            if len(child_ids) > 0:
                self._pointers.delete_child_ids(record_id, child_type)

    # ---------------------------------------------- read --------------------------------------------------------------
    def list_children(self, parent_id, parent_type):
        """
        List children of a parent record.

        Parameters
        ----------
        parent_id
        parent_type: str

        Returns
        -------
        frozenset of (child_type, child_id)
            empty if parent has no children (or parent_type is not a parent type)
        """
        return frozenset(
            (child_type, child_id)
            for child_type in self._registry.child_types_of(parent_type)
            for child_id in self._pointers.get_child_ids(parent_id, child_type)
        )

    def get_parent_id(self, child_id, child_type):
        """
        Get parent id of a child record.

        Parameters
        ----------
        child_id
        child_type: str

        Returns
        -------
        parent id or None
            None if child has no parent or child_type is not a registered child type
        """
        relationship = self._registry.relationship_for(child_type)
        if relationship is None:
            return None
        return self._pointers.get_parent_id(child_id, relationship)

    def get_parent(self, child_id, child_type):
        """
        Get parent record of a child record.

        Returns
        -------
        parentage.store.record.Record or None
        """
        parent_id = self.get_parent_id(child_id, child_type)
        if parent_id is None:
            return None
        return self._store.get_by_id(self._registry.relationship_for(child_type), parent_id)

    def get_children(self, parent_id, parent_type):
        """
        Get existing children records of a parent record.

        Parameters
        ----------
        parent_id
        parent_type: str

        Returns
        -------
        MultiTypeQueryset
            one queryset per child type, records sorted by display label
        """
        records = []
        for child_type in self._registry.child_types_of(parent_type):
            child_ids = self._pointers.get_child_ids(parent_id, child_type)
            if len(child_ids) == 0:
                continue
            records.extend(self._store.get_by_ids(child_type, child_ids))
        return MultiTypeQueryset(records)
