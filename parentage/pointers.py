"""
Pointers are the two denormalized halves of a parent/child link, stored as record metadata.

parent pointer: on the child record, key 'parent-pointer:<relationship>', scalar parent id
children pointer: on the parent record, key 'children-pointer:<child_type>', list of child ids

An empty children pointer is never stored: the key is deleted when the last child id is removed.
"""

import logging

from .conf import CONF

logger = logging.getLogger(__name__)


def get_parent_pointer_key(relationship):
    """
    Parameters
    ----------
    relationship: str
        parent type

    Returns
    -------
    str
    """
    return f"{CONF.parent_pointer_prefix}{CONF.key_separator}{relationship}"


def get_children_pointer_key(child_type):
    return f"{CONF.children_pointer_prefix}{CONF.key_separator}{child_type}"


def _is_empty(value):
    return value is None or value == "" or (isinstance(value, (list, tuple, set, frozenset)) and len(value) == 0)


def _to_ids_list(value):
    # absent, scalar or collection (malformed metadata is tolerated)
    if _is_empty(value):
        return []
    if not isinstance(value, (list, tuple, set, frozenset)):
        value = [value]
    ids = []
    for v in value:
        if v not in ids and not _is_empty(v):
            ids.append(v)
    return ids


class PointerRepository:
    """
    Typed access to parent and children pointers.

    Parameters
    ----------
    store: parentage.store.record_store.RecordStore
    """

    def __init__(self, store):
        self._store = store

    def get_store(self):
        return self._store

    # parent pointer
    def get_parent_id(self, child_id, relationship):
        """
        Parameters
        ----------
        child_id
        relationship: str

        Returns
        -------
        parent id or None
        """
        value = self._store.get_meta(child_id, get_parent_pointer_key(relationship))
        return None if _is_empty(value) else value

    def set_parent_id(self, child_id, relationship, parent_id):
        self._store.set_meta(child_id, get_parent_pointer_key(relationship), parent_id)
        logger.debug(f"parent pointer of {child_id!r} ({relationship}) set to {parent_id!r}")

    def delete_parent_id(self, child_id, relationship):
        self._store.delete_meta(child_id, get_parent_pointer_key(relationship))
        logger.debug(f"parent pointer of {child_id!r} ({relationship}) deleted")

    # children pointer
    def get_child_ids(self, parent_id, child_type):
        """
        Parameters
        ----------
        parent_id
        child_type: str

        Returns
        -------
        list
            child ids, in insertion order, without duplicates (empty if pointer is absent)
        """
        return _to_ids_list(self._store.get_meta(parent_id, get_children_pointer_key(child_type)))

    def add_child_id(self, parent_id, child_type, child_id):
        """
        Add a child id to a children pointer, if not already present.

        Returns
        -------
        bool
            True if child id was added
        """
        child_ids = self.get_child_ids(parent_id, child_type)
        if child_id in child_ids:
            return False
        child_ids.append(child_id)
        self._store.set_meta(parent_id, get_children_pointer_key(child_type), child_ids)
        logger.debug(f"{child_type} {child_id!r} added to children of {parent_id!r}")
        return True

    def remove_child_id(self, parent_id, child_type, child_id):
        """
        Remove a child id from a children pointer. Pointer is deleted if it becomes empty.

        Returns
        -------
        bool
            True if child id was removed
        """
        child_ids = self.get_child_ids(parent_id, child_type)
        if child_id not in child_ids:
            return False
        child_ids.remove(child_id)
        if len(child_ids) == 0:
            self.delete_child_ids(parent_id, child_type)
        else:
            self._store.set_meta(parent_id, get_children_pointer_key(child_type), child_ids)
        logger.debug(f"{child_type} {child_id!r} removed from children of {parent_id!r}")
        return True

    def delete_child_ids(self, parent_id, child_type):
        self._store.delete_meta(parent_id, get_children_pointer_key(child_type))
