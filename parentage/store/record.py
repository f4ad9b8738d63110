"""Store record module."""

import collections

import unidecode

from ..conf import CONF


def get_label_sort_key(label):
    """
    Get the key used to sort labels: accents are removed and case is ignored.

    Parameters
    ----------
    label: str

    Returns
    -------
    str
    """
    return unidecode.unidecode(str(label)).lower()


class Record:
    """
    Record class. A record is an identified, typed set of fields, completed by metadata.

    Parameters
    ----------
    store: parentage.store.memory_store.MemoryStore
    record_type: str
    record_id: int or str
    fields: dict or None
    meta: dict or None
    """

    _initialized = False  # used by __setattr__

    def __init__(self, store, record_type, record_id, fields=None, meta=None):
        self._store = store  # when record is deleted, store is set to None
        self._type = record_type
        self._id = record_id
        self._fields = {} if fields is None else dict(fields)
        self._meta = {} if meta is None else dict(meta)

        # signal initialized
        self._initialized = True

    # --------------------------------------------- public api ---------------------------------------------------------
    # python magic
    def __repr__(self):
        if self._store is None:
            return "<Record (deleted)>"
        return f"<Record {self._type} {self._id!r}>"

    def __str__(self):
        return f"{self.get_label()} ({self._type} {self._id})"

    def __getitem__(self, item):
        """
        Get field value.

        Parameters
        ----------
        item: str
            field name

        Returns
        -------
        value
            field value, None if field is not set
        """
        return self._fields.get(item)

    def __setitem__(self, key, value):
        self.update({key: value})

    def __getattr__(self, item):
        # only called when normal attribute lookup fails
        if item.startswith("_"):
            raise AttributeError(item)
        return self[item]

    def __setattr__(self, name, value):
        if name in self.__dict__ or not self._initialized:
            super().__setattr__(name, value)
            return
        self.update({name: value})

    def __lt__(self, other):
        """
        Compare two records: by display label, then type, then id.

        Parameters
        ----------
        other: Record

        Returns
        -------
        bool
        """
        return self.get_sort_key() < other.get_sort_key()

    def __hash__(self):
        return id(self)

    @property
    def id(self):
        return self._id

    @property
    def type(self):
        return self._type

    # get context
    def get_store(self):
        return self._store

    def is_deleted(self):
        return self._store is None

    # explore
    def get_label(self):
        """
        Get the record display label.

        Returns
        -------
        str
            value of the display field (see CONF.display_field), or record id if empty.
        """
        label = self._fields.get(CONF.display_field)
        return str(self._id) if label in (None, "") else str(label)

    def get_sort_key(self):
        return get_label_sort_key(self.get_label()), self._type, str(self._id)

    def get_meta(self, key, default=None):
        return self._meta.get(key, default)

    def get_meta_keys(self):
        return tuple(self._meta)

    # construct
    def update(self, data=None, **or_data):
        """
        Update simultaneously all given fields.

        Parameters
        ----------
        data: dict
            dictionary containing field names as keys, and field values as values (dict syntax)
        or_data: dict
            keyword arguments containing field names as keys (kwargs syntax)

        Notes
        -----
        A None value removes the field.
        """
        data = or_data if data is None else data
        for k, v in data.items():
            if v is None:
                self._fields.pop(k, None)
            else:
                self._fields[k] = v

    def _dev_set_meta(self, key, value):
        self._meta[key] = value

    def _dev_delete_meta(self, key):
        self._meta.pop(key, None)

    def _dev_make_stale(self):
        self._store = None

    def delete(self):
        """
        Delete record, and remove it from its store.

        Notes
        -----
        Relationships are not cleaned: use parentage.Hierarchy.delete to keep them consistent.
        """
        self._store.delete(self._id)

    # --------------------------------------------- export -------------------------------------------------------------
    def to_dict(self):
        return collections.OrderedDict(sorted(self._fields.items()))

    def to_json_data(self):
        """
        Get record as a json-serializable dict.

        Returns
        -------
        dict
        """
        return collections.OrderedDict([
            ("id", self._id),
            ("type", self._type),
            ("fields", self.to_dict()),
            ("meta", collections.OrderedDict(sorted(self._meta.items())))
        ])
