"""
create/update/delete methods of the memory store (see methods documentation):
 - store.add
 - store.update
 - store.delete
 - store._dev_populate_from_json_data

The store does not know about relationships: hosts must call the relations manager around writes (see
parentage.Hierarchy), or use the store only through it.
"""

import collections
import copy
import json
import logging

from .record import Record
from .record_store import RecordStore
from .queryset import Queryset
from ..exceptions import RecordDoesNotExistError, RecordValidationError
from ..util import json_data_to_json, to_buffer

logger = logging.getLogger(__name__)


class MemoryStore(RecordStore):
    """
    In-memory record store.

    Record ids are unique across all record types. If not given, ids are auto-incremented integers.

    Parameters
    ----------
    json_data: dict or None
        if provided, store will be filled with given records (see to_json_data)
    """

    _dev_record_cls = Record  # for subclassing

    def __init__(self, json_data=None):
        self._records = collections.OrderedDict()  # {record_id: record, ...}
        self._last_auto_id = 0

        if json_data is not None:
            self._dev_populate_from_json_data(json_data)

    # ------------------------------------------ private ---------------------------------------------------------------
    def _next_id(self):
        self._last_auto_id += 1
        while self._last_auto_id in self._records:
            self._last_auto_id += 1
        return self._last_auto_id

    def _dev_populate_from_json_data(self, json_data):
        """
        !! Must only be called once, when empty !!
        """
        if isinstance(json_data, str):
            raise TypeError(f"json_data must be a dict like, but '{type(json_data)}' was given")
        for record_data in json_data.get("records", []):
            record = self._dev_add(
                record_data["type"],
                record_id=record_data["id"],
                fields=record_data.get("fields"),
                meta=record_data.get("meta")
            )
            if isinstance(record.id, int):
                self._last_auto_id = max(self._last_auto_id, record.id)

    def _dev_add(self, record_type, record_id=None, fields=None, meta=None):
        # check data
        if record_type in (None, ""):
            raise RecordValidationError("record type is required")
        if record_id is None:
            record_id = self._next_id()
        elif record_id in self._records:
            raise RecordValidationError(f"record id already exists, can't create: {record_id!r}")

        # create and store
        record = self._dev_record_cls(self, record_type, record_id, fields=fields, meta=copy.deepcopy(meta))
        self._records[record_id] = record
        return record

    # --------------------------------------------- public api ---------------------------------------------------------
    # python magic
    def __repr__(self):
        return f"<MemoryStore: {len(self)} records>"

    def __str__(self):
        s = "MemoryStore\n"
        counts = collections.Counter(r.type for r in self._records.values())
        for record_type, records_nb in sorted(counts.items()):
            plural = "" if records_nb == 1 else "s"
            s += f"  {record_type}: {records_nb} record{plural}\n"
        return s

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        # tuple: records may be deleted during iteration
        return iter(tuple(self._records.values()))

    def __contains__(self, record_id):
        return record_id in self._records

    # record store interface
    def get_by_id(self, record_type, record_id):
        record = self._records.get(record_id)
        if record is None:
            return None
        if record_type is not None and record.type != record_type:
            return None
        return record

    def get_by_ids(self, record_type, record_ids):
        records = (self.get_by_id(record_type, record_id) for record_id in record_ids)
        return Queryset(record_type, (r for r in records if r is not None))

    def get_type(self, record_id):
        record = self._records.get(record_id)
        return None if record is None else record.type

    def get_meta(self, record_id, key):
        record = self._records.get(record_id)
        return None if record is None else record.get_meta(key)

    def set_meta(self, record_id, key, value):
        record = self.one(record_id)
        record._dev_set_meta(key, copy.deepcopy(value))

    def delete_meta(self, record_id, key):
        record = self._records.get(record_id)
        if record is not None:
            record._dev_delete_meta(key)

    # explore
    def one(self, record_id):
        """
        Get a record by id.

        Parameters
        ----------
        record_id

        Returns
        -------
        parentage.store.record.Record

        Raises
        ------
        RecordDoesNotExistError
        """
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordDoesNotExistError(f"store does not contain a record who's id is {record_id!r}")

    def select(self, record_type, filter_by=None):
        """
        Select records of a given type.

        Parameters
        ----------
        record_type: str
        filter_by: typing.Callable or None
            Callable must take one argument (a record), and return True to keep record, or False to skip it.
            If None, records are not filtered.

        Returns
        -------
        Queryset
            sorted by display label
        """
        records = (r for r in self._records.values() if r.type == record_type)
        if filter_by is not None:
            records = filter(filter_by, records)
        return Queryset(record_type, records)

    def get_types(self):
        return sorted({r.type for r in self._records.values()})

    # construct
    def add(self, record_type, record_id=None, **fields):
        """
        Add a record.

        Parameters
        ----------
        record_type: str
        record_id: int or str or None
            if None (default), an integer id will be given
        fields: field names and values

        Returns
        -------
        Record

        Raises
        ------
        RecordValidationError
            if record_type is empty or record_id already exists
        """
        record = self._dev_add(record_type, record_id=record_id, fields=fields)
        logger.debug(f"added record {record!r}")
        return record

    def update(self, record_id, data=None, **or_data):
        """
        Update record fields (see Record.update).

        Returns
        -------
        Record
        """
        record = self.one(record_id)
        record.update(data, **or_data)
        return record

    # delete
    def delete(self, record_id):
        """
        Delete a record. Does nothing if record does not exist.

        Parameters
        ----------
        record_id
        """
        record = self._records.pop(record_id, None)
        if record is None:
            return
        record._dev_make_stale()
        logger.debug(f"deleted record {record_id!r} ({record.type})")

    # ------------------------------------------- save/load ------------------------------------------------------------
    def to_json_data(self):
        """
        Returns
        -------
        A dictionary of serialized data.
        """
        return collections.OrderedDict([("records", [r.to_json_data() for r in self._records.values()])])

    @classmethod
    def from_json_data(cls, json_data):
        return cls(json_data=json_data)

    def to_json(self, buffer_or_path=None, indent=2):
        """
        Parameters
        ----------
        buffer_or_path: buffer or path, default None
            output to write into. If None, will return a json string.
        indent: int, default 2
            Defines the indentation of the json

        Returns
        -------
        None, or a json string (if buffer_or_path is None).
        """
        return json_data_to_json(
            self.to_json_data(),
            buffer_or_path=buffer_or_path,
            indent=indent
        )

    @classmethod
    def from_json(cls, buffer_or_path):
        """
        Parameters
        ----------
        buffer_or_path: json buffer or path

        Returns
        -------
        A MemoryStore instance.
        """
        _source_file_path, buffer = to_buffer(buffer_or_path)
        with buffer as f:
            json_data = json.load(f)
        return cls(json_data=json_data)
