"""
Record store interface.

The relations manager only depends on this interface: any storage (database, cms, files, ...) can be used through an
adapter implementing it. parentage.store.memory_store.MemoryStore is the in-memory adapter.
"""


class RecordStore:
    """Record store interface: get records by id(s), and get/set/delete record metadata by key."""

    def get_by_id(self, record_type, record_id):
        """
        Get a record.

        Parameters
        ----------
        record_type: str or None
            if not None, records of another type are not returned
        record_id

        Returns
        -------
        parentage.store.record.Record or None
        """
        raise NotImplementedError

    def get_by_ids(self, record_type, record_ids):
        """
        Get existing records of given type among given ids.

        Parameters
        ----------
        record_type: str
        record_ids: typing.Iterable

        Returns
        -------
        parentage.store.queryset.Queryset
            sorted by display label, missing ids are skipped
        """
        raise NotImplementedError

    def get_type(self, record_id):
        """
        Get record type.

        Parameters
        ----------
        record_id

        Returns
        -------
        str or None
            None if record does not exist
        """
        raise NotImplementedError

    def get_meta(self, record_id, key):
        """
        Get a metadata value.

        Parameters
        ----------
        record_id
        key: str

        Returns
        -------
        value or None
            None if record or key does not exist
        """
        raise NotImplementedError

    def set_meta(self, record_id, key, value):
        """
        Set a metadata value.

        Parameters
        ----------
        record_id
        key: str
        value: json-serializable value
        """
        raise NotImplementedError

    def delete_meta(self, record_id, key):
        """
        Delete a metadata value. Does nothing if record or key does not exist.

        Parameters
        ----------
        record_id
        key: str
        """
        raise NotImplementedError

    def select(self, record_type, filter_by=None):
        """
        Select records of a given type.

        Parameters
        ----------
        record_type: str
        filter_by: typing.Callable or None

        Returns
        -------
        parentage.store.queryset.Queryset
            sorted by display label
        """
        raise NotImplementedError
