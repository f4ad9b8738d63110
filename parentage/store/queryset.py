"""Store queryset module."""

from ..exceptions import RecordDoesNotExistError, MultipleRecordsReturnedError


class Queryset:
    """
    Records of one type, each listed once, ordered by display label.

    Querysets are what the store returns for parent choices and children lists: their order is the order labels
    are shown in.

    Parameters
    ----------
    record_type: str
    records: typing.Iterable[parentage.store.record.Record] or None
    """

    def __init__(self, record_type, records=None):
        self._type = record_type

        # dict keys: first occurrence wins, records hash by identity
        unique_records = dict.fromkeys(() if records is None else records)
        self._records = tuple(sorted(unique_records))

        other_types = {r.type for r in self._records}.difference({self._type})
        if len(other_types) > 0:
            raise RuntimeError(
                f"queryset of {self._type} can't contain records of type(s) {sorted(other_types)}"
            )

    def __repr__(self):
        return f"<Queryset of {self._type}: {len(self._records)} records>"

    def __getitem__(self, item):
        return self._records[item]

    def __iter__(self):
        return iter(self._records)

    def __len__(self):
        return len(self._records)

    def get_type(self):
        return self._type

    def get_ids(self):
        """
        Returns
        -------
        list
            record ids, in label order
        """
        return [r.id for r in self._records]

    def select(self, filter_by=None):
        """
        Keep records matching a filter.

        Parameters
        ----------
        filter_by: typing.Callable or None
            called with each record, must return True to keep it. If None, all records are kept.

        Returns
        -------
        Queryset
        """
        if filter_by is None:
            return self
        return Queryset(self._type, filter(filter_by, self._records))

    def one(self, filter_by=None):
        """
        Get the only record (matching filter_by, if given).

        Parameters
        ----------
        filter_by: typing.Callable or None

        Returns
        -------
        parentage.store.record.Record

        Raises
        ------
        RecordDoesNotExistError
            if no record matches
        MultipleRecordsReturnedError
            if several records match
        """
        qs = self.select(filter_by=filter_by)
        if len(qs) == 0:
            raise RecordDoesNotExistError(f"no {self._type} record found")
        if len(qs) > 1:
            raise MultipleRecordsReturnedError(f"{len(qs)} {self._type} records found, expected one")
        return qs[0]

    def to_labels(self):
        """
        Returns
        -------
        dict
            {record_id: label, ...}, in label order
        """
        return dict((r.id, r.get_label()) for r in self._records)
