"""Store multi-type queryset module."""
import itertools
import collections

from .queryset import Queryset


class MultiTypeQueryset:
    """
    A multi-type queryset contains records of different types, organized in one queryset per type.

    Parameters
    ----------
    records: typing.Iterable[parentage.store.record.Record]
    """

    def __init__(self, records):
        # organize by type (we use ordered dict so __iter__ is deterministic and __eq__ works)
        # to prevent exhausting group iterator too early :
        # 1. we sort by type because groupby only groups consecutive items
        # 2. we change from iterator to list
        d = {}
        for k, g in itertools.groupby(sorted(records, key=lambda x: x.type), lambda x: x.type):
            d[k] = Queryset(k, list(g))
        self._querysets = collections.OrderedDict(sorted(d.items()))

    # python magic
    def __repr__(self):
        return f"<MultiTypeQueryset: {', '.join(self._querysets)}>"

    def __getitem__(self, record_type):
        """
        Return a queryset with records of given type (empty if none).

        Parameters
        ----------
        record_type: str

        Returns
        -------
        Queryset
        """
        return self._querysets[record_type] if record_type in self._querysets else Queryset(record_type)

    def __iter__(self):
        return iter(self._querysets)

    def __eq__(self, other):
        # equal if both contain the same records
        if not isinstance(other, MultiTypeQueryset):
            return NotImplemented
        return set(self.iter_all_records()) == set(other.iter_all_records())

    def __len__(self):
        # number of non-empty querysets
        return len(self._querysets)

    def items(self):
        return self._querysets.items()

    def keys(self):
        return self._querysets.keys()

    def values(self):
        return self._querysets.values()

    def iter_all_records(self):
        """
        Iterate through records of all querysets.

        Returns
        -------
        typing.Iterable[parentage.store.record.Record]
        """
        return itertools.chain(*self._querysets.values())
