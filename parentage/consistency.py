"""
Consistency report of parent and children pointers.

Write paths of the relations manager keep pointers consistent, but nothing prevents external writes to record
metadata. This module reads both sides of every relationship and reports entries that don't match.
"""

import collections
import datetime as dt
import logging

import pandas as pd

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["child_type", "child_id", "relationship", "parent_id", "side", "consistent"]
CHILD_SIDE = "child"
PARENT_SIDE = "parent"


def get_consistency_report(relations_manager, records=None):
    """
    Get one row per pointer entry found on either side of a link.

    Parameters
    ----------
    relations_manager: parentage.relations_manager.RelationsManager
    records: typing.Iterable[parentage.store.record.Record] or None
        records to inspect, all store records if None (store must then be iterable)

    Returns
    -------
    pd.DataFrame
        columns: child_type, child_id, relationship, parent_id, side, consistent.
        side is 'child' for a parent pointer entry, 'parent' for a children pointer entry.
    """
    registry = relations_manager.get_registry()
    store = relations_manager.get_store()
    pointers = relations_manager.get_pointers()
    records = store if records is None else records

    rows = []
    for record in records:
        # as a child: parent pointer must be listed in parent children pointer
        relationship = registry.relationship_for(record.type)
        if relationship is not None:
            parent_id = pointers.get_parent_id(record.id, relationship)
            if parent_id is not None:
                rows.append((
                    record.type,
                    record.id,
                    relationship,
                    parent_id,
                    CHILD_SIDE,
                    record.id in pointers.get_child_ids(parent_id, record.type)
                ))

        # as a parent: each listed child must point on record
        for child_type in registry.child_types_of(record.type):
            for child_id in pointers.get_child_ids(record.id, child_type):
                rows.append((
                    child_type,
                    child_id,
                    record.type,
                    record.id,
                    PARENT_SIDE,
                    (
                        store.get_by_id(child_type, child_id) is not None and
                        pointers.get_parent_id(child_id, record.type) == record.id
                    )
                ))

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["consistent"] = df["consistent"].astype(bool)
    return df


class ConsistencyReport:
    """
    Summary of a consistency check.

    Parameters
    ----------
    report_df: pd.DataFrame
        see get_consistency_report
    """

    def __init__(self, report_df):
        self.report_df = report_df
        self.checked_at = dt.datetime.now()

    def __repr__(self):
        return f"<ConsistencyReport: {'consistent' if self.is_consistent else 'inconsistent'}>"

    def __str__(self):
        lines = [
            "Consistency report",
            f"  checked at: {self.checked_at.isoformat()}",
            f"  links: {self.links_nb}",
        ]
        for side, count in self.inconsistent_counts.items():
            lines.append(f"  inconsistent {side} entries: {count}")
        return "\n".join(lines)

    @property
    def links_nb(self):
        """
        Number of distinct (child_type, child_id, parent_id) links, seen from any side.

        Returns
        -------
        int
        """
        return len(self.report_df.drop_duplicates(["child_type", "child_id", "parent_id"]))

    @property
    def inconsistent_df(self):
        return self.report_df[~self.report_df["consistent"]]

    @property
    def inconsistent_counts(self):
        """
        Returns
        -------
        collections.OrderedDict
            {side: count, ...}, only sides with inconsistencies
        """
        counts = self.inconsistent_df["side"].value_counts()
        return collections.OrderedDict(
            (side, int(counts[side])) for side in (CHILD_SIDE, PARENT_SIDE) if side in counts.index
        )

    @property
    def is_consistent(self):
        return len(self.inconsistent_df) == 0


def check_consistency(relations_manager, records=None):
    """
    Check consistency of all pointers.

    Parameters
    ----------
    relations_manager: parentage.relations_manager.RelationsManager
    records: typing.Iterable[parentage.store.record.Record] or None

    Returns
    -------
    ConsistencyReport
    """
    report = ConsistencyReport(get_consistency_report(relations_manager, records=records))
    if not report.is_consistent:
        logger.warning(
            f"inconsistent relationships found: {dict(report.inconsistent_counts)}"
        )
    return report
