import parentage as pa

LIBRARY_RELATIONSHIPS = [
    ("chapter", "book"),
    ("appendix", "book"),
    ("section", "chapter"),
]

TESTED_ID_KINDS = [
    "auto",  # store integer ids
    "named",  # string ids given by host
]


def iter_id_kinds(test_case):
    for id_kind in TESTED_ID_KINDS:
        with test_case.subTest(id_kind=id_kind):
            yield id_kind


def new_library(relationships=None):
    """
    Returns
    -------
    parentage.Hierarchy
    """
    return pa.Hierarchy(LIBRARY_RELATIONSHIPS if relationships is None else relationships)


def add_record(hierarchy, id_kind, record_type, name, **kwargs):
    record_id = name if id_kind == "named" else None
    return hierarchy.add(record_type, record_id=record_id, title=name, **kwargs)


def get_meta(hierarchy, record_id, key):
    return hierarchy.get_store().get_meta(record_id, key)
