import unittest

import parentage as pa
from parentage.pointers import get_parent_pointer_key, get_children_pointer_key


class PointerKeysTest(unittest.TestCase):
    def test_keys(self):
        self.assertEqual("parent-pointer:book", get_parent_pointer_key("book"))
        self.assertEqual("children-pointer:chapter", get_children_pointer_key("chapter"))

    def test_keys_keep_type_names(self):
        self.assertEqual("parent-pointer:Book Series", get_parent_pointer_key("Book Series"))
        self.assertEqual("children-pointer:Chapitre Annexé", get_children_pointer_key("Chapitre Annexé"))

        # types differing by punctuation or case don't share keys
        self.assertNotEqual(get_children_pointer_key("book_note"), get_children_pointer_key("book-note"))
        self.assertNotEqual(get_children_pointer_key("Chapter"), get_children_pointer_key("chapter"))

    def test_conf(self):
        prefix = pa.CONF.parent_pointer_prefix
        try:
            pa.CONF.parent_pointer_prefix = "p2p"
            self.assertEqual("p2p:book", get_parent_pointer_key("book"))
        finally:
            pa.CONF.parent_pointer_prefix = prefix


class PointerRepositoryTest(unittest.TestCase):
    def setUp(self):
        self.store = pa.MemoryStore()
        self.book = self.store.add("book", title="book")
        self.chapter = self.store.add("chapter", title="chapter")
        self.pointers = pa.PointerRepository(self.store)

    def test_parent_pointer(self):
        self.assertIsNone(self.pointers.get_parent_id(self.chapter.id, "book"))

        self.pointers.set_parent_id(self.chapter.id, "book", self.book.id)
        self.assertEqual(self.book.id, self.pointers.get_parent_id(self.chapter.id, "book"))
        self.assertEqual(self.book.id, self.chapter.get_meta("parent-pointer:book"))

        self.pointers.delete_parent_id(self.chapter.id, "book")
        self.assertIsNone(self.pointers.get_parent_id(self.chapter.id, "book"))
        self.assertNotIn("parent-pointer:book", self.chapter.get_meta_keys())

    def test_children_pointer_set_semantics(self):
        self.assertTrue(self.pointers.add_child_id(self.book.id, "chapter", 10))
        self.assertTrue(self.pointers.add_child_id(self.book.id, "chapter", 11))
        self.assertFalse(self.pointers.add_child_id(self.book.id, "chapter", 10))
        self.assertEqual([10, 11], self.pointers.get_child_ids(self.book.id, "chapter"))

    def test_last_child_removal_deletes_pointer(self):
        self.pointers.add_child_id(self.book.id, "chapter", 10)
        self.pointers.add_child_id(self.book.id, "chapter", 11)

        self.assertTrue(self.pointers.remove_child_id(self.book.id, "chapter", 10))
        self.assertEqual([11], self.book.get_meta("children-pointer:chapter"))

        self.assertTrue(self.pointers.remove_child_id(self.book.id, "chapter", 11))
        self.assertNotIn("children-pointer:chapter", self.book.get_meta_keys())

        self.assertFalse(self.pointers.remove_child_id(self.book.id, "chapter", 11))

    def test_malformed_children_pointer(self):
        # scalar value
        self.store.set_meta(self.book.id, "children-pointer:chapter", 10)
        self.assertEqual([10], self.pointers.get_child_ids(self.book.id, "chapter"))

        # duplicates and empty values
        self.store.set_meta(self.book.id, "children-pointer:chapter", [10, 10, None, "", 11])
        self.assertEqual([10, 11], self.pointers.get_child_ids(self.book.id, "chapter"))

        # empty list is absent
        self.store.set_meta(self.book.id, "children-pointer:chapter", [])
        self.assertEqual([], self.pointers.get_child_ids(self.book.id, "chapter"))

    def test_missing_record(self):
        self.assertIsNone(self.pointers.get_parent_id(1000, "book"))
        self.assertEqual([], self.pointers.get_child_ids(1000, "chapter"))
        self.pointers.delete_parent_id(1000, "book")
        self.pointers.delete_child_ids(1000, "chapter")
