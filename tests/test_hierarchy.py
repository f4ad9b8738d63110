import collections
import unittest

import parentage as pa

from tests.util import iter_id_kinds, add_record, new_library


class HierarchyTest(unittest.TestCase):
    def test_declarations_kinds(self):
        declarations = pa.RelationshipDeclarations({"chapter": "book"})
        registry = declarations.resolve()
        for declarations_or_registry in (declarations, registry, {"chapter": "book"}, [("chapter", "book")]):
            hierarchy = pa.Hierarchy(declarations_or_registry)
            self.assertEqual(registry, hierarchy.get_registry())

    def test_resolve_at_construction(self):
        declarations = pa.RelationshipDeclarations({"chapter": "book"})
        pa.Hierarchy(declarations)
        self.assertTrue(declarations.is_resolved())

    def test_custom_store(self):
        store = pa.MemoryStore()
        hierarchy = pa.Hierarchy({"chapter": "book"}, store=store)
        self.assertIs(store, hierarchy.get_store())
        self.assertIs(store, hierarchy.get_relations_manager().get_store())

    def test_save_lifecycle(self):
        for id_kind in iter_id_kinds(self):
            library = new_library()
            dune = add_record(library, id_kind, "book", "Dune")
            emma = add_record(library, id_kind, "book", "Emma")

            # parent submitted at creation
            prologue = add_record(library, id_kind, "chapter", "Prologue", parent_id=dune.id)
            self.assertIs(dune, library.get_parent(prologue.id))

            # parent not submitted: unchanged
            library.save(prologue.id, title="Prologue (revised)")
            self.assertIs(dune, library.get_parent(prologue.id))
            self.assertEqual("Prologue (revised)", prologue.title)

            # parent changed
            library.save(prologue.id, parent_id=emma.id)
            self.assertIs(emma, library.get_parent(prologue.id))
            self.assertEqual(0, len(library.get_children(dune.id)))
            self.assertEqual([prologue], list(library.get_children(emma.id)["chapter"]))

            # parent unassigned
            library.save(prologue.id, parent_id=None)
            self.assertIsNone(library.get_parent(prologue.id))
            self.assertEqual(0, len(library.get_children(emma.id)))

    def test_parent_on_unrelated_type_is_ignored(self):
        library = new_library()
        book = library.add("book", title="Dune")
        author = library.add("author", title="Herbert", parent_id=book.id)
        self.assertEqual((), author.get_meta_keys())
        self.assertIsNone(library.get_parent(author.id))

    def test_delete_lifecycle(self):
        for id_kind in iter_id_kinds(self):
            library = new_library()
            dune = add_record(library, id_kind, "book", "Dune")
            prologue = add_record(library, id_kind, "chapter", "Prologue", parent_id=dune.id)
            epilogue = add_record(library, id_kind, "chapter", "Epilogue", parent_id=dune.id)
            section = add_record(library, id_kind, "section", "Section", parent_id=prologue.id)

            # delete child
            library.delete(epilogue.id)
            self.assertNotIn(epilogue.id, library.get_store())
            self.assertEqual([prologue], list(library.get_children(dune.id)["chapter"]))

            # delete parent: children are kept, without parent
            library.delete(dune.id)
            self.assertNotIn(dune.id, library.get_store())
            self.assertIn(prologue.id, library.get_store())
            self.assertIsNone(library.get_parent(prologue.id))

            # prologue is still the parent of section
            self.assertIs(prologue, library.get_parent(section.id))

            # already deleted
            library.delete(dune.id)

            self.assertTrue(pa.check_consistency(library.get_relations_manager()).is_consistent)

    def test_shows_hierarchies(self):
        library = new_library()
        self.assertTrue(library.shows_hierarchies("book"))
        self.assertTrue(library.shows_hierarchies("chapter"))
        self.assertTrue(library.shows_hierarchies("section"))
        self.assertFalse(library.shows_hierarchies("author"))

    def test_parent_choices(self):
        library = new_library()
        library.add("book", record_id=1, title="Émile")
        library.add("book", record_id=2, title="Dune")
        library.add("book", record_id=3)
        library.add("chapter", record_id=4, title="Prologue")

        self.assertEqual(
            collections.OrderedDict([(3, "3"), (2, "Dune"), (1, "Émile")]),
            library.get_parent_choices("chapter")
        )
        self.assertEqual(
            collections.OrderedDict([(4, "Prologue")]),
            library.get_parent_choices("section")
        )
        self.assertEqual(collections.OrderedDict(), library.get_parent_choices("book"))

    def test_children_labels(self):
        library = new_library()
        book = library.add("book", title="Dune")
        library.add("chapter", record_id=10, title="Prologue", parent_id=book.id)
        library.add("chapter", record_id=11, title="Book I", parent_id=book.id)
        library.add("appendix", record_id=12, title="Ecology", parent_id=book.id)

        self.assertEqual(
            collections.OrderedDict([
                ("chapter", [(11, "Book I"), (10, "Prologue")]),
                ("appendix", [(12, "Ecology")]),
            ]),
            library.get_children_labels(book.id)
        )

        # no children
        self.assertEqual(collections.OrderedDict(), library.get_children_labels(10))
        self.assertEqual(collections.OrderedDict(), library.get_children_labels(1000))

    def test_add_missing_parent(self):
        library = new_library()
        chapter = library.add("chapter", title="Prologue", parent_id=1000)
        self.assertIsNone(library.get_parent(chapter.id))
        self.assertEqual((), chapter.get_meta_keys())
