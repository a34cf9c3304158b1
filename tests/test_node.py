"""Unit tests for the node substrate.

Covers constructors, predicates, accessors, atom equality and the list
builder.
"""

import unittest

from sexptreelib import (
    EMPTY,
    Empty,
    Pair,
    Symbol,
    atomic_equals,
    first,
    is_atomic,
    is_empty,
    is_pair,
    is_symbol,
    make_empty,
    make_list,
    make_pair,
    make_symbol,
    rest,
    sym,
    to_text,
)


class TestConstructors(unittest.TestCase):
    """Test the primitive constructors."""

    def test_make_empty_returns_singleton(self):
        self.assertIs(make_empty(), EMPTY)

    def test_all_empties_are_equal(self):
        self.assertEqual(Empty(), EMPTY)
        self.assertEqual(hash(Empty()), hash(EMPTY))

    def test_symbol_value_equality(self):
        self.assertEqual(make_symbol("a"), Symbol("a"))
        self.assertNotEqual(make_symbol("a"), make_symbol("b"))
        self.assertEqual(sym("a"), make_symbol("a"))

    def test_symbol_rejects_non_string(self):
        with self.assertRaises(TypeError):
            make_symbol(42)

    def test_pair_holds_children(self):
        pair = make_pair(sym("a"), EMPTY)
        self.assertEqual(pair.first, sym("a"))
        self.assertIs(pair.rest, EMPTY)

    def test_pair_rejects_non_nodes(self):
        with self.assertRaises(TypeError):
            make_pair("a", EMPTY)
        with self.assertRaises(TypeError):
            make_pair(EMPTY, None)

    def test_pair_equality_is_identity(self):
        a = make_pair(sym("a"), EMPTY)
        b = make_pair(sym("a"), EMPTY)
        self.assertEqual(a, a)
        self.assertNotEqual(a, b)

    def test_nodes_are_immutable(self):
        pair = make_pair(sym("a"), EMPTY)
        with self.assertRaises(AttributeError):
            pair.first = sym("b")
        with self.assertRaises(AttributeError):
            sym("a").value = "b"


class TestPredicates(unittest.TestCase):
    """Test the three-way shape predicates."""

    def test_empty(self):
        self.assertTrue(is_empty(EMPTY))
        self.assertTrue(is_atomic(EMPTY))
        self.assertFalse(is_symbol(EMPTY))
        self.assertFalse(is_pair(EMPTY))

    def test_symbol(self):
        s = sym("x")
        self.assertFalse(is_empty(s))
        self.assertTrue(is_atomic(s))
        self.assertTrue(is_symbol(s))
        self.assertFalse(is_pair(s))

    def test_pair(self):
        p = make_pair(sym("x"), sym("y"))
        self.assertFalse(is_empty(p))
        self.assertFalse(is_atomic(p))
        self.assertFalse(is_symbol(p))
        self.assertTrue(is_pair(p))


class TestAccessors(unittest.TestCase):
    """Test first/rest and their misuse."""

    def test_first_and_rest(self):
        p = make_pair(sym("x"), sym("y"))
        self.assertEqual(first(p), sym("x"))
        self.assertEqual(rest(p), sym("y"))

    def test_accessors_reject_atoms(self):
        for atom in (EMPTY, sym("x")):
            with self.assertRaises(TypeError):
                first(atom)
            with self.assertRaises(TypeError):
                rest(atom)


class TestAtomicEquals(unittest.TestCase):
    """Test value equality between atoms."""

    def test_empty_equals_empty(self):
        self.assertTrue(atomic_equals(EMPTY, Empty()))

    def test_symbols(self):
        self.assertTrue(atomic_equals(sym("k"), sym("k")))
        self.assertFalse(atomic_equals(sym("k"), sym("j")))

    def test_empty_never_equals_symbol(self):
        self.assertFalse(atomic_equals(EMPTY, sym("k")))
        self.assertFalse(atomic_equals(sym("k"), EMPTY))

    def test_pairs_are_rejected(self):
        with self.assertRaises(TypeError):
            atomic_equals(make_pair(sym("a"), EMPTY), sym("a"))

    def test_to_text(self):
        self.assertEqual(to_text(sym("Hello")), "Hello")
        self.assertEqual(to_text(EMPTY), "()")
        with self.assertRaises(TypeError):
            to_text(make_pair(sym("a"), EMPTY))


class TestMakeList(unittest.TestCase):
    """Test the list builder."""

    def test_empty_list(self):
        self.assertIs(make_list(), EMPTY)

    def test_strings_become_symbols(self):
        lst = make_list("a", "b")
        self.assertIsInstance(lst, Pair)
        self.assertEqual(lst.first, sym("a"))
        self.assertEqual(lst.rest.first, sym("b"))
        self.assertIs(lst.rest.rest, EMPTY)

    def test_nodes_are_used_as_is(self):
        inner = make_list("b")
        lst = make_list(inner, EMPTY)
        self.assertIs(lst.first, inner)
        self.assertIs(lst.rest.first, EMPTY)

    def test_rejects_other_items(self):
        with self.assertRaises(TypeError):
            make_list("a", 1)

    def test_long_list(self):
        lst = make_list(*[str(i) for i in range(10000)])
        count = 0
        while isinstance(lst, Pair):
            count += 1
            lst = lst.rest
        self.assertEqual(count, 10000)


class TestDisplay(unittest.TestCase):
    """str() renders notation, repr() stays readable."""

    def test_str(self):
        self.assertEqual(str(make_list("a", make_list("b", "c"))), "(a (b c))")
        self.assertEqual(str(sym("a")), "a")
        self.assertEqual(str(EMPTY), "()")

    def test_repr(self):
        self.assertEqual(repr(sym("a")), "Symbol('a')")
        self.assertEqual(repr(EMPTY), "Empty()")
        self.assertEqual(repr(make_pair(sym("a"), sym("b"))), "Pair('(a . b)')")


if __name__ == "__main__":
    unittest.main()
