from AnyContainers import *
from typing import List
import gc
import unittest
import weakref

class Payload:
	pass

class KeyedAnyContainer_tests(unittest.TestCase):
	def test_readme(self):
		m = KeyedAnyContainer[int]()
		m.insert(10, 10)
		m.insert(20, 22.2)
		m.insert(30, "xxx")
		m.insert(40, [1, 2, 3])

		self.assertEqual(m.get(10, int), 10)
		self.assertEqual(m.get(20, float), 22.2)
		self.assertEqual(m.get(30, str), "xxx")
		self.assertEqual(m.get(40, List[int]), [1, 2, 3])

		self.assertEqual(m.get_mut(10, int), 10)
		self.assertEqual(m.get_mut(20, float), 22.2)
		self.assertEqual(m.get_mut(30, str), "xxx")
		self.assertEqual(m.get_mut(40, list), [1, 2, 3])

	def test_capacity(self):
		m = KeyedAnyContainer.with_capacity(50)
		self.assertGreaterEqual(m.capacity(), 50)

		m.reserve(10)
		self.assertGreaterEqual(m.capacity(), 50)

		m.insert(1, 1)

		m.shrink_to_fit()
		self.assertLess(m.capacity(), 50)
		self.assertGreaterEqual(m.capacity(), len(m))

	def test_reserve_covers_length(self):
		m = KeyedAnyContainer()
		for i in range(10):
			m.insert(i, str(i))
		for additional in [0, 1, 5, 17, 100]:
			m.reserve(additional)
			self.assertGreaterEqual(m.capacity(), len(m) + additional)

		before = m.capacity()
		m.shrink_to_fit()
		self.assertLessEqual(m.capacity(), before)
		self.assertGreaterEqual(m.capacity(), len(m))

	def test_numeric(self):
		m = KeyedAnyContainer()
		self.assertIsNone(m.insert(1, 10))
		self.assertIsNone(m.insert(2, 22.2))

		self.assertTrue(m.contains_key(1))
		self.assertTrue(m.contains_key(2))
		self.assertFalse(m.contains_key(3))

		self.assertIsNone(m.insert(3, "xxx"))
		self.assertEqual(m.insert(1, 11), 10)

		self.assertEqual(m.get(1, int), 11)
		self.assertEqual(m.get(2, float), 22.2)
		self.assertEqual(m.get(3, str), "xxx")
		self.assertEqual(len(m), 3)

	def test_empty(self):
		m = KeyedAnyContainer()
		self.assertEqual(len(m), 0)
		self.assertTrue(m.is_empty())
		self.assertIsNone(m.get("missing", int))
		self.assertIsNone(m.get_mut("missing", int))
		self.assertFalse("missing" in m)

	def test_absent_and_mismatch_are_distinct(self):
		m = KeyedAnyContainer()
		m.insert("a", 1)
		self.assertIsNone(m.get("b", str))
		with self.assertRaises(TypeMismatchError):
			m.get("a", str)
		with self.assertRaises(TypeMismatchError):
			m.get_mut("a", str)

	def test_overwrite_with_other_type(self):
		m = KeyedAnyContainer()
		m.insert("a", 1)
		with self.assertRaises(TypeMismatchError):
			m.insert("a", "one")
		self.assertEqual(m.get("a", int), 1)
		self.assertEqual(len(m), 1)

	def test_unchecked(self):
		m = KeyedAnyContainer(AnyConfig(checked=False))
		self.assertFalse(m.checked)
		m.insert("a", 1)
		self.assertEqual(m.get("a", str), 1)
		self.assertEqual(m.insert("a", "one"), 1)
		self.assertEqual(m.get("a", int), "one")

	def test_unchecked_ignores_unresolvable_hints(self):
		m = KeyedAnyContainer(AnyConfig(checked=False))
		self.assertIsNone(m.insert("a", 1, "NotDefinedAnywhere"))
		self.assertEqual(m.insert("a", 2, "AlsoUndefined"), 1)
		self.assertEqual(m.get("a", "StillUndefined"), 2)
		m.get_mut("a", "StillUndefined").value = "two"
		self.assertEqual(m.get("a", int), "two")

	def test_string_hints_with_context(self):
		types = {"Payload": Payload}
		m = KeyedAnyContainer()
		p = Payload()
		m.insert("p", p, "Payload", context=types)
		self.assertIs(m.get("p", "Payload", context=types), p)
		self.assertIs(m.get_mut("p", "Payload", context=types).value, p)
		self.assertIs(m.insert("p", Payload(), "Payload", context=types), p)
		with self.assertRaises(TypeMismatchError):
			m.get("p", "List[int]")

	def test_dropped_values_are_released(self):
		m = KeyedAnyContainer()
		first, second, third = Payload(), Payload(), Payload()
		first_ref, second_ref, third_ref = weakref.ref(first), weakref.ref(second), weakref.ref(third)
		m.insert("a", first)
		m.insert("b", second)
		del first, second

		# Overwriting hands the old value back; once dropped it is released
		m.insert("a", third)
		del third
		gc.collect()
		self.assertIsNone(first_ref())
		self.assertIsNotNone(second_ref())

		m.clear()
		gc.collect()
		self.assertIsNone(second_ref())
		self.assertIsNone(third_ref())

		kept = Payload()
		kept_ref = weakref.ref(kept)
		m.insert("kept", kept)
		del kept, m
		gc.collect()
		self.assertIsNone(kept_ref())

	def test_get_mut_in_place(self):
		m = KeyedAnyContainer()
		m.insert("n", 1)
		m.insert("xs", [1, 2], List[int])

		ref = m.get_mut("n", int)
		ref.value += 5
		self.assertEqual(m.get("n", int), 6)

		m.get_mut("xs", List[int]).value.append(3)
		self.assertEqual(m.get("xs", "List[int]"), [1, 2, 3])

		with self.assertRaises(TypeMismatchError):
			ref.value = 6.0
		with self.assertRaises(TypeMismatchError):
			m.get("xs", List[str])

	def test_clear(self):
		m = KeyedAnyContainer()
		for i in range(20):
			m.insert(i, i)
		capacity = m.capacity()
		m.clear()
		self.assertTrue(m.is_empty())
		self.assertFalse(m.contains_key(0))
		self.assertEqual(m.capacity(), capacity)
		self.assertIsNone(m.insert(0, "fresh"))

	def test_repr(self):
		m = KeyedAnyContainer.with_capacity(3)
		m.insert("secret", "value")
		self.assertEqual(repr(m), "KeyedAnyContainer(len=1, capacity=3, checked=True)")

if __name__ == '__main__':
	unittest.main()
