from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)

class CapacityModel(ABC):
	'''
	Tracks the capacity a container would have if its storage were a
	fixed block that only grows or shrinks on request.

	Python's dict and list manage their own memory and don't report it,
	so the containers keep one of these next to their storage and drive
	it from every operation that changes length or asks for room.
	'''

	@property
	@abstractmethod
	def capacity(self) -> int:
		pass

	@abstractmethod
	def reserve(self, length:int, additional:int) -> None:
		'''Make room for at least additional more elements past length.'''
		pass

	@abstractmethod
	def shrink_to_fit(self, length:int) -> None:
		pass

	def grow_for_insert(self, length:int) -> None:
		'''Called before one more element is added to a container holding length.'''
		if length >= self.capacity:
			self.reserve(length, 1)

	@staticmethod
	def _check_amount(additional:int) -> None:
		if additional < 0:
			raise ValueError(f"Cannot reserve a negative amount ({additional})")

	def _log_change(self, old:int, new:int) -> None:
		if old != new:
			logger.debug("%s capacity %d -> %d", type(self).__name__, old, new)

class ArrayCapacity(CapacityModel):
	'''
	Capacity of a growable array.

	Growth is amortized: when room runs out capacity at least doubles,
	and never starts below MIN_NON_ZERO_CAP. reserve_exact skips the
	doubling and asks for exactly what is needed.
	'''
	MIN_NON_ZERO_CAP = 4

	def __init__(self, capacity:int=0):
		self._check_amount(capacity)
		self._capacity = capacity

	@property
	def capacity(self) -> int:
		return self._capacity

	def reserve(self, length:int, additional:int) -> None:
		self._check_amount(additional)
		if self._capacity - length >= additional:
			return
		required = length + additional
		new_capacity = max(self._capacity * 2, required, self.MIN_NON_ZERO_CAP)
		self._log_change(self._capacity, new_capacity)
		self._capacity = new_capacity

	def reserve_exact(self, length:int, additional:int) -> None:
		self._check_amount(additional)
		if self._capacity - length >= additional:
			return
		new_capacity = length + additional
		self._log_change(self._capacity, new_capacity)
		self._capacity = new_capacity

	def shrink_to_fit(self, length:int) -> None:
		if self._capacity > length:
			self._log_change(self._capacity, length)
			self._capacity = length

class HashCapacity(CapacityModel):
	'''
	Capacity of an open addressing hash table.

	The table has a power of two number of buckets and is kept at most
	7/8 full. Tables with fewer than 8 buckets keep one bucket free
	instead. An empty table owns no buckets at all.
	'''

	def __init__(self, capacity:int=0):
		self._check_amount(capacity)
		self._buckets = 0 if capacity == 0 else self.capacity_to_buckets(capacity)

	@staticmethod
	def capacity_to_buckets(capacity:int) -> int:
		if capacity < 8:
			return 4 if capacity < 4 else 8
		adjusted = capacity * 8 // 7
		return 1 << (adjusted - 1).bit_length()

	@staticmethod
	def buckets_to_capacity(buckets:int) -> int:
		if buckets < 8:
			return max(buckets - 1, 0)
		return buckets // 8 * 7

	@property
	def buckets(self) -> int:
		return self._buckets

	@property
	def capacity(self) -> int:
		return self.buckets_to_capacity(self._buckets)

	def _resize(self, buckets:int) -> None:
		old_capacity = self.capacity
		self._buckets = buckets
		self._log_change(old_capacity, self.capacity)

	def reserve(self, length:int, additional:int) -> None:
		self._check_amount(additional)
		capacity = self.capacity
		if capacity - length >= additional:
			return
		self._resize(self.capacity_to_buckets(max(length + additional, capacity + 1)))

	def shrink_to_fit(self, length:int) -> None:
		if length == 0:
			self._resize(0)
			return
		buckets = self.capacity_to_buckets(length)
		if buckets < self._buckets:
			self._resize(buckets)
