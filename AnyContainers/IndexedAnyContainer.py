from typing import Any, Dict, List, Optional, TypeVar
from .Capacity import ArrayCapacity
from .Config import AnyConfig, default_config
from .ErasedValue import ErasedValue, SlotRef, TypeHint, erase, deref_as, deref_mut_as, unerase_as

T = TypeVar('T')

class IndexedAnyContainer:
	'''
	A list of values of any, mutually different, types.

	Values are erased on the way in and read back by index as whatever
	type the caller names. An index past the end is reported as None,
	never raised. Whether the named type is checked depends on
	config.checked.

	String type hints are resolved against the typing names, anything
	registered with TypeResolver.append_globals, and the context passed
	to the call.

	Not thread safe. Wrap it in a lock if it is shared.
	'''
	def __init__(self, config:AnyConfig=None):
		self.config = config or default_config
		self._data: List[ErasedValue] = []
		self._capacity = ArrayCapacity()

	@classmethod
	def with_capacity(cls, capacity:int, config:AnyConfig=None) -> 'IndexedAnyContainer':
		instance = cls(config)
		instance._capacity = ArrayCapacity(capacity)
		return instance

	@property
	def checked(self) -> bool:
		return self.config.checked

	def capacity(self) -> int:
		return self._capacity.capacity

	def reserve(self, additional:int) -> None:
		self._capacity.reserve(len(self._data), additional)

	def reserve_exact(self, additional:int) -> None:
		self._capacity.reserve_exact(len(self._data), additional)

	def shrink_to_fit(self) -> None:
		self._capacity.shrink_to_fit(len(self._data))

	def clear(self) -> None:
		self._data.clear()

	def __len__(self) -> int:
		return len(self._data)

	def is_empty(self) -> bool:
		return len(self._data) == 0

	def _in_bounds(self, index:int) -> bool:
		return 0 <= index < len(self._data)

	def insert(self, index:int, value:T, type_:TypeHint=None, context:Dict[str, Any]=None) -> None:
		'''Inserts value at index, moving everything from index on up by one.'''
		length = len(self._data)
		if not 0 <= index <= length:
			raise IndexError(f"insertion index (is {index}) should be <= len (is {length})")
		handle = erase(value, type_, self.checked, context)
		self._capacity.grow_for_insert(length)
		self._data.insert(index, handle)

	def push(self, value:T, type_:TypeHint=None, context:Dict[str, Any]=None) -> None:
		handle = erase(value, type_, self.checked, context)
		self._capacity.grow_for_insert(len(self._data))
		self._data.append(handle)

	def get(self, index:int, type_:TypeHint, context:Dict[str, Any]=None) -> Optional[T]:
		if not self._in_bounds(index):
			return None
		return deref_as(self._data[index], type_, self.checked, context)

	def get_mut(self, index:int, type_:TypeHint, context:Dict[str, Any]=None) -> Optional[SlotRef[T]]:
		if not self._in_bounds(index):
			return None
		return deref_mut_as(self._data[index], type_, self.checked, context)

	def pop(self, type_:TypeHint, context:Dict[str, Any]=None) -> Optional[T]:
		'''
		Removes the last value and returns it as type_, or None when empty.

		Checked, a last value of another type raises TypeMismatchError and
		stays where it is.
		'''
		if not self._data:
			return None
		value = unerase_as(self._data[-1], type_, self.checked, context)
		self._data.pop()
		return value

	def __repr__(self) -> str:
		return f"IndexedAnyContainer(len={len(self)}, capacity={self.capacity()}, checked={self.checked})"
