from typing import Any, Dict, Generic, Hashable, Optional, TypeVar
from .Capacity import HashCapacity
from .Config import AnyConfig, default_config
from .ErasedValue import ErasedValue, SlotRef, TypeHint, erase, deref_as, deref_mut_as, unerase_as, tag_for

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

class KeyedAnyContainer(Generic[K]):
	'''
	A dict from keys to values of any, mutually different, types.

	Each value is erased on the way in and read back as whatever
	type the caller names. Whether that type is checked against the
	stored one depends on config.checked.

	String type hints are resolved against the typing names, anything
	registered with TypeResolver.append_globals, and the context passed
	to the call.

	Not thread safe. Wrap it in a lock if it is shared.
	'''
	def __init__(self, config:AnyConfig=None):
		self.config = config or default_config
		self._data: Dict[K, ErasedValue] = {}
		self._capacity = HashCapacity()

	@classmethod
	def with_capacity(cls, capacity:int, config:AnyConfig=None) -> 'KeyedAnyContainer[K]':
		instance = cls(config)
		instance._capacity = HashCapacity(capacity)
		return instance

	@property
	def checked(self) -> bool:
		return self.config.checked

	def capacity(self) -> int:
		return self._capacity.capacity

	def reserve(self, additional:int) -> None:
		self._capacity.reserve(len(self._data), additional)

	def shrink_to_fit(self) -> None:
		self._capacity.shrink_to_fit(len(self._data))

	def clear(self) -> None:
		self._data.clear()

	def __len__(self) -> int:
		return len(self._data)

	def is_empty(self) -> bool:
		return len(self._data) == 0

	def contains_key(self, key:K) -> bool:
		return key in self._data

	def __contains__(self, key:K) -> bool:
		return self.contains_key(key)

	def insert(self, key:K, value:V, type_:TypeHint=None, context:Dict[str, Any]=None) -> Optional[V]:
		'''
		Stores value at key, returning what was there before, if anything.

		The previous value is handed back as the type of the new one, so
		the caller promises both share a type. Checked, a previous value of
		another type raises TypeMismatchError and nothing is stored.

		context maps names in a string type_ to types, see erase.
		'''
		new = erase(value, type_, self.checked, context)
		previous = self._data.get(key)
		if previous is None:
			self._capacity.grow_for_insert(len(self._data))
			self._data[key] = new
			return None

		if self.checked:
			old_value = unerase_as(previous, tag_for(value, type_, context))
		else:
			old_value = unerase_as(previous, type_, checked=False)
		self._data[key] = new
		return old_value

	def get(self, key:K, type_:TypeHint, context:Dict[str, Any]=None) -> Optional[V]:
		handle = self._data.get(key)
		if handle is None:
			return None
		return deref_as(handle, type_, self.checked, context)

	def get_mut(self, key:K, type_:TypeHint, context:Dict[str, Any]=None) -> Optional[SlotRef[V]]:
		handle = self._data.get(key)
		if handle is None:
			return None
		return deref_mut_as(handle, type_, self.checked, context)

	def __repr__(self) -> str:
		return f"KeyedAnyContainer(len={len(self)}, capacity={self.capacity()}, checked={self.checked})"
