from typing import Any, Dict, Generic, Optional, TypeVar
import logging
from .TypeTag import TypeTag

logger = logging.getLogger(__name__)

T = TypeVar('T')
TypeHint = Any  # a class, a typing generic, a string hint or a TypeTag

CONSUMED = object()
'''Placeholder left in an ErasedValue once its value has been moved out.'''

class TypeMismatchError(TypeError):
	'''
	Raised by the checked variant when a value is requested as a
	type other than the one it was stored as.
	'''
	def __init__(self, expected:TypeTag, actual:TypeTag):
		self.expected = expected
		self.actual = actual
		super().__init__(f"Requested {expected} but the value was stored as {actual}")

class ErasedValue:
	'''
	An owned, opaque box around one value of any type.

	Nothing about the value can be read off the box directly. The
	only ways back to the value are deref_as, deref_mut_as and
	unerase_as, all of which are told what type to expect. The tag
	is kept for the checked variant; the unchecked variant never
	looks at it.

	Dropping an ErasedValue that was never un-erased is fine, the
	garbage collector reclaims the value like any other object.
	'''
	__slots__ = ('_value', '_tag')

	def __init__(self, value:Any, tag:Optional[TypeTag]=None):
		self._value = value
		self._tag = tag

	@property
	def consumed(self) -> bool:
		return self._value is CONSUMED

	def __repr__(self) -> str:
		if self.consumed:
			return '<ErasedValue (consumed)>'
		return '<ErasedValue>'

class SlotRef(Generic[T]):
	'''
	A mutable reference to the value inside an ErasedValue.

	Reading value gives the current object; assigning it replaces the
	object in place, so the container slot sees the change. With checked
	set, the new object must still fit the slot's type.
	'''
	__slots__ = ('_handle', '_checked')

	def __init__(self, handle:ErasedValue, checked:bool=True):
		self._handle = handle
		self._checked = checked

	@property
	def value(self) -> T:
		_ensure_live(self._handle)
		return self._handle._value

	@value.setter
	def value(self, value:T) -> None:
		_ensure_live(self._handle)
		tag = self._handle._tag
		if self._checked and tag is not None and not tag.admits(value):
			raise TypeMismatchError(tag, TypeTag.of_value(value))
		self._handle._value = value

	def set(self, value:T) -> None:
		self.value = value

	def __eq__(self, other) -> bool:
		if isinstance(other, SlotRef):
			return self.value == other.value
		return self.value == other

	__hash__ = None

	def __repr__(self) -> str:
		return f"SlotRef({self.value!r})"

def tag_for(value:Any, type_:Optional[TypeHint]=None, context:Dict[str, Any]=None) -> TypeTag:
	'''The tag a value gets when stored, with or without an explicit type.'''
	if type_ is None:
		return TypeTag.of_value(value)
	return TypeTag.of(type_, context)

def _ensure_live(handle:ErasedValue) -> None:
	if handle.consumed:
		raise ValueError("This ErasedValue was already un-erased")

def _check(handle:ErasedValue, type_:TypeHint, checked:bool, context:Dict[str, Any]=None) -> None:
	_ensure_live(handle)
	if not checked or handle._tag is None:
		return
	requested = TypeTag.of(type_, context)
	if not requested.matches(handle._tag):
		logger.debug("Type mismatch: requested %s, stored %s", requested, handle._tag)
		raise TypeMismatchError(requested, handle._tag)

def erase(value:T, type_:Optional[TypeHint]=None, checked:bool=True, context:Dict[str, Any]=None) -> ErasedValue:
	'''
	Boxes value for storage next to values of other types.

	type_ overrides the recorded type, which is how a list gets stored
	as List[int] rather than plain list. With checked set, an explicit
	type_ that value is not an instance of is refused. Unchecked, type_
	is ignored and no tag is recorded.

	context maps names used in string type hints to the types they
	mean, for classes not registered with TypeResolver.append_globals.
	'''
	if not checked:
		return ErasedValue(value)
	tag = tag_for(value, type_, context)
	if type_ is not None and not tag.admits(value):
		raise TypeMismatchError(tag, TypeTag.of_value(value))
	return ErasedValue(value, tag)

def deref_as(handle:ErasedValue, type_:TypeHint, checked:bool=True, context:Dict[str, Any]=None) -> T:
	'''
	The value in handle, as type_.

	The caller promises handle holds a type_. Checked, a broken promise
	raises TypeMismatchError. Unchecked, the stored object is returned
	whatever it is.
	'''
	_check(handle, type_, checked, context)
	return handle._value

def deref_mut_as(handle:ErasedValue, type_:TypeHint, checked:bool=True, context:Dict[str, Any]=None) -> SlotRef[T]:
	_check(handle, type_, checked, context)
	return SlotRef(handle, checked)

def unerase_as(handle:ErasedValue, type_:TypeHint, checked:bool=True, context:Dict[str, Any]=None) -> T:
	'''
	Moves the value out of handle, leaving it consumed.

	A failed check leaves handle untouched.
	'''
	_check(handle, type_, checked, context)
	value = handle._value
	handle._value = CONSUMED
	return value
