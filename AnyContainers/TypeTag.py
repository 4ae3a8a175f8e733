from dataclasses import dataclass
from typing import Any, Dict, Union, get_args, get_origin
from .helpers.resolve_type import TypeResolver

@dataclass(frozen=True)
class TypeTag:
	'''
	The runtime type identity recorded next to an erased value.

	Only the checked containers ever look at it. Two tags match when
	they are the same resolved type, or when either one is left
	unparameterized and both share an origin, so a value stored as
	a plain list can be read back as List[int].
	'''
	type: Any

	@property
	def origin(self) -> Any:
		return get_origin(self.type) or self.type

	@property
	def args(self) -> tuple:
		return get_args(self.type)

	@property
	def name(self) -> str:
		if get_origin(self.type) is None and isinstance(self.type, type):
			return self.type.__qualname__
		return repr(self.type)

	@classmethod
	def of(cls, type_hint: Any, context: Dict[str, Any] = None) -> 'TypeTag':
		'''Makes a tag from a type hint, a string type hint, or another tag.'''
		if isinstance(type_hint, TypeTag):
			return type_hint
		if type_hint is None:
			type_hint = type(None)
		return cls(TypeResolver.resolve_type(type_hint, context))

	@classmethod
	def of_value(cls, value: Any) -> 'TypeTag':
		return cls(type(value))

	def matches(self, other: 'TypeTag') -> bool:
		if self.type == other.type:
			return True
		if self.args and other.args:
			return False
		return self.origin == other.origin

	def admits(self, value: Any) -> bool:
		'''
		Whether value can live in a slot of this type.

		Only the origin is checked, the parameters of a generic are not.
		Origins that are not classes (Any, Callable protocols and the
		like) admit everything.
		'''
		origin = self.origin
		if origin is Union:
			return any(TypeTag(arg).admits(value) for arg in self.args)
		if isinstance(origin, type):
			return isinstance(value, origin)
		return True

	def __str__(self) -> str:
		return self.name
