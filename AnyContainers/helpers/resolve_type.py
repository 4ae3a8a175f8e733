# Names imported here are what string type hints can refer to without a context
from typing import Type, Tuple, List, Dict, Any, Set, Optional, Union, Literal, Annotated, get_args, get_origin, ForwardRef
import types

class TypeResolver:
	locals = {}

	@classmethod
	def append_globals(cls, global_context):
		"""Appends global context to the local context."""
		cls.locals.update(global_context)

	@classmethod
	def resolve_type(cls, type_hint, context_dict=None):
		"""
		Resolves string type hints and ForwardRefs, and rebuilds generics
		on their runtime origin so that List[int] and list[int] resolve
		to the same thing.
		"""
		# Combine self.locals with the provided context_dict
		combined_context = {**cls.locals, **(context_dict or {})}

		if isinstance(type_hint, str):
			return cls.resolve_type(eval(type_hint, globals(), combined_context), combined_context)

		if isinstance(type_hint, ForwardRef):
			return cls.resolve_type(eval(type_hint.__forward_arg__, globals(), combined_context), combined_context)

		origin = get_origin(type_hint)
		if origin is None:
			return type_hint

		# Literal and Annotated carry values, not types
		if origin is Literal or origin is Annotated:
			return type_hint

		args = tuple(cls.resolve_type(arg, combined_context) for arg in get_args(type_hint))
		if not args:
			return origin
		if origin is types.UnionType:
			return Union[args]
		return origin[args]
