from .TypeTag import TypeTag
from .Config import AnyConfig, default_config
from .ErasedValue import ErasedValue, SlotRef, TypeMismatchError, erase, deref_as, deref_mut_as, unerase_as
from .KeyedAnyContainer import KeyedAnyContainer
from .IndexedAnyContainer import IndexedAnyContainer
