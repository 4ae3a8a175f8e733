from dataclasses import dataclass, replace
from typing import TypeVar
import logging

T = TypeVar('T', bound='AnyConfig')

logger_name = 'AnyContainers'
'''Parent logger of every module in the package.'''

def set_log_all(value:bool) -> None:
	if value:
		logging.getLogger(logger_name).setLevel(logging.DEBUG)
	else:
		logging.getLogger(logger_name).setLevel(logging.WARNING)

@dataclass
class AnyConfig:
	'''
	Settings shared by the containers.

	checked selects the variant: when True every typed access compares
	the requested type against the stored TypeTag and raises
	TypeMismatchError on a mismatch. When False the requested type is
	trusted and the stored object is handed back as-is.

	log_all puts the AnyContainers logger at DEBUG, otherwise at WARNING.
	The level is process wide, so the last config built decides it.
	'''
	checked: bool = True
	log_all: bool = False

	def __post_init__(self):
		set_log_all(self.log_all)

	def new(self: T, **kwargs) -> T:
		"""
		Create a copy of this config with selective updates.

		Example:
			unchecked = default_config.new(checked=False)
		"""
		return replace(self, **kwargs)

default_config = AnyConfig()
