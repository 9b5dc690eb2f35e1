"""
Monotonic counters for cases where ids never need to be reused.

Prefer constructing a `SequentialIdCounter` and passing it to whatever needs
ids. The process-wide instance below exists for code that cannot be handed
one; it has an explicit init/teardown lifecycle and, like the counter itself,
is not thread-safe.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class SequentialIdCounter:
	"""Ever-increasing ids with no reclamation. The first id is `start + 1`."""

	def __init__(self, start: int = 0):
		if start < 0:
			raise ValueError("start must be non-negative")
		self._current_id = start

	@property
	def last_generated_id(self) -> int:
		return self._current_id

	def next_id(self) -> int:
		self._current_id += 1
		return self._current_id


_global_counter: Optional[SequentialIdCounter] = None


def init_global_counter(start: int = 0) -> SequentialIdCounter:
	"""Create the process-wide counter. Calling it again returns the existing one."""
	global _global_counter
	if _global_counter is None:
		_global_counter = SequentialIdCounter(start)
		logger.debug("initialised global id counter at %d", start)
	return _global_counter


def get_global_counter() -> SequentialIdCounter:
	if _global_counter is None:
		raise RuntimeError("global id counter is not initialised; call init_global_counter() first")
	return _global_counter


def next_global_id() -> int:
	return get_global_counter().next_id()


def teardown_global_counter() -> None:
	"""Drop the process-wide counter; the next init starts over."""
	global _global_counter
	_global_counter = None
