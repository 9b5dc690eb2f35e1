import contextlib
import threading
from typing import Iterator, List

from .id_generator import IdAllocator


class SynchronizedIdAllocator(IdAllocator):
	"""
	Serialises every call on a wrapped allocator with a single lock.

	Errors raised by the wrapped allocator propagate unchanged. Only the
	`IdAllocator` methods are forwarded; reach variant-specific calls such as
	`get_free_ids` or `get_used_percentage` through `locked()` so they run under
	the same lock.
	"""

	def __init__(self, allocator: IdAllocator):
		self._allocator = allocator
		self._lock = threading.Lock()

	@property
	def wrapped(self) -> IdAllocator:
		return self._allocator

	def allocate(self) -> int:
		with self._lock:
			return self._allocator.allocate()

	def reclaim(self, id_value: int) -> None:
		with self._lock:
			self._allocator.reclaim(id_value)

	def is_used(self, id_value: int) -> bool:
		with self._lock:
			return self._allocator.is_used(id_value)

	def get_used_ids(self) -> List[int]:
		with self._lock:
			return self._allocator.get_used_ids()

	def get_id_range(self, count: int) -> List[int]:
		with self._lock:
			return self._allocator.get_id_range(count)

	def __len__(self) -> int:
		with self._lock:
			return len(self._allocator)

	def __str__(self) -> str:
		with self._lock:
			return str(self._allocator)

	@contextlib.contextmanager
	def locked(self) -> Iterator[IdAllocator]:
		"""Hold the lock across several calls on the wrapped allocator."""
		with self._lock:
			yield self._allocator
