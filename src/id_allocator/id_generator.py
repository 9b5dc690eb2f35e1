import enum
from abc import ABC, abstractmethod
from typing import List


def is_valid_id(value: object) -> bool:
	"""Ids are plain ints; bools are rejected even though they subclass int."""
	return isinstance(value, int) and not isinstance(value, bool)


class ReclaimPolicy(enum.Enum):
	"""What `reclaim` does with an id that is not currently allocated."""

	STRICT = "strict"
	LENIENT = "lenient"


class IdAllocator(ABC):
	"""
	Hands out small non-negative integer ids and takes them back for reuse.

	Implementations are not thread-safe. Wrap them in
	`SynchronizedIdAllocator` when several threads share one instance.
	"""

	@abstractmethod
	def allocate(self) -> int:
		"""Take an id out of circulation and return it."""
		raise NotImplementedError

	@abstractmethod
	def reclaim(self, id_value: int) -> None:
		"""Return a previously allocated id so it can be handed out again."""
		raise NotImplementedError

	@abstractmethod
	def is_used(self, id_value: int) -> bool:
		raise NotImplementedError

	@abstractmethod
	def get_used_ids(self) -> List[int]:
		raise NotImplementedError

	def get_id_range(self, count: int) -> List[int]:
		"""
		Allocate `count` ids in one call.

		Either every id is allocated or none is: if an allocation fails
		part-way, the ids taken so far are reclaimed before the error propagates.
		"""
		if count <= 0:
			raise ValueError("count must be a positive integer")
		result: List[int] = []
		try:
			for _ in range(count):
				result.append(self.allocate())
		except Exception:
			for id_value in result:
				self.reclaim(id_value)
			raise
		return result

	def __contains__(self, id_value: object) -> bool:
		return is_valid_id(id_value) and self.is_used(id_value)

	def __len__(self) -> int:
		return len(self.get_used_ids())
