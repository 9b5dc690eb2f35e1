import logging
from collections import deque
from typing import Deque, List, Set

from .errors import CapacityExhaustedError, InvalidCapacityError, InvalidReclaimError
from .id_generator import IdAllocator, ReclaimPolicy, is_valid_id

logger = logging.getLogger(__name__)


class BoundedUniqueIdAllocator(IdAllocator):
	"""
	Recycling allocator over the fixed range `[0, capacity)`.

	Every id in range is queued as free at construction, in ascending order, so
	`used + free` always holds exactly `capacity` ids. Allocation takes the
	front of the queue and fails with `CapacityExhaustedError` once it is empty.
	"""

	def __init__(
		self,
		capacity: int,
		reclaim_policy: ReclaimPolicy = ReclaimPolicy.STRICT,
		diagnostics: bool = False,
	):
		if not is_valid_id(capacity) or capacity <= 0:
			raise InvalidCapacityError(capacity)
		self._capacity = capacity
		self._reclaim_policy = ReclaimPolicy(reclaim_policy)
		self._diagnostics = diagnostics

		self._available_ids: Deque[int] = deque(range(capacity))
		self._used_ids: Set[int] = set()

	@property
	def capacity(self) -> int:
		return self._capacity

	@property
	def available(self) -> int:
		return len(self._available_ids)

	@property
	def reclaim_policy(self) -> ReclaimPolicy:
		return self._reclaim_policy

	def allocate(self) -> int:
		if not self._available_ids:
			if self._diagnostics:
				logger.debug("allocation failed, all %d ids in use", self._capacity)
			raise CapacityExhaustedError(self._capacity)
		id_value = self._available_ids.popleft()
		self._used_ids.add(id_value)
		if self._diagnostics:
			logger.debug("allocated id=%d used=%.2f%%", id_value, self.get_used_percentage())
		return id_value

	def reclaim(self, id_value: int) -> None:
		if not is_valid_id(id_value):
			raise InvalidReclaimError(id_value, "ID must be an integer")
		if not 0 <= id_value < self._capacity:
			raise InvalidReclaimError(id_value, f"ID outside [0, {self._capacity})")
		if id_value not in self._used_ids:
			if self._reclaim_policy is ReclaimPolicy.LENIENT:
				if self._diagnostics:
					logger.debug("ignoring reclaim of free id=%d", id_value)
				return
			raise InvalidReclaimError(id_value)
		self._used_ids.remove(id_value)
		self._available_ids.append(id_value)
		if self._diagnostics:
			logger.debug("reclaimed id=%d used=%.2f%%", id_value, self.get_used_percentage())

	def is_used(self, id_value: int) -> bool:
		return id_value in self._used_ids

	def get_used_percentage(self) -> float:
		return len(self._used_ids) / self._capacity * 100.0

	def get_free_ids(self) -> List[int]:
		return list(self._available_ids)

	def get_used_ids(self) -> List[int]:
		return sorted(self._used_ids)

	def __len__(self) -> int:
		return len(self._used_ids)

	def __str__(self) -> str:
		used = ", ".join(str(i) for i in self.get_used_ids())
		return f"Used IDs: [{used}] | Used: {self.get_used_percentage():.2f}%"
