import logging
from collections import deque
from typing import Deque, List, Set

from .errors import InvalidReclaimError
from .id_generator import IdAllocator, ReclaimPolicy, is_valid_id

logger = logging.getLogger(__name__)

# Largest value of an unsigned 32-bit identifier.
DEFAULT_MAX_ID = 2**32 - 1


class UniqueIdAllocator(IdAllocator):
	"""
	Unbounded recycling allocator.

	- Fresh ids come from a counter starting at 0.
	- Reclaimed ids go to a FIFO pool and are reused, oldest first, before the
	  counter advances.
	- Allocation never fails. Once `max_id` has been handed out the counter wraps
	  to 0; from then on a fresh id may collide with one still in use. Such
	  collisions are logged, not prevented.
	"""

	def __init__(
		self,
		reclaim_policy: ReclaimPolicy = ReclaimPolicy.STRICT,
		diagnostics: bool = False,
		max_id: int = DEFAULT_MAX_ID,
	):
		if max_id < 0:
			raise ValueError("max_id must be non-negative")
		self._reclaim_policy = ReclaimPolicy(reclaim_policy)
		self._diagnostics = diagnostics
		self._max_id = max_id

		self._next_id = 0
		self._used_ids: Set[int] = set()
		self._reclaimed_ids: Deque[int] = deque()

	@property
	def reclaim_policy(self) -> ReclaimPolicy:
		return self._reclaim_policy

	@property
	def max_id(self) -> int:
		return self._max_id

	@property
	def next_id(self) -> int:
		return self._next_id

	def allocate(self) -> int:
		if self._reclaimed_ids:
			id_value = self._reclaimed_ids.popleft()
		else:
			id_value = self._advance()
		self._used_ids.add(id_value)
		if self._diagnostics:
			logger.debug("allocated id=%d in_use=%d", id_value, len(self._used_ids))
		return id_value

	def _advance(self) -> int:
		id_value = self._next_id
		if id_value in self._used_ids:
			logger.warning("fresh id=%d collides with an id still in use after wrap-around", id_value)
		if id_value >= self._max_id:
			logger.warning("id counter reached max_id=%d, wrapping to 0", self._max_id)
			self._next_id = 0
		else:
			self._next_id = id_value + 1
		return id_value

	def reclaim(self, id_value: int) -> None:
		if not is_valid_id(id_value):
			raise InvalidReclaimError(id_value, "ID must be an integer")
		if id_value not in self._used_ids:
			if self._reclaim_policy is ReclaimPolicy.LENIENT:
				if self._diagnostics:
					logger.debug("ignoring reclaim of unallocated id=%r", id_value)
				return
			raise InvalidReclaimError(id_value)
		self._used_ids.remove(id_value)
		self._reclaimed_ids.append(id_value)
		if self._diagnostics:
			logger.debug("reclaimed id=%d free=%d", id_value, len(self._reclaimed_ids))

	def is_used(self, id_value: int) -> bool:
		return id_value in self._used_ids

	def get_used_ids(self) -> List[int]:
		return sorted(self._used_ids)

	def get_free_ids(self) -> List[int]:
		return list(self._reclaimed_ids)

	def __len__(self) -> int:
		return len(self._used_ids)

	def __str__(self) -> str:
		return "Used IDs: [{}]".format(", ".join(str(i) for i in self.get_used_ids()))
