import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .bounded_id_generator import BoundedUniqueIdAllocator
from .id_generator import IdAllocator, ReclaimPolicy
from .unique_id_generator import DEFAULT_MAX_ID, UniqueIdAllocator

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class AllocatorConfig:
	# None selects the unbounded allocator.
	capacity: Optional[int] = None
	reclaim_policy: ReclaimPolicy = ReclaimPolicy.STRICT
	diagnostics: bool = False
	max_id: int = DEFAULT_MAX_ID

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AllocatorConfig":
		"""
		Read `ID_ALLOCATOR_CAPACITY`, `ID_ALLOCATOR_RECLAIM_POLICY`,
		`ID_ALLOCATOR_DIAGNOSTICS` and `ID_ALLOCATOR_MAX_ID`. Unset variables keep
		their defaults.
		"""
		if environ is None:
			environ = os.environ

		capacity = None
		raw_capacity = environ.get("ID_ALLOCATOR_CAPACITY", "").strip()
		if raw_capacity:
			capacity = _parse_int("ID_ALLOCATOR_CAPACITY", raw_capacity)

		raw_policy = environ.get("ID_ALLOCATOR_RECLAIM_POLICY", "strict").strip().lower()
		try:
			reclaim_policy = ReclaimPolicy(raw_policy)
		except ValueError:
			raise ValueError(
				f"Unknown value for ID_ALLOCATOR_RECLAIM_POLICY: {raw_policy!r}. "
				"Supported values are 'strict' and 'lenient'"
			) from None

		raw_diagnostics = environ.get("ID_ALLOCATOR_DIAGNOSTICS", "").strip().lower()
		if raw_diagnostics in _TRUE_VALUES:
			diagnostics = True
		elif raw_diagnostics in _FALSE_VALUES:
			diagnostics = False
		else:
			raise ValueError(f"Unknown value for ID_ALLOCATOR_DIAGNOSTICS: {raw_diagnostics!r}")

		max_id = DEFAULT_MAX_ID
		raw_max_id = environ.get("ID_ALLOCATOR_MAX_ID", "").strip()
		if raw_max_id:
			max_id = _parse_int("ID_ALLOCATOR_MAX_ID", raw_max_id)

		return cls(capacity=capacity, reclaim_policy=reclaim_policy, diagnostics=diagnostics, max_id=max_id)


def _parse_int(name: str, value: str) -> int:
	try:
		return int(value)
	except ValueError:
		raise ValueError(f"{name} must be an integer, got {value!r}") from None


def create_allocator(config: Optional[AllocatorConfig] = None) -> IdAllocator:
	if config is None:
		config = AllocatorConfig()
	if config.capacity is None:
		return UniqueIdAllocator(
			reclaim_policy=config.reclaim_policy,
			diagnostics=config.diagnostics,
			max_id=config.max_id,
		)
	return BoundedUniqueIdAllocator(
		config.capacity,
		reclaim_policy=config.reclaim_policy,
		diagnostics=config.diagnostics,
	)
