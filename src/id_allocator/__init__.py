from .bounded_id_generator import BoundedUniqueIdAllocator
from .config import AllocatorConfig, create_allocator
from .errors import CapacityExhaustedError, IdAllocatorError, InvalidCapacityError, InvalidReclaimError
from .global_id_generator import (
	SequentialIdCounter,
	get_global_counter,
	init_global_counter,
	next_global_id,
	teardown_global_counter,
)
from .id_generator import IdAllocator, ReclaimPolicy
from .synchronized_id_generator import SynchronizedIdAllocator
from .unique_id_generator import DEFAULT_MAX_ID, UniqueIdAllocator

__version__ = "1.0.0"
