from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query

from .bounded_id_generator import BoundedUniqueIdAllocator
from .config import AllocatorConfig, create_allocator
from .errors import CapacityExhaustedError, InvalidReclaimError
from .id_generator import IdAllocator
from .synchronized_id_generator import SynchronizedIdAllocator


def create_app(
	config: Optional[AllocatorConfig] = None,
	allocator: Optional[IdAllocator] = None,
):
	if allocator is None:
		allocator = create_allocator(config if config is not None else AllocatorConfig.from_env())

	app = FastAPI(title="ID Allocator API", version="1.0.0")
	gen = SynchronizedIdAllocator(allocator)
	app.state.allocator = gen

	@app.get("/next")
	def get_next() -> int:
		try:
			return gen.allocate()
		except CapacityExhaustedError as e:
			raise HTTPException(status_code=409, detail=str(e))

	@app.get("/range")
	def get_range(count: int = Query(1, gt=0, le=100000)) -> List[int]:
		try:
			return gen.get_id_range(count)
		except CapacityExhaustedError as e:
			raise HTTPException(status_code=409, detail=str(e))

	@app.post("/reclaim/{id_value}")
	def reclaim(id_value: int) -> Dict[str, int]:
		try:
			gen.reclaim(id_value)
		except InvalidReclaimError as e:
			raise HTTPException(status_code=400, detail=str(e))
		return {"reclaimed": id_value}

	@app.get("/used/{id_value}")
	def is_used(id_value: int) -> Dict[str, Any]:
		return {"id": id_value, "used": gen.is_used(id_value)}

	@app.get("/stats")
	def stats() -> Dict[str, Any]:
		with gen.locked() as inner:
			used_ids = inner.get_used_ids()
			body: Dict[str, Any] = {"used_ids": used_ids, "used_count": len(used_ids)}
			if isinstance(inner, BoundedUniqueIdAllocator):
				body["capacity"] = inner.capacity
				body["used_percentage"] = inner.get_used_percentage()
		return body

	return app


# Default app for uvicorn: `uvicorn id_allocator.api:app --reload`
app = create_app()
