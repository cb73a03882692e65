# api/pagination.py

from dataclasses import dataclass

from fastapi import Query

from hms.config.settings import Settings


@dataclass
class Page:
	page: int
	limit: int

	@property
	def offset(self) -> int:
		return (self.page - 1) * self.limit

def get_page(
	page: int = Query(1, ge=1),
	limit: int = Query(Settings.DEFAULT_PAGE_SIZE, ge=1, le=Settings.MAX_PAGE_SIZE)
) -> Page:
	"""1-indexed page/limit query parameters."""
	return Page(page=page, limit=limit)
