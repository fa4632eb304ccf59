from pydantic import BaseModel

from reportpager.utils.pagination import Pagination


class PaginationRead(BaseModel):
    page_no: int
    pages: int
    next: int
    previous: int
    limit: int
    offset: int
    next_url: str
    previous_url: str

    @classmethod
    def from_pagination(cls, pg: Pagination) -> "PaginationRead":
        return cls(
            page_no=pg.page_no,
            pages=pg.pages,
            next=pg.next,
            previous=pg.previous,
            limit=pg.limit,
            offset=pg.offset,
            next_url=pg.next_url(),
            previous_url=pg.previous_url(),
        )


class InvalidPageRead(BaseModel):
    detail: str
    requested: int
    max: int
