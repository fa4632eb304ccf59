import logging
from typing import Optional

from fastapi import APIRouter, Query, Request

from reportpager.core.config import settings
from reportpager.schemas.pagination import InvalidPageRead, PaginationRead
from reportpager.utils.exceptions import InvalidPageNumberError
from reportpager.utils.pagination import PAGE_KEY, Pagination, normalize_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pager", tags=["pager"])


@router.get("", response_model=PaginationRead, responses={400: {"model": InvalidPageRead}})
def get_pager(
    request: Request,
    total: int = Query(..., ge=0),
    page_len: Optional[int] = Query(default=None),
) -> PaginationRead:
    # page is read raw: junk or non-positive values fall back to 1 instead of a 422
    page = normalize_page(request.query_params.get(PAGE_KEY))
    if page_len is None:
        page_len = settings.PAGE_LEN
    page_len = min(page_len, settings.MAX_PAGE_LEN)

    try:
        pg = Pagination.create(page_len, total, page, request.query_params)
    except InvalidPageNumberError as e:
        logger.warning(f"Запрошена несуществующая страница. requested={e.requested} max={e.max} total={total}")
        raise
    return PaginationRead.from_pagination(pg)
