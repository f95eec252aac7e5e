# app/core/pagination.py

from math import ceil

from fastapi import Query
from sqlalchemy.orm import Query as SAQuery


class PageParams:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
    ):
        self.page = page
        self.limit = limit


def paginate(query: SAQuery, page: int = 1, limit: int = 10) -> dict:
    """Run ``query`` for one page and wrap it as {data, meta}."""
    total = query.order_by(None).count()

    data = (
        query
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "data": data,
        "meta": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": ceil(total / limit) if total else 0,
        },
    }
