"""Query helpers over Protean DAO querysets."""

PAGE_SIZE = 100


def fetch_all(queryset, order_by: str, page_size: int = PAGE_SIZE) -> list:
    """Collect every record matched by ``queryset``, one page at a time.

    Querysets cap results at a page; the stable ``order_by`` field keeps
    consecutive pages from overlapping.
    """
    records = []
    offset = 0
    while True:
        page = queryset.order_by(order_by).limit(page_size).offset(offset).all().items
        records.extend(page)
        if len(page) < page_size:
            return records
        offset += page_size
