"""Translates list-view search parameters into a ReportQuery."""

import logging

from fieldreports.domain.entities import (
    FilterField,
    ReportQuery,
    SortField,
    SortOrder,
    SubstringFilter,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
DEFAULT_SORT_FIELD = SortField.WORK_DATE
DEFAULT_SORT_ORDER = SortOrder.DESC


def build_report_query(
    *,
    customer_name: str | None = None,
    serial_number: str | None = None,
    part_number: str | None = None,
    page: int = DEFAULT_PAGE,
    per_page: int = DEFAULT_PER_PAGE,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> ReportQuery:
    """Build the filter/order/slice query for a report list.

    An unknown ``sort_by`` is not an error: the list falls back to newest
    work date first, whatever ``sort_order`` says.
    """
    filters = tuple(
        SubstringFilter(field=filter_field, value=value)
        for filter_field, value in (
            (FilterField.CUSTOMER_NAME, customer_name),
            (FilterField.SERIAL_NUMBER, serial_number),
            (FilterField.PART_NUMBER, part_number),
        )
        if value
    )

    sort_field, order = _resolve_sort(sort_by, sort_order)

    return ReportQuery(
        filters=filters,
        sort_field=sort_field,
        sort_order=order,
        page=page if page >= 1 else DEFAULT_PAGE,
        per_page=per_page if per_page >= 1 else DEFAULT_PER_PAGE,
    )


def _resolve_sort(sort_by: str | None, sort_order: str | None) -> tuple[SortField, SortOrder]:
    if sort_by is None:
        sort_field = DEFAULT_SORT_FIELD
    else:
        try:
            sort_field = SortField(sort_by)
        except ValueError:
            logger.debug("Ignoring unsupported sortBy=%r", sort_by)
            return DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER

    try:
        order = SortOrder(sort_order) if sort_order is not None else DEFAULT_SORT_ORDER
    except ValueError:
        logger.debug("Ignoring unsupported sortOrder=%r", sort_order)
        order = DEFAULT_SORT_ORDER
    return sort_field, order
