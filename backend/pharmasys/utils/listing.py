from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
from flask import request, abort, make_response
from pharmasys.config.pagination import normalize_pagination
from pharmasys.utils.filters import RecordFilter, read_filter_params
import hashlib
import json


def apply_pagination(rows: List[Any]) -> Tuple[List[Any], int, int, int]:
    try:
        limit, offset = normalize_pagination(request.args.get('limit'), request.args.get('offset'))
    except ValueError as e:
        abort(400, description=str(e))
    return rows[offset:offset + limit], len(rows), limit, offset


def compute_etag(rows: Iterable[Dict[str, Any]], total: int, limit: int, offset: int, stats: Optional[Dict[str, Any]] = None) -> str:
    # rows are hashed whole: records carry no version column
    seed = f"{json.dumps(list(rows), sort_keys=True, default=str)}|{total}|{limit}|{offset}|{json.dumps(stats or {}, sort_keys=True, default=str)}"
    return hashlib.sha256(seed.encode()).hexdigest()[:32]


def build_list_payload(rows: list, total: int, limit: int, offset: int, stats: Optional[Dict[str, Any]] = None):
    payload = {
        'data': rows,
        'pagination': {
            'total': total,
            'limit': limit,
            'offset': offset,
            'returned': len(rows)
        }
    }
    if stats is not None:
        payload['stats'] = stats
    return payload


def make_cached_list_response(rows: list, total: int, limit: int, offset: int, stats: Optional[Dict[str, Any]] = None):
    etag = compute_etag(rows, total, limit, offset, stats)
    resp = make_response(build_list_payload(rows, total, limit, offset, stats))
    resp.headers['ETag'] = etag
    return resp, etag


def handle_conditional(etag_value: str):
    """Return a 304 response when If-None-Match carries the current ETag, else None."""
    inm = request.headers.get('If-None-Match')
    if inm and inm.strip('"') == etag_value:
        resp = make_response('', 304)
        resp.headers['ETag'] = etag_value
        return resp
    return None


def list_records(
    records: List[Any],
    record_filter: RecordFilter,
    serializer: Callable[[Any], Dict[str, Any]],
    *,
    filter_specs: Optional[Dict[str, Dict[str, Any]]] = None,
    stats: Optional[Dict[str, Any]] = None,
):
    """Filter, paginate and serialize a page's records.

    ``stats`` must be computed by the caller over the unfiltered ``records`` so the
    counters stay independent of the active search and filters.
    """
    query, selections = read_filter_params(record_filter, filter_specs or {}, request.args)
    matched = record_filter.apply(records, query, selections)
    page, total, limit, offset = apply_pagination(matched)
    resp, etag = make_cached_list_response([serializer(r) for r in page], total, limit, offset, stats)
    cond = handle_conditional(etag)
    if cond:
        return cond
    return resp
