from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from flask import abort

ALL = 'all'


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name)


class RecordFilter:
    """Free-text search AND exact-match categorical filters over uniform records.

    search_fields: record fields compared case-insensitively against the query;
        a record matches when any of them contains the query.
    filter_fields: record fields that accept a categorical selection. A selection
        of ALL (or None) imposes no constraint on that field.

    Holds no state between calls; input order is preserved and the input list
    is never mutated.
    """

    def __init__(self, search_fields: Sequence[str], filter_fields: Iterable[str] = ()):
        self.search_fields = tuple(search_fields)
        self.filter_fields = tuple(filter_fields)

    def matches_text(self, record: Any, query: str) -> bool:
        if not query:
            return True
        needle = query.lower()
        for f in self.search_fields:
            value = _field(record, f)
            # empty fields never match
            if value is not None and needle in str(value).lower():
                return True
        return False

    def matches_filters(self, record: Any, selections: Mapping[str, Any]) -> bool:
        for name, value in selections.items():
            if value is None or value == ALL:
                continue
            if _field(record, name) != value:
                return False
        return True

    def apply(self, records: Iterable[Any], query: str = '', filters: Optional[Mapping[str, Any]] = None) -> List[Any]:
        selections = dict(filters or {})
        unknown = set(selections) - set(self.filter_fields)
        if unknown:
            raise ValueError(f"unknown filter(s): {', '.join(sorted(unknown))}")
        return [r for r in records if self.matches_text(r, query) and self.matches_filters(r, selections)]


def count_where(records: Iterable[Any], predicate: Optional[Callable[[Any], bool]] = None) -> int:
    return sum(1 for r in records if predicate is None or predicate(r))


def sum_where(records: Iterable[Any], field: str, predicate: Optional[Callable[[Any], bool]] = None):
    return sum(_field(r, field) for r in records if predicate is None or predicate(r))


def read_filter_params(record_filter: RecordFilter, specs: Dict[str, Dict[str, Any]], params: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Extract (query, selections) from request parameters.

    specs: { param_name: { 'validate': callable(value)->bool (optional) } } for each
    categorical filter of record_filter. Absent parameters select ALL.
    """
    query = params.get('search') or ''
    selections: Dict[str, Any] = {}
    for name in record_filter.filter_fields:
        val = params.get(name)
        if val is None or val == ALL:
            selections[name] = ALL
            continue
        meta = specs.get(name, {})
        if 'validate' in meta and not meta['validate'](val):
            abort(400, description=f'{name} invalid')
        selections[name] = val
    return query, selections

__all__ = ['ALL', 'RecordFilter', 'count_where', 'sum_where', 'read_filter_params']
