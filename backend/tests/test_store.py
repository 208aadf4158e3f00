from dataclasses import dataclass, replace
from pharmasys.services.store import RecordStore, Stores
from pharmasys.fixtures import build_stores


@dataclass(frozen=True)
class Row:
    id: str
    name: str


def test_next_id_pads_and_counts():
    store = RecordStore('SUP', [Row('SUP-001', 'a'), Row('SUP-002', 'b')])
    assert store.next_id() == 'SUP-003'


def test_next_id_skips_taken_ids_after_delete():
    store = RecordStore('SUP', [Row('SUP-001', 'a'), Row('SUP-002', 'b'), Row('SUP-003', 'c')])
    assert store.remove('SUP-001')
    # count + 1 would be SUP-003 which is still in use
    assert store.next_id() == 'SUP-004'


def test_unprefixed_ids():
    store = RecordStore('', [Row('1', 'a')])
    assert store.next_id() == '2'


def test_newest_first_prepends():
    store = RecordStore('PO', [Row('PO-001', 'a')], newest_first=True)
    store.add(Row('PO-002', 'b'))
    assert [r.id for r in store.all()] == ['PO-002', 'PO-001']


def test_writes_replace_the_list():
    store = RecordStore('MED', [Row('MED-001', 'a')])
    snapshot = store.all()
    store.add(Row('MED-002', 'b'))
    store.update('MED-001', lambda r: replace(r, name='z'))
    assert [r.name for r in snapshot] == ['a']
    assert [r.name for r in store.all()] == ['z', 'b']


def test_update_and_remove_missing_record():
    store = RecordStore('MED')
    assert store.update('MED-404', lambda r: r) is None
    assert store.remove('MED-404') is False
    assert len(store) == 0


def test_fixture_stores():
    stores = build_stores()
    assert isinstance(stores, Stores)
    assert len(stores.medicines) == 8
    assert stores.purchases.next_id() == 'PO-006'
    assert stores.audit_logs.all()[0].id == '1'
    assert stores.audit_logs.next_id() == '9'
