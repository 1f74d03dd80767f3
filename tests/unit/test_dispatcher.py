import pytest

from behaviorable.behaviors.base import BaseBehavior
from behaviorable.businesses.signals import Signal
from behaviorable.exceptions import UnknownFinderError

from fakes import ListBusiness, Recorder, row


def _business(*specs, **kwargs):
    log = []
    business = ListBusiness(**kwargs)
    for name, returns in specs:
        business.attach(Recorder(name, log, **returns))
    return business, log


# ----------------------------------------------------------------------
# Save
# ----------------------------------------------------------------------
def test_save_runs_chains_in_attachment_order():
    business, log = _business(("b1", {}), ("b2", {}))
    record = row(None)

    assert business.save(record) is True
    assert business.saved == [record]
    assert log == [
        ("b1", "before_save"),
        ("b2", "before_save"),
        ("b1", "after_save"),
        ("b2", "after_save"),
    ]


def test_before_save_abort_skips_everything_after_it():
    business, log = _business(("b1", {"before_save": False}), ("b2", {}))

    assert business.save(row(None)) is False
    assert business.saved == []
    assert log == [("b1", "before_save")]


def test_before_save_soft_stop_skips_persistence_but_runs_chains():
    business, log = _business(("b1", {"before_save": None}), ("b2", {}))

    assert business.save(row(None)) is False
    assert business.saved == []
    assert log == [
        ("b1", "before_save"),
        ("b2", "before_save"),
        ("b1", "after_save"),
        ("b2", "after_save"),
    ]


def test_abort_after_soft_stop_still_aborts():
    business, log = _business(
        ("b1", {"before_save": Signal.SOFT_STOP}),
        ("b2", {"before_save": Signal.ABORT}),
        ("b3", {}),
    )

    assert business.save(row(None)) is False
    assert log == [("b1", "before_save"), ("b2", "before_save")]


def test_after_save_soft_stop_persists_and_reports_failure():
    business, log = _business(("b1", {"after_save": None}), ("b2", {}))
    record = row(None)

    assert business.save(record) is False
    assert business.saved == [record]
    assert log[-2:] == [("b1", "after_save"), ("b2", "after_save")]


def test_after_save_abort_stops_remaining_after_interceptors():
    business, log = _business(("b1", {"after_save": False}), ("b2", {}))
    record = row(None)

    assert business.save(record) is False
    assert business.saved == [record]
    assert ("b2", "after_save") not in log


def test_storage_failure_reports_failure_without_after_chain():
    business, log = _business(("b1", {}), fail_storage=True)

    assert business.save(row(None)) is False
    assert log == [("b1", "before_save")]


def test_save_without_behaviors_persists():
    business = ListBusiness()
    record = row(3)
    assert business.save(record) is True
    assert business.saved == [record]


def test_interceptor_returning_garbage_is_a_programming_error():
    business, _ = _business(("b1", {"before_save": "nope"}))
    with pytest.raises(TypeError):
        business.save(row(None))


def test_parameters_reach_every_interceptor():
    seen = []

    class Spy(BaseBehavior):
        def before_save(self, record, parameters=None):
            seen.append(parameters)
            return True

        def after_save(self, record, parameters=None):
            seen.append(parameters)
            return True

    business = ListBusiness()
    business.attach(Spy())
    params = {"flag": True}
    business.save(row(None), params)
    assert seen == [params, params]


# ----------------------------------------------------------------------
# Delete
# ----------------------------------------------------------------------
def test_delete_mirrors_save_control_flow():
    business, log = _business(("b1", {"before_delete": None}), ("b2", {}))
    record = row(1)

    assert business.delete(record) is False
    assert business.deleted == []
    assert log == [
        ("b1", "before_delete"),
        ("b2", "before_delete"),
        ("b1", "after_delete"),
        ("b2", "after_delete"),
    ]


def test_delete_success_and_abort():
    business, _ = _business(("b1", {}))
    record = row(1)
    assert business.delete(record) is True
    assert business.deleted == [record]

    business, log = _business(("b1", {"before_delete": False}))
    assert business.delete(row(2)) is False
    assert business.deleted == []
    assert log == [("b1", "before_delete")]


def test_delete_by_id_resolves_through_id_finder():
    business, log = _business(("b1", {}))
    record = row(7)
    business.rows = [row(3), record]

    assert business.delete(7) is True
    assert business.deleted == [record]
    assert log == [
        ("b1", "before_find"),
        ("b1", "after_find"),
        ("b1", "before_delete"),
        ("b1", "after_delete"),
    ]


def test_delete_unknown_id_skips_delete_interceptors():
    business, log = _business(("b1", {}))
    business.rows = [row(3)]

    assert business.delete(99) is False
    assert business.deleted == []
    assert ("b1", "before_delete") not in log
    assert business.find_by_id(3).id == 3


# ----------------------------------------------------------------------
# Find
# ----------------------------------------------------------------------
def test_find_threads_results_through_after_find():
    class OnlyEven(BaseBehavior):
        def after_find(self, name, parameters, results=None):
            return [r for r in results if r.id % 2 == 0]

    class Reverse(BaseBehavior):
        def after_find(self, name, parameters, results=None):
            return list(reversed(list(results)))

    business = ListBusiness(rows=[row(i) for i in range(1, 7)])
    business.attach(OnlyEven())
    business.attach(Reverse())

    assert [r.id for r in business.find("all")] == [6, 4, 2]


def test_before_find_results_are_ignored():
    business, log = _business(("b1", {}))
    business.rows = [row(1)]

    assert [r.id for r in business.find()] == [1]
    assert log == [("b1", "before_find"), ("b1", "after_find")]


def test_after_find_receives_name_and_parameters():
    calls = []

    class Spy(BaseBehavior):
        def after_find(self, name, parameters, results=None):
            calls.append((name, parameters))
            return results

    business = ListBusiness(rows=[row(7)])
    business.attach(Spy())
    params = {"id": 7}
    assert business.find_first("id", params).id == 7
    assert calls == [("id", params)]


def test_unknown_finder_raises_after_before_find_only():
    business, log = _business(("b1", {}))

    with pytest.raises(UnknownFinderError) as excinfo:
        business.find("nope")

    assert excinfo.value.name == "nope"
    assert excinfo.value.available == ["all", "id"]
    assert log == [("b1", "before_find")]


def test_find_on_empty_store():
    business = ListBusiness()
    assert list(business.find("id", {"id": 7})) == []
    assert business.find_first("id", {"id": 7}) is None
