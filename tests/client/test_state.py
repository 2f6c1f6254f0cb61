from __future__ import annotations

from employee_records.client import state as st
from employee_records.core.enums import ViewState


def test_default_state_is_signed_out_and_loading():
    s = st.AppState()

    assert s.view == ViewState.SIGN_IN
    assert s.loading is True
    assert s.employees == ()


def test_session_restored_picks_initial_view():
    assert st.session_restored(st.AppState(), True).view == ViewState.EMPLOYEES
    assert st.session_restored(st.AppState(), False).view == ViewState.SIGN_IN


def test_visible_view_gates_on_session():
    s = st.AppState(session=False, view=ViewState.PROFILE)

    assert st.visible_view(s) == ViewState.SIGN_IN
    assert st.visible_view(st.logged_in(s)) == ViewState.EMPLOYEES


def test_employee_added_appends_with_assigned_id():
    s = st.employees_loaded(st.AppState(), [{"id": "1", "name": "A"}])

    s = st.employee_added(s, {"name": "B"}, "2")

    assert s.employees == ({"id": "1", "name": "A"}, {"name": "B", "id": "2"})


def test_employee_updated_replaces_in_place_and_refreshes_selection():
    s = st.employees_loaded(st.AppState(), [{"id": "1", "name": "A"}, {"id": "2", "name": "B"}, {"id": "3", "name": "C"}])
    s = st.employee_selected(s, {"id": "2", "name": "B"})

    s = st.employee_updated(s, {"id": "2", "name": "Bee"})

    assert [e["name"] for e in s.employees] == ["A", "Bee", "C"]
    assert s.selected == {"id": "2", "name": "Bee"}


def test_employee_deleted_removes_matching_only():
    s = st.employees_loaded(st.AppState(), [{"id": "1"}, {"id": "2"}])

    s = st.employee_deleted(s, "1")

    assert s.employees == ({"id": "2"},)


def test_transitions_do_not_mutate_input():
    original = st.AppState()

    st.notify(st.navigated(original, ViewState.REGISTRATION), "hi")

    assert original == st.AppState()
