"""Application state and its pure transitions.

Every function here takes an ``AppState`` and returns a new one; nothing
performs I/O. ``ViewStateController`` sequences them around network calls
and timers.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..core.enums import ViewState

EmployeeDict = Dict[str, Any]


@dataclass(frozen=True)
class AppState:
    session: bool = False
    view: ViewState = ViewState.SIGN_IN
    employees: Tuple[EmployeeDict, ...] = ()
    selected: Optional[EmployeeDict] = None
    loading: bool = True
    notification: Optional[str] = None


def session_restored(state: AppState, session: bool) -> AppState:
    return replace(
        state,
        session=session,
        view=ViewState.EMPLOYEES if session else ViewState.SIGN_IN,
        loading=True,
    )


def visible_view(state: AppState) -> ViewState:
    """Screen to render: every screen but sign-in needs a session."""
    if not state.session:
        return ViewState.SIGN_IN
    return state.view


def start_loading(state: AppState) -> AppState:
    return replace(state, loading=True)


def stop_loading(state: AppState) -> AppState:
    return replace(state, loading=False)


def employees_loaded(state: AppState, employees: Iterable[Mapping[str, Any]]) -> AppState:
    return replace(state, employees=tuple(dict(e) for e in employees), loading=False)


def logged_in(state: AppState) -> AppState:
    return replace(state, session=True, view=ViewState.EMPLOYEES, loading=False)


def signed_out(state: AppState) -> AppState:
    return replace(state, session=False, view=ViewState.SIGN_IN, loading=False)


def navigated(state: AppState, target: ViewState) -> AppState:
    return replace(state, view=ViewState(target), loading=True)


def employee_selected(state: AppState, employee: Optional[Mapping[str, Any]]) -> AppState:
    return replace(state, selected=dict(employee) if employee is not None else None)


def employee_added(state: AppState, draft: Mapping[str, Any], employee_id: str) -> AppState:
    added = {**draft, "id": employee_id}
    return replace(state, employees=state.employees + (added,))


def employee_deleted(state: AppState, employee_id: str) -> AppState:
    return replace(state, employees=tuple(e for e in state.employees if e.get("id") != employee_id))


def employee_updated(state: AppState, updated: Mapping[str, Any]) -> AppState:
    updated = dict(updated)
    employee_id = updated.get("id")
    employees = tuple(updated if e.get("id") == employee_id else e for e in state.employees)
    selected = state.selected
    if selected is not None and selected.get("id") == employee_id:
        selected = updated
    return replace(state, employees=employees, selected=selected)


def notify(state: AppState, message: str) -> AppState:
    return replace(state, notification=message)


def clear_notification(state: AppState) -> AppState:
    return replace(state, notification=None)
