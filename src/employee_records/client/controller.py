from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Set

from ..common.logging import get_logger
from ..core.constants import (
    MSG_ADD_FAILED,
    MSG_ADDED,
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_UPDATE_FAILED,
    MSG_UPDATED,
    NOTIFICATION_TTL_SECONDS,
    SIMULATED_DELAY_SECONDS,
)
from ..core.enums import ViewState
from . import state as transitions
from .api import EmployeesApi
from .settings import ClientSettings, get_client_settings
from .state import AppState
from .storage import LocalStorage

logger = get_logger(__name__)

Listener = Callable[[AppState], None]


class ViewStateController:
    """Holds the client ``AppState`` and drives it around gateway calls.

    Must be used from a running asyncio loop. HTTP calls run in worker
    threads; simulated delays and notification expiry are scheduled tasks.
    In-flight work is never cancelled by navigation: a late response applies
    to whatever state is current when it lands.
    """

    def __init__(
        self,
        api: EmployeesApi,
        storage: LocalStorage,
        *,
        delay: float = SIMULATED_DELAY_SECONDS,
        notification_ttl: float = NOTIFICATION_TTL_SECONDS,
    ):
        self._api = api
        self._storage = storage
        self._delay = delay
        self._notification_ttl = notification_ttl
        self._state = AppState()
        self._listeners: List[Listener] = []
        self._pending: Set[asyncio.Task] = set()
        self._notification_seq = 0

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def visible_view(self) -> ViewState:
        return transitions.visible_view(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _apply(self, transition: Callable[..., AppState], *args: Any) -> None:
        self._state = transition(self._state, *args)
        for listener in list(self._listeners):
            listener(self._state)

    def _spawn(self, coro: Awaitable[None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _later(self, seconds: float, transition: Callable[..., AppState], *args: Any) -> None:
        await asyncio.sleep(seconds)
        self._apply(transition, *args)

    # Startup

    def initialize(self) -> asyncio.Task:
        """Restore the persisted session and start loading the collection.

        Returns the fetch task; the view is set before it runs.
        """
        self._apply(transitions.session_restored, self._storage.is_logged_in())
        return self._spawn(self._load_employees())

    async def _load_employees(self) -> None:
        try:
            employees = await asyncio.to_thread(self._api.list_employees)
        except Exception:
            # Load failures are logged only; the list stays empty.
            logger.exception("Error fetching employees")
            self._apply(transitions.stop_loading)
            return
        self._apply(transitions.employees_loaded, employees)

    # Session

    def login(self) -> asyncio.Task:
        self._apply(transitions.start_loading)
        return self._spawn(self._complete_login())

    async def _complete_login(self) -> None:
        await asyncio.sleep(self._delay)
        await asyncio.to_thread(self._storage.set_logged_in)
        self._apply(transitions.logged_in)

    def sign_out(self) -> asyncio.Task:
        self._apply(transitions.start_loading)
        return self._spawn(self._complete_sign_out())

    async def _complete_sign_out(self) -> None:
        await asyncio.sleep(self._delay)
        await asyncio.to_thread(self._storage.clear_session)
        self._apply(transitions.signed_out)

    # Navigation

    def navigate(self, target: ViewState) -> asyncio.Task:
        self._apply(transitions.navigated, target)
        return self._spawn(self._later(self._delay, transitions.stop_loading))

    def select_employee(self, employee: Optional[Mapping[str, Any]]) -> None:
        self._apply(transitions.employee_selected, employee)

    def open_profile(self, employee: Mapping[str, Any]) -> asyncio.Task:
        self.select_employee(employee)
        return self.navigate(ViewState.PROFILE)

    # Mutations

    def _show_notification(self, message: str) -> None:
        self._notification_seq += 1
        self._apply(transitions.notify, message)

    def _finish_mutation(self) -> None:
        self._apply(transitions.stop_loading)
        seq = self._notification_seq
        self._spawn(self._expire_notification(seq))

    async def _expire_notification(self, seq: int) -> None:
        await asyncio.sleep(self._notification_ttl)
        # A newer message keeps its own full time-to-live.
        if seq == self._notification_seq:
            self._apply(transitions.clear_notification)

    async def add_employee(self, draft: Mapping[str, Any]) -> bool:
        draft = dict(draft)
        self._apply(transitions.start_loading)
        try:
            employee_id = await asyncio.to_thread(self._api.create_employee, draft)
        except Exception:
            logger.exception("Error adding employee")
            self._show_notification(MSG_ADD_FAILED)
            return False
        else:
            self._apply(transitions.employee_added, draft, employee_id)
            self._show_notification(MSG_ADDED)
            return True
        finally:
            self._finish_mutation()

    async def delete_employee(self, employee_id: str) -> bool:
        self._apply(transitions.start_loading)
        try:
            await asyncio.to_thread(self._api.delete_employee, employee_id)
        except Exception:
            logger.exception("Error deleting employee %s", employee_id)
            self._show_notification(MSG_DELETE_FAILED)
            return False
        else:
            self._apply(transitions.employee_deleted, employee_id)
            self._show_notification(MSG_DELETED)
            return True
        finally:
            self._finish_mutation()

    async def update_employee(self, updated: Mapping[str, Any]) -> bool:
        updated = dict(updated)
        self._apply(transitions.start_loading)
        try:
            await asyncio.to_thread(self._api.update_employee, updated)
        except Exception:
            logger.exception("Error updating employee %s", updated.get("id"))
            self._show_notification(MSG_UPDATE_FAILED)
            return False
        else:
            self._apply(transitions.employee_updated, updated)
            self._show_notification(MSG_UPDATED)
            return True
        finally:
            self._finish_mutation()

    # Lifecycle

    async def wait_idle(self) -> None:
        """Wait for every scheduled delay, fetch and notification expiry."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        await asyncio.gather(*list(self._pending), return_exceptions=True)
        self._pending.clear()


def build_controller(settings: Optional[ClientSettings] = None, **kwargs: Any) -> ViewStateController:
    settings = settings or get_client_settings()
    api = EmployeesApi(settings.api_url, timeout=settings.http_timeout)
    storage = LocalStorage(settings.storage_path)
    return ViewStateController(api, storage, **kwargs)
