"""Client side: HTTP API wrapper, local session storage and the view-state controller."""
from .api import EmployeesApi, EmployeesApiError
from .controller import ViewStateController, build_controller
from .settings import ClientSettings, get_client_settings
from .state import AppState, visible_view
from .storage import LocalStorage

__all__ = [
    "AppState",
    "ClientSettings",
    "EmployeesApi",
    "EmployeesApiError",
    "LocalStorage",
    "ViewStateController",
    "build_controller",
    "get_client_settings",
    "visible_view",
]
