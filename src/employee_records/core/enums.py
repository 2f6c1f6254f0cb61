from __future__ import annotations

from enum import Enum


class ViewState(str, Enum):
    """Screens the client can show."""

    SIGN_IN = "signIn"
    EMPLOYEES = "employees"
    REGISTRATION = "registration"
    PROFILE = "profile"
