"""Example: drive the gateway through the client controller (no UI).

Start the server first (``python -m employee_records.main``).
"""

import asyncio

from employee_records.client import build_controller
from employee_records.core.enums import ViewState


async def main():
    controller = build_controller()
    controller.subscribe(lambda s: print(f"[{s.view.value}] loading={s.loading} note={s.notification!r}"))

    await controller.initialize()
    if controller.visible_view == ViewState.SIGN_IN:
        await controller.login()

    await controller.navigate(ViewState.REGISTRATION)
    await controller.add_employee({"name": "Ada", "surname": "Lovelace", "email": "ada@example.com", "idNumber": "1815"})
    print(controller.state.employees)
    await controller.wait_idle()


if __name__ == "__main__":
    asyncio.run(main())
