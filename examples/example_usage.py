"""Example: drive a dashboard without the CLI.

Resumes today's session for the signed-in user, prints the running timer for
a few ticks, then closes the view. Settings come from APP_ENV / .env.
"""

import asyncio

from attendance_dashboard.main import configure_logging, container_from_settings, create_dashboard, load_settings


async def watch(seconds: int = 3):
    settings = load_settings()
    container = container_from_settings(settings)
    dashboard = create_dashboard(
        "manager",
        settings=settings,
        container=container,
        on_elapsed=lambda value: print("elapsed", value),
    )
    try:
        async with dashboard:
            print("state:", dashboard.state.value)
            print("regularization window:", *dashboard.regularization_window)
            await asyncio.sleep(seconds)
    finally:
        container.conn.close()


def main():
    configure_logging("INFO")
    asyncio.run(watch())


if __name__ == "__main__":
    main()
