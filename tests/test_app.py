import asyncio
from types import SimpleNamespace

import flet as ft
import flet_audio as fta

from lingosnap.services import SearchOrchestrator

from conftest import FakeAIService, FakeFetcher
from main_ui import LingoSnapApp


def test_installed_flet_has_the_controls_the_app_uses():
    assert callable(ft.run)
    assert ft.BoxFit.CONTAIN
    assert ft.Padding.symmetric(vertical=8)
    assert ft.WindowEventType.CLOSE
    assert fta.Audio


class FakeWindow:
    def __init__(self):
        self.destroyed = False

    async def destroy(self):
        self.destroyed = True


def _app(tmp_path):
    from lingosnap.services import MediaService

    ai = FakeAIService()
    image, audio = FakeFetcher('img'), FakeFetcher('audio')
    media = MediaService(media_dir=str(tmp_path), image_fetcher=image, audio_fetcher=audio)
    tasks = []
    app = SimpleNamespace(
        orchestrator=SearchOrchestrator(ai_service=ai, media_service=media, error_message='x'),
        page=SimpleNamespace(window=FakeWindow(), run_task=tasks.append),
    )
    app._shutdown = lambda: LingoSnapApp._shutdown(app)
    return app, ai, image, audio, tasks


def test_window_close_schedules_shutdown(tmp_path):
    app, _, _, _, tasks = _app(tmp_path)

    LingoSnapApp._on_window_event(app, SimpleNamespace(type=ft.WindowEventType.FOCUS))
    assert tasks == []

    LingoSnapApp._on_window_event(app, SimpleNamespace(type=ft.WindowEventType.CLOSE))
    assert tasks == [app._shutdown]


def test_shutdown_closes_providers_then_window(tmp_path):
    app, ai, image, audio, _ = _app(tmp_path)

    asyncio.run(LingoSnapApp._shutdown(app))

    assert ai.closed and image.closed and audio.closed
    assert app.page.window.destroyed
