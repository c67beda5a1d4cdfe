import pytest

from hazel import input as hazel_input
from hazel import render_command
from hazel.application import (
    Application,
    ApplicationExistsError,
    get_application,
    run_application,
)
from hazel.events import KeyPressedEvent, WindowCloseEvent
from hazel.input import Key
from hazel.layer import Layer
from hazel.log import HazelAssertionError
from hazel.renderer_api import RendererAPI


class FakeRendererAPI(RendererAPI):
    def __init__(self):
        self.init_count = 0

    def init(self):
        self.init_count += 1

    def set_clear_color(self, color):
        pass

    def clear(self):
        pass

    def draw_indexed(self, vertex_array):
        pass


class FakeWindow:
    def __init__(self, close_after=None):
        self.callback = None
        self.updates = 0
        self.close_after = close_after
        self.closed = False

    width = 10
    height = 10
    vsync = True
    native_window = None

    def set_event_callback(self, callback):
        self.callback = callback

    def on_update(self):
        self.updates += 1
        if self.close_after is not None and self.updates >= self.close_after:
            self.callback(WindowCloseEvent())

    def close(self):
        self.closed = True


class RecordingLayer(Layer):
    def __init__(self, name, log, handles=False):
        super().__init__(name)
        self.log = log
        self.handles = handles
        self.timesteps = []

    def on_update(self, timestep):
        self.timesteps.append(timestep.seconds)
        self.log.append(("update", self.name))

    def on_imgui_render(self):
        self.log.append(("imgui", self.name))

    def on_event(self, event):
        self.log.append(("event", self.name))
        if self.handles:
            event.handled = True


@pytest.fixture
def fake_api():
    api = FakeRendererAPI()
    previous = render_command.set_renderer_api(api)
    yield api
    render_command.set_renderer_api(previous)
    if Application._instance is not None:
        Application._instance.close()


def test_construction_initializes_renderer_and_registers(fake_api):
    window = FakeWindow()
    app = Application(window, clock=lambda: 0.0)
    assert fake_api.init_count == 1
    assert get_application() is app
    assert app.window is window
    assert window.callback == app.on_event


def test_second_application_raises(fake_api):
    Application(FakeWindow(), clock=lambda: 0.0)
    with pytest.raises(ApplicationExistsError):
        Application(FakeWindow(), clock=lambda: 0.0)
    assert issubclass(ApplicationExistsError, HazelAssertionError)


def test_close_releases_application(fake_api):
    window = FakeWindow()
    app = Application(window, clock=lambda: 0.0)
    app.close()
    assert window.closed is True
    assert app.running is False
    with pytest.raises(RuntimeError):
        get_application()


def test_run_updates_layers_until_window_closes(fake_api):
    times = iter([0.0, 0.5, 1.25])
    window = FakeWindow(close_after=2)
    app = Application(window, clock=lambda: next(times))
    log = []
    layer = RecordingLayer("base", log)
    overlay = RecordingLayer("top", log)
    app.push_overlay(overlay)
    app.push_layer(layer)
    app.run()
    assert window.updates == 2
    assert layer.timesteps == [0.5 - 0.0, 1.25 - 0.5]
    assert log[:4] == [
        ("update", "base"),
        ("update", "top"),
        ("imgui", "base"),
        ("imgui", "top"),
    ]
    assert app.running is False


def test_events_go_top_down_and_stop_when_handled(fake_api):
    app = Application(FakeWindow(), clock=lambda: 0.0)
    log = []
    app.push_layer(RecordingLayer("bottom", log))
    app.push_layer(RecordingLayer("middle", log, handles=True))
    app.push_overlay(RecordingLayer("top", log))
    event = KeyPressedEvent(Key.A, 0)
    app.on_event(event)
    assert log == [("event", "top"), ("event", "middle")]
    assert event.handled is True


def test_close_event_stops_running(fake_api):
    app = Application(FakeWindow(), clock=lambda: 0.0)
    event = WindowCloseEvent()
    app.on_event(event)
    assert app.running is False
    assert event.handled is True


def test_input_polling_reflects_window_events(fake_api):
    window = FakeWindow()
    Application(window, clock=lambda: 0.0)
    window.callback(KeyPressedEvent(Key.LEFT, 0))
    assert hazel_input.is_key_pressed(Key.LEFT) is True
    assert hazel_input.is_key_pressed(Key.RIGHT) is False


def test_run_application_runs_and_closes(fake_api):
    window = FakeWindow(close_after=1)
    app = run_application(lambda: Application(window, clock=lambda: 0.0))
    assert window.updates == 1
    assert window.closed is True
    with pytest.raises(RuntimeError):
        get_application()
    assert app.running is False