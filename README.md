# hazel

A small, layered game engine for Python. An application owns a window and a
stack of layers; every frame each layer is updated with the elapsed time, and
window input arrives as typed events that travel down the stack from the top
until one layer marks them handled. Drawing goes through a thin renderer on
OpenGL: vertex and index buffers with typed layouts, vertex arrays, GLSL
shaders (including single-file shaders split by `#type` lines), 2D textures
loaded with Pillow, and an orthographic camera. Windows are provided by pyglet.

## Building blocks

- `hazel.application` - `Application`, which creates the window, installs the
  input state and initialises the renderer, then runs the frame loop with
  `run()`; `get_application()` returns the live one, and `run_application`
  sets up logging, builds your application from a factory, runs it and closes
  it. Only one application may exist at a time; creating a second raises
  `ApplicationExistsError` until the first is closed with `close()`.
- `hazel.layer` / `hazel.layer_stack` - `Layer` with `on_attach`, `on_detach`,
  `on_update`, `on_imgui_render` and `on_event` hooks. In a `LayerStack`,
  ordinary layers (`push_layer`) always sit below overlays (`push_overlay`);
  `pop_layer` and `pop_overlay` return whether the layer was found.
- `hazel.events` - `EventType`, `EventCategory`, the concrete event classes
  (`WindowResizeEvent`, `WindowCloseEvent`, `KeyPressedEvent`,
  `KeyReleasedEvent`, `KeyTypedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent`, ...) and `EventDispatcher`
  for routing an event to a handler by its class.
- `hazel.input` - `Key` and `MouseButton` codes and polling helpers
  (`is_key_pressed`, `is_mouse_button_pressed`, `get_mouse_position`,
  `get_mouse_x`, `get_mouse_y`) that ask the installed `InputBackend`.
- `hazel.window_input` - `WindowInput`, the backend an application installs;
  it remembers held keys, held buttons and the cursor from window events.
- `hazel.window` - `WindowProps`, the `Window` interface and `PygletWindow`,
  which turns pyglet events into engine events. Mouse y is measured down from
  the top edge; keys and buttons without an engine code are not reported.
- `hazel.timestep` - `Timestep`, the frame time in seconds, with
  `milliseconds` and arithmetic as a float.
- `hazel.camera` - `OrthographicCamera` (settable `position` and `rotation` in
  degrees) plus matrix helpers `ortho`, `translation`, `rotation_z` and
  `scaling`, all producing 4x4 float32 numpy arrays.
- `hazel.buffer`, `hazel.vertex_array`, `hazel.shader`, `hazel.texture`,
  `hazel.renderer`, `hazel.render_command`, `hazel.renderer_api` - the
  renderer front end; `hazel.gl_buffer`, `hazel.gl_vertex_array`,
  `hazel.gl_shader`, `hazel.gl_texture` and `hazel.gl_renderer_api` are its
  OpenGL implementations.
- `hazel.log` - the engine ("HAZEL") and client ("APP") loggers and
  `core_assert` / `client_assert`, which log and raise `HazelAssertionError`.

## Example

```python
from hazel import input as hazel_input
from hazel import render_command, renderer
from hazel.application import Application, run_application
from hazel.camera import OrthographicCamera
from hazel.events import EventDispatcher, KeyPressedEvent
from hazel.input import Key
from hazel.layer import Layer


class ExampleLayer(Layer):
    def __init__(self):
        super().__init__("Example")
        self.camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
        self.x = 0.0

    def on_update(self, timestep):
        if hazel_input.is_key_pressed(Key.LEFT):
            self.x -= 5.0 * timestep.seconds
        elif hazel_input.is_key_pressed(Key.RIGHT):
            self.x += 5.0 * timestep.seconds

        render_command.set_clear_color((0.1, 0.1, 0.1, 1.0))
        render_command.clear()
        self.camera.position = (self.x, 0.0, 0.0)
        renderer.begin_scene(self.camera)
        # renderer.submit(shader, vertex_array, transform) for each draw
        renderer.end_scene()

    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self._on_key)

    def _on_key(self, event):
        return event.key_code == Key.ESCAPE


class Sandbox(Application):
    def __init__(self):
        super().__init__()
        self.push_layer(ExampleLayer())


if __name__ == "__main__":
    run_application(Sandbox)
```

Events reach the layers from the top of the stack down; a handler that returns
`True` through `EventDispatcher.dispatch` marks the event handled and stops it
there. Closing the window ends `Application.run`.

## Drawing

```python
from hazel.buffer import BufferLayout, ShaderDataType, create_index_buffer, create_vertex_buffer
from hazel.vertex_array import create_vertex_array

vertex_buffer = create_vertex_buffer([
    -0.5, -0.5, 0.0,
     0.5, -0.5, 0.0,
     0.0,  0.5, 0.0,
])
vertex_buffer.layout = BufferLayout([(ShaderDataType.FLOAT3, "a_Position")])

vertex_array = create_vertex_array()
vertex_array.add_vertex_buffer(vertex_buffer)
vertex_array.set_index_buffer(create_index_buffer([0, 1, 2]))
```

`renderer.submit` binds the shader, uploads `u_ViewProjection` from the
current scene and `u_Transform` from the given matrix (identity by default),
then draws the vertex array's indexed triangles.

## Shader files

`ShaderLibrary.load` reads one file holding several stages, each introduced by
a `#type` line naming the stage (`vertex`, `fragment` or `pixel`):

```glsl
#type vertex
#version 330 core
layout(location = 0) in vec3 a_Position;
uniform mat4 u_ViewProjection;
uniform mat4 u_Transform;
void main() { gl_Position = u_ViewProjection * u_Transform * vec4(a_Position, 1.0); }

#type fragment
#version 330 core
layout(location = 0) out vec4 color;
uniform vec3 u_Color;
void main() { color = vec4(u_Color, 1.0); }
```

A shader loaded from `assets/shaders/FlatColor.glsl` is named `FlatColor`
unless a name is given. Adding a second shader under a name already in the
library raises `HazelAssertionError`; a stage that fails to compile or a
program that fails to link raises `ShaderCompileError`.

## What it does not do

- There is no built-in debug UI. Layers are still called through
  `on_imgui_render` once per frame, but nothing is drawn for them.
- There is no command-line program; an application is started from your own
  code with `run_application` or `Application.run`.
- Only the OpenGL rendering API is implemented.

## Requirements

Python 3.10 or later, with numpy, pyglet and pillow, and a display whose
OpenGL driver offers version 4.5 functions for anything that draws.