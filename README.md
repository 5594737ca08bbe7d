# ashmow

`ashmow` is a control runtime for a robot lawn mower. It reads an XML
configuration file and builds the sensors and services that the file
names. Each service runs in a worker thread, called a *context*. The
services talk to each other through an event service and a timer service.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
ashmow [-c CONFIG_FILE] [-d]
```

* `-c CONFIG_FILE` sets the configuration file. The default is
  `ash_config.xml` in the current directory. If `-c` has no value, the
  command prints an error and exits with status 2.
* `-d` sets the `debug` flag of `ashmow.app.Arguments`. Nothing else reads
  this flag yet.
* Any other argument is ignored.

On start, the command prints `Starting thread: <name>` for each context,
in name order. It then waits for a line on standard input. After that it
stops the contexts in reverse name order, printing `Stopping thread: <name>`
for each. Last, it joins the threads and closes the services and sensors
that have a `close` method.

## Configuration

The configuration is an XML document whose root element is `config`. It
has two sections, `sensors` and `services`:

* Each child element of a section describes one component.
* The component's `name` element chooses the builder.
* All of the component's child elements, `name` included, are passed to
  the builder as string parameters.

```xml
<config>
  <sensors>
    <sensor>
      <name>dummy_gnss</name>
    </sensor>
    <sensor>
      <name>ublox_zed_f9r</name>
      <device>/dev/ttyACM0</device>
      <context>GNSS_CONTEXT</context>
    </sensor>
  </sensors>
  <services>
    <service><name>command_service</name></service>
    <service><name>event_sender_service</name></service>
    <service><name>navigation_service</name></service>
    <service><name>route_service</name></service>
    <service><name>simulator_service</name></service>
  </services>
</config>
```

The event service and the timer service always run. They use the
contexts `EVENT_SERVICE_CONTEXT` and `TIMER_SERVICE_CONTEXT`. Every other
service runs in a context named after the service.

Errors in the configuration are reported, and the command carries on:

* If a component has an unknown name or lacks a needed parameter, the
  command prints a message and skips that component.
* If the file cannot be read or parsed, the command prints a message and
  runs with only the event and timer services.

### Sensors

| Name            | Parameters          | Behaviour |
|-----------------|---------------------|-----------|
| `dummy_gnss`    | none                | Always reports longitude 60.0 and latitude 15.0. |
| `ublox_zed_f9r` | `device`, `context` | Opens `device` as a serial port at 115200 baud, 8N1, with a 1 s read timeout. It runs in the named context. |

Details of the `ublox_zed_f9r` sensor:

* On each update it reads up to 1024 bytes and parses one UBX message
  from the start of what it read.
* A `NAV-PVAT` message sets `lng` and `lat`. They keep the raw integer
  values from the message; no unit conversion is applied.
* A `NAV-STATUS` message sets `gps_fix`.
* Checksums are not verified.
* If the port cannot be opened, the sensor prints an error and never
  joins its context.

### Services

| Name                   | Behaviour |
|------------------------|-----------|
| `command_service`      | Polls a `JoystickCommandProvider` each cycle and passes every command to its handler methods. |
| `event_sender_service` | Sends sample events `EvA` and `EvB` each cycle. It schedules cyclic timer events `EvT1` every 5 s and `EvT2` every 2 s, and prints what its two consumers receive. |
| `navigation_service`   | Runs a cycle that does nothing yet. |
| `route_service`        | Answers each `EvRequestGridRoute` with an `EvGridRoute` on its next update. |
| `simulator_service`    | Holds a `SimulatedRobot` in a test garden, which `add_map_objects` builds. It requests a grid route when created and keeps the latest route it receives in `last_path`. |

## What the package does not do

* It does not read a gamepad. `JoystickCommandProvider` returns the same
  two commands every cycle: a `PanicCommand` and a `CutterCommand(45.0)`.
* The handlers in `CommandService` accept commands but drive nothing.
* `NavigationService` does not steer.
* `Robot` accepts its commands but does not change its recorded state.
* There is no path planner. `RouteService` always answers with the same
  fixed path of eleven grid cells.
* The simulator has no graphical window.

## Library use

### Geometry and maps

* `ashmow.geometry` has `Point2D`, `LineSegment`, `AABB` and `Polygon`.
  It also has the functions `segments_intersect` and `point_on_segment`.
* `Polygon.contains` supports `ContainmentMode.INCLUSIVE` and
  `ContainmentMode.STRICT`. It raises `OpenPolygonError` on a polygon that
  was never closed.
* `ashmow.world_map.WorldMap` holds a boundary polygon plus hard and soft
  obstacles.
* `ashmow.grid` has `GridMap`, `GridCell` and `CellType`. Every cell of a
  new grid is an obstacle.
* `ashmow.grid_builder.GridMapBuilder` turns a `WorldMap` into a
  `GridMap` at a given resolution. It classifies each cell by where the
  cell's centre lies.

### Runtime

* `ashmow.context` has `Context` and `ContextRegistry`. A context calls
  its `Updatable` objects once per period, which is 200 ms by default.
  `Context.run_once` runs a single cycle without a thread.
* `ashmow.events` has `Event`, `EventHandler` and the `handles`
  decorator, which routes an event type to a handler method. Each `Event`
  subclass gets a `Uuid` (from `ashmow.uuid_util`). The uuid comes from
  the `uuid` class keyword, or is random if the keyword is not given.
* `ashmow.event_service.EventService` queues events and delivers them on
  its next update.
* `ashmow.timer_service.TimerService` delivers single or cyclic events
  once their time has passed. It takes an optional millisecond clock.

### Robot control

* `ashmow.robot` has `Robot` and `SimulatedRobot`, with their
  `RobotState`.
* `ashmow.commands` has the command classes and the `CommandHandler` and
  `CommandProvider` interfaces.
* `ashmow.fsm` has a small `FiniteStateMachine` with `State` objects.
* `ashmow.geo_pos.GeoPos` is a latitude and longitude pair.

### Assembling an application

* `ashmow.app.AshBuilder` builds an `Ash` from arguments and a config
  file.
* `ashmow.builders` holds the sensor and service builders that
  `AshBuilder` uses.

Example of rasterising a map:

```python
from ashmow.geometry import Polygon
from ashmow.world_map import WorldMap
from ashmow.grid_builder import GridMapBuilder

boundary = Polygon()
for x, y in [(0, 0), (100, 0), (100, 100), (0, 100)]:
    boundary.add_point(x, y)
boundary.close()

world = WorldMap()
world.set_boundary(boundary)

grid = GridMapBuilder(5.0).build_from(world)
print(grid.width, grid.height, grid.is_free(0, 0))  # 20 20 True
```