# bitlog

A small, self-contained logging library. A logger turns printf-style calls
into formatted lines and hands them to one or more sinks. It writes either in
the calling thread or through a background thread that takes whole buffers
of lines at a time.

## Installing

```
pip install .
```

Only the standard library is needed at run time.

## Modules

| module | contents |
|--------|----------|
| `bitlog.level` | `LogLevel` (`UNKNOW`, `DEBUG`, `INFO`, `WARN`, `ERROR`, `FATAL`, `OFF`) and `level_name()` |
| `bitlog.message` | `LogMsg`, one record: logger name, file, line, payload, level, time and thread id |
| `bitlog.formatter` | `Formatter`, `PatternError`, `parse_pattern()`, `create_item()` |
| `bitlog.sink` | `LogSink`, `StdoutSink`, `FileSink`, `RollSink`, `create_sink()` |
| `bitlog.buffer` | `Buffer`, a growable byte buffer with read and write positions |
| `bitlog.looper` | `AsyncLooper`, the background thread behind asynchronous loggers |
| `bitlog.logger` | loggers, builders, `LoggerManager`, `get_manager()`, `get_logger()`, `root_logger()` |
| `bitlog.util` | `now()`, `exists()`, `parent_path()`, `create_directory()` |
| `bitlog.bench` | the throughput benchmark behind `bitlog-bench` |
| `bitlog.example` | the demonstration behind `bitlog-example` |

## Concepts

- **Levels**: `LogLevel` is an `IntEnum` ordered from `DEBUG` to `FATAL`,
  with `OFF` above them. A logger drops every message below its own level.
  `level_name()` returns a level's name, or `"UNKNOW"` for a value that is
  not a level.
- **Formatter**: a `Formatter` is built from a pattern string. The
  conversion characters are:

  | key | output |
  |-----|--------|
  | `%d` | time; takes an optional strftime sub-format, e.g. `%d{%Y-%m-%d %H:%M:%S}` (default `%H:%M:%S`) |
  | `%T` | a tab |
  | `%t` | thread id |
  | `%p` | level name |
  | `%c` | logger name |
  | `%f` | source file |
  | `%l` | source line |
  | `%m` | the message |
  | `%n` | a newline |

  `%%` writes a literal percent sign. An unknown key, a `%` with no letter
  after it, or an unclosed `{` raises `PatternError` (a `ValueError`). The
  default pattern is `[%d{%H:%M:%S}][%t][%p][%c][%f:%l] %m%n`.
  `Formatter.format(msg)` returns the text; `Formatter.format_to(stream, msg)`
  writes it to a text stream and returns the stream.
- **Sinks**: `StdoutSink` writes to standard output, `FileSink` appends to
  one file, and `RollSink(basename, max_size)` writes to files named
  `<basename><year><month><day><hour><minute><second>.log`, starting a new
  one once the current one has reached `max_size` bytes. Missing directories
  are created. Sinks take bytes (or text, encoded as UTF-8), have a `close()`
  method and work as context managers. `create_sink(sink_type, ...)` builds
  any `LogSink` subclass and raises `TypeError` for anything else.
- **Loggers**: `debug`, `info`, `warn`, `error` and `fatal` take a `%`-style
  format and its arguments. The file and line of the call are recorded. If
  the arguments do not fit the format, the message becomes
  `failed to format log message!`. A `SyncLogger` writes straight to its
  sinks under a lock; an `AsyncLogger` queues lines in a `Buffer` that an
  `AsyncLooper` thread drains. `close()` flushes what is queued, stops the
  thread and closes the sinks; loggers also work as context managers.

## Usage

Build a logger with a builder. Every `with_` method returns the builder, so
calls can be chained. `GlobalLoggerBuilder` registers the logger by name so
that it can be looked up later with `get_logger`; `LocalLoggerBuilder` just
returns it.

```python
from bitlog.level import LogLevel
from bitlog.logger import GlobalLoggerBuilder, LoggerType, get_logger, root_logger
from bitlog.sink import FileSink, RollSink, StdoutSink

(
    GlobalLoggerBuilder()
    .with_name("app")
    .with_level(LogLevel.DEBUG)
    .with_type(LoggerType.ASYNC)
    .with_formatter("[%d{%H:%M:%S}][%c][%f:%l][%p] %m%n")
    .with_sink(StdoutSink)
    .with_sink(FileSink, "./logs/app.log")
    .with_sink(RollSink, "./logs/roll-", 10 * 1024 * 1024)
    .build()
)

log = get_logger("app")
log.info("listening on port %d", 8080)
log.error("%s failed", "request")
log.close()

root_logger().warn("the root logger writes to standard output")
```

`with_formatter` takes a pattern string or a `Formatter`. A builder with no
formatter uses the default pattern; one with no sinks writes to standard
output. Building a logger without a name, or registering a second logger
under a name already taken, raises `ValueError`. Creating a logger prints a
short notice to standard output.

The process-wide registry is returned by `get_manager()`; a `LoggerManager`
offers `has_logger`, `add_logger`, `get_logger` (None for an unknown name)
and `root_logger`. It always holds a synchronous logger named `root`.
`GlobalLoggerBuilder(manager)` registers with a given manager instead of the
global one.

## Commands

```
bitlog-example [--directory DIR] [--count N]
```

Builds an asynchronous logger named `all_sink_logger` that writes to
standard output, to `DIR/sync.log` and to rolling files `DIR/roll-*.log`
(10 MiB each), logs at every level, then logs `N` numbered messages.
Defaults: `./logs` and 1000000.

```
bitlog-bench [--count N] [--length BYTES] [--threads T [T ...]]
```

For each thread count, benchmarks an asynchronous logger writing to
`./logs/async.log`, then a synchronous one writing to `./logs/sync.log`,
and prints each thread's time, the total time, messages per second and
megabytes per second. Defaults: 1000000 messages of 100 bytes, with 1 and
5 threads.

## Limitations

- Loggers are separate from the standard library's `logging` module; they
  do not feed it or read its configuration.
- There is no configuration file; loggers are assembled in code.
- `RollSink` names files to the second, so files started within the same
  second share a name and are appended to.

## Running the tests

```
pip install .[test]
pytest
```