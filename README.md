# yamitools

Small, dependency-free building blocks for video codec tooling: alignment
arithmetic, a non-copyable base class, and levelled diagnostic logging with
FOURCC formatting.

## Installation

```
pip install yamitools
```

To run the test suite:

```
pip install "yamitools[test]"
pytest
```

## `yamitools.common`

- `align_pow2(value, alignment)` rounds `value` up to a multiple of
  `alignment`, which must be a positive power of two; otherwise it raises
  `ValueError`.
- `align8`, `align16` and `align32` are shortcuts for those alignments.
- `NonCopyable` is a base class for objects that must not be duplicated:
  `copy.copy` and `copy.deepcopy` on an instance raise `TypeError`.

```python
from yamitools.common import align16

align16(1920)   # 1920
align16(1081)   # 1088
```

## `yamitools.log`

Levelled diagnostics with the levels in `LogLevel`: `ERROR` (1), `WARNING` (2),
`INFO` (3) and `DEBUG` (4). A message is written when the configured level is
at least the message's own level. The default level is `ERROR` and the default
stream is standard error.

- `configure(level, stream)` sets the level and the output stream
  (`stream=None` means standard error).
- `error`, `warning`, `info` and `debug` each write one line of the form
  `libyami <level> <thread id> (<file>, <line>): <message>`, naming the file
  and line that called them.
- `format_message(prefix, thread_id, filename, line, message)` builds such a
  line (without the newline); only the base name of `filename` is kept.
- `fourcc_to_str(fourcc)` returns the four characters packed little-endian
  into a FOURCC code.
- `debug_fourcc(prompt, fourcc)` logs a FOURCC as hex and as characters at
  debug level.
- `check(condition, message="assert fails")` logs `message` as an error and
  raises `AssertionFailure` (a subclass of `AssertionError`) when `condition`
  is false.

```python
import sys
from yamitools import log

log.configure(log.LogLevel.DEBUG, sys.stderr)
log.info("decoder started")
log.fourcc_to_str(0x3231564E)   # "NV12"
log.check(1 + 1 == 2, "arithmetic is broken")
```

## What this package does not do

It contains no video decoding, encoding or post-processing, and no command-line
tools. It also provides no thread-synchronisation wrappers and no pool of
reusable frame buffers; use the standard `threading` module for locking.