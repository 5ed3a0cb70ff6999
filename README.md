# kdutils

A small collection of general-purpose helpers, with no dependencies beyond
the standard library:

- `kdutils.bytearray.ByteArray`: a mutable byte sequence with slicing helpers
  (`mid`, `left`, `remove`, `index_of`, `starts_with`, `ends_with`, `resize`,
  `clear`, `to_str`), a `filled` constructor and a base64 codec. `to_base64`
  uses the standard alphabet with `=` padding; `from_base64` also accepts the
  URL-safe alphabet and stops at the first padding or foreign character.
- `kdutils.flags.Flags`: a set of bit flags built from enum members with
  integer values, combined with `&`, `|`, `^` and `~`, with `test_flag`,
  `set_flag`, `to_int` and `from_int`.
- `kdutils.elapsedtimer.ElapsedTimer`: a monotonic timer that starts when it is
  created and reports `elapsed` (a `timedelta`), `nsec_elapsed` and
  `msec_elapsed`; `start` resets it and `restart` resets it and returns the
  time elapsed before.
- `kdutils.dir.Dir`: a directory path (kept with `/` separators and no trailing
  separator) with `exists`, `mkdir`, `rmdir` (recursive), `dir_name`,
  `absolute_file_path` and `application_dir`, plus the function
  `from_native_separators`.
- `kdutils.url.Url`: splits a URL into `scheme`, `path` and `file_name`, with
  `is_local_file`, `to_local_file`, `is_empty` and `from_local_file`.
- `kdutils.file.File`: open (always in binary mode), read, write, flush, close
  and remove a file; usable as a context manager. The functions `file_exists`
  and `file_size` work on a plain path.
- `kdutils.file_mapper.FileMapper`: memory-maps a file, or a range of it, read-only
  or writable, handing the mapping out as a `memoryview`.
- `kdutils.logger.Logger`: a category logger built on the `logging` module with
  `{}`-style formatting (`warn`, `debug`) and `log` (also `<<`), which writes a
  value at the level given by its `LoggerType`.

The package is a library only; it provides no command-line tool.

## Installation

```
pip install kdutils
```

## Examples

```python
from kdutils.bytearray import ByteArray

data = ByteArray(b"foo")
assert data.to_base64() == ByteArray(b"Zm9v")
assert ByteArray.from_base64(ByteArray(b"Zm8=")) == ByteArray(b"fo")
assert ByteArray(b"1234 good-apples").mid(5, 4) == ByteArray(b"good")
assert ByteArray(b"hello").index_of("l") == 2
```

```python
import enum
from kdutils.flags import Flags

class Option(enum.Enum):
    A = 1
    B = 2
    C = 4

flags = Flags(Option.A) | Option.C
assert flags.test_flag(Option.C)
assert not flags.test_flag(Option.B)
assert flags.to_int() == 5
flags.set_flag(Option.A, False)
assert flags == Option.C
```

```python
from kdutils.url import Url

url = Url.from_local_file("/home/user/file.txt")
assert url == Url("file:///home/user/file.txt")
assert url.to_local_file() == "/home/user/file.txt"
assert Url("http://www.example.com/").scheme == "http"
```

```python
from kdutils.file import File
from kdutils.file_mapper import FileMapper

with File("data.bin") as f:
    f.open("w")
    f.write(b"hello world")

with FileMapper("data.bin") as mapper:
    view = mapper.map()
    assert bytes(view[:5]) == b"hello"
```

Passing `writable=True` to `FileMapper.map` returns a mapping whose changes
are written through to the file.

```python
from kdutils.elapsedtimer import ElapsedTimer

timer = ElapsedTimer()
# ... do some work ...
print(timer.msec_elapsed())
```

```python
from kdutils.logger import Logger, LoggerType

log = Logger("network", LoggerType.WARN)
log.warn("retrying in {} seconds", 3)
log << "connection lost"
```

Each category gets a handler writing to standard output and, unless a level
has already been set for it, the level `INFO`, so debug messages appear only
after the category's `logging` level is lowered.

## Running the tests

```
pip install -e ".[test]"
pytest
```