# logengine

Building blocks for a logging engine:

- **`logengine.arrays`** holds growable arrays with bounds-checked access:
  - `DynArray` is a general array.
  - `SortedArray` keeps its items in order and finds them by binary search.
  - `AutoArray` grows when it is read or written past its end.
  - `FixedStringArray` holds strings that all have one fixed length.
  - `RawArray` holds byte items that all have one fixed size.

  An index out of range raises `ArrayError`.
- **`logengine.hashes`** holds two mappings:
  - `SortedHash` is a mapping whose keys are kept sorted.
  - `Hash2` is a two-level mapping, first by section and then by key. Its length is the number of values in all sections together.
- **`logengine.properties`**: `Properties` is a name/value store. Its typed lookups fall back to a default.
- **`logengine.system_version`**: `system_version()` describes the operating system. The `logengine-sysinfo` command prints that description.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Arrays

```python
from logengine.arrays import DynArray, SortedArray, AutoArray, ArrayError

numbers = DynArray([5, 3, 9])
numbers.add(1)
numbers.swap(0, 1)
print(list(numbers))          # [3, 5, 9, 1]
print(numbers.pop_front())    # 3
print(numbers.index_of(42))   # -1 when the value is absent

try:
    numbers[10]
except ArrayError as exc:
    print(exc)                # Element with index 10 not found!

ordered = SortedArray([7, 2, 4])
ordered.add(3)
print(list(ordered))          # [2, 3, 4, 7]
print(ordered.index_of(4))    # 2

auto = AutoArray(default=0)
auto[3] = 8
print(list(auto))             # [0, 0, 0, 8]
```

`SortedArray` accepts a `key` function that gives the value each item is ordered by. For example, `key=str.lower` orders strings without regard to case. A sorted array does not allow operations that would break its order, such as `insert`, `swap`, `reverse`, `push`, `pop` and assignment by index. These raise `TypeError`.

`DynArray` also provides these operations:

- capacity management: `capacity`, `set_capacity`, `hold`, `set_count`
- filling: `add_fill_values`, `zero`
- stack use: `push`, `pop`, `last`
- `reverse(end_index)`, which reverses the whole array or only its items up to `end_index`.

## Sorted hashes

```python
from logengine.hashes import SortedHash, Hash2

table = SortedHash(key=str.lower)    # case-insensitive keys
table["b"] = 2
table["A"] = 1
print(table.keys())                  # ['A', 'b']
print(table["a"])                    # 1
print(table.get("missing", 0))       # 0
del table["missing"]                 # removing an absent key does nothing

sections = Hash2()
sections.set("logger", "level", "debug")
sections.set("logger", "sink", "file")
print(len(sections))                 # 2
print(sections.get("logger", "level"))
print(sections.find("other", "level"))  # None
sections.set_section("empty")        # creates an empty section
print(sections.section_keys())       # ['empty', 'logger']
```

## Properties

```python
from logengine.properties import Properties

props = Properties()
props["MaxLogSize"] = " 1024 "
props["Async"] = "yes"

print(props.get_int("MaxLogSize", 0))      # 1024
print(props.get_uint("Missing", 7))        # 7
print(props.get_bool("Async", False))      # True
print(props.get_string("AppName", "demo")) # demo
```

Each typed lookup returns the default when the name is absent. Otherwise it reads the stored value as follows:

- `get_int` reads the leading integer of the trimmed value.
- `get_uint` accepts only plain digits. A leading zero means octal. Values above the signed 64-bit range give the default.
- `get_bool` is true for `true`, `yes` or `1`, in any case.

## System report

```
logengine-sysinfo
logengine-sysinfo /usr/bin/python3
```

On Windows, the description is built from the version record the interpreter reports.

On other systems, the command prints the output of `uname -a`, followed by the `ldd` listing of shared libraries. That listing is for the program file given as the argument, or for the running interpreter when no argument is given. A command that cannot be started adds nothing to the report.

From Python:

```python
from logengine.system_version import system_version

print(system_version())
```

## What this package does not do

This package provides the containers, property store and system report that a logging engine is built from. It does not provide loggers, log sinks or message layouts. It does not write log records to the console or to files, and it does not read logger configuration files.