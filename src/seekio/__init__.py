"""
# seekio Technical Documentation

seekio is a small random-access file inspector and editor. It opens one file
and runs a sequence of positional commands against it, each one reading,
writing or repositioning at the current file offset. These docs are generated
from the project's docstrings and serve as a technical reference.

---

## Commands

- `r<length>`: read up to `length` bytes and print them as text.
- `R<length>`: read up to `length` bytes and print them as hex.
- `w<string>`: write `string` at the current offset.
- `s<offset>`: seek to the absolute `offset`.

Lengths and offsets accept decimal, octal (`010`) and hex (`0x10`).

---

## How to Use This Documentation

- Browse the **modules** listed in the sidebar to explore available APIs.
- Each class and function includes argument and return value details.
- Private helpers (`_method`, `_Class`) are minimally documented.
"""

from importlib.metadata import version

__version__ = version("seekio")
