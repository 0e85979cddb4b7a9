# ftkit

ftkit is a small collection of low-level helpers with C-like semantics:

- ASCII character classification and case conversion
- string operations on NUL-terminated text
- byte-buffer operations on `bytearray` and other bytes-like objects
- 32-bit integer parsing and formatting, and floating-point checks
- byte-order helpers
- a singly linked list with a stable merge sort
- a FIFO queue and a LIFO stack
- unbuffered output to file descriptors

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `ftkit.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_white`, `is_ascii`, `is_print`, `to_upper`, `to_lower` |
| `ftkit.numeric` | `is_nan`, `is_inf`, `is_ninf`, `atoi`, `atoi_skip`, `itoa` |
| `ftkit.bits` | `is_little_endian`, `swap_endian32` |
| `ftkit.memory` | `memset`, `bzero`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memrchr`, `memcmp`, `memalloc`, `rememalloc` |
| `ftkit.strings` | `strlen`, `strdup`, `strcpy`, `strncpy`, `strcat`, `strncat`, `strlcat`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`, `strncmp`, `charat`, `strequ`, `strnequ` |
| `ftkit.strtools` | `strnew`, `strclr`, `striter`, `striteri`, `strmap`, `strmapi`, `strsub`, `strjoin`, `strtrim`, `strtrim_c`, `strsplit`, `findintab`, `findintabn` |
| `ftkit.linkedlist` | `Node`, `LinkedList` |
| `ftkit.containers` | `Queue`, `Stack` |
| `ftkit.output` | `putchar`, `putstr`, `putendl`, `putnbr`, `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, `puterror` |

## Conventions

- **Characters.** Functions in `ftkit.chars` accept a one-character string
  or an integer code. `to_upper` and `to_lower` return the same kind they
  were given. Only ASCII letters are converted.
- **Strings.** In `ftkit.strings`, `ftkit.strtools` and `ftkit.output`, a
  string ends at its first `"\0"`, as in C. Python strings cannot be
  changed in place, so functions such as `strcpy`, `strcat` and `strncpy`
  return the text the destination would hold afterwards. `strlcat` returns
  a pair: the resulting text and the length it tried to create.
- **Searches.** `strchr`, `strrchr`, `strstr`, `strnstr`, `memchr`,
  `memrchr` and `memccpy` return an index, or `None` when nothing is found.
  `charat`, `findintab` and `findintabn` return `-1` instead.
- **Missing input.** Several `ftkit.strtools` functions return `None` when
  given `None` for the string or the function. `strmap` and `strmapi` also
  return `None` for an empty string.
- **Buffers.** Functions in `ftkit.memory` write into mutable buffers such
  as `bytearray`. They raise `ValueError` when a length is negative or
  larger than the buffer. `strnew` returns a zeroed `bytearray` of
  `size + 1` bytes, and `strclr` zeroes a buffer up to its first NUL.
- **Integers.** `atoi` and `atoi_skip` skip leading whitespace, accept one
  sign and wrap the result to a signed 32-bit value. `atoi_skip` returns
  the value together with the unread rest of the text. `itoa` and `putnbr`
  raise `OverflowError` outside the signed 32-bit range. `swap_endian32`
  raises `OverflowError` outside the unsigned 32-bit range.
- **Containers.** `Queue.dequeue`, `Queue.peek`, `Stack.pop` and
  `Stack.peek` return `None` when the container is empty.

## Examples

```python
from ftkit.numeric import atoi, atoi_skip, itoa
from ftkit.bits import swap_endian32
from ftkit.strings import strlcat, strchr
from ftkit.strtools import strsplit, strtrim
from ftkit.memory import memccpy
from ftkit.containers import Queue, Stack
from ftkit.linkedlist import LinkedList

atoi("  -42abc")                 # -42
atoi_skip(" 17 rest")            # (17, " rest")
itoa(-2147483648)                # "-2147483648"
swap_endian32(0x12345678)        # 0x78563412
strlcat("ab", "cdef", 4)         # ("abc", 6)
strchr("hello", "l")             # 2
strsplit("**hello*world*", "*")  # ["hello", "world"]
strtrim("\t  text \n")           # "text"

buf = bytearray(8)
memccpy(buf, b"abc:def", ord(":"), 7)  # 4; buf starts with b"abc:"

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                  # 1

stack = Stack()
stack.push("a")
stack.push("b")
stack.pop()                      # "b"

items = LinkedList([3, 1, 2])
items.merge_sort(lambda a, b: a.content - b.content)
list(items)                      # [1, 2, 3]
```

Iterating over a `LinkedList` yields the contents of its nodes. The nodes
themselves start at `items.head`. Each node also carries a
`content_size`, which `push_front`, `append` and `map` set and which
`delete_first` and `clear` pass to the deleter they are given.
`merge_sort` takes a comparator over two nodes and keeps equal nodes in
their original order.

## Output

The functions in `ftkit.output` write straight to a file descriptor with
`os.write`, bypassing Python's buffered `sys.stdout`. Mixing them with
`print` may therefore interleave output unexpectedly. Text is encoded as
UTF-8. A character given as an integer is written as a single byte.
`putchar`, `putstr`, `putendl` and `putnbr` write to standard output.
The `_fd` variants take the descriptor to write to. `puterror` writes to
standard error and returns `1`, so it can serve as an exit status.

## What ftkit does not do

ftkit is a library only: it installs no command. It has no formatted-print
function beyond writing single characters, strings, lines and integers,
and no facility for reading input line by line.