# ftlib

ftlib is a set of small helpers. It covers ASCII character classes, operations
on byte buffers, string handling, a minimal `printf`, a singly linked list and
a buffered line reader. The helpers follow the rules of NUL-terminated strings
and fixed-width integers. For example, `atoi` wraps at 32 bits, and `strlcat`
reports the length the full result would have had. They work on Python's own
types: `str`, `bytes`, `bytearray` and iterators.

## Installation

```
pip install .
```

Install with the `test` extra to get pytest and hypothesis:

```
pip install .[test]
```

## Modules

| Module               | What it offers                                                              |
|----------------------|-----------------------------------------------------------------------------|
| `ftlib.chars`        | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`. Each takes a one-character string or an integer code. |
| `ftlib.memory`       | `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`, `strlcpy`, `strlcat`. These work on `bytearray` buffers. |
| `ftlib.strings`      | `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `count_occurrences`, `atoi`, `itoa`. Searches return an index or `None`. |
| `ftlib.output`       | `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes to a file descriptor and returns the bytes written. |
| `ftlib.printf`       | `format_string`, `printf`, `decimal_length`, `hex_length`, `hex_digit`      |
| `ftlib.lists`        | `Node`, `LinkedList`                                                        |
| `ftlib.line_reader`  | `LineReader`                                                                |

## Examples

```python
from ftlib.strings import split, atoi, itoa, strtrim, strchr

split("  hello  world ", " ")   # ['hello', 'world']
atoi("  -42abc")                # -42
itoa(-2147483648)               # '-2147483648'
strtrim("xxhixx", "x")          # 'hi'
strchr("abc", "\0")             # 3
```

```python
from ftlib.memory import strlcpy

buf = bytearray(4)
strlcpy(buf, b"hello", 4)       # 5 (source length); buf == bytearray(b'hel\x00')
```

```python
from ftlib.printf import format_string, printf

format_string("%s is %d (%x)", "answer", 42, 42)   # 'answer is 42 (2a)'
printf("%c%%\n", "A", fd=1)                        # writes "A%\n", returns 3
```

`printf` and `format_string` accept the conversions `%c`, `%s`, `%p`, `%d`,
`%i`, `%u`, `%x`, `%X` and `%%`. They take no flags, widths or precisions. An
unknown conversion, or a `%` at the very end of the format, produces no output.
If the arguments run out, or one has the wrong type, a `TypeError` is raised.
`printf` writes the UTF-8 encoded result and returns the number of bytes it
wrote.

```python
from ftlib.lists import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
list(items.map(lambda x: x * 10, None))   # [0, 10, 20, 30, 40]
len(items)                                # 5
```

```python
import os
from ftlib.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 100):
    print(line, end="")
os.close(fd)
```

`LineReader.read_line()` returns each line with its trailing newline, and the
last line may have none. The reader takes `buffer_size` bytes at a time and
decodes them as UTF-8. Once the input is used up, `read_line()` returns `None`.

## What it does not do

ftlib is a library only. It has no command-line program and starts nothing on
its own. You call its functions from your own code.