# pekoms

A small parser-combinator library. A parser takes an input (a `str`,
`bytes`, or another sliceable value) and returns a pair `(output, rest)`.
`output` is the value it recognised and `rest` is the input left over.
When it cannot match, it raises `pekoms.errors.ParseError`. The exception's
`error` attribute holds the parser's own error value.

You build parsers from plain functions and combine them into bigger ones.
The package has no dependencies outside the standard library. The tests
use pytest, which the `test` extra installs.

## Building blocks

| Module | Contents |
| --- | --- |
| `pekoms.parser` | `Parser`, with `parse`, `map`, `and_then` and `map_err`, and `parser()`, which wraps a plain function and also works as a decorator |
| `pekoms.sequential` | `sequence(*parsers)`: runs the parsers one after another and returns a tuple of their outputs. A nested tuple of parsers is read as a nested sequence |
| `pekoms.alt` | `alt(*parsers)` / `Alt`: tries each parser on the same input and the first match wins. If every parser fails, it raises `ParseError` whose `error` is a tuple of all their error values |
| `pekoms.branch` | `branch(*parsers)` / `Branch`: a failure whose error value is `None` moves on to the next parser. Any other error value stops the search and is raised. If every parser fails with `None`, it raises `ParseError(None)` |
| `pekoms.basics` | `optional(p)`: never fails. When `p` does not match, it gives `None` and the untouched input |
| `pekoms.iterparse` | `star`, `plus`, `sep_list`, `sep_list_plus`, and the `ParseIter` iterator, whose `remains()` returns the unconsumed input |
| `pekoms.text` | text parsers: `pfx`, `one_of`, `ws`, `spaces`, `digits`, `digit`, `decimal_digits`, `integer`, `decimal`, `word`, `lower_w`, `alphanum`, `quoted`, `end` |
| `pekoms.binary` | byte parsers: `pfx`, `fixed_len`, and `number(fmt, byteorder)` |
| `pekoms.errors` | `ParseError`, and its subclass `AltError`, which carries the input tried as `inp` |

## A first parser

```python
from pekoms.parser import Parser, parser
from pekoms.sequential import sequence
from pekoms.text import digits, pfx

@parser
def dot(inp):
    return pfx(".")(inp)

out, rest = sequence(dot, dot, dot).parse("...!")
# out == (".", ".", "."), rest == "!"

number = Parser(digits).map(int)
out, rest = number.parse("42abc")
# out == 42, rest == "abc"
```

The three output and error methods do the following:

- `map` changes the output.
- `and_then` passes the output through a function, which may raise `ParseError` to reject it.
- `map_err` replaces the error value that a failure carries.

The text parsers `pfx` and `one_of` return `Parser` objects. The other
text parsers are plain functions, and you wrap them with `Parser(...)` or
`parser(...)` to get these methods. Every text parser fails with error
value `None`.

## Alternatives and repetition

```python
from pekoms.alt import alt
from pekoms.iterparse import sep_list
from pekoms.text import pfx

animal = alt(pfx("dog"), pfx("cat"), pfx("fish"))
animals = sep_list(animal, pfx(","))

out, rest = animals.parse("dog,cat,fish;")
# out == ["dog", "cat", "fish"], rest == ";"
```

Order matters in `alt`. With an ambiguous input the first parser that
matches wins, so put keywords before general words.

- `star` matches zero or more times and never fails.
- `plus` matches one or more times.
- `sep_list` matches items, each optionally followed by a separator, and never fails.
- `sep_list_plus` needs at least one item. It stops after the first item if no separator follows it.

## Binary input

`number(fmt, byteorder="native")` reads one value of a fixed size.

- `fmt` is one of `u8`, `u16`, `u32`, `u64`, `i8`, `i16`, `i32`, `i64`, `f32`, `f64`.
- `byteorder` is `"native"`, `"big"` or `"little"`.

`fixed_len(n)` takes exactly `n` bytes. `pfx(b"...")` matches literal bytes.

## Included parsers and commands

- `pekoms.json_parser`: a small JSON-like reader. `elem` parses any value
  and `array`, `obj`, `num`, `txt`, `boolean` and `null` parse single
  kinds. The results map to Python types as follows:
  - `null` becomes `None`.
  - Numbers become `float`.
  - Arrays become lists.
  - Objects become lists of `(key, value)` pairs.
- `pekoms.sexpr`: s-expressions such as `(add 1 "x" (neg y))`. `expr`
  returns `Expr(head, items)`, where the items are `int` values (64-bit
  range), `Symbol`, `Text` or nested `Expr`.
- `pekoms.wav`: `parse_wav(data)` returns `((WavInfo, samples), rest)` for
  a RIFF/WAVE file. It expects the `fmt ` chunk to come directly before
  the `data` chunk.

Each module has a command:

```
pekoms-json ['{"a": [1, 2]}' ...]
pekoms-sexpr ['(add 1 2)' ...]
pekoms-wav path/to/sound.wav
```

`pekoms-json` and `pekoms-sexpr` parse each argument and print the
result. Without arguments, they parse a few built-in samples. They exit
with status 1 if any input fails to parse.

`pekoms-wav` prints the format fields, the size of the sample data and any
bytes left over. It exits with status 1 if the file cannot be parsed.
Without an argument it reads `./examples/assets/neusnare.wav`, which does
not ship with the package.

## What it does not do

The JSON reader is a demonstration, not a full JSON implementation:

- Strings have no escape handling, and the text returned keeps its closing quote character.
- Numbers have no exponent form.
- Objects are not turned into dictionaries.

The WAVE reader handles only the simple `RIFF` / `fmt ` / `data` layout.
It does not decode samples.