# tapenbt

A small library with no dependencies for reading and writing NBT, the binary
tag format that Minecraft uses for world, player and network data.

It covers every tag type: bytes, shorts, ints, longs, floats, doubles,
byte/int/long arrays, strings, lists and compounds. Strings are stored in
their on-disk MUTF-8 form. Compound entries keep their original order, and a
name may appear more than once. Input nested more than 512 levels deep is
refused.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Reading

```python
from tapenbt.decode import read

with open("level.nbt", "rb") as handle:
    nbt = read(handle.read())

compound = nbt.into_inner()
print(compound.int("PersistentId"))
print(compound.list("Rotation").floats())
```

`read` returns a `BaseNbt`, which pairs the root name with the root
`NbtCompound`. Attribute lookups on a `BaseNbt` pass through to its compound,
so `nbt.int("PersistentId")` also works. When the data starts with an end
tag, `read` returns `None`.

`tapenbt.decode` has these other readers:

- `read_unnamed`: a root compound with no name, as sent over the network.
- `read_compound`: the body of a compound.
- `read_tag`: a type byte followed by its payload.
- `read_optional_tag`: like `read_tag`, but returns `None` for an end tag.

Each reader takes bytes-like data or a `tapenbt.common.ByteReader`. A
`ByteReader`'s position moves forward as it reads.

Malformed input raises a subclass of `tapenbt.errors.NbtError`:
`UnexpectedEofError`, `InvalidRootTypeError`, `UnknownTagIdError` or
`MaxDepthExceededError`.

## Looking things up

`NbtCompound` gives typed access by name. Each accessor returns `None` when
the entry is missing or holds a different type:

```python
compound.string("name")      # a Mutf8Str
compound.compound("tag")
compound.int_array("UUID")   # a list of ints
```

A compound also supports these:

- `len()` and iteration over `(name, tag)` pairs.
- `keys()`, `values()` and `items()`.
- `get()` and `contains()`.
- `insert()` and `extend()`, which append entries.
- `remove()`.
- `take()`, which leaves a zero byte tag in place of the entry it returns.
- `clear()`.

`NbtTag` holds one value and its `TagId`. `NbtList` holds items of a single
type. For each element type it has an accessor, such as `ints()`, `strings()`
or `compounds()`, that returns a list when the element type matches and
`None` when it does not. `as_nbt_tags()` wraps every item as an `NbtTag`.

## Writing

```python
from tapenbt.encode import write

data = write(nbt)
```

`write(None)` gives a single end tag. The other writers in `tapenbt.encode`
are:

- `write_unnamed`: a root compound without its name.
- `write_tag`: a tag's type byte followed by its payload.
- `write_tag_payload`: a tag's payload alone.
- `write_list`: an `NbtList`.
- `write_compound`: an `NbtCompound`.

Every writer returns `bytes`.

## Strings

`tapenbt.mutf8` converts between Python text and Java's modified UTF-8:

- `encode` turns text into MUTF-8 bytes.
- `decode` turns MUTF-8 bytes into text and raises `UnicodeDecodeError` on invalid data.
- `decode_lossy` turns MUTF-8 bytes into text and replaces invalid sequences with U+FFFD.
- `is_plain_ascii` checks whether any byte has its top bit set.

String values and names are held as `Mutf8Str`. Its `to_str()` returns an
empty string for invalid data, and `to_string_lossy()` decodes with
replacement characters instead.

## Inventories

`tapenbt.inventory.items_from_nbt` reads the list of item compounds under
`"i"` and turns it into `Item` and `ItemDisplay` records. An empty slot
becomes `None`. The whole result is `None` if a present item lacks its
`tag`, `id`, `Damage` or `Count`.

## Command line

```
tapenbt path/to/file.dat
tapenbt path/to/file.dat -o out.nbt
```

The command does the following:

1. Reads the file, gunzipping it first when it is gzip data.
2. Parses it as NBT.
3. Encodes it again and writes the result to standard output, or to the file given with `-o`.

It exits with status 1 if the file cannot be read or is not valid NBT.

## What it does not do

- There is no automatic mapping between NBT and your own classes. The
  `DeserializeError` family in `tapenbt.errors` is defined, but nothing in
  the package raises it.
- The command line does not gzip its output.
- Data is always decoded into Python objects. There is no view that reads
  values in place from the original buffer.