# seqwrap

TCP carries sequence numbers in 32 bits, counted from a random initial
sequence number (ISN). Inside a program it is easier to work with absolute,
zero-indexed 64-bit positions in the byte stream. `seqwrap` converts between
the two.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute position -> 32-bit sequence number
seqno = wrap(3 * 2**32 + 17, isn)
print(seqno)                 # 32

# 32-bit sequence number -> the absolute position closest to a checkpoint
absolute = unwrap(seqno, isn, checkpoint=3 * 2**32)
print(absolute)              # 12884901905
```

Everything lives in the module `seqwrap.wrapping`.

### `WrappingInt32`

An immutable (frozen dataclass) 32-bit value relative to some ISN.

- `WrappingInt32(raw)` stores `raw` modulo 2**32; the stored value is `raw_value`.
- `a + n` with an integer steps `n` forward and wraps around past 2**32.
  Adding two `WrappingInt32` values is not supported.
- `a - n` with an integer steps `n` back.
- `a - b` with two wrapping integers gives the signed offset from `b` to `a`,
  a value in the range [-2**31, 2**31). It is negative when going back from
  `b` to `a` takes no more steps than going forward.
- `==` and `!=` compare raw values, and values are hashable.
- `int(a)` and `str(a)` give the raw value.

### `wrap(n, isn)`

Turns the absolute sequence number `n` into a `WrappingInt32`, relative to `isn`.
Only the low 32 bits of `n` matter.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`, as an unsigned 64-bit value. Pass a recent absolute sequence
number as `checkpoint`, such as the last byte received. Each direction of a
TCP connection has its own ISN. If the closest candidate would be negative,
the one 2**32 higher is returned instead.

## What this package does not do

It only handles sequence-number arithmetic. It has no TCP sender, receiver,
segment parser or connection state machine, and it does not touch the network.

## Running the tests

```
pip install -e ".[test]"
pytest
```