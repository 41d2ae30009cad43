# numbasics

A collection of small, well-defined routines covering number theory,
base conversions, simple statistics, matrix operations and everyday
arithmetic. It suits exercises, teaching material and quick checks at the
interactive prompt.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `numbasics.numtheory`

Integer routines:

- `gcd(a, b)` and `lcm(a, b)` for two positive integers (anything below 1
  raises `ValueError`); `hcf(a, b)` is Euclid's algorithm with no such check.
- `factorial(n)`; a negative `n` raises `ValueError`.
- `is_prime(n)`; 0, 1 and negative numbers are not prime.
- `primes_between(low, high)` gives primes with `low <= p < high`;
  `primes_strictly_between(low, high)` gives primes with `low < p < high`.
- `prime_sum_pairs(n)` lists every pair of primes `(p, q)` with `p <= q` and
  `p + q == n`.
- `factors(n)` lists the positive divisors of `n` in increasing order.
- `is_armstrong(n)` checks whether the sum of the cubes of the digits equals `n`.
- `reverse_number(n)`, `is_palindrome(n)` and `count_digits(n)` work on the
  decimal digits (the sign of `n` is kept, and zero has one digit).
- `is_even(n)`, `is_leap_year(year)` (Gregorian rule) and `sum_natural(n)`.
- `fibonacci(n)` returns the first `n` terms; the first two terms, 0 and 1,
  are always included.
- `power(base, exponent)` for a non-negative exponent.
- `quotient_remainder(dividend, divisor)` rounds the quotient toward zero and
  gives the remainder the dividend's sign; a zero divisor raises
  `ZeroDivisionError`.

```python
from numbasics.numtheory import gcd, lcm, is_prime, fibonacci, quotient_remainder

gcd(81, 153)                # 9
lcm(72, 120)                # 360
is_prime(29)                # True
fibonacci(7)                # [0, 1, 1, 2, 3, 5, 8]
quotient_remainder(-7, 2)   # (-3, -1)
```

### `numbasics.conversions`

- `binary_to_decimal(n)` reads the decimal digits of `n` as binary digits.
- `decimal_to_octal(n)` returns an integer whose decimal digits spell `n` in octal.
- `ascii_value(c)` and `is_alphabet(c)` take a single character; anything
  longer or shorter raises `ValueError`.
- `alphabet_letters()` returns `"ABCDEFGHIJKLMNOPQRSTUVWXYZ"`.
- `reverse_sentence(text)` reverses the text up to its first newline.

```python
from numbasics.conversions import binary_to_decimal, decimal_to_octal

binary_to_decimal(1101)   # 13
decimal_to_octal(78)      # 116
```

### `numbasics.stats`

- `average(values)` takes between 1 and 100 numbers; other counts raise
  `ValueError`.
- `standard_deviation(values)` is the population standard deviation.
- `largest(values)` returns the maximum.

Both `standard_deviation` and `largest` raise `ValueError` on an empty sequence.

### `numbasics.matrix`

Matrices are lists of rows.

- `add_matrices(a, b)` adds two matrices of the same shape.
- `transpose(m)` swaps rows and columns.
- `format_matrix(m, separator="  ")` writes each element followed by the
  separator, one row per line.

Ragged rows or mismatched shapes raise `ValueError`.

### `numbasics.arithmetic`

- `calculate(op, first, second)` applies `+`, `-`, `*` or `/`; any other
  operator raises `ValueError`. Division by zero follows floating-point rules
  and gives an infinity or NaN.
- `sign_description(num)` returns a sentence saying whether `num` is
  positive, negative or zero.
- `quadratic_roots(a, b, c)` returns a `QuadraticRoots` with `root1`,
  `root2` (as complex numbers), `discriminant`, and the properties `are_real`
  and `are_equal`; `str()` of it gives the roots to two decimal places. A zero
  `a` raises `ValueError`.
- `multiplication_table(n)` returns the ten lines `n * 1 = ...` to `n * 10 = ...`.
- `swap(first, second)` returns the two values in exchanged order.

```python
from numbasics.arithmetic import quadratic_roots

str(quadratic_roots(1, -3, 2))   # 'root1 = 2.00 and root2 = 1.00'
```

## Command line

The `numbasics` command has three sub-commands. With none, it prints a
greeting:

```
numbasics
numbasics hello
```

Echo an integer back:

```
numbasics echo 42
```

Print the sizes in bytes of the native `int`, `float`, `double` and `char`
types (also available as `numbasics.cli.type_sizes()`):

```
numbasics sizes
```

## What it does not do

The routines are plain functions that take their inputs as arguments. The
package has no interactive prompts: apart from the small `numbasics` command
above, it does not read numbers, characters or matrices from the keyboard.