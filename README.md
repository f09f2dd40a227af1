# algodrills

A collection of small, self-contained algorithm exercises written as plain
Python functions. Every function takes ordinary Python values and returns a
result instead of printing it, so the pieces are easy to study, test and reuse.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.pyramids` | star and number pyramids, rectangles, hollow shapes |
| `algodrills.fancy_patterns` | diamonds, Floyd's and Pascal's triangles, star-decorated number patterns |
| `algodrills.arrays` | linear search, min/max, reversal, XOR unique value, pair and triplet sums, matrix helpers |
| `algodrills.array_problems` | sort colours, negatives to the left, duplicates, missing values, first repeating, common elements |
| `algodrills.matrix` | wave and spiral traversal |
| `algodrills.digits` | digit-list addition and large factorials |
| `algodrills.searching` | k-difference pairs, k closest elements, binary, exponential and unbounded search |
| `algodrills.allocation` | binary search on the answer: books, painters, cows, wood cutting, pratas |
| `algodrills.strings` | anagrams, letter and vowel reversal, common prefix, isomorphism, reorganisation, palindromes, substring search |
| `algodrills.conversions` | `my_atoi`, run-length `compress`, `int_to_roman`, `zigzag_convert`, `largest_number` |
| `algodrills.number_theory` | primality, prime counting, sieves, gcd/lcm, slow and fast powers, small conversions |
| `algodrills.recursion` | recursive classics: Fibonacci, stairs, subsequences, coin change, segments, non-adjacent sums |

## Examples

```python
from algodrills.pyramids import half_pyramid
from algodrills.fancy_patterns import pascal_triangle
from algodrills.array_problems import sort_colors, first_repeating
from algodrills.allocation import min_pages
from algodrills.conversions import compress, int_to_roman, my_atoi, zigzag_convert
from algodrills.number_theory import count_primes_sieve, gcd, lcm
from algodrills.matrix import spiral_order
from algodrills.digits import large_factorial
from algodrills.strings import find_substring

half_pyramid(3)                             # ['* ', '* * ', '* * * ']
print("\n".join(pascal_triangle(5)))

sort_colors([2, 2, 0, 1, 1, 0, 2, 1, 0])    # [0, 0, 0, 1, 1, 1, 2, 2, 2]
first_repeating([1, 5, 3, 4, 3, 5, 6])      # 5
min_pages([12, 34, 67, 90], 2)              # 113
int_to_roman(1994)                          # 'MCMXCIV'
my_atoi("   -42")                           # -42
compress("aabbccc")                         # ['a', '2', 'b', '2', 'c', '3']
zigzag_convert("PAYPALISHIRING", 3)         # 'PAHNAPLSIIGYIR'
count_primes_sieve(10)                      # 4
gcd(24, 72), lcm(24, 72)                    # (24, 72)
spiral_order([[1, 2], [3, 4]])              # [1, 2, 4, 3]
large_factorial(6)                          # [7, 2, 0]
find_substring("leetcode", "leeto")         # None
```

## Conventions

- Pattern functions return a list of strings, one per row, each built exactly
  as it would be printed, trailing spaces included. A size of zero or less
  gives an empty list.
- Functions that rearrange values work on a copy and return a new list; their
  input is left untouched.
- Searches that find nothing return `None` rather than a sentinel index.
- Input that a function cannot handle (an empty sequence where a minimum is
  asked for, too many students for the books, a negative bit position and so
  on) raises `ValueError`.

## What the package does not do

It is a library only: there is no command-line program, and nothing is read
from standard input or printed. To see a pattern, join its rows and print them
yourself.