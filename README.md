# algodrills

Small, self-contained implementations of classic algorithm exercises, written
as plain Python functions that take ordinary Python values and return results.

## Modules

- `algodrills.binary_search` – first and last occurrence, occurrence counts,
  floor and ceiling, rotation count and minimum of a rotated array, search in
  rotated arrays (with and without duplicates), k-th missing positive number,
  exact integer n-th root, lower bound, row with most ones, matrix search,
  the single unpaired element, smallest divisor under a threshold and integer
  square root.
- `algodrills.bits` – testing, setting, clearing and toggling bits, counting
  set bits, bit flips between two numbers, power-of-two and odd checks, XOR
  swap, XOR of a range, the two odd-occurring values, division using shifts
  (clamped to 32-bit limits), power sets, and conversion to and from binary
  strings.
- `algodrills.arithmetic` – divisors, distinct prime factors, primes below a
  bound, a smallest-prime-factor table with `factorize`, and `power` by
  repeated squaring.
- `algodrills.sorting` – a stable `merge_sort` that returns a new list.
- `algodrills.text` – `is_anagram`, `atoi`, `largest_odd_prefix` and
  `longest_common_prefix`.
- `algodrills.greedy` – `Job` and `Item` records with assigning cookies,
  inserting and merging intervals, job sequencing, jump game reachability and
  fewest jumps, fractional knapsack, lemonade change, coin change with fixed
  denominations, train platforms, meetings in one room, removals for
  non-overlapping intervals and average waiting time under shortest job first.
- `algodrills.sliding_window` – subarrays with a given binary sum, subarrays
  with k odd numbers, longest windows with at most k distinct items, character
  replacement, longest substring without repeats, longest run of ones with k
  flips, best card points from both ends, and substrings containing `a`, `b`
  and `c`.
- `algodrills.linked_list` – the singly linked `Node` with building,
  conversion to a list, length, membership, insertion, deletion by value,
  middle value, deleting the middle, removing the n-th node from the end,
  rotation, reversal and a palindrome check that leaves the list intact.
- `algodrills.list_algorithms` – adding one to a digit list, adding two
  numbers stored least significant digit first, list intersection, cycle
  length and cycle start, odd/even position grouping, sorting 0/1/2 lists,
  and merging and merge-sorting linked lists.
- `algodrills.doubly_linked` – the doubly linked `DNode` with building,
  insertion at a position, deleting the head, tail, k-th node, first or every
  matching value, removing duplicates from a sorted list, reversal and pairs
  that add up to a target.
- `algodrills.substrings` – homogenous substring counts (modulo 10**9 + 7),
  parenthesis depth, rotation checks, removing outer parentheses, reversing
  word order, Roman numerals and beauty sums.

Invalid input that the algorithms cannot handle, such as an empty sequence
where an element is required or a character outside the expected alphabet,
raises `ValueError` (or `IndexError` / `ZeroDivisionError` where that fits).

## Example

```python
from algodrills.binary_search import count_occurrences
from algodrills.greedy import merge_intervals
from algodrills.linked_list import from_iterable, reverse, to_list

count_occurrences([2, 4, 6, 8, 8, 8, 11, 13], 8)      # 3
merge_intervals([[1, 2], [3, 5], [4, 7], [8, 10]])   # [[1, 2], [3, 7], [8, 10]]
to_list(reverse(from_iterable([1, 2, 3])))           # [3, 2, 1]
```

## What it does not do

The package is a library only: it has no command-line program and prints
nothing. Every exercise is a function to call from your own code; the linked
list functions work on `Node` and `DNode` chains that you build with
`from_iterable` and read back with `to_list`.