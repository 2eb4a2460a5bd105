# algonotes

A small collection of classic data structures and algorithms, written as
plain, readable Python for studying how they work. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                   | Contents                                                                 |
|--------------------------|--------------------------------------------------------------------------|
| `algonotes.fundamentals` | `dec_to_bin`, `euclid_gcd`, `modulo_gcd`, `triple_gcd`, `string_to_num` |
| `algonotes.linear`       | `LinkedList`, `Stack`, `Queue`, `josephus`                               |
| `algonotes.primes`       | `sieve`, the sieve of Eratosthenes                                       |
| `algonotes.trees`        | `TreeNode`, `pre_order`, `in_order`, `post_order`, `level_order`, `describe_tree`, `sample_tree` |
| `algonotes.ruler`        | `ruler_marks`, `render_ruler`: ruler marking by divide and conquer       |
| `algonotes.sorting`      | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `partition`, `quick_sort`, `quick_sort_iterative`, `kth_smallest`, `bits` |
| `algonotes.cli`          | `main`, the `algonotes` command                                          |

## Examples

### Numbers

```python
from algonotes.fundamentals import dec_to_bin, euclid_gcd, modulo_gcd, triple_gcd, string_to_num

dec_to_bin(5)            # 101, the binary digits written as a decimal number
dec_to_bin(0)            # 0 (zero and negative values give 0)
euclid_gcd(12, 18)       # 6, by repeated subtraction
modulo_gcd(12, 18)       # 6, by repeated remainder
triple_gcd(12, 18, 24)   # 6
string_to_num("123\n")   # 123; one trailing newline is ignored
```

`euclid_gcd` and `modulo_gcd` raise `ValueError` when the first operand is
positive and the second is not. `string_to_num` raises `ValueError` for an
empty string or any character that is not an ASCII digit.

### Lists, stacks and queues

```python
from algonotes.linear import LinkedList, Stack, Queue, josephus

items = LinkedList([1, 2, 3])
items.insert_after(-1, 0)     # position -1 is the head: inserts at the front
list(items)                   # [0, 1, 2, 3]
items.delete_after(0)         # 1
items.reverse()
list(items)                   # [3, 2, 0]

stack = Stack()
stack.push(40)
stack.push(99)
stack.pop()                   # 99

queue = Queue()
queue.put(11)
queue.put(773)
queue.get()                   # 11

josephus(9, 5)                # 8, the survivor when every 5th of 9 people is removed
```

Popping an empty `Stack`, getting from an empty `Queue`, or naming a position
that does not exist in a `LinkedList` raises `IndexError`. `josephus` raises
`ValueError` when either argument is below 1 or there are fewer people than
the step.

### Primes

```python
from algonotes.primes import sieve

sieve(20)                     # [2, 3, 5, 7, 11, 13, 17, 19]
```

### Trees

```python
from algonotes.trees import sample_tree, pre_order, in_order, post_order, level_order, describe_tree

root = sample_tree()
list(pre_order(root))         # [1, 2, 4, 5, 8, 3, 6, 7, 9, 10]
list(in_order(root))          # [4, 2, 8, 5, 1, 6, 3, 9, 7, 10]
list(post_order(root))        # [4, 8, 5, 2, 6, 9, 10, 7, 3, 1]
list(level_order(root))       # [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
print(describe_tree(root))    # "Value = 1", "Left : ...", "Right : ...", "Done" blocks
```

The traversals are generators and use an explicit stack or queue, not
recursion.

### Ruler

```python
from algonotes.ruler import ruler_marks, render_ruler

ruler_marks(0, 8, 3)          # [0, 1, 2, 1, 3, 1, 2, 1, 0]
print(render_ruler(0, 8, 3))  # one line per position, "---" repeated by its height
```

A negative `left`, or `right` below `left`, raises `ValueError`.

### Sorting

```python
from algonotes.sorting import shell_sort, quick_sort, quick_sort_iterative, kth_smallest, bits

shell_sort([5, 3, 9, 1])             # [1, 3, 5, 9]
quick_sort([5, 3, 9, 1])             # [1, 3, 5, 9]
quick_sort_iterative([5, 3, 9, 1])   # [1, 3, 5, 9]
kth_smallest([5, 3, 9, 1], 1)        # 3 (k is 0-based)
bits(0b101100, 2, 3)                 # 0b011 == 3
```

The sorting functions return a new list and leave their input untouched.
`partition(items, left, right)` is the exception: it rearranges
`items[left:right + 1]` in place around its last element and returns the
pivot's final index. `kth_smallest` raises `IndexError` for a `k` outside the
list; `bits` treats the key as a 32-bit unsigned value and raises `ValueError`
for a negative start or count.

## Command line

Installing the package adds an `algonotes` command with three subcommands:

```
algonotes primes 30                      # 2 3 5 7 11 13 17 19 23 29
algonotes ruler 0 8 3                    # draw the ruler marked above
algonotes sort 5 3 9 1                   # 1 3 5 9
algonotes sort -a quick 5 3 9 1          # choose the algorithm
echo "5 3 9 1" | algonotes sort          # values read from standard input
```

`sort` takes `--algorithm` / `-a` with one of `bubble` (the default),
`insertion`, `selection`, `shell`, `quick` and `quick-iterative`. When no
values are given on the command line it reads whitespace-separated integers
from standard input. For the full usage:

```
algonotes --help
```

## What it does not do

The command line covers primes, the ruler and sorting only. GCDs, the
Josephus problem, linked lists, stacks, queues and tree traversals are
available from Python but have no subcommand.