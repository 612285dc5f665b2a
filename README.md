# puzzlekit

Small solvers for puzzle and algorithm problems. Each is a plain Python
function you can import, and each module also has a command.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Solvers

| Module | Functions | Command | Problem |
| --- | --- | --- | --- |
| `puzzlekit.aplusb` | `add_pairs(text)` | `puzzlekit-aplusb` | Sum a counted list of `a<sep>b` pairs, stopping at a `0,0` pair |
| `puzzlekit.gns` | `sort_words(words)`, `solve(text)` | `puzzlekit-gns` | Sort digit words `ZRO`, `ONE`, … `NIN` by value |
| `puzzlekit.kmp` | `failure_table(pattern)`, `kmp_search(text, pattern)` | `puzzlekit-kmp` | Knuth–Morris–Pratt substring search |
| `puzzlekit.lcs` | `longest_common_subsequence(a, b)` | `puzzlekit-lcs` | Longest common subsequence of two strings |
| `puzzlekit.puyo` | `parse_field(text)`, `chain_count(rows)` | `puzzlekit-puyo` | Count chain reactions on a 12×6 Puyo Puyo field |
| `puzzlekit.baduk` | `parse_board(text)`, `max_captured(board)` | `puzzlekit-baduk` | Most opponent stones two extra stones can capture |
| `puzzlekit.maze` | `rotate_layer(layer)`, `parse_layers(text)`, `shortest_escape(layers)` | `puzzlekit-maze` | Shortest path through five stackable, rotatable 5×5 layers |

Invalid input raises `ValueError`.

## Library use

```python
from puzzlekit.kmp import kmp_search
from puzzlekit.lcs import longest_common_subsequence
from puzzlekit.puyo import parse_field, chain_count

kmp_search("aabcedabcdabcdabcefaaa", "abcdabce")   # 10; -1 when absent
longest_common_subsequence("abc", "abc")           # "abc"

with open("field.txt") as handle:                  # 12 lines of 6 characters
    print(chain_count(parse_field(handle.read())))
```

## Command line

`puzzlekit-kmp` takes the text and the pattern as optional arguments and
reports where the pattern was first found, or `not found`:

    puzzlekit-kmp aabcedabcdabcdabcefaaa abcdabce

The other commands read their input from standard input:

    puzzlekit-aplusb < pairs.txt    # a count, then that many pairs; one sum per line
    puzzlekit-gns < cases.txt       # a case count, then per case: a label, a count, the words
    puzzlekit-lcs < pair.txt        # two words; prints the length, then the subsequence
    puzzlekit-puyo < field.txt      # 12 rows of 6 cells, '.' for empty
    puzzlekit-baduk < board.txt     # rows, columns, then cells: 0 empty, 1 own, 2 opponent
    puzzlekit-maze < layers.txt     # five 5x5 layers of 0 (wall) and 1 (open)

`puzzlekit-maze` prints the fewest moves from the top-left corner of the
first layer to the bottom-right corner of the last, over every stacking
order and rotation of the layers, or `-1` if no arrangement has a path.