"""
A simple example of chaining lazy operations over an infinite source.
Only as many numbers are generated as are needed for the first five results.
"""
import itertools

from reeks import filter_, map_


def main():
    numbers = itertools.count(1)

    squares = map_(numbers, lambda key, n: n * n)
    odd_squares = filter_(squares, lambda key, n: n % 2 == 1)

    print("--- First five odd squares ---")
    for index, value in itertools.islice(odd_squares, 5):
        print(f"{index}: {value}")


if __name__ == "__main__":
    main()
