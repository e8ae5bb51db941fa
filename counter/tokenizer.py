"""
tokenizer.py - Separators, Tokenizer and Frequency Table

Splits lines of text into lower-cased words on a fixed separator alphabet
and counts them in a plain dict.
"""

SEPARATOR_CHARS = ".,!?:;-"


def build_separators(chars=SEPARATOR_CHARS):
    """
    Build the set of characters that end a word.

    The punctuation in `chars` plus carriage return, line feed, NUL and space.
    """
    return frozenset(chars) | {"\r", "\n", "\0", " "}


def tokenize_line(line, separators):
    """
    Yield the lower-cased words of a single line, left to right.

    A word is only emitted when a separator follows it: characters still
    buffered at the end of the line are dropped, so "the cat ran" yields
    "the" and "cat" but not "ran".

    Runtime Complexity: O(n) where n is the length of the line.
    """
    word_chars = []
    for char in line:
        if char not in separators:
            word_chars.append(char)
        elif word_chars:
            yield "".join(word_chars).lower()
            word_chars.clear()


def read_lines(file_path, encoding="utf-8"):
    """
    Yield every line of a text file without its line terminator.

    File-level exceptions propagate to the caller.
    """
    with open(file_path, "r", encoding=encoding) as file:
        for line in file:
            if line.endswith("\n"):
                line = line[:-1]
            yield line


def record_word(word, table):
    """Add one occurrence of `word`, starting it at 1 if it is new."""
    if word in table:
        table[word] += 1
    else:
        table[word] = 1


def fill_map_with_words(line, separators, table):
    for word in tokenize_line(line, separators):
        record_word(word, table)
