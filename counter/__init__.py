"""
counter/__init__.py - Word Count Orchestrator

Runs the word-count pipeline:
- Reading the input file line by line
- Tokenizing each line and counting the words
- Ordering the distinct words
- Writing the HTML report

Key role: High-level coordinator that ties together tokenizer, ordering
and report
"""

from utils import get_logger
from counter.tokenizer import build_separators, fill_map_with_words, read_lines
from counter.ordering import ordered_keys, ordinal_compare
from counter.report import write_report


class WordCounterError(Exception):
    """Base class for failures that abort a run."""


class InputUnavailable(WordCounterError):
    """The input file could not be opened or read."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot read input file '{path}': {reason}")
        self.path = path


class OutputUnwritable(WordCounterError):
    """The report could not be created or written."""

    def __init__(self, path, reason):
        super().__init__(f"Cannot write output file '{path}': {reason}")
        self.path = path


class WordCounter(object):
    """
    Counts the words of a text file and writes them as an HTML report.

    The frequency table is only mutated while counting; ordering and
    rendering read it afterwards.
    """

    def __init__(self, config, separators=None, compare=ordinal_compare):
        """
        Initialize the counter.

        Args:
            config: Configuration object (log_dir, input/output encoding)
            separators: Characters that end a word (default: build_separators())
            compare: Comparator used to order the words in the report
        """
        self.config = config
        self.logger = get_logger("COUNTER", log_dir=config.log_dir)
        self.separators = separators if separators is not None else build_separators()
        self.compare = compare

    def count(self, input_path):
        """
        Count every word of the input file.

        Returns:
            dict mapping lower-cased word to its number of occurrences

        Raises:
            InputUnavailable: If the file cannot be opened or decoded, or
                the configured input encoding is unknown
        """
        self.logger.info(f"Reading {input_path}.")
        table = {}
        line_count = 0
        try:
            for line in read_lines(input_path, self.config.input_encoding):
                fill_map_with_words(line, self.separators, table)
                line_count += 1
        except (OSError, UnicodeError, LookupError) as e:
            # LookupError: unknown encoding name in the configuration
            self.logger.error(f"Failed to read {input_path}: {e}")
            raise InputUnavailable(input_path, e) from e

        self.logger.info(
            f"Counted {sum(table.values())} words ({len(table)} distinct) "
            f"in {line_count} lines.")
        return table

    def write(self, output_path, table):
        """
        Order the words and write the report.

        Returns:
            The words in the order they were written

        Raises:
            OutputUnwritable: If the report file cannot be written or the
                report cannot be encoded; the target is left untouched in
                the encoding case
        """
        keys = ordered_keys(table, self.compare)
        try:
            write_report(output_path, table, keys, self.config.output_encoding)
        except (OSError, UnicodeError, LookupError) as e:
            self.logger.error(f"Failed to write {output_path}: {e}")
            raise OutputUnwritable(output_path, e) from e

        self.logger.info(f"Wrote {len(keys)} rows to {output_path}.")
        return keys

    def run(self, input_path, output_path):
        """Count the input file, then write the report."""
        table = self.count(input_path)
        self.write(output_path, table)
        return table
