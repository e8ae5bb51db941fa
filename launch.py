"""
launch.py - Word Counter Entry Point

Main entry point for the word counter. Loads the configuration, asks for
the input and output paths and writes the HTML report.

Usage:
    python launch.py                    # Use config.ini
    python launch.py --config_file path # Use custom config file
"""

from configparser import ConfigParser
from argparse import ArgumentParser

from utils.config import Config
from counter import WordCounter, WordCounterError


def main(config_file):
    """
    Prompt for the file paths and run the word counter.

    Args:
        config_file: Path to configuration file (default: config.ini)

    Returns:
        Process exit status: 0 on success, 1 if the run failed
    """
    # Load configuration (a missing file leaves every default in place)
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)

    input_path = input("Enter the path to the input file: ")
    output_path = input("Enter the path for the output file: ")

    counter = WordCounter(config)
    try:
        counter.run(input_path, output_path)
    except WordCounterError:
        # already logged by the counter
        return 1

    print("The file has been created successfully")
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args()
    raise SystemExit(main(args.config_file))
