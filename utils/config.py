"""
config.py - Run Configuration

Wraps a ConfigParser so the rest of the program reads plain attributes.
"""

SECTION = "LOCAL PROPERTIES"


class Config(object):
    """
    Settings for a word-count run.

    Every key is optional; missing sections or keys fall back to defaults
    so the program also runs without a config file.
    """

    def __init__(self, config):
        props = config[SECTION] if config.has_section(SECTION) else {}
        self.log_dir = props.get("LOGDIR", "Logs").strip()
        self.input_encoding = props.get("INPUTENCODING", "utf-8").strip()
        self.output_encoding = props.get("OUTPUTENCODING", "utf-8").strip()
