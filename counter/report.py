"""
report.py - HTML Report

Renders the counted words as an HTML table, one row per word, in the
order given by the caller.

Words are written verbatim: a word containing '<', '>' or '&' ends up in
the markup unescaped. The table and tbody elements are left open, which
keeps the output identical to reports produced by earlier versions.
"""

TITLE = "Words Counted"


def _header():
    return [
        "<html>",
        "<head>",
        f"<title>{TITLE}</title>",
        "</head>",
        "<body>",
        f"<h2>{TITLE}</h2>",
        "<hr>",
        "<table border='1'>",
        "<tbody>",
        "<tr>",
        "<th>Words</th>",
        "<th>Counts</th>",
        "</tr>",
    ]


def render(table, keys):
    """
    Build the report document.

    Args:
        table: word -> number of occurrences
        keys: the words to show, in display order

    Returns:
        The document text; lines end with "\\n" except the closing </html>.
    """
    lines = _header()
    for word in keys:
        lines.append("<tr>")
        lines.append(f"<td>{word}</td>")
        lines.append(f"<td>{table[word]}</td>")
        lines.append("</tr>")
    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines)


def write_report(file_path, table, keys, encoding="utf-8"):
    """
    Write the report to `file_path`, replacing any existing file.

    The document is encoded before the file is opened, so an encoding
    error leaves an existing file as it was.
    """
    data = render(table, keys).encode(encoding)
    with open(file_path, "wb") as f:
        f.write(data)
