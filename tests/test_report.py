from bs4 import BeautifulSoup

from counter.report import TITLE, render, write_report

EXPECTED = (
    "<html>\n"
    "<head>\n"
    "<title>Words Counted</title>\n"
    "</head>\n"
    "<body>\n"
    "<h2>Words Counted</h2>\n"
    "<hr>\n"
    "<table border='1'>\n"
    "<tbody>\n"
    "<tr>\n"
    "<th>Words</th>\n"
    "<th>Counts</th>\n"
    "</tr>\n"
    "<tr>\n"
    "<td>apple</td>\n"
    "<td>2</td>\n"
    "</tr>\n"
    "<tr>\n"
    "<td>banana</td>\n"
    "<td>1</td>\n"
    "</tr>\n"
    "</body>\n"
    "</html>"
)


def _rows(document):
    soup = BeautifulSoup(document, "lxml")
    rows = soup.find_all("tr")
    header = [th.get_text() for th in rows[0].find_all("th")]
    data = [tuple(td.get_text() for td in row.find_all("td")) for row in rows[1:]]
    return soup, header, data


def test_render_exact_bytes():
    assert render({"banana": 1, "apple": 2}, ["apple", "banana"]) == EXPECTED


def test_render_structure():
    soup, header, data = _rows(render({"cat": 2, "the": 3}, ["cat", "the"]))
    assert soup.title.get_text() == TITLE
    assert soup.h2.get_text() == TITLE
    assert soup.find("table")["border"] == "1"
    assert header == ["Words", "Counts"]
    assert data == [("cat", "2"), ("the", "3")]


def test_render_follows_key_order():
    _, _, data = _rows(render({"a": 1, "b": 5}, ["b", "a"]))
    assert data == [("b", "5"), ("a", "1")]


def test_render_empty_table_has_only_header_row():
    soup, header, data = _rows(render({}, []))
    assert header == ["Words", "Counts"]
    assert data == []
    assert len(soup.find_all("tr")) == 1


def test_render_is_idempotent():
    table = {"x": 1, "y": 2}
    assert render(table, ["x", "y"]) == render(table, ["x", "y"])


def test_words_are_not_escaped():
    assert "<td>a&b</td>" in render({"a&b": 1}, ["a&b"])


def test_write_report_overwrites(tmp_path):
    path = tmp_path / "out.html"
    path.write_text("stale content that is longer than nothing")
    write_report(str(path), {"apple": 2, "banana": 1}, ["apple", "banana"])
    assert path.read_bytes() == EXPECTED.encode("utf-8")
