import pytest

docx = pytest.importorskip("docx")
pytest.importorskip("matplotlib")

from rasathane.engine import DISPLAY_COLUMNS, EventListing
from rasathane.report import ReportConfig, generate_docx_report


@pytest.fixture
def listing(sample_result):
    return EventListing(result=sample_result, source_path="/tmp/lasteq.txt")


def _text(doc):
    return "\n".join(p.text for p in doc.paragraphs)


def test_report_current_selection(listing, tmp_path, now):
    listing.apply_filter("izmir, ankara")
    out = generate_docx_report(listing, str(tmp_path / "r.docx"), now=now)
    doc = docx.Document(out)
    text = _text(doc)
    assert "KANDILLI RASATHANESI" in text
    assert "Location filter: izmir, ankara" in text
    assert "Events in scope: 2 of 4" in text
    table = doc.tables[-1]
    assert [c.text for c in table.rows[0].cells] == DISPLAY_COLUMNS
    assert len(table.rows) == 3
    assert table.rows[2].cells[-1].text == "13h ago"


def test_report_full_scope_ignores_filter(listing, tmp_path, now):
    listing.apply_filter("van")
    out = generate_docx_report(listing, str(tmp_path / "sub" / "full.docx"), scope="full", now=now)
    doc = docx.Document(out)
    assert len(doc.tables[-1].rows) == 5
    assert listing.state.visible_ids == []


def test_report_row_limit(listing, tmp_path, now):
    out = generate_docx_report(listing, str(tmp_path / "r.docx"), config=ReportConfig(max_rows=2), now=now)
    doc = docx.Document(out)
    assert len(doc.tables[-1].rows) == 3
    assert "Showing the first 2 of 4 events." in _text(doc)


def test_report_rejects_empty_selection(listing, tmp_path):
    listing.apply_filter("van")
    with pytest.raises(ValueError):
        generate_docx_report(listing, str(tmp_path / "r.docx"))


def test_report_rejects_unknown_scope(listing, tmp_path):
    with pytest.raises(ValueError):
        generate_docx_report(listing, str(tmp_path / "r.docx"), scope="some")


def test_report_leaves_no_chart_files_behind(listing, tmp_path, now, monkeypatch):
    import tempfile

    scratch = tmp_path / "scratch"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    out = generate_docx_report(listing, str(tmp_path / "r.docx"), now=now)
    assert list(scratch.iterdir()) == []
    assert len(docx.Document(out).inline_shapes) == 3
