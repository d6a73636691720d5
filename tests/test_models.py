from pathlib import Path

from pymdb.domain.models import Document, SessionState


def test_document_defaults():
    d = Document(path=None, text="")
    assert d.path is None
    assert d.text == ""
    assert d.modified is False


def test_document_mutation(tmp_path):
    p = tmp_path / "x.md"
    d = Document(path=p, text="hi", modified=True)
    assert d.path == p
    assert d.text == "hi"
    assert d.modified is True


def test_session_state_defaults_are_empty():
    s = SessionState()
    assert s.directory is None
    assert s.document is None
    assert s.files == ()
    assert s.dirty is False
    assert s.is_empty is True


def test_session_state_with_document():
    s = SessionState(directory=Path("/d"), document=Path("/d/a.md"), files=(Path("/d/a.md"),))
    assert s.is_empty is False
