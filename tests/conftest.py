import pytest

LEXICON_CSV = "word,score\ngood,2.0\nbad,-3.0\ngreat,1.0\n"


@pytest.fixture
def lexicon_file(tmp_path):
    p = tmp_path / "socialsent.csv"
    p.write_text(LEXICON_CSV, encoding="utf-8")
    return p


@pytest.fixture
def write_text(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
