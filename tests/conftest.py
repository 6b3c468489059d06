import pytest

from readinglist.config import Settings
from readinglist.database.repository import ReadingListRepository
from readinglist.database.roundups import RoundupRepository


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "readinglist.db"


@pytest.fixture
def entries(db_path):
    return ReadingListRepository(db_path)


@pytest.fixture
def roundups(db_path, entries):
    return RoundupRepository(db_path)


@pytest.fixture(autouse=True)
def fresh_settings():
    Settings.reset()
    yield
    Settings.reset()
