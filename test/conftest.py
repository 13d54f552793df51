import logging

import pytest


@pytest.fixture(autouse=True)
def reset_log_level():
    """main() sets the package logger level; don't let it leak between tests."""
    logger = logging.getLogger("mfekinit")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def ufo_path(tmp_path):
    return tmp_path / "Test.ufo"


@pytest.fixture
def existing_ufo(ufo_path):
    """A pre-existing UFO-named directory with some content in it."""
    (ufo_path / "glyphs").mkdir(parents=True)
    (ufo_path / "fontinfo.plist").write_text("old font")
    (ufo_path / "glyphs" / "A_.glif").write_text("old glyph")
    return ufo_path
