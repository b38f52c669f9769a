import pytest

from library_system.library import Library
from library_system.utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Her test düz metin çıktısı ile başlar
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    # Her test için boş bir kütüphane
    return Library()


@pytest.fixture
def make_reader():
    """Build a fake ``input`` that replays the given lines, then raises EOFError."""
    def _make(*lines):
        remaining = iter(lines)
        prompts = []

        def reader(prompt):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        reader.prompts = prompts
        return reader
    return _make
