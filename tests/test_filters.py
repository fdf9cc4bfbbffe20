import pytest

from media_renamer.models import DirectoryEntry
from media_renamer.modules.filters import extension_of, filter_entries, is_eligible
from media_renamer.settings import SUPPORTED_EXTENSIONS


@pytest.mark.parametrize("ext", sorted(SUPPORTED_EXTENSIONS))
def test_every_supported_extension_any_case(ext):
    assert is_eligible(DirectoryEntry(f"clip{ext}", is_dir=False))
    assert is_eligible(DirectoryEntry(f"clip{ext.upper()}", is_dir=False))


@pytest.mark.parametrize("name", ["notes.txt", "archive.tar.gz", "README", "photo.jpg.bak", "trailingdot."])
def test_unsupported_or_missing_extension(name):
    assert not is_eligible(DirectoryEntry(name, is_dir=False))


def test_directories_are_never_eligible():
    assert not is_eligible(DirectoryEntry("holiday.jpg", is_dir=True))


def test_extension_of():
    assert extension_of("Photo.JPG") == ".jpg"
    assert extension_of("movie.final.MkV") == ".mkv"
    assert extension_of("noext") == ""


def test_filter_keeps_order_and_is_repeatable():
    entries = [
        DirectoryEntry("b.PNG", False),
        DirectoryEntry("a.txt", False),
        DirectoryEntry("sub", True),
        DirectoryEntry("c.mp4", False),
        DirectoryEntry("d.Jpeg", False),
    ]
    first = filter_entries(entries)
    second = filter_entries(entries)
    assert [e.name for e in first] == ["b.PNG", "c.mp4", "d.Jpeg"]
    assert first == second
    assert len(entries) == 5


def test_custom_extension_set():
    entry = DirectoryEntry("song.MP3", False)
    assert not is_eligible(entry)
    assert is_eligible(entry, frozenset({".mp3"}))
