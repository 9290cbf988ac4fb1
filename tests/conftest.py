import pytest

from backing_store import BackingStore, PAGE_SIZE
from page_table import NUM_PAGES


def store_byte(page_number, offset):
    return (page_number * 31 + offset * 7 + 200) % 256


def signed(byte):
    return byte - 256 if byte > 127 else byte


@pytest.fixture
def store_path(tmp_path):
    path = tmp_path / "BACKING_STORE.bin"
    path.write_bytes(bytes(store_byte(p, o)
                           for p in range(NUM_PAGES) for o in range(PAGE_SIZE)))
    return path


@pytest.fixture
def store(store_path):
    return BackingStore(str(store_path))


@pytest.fixture
def address_file(tmp_path):
    def write(text):
        path = tmp_path / "addresses.txt"
        path.write_text(text)
        return str(path)
    return write
