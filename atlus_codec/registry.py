#!python3
# atlus-codec 2026

from pathlib import Path
import threading

from .charset import CHARSET_SUFFIX, charset_path, read_charset_file
from .codec import AtlusCodec
from .errors import UnknownCharset

DEFAULT_CHARSET_DIRECTORY = "Charsets"

class CodecRegistry:
    """Codecs built from the charset files in one directory.

    A codec is built the first time its name is requested and reused after
    that.  The base directory should be set once at startup: codecs that are
    already cached keep the table they were built from.
    """

    def __init__(self, base_directory=DEFAULT_CHARSET_DIRECTORY):
        self.base_directory = Path(base_directory)
        self._cache = {}
        # guards _build_locks; cached reads go straight to _cache
        self._lock = threading.Lock()
        self._build_locks = {}

    def set_base_directory(self, directory):
        self.base_directory = Path(directory)

    def path_for(self, name):
        return charset_path(self.base_directory, name)

    def exists(self, name):
        return self.path_for(name).is_file()

    codec_exists = exists

    def names(self):
        if not self.base_directory.is_dir():
            return []
        return sorted(p.stem for p in self.base_directory.glob(f"*{CHARSET_SUFFIX}") if p.is_file())

    def cached(self, name):
        return self._cache.get(name)

    def get_or_create(self, name):
        codec = self._cache.get(name)
        if codec is not None:
            return codec

        path = self.path_for(name)
        if not path.is_file():
            raise UnknownCharset(name, path)

        with self._lock:
            build_lock = self._build_locks.setdefault(name, threading.Lock())

        try:
            with build_lock:
                codec = self._cache.get(name)
                if codec is None:
                    codec = self.load_file(name, path)
                    self._cache[name] = codec
        finally:
            # waiters already hold the lock object; later callers hit the cache
            with self._lock:
                if self._build_locks.get(name) is build_lock:
                    del self._build_locks[name]
        return codec

    create_or_get = get_or_create

    def load_file(self, name, path):
        return AtlusCodec(name, read_charset_file(path))
