import os
import secrets
import shutil
import string
import tempfile
import unittest
from random import Random
from typing import Optional

from structlog import get_logger

from functions_request.conf.get_settings import get_global_settings
from functions_request.types import ADDRESS_LEN, Address

logger = get_logger()


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.tmpdirs: list[str] = []
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        self._settings = get_global_settings()

    def tearDown(self) -> None:
        self.clean_tmpdirs()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def write_tmp_file(self, name: str, content: str | bytes) -> str:
        path = os.path.join(self.mkdtemp(), name)
        mode = 'wb' if isinstance(content, bytes) else 'w'
        with open(path, mode) as fp:
            fp.write(content)
        return path

    def clean_tmpdirs(self) -> None:
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir)
        self.tmpdirs = []

    def random_text(self, size: int) -> str:
        """Random text that mixes ascii with multi-byte characters."""
        alphabet = string.ascii_letters + string.digits + ' áéíõç€😎'
        return ''.join(self.rng.choice(alphabet) for _ in range(size))

    def random_bytes(self, size: int) -> bytes:
        return self.rng.randbytes(size)

    def random_address(self) -> Address:
        return Address(self.rng.randbytes(ADDRESS_LEN))
