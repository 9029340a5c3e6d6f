# data_models.py
from dataclasses import dataclass, asdict

# Hex length of every digest, in the order the results are displayed.
DIGEST_HEX_LENGTHS = {
    "md5": 32,
    "sha1": 40,
    "sha256": 64,
    "sha512": 128,
}

# Where the 'created' timestamp came from.
CREATED_FROM_BIRTHTIME = "birthtime"
CREATED_FROM_CTIME = "ctime"


class ChecksumError(Exception):
    """Raised when a file cannot be opened, read or stat'ed."""


@dataclass(frozen=True)
class ChecksumRequest:
    """Data class for holding the file a checksum run was asked for."""
    path: str


@dataclass(frozen=True)
class ChecksumResult:
    """Data class for holding the digests and metadata of one file."""
    md5: str
    sha1: str
    sha256: str
    sha512: str
    file_size: int
    modified: str
    created: str
    created_source: str = CREATED_FROM_BIRTHTIME

    def digests(self):
        """Returns (algorithm, hex digest) pairs in display order."""
        return [(name, getattr(self, name)) for name in DIGEST_HEX_LENGTHS]

    def to_dict(self):
        return asdict(self)
