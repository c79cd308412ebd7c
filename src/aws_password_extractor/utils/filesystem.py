"""File accessor used by the key loader and the output generator."""

from pathlib import Path
from typing import List, Union

from aws_password_extractor.core.constants import REPORT_ENCODING

PathLike = Union[str, Path]


class FileSystemProvider:
    """Reads and writes whole text files.

    Injected into the components that touch the disk so tests can
    substitute an in-memory double.
    """

    def __init__(self, encoding: str = REPORT_ENCODING):
        self.encoding = encoding

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def list_files(self, directory: PathLike) -> List[Path]:
        """Regular files directly inside ``directory``, in filesystem order."""
        return [entry for entry in Path(directory).iterdir() if entry.is_file()]

    def read_text(self, path: PathLike) -> str:
        """Read the full content of a file as-is."""
        with open(path, "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def write_text(self, path: PathLike, content: str) -> None:
        """Write ``content`` to ``path``, replacing anything already there."""
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(content)
