from __future__ import annotations

import logging
import mmap
import os
from typing import Optional, Union

from der_sig_parser.config import MIN_FILE_SIZE
from der_sig_parser.exception.exceptions import DerFileError, FileTooSmall

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class LoadedFile:
    """
    Fichier projeté en mémoire (lecture seule), utilisable comme context manager.

    Le mmap est exposé tel quel : il supporte `rfind` et le protocole buffer,
    le cœur du parseur travaille donc dessus sans jamais le copier.
    """

    def __init__(self, path: PathLike):
        self.path = os.fspath(path)
        self._file = None
        self.data: Optional[mmap.mmap] = None

    def open(self) -> mmap.mmap:
        try:
            self._file = open(self.path, "rb")
            size = os.fstat(self._file.fileno()).st_size
        except OSError as exc:
            self.close()
            raise DerFileError(f"Impossible d'ouvrir {self.path}: {exc}") from exc

        if size < MIN_FILE_SIZE:
            self.close()
            raise FileTooSmall(
                f"{self.path}: fichier trop petit pour contenir une structure ASN.1 ({size} octets)"
            )

        try:
            self.data = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
        except (OSError, ValueError) as exc:
            self.close()
            raise DerFileError(f"Impossible de projeter {self.path} en mémoire: {exc}") from exc
        logger.debug("%s projeté en mémoire (%d octets)", self.path, size)
        return self.data

    def close(self) -> None:
        if self.data is not None:
            try:
                self.data.close()
            except BufferError as exc:
                # des vues memoryview sont encore vivantes : le GC libérera le mmap
                logger.debug("Libération du mmap différée pour %s: %s", self.path, exc)
            self.data = None
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> mmap.mmap:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_file(path: PathLike) -> LoadedFile:
    return LoadedFile(path)


def save_bytes(data, path: PathLike) -> int:
    """Écrit la plage d'octets extraite dans `path`, retourne le nombre d'octets écrits."""
    try:
        with open(path, "wb") as f:
            return f.write(data)
    except OSError as exc:
        raise DerFileError(f"Échec d'écriture de {os.fspath(path)}: {exc}") from exc
