from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from xml_score.errors import InputReadError


def read_document_bytes(path: Union[str, Path]) -> bytes:
    """Return the raw bytes of the XML file at ``path``.

    Decoding is left to the XML parser so the document's own encoding
    declaration is honoured.
    """
    p = Path(path)
    if not p.exists():
        raise InputReadError(p, "file does not exist")
    if not p.is_file():
        raise InputReadError(p, "not a regular file")
    if not os.access(p, os.R_OK):
        raise InputReadError(p, "permission denied")
    try:
        return p.read_bytes()
    except OSError as exc:
        raise InputReadError(p, exc.strerror or str(exc)) from exc
