"""Startup document loading."""

from __future__ import annotations

import os
from typing import List, Union

from surara.errors import DocumentLoadError
from surara.runtime import telemetry

PathLike = Union[str, "os.PathLike[str]"]


def load_lines(path: PathLike) -> List[str]:
    """Read ``path`` as UTF-8 and return its lines without terminators.

    Universal newlines apply, so ``\\n``, ``\\r\\n`` and ``\\r`` all end a line.
    A final terminator does not produce a trailing empty line. Lines come
    back verbatim; ``TextBuffer`` expands tabs and drops control characters.
    """

    name = os.fspath(path)
    try:
        with open(name, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError as exc:
        raise DocumentLoadError(
            f"cannot read '{name}': {exc.strerror or exc}", path=name
        ) from exc
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(
            f"cannot decode '{name}' as UTF-8: {exc.reason}", path=name
        ) from exc

    telemetry.record_event("document.load", data={"path": name, "lines": len(lines)})
    return lines
