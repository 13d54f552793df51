import logging
import shutil
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import Union

from .error import Error, InitError, InitResult, UfoOk
from .templates import GLYPHS_DIRNAME, GLYPHSDIR_WRITTEN, TOPLEVEL_WRITTEN

log = logging.getLogger(__name__)

UFO_SUFFIXES = ("ufo", "ufo3")
BACKUP_SUFFIX = ".bak.ufo"
PREVIEW_LEN = 256

EXPERIMENTAL_WARNING = (
    "This feature is experimental and doesn't create a complete UFO!\n"
    "Third party tools are still unlikely to validate MFEKinit-produced UFO's due to missing files;\n"
    "see linebender/norad#242 (GitHub)."
)


@dataclass
class BundleSpec:
    path: Path
    delete_if_exists: bool = False


def is_ufo_dirname(path: Union[str, Path]) -> bool:
    return Path(path).name.endswith(UFO_SUFFIXES)


def next_available_backup_path(path: Union[str, Path]) -> Path:
    """First of foo.ufo.bak.ufo, foo.ufo.1.bak.ufo, foo.ufo.2.bak.ufo, ...
    that doesn't exist yet."""
    path = Path(path)
    candidate = path.with_name(path.name + BACKUP_SUFFIX)
    for n in count(1):
        if not candidate.exists() and not candidate.is_symlink():
            return candidate
        candidate = path.with_name(f"{path.name}.{n}{BACKUP_SUFFIX}")


def move_aside(path: Union[str, Path]) -> Path:
    path = Path(path)
    backup = next_available_backup_path(path)
    path.rename(backup)
    return backup


def _write_file(filename: Path, contents: bytes):
    with open(filename, "wb") as f:
        f.write(contents)
    log.debug(
        "Created %s (len %d) (%s…)",
        filename,
        len(contents),
        contents[:PREVIEW_LEN].decode("utf-8", errors="replace"),
    )


def init_ufo(spec: BundleSpec) -> InitResult:
    log.warning(EXPERIMENTAL_WARNING)
    path = Path(spec.path)

    if path.is_dir() and is_ufo_dirname(path):
        if spec.delete_if_exists:
            try:
                shutil.rmtree(path)
            except OSError as e:
                log.error("Could not delete %s because: \"%s\"", path, e)
                return Error(InitError.FailedUFO, str(e))
            log.warning("Deleted %s, as requested!!", path)
        else:
            try:
                moved = move_aside(path)
            except OSError as e:
                log.error("Could not move %s out of the way because: \"%s\"", path, e)
                return Error(InitError.FailedUFO, str(e))
            log.warning("%s existed, so we moved it aside, to %s", path, moved)

    try:
        path.mkdir()
    except OSError as e:
        log.error("Could not create font because: \"%s\"", e)
        return Error(InitError.FailedUFO, str(e))
    log.info("Created %s", path)

    glyphsdir = path / GLYPHS_DIRNAME
    try:
        glyphsdir.mkdir()
    except OSError as e:
        log.error("Could not create font's glyphs dir because: \"%s\"", e)
        return Error(InitError.FailedUFO, str(e))
    log.info("Created %s", glyphsdir)

    files = [(glyphsdir / name, contents) for name, contents in GLYPHSDIR_WRITTEN]
    files += [(path / name, contents) for name, contents in TOPLEVEL_WRITTEN]
    for filename, contents in files:
        try:
            _write_file(filename, contents)
        except OSError as e:
            log.error("Could not create font file %s because: \"%s\"", filename, e)
            return Error(InitError.FailedUFO, str(e))

    return UfoOk(path)
