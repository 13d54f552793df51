import logging
import sys
from dataclasses import dataclass
from typing import BinaryIO, Optional

from fontTools.misc import etree

from .error import Error, GlifOk, GlifStdoutOk, InitError, InitResult

log = logging.getLogger(__name__)

GLIF_FORMAT = "2"
GLIF_SUFFIX = ".glif"


@dataclass
class GlyphSpec:
    name: str = "glyph"
    encoding: Optional[str] = None
    width: str = "0"
    height: Optional[str] = None


def glyph_name(name: str) -> str:
    # only the exact lowercase suffix, "A.GLIF" stays as is
    if name.endswith(GLIF_SUFFIX):
        return name[: -len(GLIF_SUFFIX)]
    return name


def build_glyph(spec: GlyphSpec):
    """Build an empty format 2 <glyph> element.

    Children are always emitted as advance, outline, unicode; <unicode> is
    left out entirely when no encoding was given.
    """
    root = etree.Element("glyph", {"name": glyph_name(spec.name), "format": GLIF_FORMAT})

    advance = etree.SubElement(root, "advance", {"width": spec.width})
    if spec.height is not None:
        advance.attrib["height"] = spec.height

    etree.SubElement(root, "outline")

    if spec.encoding is not None:
        etree.SubElement(root, "unicode", {"hex": spec.encoding})

    return root


def glyph_to_bytes(root) -> bytes:
    return etree.tostring(root, encoding="UTF-8", xml_declaration=True, pretty_print=True)


def write_glif(spec: GlyphSpec, outfile: Optional[str] = None, stdout: Optional[BinaryIO] = None) -> InitResult:
    try:
        data = glyph_to_bytes(build_glyph(spec))
    except ValueError as e:
        # control characters, NUL or lone surrogates in an attribute value
        return Error(InitError.FailedGlif, str(e))

    if outfile is None:
        out = stdout if stdout is not None else sys.stdout.buffer
        try:
            out.write(data)
            out.flush()
        except OSError as e:
            return Error(InitError.FailedGlif, str(e))
        return GlifStdoutOk()

    try:
        with open(outfile, "wb") as f:
            f.write(data)
    except OSError as e:
        return Error(InitError.FailedGlif, str(e))

    log.info("Wrote glyph %s to %s", glyph_name(spec.name), outfile)
    return GlifOk(outfile)
