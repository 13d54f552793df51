"""Initialize empty UFO fonts and .glif files."""

VERSION_STR = "0.2.0"
AUTHOR = "Fredrick R. Brennan <copypaste@kittens.ph>"

__version__ = VERSION_STR
__all__ = ["VERSION_STR", "AUTHOR"]
