# Fixed contents of the files written into every new UFO.

METAINFO_PLIST = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>creator</key>
    <string>org.MFEK</string>
    <key>formatVersion</key>
    <integer>3</integer>
</dict>
</plist>"""

LAYERCONTENTS_PLIST = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<array>
\t<array>
\t\t<string>public.default</string>
\t\t<string>glyphs</string>
\t</array>
</array>
</plist>"""

CONTENTS_PLIST = b"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
</dict>
</plist>"""

GLYPHS_DIRNAME = "glyphs"

TOPLEVEL_WRITTEN = [
    ("metainfo.plist", METAINFO_PLIST),
    ("layercontents.plist", LAYERCONTENTS_PLIST),
]
GLYPHSDIR_WRITTEN = [
    ("contents.plist", CONTENTS_PLIST),
]
