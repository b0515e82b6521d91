"""Well-known clipboard content-type identifiers."""

# Application that owned the clipboard when a snapshot was taken
SOURCE_APPLICATION_TYPE = "source-application"

# Icon for copied files; replaced by a small PNG thumbnail on capture
ICON_TYPE = "image/x-file-icon"

PLAIN_TEXT_TYPES = frozenset({
    "text/plain",
    "text/plain;charset=utf-8",
    "UTF8_STRING",
    "STRING",
    "TEXT",
})

FILE_REFERENCE_TYPES = frozenset({
    "text/uri-list",
    "x-special/gnome-copied-files",
})

IMAGE_TYPES = frozenset({
    "image/png",
    "image/tiff",
    "image/bmp",
    "image/jpeg",
})

# Probed on every capture even when the clipboard does not advertise them
EXTRA_TYPES = (ICON_TYPE, SOURCE_APPLICATION_TYPE)

# Representations that may show up some time after a file reference
DEFERRED_TYPES = (ICON_TYPE,)

# X11 selection bookkeeping targets, never real content
EXCLUDED_TYPES = frozenset({
    "TARGETS",
    "TIMESTAMP",
    "MULTIPLE",
    "SAVE_TARGETS",
    "DELETE",
    "INSERT_PROPERTY",
    "INSERT_SELECTION",
})

NO_PREVIEW_TEXT = "No Preview Found"

ICON_THUMBNAIL_SIZE = 15
