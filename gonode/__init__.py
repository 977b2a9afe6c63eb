"""gonode — generate Node.js addon bindings for Go functions exported via cgo."""

__version__ = "0.1.0"
