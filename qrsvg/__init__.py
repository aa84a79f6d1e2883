"""qrsvg — QR code module matrix to compact SVG path."""

__version__ = "0.1.0"
