"""
PrintAPI - Printer settings descriptors for printer-management services
"""

__version__ = "1.0.0"
__wire_version__ = "1.0.0"  # JSON payload layout

# Version history tracking
VERSION_INFO = {
    "app_version": __version__,
    "wire_version": __wire_version__,
    "description": "Immutable printer settings with validated construction and JSON codec",
}
