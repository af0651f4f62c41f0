"""Format-neutral Software Bill of Materials data model, storage and writer."""

__version__ = "0.1.0"