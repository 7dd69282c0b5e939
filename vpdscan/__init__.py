"""Find and decode IBM Vital Product Data records in BIOS memory."""

__version__ = "3.1"
__all__ = ["memio", "options", "decoder"]