"""FIGlet fonts bundled with figletkit."""
