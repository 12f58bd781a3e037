"""Serial-line drawing commands for M5Stack LCDs: sending, parsing, colours and sensor readers."""

__version__ = "0.1.0"
__all__ = ["colors", "commands", "display", "dht12", "bmp280"]