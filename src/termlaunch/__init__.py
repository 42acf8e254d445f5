"""termlaunch: find installed terminal emulators and open them at a directory."""

__version__ = "0.1.0"
