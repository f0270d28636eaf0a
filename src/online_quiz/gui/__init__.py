"""PySide6 desktop front end for Online Quiz."""
