"""ocp — narzędzie CLI do filtrowania katalogu produktów specyfikacjami."""

__version__ = "0.1.0"
