"""Device Manager: REST inventory of network devices, interfaces and credentials."""

__version__ = "0.1.0"
