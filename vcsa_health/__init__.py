"""Health probe for the vCenter Server Appliance REST API."""

__version__ = "1.0.0"
