# =======================================================================================
# fingerprint_dashboard/__init__.py - Package Initialization
# =======================================================================================
"""
Fingerprint Access Dashboard

Backend for fingerprint reader devices: heartbeats, access and enrollment
logs, and per-device command queues drained on the next heartbeat.
"""

__version__ = "1.0.0"
__author__ = "Fingerprint Dashboard Team"
