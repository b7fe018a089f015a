# =======================================================================================
# fingerprint_dashboard/utils/exceptions.py - Custom Exceptions
# =======================================================================================
class FingerprintDashboardError(Exception):
    """Base exception for the fingerprint dashboard."""
    status_code = 500

class BadRequestError(FingerprintDashboardError):
    """Raised when a required field is missing or cannot be parsed."""
    status_code = 400

class NotFoundError(FingerprintDashboardError):
    """Raised when a device is not known to the registry."""
    status_code = 404

class InternalError(FingerprintDashboardError):
    """Raised for unexpected failures while handling a request."""
    status_code = 500
