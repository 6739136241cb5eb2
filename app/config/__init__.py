# =============================================================================
# Django Project Configuration Package
# =============================================================================
# Settings, root URLconf and the WSGI entry point.
# =============================================================================
