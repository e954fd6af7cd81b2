__version__ = "1.0.2"

# Stamped by release builds; empty in a source checkout.
BUILD_DATE = ""
COMMIT_HASH = ""
