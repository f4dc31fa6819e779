# Version information
# This version should match the version in setup.py
__version__ = "0.1.0"
