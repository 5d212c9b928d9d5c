"""
domstub: generates native stub declarations for the W3C DOM interfaces.
"""

__version__ = "0.1.0"
