"""slbroadcast - send a service log to a filtered set of managed clusters."""

__version__ = "0.1.0"
