"""mosh-srv: connect to mosh endpoints advertised through DNS SRV records."""

__version__ = "0.1.0"
