"""Building blocks of a Unix shell: parsing, environment, aliases, expansion, lookup, jobs, history and built-ins."""

__version__ = "0.1.0"