"""Country redirect - send visitors to the site variant for their country."""

__version__ = "0.1.0"
