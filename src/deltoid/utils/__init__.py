"""Shared helpers: region union/overlap geometry and logging setup."""
