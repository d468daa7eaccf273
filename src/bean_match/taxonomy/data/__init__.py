"""Packaged flavor taxonomy versions."""
