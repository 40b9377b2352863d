"""Textual front end for the countdown."""
